import math

from discount_desk.data_validators import validate_deal_input
from discount_desk.domain.models import DealInput, DealType


def test_valid_renewal(renewal_deal):
    assert validate_deal_input(renewal_deal()) == []


def test_valid_net_new_ignores_current_fields(net_new_deal):
    assert validate_deal_input(net_new_deal(30)) == []


def test_proposed_licenses_at_least_one(net_new_deal):
    assert validate_deal_input(net_new_deal(0)) == ["Proposed licenses must be at least 1."]
    assert validate_deal_input(net_new_deal(math.nan)) == ["Proposed licenses must be at least 1."]


def test_proposed_licenses_whole(net_new_deal):
    assert validate_deal_input(net_new_deal(2.5)) == ["Proposed licenses must be a whole number."]


def test_renewal_requires_current_values():
    deal = DealInput(dealType=DealType.RENEWAL, proposedLicenses=10)
    assert validate_deal_input(deal) == [
        "Current contract PPL must be a non-negative number for amendments.",
        "Current licenses must be at least 1 for amendments.",
    ]


def test_renewal_ranges(renewal_deal):
    assert validate_deal_input(renewal_deal(current_ppl=-1)) == [
        "Current contract PPL must be a non-negative number for amendments."
    ]
    assert validate_deal_input(renewal_deal(current_licenses=0)) == [
        "Current licenses must be at least 1 for amendments."
    ]
    assert validate_deal_input(renewal_deal(current_ppl=0)) == []


def test_all_messages_at_once(renewal_deal):
    msgs = validate_deal_input(renewal_deal(current_ppl=math.inf, current_licenses=0, proposed_licenses=0))
    assert len(msgs) == 3
