from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..calculators.discount_steps import enumerate_discounts, max_discount_by_floor
from ..data_validators.deal_input import validate_deal_input
from ..data_validators.pricing_config import validate_whole_config
from ..domain.models import DealInput, DealType, DiscountRow, PricingConfig
from .resolver import resolve_tier

# Outcomes (avoid string typos)
STATUS_OK = "ok"
STATUS_NO_COMPLIANT_OPTIONS = "no_compliant_options"
STATUS_INPUT_ERROR = "input_error"
STATUS_CONFIG_INVALID = "config_invalid"
STATUS_NO_MATCHING_TIER = "no_matching_tier"

ERROR_STATUSES = frozenset({STATUS_INPUT_ERROR, STATUS_CONFIG_INVALID, STATUS_NO_MATCHING_TIER})

CONTACT_ADMIN = "Ask admin to update settings."


@dataclass(frozen=True)
class TierTerms:
    """What the resolved tier allows: list price, floor and discount cap."""

    base_price: float
    floor_price: float
    max_discount_pct: float
    current_arr: float


@dataclass(frozen=True)
class DealCalculation:
    """
    Result of one calculation request.
    - status: ok / no_compliant_options / input_error / config_invalid / no_matching_tier
    - rows: compliant discount steps (only for ok)
    - messages: human-readable errors (only for error statuses)
    """

    status: str
    deal_type: DealType
    rows: Tuple[DiscountRow, ...] = ()
    messages: Tuple[str, ...] = ()
    terms: Optional[TierTerms] = None

    @property
    def is_error(self) -> bool:
        return self.status in ERROR_STATUSES

    @staticmethod
    def failed(status: str, deal_type: DealType, messages: List[str]) -> "DealCalculation":
        return DealCalculation(status=status, deal_type=deal_type, messages=tuple(messages))

    @staticmethod
    def computed(deal_type: DealType, terms: TierTerms, rows: List[DiscountRow]) -> "DealCalculation":
        return DealCalculation(
            status=STATUS_OK if rows else STATUS_NO_COMPLIANT_OPTIONS,
            deal_type=deal_type,
            rows=tuple(rows),
            terms=terms,
        )


def _renewal_terms(deal: DealInput, config: PricingConfig) -> Optional[TierTerms]:
    rule = resolve_tier(deal.currentPpl, config.renewalRules)
    if rule is None:
        return None
    base = float(config.netNewListPrice)
    floor = float(rule.lowestAllowedPrice)
    return TierTerms(
        base_price=base,
        floor_price=floor,
        max_discount_pct=max_discount_by_floor(base, floor),
        current_arr=float(deal.currentPpl) * float(deal.currentLicenses),
    )


def _net_new_terms(deal: DealInput, config: PricingConfig) -> Optional[TierTerms]:
    rule = resolve_tier(deal.proposedLicenses, config.netNewVolumeRules)
    if rule is None:
        return None
    base = float(config.netNewListPrice)
    max_pct = float(rule.discountPct)
    return TierTerms(
        base_price=base,
        floor_price=base * (1 - max_pct / 100),
        max_discount_pct=max_pct,
        current_arr=0.0,
    )


def calculate_deal(deal: DealInput, config: PricingConfig) -> DealCalculation:
    """
    input check -> config check -> tier lookup -> discount walk.

    Pure: reads ``config``, never mutates it, no I/O.
    """
    input_errors = validate_deal_input(deal)
    if input_errors:
        return DealCalculation.failed(STATUS_INPUT_ERROR, deal.dealType, input_errors)

    config_errors = validate_whole_config(config)
    if config_errors:
        return DealCalculation.failed(STATUS_CONFIG_INVALID, deal.dealType, [*config_errors, CONTACT_ADMIN])

    if deal.is_renewal:
        terms = _renewal_terms(deal, config)
        no_match = "No amendment rule matches this current PPL."
    else:
        terms = _net_new_terms(deal, config)
        no_match = "No Net New volume tier matches the proposed licenses."

    if terms is None:
        return DealCalculation.failed(STATUS_NO_MATCHING_TIER, deal.dealType, [no_match])

    rows = enumerate_discounts(
        terms.base_price,
        terms.max_discount_pct,
        terms.floor_price,
        terms.current_arr,
        deal.proposedLicenses,
    )
    return DealCalculation.computed(deal.dealType, terms, rows)
