from __future__ import annotations

from typing import Any, Dict, List

from ..domain.defaults import DEFAULT_CONFIG
from ..domain.models import NetNewVolumeRule, PricingConfig, RenewalRule
from .common import is_finite, is_whole, to_number, to_optional_number
from .ranges import coverage_warnings, validate_ranges

NET_NEW_TIER_COUNT = 5

RENEWAL_LABEL = "Renewal"
NET_NEW_LABEL = "Net New"


def _renewal_rule(raw: Any) -> RenewalRule:
    raw = raw if isinstance(raw, dict) else {}
    return RenewalRule(
        minCurrentPpl=to_number(raw.get("minCurrentPpl")),
        maxCurrentPpl=to_optional_number(raw.get("maxCurrentPpl")),
        lowestAllowedPrice=to_number(raw.get("lowestAllowedPrice")),
    )


def _net_new_rule(raw: Any) -> NetNewVolumeRule:
    raw = raw if isinstance(raw, dict) else {}
    return NetNewVolumeRule(
        minLicenses=to_number(raw.get("minLicenses")),
        maxLicenses=to_optional_number(raw.get("maxLicenses")),
        discountPct=to_number(raw.get("discountPct")),
    )


def coerce_config(raw: Any) -> PricingConfig:
    """
    Lenient load of a stored or posted config blob.

    - not a dict -> defaults
    - list price not a finite number -> default list price
    - rule array missing / not a list -> default array
    Row values are parsed but not judged; run validate_whole_config for that.
    """
    if not isinstance(raw, dict):
        return DEFAULT_CONFIG

    price = to_number(raw.get("netNewListPrice"))
    renewal_raw = raw.get("renewalRules")
    net_new_raw = raw.get("netNewVolumeRules")

    return PricingConfig(
        netNewListPrice=price if is_finite(price) else DEFAULT_CONFIG.netNewListPrice,
        renewalRules=(
            tuple(_renewal_rule(r) for r in renewal_raw)
            if isinstance(renewal_raw, list)
            else DEFAULT_CONFIG.renewalRules
        ),
        netNewVolumeRules=(
            tuple(_net_new_rule(r) for r in net_new_raw)
            if isinstance(net_new_raw, list)
            else DEFAULT_CONFIG.netNewVolumeRules
        ),
    )


def parse_draft(raw: Dict[str, Any]) -> PricingConfig:
    """
    Strict counterpart of coerce_config for admin drafts: nothing falls back
    to defaults, so a bad list price or missing array gets reported.
    """
    renewal_raw = raw.get("renewalRules")
    net_new_raw = raw.get("netNewVolumeRules")
    return PricingConfig(
        netNewListPrice=to_number(raw.get("netNewListPrice")),
        renewalRules=tuple(_renewal_rule(r) for r in renewal_raw) if isinstance(renewal_raw, list) else (),
        netNewVolumeRules=tuple(_net_new_rule(r) for r in net_new_raw) if isinstance(net_new_raw, list) else (),
    )


def validate_whole_config(config: PricingConfig) -> List[str]:
    errors: List[str] = []

    if not is_finite(config.netNewListPrice) or config.netNewListPrice < 0:
        errors.append("Net New list price must be a non-negative number.")

    if len(config.renewalRules) == 0:
        errors.append("At least one renewal rule is required.")
    else:
        for idx, rule in enumerate(config.renewalRules, start=1):
            if not is_finite(rule.lowestAllowedPrice) or rule.lowestAllowedPrice < 0:
                errors.append(f"Renewal row {idx}: lowest allowed price must be non-negative.")
        errors.extend(validate_ranges(config.renewalRules, RENEWAL_LABEL))

    if len(config.netNewVolumeRules) != NET_NEW_TIER_COUNT:
        errors.append(f"Net New volume rules must have exactly {NET_NEW_TIER_COUNT} tiers.")
    else:
        for idx, rule in enumerate(config.netNewVolumeRules, start=1):
            if not is_whole(rule.minLicenses) or rule.minLicenses < 1:
                errors.append(f"Net New row {idx}: minimum licenses must be an integer >= 1.")
            if rule.maxLicenses is not None and (
                not is_whole(rule.maxLicenses) or rule.maxLicenses < rule.minLicenses
            ):
                errors.append(f"Net New row {idx}: maximum licenses must be blank or >= minimum.")
            if not is_finite(rule.discountPct) or not (0 <= rule.discountPct <= 100):
                errors.append(f"Net New row {idx}: discount must be between 0 and 100.")
        errors.extend(validate_ranges(config.netNewVolumeRules, NET_NEW_LABEL))

    return errors


def config_warnings(config: PricingConfig) -> List[str]:
    return coverage_warnings(config.renewalRules, RENEWAL_LABEL, start=0) + coverage_warnings(
        config.netNewVolumeRules, NET_NEW_LABEL, start=1
    )


def normalize_for_persistence(config: PricingConfig) -> PricingConfig:
    return PricingConfig(
        netNewListPrice=config.netNewListPrice,
        renewalRules=tuple(sorted(config.renewalRules, key=lambda r: r.minCurrentPpl)),
        netNewVolumeRules=tuple(sorted(config.netNewVolumeRules, key=lambda r: r.minLicenses)),
    )
