# discount_desk/data_validators/__init__.py
from __future__ import annotations

from .deal_input import validate_deal_input
from .pricing_config import (
    coerce_config,
    config_warnings,
    normalize_for_persistence,
    parse_draft,
    validate_whole_config,
)
from .ranges import coverage_warnings, validate_ranges

__all__ = [
    "coerce_config",
    "config_warnings",
    "coverage_warnings",
    "normalize_for_persistence",
    "parse_draft",
    "validate_deal_input",
    "validate_ranges",
    "validate_whole_config",
]
