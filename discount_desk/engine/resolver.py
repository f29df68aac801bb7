from __future__ import annotations

import math
from typing import Iterable, Optional, TypeVar

from ..domain.models import Number, RangedRule

R = TypeVar("R", bound=RangedRule)


def upper_bound(rule: RangedRule) -> float:
    return math.inf if rule.range_max is None else float(rule.range_max)


def covers(rule: RangedRule, value: Number) -> bool:
    return float(rule.range_min) <= value <= upper_bound(rule)


def resolve_tier(value: Number, rules: Iterable[R]) -> Optional[R]:
    """
    First rule (in stored order) whose range covers ``value``; None if no tier matches.

    Linear first-match on purpose: rule sets are tiny (<= 5 rows) and a
    binary search would pick a different tier if a stored set ever overlaps.
    """
    for rule in rules:
        if covers(rule, value):
            return rule
    return None
