from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List, Optional

from ..domain.models import Number, RangedRule
from .common import is_finite


@dataclass(frozen=True)
class RangeRow:
    min: Number
    max: Optional[Number]

    @property
    def range_min(self) -> Number:
        return self.min

    @property
    def range_max(self) -> Optional[Number]:
        return self.max


def _sorted_copy(rows: Iterable[RangedRule]) -> List[RangeRow]:
    items = [RangeRow(min=r.range_min, max=r.range_max) for r in rows]
    items.sort(key=lambda r: r.min if is_finite(r.min) else math.inf)
    return items


def validate_ranges(rows: Iterable[RangedRule], label: str) -> List[str]:
    """
    Check a family of ranges (sorted by minimum on a working copy).

    Returns every violation found; an empty list means the set is valid.
    Touching bounds (one range ends where the next starts) count as overlap.
    """
    errors: List[str] = []
    items = _sorted_copy(rows)

    for i, row in enumerate(items):
        n = i + 1
        if not is_finite(row.min) or row.min < 0:
            errors.append(f"{label} row {n}: minimum value is invalid.")
        if row.max is not None and (not is_finite(row.max) or row.max < row.min):
            errors.append(f"{label} row {n}: maximum must be blank or >= minimum.")

        if i < len(items) - 1:
            current_max = math.inf if row.max is None else row.max
            if current_max >= items[i + 1].min:
                errors.append(f"{label} rows {n} and {n + 1}: ranges overlap.")
            if row.max is None:
                errors.append(f"{label} row {n}: open-ended max can only be on the final row.")

    return errors


def coverage_warnings(rows: Iterable[RangedRule], label: str, *, start: Number) -> List[str]:
    """
    Non-blocking coverage hints: values these would leave without a tier.

    Assumes unit-step boundaries (e.g. 108 -> 109). Only meaningful for a
    set that already passed validate_ranges.
    """
    warnings: List[str] = []
    items = _sorted_copy(rows)
    if not items:
        return warnings

    if items[0].min > start:
        warnings.append(f"{label}: values below {items[0].min} have no matching tier.")

    for i in range(len(items) - 1):
        end, nxt = items[i].max, items[i + 1].min
        if end is not None and nxt > end + 1:
            warnings.append(f"{label} rows {i + 1} and {i + 2}: values between {end} and {nxt} have no matching tier.")

    last_max = items[-1].max
    if last_max is not None:
        warnings.append(f"{label}: values above {last_max} have no matching tier (final row is not open-ended).")

    return warnings
