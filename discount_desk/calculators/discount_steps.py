from __future__ import annotations

from typing import List

from ..domain.models import DiscountRow, Number

EPSILON = 1e-4
STEP_PCT = 5


def max_discount_by_floor(base_price: Number, floor_price: Number) -> float:
    """Largest discount (pct) that keeps ``base_price`` at or above ``floor_price``."""
    if base_price <= 0:
        return 0.0
    return (1 - (float(floor_price) / float(base_price))) * 100


def _on_grid(pct: float) -> bool:
    remainder = pct % STEP_PCT
    return remainder < EPSILON or STEP_PCT - remainder < EPSILON


def _final_price(base_price: Number, discount_pct: float) -> float:
    return base_price * (1 - discount_pct / 100)


def _clears_incremental_arr(final_price: float, proposed_licenses: Number, current_arr: Number) -> bool:
    # no epsilon here: IARR of exactly 0 passes, anything below does not
    return final_price * proposed_licenses - current_arr >= 0


def enumerate_discounts(
    base_price: Number,
    max_discount_pct: Number,
    floor_price: Number,
    current_arr: Number,
    proposed_licenses: Number,
) -> List[DiscountRow]:
    """
    Compliant discount steps (0, 5, 10, ...) up to ``max_discount_pct``.

    A row is emitted when its price stays at or above the floor and the new
    ARR does not drop below ``current_arr``. The walk stops at the first
    price below the floor. When the cap is off-grid (e.g. 15.56) one extra
    row at exactly the cap is appended if it passes the same checks.
    Result is ascending by discount; an empty list is a valid outcome.
    """
    capped = max(0.0, min(100.0, float(max_discount_pct)))
    rows: List[DiscountRow] = []

    discount = 0
    while discount <= capped + EPSILON:
        final_price = _final_price(base_price, discount)
        if final_price < floor_price - EPSILON:
            # prices only go down from here
            return rows

        if _clears_incremental_arr(final_price, proposed_licenses, current_arr):
            rows.append(DiscountRow(discountPct=float(discount), finalPrice=final_price))

        discount += STEP_PCT

    if not _on_grid(capped):
        final_price = _final_price(base_price, capped)
        if final_price >= floor_price - EPSILON and _clears_incremental_arr(
            final_price, proposed_licenses, current_arr
        ):
            rows.append(DiscountRow(discountPct=capped, finalPrice=final_price))

    return rows
