from __future__ import annotations

from typing import Any, Dict

from ..domain.models import DealType, DiscountRow
from ..engine.deal_engine import DealCalculation

MONTHS_PER_YEAR = 12


def money(value: float) -> str:
    """USD, en-US style: $1,234.56 / -$5.00."""
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def pct(value: float) -> str:
    return f"{value:.2f}%"


def ppl_per_month(final_price: float) -> float:
    return final_price / MONTHS_PER_YEAR


def format_row(row: DiscountRow) -> Dict[str, Any]:
    per_month = ppl_per_month(row.finalPrice)
    return {
        "discountPct": row.discountPct,
        "finalPrice": row.finalPrice,
        "pplPerMonth": per_month,
        "display": {
            "discount": pct(row.discountPct),
            "finalPrice": money(row.finalPrice),
            "pplPerMonth": money(per_month),
        },
    }


def context_message(calc: DealCalculation) -> str:
    if calc.terms is None:
        return ""
    t = calc.terms
    if calc.deal_type == DealType.RENEWAL:
        return (
            f"Amendment rule floor is {money(t.floor_price)}. "
            f"Showing 5% discount steps from list price {money(t.base_price)}."
        )
    return (
        f"Net New tier allows up to {pct(t.max_discount_pct)} discount. "
        f"Showing 5% discount steps from list price {money(t.base_price)}."
    )


def empty_message(deal_type: DealType) -> str:
    if deal_type == DealType.RENEWAL:
        return "No discount steps are compliant for this amendment scenario."
    return "No discount steps are compliant for this Net New scenario."
