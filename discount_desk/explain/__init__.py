# discount_desk/explain/__init__.py
from __future__ import annotations

from .formatter import context_message, empty_message, format_row, money, pct, ppl_per_month

__all__ = [
    "context_message",
    "empty_message",
    "format_row",
    "money",
    "pct",
    "ppl_per_month",
]
