from __future__ import annotations

from typing import List

from ..domain.models import DealInput
from .common import is_finite, is_whole


def validate_deal_input(deal: DealInput) -> List[str]:
    """Human-readable problems with the deal parameters; empty list = OK."""
    messages: List[str] = []

    if not is_finite(deal.proposedLicenses) or deal.proposedLicenses < 1:
        messages.append("Proposed licenses must be at least 1.")
    elif not is_whole(deal.proposedLicenses):
        messages.append("Proposed licenses must be a whole number.")

    if deal.is_renewal:
        if not is_finite(deal.currentPpl) or deal.currentPpl < 0:
            messages.append("Current contract PPL must be a non-negative number for amendments.")
        if not is_finite(deal.currentLicenses) or deal.currentLicenses < 1:
            messages.append("Current licenses must be at least 1 for amendments.")

    return messages
