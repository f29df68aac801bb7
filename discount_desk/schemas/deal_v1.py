# discount_desk/schemas/deal_v1.py
from __future__ import annotations

from typing import List, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict

from discount_desk.data_validators.common import to_number, to_optional_number
from discount_desk.domain.models import DealInput, DealType

LooseNumber = Optional[Union[float, str]]


class DealInputV1(BaseModel):
    """
    Numbers are loose (number, numeric string or null): bad values are
    reported by the deal-input validator as messages, not as a 422.
    """

    model_config = ConfigDict(extra="forbid")

    dealType: Literal["renewal", "net_new"] = "renewal"
    currentPpl: LooseNumber = None
    currentLicenses: LooseNumber = None
    proposedLicenses: LooseNumber = None

    def to_domain(self) -> DealInput:
        return DealInput(
            dealType=DealType(self.dealType),
            proposedLicenses=to_number(self.proposedLicenses),
            currentPpl=to_optional_number(self.currentPpl),
            currentLicenses=to_optional_number(self.currentLicenses),
        )


class DisplayV1(BaseModel):
    discount: str
    finalPrice: str
    pplPerMonth: str


class DiscountRowV1(BaseModel):
    discountPct: float
    finalPrice: float
    pplPerMonth: float
    display: DisplayV1


class DealCalculationV1(BaseModel):
    model_config = ConfigDict(extra="forbid")

    version: Literal["v1"] = "v1"
    status: Literal["ok", "no_compliant_options", "input_error", "config_invalid", "no_matching_tier"]
    dealType: Literal["renewal", "net_new"]
    messages: List[str] = []
    rows: List[DiscountRowV1] = []
    context: str = ""
    emptyMessage: Optional[str] = None
    configSource: Optional[str] = None
