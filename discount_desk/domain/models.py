from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Optional, Protocol, Tuple, Union

Number = Union[int, float]


class DealType(str, Enum):
    RENEWAL = "renewal"
    NET_NEW = "net_new"


class RangedRule(Protocol):
    """Anything covering ``[range_min, range_max]``; ``range_max=None`` is unbounded."""

    @property
    def range_min(self) -> Number: ...

    @property
    def range_max(self) -> Optional[Number]: ...


# Field names below are the persisted (JSON) names; keep them as-is.


@dataclass(frozen=True)
class RenewalRule:
    minCurrentPpl: Number
    maxCurrentPpl: Optional[Number]  # None = open-ended
    lowestAllowedPrice: Number

    @property
    def range_min(self) -> Number:
        return self.minCurrentPpl

    @property
    def range_max(self) -> Optional[Number]:
        return self.maxCurrentPpl


@dataclass(frozen=True)
class NetNewVolumeRule:
    minLicenses: Number
    maxLicenses: Optional[Number]  # None = open-ended
    discountPct: Number

    @property
    def range_min(self) -> Number:
        return self.minLicenses

    @property
    def range_max(self) -> Optional[Number]:
        return self.maxLicenses


@dataclass(frozen=True)
class PricingConfig:
    netNewListPrice: Number
    renewalRules: Tuple[RenewalRule, ...]
    netNewVolumeRules: Tuple[NetNewVolumeRule, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "netNewListPrice": self.netNewListPrice,
            "renewalRules": [asdict(r) for r in self.renewalRules],
            "netNewVolumeRules": [asdict(r) for r in self.netNewVolumeRules],
        }


@dataclass(frozen=True)
class DealInput:
    dealType: DealType
    proposedLicenses: Number
    currentPpl: Optional[Number] = None
    currentLicenses: Optional[Number] = None

    @property
    def is_renewal(self) -> bool:
        return self.dealType == DealType.RENEWAL


@dataclass(frozen=True)
class DiscountRow:
    discountPct: float
    finalPrice: float
