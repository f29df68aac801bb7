from __future__ import annotations

import math
from typing import Any, Optional

from ..domain.models import Number


def to_number(v: Any) -> Number:
    """
    Lenient number parsing for stored / posted config values.
    Anything unparseable becomes NaN so validators can report it.
    """
    if isinstance(v, bool) or v is None:
        return math.nan
    if isinstance(v, (int, float)):
        return v
    if isinstance(v, str):
        s = v.strip()
        if s == "":
            return math.nan
        try:
            f = float(s)
        except ValueError:
            return math.nan
        return int(f) if f.is_integer() else f
    return math.nan


def to_optional_number(v: Any) -> Optional[Number]:
    # blank / null upper bound = open-ended
    if v is None or (isinstance(v, str) and v.strip() == ""):
        return None
    return to_number(v)


def is_finite(v: Any) -> bool:
    return isinstance(v, (int, float)) and not isinstance(v, bool) and math.isfinite(v)


def is_whole(v: Any) -> bool:
    if not is_finite(v):
        return False
    return isinstance(v, int) or float(v).is_integer()
