# discount_desk/schemas/config_v1.py
from __future__ import annotations

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict


class ConfigPayloadV1(BaseModel):
    """
    Admin draft. ``config`` stays a raw blob here: row-level checks belong to
    the config validator so every violation comes back in one response.
    """

    model_config = ConfigDict(extra="ignore")

    config: Optional[Dict[str, Any]] = None


class ConfigResponseV1(BaseModel):
    config: Dict[str, Any]
    source: str
    warnings: List[str] = []


class ConfigRejectedV1(BaseModel):
    error: str
    violations: List[str] = []
