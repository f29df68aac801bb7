from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

from discount_desk.core.logging_config import logger
from discount_desk.domain.defaults import CONFIG_KEY


class LocalConfigCache:
    """
    Last-known config on local disk, one JSON file:
    {"key": "discount_config_v2", "config": {...}}
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> Optional[Dict[str, Any]]:
        """Cached blob, or None if missing / unreadable / from another key."""
        if not self.path.exists():
            return None
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.bind(path=str(self.path), error=repr(e)).warning("config_cache_unreadable")
            return None
        if not isinstance(data, dict) or data.get("key") != CONFIG_KEY:
            return None
        config = data.get("config")
        return config if isinstance(config, dict) else None

    def save(self, config: Dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = {"key": CONFIG_KEY, "config": config}
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
        tmp.replace(self.path)
