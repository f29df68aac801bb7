# discount_desk/core/logging_config.py
import logging
import sys
from typing import Optional

import structlog

SERVICE_NAME = "discount-desk"


def _add_service(logger, method_name, event_dict):
    event_dict.setdefault("service", SERVICE_NAME)
    return event_dict


def resolve_level(name: Optional[str]) -> int:
    """Level name from settings (e.g. "debug", "WARNING"); unknown names mean INFO."""
    level = logging.getLevelName(str(name or "INFO").strip().upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(level: Optional[str] = None) -> int:
    """
    JSON events on stdout through the stdlib root logger.
    Returns the numeric level that was applied.
    """
    numeric = resolve_level(level)
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=numeric, force=True)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.add_log_level,
            _add_service,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    return numeric


logger = structlog.get_logger("discount_desk")
