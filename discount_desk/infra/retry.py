# discount_desk/infra/retry.py
import random
import time
from typing import Callable, Optional, TypeVar

from discount_desk.core.logging_config import logger

T = TypeVar("T")


def backoff_delay(base: float, factor: float, attempt: int, cap: float) -> float:
    # exponential backoff with up to 25% jitter
    delay = min(base * (factor ** attempt), cap)
    return delay + random.uniform(0, delay * 0.25)


def retry_on(
    fn: Callable[[], T],
    *,
    attempts: int = 3,
    base: float = 0.2,
    factor: float = 2.0,
    cap: float = 2.0,
    is_retryable: Optional[Callable[[Exception], bool]] = None,
    sleep: Callable[[float], None] = time.sleep,
    label: str = "call",
) -> T:
    """
    Run ``fn`` up to ``attempts`` times.

    Exceptions for which ``is_retryable`` returns False are raised at once;
    after the last attempt the final exception is re-raised.
    """
    if attempts < 1:
        raise ValueError("attempts must be >= 1")

    for i in range(attempts):
        try:
            return fn()
        except Exception as e:
            if is_retryable is not None and not is_retryable(e):
                raise
            if i == attempts - 1:
                raise
            delay = backoff_delay(base, factor, i, cap)
            logger.bind(label=label, attempt=i + 1, delay_s=round(delay, 3), error=repr(e)).warning(
                "retry_scheduled"
            )
            sleep(delay)

    raise AssertionError("unreachable")
