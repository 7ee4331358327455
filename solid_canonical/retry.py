"""Explicit retry policy for operations the engine may transiently refuse."""

from dataclasses import dataclass
import logging
import time
from typing import Callable, TypeVar

from .errors import RetryExhaustedError

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_SAVE_DELAY = 10.0  # seconds between save attempts


@dataclass(frozen=True)
class RetryPolicy:
    """
    How often and how patiently to retry a failing operation.

    Attributes:
        max_attempts: Attempt limit; None retries forever
        delay: Seconds to wait after the first failure
        backoff: Multiplier applied to the delay after each further failure
    """
    max_attempts: int | None = None
    delay: float = DEFAULT_SAVE_DELAY
    backoff: float = 1.0

    def __post_init__(self):
        if self.max_attempts is not None and self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if self.delay < 0:
            raise ValueError("delay must be non-negative")
        if self.backoff < 1.0:
            raise ValueError("backoff must be >= 1.0")

    def delay_for(self, failed_attempt: int) -> float:
        """Seconds to wait after the given (1-based) failed attempt."""
        return self.delay * (self.backoff ** (failed_attempt - 1))

    def allows(self, attempt: int) -> bool:
        """True if the given (1-based) attempt may run."""
        return self.max_attempts is None or attempt <= self.max_attempts

    @classmethod
    def forever(cls, delay: float = DEFAULT_SAVE_DELAY) -> "RetryPolicy":
        return cls(max_attempts=None, delay=delay)

    @classmethod
    def once(cls) -> "RetryPolicy":
        return cls(max_attempts=1, delay=0.0)

    def to_dict(self) -> dict:
        return {
            "max_attempts": self.max_attempts,
            "delay": self.delay,
            "backoff": self.backoff,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "RetryPolicy":
        max_attempts = d.get("max_attempts")
        return cls(
            max_attempts=None if max_attempts is None else int(max_attempts),
            delay=float(d.get("delay", DEFAULT_SAVE_DELAY)),
            backoff=float(d.get("backoff", 1.0)),
        )


def retry(
    operation: Callable[[int], T],
    policy: RetryPolicy,
    description: str = "operation",
    on_failure: Callable[[int, Exception], None] | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> T:
    """
    Call ``operation(attempt)`` until it returns without raising.

    Every exception counts as a failure; there is no distinction between
    transient and permanent errors.

    Args:
        operation: Callable receiving the 1-based attempt number
        policy: Attempt limit and delays
        description: Name used in log and error messages
        on_failure: Optional callback receiving (attempt, exception)
        sleep: Delay function (replaced in tests)

    Returns:
        Whatever the first successful call returned

    Raises:
        RetryExhaustedError: If the policy runs out of attempts
    """
    attempt = 1
    while True:
        try:
            return operation(attempt)
        except Exception as e:
            logger.warning("%s failed on attempt %d: %s", description, attempt, e)
            if on_failure is not None:
                on_failure(attempt, e)
            if not policy.allows(attempt + 1):
                raise RetryExhaustedError(
                    f"{description} failed after {attempt} attempt(s): {e}",
                    attempts=attempt,
                    last_error=e,
                ) from e
            sleep(policy.delay_for(attempt))
            attempt += 1
