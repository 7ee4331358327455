"""Exception hierarchy and assertion helpers for macro operations."""

import inspect
import logging
import os
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class MacroError(Exception):
    """Base class for all macro errors."""
    pass


class PreconditionError(MacroError):
    """A required input or environment condition is not met. Never retried."""
    pass


class NoBodiesError(PreconditionError):
    """The source document exposes no bodies, so there is nothing to simplify."""
    pass


class OperationError(MacroError):
    """A modeling engine call returned a falsy or null result."""
    pass


class RetryExhaustedError(OperationError):
    """A retried operation kept failing until the policy ran out of attempts."""

    def __init__(self, message: str, attempts: int, last_error: Exception | None = None):
        super().__init__(message)
        self.attempts = attempts
        self.last_error = last_error


class SketchError(MacroError):
    """Sketch mode could not be entered or exited."""
    pass


class FeatureNotFoundError(MacroError):
    """No new feature appeared after an operation that should have created one."""
    pass


def _caller_location(depth: int = 2) -> str:
    frame = inspect.currentframe()
    try:
        for _ in range(depth):
            if frame is None:
                break
            frame = frame.f_back
        if frame is None:
            return "<unknown>"
        code = frame.f_code
        return f"{code.co_name} ({os.path.basename(code.co_filename)}:{frame.f_lineno})"
    finally:
        del frame


def check(
    condition: object,
    message: str,
    error: type[MacroError] = OperationError,
) -> None:
    """
    Raise ``error`` with ``message`` unless ``condition`` is truthy.

    The failure is logged with the calling function and line before raising.

    Args:
        condition: Value to test, usually the return code of a COM call
        message: Description of the step that failed
        error: Exception class to raise
    """
    if condition:
        return
    logger.error("Check failed: %s -> in %s", message, _caller_location())
    raise error(message)


def check_not_none(
    value: T | None,
    message: str,
    error: type[MacroError] = OperationError,
) -> T:
    """Return ``value`` unchanged, raising ``error`` if it is None."""
    if value is not None:
        return value
    logger.error("Null result: %s -> in %s", message, _caller_location())
    raise error(message)
