"""Document-level operations: saving, units, view."""

import logging
import os
from typing import Any, Callable

from solid_canonical import OperationError, RetryPolicy, retry

from .com import by_ref_int, get_com_result, null_dispatch, ref_value
from .constants import (
    ISOMETRIC_VIEW,
    SwSaveAsOptions,
    SwSaveAsVersion,
    SwUserPreferenceIntegerValue,
    SwUserPreferenceOption,
)

logger = logging.getLogger(__name__)


def document_title(doc: Any) -> str:
    return str(get_com_result(doc, "GetTitle") or "")


def save_as(doc: Any, path: str | os.PathLike) -> int:
    """
    Save a document silently in the current version format.

    Returns:
        The warning code (0 if none)

    Raises:
        OperationError: If SaveAs reports failure
    """
    errors = by_ref_int()
    warnings = by_ref_int()
    ok = doc.Extension.SaveAs(
        str(path),
        SwSaveAsVersion.CURRENT_VERSION,
        SwSaveAsOptions.SILENT,
        null_dispatch(),
        errors,
        warnings,
    )
    error_code, warning_code = ref_value(errors), ref_value(warnings)
    if not ok:
        raise OperationError(
            f"Saving to {path} failed. Error code: {error_code}, warning code: {warning_code}"
        )
    return warning_code


def save_with_retry(
    doc: Any,
    path: str | os.PathLike,
    policy: RetryPolicy,
    sleep: Callable[[float], None] | None = None,
) -> int:
    """
    Save a document, retrying failures according to ``policy``.

    The default policy for interactive macros retries forever with a fixed
    delay.

    Returns:
        The warning code of the successful save

    Raises:
        RetryExhaustedError: If the policy has a limit and it is reached
    """
    def attempt(n: int) -> int:
        print(f"Trying to save... (attempt {n})")
        warning_code = save_as(doc, path)
        if warning_code:
            print(f"Saved with warnings, code: {warning_code}")
        return warning_code

    def failed(n: int, error: Exception) -> None:
        print(f"Save attempt {n} failed. {error}")
        if policy.allows(n + 1):
            print(f"Waiting {policy.delay_for(n):g} seconds before retrying...")

    kwargs = {"sleep": sleep} if sleep is not None else {}
    return retry(attempt, policy, description=f"Saving {path}", on_failure=failed, **kwargs)


def set_unit_system(doc: Any, unit_system: int) -> None:
    """Set the document unit system (see SwUnitSystem)."""
    doc.Extension.SetUserPreferenceInteger(
        SwUserPreferenceIntegerValue.UNIT_SYSTEM,
        SwUserPreferenceOption.DEFAULT,
        unit_system,
    )


def zoom_to_fit_isometric(doc: Any, view_name: str = ISOMETRIC_VIEW) -> None:
    """Finish a model: zoom to fit and switch to the isometric view."""
    doc.ViewZoomtofit2()
    doc.ShowNamedView2(view_name, -1)
