"""SolidWorks application connection.

``get_solidworks_application`` attaches to a running SolidWorks instance or
starts a new one. Macros do not use it directly: they receive a
``SolidWorksSession``, which owns the application handle and wraps the
application-level calls (new part, open, close, import). Tests pass a session
built around a fake application object.
"""

import logging
import os
from typing import Any

from solid_canonical import OperationError, MacroError, check, check_not_none

from . import com
from .com import by_ref_int, null_dispatch, ref_value
from .constants import (
    SwDocumentTypes,
    SwOpenDocOptions,
    SwUserPreferenceToggle,
)

logger = logging.getLogger(__name__)

PROG_ID = "SldWorks.Application"

_solidworks_app = None


class SolidWorksConnectionError(MacroError):
    """SolidWorks could not be attached to or started."""
    pass


def get_solidworks_application() -> Any:
    """Get or create a SolidWorks application instance.

    Returns:
        SolidWorks Application COM object

    Raises:
        ImportError: If win32com is not available
        SolidWorksConnectionError: If SolidWorks cannot be connected
    """
    global _solidworks_app

    com.require_com()

    if _solidworks_app is not None:
        try:
            # Test if still connected
            _ = _solidworks_app.Visible
            return _solidworks_app
        except Exception:
            logger.info("Cached SolidWorks connection is stale, reconnecting")
            _solidworks_app = None

    try:
        logger.info("Trying to attach to a running SolidWorks instance...")
        _solidworks_app = com.win32com.client.GetActiveObject(PROG_ID)
        logger.info("Attached to running SolidWorks instance")
        return _solidworks_app
    except com.pythoncom.com_error:
        logger.info("No running instance found, starting a new SolidWorks process...")

    try:
        _solidworks_app = com.win32com.client.Dispatch(PROG_ID)
        _solidworks_app.Visible = True
        logger.info("New SolidWorks instance started and made visible")
        return _solidworks_app
    except Exception as e:
        raise SolidWorksConnectionError(
            f"Could not connect to SolidWorks. "
            f"Ensure SolidWorks is installed and running. Error: {e}"
        ) from e


class SolidWorksSession:
    """
    Explicit handle to a SolidWorks application.

    Attributes:
        app: SolidWorks Application COM object (connected lazily)
    """

    def __init__(self, app: Any | None = None):
        """
        Args:
            app: Optional application object. If None, the session connects
                 with get_solidworks_application() on first use.
        """
        self._app = app

    @property
    def app(self) -> Any:
        if self._app is None:
            self._app = get_solidworks_application()
        return self._app

    @property
    def revision(self) -> str:
        return str(com.get_com_result(self.app, "RevisionNumber"))

    def worker_session(self) -> "SolidWorksSession":
        """
        Session for use on another thread, which must have called init_com().

        COM proxies are bound to the thread that created them, so the worker
        attaches to the running instance itself.
        """
        if not com.SOLIDWORKS_AVAILABLE:
            return self
        return SolidWorksSession(com.win32com.client.GetActiveObject(PROG_ID))

    def set_visible(self, visible: bool) -> "SolidWorksSession":
        self.app.Visible = visible
        return self

    def disable_sketch_inference(self) -> "SolidWorksSession":
        """Turn off snapping to model geometry so sketch coordinates stay exact."""
        self.app.SetUserPreferenceToggle(SwUserPreferenceToggle.SKETCH_INFER_FROM_MODEL, False)
        return self

    def new_part(self) -> Any:
        """Create a new part from the default template."""
        return check_not_none(
            self.app.NewPart(),
            "NewPart() failed to create a part. Check that SolidWorks can create a part manually.",
        )

    def open_document(
        self,
        path: str | os.PathLike,
        doc_type: int = SwDocumentTypes.PART,
        silent: bool = True,
    ) -> tuple[Any, int, int]:
        """
        Open a document with OpenDoc6.

        Returns:
            (document, error code, warning code)

        Raises:
            OperationError: If SolidWorks returns no document
        """
        errors = by_ref_int()
        warnings = by_ref_int()
        options = SwOpenDocOptions.SILENT if silent else 0
        doc = self.app.OpenDoc6(str(path), doc_type, options, "", errors, warnings)
        error_code, warning_code = ref_value(errors), ref_value(warnings)
        if doc is None:
            raise OperationError(
                f"Could not open source file: {path} (error code {error_code})"
            )
        if warning_code:
            logger.warning("Opened %s with warning code %d", path, warning_code)
        return doc, error_code, warning_code

    def active_document(self) -> Any:
        """The active document, or None."""
        return self.app.ActiveDoc

    def close_document(self, title: str) -> None:
        """Close a document by title without saving."""
        logger.info("Closing document %s", title)
        self.app.CloseDoc(title)

    def load_file(self, path: str | os.PathLike) -> Any:
        """
        Import a foreign file (e.g. STEP) with LoadFile4.

        Uses the import options configured in the SolidWorks GUI.

        Raises:
            OperationError: On a non-zero load error code or a null result
        """
        errors = by_ref_int()
        doc = self.app.LoadFile4(str(path), "", null_dispatch(), errors)
        error_code = ref_value(errors)
        check(error_code == 0, f"LoadFile4 failed with error code {error_code}")
        return check_not_none(
            doc,
            "LoadFile4 returned nothing. Check the import settings in the SolidWorks system options.",
        )
