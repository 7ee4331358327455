"""Silent import of large STEP files into a SolidWorks assembly."""

import logging
import os
import time
from datetime import timedelta

from solid_canonical import (
    RetryPolicy,
    assembly_output_path,
    check_not_none,
    require_file,
    run_with_activity_indicator,
    validate_output_directory,
)

from .com import init_com, uninit_com
from .connection import SolidWorksSession
from .documents import document_title, save_with_retry

logger = logging.getLogger(__name__)


class StpSilentImporter:
    """
    Imports a STEP file in the background and saves it as ``<stem>.SLDASM``.

    The import uses the STEP options configured in the SolidWorks GUI. The
    blocking LoadFile4 call runs on a worker thread while the console shows a
    spinner with the elapsed time.
    """

    def __init__(
        self,
        session: SolidWorksSession,
        stp_path: str | os.PathLike,
        save_policy: RetryPolicy | None = None,
    ):
        self.session = session
        self.stp_path = stp_path
        self.save_policy = save_policy or RetryPolicy.forever()

    def _load(self) -> str:
        # Runs on the worker thread; only the title crosses back
        return document_title(self.session.worker_session().load_file(self.stp_path))

    def run(self):
        """
        Run the whole import.

        Returns:
            Path of the saved assembly

        Raises:
            PreconditionError: If the source is missing or the output directory is not writable
            OperationError: If the import fails or saving gives up
        """
        print("--- SolidWorks silent STEP import ---")
        started = time.monotonic()

        source = require_file(self.stp_path)
        output_path = assembly_output_path(source)
        print("Validating output directory...")
        directory = validate_output_directory(output_path)
        print(f"Output directory OK: {directory}")

        print(f"Preparing to import: {source.name}")
        print("Importing may take a long time. Working in the background...")
        title = run_with_activity_indicator(
            self._load,
            message="Importing...",
            thread_init=init_com,
            thread_exit=uninit_com,
        )
        logger.info("Loaded %s", title)
        assembly = check_not_none(
            self.session.active_document(),
            "No active document after the import. Check the import settings in the SolidWorks system options.",
        )
        print("File loaded into memory.")

        print(f"Saving the assembly and all parts to: {output_path}")
        save_with_retry(assembly, output_path, self.save_policy)
        print("Assembly and all referenced parts saved.")

        self.session.close_document(output_path.name)
        print("Closed the imported assembly.")

        elapsed = timedelta(seconds=time.monotonic() - started)
        logger.info("Imported %s in %s", source, elapsed)
        print(f"\n--- All done! Total time: {elapsed} ---")
        return output_path
