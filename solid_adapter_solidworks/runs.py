"""Runnable macros.

A macro is constructed with a session and whatever parameters it needs, and
does its work in ``run()``. Errors propagate as MacroError subclasses; the
CLI reports them and sets the exit code.
"""

import logging
import os
import time
from pathlib import Path

from solid_canonical import (
    DEFAULT_KEEP_COUNT,
    RetryPolicy,
    ScoreFunction,
    document_kind,
    significance_score,
    simplified_output_path,
)

from .connection import SolidWorksSession
from .constants import SwDocumentTypes
from .documents import save_with_retry
from .importer import StpSilentImporter
from .simplify import simplify_part_by_copy_to_new

logger = logging.getLogger(__name__)

_DOC_TYPES = {
    "part": SwDocumentTypes.PART,
    "assembly": SwDocumentTypes.ASSEMBLY,
}


class MacroRun:
    """Base class for macros. Subclasses implement run()."""

    def __init__(self, session: SolidWorksSession):
        self.session = session

    def run(self):
        raise NotImplementedError


class SimplifyPartRun(MacroRun):
    """
    Simplify a large multi-body part down to its most significant bodies.

    The source part is opened silently, its top ``keep_count`` bodies are
    copied into a new part, the source is closed without saving and the new
    part is saved next to it as ``<name>.simplified_top<N>_simplest.SLDPRT``.
    """

    def __init__(
        self,
        session: SolidWorksSession,
        target_path: str | os.PathLike,
        keep_count: int = DEFAULT_KEEP_COUNT,
        save_policy: RetryPolicy | None = None,
        score: ScoreFunction = significance_score,
    ):
        super().__init__(session)
        if keep_count < 0:
            raise ValueError(f"keep_count must be >= 0, got {keep_count}")
        self.target_path = Path(target_path)
        self.keep_count = keep_count
        self.save_policy = save_policy or RetryPolicy.forever()
        self.score = score

    def run(self) -> Path | None:
        """
        Returns:
            Path of the simplified part, or None if the source is not a part

        Raises:
            PreconditionError: If the source is not a .SLDPRT or .SLDASM file
        """
        print("--- SolidWorks large part simplification ---")
        started = time.perf_counter()

        print(f"Opening file: {self.target_path.name}")
        doc_type = _DOC_TYPES[document_kind(self.target_path)]
        source_doc, _, _ = self.session.open_document(self.target_path, doc_type)
        print("Source file opened.")

        if source_doc.GetType() != SwDocumentTypes.PART:
            print("Error: only part files (.SLDPRT) can be simplified.")
            return None

        new_doc = simplify_part_by_copy_to_new(
            self.session, source_doc, self.keep_count, score=self.score
        )

        print(f"Closing the source file: {self.target_path.name}")
        self.session.close_document(self.target_path.name)

        output_path = simplified_output_path(self.target_path, self.keep_count)
        save_with_retry(new_doc, output_path, self.save_policy)
        print(f"\nSimplified model saved to: {output_path}")

        elapsed = time.perf_counter() - started
        logger.info("Simplified %s in %.2f s", self.target_path, elapsed)
        print(f"\n--- All done! Total time: {elapsed:.2f} seconds ---")
        return output_path


class ImportStpRun(MacroRun):
    """Import a STEP file as an assembly next to the source."""

    def __init__(
        self,
        session: SolidWorksSession,
        stp_path: str | os.PathLike,
        save_policy: RetryPolicy | None = None,
    ):
        super().__init__(session)
        self.stp_path = stp_path
        self.save_policy = save_policy

    def run(self) -> Path:
        return StpSilentImporter(self.session, self.stp_path, self.save_policy).run()
