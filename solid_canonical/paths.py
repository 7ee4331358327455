"""File path rules for macro inputs and outputs."""

import logging
import os
import uuid
from pathlib import Path

from .errors import PreconditionError

logger = logging.getLogger(__name__)

PART_EXTENSION = ".SLDPRT"
ASSEMBLY_EXTENSION = ".SLDASM"


def change_extension(path: str | os.PathLike, extension: str) -> Path:
    """Replace the last extension of ``path`` (or append one if it has none)."""
    path = Path(path)
    if not extension.startswith("."):
        extension = "." + extension
    return path.with_name(path.stem + extension)


def simplified_output_path(source: str | os.PathLike, keep_count: int) -> Path:
    """
    Output path for a simplified part.

    ``model.stp.temp.SLDPRT`` with keep_count 3000 becomes
    ``model.stp.temp.simplified_top3000_simplest.SLDPRT``.
    """
    return change_extension(source, f".simplified_top{keep_count}_simplest{PART_EXTENSION}")


def assembly_output_path(source: str | os.PathLike) -> Path:
    """Where an imported STEP file's assembly is written."""
    return change_extension(source, ASSEMBLY_EXTENSION)


def document_kind(path: str | os.PathLike) -> str:
    """
    Classify a SolidWorks file by extension.

    Returns:
        "part" or "assembly"

    Raises:
        PreconditionError: For any other extension
    """
    suffix = Path(path).suffix.upper()
    if suffix.endswith("SLDPRT"):
        return "part"
    if suffix.endswith("SLDASM"):
        return "assembly"
    raise PreconditionError(
        f"Unsupported file type: {suffix or '(none)'}. Only .SLDPRT and .SLDASM files are supported."
    )


def require_file(path: str | os.PathLike) -> Path:
    """Return ``path`` as a Path, raising PreconditionError if it is not a file."""
    path = Path(path)
    if not path.is_file():
        raise PreconditionError(f"Source file does not exist: {path}")
    return path


def validate_output_directory(output_path: str | os.PathLike) -> Path:
    """
    Make sure the directory that will hold ``output_path`` exists and is writable.

    The directory is created if missing. Writability is proven by writing and
    deleting a probe file, so the check fails before any long operation runs.

    Returns:
        The validated directory

    Raises:
        PreconditionError: If the directory cannot be created or written
    """
    directory = Path(output_path).resolve().parent
    logger.info("Validating output directory %s", directory)

    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise PreconditionError(
            f"Cannot create output directory '{directory}': {e}"
        ) from e

    probe = directory / f"{uuid.uuid4().hex}.tmp"
    try:
        probe.write_text("write_permission_check")
        probe.unlink()
    except PermissionError as e:
        raise PreconditionError(
            f"No write permission for output directory '{directory}'"
        ) from e
    except OSError as e:
        raise PreconditionError(
            f"I/O error while testing write access to '{directory}': {e}"
        ) from e

    return directory
