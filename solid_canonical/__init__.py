"""
CAD-agnostic core for part simplification macros.

Ranks the bodies of a multi-body part by significance (bounding box volume
per face) and keeps the top N, plus the ambient pieces every macro shares:
error taxonomy, retry policy, console progress, path rules and config.

Example usage:
    from solid_canonical import (
        BodyHandle, BoundingBox, select_most_significant, RetryPolicy,
    )

    class MyBody(BodyHandle):
        def __init__(self, box, faces):
            self._box, self._faces = box, faces

        def get_bounding_box(self):
            return BoundingBox.from_sequence(self._box)

        def get_face_count(self):
            return self._faces

    bodies = [MyBody((0, 0, 0, 1, 1, 1), 6), MyBody((0, 0, 0, 2, 2, 2), 6)]
    keep = select_most_significant(bodies, keep_count=1)
"""

__version__ = "0.1.0"

# Core types
from .types import (
    Point3D,
    BoundingBox,
)

# Body interface
from .bodies import BodyHandle

# Selection
from .selection import (
    RankedBody,
    ScoreFunction,
    significance_score,
    measure_volume,
    rank_bodies,
    select_most_significant,
)

# Errors
from .errors import (
    MacroError,
    PreconditionError,
    NoBodiesError,
    OperationError,
    RetryExhaustedError,
    SketchError,
    FeatureNotFoundError,
    check,
    check_not_none,
)

# Retry
from .retry import (
    DEFAULT_SAVE_DELAY,
    RetryPolicy,
    retry,
)

# Progress
from .progress import (
    ProgressBar,
    format_progress,
    write_progress,
    run_with_activity_indicator,
)

# Paths
from .paths import (
    change_extension,
    simplified_output_path,
    assembly_output_path,
    document_kind,
    require_file,
    validate_output_directory,
)

# Configuration
from .config import (
    DEFAULT_KEEP_COUNT,
    PlaneNames,
    MacroConfig,
    load_config,
    save_config,
)

from .logging_config import setup_logging

__all__ = [
    # Version
    "__version__",

    # Core types
    "Point3D",
    "BoundingBox",

    # Body interface
    "BodyHandle",

    # Selection
    "RankedBody",
    "ScoreFunction",
    "significance_score",
    "measure_volume",
    "rank_bodies",
    "select_most_significant",

    # Errors
    "MacroError",
    "PreconditionError",
    "NoBodiesError",
    "OperationError",
    "RetryExhaustedError",
    "SketchError",
    "FeatureNotFoundError",
    "check",
    "check_not_none",

    # Retry
    "DEFAULT_SAVE_DELAY",
    "RetryPolicy",
    "retry",

    # Progress
    "ProgressBar",
    "format_progress",
    "write_progress",
    "run_with_activity_indicator",

    # Paths
    "change_extension",
    "simplified_output_path",
    "assembly_output_path",
    "document_kind",
    "require_file",
    "validate_output_directory",

    # Configuration
    "DEFAULT_KEEP_COUNT",
    "PlaneNames",
    "MacroConfig",
    "load_config",
    "save_config",

    # Logging
    "setup_logging",
]
