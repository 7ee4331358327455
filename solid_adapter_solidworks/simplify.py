"""Part simplification by copying the most significant bodies into a new part.

Copying the kept bodies into a fresh document is far more stable on very
large multi-body parts than deleting the unwanted bodies in place.
"""

import logging
from typing import Any, TextIO

from solid_canonical import (
    NoBodiesError,
    ProgressBar,
    ScoreFunction,
    check_not_none,
    rank_bodies,
    significance_score,
)

from .bodies import get_solid_bodies
from .connection import SolidWorksSession
from .constants import SwCreateFeatureBodyOpts

logger = logging.getLogger(__name__)


def simplify_part_by_copy_to_new(
    session: SolidWorksSession,
    source_doc: Any,
    keep_count: int,
    score: ScoreFunction = significance_score,
    stream: TextIO | None = None,
) -> Any:
    """
    Copy the ``keep_count`` most significant solid bodies of a part into a new part.

    Args:
        session: Session used to create the new part
        source_doc: Open part document to read bodies from (left unchanged)
        keep_count: Maximum number of bodies to keep
        score: Scoring function taking (volume, face_count)
        stream: Where progress bars are drawn (default: stdout)

    Returns:
        The new, rebuilt part document

    Raises:
        NoBodiesError: If the source part has no visible solid bodies
        OperationError: If the new part cannot be created or a body cannot be copied
    """
    print("Getting all bodies from the source document...")
    bodies = get_solid_bodies(source_doc)
    if not bodies:
        raise NoBodiesError("No bodies found in the source part.")
    print(f"Analysis started, found {len(bodies)} bodies.")

    print("Computing volume and face count of each body to score significance...")
    ranked = rank_bodies(bodies, score=score, progress=ProgressBar("Scoring bodies", stream))

    print("Sorting bodies by significance...")
    if len(ranked) <= keep_count:
        print(
            f"Body count ({len(ranked)}) does not exceed the number to keep ({keep_count}), "
            f"no simplification needed."
        )

    to_keep = [r.body for r in ranked[:keep_count]]
    print(f"Sorting done. Copying the {len(to_keep)} most significant bodies into a new part.")

    print("Creating the new target part...")
    new_doc = session.new_part()

    print("Copying bodies...")
    copy_progress = ProgressBar("Copying bodies", stream)
    for i, body in enumerate(to_keep, start=1):
        copy_progress(i, len(to_keep))
        temp_body = check_not_none(body.copy(), f"Copying body {body.name!r} into memory failed.")
        new_doc.CreateFeatureFromBody3(temp_body, False, SwCreateFeatureBodyOpts.SIMPLIFY)

    new_doc.ForceRebuild3(False)
    logger.info("Copied %d of %d bodies into a new part", len(to_keep), len(bodies))
    print("All bodies copied into the new part.")
    return new_doc
