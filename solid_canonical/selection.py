"""Significance-ranked body selection.

Large multi-body parts are simplified by keeping only their most significant
bodies. Significance favors big, simple bodies: the bounding box volume
divided by the number of faces.

Example:
    from solid_canonical import select_most_significant

    keep = select_most_significant(bodies, keep_count=3000)
"""

from dataclasses import dataclass
import logging
from typing import Callable, Sequence

from .bodies import BodyHandle
from .errors import NoBodiesError

logger = logging.getLogger(__name__)

ScoreFunction = Callable[[float, int], float]
ProgressCallback = Callable[[int, int], None]


def significance_score(volume: float, face_count: int) -> float:
    """Default score: bounding box volume per face."""
    return volume / face_count


@dataclass(frozen=True)
class RankedBody:
    """A body that survived filtering, with the metrics it was ranked on."""
    body: BodyHandle
    volume: float
    face_count: int
    score: float
    index: int                               # Position in the input sequence


def measure_volume(body: BodyHandle) -> float:
    """
    Bounding box volume of a body.

    A failed bounding box query, a missing box, or a NaN volume all count as
    zero volume so that the body is dropped rather than treated as an error.
    """
    try:
        box = body.get_bounding_box()
    except Exception as e:
        logger.debug("Bounding box query failed for %r: %s", body, e)
        return 0.0
    if box is None:
        return 0.0
    return box.volume


def rank_bodies(
    bodies: Sequence[BodyHandle],
    score: ScoreFunction = significance_score,
    progress: ProgressCallback | None = None,
) -> list[RankedBody]:
    """
    Score every eligible body and return them in descending score order.

    Bodies with no faces or non-positive volume are excluded. Ties keep the
    input order.

    Args:
        bodies: Body handles to inspect
        score: Scoring function taking (volume, face_count)
        progress: Optional callback receiving (current, total) per body

    Returns:
        Eligible bodies with their metrics, best first

    Raises:
        NoBodiesError: If ``bodies`` is empty
    """
    bodies = list(bodies)
    total = len(bodies)
    if total == 0:
        raise NoBodiesError("No bodies found in the source document")

    ranked: list[RankedBody] = []
    for index, body in enumerate(bodies):
        if progress is not None:
            progress(index + 1, total)

        face_count = body.get_face_count()
        if face_count <= 0:
            continue

        volume = measure_volume(body)
        if volume <= 0:
            continue

        ranked.append(RankedBody(
            body=body,
            volume=volume,
            face_count=face_count,
            score=score(volume, face_count),
            index=index,
        ))

    # sorted() is stable, so equal scores stay in encounter order
    ranked.sort(key=lambda r: r.score, reverse=True)
    logger.debug("Ranked %d of %d bodies", len(ranked), total)
    return ranked


def select_most_significant(
    bodies: Sequence[BodyHandle],
    keep_count: int,
    score: ScoreFunction = significance_score,
    progress: ProgressCallback | None = None,
) -> list[BodyHandle]:
    """
    Return at most ``keep_count`` bodies, highest significance first.

    Never fails for having too few eligible bodies; the result is simply
    shorter than requested.

    Raises:
        ValueError: If keep_count is negative
        NoBodiesError: If ``bodies`` is empty
    """
    if keep_count < 0:
        raise ValueError(f"keep_count must be >= 0, got {keep_count}")
    ranked = rank_bodies(bodies, score=score, progress=progress)
    return [r.body for r in ranked[:keep_count]]
