"""Sketch helpers.

Sketch geometry is given in global 3D model coordinates and converted into
the active sketch's own 2D space, so callers never deal with per-plane axis
flips.
"""

import logging
from typing import Any, Callable, Iterable

from solid_canonical import Point3D, SketchError, check_not_none

from .com import as_list, double_array

logger = logging.getLogger(__name__)

SketchAction = Callable[[Any], Any]


def run_in_sketch(doc: Any, sketch_action: SketchAction, auto_exit: bool = True) -> None:
    """
    Open a sketch on the current selection, run ``sketch_action``, close it.

    Args:
        doc: IModelDoc2 with a plane or planar face selected
        sketch_action: Receives the ISketchManager and draws the geometry
        auto_exit: Leave the sketch after drawing

    Raises:
        SketchError: If a sketch is already active, or sketch mode cannot be
            entered or exited
    """
    sketch_manager = doc.SketchManager

    if sketch_manager.ActiveSketch is not None:
        raise SketchError(
            "Cannot start a new sketch while another sketch is active. Exit the current sketch first."
        )

    sketch_manager.InsertSketch(True)
    if sketch_manager.ActiveSketch is None:
        raise SketchError("Could not enter sketch mode. Check that a plane or planar face is selected.")

    sketch_action(sketch_manager)

    if auto_exit:
        sketch_manager.InsertSketch(True)
        if sketch_manager.ActiveSketch is not None:
            raise SketchError("Could not exit sketch mode.")


def to_sketch_coordinates(math_utility: Any, transform: Any, point: Point3D) -> tuple[float, float, float]:
    """Transform a model-space point into the sketch's coordinate system."""
    math_point = check_not_none(
        math_utility.CreatePoint(double_array(point)),
        "Creating an IMathPoint from coordinates failed.",
    )
    transformed = check_not_none(
        math_point.MultiplyTransform(transform),
        "Transforming an IMathPoint into sketch space failed.",
    )
    x, y, z = as_list(transformed.ArrayData)[:3]
    return x, y, z


def draw_contour(
    sketch_manager: Any,
    math_utility: Any,
    points: Iterable[Point3D | tuple[float, float, float]],
    close: bool = True,
) -> Any:
    """
    Draw a polyline through global 3D points in the active sketch.

    Args:
        sketch_manager: ISketchManager with an active sketch
        math_utility: IMathUtility from the application
        points: Contour vertices in model coordinates
        close: Also connect the last point back to the first

    Returns:
        The sketch manager, for chaining

    Raises:
        ValueError: With fewer than two points
        SketchError: Without an active sketch or transform
    """
    points = [Point3D.coerce(p) for p in points]
    if len(points) < 2:
        raise ValueError("Drawing a contour needs at least 2 points.")

    sketch = check_not_none(sketch_manager.ActiveSketch, "No active sketch.", error=SketchError)
    transform = check_not_none(
        sketch.ModelToSketchTransform,
        "Could not get the sketch transform.",
        error=SketchError,
    )

    sketch_points = [to_sketch_coordinates(math_utility, transform, p) for p in points]
    if close:
        sketch_points.append(sketch_points[0])

    for start, end in zip(sketch_points, sketch_points[1:]):
        sketch_manager.CreateLine(*start, *end)

    logger.debug("Drew %s contour with %d points", "closed" if close else "open", len(points))
    return sketch_manager
