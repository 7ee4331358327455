"""Lookup of faces and edges on SolidWorks bodies by their geometric parameters.

Face and edge references go stale after features are added, so lookups are
usually wrapped in a LazyRef that repeats the search on every access.
"""

from typing import Any, Callable, Generic, TypeVar

from solid_canonical import Point3D, check_not_none

from .com import as_list, get_com_result

T = TypeVar("T")

EPSILON = 1e-9


class LazyRef(Generic[T]):
    """
    Re-resolves a reference each time ``value`` is read.

    Example:
        bore = LazyRef(lambda: find_cylindrical_face_by_radius(body(), 0.04))
        model.select_object(bore.value)
    """

    def __init__(self, value_factory: Callable[[], T]):
        if value_factory is None:
            raise ValueError("value_factory is required")
        self._value_factory = value_factory

    @property
    def value(self) -> T:
        return self._value_factory()


def _faces(body: Any) -> list:
    return as_list(get_com_result(body, "GetFaces"))


def find_cylindrical_face_by_radius(body: Any, radius: float) -> Any | None:
    """First cylindrical face of ``body`` with the given radius, or None."""
    for face in _faces(body):
        surface = face.GetSurface()
        if not surface.IsCylinder():
            continue
        params = as_list(surface.CylinderParams)
        if abs(params[6] - radius) < EPSILON:
            return face
    return None


def find_planar_face(body: Any, plane_normal: Point3D, point_on_plane: Point3D) -> Any | None:
    """
    First planar face whose normal is parallel (either sense) to ``plane_normal``
    and whose plane contains ``point_on_plane``.
    """
    for face in _faces(body):
        surface = face.GetSurface()
        if not surface.IsPlane():
            continue
        params = as_list(surface.PlaneParams)
        normal = Point3D(params[0], params[1], params[2])
        root = Point3D(params[3], params[4], params[5])

        if abs(normal.dot(plane_normal)) > 1.0 - EPSILON:
            # On the plane when the offset from the root point is perpendicular to the normal
            if abs(point_on_plane.subtract(root).dot(normal)) < EPSILON:
                return face
    return None


def get_intersection_edge(face1: Any, face2: Any) -> Any | None:
    """The edge shared by two faces, or None."""
    for edge in as_list(face1.GetEdges()):
        adjacent = as_list(edge.GetTwoAdjacentFaces2())
        if any(f == face2 for f in adjacent):
            return edge
    return None


def get_first_body(feature: Any) -> Any:
    """
    The first body produced by a feature. Works for most boss/base features.

    Raises:
        OperationError: If the feature has no faces or the face has no body
    """
    faces = as_list(feature.GetFaces())
    check_not_none(
        faces[0] if faces else None,
        f"Feature '{feature.Name}' has no faces, cannot get its body.",
    )
    return check_not_none(faces[0].GetBody(), "Could not get the body from the feature's face.")


def find_conical_face_by_boundary_circle(
    body: Any, circle_radius: float, circle_center: Point3D
) -> Any | None:
    """Conical face bounded by a circle of the given radius and center, or None."""
    for face in _faces(body):
        surface = face.GetSurface()
        if not surface.IsCone():
            continue
        for edge in as_list(face.GetEdges()):
            curve = edge.GetCurve()
            if not curve.IsCircle():
                continue
            params = as_list(curve.CircleParams)
            center = Point3D(params[0], params[1], params[2])
            radius = params[6]
            if abs(radius - circle_radius) < EPSILON and center.is_close(circle_center, EPSILON):
                return face
    return None
