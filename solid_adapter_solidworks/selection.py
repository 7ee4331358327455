"""Fluent selection helpers.

Every method returns the model so calls can be chained:

    model.select_by_name("Front Plane", "PLANE").select_feature(seed, mark=4)

A failed selection raises OperationError describing what was targeted.
"""

from typing import Any

from solid_canonical import Point3D, check

from .com import null_dispatch
from .constants import SwSelectOption, SwSelectType


class SelectionMixin:
    """Selection methods for PartModel. Expects ``_doc`` and ``planes``."""

    _doc: Any

    def select_by_ray(
        self,
        start: Point3D | tuple[float, float, float],
        direction: Point3D | tuple[float, float, float],
        ray_radius: float = 0.001,
        filter: int = SwSelectType.FACES,
        append: bool = False,
        mark: int = 0,
    ):
        """
        Select the first entity of type ``filter`` hit by a ray.

        Args:
            start: Ray origin in model coordinates
            direction: Ray direction vector
            ray_radius: Ray radius; ignored by SolidWorks for faces and edges
            filter: Entity type wanted (SwSelectType)
            append: Add to the current selection instead of replacing it
            mark: Selection mark
        """
        start = Point3D.coerce(start)
        direction = Point3D.coerce(direction)
        ok = self._doc.Extension.SelectByRay(
            start.x, start.y, start.z,
            direction.x, direction.y, direction.z,
            ray_radius,
            filter,
            append,
            mark,
            SwSelectOption.DEFAULT,
        )
        check(
            ok,
            f"SelectByRay failed. Start: ({start.x},{start.y},{start.z}), "
            f"direction: ({direction.x},{direction.y},{direction.z}), type: {filter}",
        )
        return self

    def select_object(self, entity: Any, append: bool = True, mark: int = 0):
        """Select a feature, face, edge or other entity by object reference."""
        selection_mgr = self._doc.SelectionManager
        select_data = selection_mgr.CreateSelectData()
        if mark:
            select_data.Mark = mark
        check(entity.Select4(append, select_data), f"Selecting object failed: {entity}")
        return self

    def select_by_name(self, name: str, type_name: str, append: bool = False):
        """Select a named object, e.g. a reference plane."""
        ok = self._doc.Extension.SelectByID2(name, type_name, 0, 0, 0, append, 0, null_dispatch(), 0)
        check(ok, f"Selecting '{name}' of type '{type_name}' failed.")
        return self

    def select_plane(self, plane: str, append: bool = False):
        """Select a reference plane by alias ("XY", "Top", ...) or name."""
        return self.select_by_name(self.planes.resolve(plane), "PLANE", append=append)

    def select_face_by_point(self, x: float, y: float, z: float, append: bool = False):
        ok = self._doc.Extension.SelectByID2("", "FACE", x, y, z, append, 0, null_dispatch(), 0)
        check(ok, f"Selecting face at ({x},{y},{z}) failed.")
        return self

    def select_edge_by_point(
        self, x: float, y: float, z: float, append: bool = False, mark: int = 1
    ):
        """Select an edge at a point, e.g. as a pattern axis (mark 1)."""
        ok = self._doc.Extension.SelectByID2("", "EDGE", x, y, z, append, mark, null_dispatch(), 0)
        check(ok, f"Selecting edge at ({x},{y},{z}) failed.")
        return self

    def select_feature(self, feature: Any, append: bool = True, mark: int = 4):
        """Select a body feature by name, e.g. as a pattern seed (mark 4)."""
        name = feature.Name
        ok = self._doc.Extension.SelectByID2(name, "BODYFEATURE", 0, 0, 0, append, mark, null_dispatch(), 0)
        check(ok, f"Selecting feature '{name}' failed.")
        return self

    def clear_selection(self):
        self._doc.ClearSelection2(True)
        return self
