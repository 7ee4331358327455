"""Fluent wrapper around a SolidWorks part document."""

from typing import Any, Iterable

from solid_canonical import PlaneNames, Point3D, check_not_none

from .bodies import get_solid_bodies
from .connection import SolidWorksSession
from .documents import document_title, set_unit_system, zoom_to_fit_isometric
from .features import FeatureMixin
from .selection import SelectionMixin
from .sketching import draw_contour


class PartModel(SelectionMixin, FeatureMixin):
    """
    A part document with chainable selection and feature helpers.

    Selection methods return the model; feature methods return the created
    feature:

        seed = model.select_by_ray((0, 0.07, -0.01), (0, 0, 1)).create_cut_through_all(
            lambda sm: sm.CreateCircleByRadius(0, 0.08, 0, 0.009)
        )
        model.clear_selection()

    Attributes:
        doc: The wrapped IModelDoc2
        session: Session the document belongs to
        planes: Reference plane names of the document's UI language
    """

    def __init__(self, doc: Any, session: SolidWorksSession, planes: PlaneNames | None = None):
        self._doc = doc
        self.session = session
        self.planes = planes or PlaneNames()

    @property
    def doc(self) -> Any:
        return self._doc

    @property
    def title(self) -> str:
        return document_title(self._doc)

    @classmethod
    def new(cls, session: SolidWorksSession, planes: PlaneNames | None = None) -> "PartModel":
        """Create a new part document and wrap it."""
        return cls(session.new_part(), session, planes)

    def set_unit_system(self, unit_system: int) -> "PartModel":
        set_unit_system(self._doc, unit_system)
        return self

    def draw_contour(
        self,
        sketch_manager: Any,
        points: Iterable[Point3D | tuple[float, float, float]],
        close: bool = True,
    ) -> Any:
        """Draw a polyline through global points in the active sketch."""
        math_utility = check_not_none(
            self.session.app.GetMathUtility(),
            "Could not get the SolidWorks math utility.",
        )
        return draw_contour(sketch_manager, math_utility, points, close=close)

    def solid_bodies(self):
        return get_solid_bodies(self._doc)

    def main_body(self) -> Any:
        """The first solid body of the part."""
        bodies = self.solid_bodies()
        return check_not_none(bodies[0] if bodies else None, "No main body found in the part.").native

    def finish(self) -> None:
        """Zoom to fit in the isometric view."""
        zoom_to_fit_isometric(self._doc)
