"""BodyHandle implementation over SolidWorks IBody2 objects."""

from typing import Any

from solid_canonical import BodyHandle, BoundingBox

from .com import as_list, get_com_result
from .constants import SwBodyType


class SolidWorksBody(BodyHandle):
    """Borrowed view of an IBody2 owned by a part document."""

    def __init__(self, body: Any):
        self._body = body

    @property
    def native(self) -> Any:
        return self._body

    @property
    def name(self) -> str:
        return str(getattr(self._body, "Name", ""))

    def get_bounding_box(self) -> BoundingBox | None:
        box = get_com_result(self._body, "GetBodyBox")
        if box is None:
            return None
        return BoundingBox.from_sequence(box)

    def get_face_count(self) -> int:
        return int(get_com_result(self._body, "GetFaceCount") or 0)

    def copy(self) -> Any:
        """Temporary in-memory copy of the body, or None if SolidWorks refuses."""
        return self._body.Copy()

    def __repr__(self) -> str:
        return f"SolidWorksBody({self.name!r})"


def get_solid_bodies(part_doc: Any, visible_only: bool = True) -> list[SolidWorksBody]:
    """All solid bodies of a part document, wrapped as handles."""
    bodies = part_doc.GetBodies2(SwBodyType.SOLID, visible_only)
    return [SolidWorksBody(b) for b in as_list(bodies)]
