"""Abstract body handle interface.

A body handle is a borrowed reference to a solid owned by an external CAD
document. The canonical layer only ever reads two derived metrics from it:
the bounding box and the number of faces. Adapters wrap their native body
objects in a subclass of BodyHandle.
"""

from abc import ABC, abstractmethod
from typing import Any

from .types import BoundingBox


class BodyHandle(ABC):
    """Read-only view of a solid body owned by a CAD document."""

    @abstractmethod
    def get_bounding_box(self) -> BoundingBox | None:
        """
        Return the body's axis-aligned bounding box.

        Returns:
            The bounding box, or None if the engine could not report one.
        """
        pass

    @abstractmethod
    def get_face_count(self) -> int:
        """Return the number of faces on the body."""
        pass

    @property
    def native(self) -> Any:
        """The underlying CAD object, for adapters that need to act on it."""
        return None
