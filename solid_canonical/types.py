"""Core value types shared by the canonical layer and the CAD adapters."""

from dataclasses import dataclass
import math


@dataclass(frozen=True)
class Point3D:
    """A point (or direction) in global model coordinates."""
    x: float
    y: float
    z: float

    def __add__(self, other: "Point3D") -> "Point3D":
        return Point3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Point3D") -> "Point3D":
        return self.subtract(other)

    def __mul__(self, scalar: float) -> "Point3D":
        return Point3D(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> "Point3D":
        return self.__mul__(scalar)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def subtract(self, other: "Point3D") -> "Point3D":
        """Vector from other to this point."""
        return Point3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def dot(self, other: "Point3D") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.dot(self))

    def is_close(self, other: "Point3D", tolerance: float = 1e-9) -> bool:
        return (
            abs(self.x - other.x) < tolerance
            and abs(self.y - other.y) < tolerance
            and abs(self.z - other.z) < tolerance
        )

    @classmethod
    def coerce(cls, value: "Point3D | tuple[float, float, float]") -> "Point3D":
        """Accept either a Point3D or a plain (x, y, z) tuple."""
        if isinstance(value, Point3D):
            return value
        x, y, z = value
        return cls(float(x), float(y), float(z))


@dataclass(frozen=True)
class BoundingBox:
    """
    Axis-aligned bounding box as reported by the modeling engine.

    Stored in the engine's own order: (min_x, min_y, min_z, max_x, max_y, max_z).
    """
    min_x: float
    min_y: float
    min_z: float
    max_x: float
    max_y: float
    max_z: float

    @classmethod
    def from_sequence(cls, values) -> "BoundingBox":
        """Build a box from the six-value array returned by GetBodyBox."""
        values = list(values)
        if len(values) < 6:
            raise ValueError(f"Bounding box needs 6 values, got {len(values)}")
        return cls(*(float(v) for v in values[:6]))

    @property
    def size(self) -> tuple[float, float, float]:
        return (
            self.max_x - self.min_x,
            self.max_y - self.min_y,
            self.max_z - self.min_z,
        )

    @property
    def volume(self) -> float:
        """Box volume; NaN collapses to 0 so the body is simply skipped."""
        dx, dy, dz = self.size
        volume = dx * dy * dz
        if math.isnan(volume):
            return 0.0
        return volume
