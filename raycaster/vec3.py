"""
Point, Vector and Color value types.

These are the fundamental building blocks of the ray caster:
- Points are locations in 3D space
- Vectors are directions (with a derived magnitude)
- Colors are RGB triples, nominally in [0, 1]

All three are immutable. Arithmetic always returns new values.
"""

from __future__ import annotations
from typing import Union
import numpy as np


class DegenerateVectorError(ValueError):
    """Raised when a zero-length vector is normalized."""
    pass


def _frozen(arr) -> np.ndarray:
    data = np.array(arr, dtype=np.float64)
    data.setflags(write=False)
    return data


class Point:
    """An immutable location in 3D space."""

    __slots__ = ('_data',)

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self._data = _frozen([x, y, z])

    @classmethod
    def from_array(cls, arr: np.ndarray) -> Point:
        """Create Point from numpy array."""
        p = cls.__new__(cls)
        p._data = _frozen(arr)
        return p

    @property
    def x(self) -> float:
        return float(self._data[0])

    @property
    def y(self) -> float:
        return float(self._data[1])

    @property
    def z(self) -> float:
        return float(self._data[2])

    def __repr__(self) -> str:
        return f"Point({self.x:.4f}, {self.y:.4f}, {self.z:.4f})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return np.array_equal(self._data, other._data)

    def __hash__(self) -> int:
        return hash(tuple(self._data))

    def __add__(self, other: Vector) -> Point:
        if isinstance(other, Vector):
            return Point.from_array(self._data + other._data)
        return NotImplemented

    def __sub__(self, other: Union[Point, Vector]):
        """Point - Point gives the Vector between them, Point - Vector a Point."""
        if isinstance(other, Point):
            return Vector.from_array(self._data - other._data)
        if isinstance(other, Vector):
            return Point.from_array(self._data - other._data)
        return NotImplemented

    def __getitem__(self, index: int) -> float:
        return float(self._data[index])

    def to_array(self) -> np.ndarray:
        """Return the underlying numpy array (copy)."""
        return self._data.copy()


class Vector:
    """An immutable 3D direction with a cached magnitude.

    The magnitude is computed once at construction. Since no operation
    changes the components afterwards it always matches them.
    """

    __slots__ = ('_data', '_magnitude')

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self._data = _frozen([x, y, z])
        self._magnitude = float(np.linalg.norm(self._data))

    @classmethod
    def from_array(cls, arr: np.ndarray) -> Vector:
        """Create Vector from numpy array."""
        v = cls.__new__(cls)
        v._data = _frozen(arr)
        v._magnitude = float(np.linalg.norm(v._data))
        return v

    @classmethod
    def from_point(cls, point: Point) -> Vector:
        """Direction from the origin to ``point``."""
        return cls.from_array(point._data)

    @classmethod
    def between(cls, a: Point, b: Point) -> Vector:
        """Direction from ``a`` to ``b`` (b - a)."""
        return cls.from_array(b._data - a._data)

    @property
    def x(self) -> float:
        return float(self._data[0])

    @property
    def y(self) -> float:
        return float(self._data[1])

    @property
    def z(self) -> float:
        return float(self._data[2])

    @property
    def magnitude(self) -> float:
        return self._magnitude

    def __repr__(self) -> str:
        return f"Vector({self.x:.4f}, {self.y:.4f}, {self.z:.4f})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return np.array_equal(self._data, other._data)

    def __hash__(self) -> int:
        return hash(tuple(self._data))

    def __neg__(self) -> Vector:
        return Vector.from_array(-self._data)

    def __add__(self, other: Vector) -> Vector:
        if isinstance(other, Vector):
            return Vector.from_array(self._data + other._data)
        return NotImplemented

    def __sub__(self, other: Vector) -> Vector:
        if isinstance(other, Vector):
            return Vector.from_array(self._data - other._data)
        return NotImplemented

    def __mul__(self, scalar: float) -> Vector:
        if isinstance(scalar, (Vector, Point)):
            return NotImplemented
        return Vector.from_array(self._data * scalar)

    def __rmul__(self, scalar: float) -> Vector:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vector:
        if isinstance(scalar, (Vector, Point)):
            return NotImplemented
        return Vector.from_array(self._data / scalar)

    def __getitem__(self, index: int) -> float:
        return float(self._data[index])

    def length(self) -> float:
        """Return the magnitude (length) of the vector."""
        return self._magnitude

    def length_squared(self) -> float:
        """Return the squared magnitude (avoids sqrt for comparisons)."""
        return float(np.dot(self._data, self._data))

    def dot(self, other: Vector) -> float:
        """Compute dot product with another vector."""
        return float(np.dot(self._data, other._data))

    def normalize(self) -> Vector:
        """Return a unit vector in the same direction.

        Raises:
            DegenerateVectorError: if the vector has zero length
        """
        if self._magnitude == 0:
            raise DegenerateVectorError(f"cannot normalize zero-length {self!r}")
        return Vector.from_array(self._data / self._magnitude)

    def to_array(self) -> np.ndarray:
        """Return the underlying numpy array (copy)."""
        return self._data.copy()


class Color:
    """An immutable RGB color.

    Channels are nominally in [0, 1] but may exceed 1.0 until clamped.
    """

    __slots__ = ('_data',)

    def __init__(self, r: float = 0.0, g: float = 0.0, b: float = 0.0):
        self._data = _frozen([r, g, b])

    @classmethod
    def from_array(cls, arr: np.ndarray) -> Color:
        """Create Color from numpy array."""
        c = cls.__new__(cls)
        c._data = _frozen(arr)
        return c

    @property
    def r(self) -> float:
        return float(self._data[0])

    @property
    def g(self) -> float:
        return float(self._data[1])

    @property
    def b(self) -> float:
        return float(self._data[2])

    def __repr__(self) -> str:
        return f"Color({self.r:.4f}, {self.g:.4f}, {self.b:.4f})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return np.array_equal(self._data, other._data)

    def __hash__(self) -> int:
        return hash(tuple(self._data))

    def __iter__(self):
        return iter((self.r, self.g, self.b))

    def __getitem__(self, index: int) -> float:
        return float(self._data[index])

    def is_black(self) -> bool:
        return not self._data.any()

    def clamp_max(self, max_val: float = 1.0) -> Color:
        """Clamp every channel to at most ``max_val``. No lower bound is applied."""
        return Color.from_array(np.minimum(self._data, max_val))

    def to_array(self) -> np.ndarray:
        """Return the underlying numpy array (copy)."""
        return self._data.copy()
