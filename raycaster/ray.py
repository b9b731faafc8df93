"""
Ray class for representing rays in 3D space.

A ray is defined by an origin point and a direction vector.
Ray(t) = origin + t * direction
"""

from __future__ import annotations
from .vec3 import Vector, Point


class Ray:
    """A ray with origin and direction.

    The parametric form is: P(t) = origin + t * direction.
    The direction is not required to be normalized; camera rays keep the
    full eye-to-sample vector so t = 1 lands on the viewport.
    """

    __slots__ = ('origin', 'direction')

    def __init__(self, origin: Point, direction: Vector):
        """Create a ray with given origin and direction.

        Args:
            origin: The starting point of the ray
            direction: The direction vector
        """
        self.origin = origin
        self.direction = direction

    def at(self, t: float) -> Point:
        """Get the point along the ray at parameter t.

        Args:
            t: The parameter value (may be negative)

        Returns:
            The point at origin + t * direction
        """
        return self.origin + self.direction * t

    def __repr__(self) -> str:
        return f"Ray(origin={self.origin}, direction={self.direction})"
