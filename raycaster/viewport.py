"""
Viewport and window geometry.

The viewport is the rectangle in scene space that rays pass through; the
window is the pixel grid the image is sampled into. Keeping them apart
lets the field of view stay fixed while the output resolution changes.
"""

from __future__ import annotations
from dataclasses import dataclass

from .vec3 import Point


class Viewport:
    """An axis-aligned rectangle perpendicular to the z axis."""

    def __init__(self, width: float, height: float, center: Point):
        """Create a viewport from its size and center.

        Args:
            width: Extent along x in scene units
            height: Extent along y in scene units
            center: Center of the rectangle; its z fixes the viewport plane
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Viewport size must be positive, got {width}x{height}")

        self.width = float(width)
        self.height = float(height)
        self.center = center

        left = center.x - width / 2.0
        right = center.x + width / 2.0
        up = center.y + height / 2.0
        down = center.y - height / 2.0

        self.upper_left = Point(left, up, center.z)
        self.upper_right = Point(right, up, center.z)
        self.lower_left = Point(left, down, center.z)
        self.lower_right = Point(right, down, center.z)

    @classmethod
    def from_corners(
        cls,
        upper_left: Point,
        upper_right: Point,
        lower_left: Point,
        lower_right: Point
    ) -> Viewport:
        """Create a viewport from its four corners.

        Width and height are taken from the upper edge and the left edge.
        """
        width = upper_right.x - upper_left.x
        height = upper_left.y - lower_left.y
        center = Point(
            upper_left.x + width / 2.0,
            lower_left.y + height / 2.0,
            upper_left.z
        )
        viewport = cls(width, height, center)
        # Keep the caller's corners exactly as given
        viewport.upper_left = upper_left
        viewport.upper_right = upper_right
        viewport.lower_left = lower_left
        viewport.lower_right = lower_right
        return viewport

    def __repr__(self) -> str:
        return (
            f"Viewport(width={self.width}, height={self.height}, "
            f"upper_left={self.upper_left}, lower_right={self.lower_right})"
        )


@dataclass(frozen=True)
class Window:
    """Size of the output pixel grid."""
    width: int
    height: int

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Window size must be positive, got {self.width}x{self.height}")
