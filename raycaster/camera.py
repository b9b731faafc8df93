"""
Camera module for casting primary rays.

The camera is a single eyepoint looking through a viewport. Each sample of
the viewport becomes one ray; the nearest shape along that ray decides the
pixel's color.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Optional

from .vec3 import Vector, Point, Color
from .ray import Ray
from .sampler import Sample, Sampler
from .scene import Scene
from .shapes import Shape, LocalCalculations
from .viewport import Viewport, Window


@dataclass(frozen=True)
class Pixel:
    """One traced sample: grid position plus color."""
    column: int
    row: int
    color: Color


class Camera:
    """A pinhole camera with a fixed eyepoint, viewport and output grid."""

    def __init__(self, eye: Point, viewport: Viewport, window: Window):
        """Create a camera.

        Args:
            eye: Position every ray starts from
            viewport: Rectangle the rays pass through
            window: Size of the pixel grid sampled over the viewport
        """
        self.eye = eye
        self.viewport = viewport
        self.window = window
        self.pixels: list[Pixel] = []

    def sampler(self) -> Sampler:
        """A sampler covering the viewport at the window's resolution."""
        return Sampler(self.viewport, self.window.width, self.window.height)

    def ray_for(self, sample: Sample) -> Ray:
        """The ray from the eye through a sample point (t = 1 on the viewport)."""
        return Ray(self.eye, Vector.between(self.eye, sample.point))

    def shoot(self, scene: Scene) -> list[Pixel]:
        """Trace every sample of the viewport.

        Returns:
            One Pixel per sample, in row-major order. The list is also kept
            on ``self.pixels``.
        """
        self.pixels = self.trace_samples(self.sampler(), scene)
        return self.pixels

    def trace_samples(self, samples: Iterable[Sample], scene: Scene) -> list[Pixel]:
        """Trace the given samples in order."""
        return [
            Pixel(sample.column, sample.row, self.trace(self.ray_for(sample), scene))
            for sample in samples
        ]

    def trace(self, ray: Ray, scene: Scene) -> Color:
        """Color seen along ``ray``; black when nothing is hit.

        Every shape is tested. The hit with the smallest time wins; on an
        exact tie the shape added to the scene first is kept.
        """
        best_time = float('inf')
        best_shape: Optional[Shape] = None
        best_calculation: Optional[LocalCalculations] = None

        for shape in scene.shapes():
            calculation = shape.intersect(ray)
            if calculation.hits and calculation.time_hit < best_time:
                best_time = calculation.time_hit
                best_shape = shape
                best_calculation = calculation

        if best_shape is None:
            return Color()
        return best_shape.shade(ray, best_calculation, scene)

    def __repr__(self) -> str:
        return f"Camera(eye={self.eye}, window={self.window.width}x{self.window.height})"
