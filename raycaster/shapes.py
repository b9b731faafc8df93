"""
Geometric shapes for the ray caster.

Each shape carries its material properties and a shading strategy, and
implements `intersect` to test a ray against its surface.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional, TYPE_CHECKING
import math

from .vec3 import Vector, Point, Color
from .ray import Ray

if TYPE_CHECKING:
    from .scene import Scene
    from .shading import ShadingStrategy


@dataclass
class Properties:
    """Material properties of a shape.

    Attributes:
        ambient: Ambient reflectance per channel
        diffuse: Diffuse reflectance per channel
        specular: Specular reflectance per channel
        specular_exponent: Highlight sharpness (higher is tighter)
        reflection_coefficient: Carried for scene files, not used in shading
        refraction_coefficient: Carried for scene files, not used in shading
    """
    ambient: Color = field(default_factory=Color)
    diffuse: Color = field(default_factory=Color)
    specular: Color = field(default_factory=Color)
    specular_exponent: int = 0
    reflection_coefficient: int = 0
    refraction_coefficient: int = 0


@dataclass
class LocalCalculations:
    """Result of a single ray-shape intersection test.

    Attributes:
        hits: Whether the ray hit the shape
        point: The intersection point
        time_hit: The ray parameter at the intersection
        normal: Surface normal at the hit point, NOT unit length
        reflected_ray: Reserved, never filled in
    """
    hits: bool = False
    point: Optional[Point] = None
    time_hit: Optional[float] = None
    normal: Optional[Vector] = None
    reflected_ray: Optional[Ray] = None


class Shape(ABC):
    """Abstract base class for everything a ray can hit."""

    def __init__(self, properties: Properties, shading_strategy: ShadingStrategy):
        self.properties = properties
        self.shading_strategy = shading_strategy

    @abstractmethod
    def intersect(self, ray: Ray) -> LocalCalculations:
        """Test if ray intersects this shape.

        Args:
            ray: The ray to test

        Returns:
            LocalCalculations; `hits` is False on a miss
        """
        pass

    def shade(self, view_ray: Ray, calculations: LocalCalculations, scene: Scene) -> Color:
        """Color the hit described by ``calculations`` using this shape's strategy."""
        return self.shading_strategy.shade(view_ray, calculations, self.properties, scene)


class Sphere(Shape):
    """A sphere defined by center and radius."""

    def __init__(
        self,
        center: Point,
        radius: float,
        properties: Properties,
        shading_strategy: ShadingStrategy
    ):
        """Create a sphere.

        Args:
            center: Center point of the sphere
            radius: Radius of the sphere
            properties: Material properties used for shading
            shading_strategy: Strategy that turns a hit into a color
        """
        super().__init__(properties, shading_strategy)
        self.center = center
        self.radius = radius

    def intersect(self, ray: Ray) -> LocalCalculations:
        """Test ray-sphere intersection using the quadratic formula.

        |e + t*d - c|^2 = r^2 expands to a*t^2 + 2*b*t + cc = 0 with
        a = d.d, b = d.(e-c) and cc = (e-c).(e-c) - r^2.

        The smaller root is always taken, even when it lies behind the
        ray origin.
        """
        calculations = LocalCalculations()

        d = ray.direction
        e = Vector.from_point(ray.origin)
        c = Vector.from_point(self.center)
        ec = e - c

        a = d.dot(d)
        b = d.dot(ec)
        cc = ec.dot(ec) - self.radius * self.radius

        discriminant = b * b - a * cc
        if discriminant < 0:
            return calculations

        sqrtd = math.sqrt(discriminant)
        time_one = (-b + sqrtd) / a
        time_two = (-b - sqrtd) / a
        time = min(time_one, time_two)

        position = e + d * time
        calculations.hits = True
        calculations.point = Point.from_array(position.to_array())
        # Gradient of the implicit surface; normalized later during shading
        calculations.normal = (position - c) * 2
        calculations.time_hit = time
        return calculations

    def __repr__(self) -> str:
        return f"Sphere(center={self.center}, radius={self.radius})"
