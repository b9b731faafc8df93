"""
Shading strategies.

A shading strategy turns a completed intersection into a color. Each shape
holds one, so different shapes in the same scene can be lit differently.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING
import numpy as np

from .vec3 import Vector, Color
from .ray import Ray

if TYPE_CHECKING:
    from .scene import Scene
    from .shapes import LocalCalculations, Properties


class ShadingStrategy(ABC):
    """Abstract base class for shading strategies."""

    @abstractmethod
    def shade(
        self,
        view_ray: Ray,
        calculations: LocalCalculations,
        properties: Properties,
        scene: Scene
    ) -> Color:
        """Compute the color of a hit.

        Args:
            view_ray: The ray that produced the hit
            calculations: Intersection result with `hits` set
            properties: Material properties of the shape that was hit
            scene: The scene, for its lights

        Returns:
            The color seen along the view ray
        """
        pass


class BlinnPhongShadingStrategy(ShadingStrategy):
    """Ambient + Lambertian diffuse + specular, summed over every light.

    The light's on/off switch is ignored unless ``honor_light_switch`` is
    set, in which case lights that are off contribute nothing.
    """

    def __init__(self, honor_light_switch: bool = False):
        self.honor_light_switch = honor_light_switch

    def shade(
        self,
        view_ray: Ray,
        calculations: LocalCalculations,
        properties: Properties,
        scene: Scene
    ) -> Color:
        lights = [
            light for light in scene.lights()
            if light.is_on() or not self.honor_light_switch
        ]
        if not lights:
            return Color()

        total = np.zeros(3, dtype=np.float64)

        ambient = properties.ambient.to_array()
        diffuse = properties.diffuse.to_array()
        specular = properties.specular.to_array()

        n = calculations.normal.normalize()
        v = Vector.between(calculations.point, view_ray.origin).normalize()

        for light in lights:
            l = light.direction.normalize()
            light_color = light.color.to_array()

            n_dot_l = n.dot(l)
            rv = (n * (2.0 * n_dot_l) - l).normalize()

            diffuse_factor = max(0.0, n_dot_l)
            specular_factor = max(0.0, v.dot(rv)) ** properties.specular_exponent

            total += ambient * light_color
            total += diffuse * light_color * diffuse_factor
            total += specular * light_color * specular_factor

        return Color.from_array(total).clamp_max(1.0)

    def __repr__(self) -> str:
        return f"BlinnPhongShadingStrategy(honor_light_switch={self.honor_light_switch})"
