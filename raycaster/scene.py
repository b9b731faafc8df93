"""
Scene container.

Shapes and lights are stored under integer handles handed out on insertion.
Handles start at 1 and are never reused, so removing an entry does not
disturb the others.
"""

from __future__ import annotations
import logging
from typing import Dict

from .shapes import Shape
from .lights import Light

logger = logging.getLogger(__name__)


class Scene:
    """Ordered collections of shapes and lights."""

    def __init__(self):
        self._shapes: Dict[int, Shape] = {}
        self._lights: Dict[int, Light] = {}
        self._shape_id = 0
        self._light_id = 0

    def add_shape(self, shape: Shape) -> int:
        """Add a shape and return its handle."""
        self._shape_id += 1
        self._shapes[self._shape_id] = shape
        logger.debug("Added shape %d: %r", self._shape_id, shape)
        return self._shape_id

    def add_light(self, light: Light) -> int:
        """Add a light and return its handle."""
        self._light_id += 1
        self._lights[self._light_id] = light
        logger.debug("Added light %d: %r", self._light_id, light)
        return self._light_id

    def remove_shape(self, shape_id: int) -> Shape:
        """Remove and return the shape stored under ``shape_id``.

        Raises:
            KeyError: if no shape has that handle
        """
        try:
            shape = self._shapes.pop(shape_id)
        except KeyError:
            raise KeyError(f"No shape with handle {shape_id}") from None
        logger.debug("Removed shape %d", shape_id)
        return shape

    def remove_light(self, light_id: int) -> Light:
        """Remove and return the light stored under ``light_id``.

        Raises:
            KeyError: if no light has that handle
        """
        try:
            light = self._lights.pop(light_id)
        except KeyError:
            raise KeyError(f"No light with handle {light_id}") from None
        logger.debug("Removed light %d", light_id)
        return light

    def shapes(self) -> list[Shape]:
        """Shapes in insertion order."""
        return list(self._shapes.values())

    def lights(self) -> list[Light]:
        """Lights in insertion order."""
        return list(self._lights.values())

    def __len__(self) -> int:
        return len(self._shapes)

    def __repr__(self) -> str:
        return f"Scene(shapes={len(self._shapes)}, lights={len(self._lights)})"
