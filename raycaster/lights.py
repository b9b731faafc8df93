"""
Light sources for the ray caster.

Only directional lights exist. A light has no position; every surface
point sees it from the same direction.
"""

from __future__ import annotations

from .vec3 import Vector, Color


class Light:
    """A directional light (like the sun) that can be switched on and off."""

    def __init__(self, direction: Vector, color: Color, on: bool = True):
        """Create a directional light.

        Args:
            direction: Direction the light travels, pointing into the scene.
                Need not be normalized.
            color: Color of the light
            on: Initial switch state
        """
        self.direction = direction
        self.color = color
        self.on = on

    def turn_on(self) -> None:
        self.on = True

    def turn_off(self) -> None:
        self.on = False

    def flick(self) -> None:
        """Toggle the switch."""
        self.on = not self.on

    def is_on(self) -> bool:
        return self.on

    def __repr__(self) -> str:
        state = 'on' if self.on else 'off'
        return f"Light(direction={self.direction}, color={self.color}, {state})"
