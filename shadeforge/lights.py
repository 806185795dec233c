"""
Light sources for the ray tracer.

Only point lights are supported: a single position emitting a color in every
direction, with no falloff. They produce hard shadows.
"""

from __future__ import annotations
from dataclasses import dataclass, field

from .vec3 import Point3, Color, white


@dataclass(frozen=True)
class PointLight:
    """A point light source.

    Attributes:
        position: Position of the light in world space
        intensity: Color and brightness of the light
    """
    position: Point3
    intensity: Color = field(default_factory=white)

    def direction_from(self, point: Point3) -> tuple[Point3, float]:
        """Get the unit direction and distance from a point to the light.

        Args:
            point: The point we're illuminating

        Returns:
            (direction, distance) tuple
        """
        to_light = self.position - point
        distance = to_light.length()
        return to_light.normalize(), distance
