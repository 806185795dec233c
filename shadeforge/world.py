"""
World - the scene and per-ray shading.

Combines intersection, hit selection, shadow testing and the material's
lighting model into a single color for a ray. Every query is read-only over
the world, so independent rays can be shaded in parallel by a caller.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Optional

from .vec3 import Point3, Color, black
from .ray import Ray
from .shapes import Shape, Sphere
from .materials import Material
from .lights import PointLight
from .transform import Transform
from .intersections import Intersections
from .precompute import Precomputation

logger = logging.getLogger(__name__)


@dataclass
class WorldSettings:
    """Configuration for shading a world."""
    background_color: Color = None
    shadows: bool = True

    def __post_init__(self):
        if self.background_color is None:
            self.background_color = black()


class World:
    """A collection of shapes lit by at most one point light."""

    def __init__(self, settings: WorldSettings = None):
        """Create an empty world.

        Args:
            settings: Shading configuration (uses defaults if None)
        """
        self.settings = settings if settings else WorldSettings()
        self._shapes: list[Shape] = []
        self._light: Optional[PointLight] = None

    @property
    def shapes(self) -> tuple[Shape, ...]:
        return tuple(self._shapes)

    @property
    def light(self) -> Optional[PointLight]:
        return self._light

    def add_shape(self, shape: Shape) -> Shape:
        """Add a shape to the world; the world shares it, not copies it."""
        self._shapes.append(shape)
        logger.debug("Added %r (%d shapes)", shape, len(self._shapes))
        return shape

    def set_light(self, light: PointLight) -> None:
        """Set the light, replacing any existing one."""
        if self._light is not None:
            logger.info("Replacing light %r with %r", self._light, light)
        else:
            logger.debug("Set light %r", light)
        self._light = light

    def intersect(self, ray: Ray) -> Intersections:
        """Intersect a ray with every shape, ascending by t across the world."""
        result = Intersections()
        for shape in self._shapes:
            result.extend(ray.intersections(shape))
        return result

    def is_shadowed(self, point: Point3) -> bool:
        """Check whether something lies between a point and the light.

        Occluders beyond the light do not count. Without a light nothing
        is ever shadowed.
        """
        if self._light is None:
            return False

        direction, distance = self._light.direction_from(point)
        if distance == 0.0:
            return False

        hit = self.intersect(Ray(point, direction)).hit()
        return hit is not None and hit.t < distance

    def shade_hit(self, comps: Precomputation) -> Color:
        """Shade a precomputed hit, black if the world has no light."""
        if self._light is None:
            return black()

        shadowed = self.settings.shadows and self.is_shadowed(comps.over_point)

        return comps.shape.material.lighting(
            self._light,
            comps.over_point,
            comps.eye_v,
            comps.normal_v,
            shadowed,
        )

    def color_at(self, ray: Ray) -> Color:
        """Compute the color seen along a ray.

        Args:
            ray: The ray to trace

        Returns:
            The shaded color at the nearest hit, or the background color
        """
        hit = self.intersect(ray).hit()
        if hit is None:
            return self.settings.background_color

        return self.shade_hit(Precomputation.from_hit(hit, ray))

    def __len__(self) -> int:
        return len(self._shapes)

    def __repr__(self) -> str:
        return f"World(shapes={len(self._shapes)}, light={self._light})"


def default_world() -> World:
    """Create the standard two-sphere test world.

    An outer unit sphere with a greenish material, an inner sphere of
    radius 0.5, and a white light at (-10, 10, -10).
    """
    world = World()

    outer = Sphere(material=Material(
        color=Color(0.8, 1.0, 0.6),
        diffuse=0.7,
        specular=0.2,
    ))
    inner = Sphere(transform=Transform.scaling(0.5, 0.5, 0.5))

    world.add_shape(outer)
    world.add_shape(inner)
    world.set_light(PointLight(Point3(-10, 10, -10), Color(1, 1, 1)))
    return world
