"""
Ray class for representing rays in 3D space.

A ray is defined by an origin point and a direction vector.
Ray(t) = origin + t * direction
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from .vec3 import Vec3, Point3
from .intersections import Intersection, Intersections

if TYPE_CHECKING:
    from .transform import Transform
    from .shapes import Shape


class InvalidRayError(ValueError):
    """Raised when a ray is built with a zero-length direction."""
    pass


class Ray:
    """A ray with origin and direction.

    The parametric form is: P(t) = origin + t * direction.
    Negative t values are points behind the origin.

    The direction is kept as given, not normalized: t values are measured in
    units of the direction's length. Rays moved into object space by a
    scaling transform rely on this.
    """

    __slots__ = ('_origin', '_direction')

    def __init__(self, origin: Point3, direction: Vec3):
        """Create a ray with given origin and direction.

        Args:
            origin: The starting point of the ray
            direction: The direction vector (must be non-zero)

        Raises:
            InvalidRayError: If direction is the zero vector
        """
        if direction.length_squared() == 0.0:
            raise InvalidRayError(f"Ray direction must be non-zero, got {direction}")
        self._origin = origin
        self._direction = direction

    @classmethod
    def try_new(cls, origin: Point3, direction: Vec3) -> Ray:
        """Build a ray, raising InvalidRayError for a zero direction."""
        return cls(origin, direction)

    @property
    def origin(self) -> Point3:
        return self._origin

    @property
    def direction(self) -> Vec3:
        return self._direction

    def position(self, t: float) -> Point3:
        """Get the point along the ray at parameter t.

        Args:
            t: The parameter value (distance if direction is normalized)

        Returns:
            The point at origin + t * direction
        """
        return self._origin + self._direction * t

    at = position

    def transform(self, matrix: Transform) -> Ray:
        """Return this ray mapped through an affine transform."""
        return Ray(matrix.apply_point(self._origin), matrix.apply_vector(self._direction))

    def intersections(self, shape: Shape) -> Intersections:
        """Intersect this ray with one shape, wrapping each t with the shape."""
        return Intersections(Intersection(t, shape) for t in shape.intersect(self))

    def __repr__(self) -> str:
        return f"Ray(origin={self._origin}, direction={self._direction})"
