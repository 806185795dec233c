"""
Geometric shapes for the ray tracer.

Every shape lives in its own object space and carries a transform into world
space. Subclasses only implement the object-space pieces, `local_intersect`
and `local_normal_at`; the world-space `intersect` and `normal_at` are shared.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Optional
import math

from .vec3 import Vec3, Point3
from .ray import Ray
from .transform import Transform
from .materials import Material


class Shape(ABC):
    """Abstract base class for all shapes that can be hit by rays.

    Shapes compare by identity: intersection records hold a reference to the
    shape that produced them, and two spheres with the same transform are
    still different objects in a scene.
    """

    def __init__(self, transform: Optional[Transform] = None, material: Optional[Material] = None):
        """Create a shape.

        Args:
            transform: Object-to-world transform (identity if None)
            material: Surface material (default Material if None)
        """
        self.transform = transform if transform is not None else Transform.identity()
        self.material = material if material is not None else Material()

    @property
    def transform(self) -> Transform:
        return self._transform

    @transform.setter
    def transform(self, value: Transform) -> None:
        # Invert first: a singular transform leaves the shape unchanged
        inverse = value.inverse()
        self._transform = value
        self._inverse = inverse
        self._inverse_transpose = inverse.transpose()

    @property
    def inverse_transform(self) -> Transform:
        return self._inverse

    @property
    def material(self) -> Material:
        return self._material

    @material.setter
    def material(self, value: Material) -> None:
        self._material = value

    def intersect(self, ray: Ray) -> list[float]:
        """Intersect a world-space ray with this shape.

        Args:
            ray: The ray in world space

        Returns:
            Raw t values in ascending order; negative values are kept
        """
        return self.local_intersect(ray.transform(self._inverse))

    def normal_at(self, world_point: Point3) -> Vec3:
        """Get the unit surface normal at a world-space point.

        The object-space normal is mapped back with the inverse-transpose
        so it stays perpendicular under non-uniform scaling.
        """
        object_point = self._inverse.apply_point(world_point)
        object_normal = self.local_normal_at(object_point)
        return self._inverse_transpose.apply_vector(object_normal).normalize()

    @abstractmethod
    def local_intersect(self, ray: Ray) -> list[float]:
        """Intersect an object-space ray.

        Returns:
            0, 1 or 2 t values in ascending order
        """
        pass

    @abstractmethod
    def local_normal_at(self, point: Point3) -> Vec3:
        """Return the object-space normal at an object-space point."""
        pass


class Sphere(Shape):
    """A unit sphere centered at the object-space origin.

    Position and size come from the transform, e.g.
    `Sphere(Transform.scaling(2, 2, 2).translate(0, 1, 0))`.
    """

    def local_intersect(self, ray: Ray) -> list[float]:
        """Test ray-sphere intersection using the quadratic formula.

        The equation P·P = 1 where P = ray.position(t)
        expands to: t²(d·d) + 2t(d·o) + (o·o) - 1 = 0
        which is the quadratic at² + bt + c = 0.
        """
        origin = ray.origin
        direction = ray.direction

        a = direction.dot(direction)
        b = 2.0 * origin.dot(direction)
        c = origin.dot(origin) - 1.0

        discriminant = b * b - 4.0 * a * c
        if discriminant < 0:
            return []

        sqrtd = math.sqrt(discriminant)
        t1 = (-b - sqrtd) / (2.0 * a)
        t2 = (-b + sqrtd) / (2.0 * a)

        # Tangent rays return the same root twice
        return [t1, t2] if t1 <= t2 else [t2, t1]

    def local_normal_at(self, point: Point3) -> Vec3:
        return point - Point3(0, 0, 0)

    def __repr__(self) -> str:
        return f"Sphere(transform={self.transform}, material={self.material})"
