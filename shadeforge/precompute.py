"""
Shading geometry derived from a resolved hit.
"""

from __future__ import annotations
from dataclasses import dataclass

from .vec3 import Vec3, Point3
from .ray import Ray
from .shapes import Shape
from .intersections import Intersection


# Offset along the normal for shadow testing, avoids self-shadowing acne
SHADOW_BIAS = 1e-5


@dataclass
class Precomputation:
    """Everything needed to shade one hit.

    Attributes:
        t: The ray parameter of the hit
        shape: The shape that was hit
        point: The hit point in world space
        eye_v: Unit vector from the point back toward the ray origin
        normal_v: Unit surface normal, flipped to face the eye
        inside: True if the ray started inside the shape
        over_point: point nudged along normal_v by SHADOW_BIAS
    """
    t: float
    shape: Shape
    point: Point3
    eye_v: Vec3
    normal_v: Vec3
    inside: bool
    over_point: Point3

    @property
    def shadow_bias_point(self) -> Point3:
        return self.over_point

    @classmethod
    def from_hit(cls, hit: Intersection, ray: Ray) -> Precomputation:
        """Compute shading geometry for a hit.

        Args:
            hit: The intersection to shade
            ray: The ray that produced it

        Returns:
            The populated Precomputation
        """
        point = ray.position(hit.t)
        eye_v = (-ray.direction).normalize()
        normal_v = hit.shape.normal_at(point)

        inside = normal_v.dot(eye_v) < 0
        if inside:
            normal_v = -normal_v

        return cls(
            t=hit.t,
            shape=hit.shape,
            point=point,
            eye_v=eye_v,
            normal_v=normal_v,
            inside=inside,
            over_point=point + normal_v * SHADOW_BIAS,
        )
