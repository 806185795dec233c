"""
Surface materials and the Phong local illumination model.

A material describes how a surface responds to a light:
- ambient: light scattered everywhere in the scene
- diffuse: matte reflection, depends on the angle to the light
- specular: the highlight, depends on the angle to the eye
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from .vec3 import Vec3, Point3, Color, approx_equal, black, white

if TYPE_CHECKING:
    from .lights import PointLight


@dataclass(eq=False)
class Material:
    """Phong material.

    Attributes:
        color: Surface color
        ambient: Ambient coefficient (>= 0)
        diffuse: Diffuse coefficient (>= 0)
        specular: Specular coefficient (>= 0)
        shininess: Specular exponent; higher values give a smaller, sharper highlight
    """
    color: Color = field(default_factory=white)
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0

    def __post_init__(self):
        for name in ('ambient', 'diffuse', 'specular', 'shininess'):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"Material {name} must be >= 0, got {value}")

    def with_color(self, color: Color) -> Material:
        return replace(self, color=color)

    def with_ambient(self, ambient: float) -> Material:
        return replace(self, ambient=ambient)

    def with_diffuse(self, diffuse: float) -> Material:
        return replace(self, diffuse=diffuse)

    def with_specular(self, specular: float) -> Material:
        return replace(self, specular=specular)

    def with_shininess(self, shininess: float) -> Material:
        return replace(self, shininess=shininess)

    def lighting(
        self,
        light: PointLight,
        point: Point3,
        eye_v: Vec3,
        normal_v: Vec3,
        in_shadow: bool = False
    ) -> Color:
        """Shade a surface point with the Phong model.

        Args:
            light: The point light illuminating the surface
            point: The surface point being shaded
            eye_v: Unit vector from the point toward the eye
            normal_v: Unit surface normal, facing the eye
            in_shadow: Whether the light is blocked (decided by the caller)

        Returns:
            ambient + diffuse + specular, unclamped
        """
        # Combine the surface color with the light's color/intensity
        effective_color = self.color * light.intensity
        ambient = effective_color * self.ambient

        if in_shadow:
            return ambient

        light_v = (light.position - point).normalize()

        # Cosine of the angle between light and normal; negative means the
        # light is on the other side of the surface
        light_dot_normal = light_v.dot(normal_v)
        if light_dot_normal < 0:
            return ambient

        diffuse = effective_color * self.diffuse * light_dot_normal

        # Cosine of the angle between reflection and eye; non-positive means
        # the light reflects away from the eye
        reflect_v = (-light_v).reflect(normal_v)
        reflect_dot_eye = reflect_v.dot(eye_v)
        if reflect_dot_eye <= 0 or approx_equal(reflect_dot_eye, 0.0):
            specular = black()
        else:
            factor = reflect_dot_eye ** self.shininess
            specular = light.intensity * self.specular * factor

        return ambient + diffuse + specular

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Material):
            return NotImplemented
        return (
            self.color == other.color
            and approx_equal(self.ambient, other.ambient)
            and approx_equal(self.diffuse, other.diffuse)
            and approx_equal(self.specular, other.specular)
            and approx_equal(self.shininess, other.shininess)
        )

    __hash__ = None
