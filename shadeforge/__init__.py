"""
ShadeForge - the shading core of a Python ray tracer

Resolves a single ray against a scene of shapes lit by a point light:
- Ray-shape intersection in object space (transformed shapes)
- Ordered intersections and hit selection
- Shading geometry with shadow-acne bias
- Phong lighting (ambient, diffuse, specular)
- Hard shadows
"""

__version__ = "0.1.0"
__author__ = "ShadeForge Team"

from .vec3 import Vec3, Point3, Color, EPSILON, black, white
from .transform import Transform
from .ray import Ray, InvalidRayError
from .intersections import Intersection, Intersections, intersections
from .materials import Material
from .shapes import Shape, Sphere
from .lights import PointLight
from .precompute import Precomputation, SHADOW_BIAS
from .world import World, WorldSettings, default_world
