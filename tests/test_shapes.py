"""Tests for geometric shapes."""

import pytest
import math
import numpy as np

from shadeforge.vec3 import Vec3, Point3, Color
from shadeforge.ray import Ray
from shadeforge.shapes import Shape, Sphere
from shadeforge.materials import Material
from shadeforge.transform import Transform


class RecordingShape(Shape):
    """Shape that records the object-space arguments it receives."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.saved_ray = None

    def local_intersect(self, ray):
        self.saved_ray = ray
        return []

    def local_normal_at(self, point):
        return Vec3(point.x, point.y, point.z)


class TestShapeDefaults:
    """Test behavior shared by all shapes."""

    def test_default_transform(self):
        assert RecordingShape().transform == Transform.identity()

    def test_assign_transform(self):
        shape = RecordingShape()
        shape.transform = Transform.translation(2, 3, 4)
        assert shape.transform == Transform.translation(2, 3, 4)
        assert shape.inverse_transform == Transform.translation(-2, -3, -4)

    def test_default_material(self):
        assert RecordingShape().material == Material()

    def test_assign_material(self):
        shape = RecordingShape()
        m = Material(ambient=1.0)
        shape.material = m
        assert shape.material == m

    def test_singular_transform_rejected(self):
        shape = RecordingShape()
        with pytest.raises(np.linalg.LinAlgError):
            shape.transform = Transform.scaling(0, 0, 0)
        assert shape.transform == Transform.identity()

    def test_cannot_instantiate_abstract(self):
        with pytest.raises(TypeError):
            Shape()

    def test_shapes_compare_by_identity(self):
        assert Sphere() != Sphere()


class TestShapeWorldSpace:
    """Test the world/object space conversion in intersect and normal_at."""

    def test_intersect_scaled_shape(self):
        shape = RecordingShape(Transform.scaling(2, 2, 2))
        shape.intersect(Ray(Point3(0, 0, -5), Vec3(0, 0, 1)))
        assert shape.saved_ray.origin == Point3(0, 0, -2.5)
        assert shape.saved_ray.direction == Vec3(0, 0, 0.5)

    def test_intersect_translated_shape(self):
        shape = RecordingShape(Transform.translation(5, 0, 0))
        shape.intersect(Ray(Point3(0, 0, -5), Vec3(0, 0, 1)))
        assert shape.saved_ray.origin == Point3(-5, 0, -5)
        assert shape.saved_ray.direction == Vec3(0, 0, 1)

    def test_normal_on_translated_shape(self):
        shape = RecordingShape(Transform.translation(0, 1, 0))
        n = shape.normal_at(Point3(0, 1.70711, -0.70711))
        assert n == Vec3(0, 0.70711, -0.70711)

    def test_normal_on_transformed_shape(self):
        shape = RecordingShape(Transform.rotation_z(math.pi / 5).scale(1, 0.5, 1))
        n = shape.normal_at(Point3(0, math.sqrt(2) / 2, -math.sqrt(2) / 2))
        assert n == Vec3(0, 0.97014, -0.24254)


class TestSphereIntersect:
    """Test ray-sphere intersection."""

    def test_two_points(self):
        xs = Sphere().intersect(Ray(Point3(0, 0, -5), Vec3(0, 0, 1)))
        assert xs == pytest.approx([4.0, 6.0])

    def test_tangent(self):
        xs = Sphere().intersect(Ray(Point3(0, 1, -5), Vec3(0, 0, 1)))
        assert xs == pytest.approx([5.0, 5.0])

    def test_miss(self):
        xs = Sphere().intersect(Ray(Point3(0, 2, -5), Vec3(0, 0, 1)))
        assert xs == []

    def test_origin_inside(self):
        xs = Sphere().intersect(Ray(Point3(0, 0, 0), Vec3(0, 0, 1)))
        assert xs == pytest.approx([-1.0, 1.0])

    def test_sphere_behind_ray(self):
        xs = Sphere().intersect(Ray(Point3(0, 0, 5), Vec3(0, 0, 1)))
        assert xs == pytest.approx([-6.0, -4.0])

    def test_scaled_sphere(self):
        sphere = Sphere(Transform.scaling(2, 2, 2))
        xs = sphere.intersect(Ray(Point3(0, 0, -5), Vec3(0, 0, 1)))
        assert xs == pytest.approx([3.0, 7.0])

    def test_translated_sphere(self):
        sphere = Sphere(Transform.translation(5, 0, 0))
        xs = sphere.intersect(Ray(Point3(0, 0, -5), Vec3(0, 0, 1)))
        assert xs == []

    def test_non_unit_direction(self):
        xs = Sphere().intersect(Ray(Point3(0, 0, -5), Vec3(0, 0, 2)))
        assert xs == pytest.approx([2.0, 3.0])

    @pytest.mark.parametrize("origin, direction", [
        (Point3(0, 0, -5), Vec3(0, 0, 1)),
        (Point3(0, 1, -5), Vec3(0, 0, 1)),
        (Point3(0, 2, -5), Vec3(0, 0, 1)),
        (Point3(3, -2, 1), Vec3(-1, 0.5, 0.2)),
        (Point3(0.2, 0.1, 0), Vec3(1, 1, 1)),
        (Point3(-4, 4, 4), Vec3(1, -1, -1)),
    ])
    def test_count_and_order(self, origin, direction):
        xs = Sphere().intersect(Ray(origin, direction))
        assert len(xs) in (0, 2)
        assert xs == sorted(xs)


class TestSphereNormal:
    """Test sphere normals."""

    def test_on_axes(self):
        s = Sphere()
        assert s.normal_at(Point3(1, 0, 0)) == Vec3(1, 0, 0)
        assert s.normal_at(Point3(0, 1, 0)) == Vec3(0, 1, 0)
        assert s.normal_at(Point3(0, 0, 1)) == Vec3(0, 0, 1)

    def test_non_axial_is_normalized(self):
        k = math.sqrt(3) / 3
        n = Sphere().normal_at(Point3(k, k, k))
        assert n == Vec3(k, k, k)
        assert n.length() == pytest.approx(1.0)

    def test_translated_sphere(self):
        s = Sphere(Transform.translation(0, 1, 0))
        assert s.normal_at(Point3(0, 1.70711, -0.70711)) == Vec3(0, 0.70711, -0.70711)

    def test_non_uniformly_scaled_sphere(self):
        s = Sphere(Transform.scaling(1, 0.5, 1) @ Transform.rotation_z(math.pi / 5))
        n = s.normal_at(Point3(0, math.sqrt(2) / 2, -math.sqrt(2) / 2))
        assert n == Vec3(0, 0.97014, -0.24254)
        assert n.length() == pytest.approx(1.0)


class TestSphereMaterial:
    """Test materials on spheres."""

    def test_with_material(self):
        m = Material(color=Color(1, 0, 0), ambient=1.0)
        s = Sphere(material=m)
        assert s.material is m

    def test_repr(self):
        assert "Sphere" in repr(Sphere())
