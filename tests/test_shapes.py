"""Tests for geometric shapes."""

import pytest
import math
from raycaster.vec3 import Vector, Point, Color
from raycaster.ray import Ray
from raycaster.scene import Scene
from raycaster.shading import BlinnPhongShadingStrategy, ShadingStrategy
from raycaster.shapes import Sphere, Properties, LocalCalculations, Shape


def make_sphere(center=Point(0, 0, 0), radius=1.0):
    return Sphere(center, radius, Properties(), BlinnPhongShadingStrategy())


class TestProperties:
    """Test material properties defaults."""

    def test_defaults(self):
        props = Properties()
        assert props.ambient.is_black()
        assert props.diffuse.is_black()
        assert props.specular.is_black()
        assert props.specular_exponent == 0
        assert props.reflection_coefficient == 0
        assert props.refraction_coefficient == 0


class TestLocalCalculations:
    """Test the intersection result bundle."""

    def test_default_is_miss(self):
        calc = LocalCalculations()
        assert calc.hits is False
        assert calc.point is None
        assert calc.time_hit is None
        assert calc.normal is None
        assert calc.reflected_ray is None


class TestShape:
    """Test the Shape base class."""

    def test_cannot_instantiate(self):
        with pytest.raises(TypeError):
            Shape(Properties(), BlinnPhongShadingStrategy())

    def test_shade_delegates_to_strategy(self):
        seen = {}

        class RecordingStrategy(ShadingStrategy):
            def shade(self, view_ray, calculations, properties, scene):
                seen['args'] = (view_ray, calculations, properties, scene)
                return Color(0.25, 0.5, 0.75)

        props = Properties(ambient=Color(1, 1, 1))
        sphere = Sphere(Point(0, 0, 5), 1.0, props, RecordingStrategy())
        ray = Ray(Point(0, 0, 0), Vector(0, 0, 1))
        calc = sphere.intersect(ray)
        scene = Scene()

        color = sphere.shade(ray, calc, scene)

        assert color == Color(0.25, 0.5, 0.75)
        assert seen['args'] == (ray, calc, props, scene)


class TestSphere:
    """Test Sphere intersection."""

    def test_creation(self):
        sphere = make_sphere(Point(1, 2, 3), 2.0)
        assert sphere.center == Point(1, 2, 3)
        assert sphere.radius == 2.0

    def test_hit_through_center(self):
        sphere = make_sphere()
        ray = Ray(Point(0, 0, -5), Vector(0, 0, 1))
        calc = sphere.intersect(ray)

        assert calc.hits is True
        assert calc.time_hit == pytest.approx(4.0)
        assert calc.point == Point(0, 0, -1)

    def test_hit_time_is_distance_minus_radius(self):
        sphere = make_sphere(Point(0, 0, 20), 3.0)
        ray = Ray(Point(0, 0, 0), Vector(0, 0, 1))
        calc = sphere.intersect(ray)

        assert calc.hits is True
        assert calc.time_hit == pytest.approx(17.0)

    def test_hit_time_scales_with_direction_length(self):
        sphere = make_sphere(Point(0, 0, 20), 3.0)
        ray = Ray(Point(0, 0, 0), Vector(0, 0, 2))
        calc = sphere.intersect(ray)

        assert calc.time_hit == pytest.approx(8.5)
        assert calc.point == Point(0, 0, 17)

    def test_normal_is_twice_the_radius_vector(self):
        sphere = make_sphere(Point(0, 0, 20), 3.0)
        ray = Ray(Point(0, 0, 0), Vector(0, 0, 1))
        calc = sphere.intersect(ray)

        assert calc.normal == Vector(0, 0, -6)
        assert calc.normal.magnitude == pytest.approx(6.0)

    def test_miss(self):
        sphere = make_sphere()
        ray = Ray(Point(0, 5, -5), Vector(0, 0, 1))  # Ray passes above sphere
        calc = sphere.intersect(ray)

        assert calc.hits is False
        assert calc.point is None
        assert calc.time_hit is None
        assert calc.normal is None

    def test_tangent_ray_has_single_root(self):
        sphere = make_sphere()
        ray = Ray(Point(1, 0, -5), Vector(0, 0, 1))  # Grazes x = 1
        calc = sphere.intersect(ray)

        assert calc.hits is True
        assert math.isfinite(calc.time_hit)
        assert calc.time_hit == pytest.approx(5.0)
        assert calc.point == Point(1, 0, 0)

    def test_origin_inside_reports_back_root(self):
        sphere = make_sphere()
        ray = Ray(Point(0, 0, 0), Vector(0, 0, 1))
        calc = sphere.intersect(ray)

        # The smaller root is behind the origin and still wins
        assert calc.hits is True
        assert calc.time_hit == pytest.approx(-1.0)
        assert calc.point == Point(0, 0, -1)

    def test_sphere_behind_ray_is_still_hit(self):
        sphere = make_sphere(Point(0, 0, -5), 1.0)
        ray = Ray(Point(0, 0, 0), Vector(0, 0, 1))  # Ray points away from sphere
        calc = sphere.intersect(ray)

        assert calc.hits is True
        assert calc.time_hit == pytest.approx(-6.0)

    def test_off_axis_hit_lies_on_surface(self):
        sphere = make_sphere(Point(0, 0, 20), 3.0)
        ray = Ray(Point(0, 0, 0), Vector(0.2, -0.2, 2))
        calc = sphere.intersect(ray)

        assert calc.hits is True
        assert (calc.point - sphere.center).length() == pytest.approx(3.0)

    def test_intersect_is_repeatable(self):
        sphere = make_sphere(Point(0, 0, 20), 3.0)
        ray = Ray(Point(0, 0, 0), Vector(0.1, 0.1, 2))
        first = sphere.intersect(ray)
        second = sphere.intersect(ray)
        assert first == second
        assert first is not second

    def test_repr(self):
        assert "Sphere" in repr(make_sphere())
