"""Tests for Camera tracing."""

import pytest
from raycaster.vec3 import Vector, Point, Color
from raycaster.ray import Ray
from raycaster.camera import Camera, Pixel
from raycaster.lights import Light
from raycaster.scene import Scene
from raycaster.shading import BlinnPhongShadingStrategy, ShadingStrategy
from raycaster.shapes import Sphere, Properties
from raycaster.viewport import Viewport, Window


class ConstantStrategy(ShadingStrategy):
    """Shades every hit with one color."""

    def __init__(self, color):
        self.color = color

    def shade(self, view_ray, calculations, properties, scene):
        return self.color


RED = Color(1, 0, 0)
GREEN = Color(0, 1, 0)


def make_camera(width=20, height=20):
    return Camera(Point(0, 0, 0), Viewport(2, 2, Point(0, 0, 2)), Window(width, height))


@pytest.fixture
def red_sphere_scene():
    """One glossy red sphere in front of the eye, lit from behind-left."""
    scene = Scene()
    properties = Properties(
        ambient=Color(0.1, 0.1, 0.1),
        diffuse=Color(1.0, 0.0, 0.0),
        specular=Color(1.0, 1.0, 1.0),
        specular_exponent=500
    )
    scene.add_shape(Sphere(Point(0, 0, 20), 3.0, properties, BlinnPhongShadingStrategy()))
    scene.add_light(Light(Vector(0.577, -0.577, 0.577), Color(1, 1, 1)))
    return scene


def pixel_at(pixels, column, row):
    return next(p for p in pixels if p.column == column and p.row == row)


class TestCameraRays:
    """Test primary ray construction."""

    def test_ray_starts_at_eye_and_reaches_sample(self):
        camera = make_camera()
        sample = camera.sampler().sample_at(0, 0)
        ray = camera.ray_for(sample)

        assert ray.origin == Point(0, 0, 0)
        assert ray.at(1) == sample.point

    def test_sampler_uses_window_size(self):
        sampler = make_camera(8, 6).sampler()
        assert sampler.width_samples == 8
        assert sampler.height_samples == 6


class TestCameraTrace:
    """Test nearest-hit selection."""

    def test_miss_is_black(self):
        scene = Scene()
        scene.add_shape(Sphere(Point(0, 0, 20), 1.0, Properties(), ConstantStrategy(RED)))
        color = make_camera().trace(Ray(Point(0, 0, 0), Vector(0, 1, 0)), scene)
        assert color.is_black()

    def test_empty_scene_is_black(self):
        color = make_camera().trace(Ray(Point(0, 0, 0), Vector(0, 0, 1)), Scene())
        assert color == Color()

    def test_nearest_shape_wins(self):
        scene = Scene()
        scene.add_shape(Sphere(Point(0, 0, 20), 3.0, Properties(), ConstantStrategy(RED)))
        scene.add_shape(Sphere(Point(0, 0, 10), 1.0, Properties(), ConstantStrategy(GREEN)))
        ray = Ray(Point(0, 0, 0), Vector(0, 0, 1))

        assert make_camera().trace(ray, scene) == GREEN

    def test_nearest_shape_wins_regardless_of_order(self):
        scene = Scene()
        scene.add_shape(Sphere(Point(0, 0, 10), 1.0, Properties(), ConstantStrategy(GREEN)))
        scene.add_shape(Sphere(Point(0, 0, 20), 3.0, Properties(), ConstantStrategy(RED)))
        ray = Ray(Point(0, 0, 0), Vector(0, 0, 1))

        assert make_camera().trace(ray, scene) == GREEN

    def test_exact_tie_keeps_first_added(self):
        scene = Scene()
        scene.add_shape(Sphere(Point(0, 0, 10), 1.0, Properties(), ConstantStrategy(RED)))
        scene.add_shape(Sphere(Point(0, 0, 10), 1.0, Properties(), ConstantStrategy(GREEN)))
        ray = Ray(Point(0, 0, 0), Vector(0, 0, 1))

        assert make_camera().trace(ray, scene) == RED


class TestCameraShoot:
    """End-to-end rendering of the demo sphere."""

    def test_one_pixel_per_sample_in_order(self, red_sphere_scene):
        camera = make_camera(4, 3)
        pixels = camera.shoot(red_sphere_scene)

        assert len(pixels) == 12
        assert [(p.column, p.row) for p in pixels] == list(camera.sampler().coordinates())
        assert camera.pixels == pixels

    def test_center_pixel_is_ambient_lit(self, red_sphere_scene):
        pixels = make_camera().shoot(red_sphere_scene)
        center = pixel_at(pixels, 10, 10).color

        # The light arrives from behind the visible hemisphere here
        assert not center.is_black()
        assert center.r == pytest.approx(0.1)
        assert center.g == pytest.approx(0.1)
        assert center.b == pytest.approx(0.1)

    def test_lit_limb_is_red(self, red_sphere_scene):
        pixels = make_camera().shoot(red_sphere_scene)
        limb = pixel_at(pixels, 12, 12).color

        assert limb.r > limb.g
        assert limb.r > limb.b
        assert limb.g == pytest.approx(limb.b)

    def test_far_from_sphere_is_black(self, red_sphere_scene):
        pixels = make_camera().shoot(red_sphere_scene)
        for column, row in [(0, 0), (19, 0), (0, 19), (19, 19), (2, 10)]:
            assert pixel_at(pixels, column, row).color == Color(0, 0, 0)

    def test_removing_lights_blacks_out_hits(self, red_sphere_scene):
        red_sphere_scene.remove_light(1)
        pixels = make_camera().shoot(red_sphere_scene)
        assert all(p.color.is_black() for p in pixels)

    def test_shoot_is_repeatable(self, red_sphere_scene):
        camera = make_camera(6, 6)
        assert camera.shoot(red_sphere_scene) == camera.shoot(red_sphere_scene)


class TestPixel:
    """Test Pixel."""

    def test_is_frozen(self):
        pixel = Pixel(1, 2, Color(0.5, 0.5, 0.5))
        with pytest.raises(AttributeError):
            pixel.column = 3
