"""Tests for Renderer class."""

import pytest
import os
import numpy as np

from rayforge.tuples import point, vector
from rayforge.color import Color
from rayforge.shapes import Sphere
from rayforge.transforms import scaling, translation
from rayforge.renderer import Renderer, RenderSettings


class TestRenderSettings:
    """Test RenderSettings configuration."""

    def test_default_values(self):
        settings = RenderSettings()
        assert settings.width == 256
        assert settings.height == 256
        assert settings.wall_z == 10.0
        assert settings.wall_size == 7.0
        assert settings.ray_origin == point(0, 0, -5)
        assert settings.color == Color(1, 0, 0)
        assert settings.background_color == Color(0, 0, 0)

    def test_custom_values(self):
        settings = RenderSettings(width=64, height=32, wall_size=10.0)
        assert settings.width == 64
        assert settings.height == 32
        assert settings.wall_size == 10.0

    def test_auto_thread_detection(self):
        settings = RenderSettings(num_threads=0)
        assert settings.num_threads == (os.cpu_count() or 4)


class TestRayForPixel:
    """Test primary ray generation."""

    def test_center_pixel(self):
        renderer = Renderer(RenderSettings(width=256, height=256, num_threads=1))
        ray = renderer.ray_for_pixel(128, 128)
        assert ray.origin == point(0, 0, -5)
        assert ray.direction == vector(0, 0, 1)

    def test_top_left_pixel(self):
        renderer = Renderer(RenderSettings(width=256, height=256, num_threads=1))
        ray = renderer.ray_for_pixel(0, 0)
        assert ray.direction.x < 0
        assert ray.direction.y > 0
        assert ray.direction.magnitude() == pytest.approx(1)


class TestRendererBasic:
    """Test silhouette rendering."""

    def make_renderer(self, threads=1):
        return Renderer(RenderSettings(width=16, height=16, num_threads=threads))

    def test_render_produces_canvas(self):
        canvas = self.make_renderer().render(Sphere())
        assert canvas.width == 16
        assert canvas.height == 16

    def test_center_is_hit(self):
        canvas = self.make_renderer().render(Sphere())
        assert canvas.get_pixel(8, 8) == Color(1, 0, 0)

    def test_corner_is_background(self):
        canvas = self.make_renderer().render(Sphere())
        assert canvas.get_pixel(0, 0) == Color(0, 0, 0)

    def test_squashed_sphere(self):
        plain = self.make_renderer().render(Sphere())
        squashed = self.make_renderer().render(Sphere(scaling(1, 0.5, 1)))
        assert plain.get_pixel(8, 2) == Color(1, 0, 0)
        assert squashed.get_pixel(8, 2) == Color(0, 0, 0)

    def test_sphere_out_of_view(self):
        canvas = self.make_renderer().render(Sphere(translation(50, 0, 0)))
        assert not canvas.to_array().any()

    def test_threaded_matches_single_threaded(self):
        sphere = Sphere(scaling(0.5, 1, 1))
        single = self.make_renderer(threads=1).render(sphere)
        threaded = self.make_renderer(threads=4).render(sphere)
        assert np.array_equal(single.to_array(), threaded.to_array())

    def test_custom_colors(self):
        settings = RenderSettings(
            width=8, height=8, num_threads=1,
            color=Color(0, 1, 0), background_color=Color(0, 0, 1)
        )
        canvas = Renderer(settings).render(Sphere())
        assert canvas.get_pixel(4, 4) == Color(0, 1, 0)
        assert canvas.get_pixel(0, 0) == Color(0, 0, 1)


class TestRendererProgress:
    """Test progress callbacks."""

    def test_progress_reaches_one(self):
        progress = []
        renderer = Renderer(RenderSettings(width=4, height=4, num_threads=1))
        renderer.set_progress_callback(progress.append)
        renderer.render(Sphere())
        assert len(progress) == 4
        assert progress[-1] == 1.0
        assert progress == sorted(progress)

    def test_threaded_progress_counts_every_row(self):
        progress = []
        renderer = Renderer(RenderSettings(width=8, height=32, num_threads=4))
        renderer.set_progress_callback(progress.append)
        renderer.render(Sphere())
        assert progress == [(i + 1) / 32 for i in range(32)]
