"""Tests for the pygame draw surface."""
import pygame
import pytest
from src.ui.paint import Color, LinearGradient
from src.ui.surface import PygameSurface


@pytest.fixture
def canvas():
    surface = pygame.Surface((60, 40))
    surface.fill((0, 0, 0))
    return surface


class TestFill:
    """Tests for fill_rect."""

    def test_opaque_fill(self, canvas):
        """Test that an opaque fill replaces pixels."""
        PygameSurface(canvas).fill_rect((0, 0, 60, 40), Color(0, 100, 50, 1.0))

        assert tuple(canvas.get_at((30, 20)))[:3] == (255, 0, 0)

    def test_translucent_fill_blends(self, canvas):
        """Test that a half-transparent fill only partly covers."""
        PygameSurface(canvas).fill_rect((0, 0, 60, 40), Color(0, 100, 50, 0.5))

        red = canvas.get_at((30, 20)).r
        assert 100 < red < 160

    def test_size(self, canvas):
        """Test that the surface reports its target's size."""
        assert PygameSurface(canvas).size == (60, 40)


class TestStroke:
    """Tests for stroke_path."""

    def test_straight_line(self, canvas):
        """Test a horizontal green line."""
        PygameSurface(canvas).stroke_path([(5, 20), (55, 20)], Color(120), 4)

        assert canvas.get_at((30, 20)).g == 255
        assert tuple(canvas.get_at((30, 5)))[:3] == (0, 0, 0)

    def test_half_pixel_width_draws_one_pixel(self, canvas):
        """Test that a 0.5 px stroke is still drawn."""
        PygameSurface(canvas).stroke_path([(5, 20), (55, 20)], Color(120), 0.5)

        assert canvas.get_at((30, 20)).g == 255

    def test_gradient_line(self, canvas):
        """Test that a gradient colours each end differently."""
        gradient = LinearGradient(start=(0, 0), end=(60, 0))
        gradient.add_stop(0.0, Color(0))
        gradient.add_stop(1.0, Color(240))

        PygameSurface(canvas).stroke_path([(2, 20), (10, 20), (50, 20), (58, 20)], gradient, 4)

        left = canvas.get_at((5, 20))
        right = canvas.get_at((55, 20))
        assert left.r > left.b
        assert right.b > right.r

    @pytest.mark.parametrize("points, width", [
        ([(5, 20)], 4),
        ([(5, 20), (55, 20)], 0),
        ([(5, 20), (55, 20)], 0.4),
        ([], 4),
    ])
    def test_nothing_to_draw(self, canvas, points, width):
        """Test that degenerate strokes leave the canvas alone."""
        PygameSurface(canvas).stroke_path(points, Color(120), width)

        assert tuple(canvas.get_at((30, 20)))[:3] == (0, 0, 0)

    def test_glow_spreads_beyond_line(self, canvas):
        """Test that the glow lights pixels next to the stroke."""
        surface = PygameSurface(canvas)
        surface.set_glow(Color(120, 100, 50, 0.5), 15)

        surface.stroke_path([(5, 20), (55, 20)], Color(120), 4)

        assert canvas.get_at((30, 26)).g > 0

    def test_no_glow_without_set_glow(self, canvas):
        """Test that a plain stroke stays thin."""
        PygameSurface(canvas).stroke_path([(5, 20), (55, 20)], Color(120), 4)

        assert canvas.get_at((30, 26)).g == 0

    def test_reset_glow(self, canvas):
        """Test that reset_glow clears the glow state."""
        surface = PygameSurface(canvas)
        surface.set_glow(Color(120), 15)
        assert surface.glow is not None

        surface.reset_glow()

        assert surface.glow is None


class TestCircle:
    """Tests for fill_circle."""

    def test_circle_center(self, canvas):
        """Test that the circle covers its center."""
        PygameSurface(canvas).fill_circle((30, 20), 5, Color(120, 100, 70, 1.0))

        assert canvas.get_at((30, 20)).g > 200
        assert tuple(canvas.get_at((50, 20)))[:3] == (0, 0, 0)

    def test_zero_radius(self, canvas):
        """Test that an empty circle draws nothing."""
        PygameSurface(canvas).fill_circle((30, 20), 0, Color(120))

        assert tuple(canvas.get_at((30, 20)))[:3] == (0, 0, 0)
