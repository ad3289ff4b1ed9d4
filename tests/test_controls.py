"""Tests for the speed slider and input handling."""
import pygame
import pytest
from src.ui.controls import SpeedSlider
from src.ui.input import InputAction, InputHandler


def mouse(event_type, pos, button=1):
    if event_type == pygame.MOUSEMOTION:
        return pygame.event.Event(event_type, pos=pos, rel=(0, 0), buttons=(1, 0, 0))
    return pygame.event.Event(event_type, pos=pos, button=button)


def key(code):
    return pygame.event.Event(pygame.KEYDOWN, key=code, mod=0, unicode="")


class TestSpeedSlider:
    """Tests for SpeedSlider."""

    def test_starts_neutral(self):
        """Test the initial value of 50."""
        assert SpeedSlider().value == 50

    def test_set_value_fires_on_change(self):
        """Test that callbacks fire once per distinct value."""
        slider = SpeedSlider()
        values = []
        slider.on_change(values.append)

        assert slider.set_value(70)
        assert not slider.set_value(70)

        assert values == [70]

    @pytest.mark.parametrize("raw, expected", [(-20, 0), (150, 100), (33.4, 33)])
    def test_set_value_clamps(self, raw, expected):
        """Test clamping and rounding into 0-100."""
        slider = SpeedSlider()

        slider.set_value(raw)

        assert slider.value == expected

    def test_value_at_track_ends(self):
        """Test mapping mouse x to slider values."""
        slider = SpeedSlider()
        track = slider.track_rect

        assert slider.value_at(track.left - 50) == 0
        assert slider.value_at(track.right + 50) == 100
        assert slider.value_at(track.x + track.width // 2) == pytest.approx(50, abs=1)

    def test_drag(self):
        """Test press, drag and release on the track."""
        slider = SpeedSlider()
        values = []
        slider.on_change(values.append)
        track = slider.track_rect

        assert slider.handle_event(mouse(pygame.MOUSEBUTTONDOWN, (track.left, track.centery)))
        assert slider.dragging
        assert slider.handle_event(mouse(pygame.MOUSEMOTION, (track.right, track.centery)))
        assert slider.handle_event(mouse(pygame.MOUSEBUTTONUP, (track.right, track.centery)))

        assert not slider.dragging
        assert values == [0, 100]

    def test_motion_without_press_ignored(self):
        """Test that hovering does not change the value."""
        slider = SpeedSlider()
        track = slider.track_rect

        assert not slider.handle_event(mouse(pygame.MOUSEMOTION, (track.right, track.centery)))
        assert slider.value == 50

    def test_hidden_slider_ignores_mouse(self):
        """Test that an invisible panel consumes nothing."""
        slider = SpeedSlider(visible=False)
        track = slider.track_rect

        assert not slider.handle_event(mouse(pygame.MOUSEBUTTONDOWN, (track.left, track.centery)))
        assert slider.value == 50

    def test_hiding_mid_drag_ends_drag(self):
        """Test that hover after hide, release and show leaves the value alone."""
        slider = SpeedSlider()
        handler = InputHandler(slider)
        track = slider.track_rect

        handler.process_events([
            mouse(pygame.MOUSEBUTTONDOWN, (track.left, track.centery)),
            key(pygame.K_TAB),
            mouse(pygame.MOUSEBUTTONUP, (track.left, track.centery)),
            key(pygame.K_TAB),
            pygame.event.Event(
                pygame.MOUSEMOTION, pos=(track.right, track.centery), rel=(0, 0), buttons=(0, 0, 0),
            ),
        ])

        assert slider.visible
        assert not slider.dragging
        assert slider.value == 0

    def test_release_while_hidden_ends_drag(self):
        """Test that a button release is seen even when the panel is hidden."""
        slider = SpeedSlider()
        track = slider.track_rect
        slider.handle_event(mouse(pygame.MOUSEBUTTONDOWN, (track.left, track.centery)))
        slider.visible = False

        slider.handle_event(mouse(pygame.MOUSEBUTTONUP, (track.left, track.centery)))

        assert not slider.dragging

    def test_toggle_visible(self):
        """Test that hiding the panel clears the drag flag."""
        slider = SpeedSlider(dragging=True)

        assert slider.toggle_visible() is False
        assert not slider.dragging
        assert slider.toggle_visible() is True


class TestInputHandler:
    """Tests for InputHandler."""

    def test_quit(self):
        """Test that closing the window stops the loop."""
        handler = InputHandler()
        quits = []
        handler.register_callback(InputAction.QUIT, lambda: quits.append(True))

        running = handler.process_events([pygame.event.Event(pygame.QUIT)])

        assert not running
        assert quits == [True]

    def test_escape_quits(self):
        """Test the escape key."""
        handler = InputHandler()

        assert not handler.process_events([key(pygame.K_ESCAPE)])

    def test_arrow_keys_nudge_slider(self):
        """Test that arrows step the slider value."""
        slider = SpeedSlider()
        handler = InputHandler(slider)

        handler.process_events([key(pygame.K_RIGHT), key(pygame.K_RIGHT), key(pygame.K_LEFT)])

        assert slider.value == 51

    def test_resize(self):
        """Test that window resizes reach the callback."""
        handler = InputHandler()
        sizes = []
        handler.register_callback(InputAction.RESIZE, lambda w, h: sizes.append((w, h)))

        handler.process_events([pygame.event.Event(pygame.VIDEORESIZE, w=640, h=480, size=(640, 480))])

        assert sizes == [(640, 480)]

    def test_toggle_ui(self):
        """Test that tab hides and shows the slider."""
        slider = SpeedSlider()
        handler = InputHandler(slider)

        handler.process_events([key(pygame.K_TAB)])
        assert not slider.visible

        handler.process_events([key(pygame.K_TAB)])
        assert slider.visible

    def test_mouse_goes_to_slider(self):
        """Test that clicks on the track reach the slider."""
        slider = SpeedSlider()
        handler = InputHandler(slider)
        track = slider.track_rect

        handler.process_events([mouse(pygame.MOUSEBUTTONDOWN, (track.right - 1, track.centery))])

        assert slider.value == 99
        assert (handler.state.mouse_x, handler.state.mouse_y) == (track.right - 1, track.centery)
