"""Tests for touch and mouse gesture detection."""

import os
import sys
from types import SimpleNamespace

# Add src to path so we can import the modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from constants import LONG_PRESS_THRESHOLD, DOUBLE_CLICK_THRESHOLD
from input.touch import TouchHandler


class _Clock:
    def __init__(self):
        self.now = 1000

    def __call__(self):
        return self.now


def _handler():
    clock = _Clock()
    return TouchHandler(clock=clock), clock


def test_quick_release_is_click():
    touch, clock = _handler()
    clicks = []

    touch.handle_mouse_down(SimpleNamespace(button=1, pos=(10, 10)))
    clock.now += 50
    touch.handle_mouse_up(SimpleNamespace(button=1, pos=(11, 10)), on_click=clicks.append)

    assert clicks == [(10, 10)]
    assert not touch.is_pressed


def test_right_button_does_not_press():
    touch, _ = _handler()
    touch.handle_mouse_down(SimpleNamespace(button=3, pos=(10, 10)))
    assert not touch.is_pressed


def test_long_press_fires_once_and_suppresses_click():
    touch, clock = _handler()
    clicks = []

    touch.press((40, 40))
    clock.now += LONG_PRESS_THRESHOLD - 1
    assert touch.check_long_press() is None

    clock.now += 1
    assert touch.check_long_press() == (40, 40)
    assert touch.check_long_press() is None

    touch.release((40, 40), on_click=clicks.append)
    assert clicks == []


def test_drag_scrolls_and_cancels_long_press():
    touch, clock = _handler()
    scrolls = []

    touch.press((100, 100))
    touch.handle_mouse_motion(SimpleNamespace(pos=(100, 80)), on_scroll=scrolls.append)
    clock.now += LONG_PRESS_THRESHOLD

    assert touch.is_scrolling
    # Dragging up reveals later rows, like a wheel turned down
    assert scrolls and scrolls[0] < 0
    assert touch.check_long_press() is None


def test_wheel_scrolls_by_notches():
    touch, _ = _handler()
    scrolls = []
    touch.handle_mouse_wheel(SimpleNamespace(y=-2), on_scroll=scrolls.append)
    assert scrolls == [-2]


def test_double_click_needs_same_item_in_time():
    touch, clock = _handler()

    assert not touch.check_double_click(("card", "a"))
    clock.now += 100
    assert not touch.check_double_click(("card", "b"))
    clock.now += 100
    assert touch.check_double_click(("card", "b"))

    # The pair was consumed; a third click starts over
    clock.now += 100
    assert not touch.check_double_click(("card", "b"))
    clock.now += DOUBLE_CLICK_THRESHOLD
    assert not touch.check_double_click(("card", "b"))
