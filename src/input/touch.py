"""
Touch and mouse input handling for File Browser.
Turns raw pointer events into clicks, double clicks, long presses and
scroll amounts.
"""

import math
import pygame
from typing import Optional, Tuple, Callable, Any
from dataclasses import dataclass

from constants import (
    SCROLL_THRESHOLD,
    TAP_TIME_THRESHOLD,
    SCROLL_SENSITIVITY,
    DOUBLE_CLICK_THRESHOLD,
    LONG_PRESS_THRESHOLD,
)

Point = Tuple[int, int]


@dataclass
class TouchState:
    """Tracking data of the current press and of the last click."""
    start_pos: Optional[Point] = None
    last_pos: Optional[Point] = None
    start_time: int = 0
    is_scrolling: bool = False
    long_press_fired: bool = False
    last_click_time: int = 0
    last_clicked_item: Any = None


def _distance(a: Point, b: Point) -> float:
    return math.hypot(b[0] - a[0], b[1] - a[1])


class TouchHandler:
    """
    Pointer gesture recognizer.

    A press becomes a click when released quickly in place, a scroll
    once it moves past SCROLL_THRESHOLD, and a long press (options menu)
    when held still for LONG_PRESS_THRESHOLD ms. A long press never also
    produces a click.

    Args:
        clock: Millisecond clock, pygame ticks by default
    """

    def __init__(self, clock: Callable[[], int] = pygame.time.get_ticks):
        self._state = TouchState()
        self._clock = clock

    @property
    def is_scrolling(self) -> bool:
        return self._state.is_scrolling

    @property
    def is_pressed(self) -> bool:
        return self._state.start_pos is not None

    # ---- Gesture Core ---- #

    def press(self, pos: Point) -> None:
        """Begin a press at ``pos``."""
        self._state.start_pos = pos
        self._state.last_pos = pos
        self._state.start_time = self._clock()
        self._state.is_scrolling = False
        self._state.long_press_fired = False

    def release(
        self,
        pos: Point,
        on_click: Optional[Callable[[Point], None]] = None,
    ) -> Optional[Point]:
        """
        End the press.

        Args:
            pos: Where the pointer was released
            on_click: Called with the press position if this was a click

        Returns:
            The click position, or None for scrolls, long presses and
            slow releases
        """
        state = self._state
        if state.start_pos is None:
            return None

        is_click = (
            not state.is_scrolling
            and not state.long_press_fired
            and _distance(state.start_pos, pos) < SCROLL_THRESHOLD
            and self._clock() - state.start_time < TAP_TIME_THRESHOLD
        )
        click_pos = state.start_pos if is_click else None

        state.start_pos = None
        state.last_pos = None
        state.is_scrolling = False

        if click_pos is not None and on_click:
            on_click(click_pos)
        return click_pos

    def move(
        self,
        pos: Point,
        on_scroll: Optional[Callable[[float], None]] = None,
    ) -> float:
        """
        Follow the pointer while pressed.

        Args:
            pos: Current pointer position
            on_scroll: Called with the scroll amount once dragging

        Returns:
            Scroll amount in rows (positive scrolls towards the top)
        """
        state = self._state
        if state.start_pos is None or state.last_pos is None:
            return 0

        if _distance(state.start_pos, pos) > SCROLL_THRESHOLD:
            state.is_scrolling = True

        step = pos[1] - state.last_pos[1]
        state.last_pos = pos
        if not state.is_scrolling or abs(step) <= 1:
            return 0

        amount = step * SCROLL_SENSITIVITY
        if on_scroll:
            on_scroll(amount)
        return amount

    def check_long_press(self) -> Optional[Point]:
        """
        Report a press held still for LONG_PRESS_THRESHOLD ms.
        Called by the main loop every frame.

        Returns:
            The press position, only on the frame the threshold is crossed
        """
        state = self._state
        if state.start_pos is None or state.is_scrolling or state.long_press_fired:
            return None
        if self._clock() - state.start_time < LONG_PRESS_THRESHOLD:
            return None
        state.long_press_fired = True
        return state.start_pos

    # ---- pygame Events ---- #

    def handle_mouse_down(self, event: pygame.event.Event) -> Point:
        """MOUSEBUTTONDOWN; only the left button starts a gesture."""
        if event.button == 1:
            self.press(event.pos)
        return event.pos

    def handle_mouse_up(
        self,
        event: pygame.event.Event,
        on_click: Optional[Callable[[Point], None]] = None,
    ) -> Optional[Point]:
        if event.button != 1:
            return None
        return self.release(event.pos, on_click)

    def handle_mouse_motion(
        self,
        event: pygame.event.Event,
        on_scroll: Optional[Callable[[float], None]] = None,
    ) -> float:
        return self.move(event.pos, on_scroll)

    def handle_mouse_wheel(
        self,
        event: pygame.event.Event,
        on_scroll: Optional[Callable[[float], None]] = None,
    ) -> float:
        """MOUSEWHEEL; one notch scrolls one row."""
        if on_scroll:
            on_scroll(event.y)
        return event.y

    # ---- Double Click ---- #

    def check_double_click(self, item: Any) -> bool:
        """
        Record a click on ``item`` and tell whether it completes a double click.

        Two clicks count when they hit the same item within
        DOUBLE_CLICK_THRESHOLD ms. A completed pair is forgotten, so a
        third click starts a new pair.

        Args:
            item: Hashable id of the click target, e.g. ("card", name)

        Returns:
            True on the second click of a pair
        """
        now = self._clock()
        state = self._state
        if item == state.last_clicked_item and now - state.last_click_time < DOUBLE_CLICK_THRESHOLD:
            self.reset_double_click()
            return True

        state.last_clicked_item = item
        state.last_click_time = now
        return False

    def reset_double_click(self) -> None:
        self._state.last_clicked_item = None
        self._state.last_click_time = 0

    def reset(self) -> None:
        """Forget the current press and the last click."""
        self._state = TouchState()
