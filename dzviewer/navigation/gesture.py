# -*- coding: utf-8 -*-
"""
Gesture Controller - Pointer and wheel events to pan, zoom, and focus.

State machine::

    IDLE --down--> POINTER_DOWN --move > threshold--> DRAGGING
      ^                 |                                |
      +------up---------+-------> CLICK_PENDING <---up---+
                                       |
                                       +--> IDLE

A release that did not drag resolves as a click: the region under the
pointer is framed, or the view goes home.  A release within the
double-click window of the previous release does nothing.  Time is read
from an injected clock so the window can be tested deterministically.

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

# Standard library
import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Hashable, Optional

from dzviewer.core.config import ViewerConfig
from dzviewer.navigation.focus import FocusNavigator
from dzviewer.navigation.geometry import UNIT_RECT, Point
from dzviewer.navigation.region_index import SubRegionIndex
from dzviewer.navigation.surface import surface_size
from dzviewer.navigation.viewport_state import ViewportState

_log = logging.getLogger("dzviewer.gesture")


class GesturePhase(Enum):
    """Gesture controller states."""

    IDLE = "idle"
    POINTER_DOWN = "pointer_down"
    DRAGGING = "dragging"
    CLICK_PENDING = "click_pending"


@dataclass
class GestureState:
    """Transient pointer bookkeeping.

    ``last_pointer_screen_point`` and ``region_under_pointer`` are
    updated by every move, pressed or not.  ``last_click_timestamp`` is
    in clock seconds, ``None`` before the first release.
    """

    is_pointer_down: bool = False
    is_dragging: bool = False
    drag_anchor_screen_point: Point = Point(0.0, 0.0)
    viewport_origin_at_drag_start: Point = Point(0.0, 0.0)
    last_pointer_screen_point: Optional[Point] = None
    last_click_timestamp: Optional[float] = None
    region_under_pointer: Optional[Hashable] = None


class GestureController:
    """Drives viewport and focus navigation from raw input events.

    Parameters
    ----------
    viewport : ViewportState
        Viewport mutated by pan and zoom.
    index : SubRegionIndex
        Regions hit-tested under the pointer.
    navigator : FocusNavigator
        Resolves clicks into focus or home navigation.
    config : ViewerConfig, optional
        Thresholds and factors.  Defaults to ``ViewerConfig()``.
    clock : Callable[[], float], optional
        Monotonic time source in seconds.
    capture_pointer, release_pointer : Callable[[], None], optional
        Host hooks for pointer capture on press and release.
    on_viewport_changed : Callable[[], None], optional
        Called after every pan, zoom, focus, or home navigation.
    """

    def __init__(
        self,
        viewport: ViewportState,
        index: SubRegionIndex,
        navigator: FocusNavigator,
        config: Optional[ViewerConfig] = None,
        clock: Callable[[], float] = time.monotonic,
        capture_pointer: Optional[Callable[[], None]] = None,
        release_pointer: Optional[Callable[[], None]] = None,
        on_viewport_changed: Optional[Callable[[], None]] = None,
    ) -> None:
        self._viewport = viewport
        self._index = index
        self._navigator = navigator
        self._config = config or ViewerConfig()
        self._clock = clock
        self._capture_pointer = capture_pointer
        self._release_pointer = release_pointer
        self._on_viewport_changed = on_viewport_changed

        self.state = GestureState()
        self.phase = GesturePhase.IDLE

    def reset(self) -> None:
        """Forget all pointer state (new source, detached handlers).

        A press in progress gives up its pointer capture first.
        """
        if self.state.is_pointer_down and self._release_pointer is not None:
            self._release_pointer()
        self.state = GestureState()
        self.phase = GesturePhase.IDLE

    # --- Events ---

    def on_pointer_down(self, screen_point: Point) -> None:
        """Start a press; ignored unless idle."""
        if self.phase is not GesturePhase.IDLE:
            _log.debug("Pointer down ignored in phase %s", self.phase.value)
            return
        if self._capture_pointer is not None:
            self._capture_pointer()
        self.state.is_pointer_down = True
        self.state.drag_anchor_screen_point = Point(*screen_point)
        self.state.viewport_origin_at_drag_start = self._viewport.viewport.origin
        self.phase = GesturePhase.POINTER_DOWN

    def on_pointer_move(self, screen_point: Point) -> None:
        """Track the pointer, refresh the hovered region, and pan if dragging."""
        screen_point = Point(*screen_point)
        state = self.state

        if self.phase is GesturePhase.POINTER_DOWN and self._beyond_threshold(screen_point):
            state.is_dragging = True
            self.phase = GesturePhase.DRAGGING
            _log.debug("Drag started at %s", screen_point)

        state.last_pointer_screen_point = screen_point

        logical = self._viewport.surface.element_to_logical_point(screen_point)
        region_id = self._index.hit_test(logical)
        if region_id != state.region_under_pointer:
            _log.debug("Region under pointer: %r", region_id)
        state.region_under_pointer = region_id

        if state.is_dragging:
            self._viewport.pan(
                screen_point,
                state.drag_anchor_screen_point,
                state.viewport_origin_at_drag_start,
            )
            self._notify()

    def on_pointer_up(self, screen_point: Point) -> bool:
        """Finish a press, resolving a click unless suppressed.

        Returns
        -------
        bool
            True if a focus or home navigation was performed.
        """
        state = self.state
        if not state.is_pointer_down:
            _log.debug("Pointer up without press ignored")
            return False

        if self._release_pointer is not None:
            self._release_pointer()
        state.is_pointer_down = False

        now = self._clock()
        navigated = False
        if (state.last_click_timestamp is not None
                and (now - state.last_click_timestamp) * 1000.0
                <= self._config.double_click_ms):
            _log.debug("Release within double-click window, no navigation")
        elif not state.is_dragging:
            self.phase = GesturePhase.CLICK_PENDING
            self._resolve_click()
            navigated = True

        state.is_dragging = False
        state.last_click_timestamp = now
        self.phase = GesturePhase.IDLE
        return navigated

    def on_wheel(self, delta: float, screen_point: Optional[Point] = None) -> Optional[float]:
        """Zoom in one discrete step for ``delta >= 0``, out otherwise.

        The zoom is anchored at the last pointer position seen by a
        move.  Before any move, ``screen_point`` is used if given, else
        the surface centre.

        Returns
        -------
        Optional[float]
            New zoom level, or ``None`` if the event was ignored.
        """
        if self.phase not in (GesturePhase.IDLE, GesturePhase.POINTER_DOWN):
            _log.debug("Wheel ignored in phase %s", self.phase.value)
            return None

        factor = (self._config.wheel_zoom_in if delta >= 0
                  else self._config.wheel_zoom_out)
        anchor = self.state.last_pointer_screen_point
        if anchor is None:
            if screen_point is not None:
                anchor = Point(*screen_point)
            else:
                size = surface_size(self._viewport.surface)
                anchor = Point(size.width / 2.0, size.height / 2.0)

        zoom = self._viewport.zoom_about(factor, anchor)
        self._notify()
        return zoom

    # --- Internal ---

    def _beyond_threshold(self, screen_point: Point) -> bool:
        anchor = self.state.drag_anchor_screen_point
        threshold = self._config.drag_threshold_px
        return (abs(screen_point.x - anchor.x) > threshold
                or abs(screen_point.y - anchor.y) > threshold)

    def _resolve_click(self) -> None:
        region_id = self.state.region_under_pointer
        region = self._index.get(region_id) if region_id is not None else None
        if region is not None and not self._navigator.is_focused(region.id):
            self._navigator.focus_on(region, UNIT_RECT)
        else:
            self._navigator.go_home()
        self._notify()

    def _notify(self) -> None:
        if self._on_viewport_changed is not None:
            self._on_viewport_changed()
