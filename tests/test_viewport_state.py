# -*- coding: utf-8 -*-
"""
Tests for dzviewer.navigation.viewport_state — zoom clamping, pan, home.

Created
-------
2026-10-19
"""

import pytest

from dzviewer.navigation.geometry import Point
from dzviewer.navigation.surface import LogicalSurface
from dzviewer.navigation.viewport_state import (
    FocusState,
    Viewport,
    ViewportState,
    ZoomBounds,
)


@pytest.fixture
def surface():
    return LogicalSurface(200, 100)


@pytest.fixture
def state(surface):
    return ViewportState(surface, ZoomBounds(0.8, 40.0, 1.0), FocusState())


# ---------------------------------------------------------------------------
# ZoomBounds
# ---------------------------------------------------------------------------

class TestZoomBounds:
    def test_defaults(self):
        b = ZoomBounds()
        assert (b.min, b.max, b.current) == (0.8, 40.0, 1.0)

    @pytest.mark.parametrize("lo,hi", [(0.0, 1.0), (-1.0, 2.0), (3.0, 2.0)])
    def test_invalid(self, lo, hi):
        with pytest.raises(ValueError):
            ZoomBounds(lo, hi)

    def test_clamp(self):
        b = ZoomBounds(0.8, 40.0)
        assert b.clamp(0.1) == 0.8
        assert b.clamp(100.0) == 40.0
        assert b.clamp(2.5) == 2.5


# ---------------------------------------------------------------------------
# Zoom
# ---------------------------------------------------------------------------

class TestZoomAbout:
    @pytest.mark.parametrize("start", [0.8, 1.0, 7.5, 40.0])
    @pytest.mark.parametrize("factor", [0.1, 0.5, 1.0, 1.5, 100.0])
    def test_result_is_clamped_product(self, state, start, factor):
        state.zoom_bounds.current = start
        level = state.zoom_about(factor, Point(50.0, 50.0))
        expected = min(40.0, max(0.8, start * factor))
        assert level == pytest.approx(expected)
        assert state.zoom_level == pytest.approx(expected)

    def test_zoom_out_stops_at_minimum(self, state, surface):
        level = state.zoom_about(0.5, Point(100.0, 50.0))
        assert level == pytest.approx(0.8)
        # Only the clamped factor 0.8 reaches the surface.
        assert surface.viewport_width == pytest.approx(1.25)

    def test_no_surface_change_at_limit(self, state, surface):
        state.zoom_bounds.current = 40.0
        surface.viewport_width = 0.025
        state.zoom_about(1.5, Point(10.0, 10.0))
        assert surface.viewport_width == pytest.approx(0.025)

    def test_anchor_point_stays_fixed(self, state, surface):
        anchor = Point(30.0, 80.0)
        before = surface.element_to_logical_point(anchor)
        state.zoom_about(1.5, anchor)
        after = surface.element_to_logical_point(anchor)
        assert after == pytest.approx(before)
        assert surface.viewport_width == pytest.approx(1.0 / 1.5)

    def test_clears_focus(self, state):
        state.focus.focused_region_id = "a"
        state.zoom_about(1.5, Point(0.0, 0.0))
        assert state.focus.focused_region_id is None


# ---------------------------------------------------------------------------
# Pan
# ---------------------------------------------------------------------------

class TestPan:
    def test_delta_scaled_by_width(self, state, surface):
        surface.viewport_width = 0.5
        origin = state.pan(Point(30.0, 20.0), Point(10.0, 10.0), Point(0.0, 0.0))
        # 20 px of 200 and 10 px of 100, both times width 0.5
        assert origin == pytest.approx((-0.05, -0.05))
        assert surface.viewport_origin == pytest.approx((-0.05, -0.05))

    def test_relative_to_drag_start(self, state, surface):
        start = Point(0.3, 0.4)
        state.pan(Point(50.0, 50.0), Point(10.0, 10.0), start)
        origin = state.pan(Point(10.0, 10.0), Point(10.0, 10.0), start)
        assert origin == pytest.approx(start)

    def test_width_unchanged(self, state, surface):
        surface.viewport_width = 0.25
        state.pan(Point(0.0, 0.0), Point(100.0, 100.0), Point(0.0, 0.0))
        assert surface.viewport_width == 0.25

    def test_clears_focus(self, state):
        state.focus.focused_region_id = "a"
        state.pan(Point(1.0, 1.0), Point(0.0, 0.0), Point(0.0, 0.0))
        assert state.focus.focused_region_id is None


# ---------------------------------------------------------------------------
# Home and assign
# ---------------------------------------------------------------------------

class TestGoHome:
    def test_resets_viewport_and_zoom(self, state, surface):
        state.zoom_about(1.5, Point(20.0, 20.0))
        state.pan(Point(60.0, 60.0), Point(20.0, 20.0), surface.viewport_origin)
        state.focus.focused_region_id = "a"

        state.go_home()
        assert state.viewport == Viewport(Point(0.0, 0.0), 1.0, 1.0)
        assert state.zoom_level == 1.0
        assert state.focus.focused_region_id is None

    def test_idempotent(self, state):
        state.zoom_about(2.0, Point(20.0, 20.0))
        state.go_home()
        first = state.viewport
        state.go_home()
        assert state.viewport == first
        assert state.zoom_level == 1.0

    def test_custom_home_width(self, surface):
        state = ViewportState(surface, ZoomBounds(), FocusState(), home_width=1.2)
        state.go_home()
        assert surface.viewport_width == 1.2


class TestAssign:
    def test_sets_origin_and_width(self, state, surface):
        state.assign(Point(0.1, 0.2), 0.4)
        assert surface.viewport_origin == (0.1, 0.2)
        assert surface.viewport_width == 0.4

    @pytest.mark.parametrize("width", [0.0, -0.5])
    def test_rejects_non_positive_width(self, state, surface, width):
        with pytest.raises(ValueError):
            state.assign(Point(0.0, 0.0), width)
        assert surface.viewport_width == 1.0

    def test_viewport_snapshot(self, state, surface):
        surface.aspect_ratio = 1.5
        state.assign(Point(0.1, 0.2), 0.4)
        assert state.viewport == Viewport(Point(0.1, 0.2), 0.4, 1.5)
