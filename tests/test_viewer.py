# -*- coding: utf-8 -*-
"""
Tests for dzviewer.navigation.viewer — source lifecycle, handler gating,
and programmatic navigation.

Created
-------
2026-10-19
"""

from unittest.mock import MagicMock

import pytest

from dzviewer.core.config import ViewerConfig
from dzviewer.navigation.geometry import Point, Rect
from dzviewer.navigation.surface import LogicalSurface, SubImage
from dzviewer.navigation.viewer import DeepZoomViewer, ImageSource


@pytest.fixture
def changed():
    return MagicMock()


@pytest.fixture
def viewer(collage_surface, clock, changed):
    return DeepZoomViewer(collage_surface, clock=clock, on_viewport_changed=changed)


@pytest.fixture
def opened(viewer):
    viewer.on_image_open_succeeded()
    return viewer


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

class TestInit:
    def test_resets_surface_to_home(self, collage_surface):
        collage_surface.viewport_origin = Point(0.3, 0.3)
        collage_surface.viewport_width = 0.2
        viewer = DeepZoomViewer(collage_surface)
        assert collage_surface.viewport_origin == (0.0, 0.0)
        assert collage_surface.viewport_width == 1.0
        assert viewer.zoom_level == 1.0

    def test_uses_config(self, collage_surface):
        cfg = ViewerConfig(zoom_min=0.5, zoom_max=4.0, home_width=1.25)
        viewer = DeepZoomViewer(collage_surface, config=cfg)
        assert viewer.config is cfg
        assert (viewer.zoom_bounds.min, viewer.zoom_bounds.max) == (0.5, 4.0)
        assert collage_surface.viewport_width == 1.25

    def test_handlers_detached_until_open(self, viewer):
        assert not viewer.handlers_attached
        assert viewer.source is None
        assert viewer.source_uri is None


# ---------------------------------------------------------------------------
# Handler gating
# ---------------------------------------------------------------------------

class TestGating:
    def test_events_ignored_before_open(self, viewer, collage_surface):
        viewer.on_pointer_move(Point(30.0, 30.0))
        viewer.on_pointer_down(Point(30.0, 30.0))
        assert viewer.on_pointer_up(Point(30.0, 30.0)) is False
        assert viewer.on_wheel(120.0) is None
        assert viewer.gestures.state.last_pointer_screen_point is None
        assert collage_surface.viewport_width == 1.0

    def test_open_succeeded_attaches_and_indexes(self, opened):
        assert opened.handlers_attached
        assert len(opened.index) == 2
        assert opened.region_at(Point(30.0, 30.0)) == "a"

    def test_click_after_open(self, opened, changed):
        opened.on_pointer_move(Point(30.0, 30.0))
        opened.on_pointer_down(Point(30.0, 30.0))
        assert opened.on_pointer_up(Point(30.0, 30.0)) is True
        assert opened.focused_region_id == "a"
        changed.assert_called_once()

    def test_wheel_after_open(self, opened):
        assert opened.on_wheel(-1.0) == pytest.approx(0.8)
        assert opened.zoom_level == pytest.approx(0.8)

    def test_open_failed(self, viewer, caplog):
        error = OSError("unreadable")
        with caplog.at_level("WARNING"):
            viewer.on_image_open_failed(error)
        assert not viewer.handlers_attached
        assert viewer.last_open_error is error
        assert "Image open failed" in caplog.text
        assert viewer.on_wheel(1.0) is None

    def test_open_succeeded_clears_last_error(self, viewer):
        viewer.on_image_open_failed(OSError("x"))
        viewer.on_image_open_succeeded()
        assert viewer.last_open_error is None


# ---------------------------------------------------------------------------
# Source changes
# ---------------------------------------------------------------------------

class TestSource:
    def test_source_change_detaches(self, opened, collage_surface):
        opened.on_pointer_down(Point(10.0, 10.0))
        opened.source = ImageSource("collection.dzc")

        assert not opened.handlers_attached
        assert opened.gestures.state.is_pointer_down is False
        assert collage_surface.source == ImageSource("collection.dzc")
        assert opened.source_uri == "collection.dzc"

    def test_source_change_mid_press_releases_capture(self, collage_surface, clock):
        hooks = MagicMock()
        viewer = DeepZoomViewer(
            collage_surface, clock=clock,
            capture_pointer=hooks.capture, release_pointer=hooks.release,
        )
        viewer.on_image_open_succeeded()
        viewer.on_pointer_down(Point(30.0, 30.0))

        viewer.source = ImageSource("next.dzi")
        viewer.on_image_open_succeeded()
        assert viewer.on_pointer_up(Point(30.0, 30.0)) is False

        assert hooks.capture.call_count == 1
        assert hooks.release.call_count == hooks.capture.call_count

    def test_source_uri_setter(self, viewer, collage_surface):
        viewer.source_uri = "image.dzi"
        assert viewer.source == ImageSource("image.dzi")
        assert collage_surface.source == ImageSource("image.dzi")
        viewer.source_uri = None
        assert viewer.source is None

    def test_same_source_is_noop(self, viewer):
        viewer.source_uri = "image.dzi"
        viewer.on_image_open_succeeded()
        viewer.source = ImageSource("image.dzi")
        assert viewer.handlers_attached

    def test_synchronous_open_keeps_handlers(self, collage_surface):
        class _SyncSurface(LogicalSurface):
            viewer = None

            @property
            def source(self):
                return self._src

            @source.setter
            def source(self, value):
                self._src = value
                if value is not None and self.viewer is not None:
                    self.viewer.on_image_open_succeeded()

        surface = _SyncSurface(100, 100, sub_images=collage_surface.sub_images)
        viewer = DeepZoomViewer(surface)
        surface.viewer = viewer
        viewer.source_uri = "image.dzi"
        assert viewer.handlers_attached

    def test_rebuild_drops_stale_focus(self, opened, collage_surface):
        opened.focus_on("a")
        collage_surface.set_sub_images(
            [s for s in collage_surface.sub_images if s.id == "b"]
        )
        opened.rebuild_for_new_source()
        assert opened.focused_region_id is None
        assert "a" not in opened.index
        assert not opened.handlers_attached

    def test_new_source_sub_images_indexed_on_open(self, opened, collage_surface):
        opened.source_uri = "other.dzc"
        collage_surface.set_sub_images([
            SubImage.from_logical_rect("c", Rect(0.0, 0.0, 0.1, 0.1)),
        ])
        opened.on_image_open_succeeded()
        assert opened.region_at(Point(5.0, 5.0)) == "c"
        assert opened.region_at(Point(30.0, 30.0)) is None


# ---------------------------------------------------------------------------
# Programmatic navigation
# ---------------------------------------------------------------------------

class TestNavigation:
    def test_focus_on(self, opened, collage_surface, changed):
        target = opened.focus_on("a")
        assert target.width == pytest.approx(0.39)
        assert collage_surface.viewport_origin == pytest.approx((0.155, 0.155))
        assert opened.focused_region_id == "a"
        changed.assert_called_once()

    def test_focus_on_focal_rect(self, opened, collage_surface):
        opened.focus_on("a", Rect(0.0, 0.0, 0.5, 0.5))
        assert collage_surface.viewport_width == pytest.approx(0.15 * 1.3)

    def test_focus_on_unknown_region(self, opened):
        with pytest.raises(KeyError):
            opened.focus_on("missing")

    def test_go_home(self, opened, collage_surface, changed):
        opened.focus_on("b")
        opened.go_home()
        assert opened.focused_region_id is None
        assert collage_surface.viewport_width == 1.0
        assert changed.call_count == 2

    def test_zoom_defaults_to_centre(self, viewer, collage_surface):
        assert viewer.zoom(2.0) == pytest.approx(2.0)
        assert collage_surface.viewport_origin == pytest.approx((0.25, 0.25))
        assert collage_surface.viewport_width == pytest.approx(0.5)

    def test_zoom_clamped(self, viewer):
        assert viewer.zoom(1000.0) == pytest.approx(40.0)

    def test_zoom_about_point(self, viewer, collage_surface):
        viewer.zoom(2.0, Point(0.0, 0.0))
        assert collage_surface.viewport_origin == pytest.approx((0.0, 0.0))

    def test_region_at(self, opened):
        assert opened.region_at(Point(70.0, 70.0)) == "b"
        assert opened.region_at(Point(95.0, 5.0)) is None
