# -*- coding: utf-8 -*-
"""
DeepZoomViewer - Navigation facade binding a surface to the gesture engine.

Wires the viewport state, sub-region index, focus navigator, and
gesture controller around one multi-scale surface and manages the
source lifecycle: a source change detaches input handling, and a
successful image open rebuilds the region index and re-attaches it.

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
from typing import Any, Callable, Hashable, Optional

from dzviewer.core.config import ViewerConfig
from dzviewer.navigation.focus import FocusNavigator, NavigationTarget
from dzviewer.navigation.geometry import UNIT_RECT, Point, Rect
from dzviewer.navigation.gesture import GestureController
from dzviewer.navigation.region_index import SubRegionIndex
from dzviewer.navigation.surface import surface_size
from dzviewer.navigation.viewport_state import FocusState, ViewportState

_log = logging.getLogger("dzviewer.viewer")


@dataclass(frozen=True)
class ImageSource:
    """Descriptor of a deep-zoom image source.

    Parameters
    ----------
    uri : str
        Location of the image or collection descriptor.
    """

    uri: str


class DeepZoomViewer:
    """Interactive deep-zoom navigation over a multi-scale surface.

    Input events are ignored until the surface reports a successful
    image open.

    Parameters
    ----------
    surface : MultiScaleSurface
        Rendering surface.  Its viewport is reset to the home view.
    config : ViewerConfig, optional
        Navigation constants.
    clock : Callable[[], float], optional
        Monotonic time source in seconds.
    capture_pointer, release_pointer : Callable[[], None], optional
        Host hooks for pointer capture.
    on_viewport_changed : Callable[[], None], optional
        Called after every pan, zoom, focus, or home navigation.
    """

    def __init__(
        self,
        surface: Any,
        config: Optional[ViewerConfig] = None,
        clock: Callable[[], float] = time.monotonic,
        capture_pointer: Optional[Callable[[], None]] = None,
        release_pointer: Optional[Callable[[], None]] = None,
        on_viewport_changed: Optional[Callable[[], None]] = None,
    ) -> None:
        self._config = config or ViewerConfig()
        self._surface = surface
        self._on_viewport_changed = on_viewport_changed

        self.focus_state = FocusState()
        self.zoom_bounds = self._config.zoom_bounds()
        self.viewport = ViewportState(
            surface, self.zoom_bounds, self.focus_state,
            home_width=self._config.home_width,
        )
        self.index = SubRegionIndex(self.focus_state)
        self.navigator = FocusNavigator(
            self.viewport, self.focus_state,
            padding=self._config.focus_padding,
        )
        self.gestures = GestureController(
            self.viewport,
            self.index,
            self.navigator,
            config=self._config,
            clock=clock,
            capture_pointer=capture_pointer,
            release_pointer=release_pointer,
            on_viewport_changed=self._notify,
        )

        self._source: Optional[ImageSource] = None
        self._handlers_attached = False
        self.last_open_error: Optional[BaseException] = None

        surface.viewport_origin = Point(0.0, 0.0)
        surface.viewport_width = self._config.home_width

    # --- Properties ---

    @property
    def config(self) -> ViewerConfig:
        return self._config

    @property
    def surface(self) -> Any:
        return self._surface

    @property
    def handlers_attached(self) -> bool:
        """Whether pointer and wheel events are currently handled."""
        return self._handlers_attached

    @property
    def focused_region_id(self) -> Optional[Hashable]:
        return self.focus_state.focused_region_id

    @property
    def zoom_level(self) -> float:
        return self.zoom_bounds.current

    @property
    def source(self) -> Optional[ImageSource]:
        """The image source shown on the surface."""
        return self._source

    @source.setter
    def source(self, source: Optional[ImageSource]) -> None:
        if source == self._source:
            return
        _log.info("Image source changed: %s", source.uri if source else None)
        self._source = source
        self.rebuild_for_new_source()
        # The surface may report the open synchronously.
        self._surface.source = source

    @property
    def source_uri(self) -> Optional[str]:
        return self._source.uri if self._source is not None else None

    @source_uri.setter
    def source_uri(self, uri: Optional[str]) -> None:
        self.source = ImageSource(uri) if uri is not None else None

    # --- Source lifecycle ---

    def rebuild_for_new_source(self) -> None:
        """Detach input handling and re-index the surface's sub-images.

        Handlers stay detached until :meth:`on_image_open_succeeded`.
        """
        self._handlers_attached = False
        self.gestures.reset()
        self.index.rebuild_from_sub_images(self._surface.sub_images)

    def on_image_open_succeeded(self) -> None:
        """Index the opened image and start handling input."""
        self.last_open_error = None
        self.index.rebuild_from_sub_images(self._surface.sub_images)
        self._handlers_attached = True
        _log.info("Image opened, %d navigable region(s)", len(self.index))

    def on_image_open_failed(self, error: Optional[BaseException] = None) -> None:
        """Record an open failure; no navigation is set up."""
        self.last_open_error = error
        self._handlers_attached = False
        _log.warning("Image open failed for %s: %s", self.source_uri, error)

    # --- Input events ---

    def on_pointer_down(self, screen_point: Point) -> None:
        if self._handlers_attached:
            self.gestures.on_pointer_down(screen_point)

    def on_pointer_move(self, screen_point: Point) -> None:
        if self._handlers_attached:
            self.gestures.on_pointer_move(screen_point)

    def on_pointer_up(self, screen_point: Point) -> bool:
        if not self._handlers_attached:
            return False
        return self.gestures.on_pointer_up(screen_point)

    def on_wheel(self, delta: float, screen_point: Optional[Point] = None) -> Optional[float]:
        if not self._handlers_attached:
            return None
        return self.gestures.on_wheel(delta, screen_point)

    # --- Programmatic navigation ---

    def go_home(self) -> None:
        """Return to the home view."""
        self.navigator.go_home()
        self._notify()

    def focus_on(
        self,
        region_id: Hashable,
        focal_rect: Rect = UNIT_RECT,
    ) -> NavigationTarget:
        """Frame ``focal_rect`` of the region ``region_id``.

        Raises
        ------
        KeyError
            If no region with that id is indexed.
        """
        region = self.index.get(region_id)
        if region is None:
            raise KeyError(f"Unknown region: {region_id!r}")
        target = self.navigator.focus_on(region, focal_rect)
        self._notify()
        return target

    def zoom(self, factor: float, screen_point: Optional[Point] = None) -> float:
        """Zoom by ``factor`` about ``screen_point`` (default: surface centre)."""
        if screen_point is None:
            size = surface_size(self._surface)
            screen_point = Point(size.width / 2.0, size.height / 2.0)
        level = self.viewport.zoom_about(factor, Point(*screen_point))
        self._notify()
        return level

    def region_at(self, screen_point: Point) -> Optional[Hashable]:
        """Id of the region under ``screen_point``, if any."""
        logical = self._surface.element_to_logical_point(Point(*screen_point))
        return self.index.hit_test(logical)

    def _notify(self) -> None:
        if self._on_viewport_changed is not None:
            self._on_viewport_changed()
