# -*- coding: utf-8 -*-
"""
Focus Navigator - Aspect-corrected framing of a sub-region and the home view.

Given a region and a unit-relative focal rectangle, computes the
viewport that frames the focal area on the current surface, pads it
for a visual margin, and assigns it.  The navigator also owns the
"currently focused region" bookkeeping.

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
from typing import NamedTuple, Optional, Tuple

from dzviewer.navigation.geometry import UNIT_RECT, Point, Rect, map_focal_rect
from dzviewer.navigation.region_index import SubRegion
from dzviewer.navigation.surface import surface_size
from dzviewer.navigation.viewport_state import FocusState, ViewportState

_log = logging.getLogger("dzviewer.focus")


class NavigationTarget(NamedTuple):
    """Viewport to apply atomically after a focus computation."""

    origin: Point
    width: float


def pad_viewport(
    width: float,
    origin: Point,
    scale: float,
    surface_aspect_ratio: float,
) -> Tuple[float, Point]:
    """Grow ``width`` by ``scale`` and recentre ``origin``.

    The horizontal origin moves by half the width delta; the vertical
    origin by half the delta divided by the surface aspect ratio.

    Returns
    -------
    Tuple[float, Point]
        Padded width and origin.
    """
    delta = width * scale - width
    return width + delta, Point(
        origin.x - delta / 2.0,
        origin.y - delta / (2.0 * surface_aspect_ratio),
    )


def compute_focus_target(
    region_rect: Rect,
    focal_rect: Rect,
    surface_aspect_ratio: float,
    padding: float = 1.3,
) -> NavigationTarget:
    """Viewport that frames ``focal_rect`` of a region on a surface.

    Parameters
    ----------
    region_rect : Rect
        Region bounds in logical space.
    focal_rect : Rect
        Unit-relative portion of the region to frame.
    surface_aspect_ratio : float
        Rendered surface width over height.
    padding : float
        Width scale applied after aspect correction.

    Returns
    -------
    NavigationTarget
    """
    display = map_focal_rect(focal_rect, region_rect)
    width = display.width
    x, y = display.x, display.y
    focal_aspect = display.aspect_ratio

    if surface_aspect_ratio > focal_aspect:
        width = (surface_aspect_ratio / focal_aspect) * display.width
        x += (display.width - width) / 2.0
    else:
        # Width is the tracked scale quantity; only the vertical origin
        # is recentred on the grown height.
        height = (focal_aspect / surface_aspect_ratio) * display.height
        y += (display.height - height) / 2.0

    width, origin = pad_viewport(width, Point(x, y), padding, surface_aspect_ratio)
    return NavigationTarget(origin, width)


class FocusNavigator:
    """Frames sub-regions and returns home.

    Parameters
    ----------
    viewport : ViewportState
        Viewport to assign targets to.
    focus : FocusState
        Shared focus state.
    padding : float
        Width scale leaving a margin around the framed area.
    """

    def __init__(
        self,
        viewport: ViewportState,
        focus: FocusState,
        padding: float = 1.3,
    ) -> None:
        self._viewport = viewport
        self._focus = focus
        self.padding = padding

    @property
    def focused_region_id(self):
        return self._focus.focused_region_id

    def compute_target(
        self,
        region: SubRegion,
        focal_rect: Rect = UNIT_RECT,
    ) -> NavigationTarget:
        """Target viewport for ``region`` without applying it."""
        size = surface_size(self._viewport.surface)
        return compute_focus_target(
            region.logical_rect, focal_rect, size.aspect_ratio, self.padding,
        )

    def focus_on(
        self,
        region: SubRegion,
        focal_rect: Rect = UNIT_RECT,
    ) -> NavigationTarget:
        """Frame ``focal_rect`` of ``region`` and mark the region focused.

        Returns
        -------
        NavigationTarget
            The viewport that was applied.
        """
        target = self.compute_target(region, focal_rect)
        self._viewport.assign(target.origin, target.width)
        bounds = self._viewport.zoom_bounds
        bounds.current = bounds.clamp(self._viewport.home_width / target.width)
        self._focus.focused_region_id = region.id
        _log.info(
            "Focused region %r: origin=(%.4g, %.4g) width=%.4g",
            region.id, target.origin.x, target.origin.y, target.width,
        )
        return target

    def go_home(self) -> None:
        """Return to the home viewport and clear focus."""
        self._viewport.go_home()
        self._focus.clear()
        _log.info("Returned to home view")

    def is_focused(self, region_id: Optional[object]) -> bool:
        return region_id is not None and region_id == self._focus.focused_region_id
