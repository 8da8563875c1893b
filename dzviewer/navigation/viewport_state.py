# -*- coding: utf-8 -*-
"""
Viewport State - Clamped pan, zoom, and home mutators over a surface viewport.

The viewport (origin + width) lives on the multi-scale surface; this
module is the only writer of it during interaction.  Zoom is tracked as
a multiplicative level relative to the home width and clamped to
``ZoomBounds``.  Every mutator clears the focused region.

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
from dataclasses import dataclass
from typing import Any, Hashable, Optional

from dzviewer.navigation.geometry import Point
from dzviewer.navigation.surface import surface_size

_log = logging.getLogger("dzviewer.viewport_state")


@dataclass(frozen=True)
class Viewport:
    """Snapshot of the visible window into logical space.

    Parameters
    ----------
    origin : Point
        Logical coordinates of the top-left corner.  May lie anywhere;
        the image can be panned off-frame.
    width : float
        Logical width of the visible area.  Always positive.
    image_aspect_ratio : float
        Width over height of the whole image.
    """

    origin: Point
    width: float
    image_aspect_ratio: float = 1.0


@dataclass
class ZoomBounds:
    """Zoom limits and the current zoom level.

    Parameters
    ----------
    min : float
        Lowest zoom level.  Must be positive.
    max : float
        Highest zoom level.
    current : float
        Current zoom level, ``home_width / viewport_width`` (clamped) after
        a programmatic focus, otherwise the product of applied wheel factors.
    """

    min: float = 0.8
    max: float = 40.0
    current: float = 1.0

    def __post_init__(self) -> None:
        if self.min <= 0:
            raise ValueError(f"Zoom minimum must be positive, got {self.min!r}")
        if self.min > self.max:
            raise ValueError(
                f"Zoom minimum {self.min!r} exceeds maximum {self.max!r}"
            )

    def clamp(self, level: float) -> float:
        """Clamp ``level`` into ``[min, max]``."""
        return min(self.max, max(self.min, level))


@dataclass
class FocusState:
    """The region currently framed by a focus navigation, if any."""

    focused_region_id: Optional[Hashable] = None

    def clear(self) -> None:
        self.focused_region_id = None


class ViewportState:
    """Mutable viewport over a multi-scale surface.

    Parameters
    ----------
    surface : MultiScaleSurface
        Surface owning ``viewport_origin`` / ``viewport_width``.
    zoom_bounds : ZoomBounds
        Zoom limits; ``current`` is updated in place.
    focus : FocusState
        Shared focus state, cleared by every mutator here.
    home_width : float
        Viewport width of the home view.
    """

    def __init__(
        self,
        surface: Any,
        zoom_bounds: ZoomBounds,
        focus: FocusState,
        home_width: float = 1.0,
    ) -> None:
        self._surface = surface
        self.zoom_bounds = zoom_bounds
        self.focus = focus
        self.home_width = home_width

    @property
    def surface(self) -> Any:
        return self._surface

    @property
    def viewport(self) -> Viewport:
        """Current viewport read from the surface."""
        return Viewport(
            Point(*self._surface.viewport_origin),
            float(self._surface.viewport_width),
            float(self._surface.aspect_ratio),
        )

    @property
    def zoom_level(self) -> float:
        return self.zoom_bounds.current

    def pan(
        self,
        focal_screen_point: Point,
        drag_anchor_screen_point: Point,
        origin_at_drag_start: Point,
    ) -> Point:
        """Move the viewport so the anchored content follows the pointer.

        Both axes are scaled by the viewport width; the vertical delta
        is normalised by the surface height.

        Returns
        -------
        Point
            The new viewport origin.
        """
        self.focus.clear()
        size = surface_size(self._surface)
        width = float(self._surface.viewport_width)
        origin = Point(
            origin_at_drag_start.x
            - ((focal_screen_point.x - drag_anchor_screen_point.x) / size.width) * width,
            origin_at_drag_start.y
            - ((focal_screen_point.y - drag_anchor_screen_point.y) / size.height) * width,
        )
        self._surface.viewport_origin = origin
        return origin

    def zoom_about(self, zoom_factor: float, screen_point: Point) -> float:
        """Zoom by ``zoom_factor`` about ``screen_point``, clamped to bounds.

        The surface performs the anchored origin/width update; only the
        clamped factor actually applied is passed on.

        Returns
        -------
        float
            The new zoom level.
        """
        self.focus.clear()
        current = self.zoom_bounds.current
        new_zoom = self.zoom_bounds.clamp(current * zoom_factor)
        applied = new_zoom / current
        self.zoom_bounds.current = new_zoom

        logical = self._surface.element_to_logical_point(screen_point)
        self._surface.zoom_about_logical_point(applied, logical.x, logical.y)
        _log.debug(
            "Zoom %.4g -> %.4g (applied factor %.4g) about %s",
            current, new_zoom, applied, logical,
        )
        return new_zoom

    def go_home(self) -> None:
        """Reset to the home viewport and zoom level 1.0."""
        self.focus.clear()
        self._surface.viewport_width = self.home_width
        self._surface.viewport_origin = Point(0.0, 0.0)
        self.zoom_bounds.current = 1.0

    def assign(self, origin: Point, width: float) -> None:
        """Set origin and width together.

        Raises
        ------
        ValueError
            If ``width`` is not positive.
        """
        if not width > 0:
            raise ValueError(f"Viewport width must be positive, got {width!r}")
        self._surface.viewport_origin = Point(origin.x, origin.y)
        self._surface.viewport_width = width
