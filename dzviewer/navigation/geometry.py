# -*- coding: utf-8 -*-
"""
Logical Geometry - Coordinate transforms between screen, logical, and
viewport space.

Logical space spans the whole multi-resolution image.  Both axes are
scaled by the viewport *width*: the vertical extent of the visible area
is derived from the surface aspect ratio rather than tracked separately.
All functions here are pure and have no Qt dependency.

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
from typing import Any, NamedTuple


class Point(NamedTuple):
    """A 2-D point (screen pixels or logical units)."""

    x: float
    y: float


class Size(NamedTuple):
    """Rendered surface size in screen pixels."""

    width: float
    height: float

    @property
    def aspect_ratio(self) -> float:
        """Width over height."""
        return self.width / self.height


class Rect(NamedTuple):
    """Axis-aligned rectangle given by its top-left corner and size."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def aspect_ratio(self) -> float:
        """Width over height."""
        return self.width / self.height


#: Focal rectangle selecting a whole region.
UNIT_RECT = Rect(0.0, 0.0, 1.0, 1.0)


def screen_to_logical(
    screen_point: Point,
    viewport: Any,
    surface_size: Size,
) -> Point:
    """Convert a screen position to logical image coordinates.

    Parameters
    ----------
    screen_point : Point
        Position in surface pixels.
    viewport : Viewport-like
        Object with ``origin`` (logical top-left corner) and ``width``
        (logical width of the visible area).
    surface_size : Size
        Rendered surface size.  Must be non-zero.

    Returns
    -------
    Point
        Logical coordinates under ``screen_point``.
    """
    origin = viewport.origin
    return Point(
        origin.x + (screen_point.x / surface_size.width) * viewport.width,
        origin.y + (screen_point.y / surface_size.height) * viewport.width,
    )


def logical_to_screen(
    logical_point: Point,
    viewport: Any,
    surface_size: Size,
) -> Point:
    """Inverse of :func:`screen_to_logical`."""
    origin = viewport.origin
    return Point(
        (logical_point.x - origin.x) / viewport.width * surface_size.width,
        (logical_point.y - origin.y) / viewport.width * surface_size.height,
    )


def region_logical_rect(sub_image: Any) -> Rect:
    """Bounding rectangle of a sub-image in the parent's logical space.

    A sub-image describes its placement with its *own* viewport: the
    origin and width at which the sub-image would fill the parent
    surface.  Inverting that viewport gives the rectangle the sub-image
    occupies in parent coordinates.

    Parameters
    ----------
    sub_image : SubImage-like
        Object with ``viewport_origin``, ``viewport_width`` and
        ``aspect_ratio``.

    Returns
    -------
    Rect
    """
    origin = sub_image.viewport_origin
    vw = sub_image.viewport_width
    return Rect(
        origin.x / -vw,
        origin.y / -vw,
        1.0 / vw,
        1.0 / (vw * sub_image.aspect_ratio),
    )


def map_focal_rect(focal_rect: Rect, region_rect: Rect) -> Rect:
    """Map a unit-relative focal rectangle into ``region_rect``'s space."""
    return Rect(
        region_rect.x + region_rect.width * focal_rect.x,
        region_rect.y + region_rect.height * focal_rect.y,
        region_rect.width * focal_rect.width,
        region_rect.height * focal_rect.height,
    )
