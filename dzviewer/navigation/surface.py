# -*- coding: utf-8 -*-
"""
Multi-Scale Surface - Contract for the tile-pyramid rendering surface.

The navigation engine never paints tiles itself.  It reads and writes
the viewport of an external *multi-scale surface* and asks it for point
projection and anchored zoom.  ``MultiScaleSurface`` documents that
contract; ``LogicalSurface`` is a pure-Python implementation used by the
Qt canvas as its viewport model and by the tests as a fake.

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
from dataclasses import dataclass
from typing import Any, Hashable, Iterable, List, Optional, Protocol, Sequence

from dzviewer.navigation.geometry import (
    Point,
    Rect,
    Size,
    logical_to_screen,
    screen_to_logical,
)


@dataclass(frozen=True)
class SubImage:
    """A navigable image placed inside the composite surface.

    Placement is expressed the way deep-zoom collections store it: as
    the viewport at which this sub-image would exactly fill the parent.

    Parameters
    ----------
    id : Hashable
        Identifier, unique within one surface.
    viewport_origin : Point
        Sub-image viewport origin (non-positive for on-image placement).
    viewport_width : float
        Sub-image viewport width.  Must be positive.
    aspect_ratio : float
        Width over height of the sub-image.
    """

    id: Hashable
    viewport_origin: Point
    viewport_width: float
    aspect_ratio: float

    @classmethod
    def from_logical_rect(cls, id: Hashable, rect: Rect) -> 'SubImage':
        """Build a sub-image occupying ``rect`` in parent logical space."""
        vw = 1.0 / rect.width
        return cls(
            id=id,
            viewport_origin=Point(-rect.x * vw, -rect.y * vw),
            viewport_width=vw,
            aspect_ratio=rect.width / rect.height,
        )


class MultiScaleSurface(Protocol):
    """Operations the navigation engine requires from a rendering surface."""

    viewport_origin: Point
    viewport_width: float

    @property
    def actual_width(self) -> float: ...

    @property
    def actual_height(self) -> float: ...

    @property
    def aspect_ratio(self) -> float: ...

    @property
    def sub_images(self) -> Iterable[Any]: ...

    def element_to_logical_point(self, screen_point: Point) -> Point: ...

    def logical_to_element_point(self, logical_point: Point) -> Point: ...

    def zoom_about_logical_point(
        self, factor: float, x: float, y: float,
    ) -> None: ...


def surface_size(surface: Any) -> Size:
    """Rendered size of ``surface`` as a :class:`Size`."""
    return Size(float(surface.actual_width), float(surface.actual_height))


class LogicalSurface:
    """In-memory multi-scale surface with no rendering.

    Holds the viewport, the rendered size, and the sub-image list, and
    implements projection and anchored zoom with the same conventions as
    :mod:`dzviewer.navigation.geometry`.

    Parameters
    ----------
    actual_width : float
        Rendered width in pixels.
    actual_height : float
        Rendered height in pixels.
    aspect_ratio : float
        Width over height of the whole image.
    sub_images : Sequence[SubImage], optional
        Navigable sub-images, in collection order.
    """

    def __init__(
        self,
        actual_width: float = 800.0,
        actual_height: float = 600.0,
        aspect_ratio: float = 1.0,
        sub_images: Optional[Sequence[SubImage]] = None,
    ) -> None:
        self.actual_width = float(actual_width)
        self.actual_height = float(actual_height)
        self.aspect_ratio = float(aspect_ratio)
        self.viewport_origin = Point(0.0, 0.0)
        self.viewport_width = 1.0
        self.source: Any = None
        self._sub_images: List[SubImage] = list(sub_images or [])

    @property
    def sub_images(self) -> List[SubImage]:
        """Sub-images in collection order."""
        return self._sub_images

    def set_sub_images(self, sub_images: Iterable[SubImage]) -> None:
        """Replace the sub-image collection (e.g. a new source opened)."""
        self._sub_images = list(sub_images)

    def resize(self, actual_width: float, actual_height: float) -> None:
        """Update the rendered size."""
        self.actual_width = float(actual_width)
        self.actual_height = float(actual_height)

    @property
    def size(self) -> Size:
        return surface_size(self)

    def element_to_logical_point(self, screen_point: Point) -> Point:
        return screen_to_logical(screen_point, self._view(), self.size)

    def logical_to_element_point(self, logical_point: Point) -> Point:
        return logical_to_screen(logical_point, self._view(), self.size)

    def zoom_about_logical_point(self, factor: float, x: float, y: float) -> None:
        """Zoom by ``factor`` keeping logical point ``(x, y)`` fixed on screen.

        ``factor > 1`` zooms in (the viewport narrows).
        """
        ox, oy = self.viewport_origin
        self.viewport_origin = Point(
            x - (x - ox) / factor,
            y - (y - oy) / factor,
        )
        self.viewport_width = self.viewport_width / factor

    def _view(self) -> Any:
        return _ViewportView(self.viewport_origin, self.viewport_width)


class _ViewportView:
    """Minimal origin/width pair for the geometry helpers."""

    __slots__ = ('origin', 'width')

    def __init__(self, origin: Point, width: float) -> None:
        self.origin = origin
        self.width = width


def grid_sub_images(
    rows: int,
    cols: int,
    image_aspect_ratio: float = 1.0,
) -> List[SubImage]:
    """Split the whole image into a ``rows`` x ``cols`` collage of sub-images.

    The image spans ``[0, 1]`` horizontally and ``[0, 1 / aspect]``
    vertically in logical space.  Ids are ``row * cols + col``, in
    row-major order.

    Raises
    ------
    ValueError
        If ``rows`` or ``cols`` is less than 1.
    """
    if rows < 1 or cols < 1:
        raise ValueError(f"Grid must be at least 1x1, got {rows}x{cols}")
    cell_w = 1.0 / cols
    cell_h = (1.0 / image_aspect_ratio) / rows
    return [
        SubImage.from_logical_rect(
            r * cols + c, Rect(c * cell_w, r * cell_h, cell_w, cell_h),
        )
        for r in range(rows)
        for c in range(cols)
    ]
