# -*- coding: utf-8 -*-
"""
Sub-Region Index - Hit testing against the navigable sub-images of a surface.

The index is a snapshot of the surface's sub-images with their logical
bounding rectangles, stored as an ``(N, 4)`` array so containment is a
single vectorised comparison.  On overlap the region inserted *last*
wins.

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
from typing import Any, Dict, Hashable, Iterable, Iterator, List, Optional

# Third-party
import numpy as np

from dzviewer.navigation.geometry import Point, Rect, region_logical_rect
from dzviewer.navigation.viewport_state import FocusState

_log = logging.getLogger("dzviewer.region_index")


@dataclass(frozen=True)
class SubRegion:
    """A navigable area inside the image.

    Parameters
    ----------
    id : Hashable
        Region identifier.
    logical_rect : Rect
        Bounding rectangle in the parent's logical space.
    aspect_ratio : float
        Width over height of the region's own image.
    """

    id: Hashable
    logical_rect: Rect
    aspect_ratio: float

    @classmethod
    def from_sub_image(cls, sub_image: Any) -> 'SubRegion':
        """Derive a region from a surface sub-image record."""
        return cls(
            id=sub_image.id,
            logical_rect=region_logical_rect(sub_image),
            aspect_ratio=float(sub_image.aspect_ratio),
        )


class SubRegionIndex:
    """Read-only set of sub-regions between rebuilds.

    Parameters
    ----------
    focus : FocusState, optional
        Focus state to invalidate when a rebuild drops the focused region.
    regions : Iterable[SubRegion], optional
        Initial contents.
    """

    def __init__(
        self,
        focus: Optional[FocusState] = None,
        regions: Optional[Iterable[SubRegion]] = None,
    ) -> None:
        self._focus = focus
        self._regions: List[SubRegion] = []
        self._by_id: Dict[Hashable, SubRegion] = {}
        # Columns: left, top, right, bottom
        self._bounds = np.empty((0, 4), dtype=np.float64)
        if regions is not None:
            self.rebuild(regions)

    def __len__(self) -> int:
        return len(self._regions)

    def __iter__(self) -> Iterator[SubRegion]:
        return iter(self._regions)

    def __contains__(self, region_id: object) -> bool:
        return region_id in self._by_id

    def get(self, region_id: Hashable) -> Optional[SubRegion]:
        return self._by_id.get(region_id)

    def rebuild(self, regions: Iterable[SubRegion]) -> None:
        """Replace the index contents.

        A focused region id that is no longer present is cleared.

        Parameters
        ----------
        regions : Iterable[SubRegion]
            New regions, in priority order (last wins on overlap).
        """
        regions = list(regions)
        if regions:
            bounds = np.array(
                [
                    (r.logical_rect.x, r.logical_rect.y,
                     r.logical_rect.right, r.logical_rect.bottom)
                    for r in regions
                ],
                dtype=np.float64,
            )
        else:
            bounds = np.empty((0, 4), dtype=np.float64)

        self._regions = regions
        self._by_id = {r.id: r for r in regions}
        self._bounds = bounds
        _log.info("Sub-region index rebuilt with %d region(s)", len(regions))

        if (self._focus is not None
                and self._focus.focused_region_id is not None
                and self._focus.focused_region_id not in self._by_id):
            _log.debug(
                "Focused region %r no longer present, clearing focus",
                self._focus.focused_region_id,
            )
            self._focus.clear()

    def rebuild_from_sub_images(self, sub_images: Iterable[Any]) -> None:
        """Rebuild from surface sub-image records."""
        self.rebuild(SubRegion.from_sub_image(s) for s in sub_images)

    def hit_test(self, logical_point: Point) -> Optional[Hashable]:
        """Return the id of the last region containing ``logical_point``.

        Containment includes the rectangle edges.

        Returns
        -------
        Optional[Hashable]
            Region id, or ``None`` if no region contains the point.
        """
        if not self._regions:
            return None
        x, y = logical_point
        b = self._bounds
        inside = (
            (b[:, 0] <= x) & (x <= b[:, 2])
            & (b[:, 1] <= y) & (y <= b[:, 3])
        )
        hits = np.flatnonzero(inside)
        if hits.size == 0:
            return None
        return self._regions[int(hits[-1])].id
