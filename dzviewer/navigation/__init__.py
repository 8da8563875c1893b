# -*- coding: utf-8 -*-
"""
Navigation Module - Viewport navigation engine for deep-zoom images.

Maps pointer gestures (drag, wheel, click) onto a normalised logical
viewport over a multi-resolution surface and computes focus and home
targets.  Nothing here depends on Qt; the surface is reached through
the ``MultiScaleSurface`` contract.

Components
----------
- ``geometry`` — screen / logical coordinate transforms, region rects
- ``surface`` — surface contract and the in-memory ``LogicalSurface``
- ``viewport_state`` — clamped pan, zoom, and home mutators
- ``region_index`` — sub-region hit testing (last match wins)
- ``focus`` — aspect-corrected region framing
- ``gesture`` — pointer/wheel state machine with click debouncing
- ``viewer`` — ``DeepZoomViewer`` facade and source lifecycle

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

from dzviewer.navigation.geometry import (
    UNIT_RECT,
    Point,
    Rect,
    Size,
    logical_to_screen,
    map_focal_rect,
    region_logical_rect,
    screen_to_logical,
)
from dzviewer.navigation.surface import (
    LogicalSurface,
    MultiScaleSurface,
    SubImage,
    grid_sub_images,
)
from dzviewer.navigation.viewport_state import (
    FocusState,
    Viewport,
    ViewportState,
    ZoomBounds,
)
from dzviewer.navigation.region_index import SubRegion, SubRegionIndex
from dzviewer.navigation.focus import FocusNavigator, NavigationTarget
from dzviewer.navigation.gesture import GestureController, GesturePhase, GestureState
from dzviewer.navigation.viewer import DeepZoomViewer, ImageSource

__all__ = [
    "UNIT_RECT", "Point", "Rect", "Size",
    "logical_to_screen", "map_focal_rect", "region_logical_rect",
    "screen_to_logical",
    "LogicalSurface", "MultiScaleSurface", "SubImage", "grid_sub_images",
    "FocusState", "Viewport", "ViewportState", "ZoomBounds",
    "SubRegion", "SubRegionIndex",
    "FocusNavigator", "NavigationTarget",
    "GestureController", "GesturePhase", "GestureState",
    "DeepZoomViewer", "ImageSource",
]
