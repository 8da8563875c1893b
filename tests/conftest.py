# -*- coding: utf-8 -*-
"""
Shared fixtures for dzviewer tests.

Provides a deterministic clock, a small collage surface, and a
QApplication fixture for the Qt widget tests.

Created
-------
2026-10-19
"""

import os
import sys

import pytest

from dzviewer.navigation.geometry import Rect
from dzviewer.navigation.surface import LogicalSurface, SubImage


class FakeClock:
    """Manually advanced time source, in seconds."""

    def __init__(self, t: float = 0.0) -> None:
        self.t = t

    def __call__(self) -> float:
        return self.t


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def collage_surface():
    """100 x 100 px surface with two non-overlapping regions.

    ``"a"`` spans logical (0.2, 0.2)-(0.5, 0.5); ``"b"`` spans
    (0.6, 0.6)-(0.8, 0.8).  At the home view one logical unit is
    100 px on both axes.
    """
    return LogicalSurface(
        100, 100,
        sub_images=[
            SubImage.from_logical_rect("a", Rect(0.2, 0.2, 0.3, 0.3)),
            SubImage.from_logical_rect("b", Rect(0.6, 0.6, 0.2, 0.2)),
        ],
    )


@pytest.fixture(scope="session")
def qapp():
    """Create a QApplication for the test session."""
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    try:
        from PyQt6.QtWidgets import QApplication
    except ImportError:
        pytest.skip("Qt not available")
        return

    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    yield app
