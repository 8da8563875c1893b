# -*- coding: utf-8 -*-
"""
dzviewer - Deep-zoom image viewer with gesture-driven navigation.

A viewport navigation engine for multi-resolution tiled images: drag
to pan, wheel to zoom about the pointer, click a sub-image to frame it,
click again to return home.  The engine in ``dzviewer.navigation`` is
pure Python; ``dzviewer.viewers`` hosts it in a PyQt6 widget.

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

__version__ = "0.1.0"


def show(path=None, *, grid=1, block=True):
    """Open an image in the deep-zoom viewer window.

    Re-exported from ``dzviewer.viewers.show``.
    See :func:`dzviewer.viewers.show` for full documentation.
    """
    from dzviewer.viewers import show as _show
    return _show(path, grid=grid, block=block)


__all__: list = ["show"]
