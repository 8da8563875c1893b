# -*- coding: utf-8 -*-
"""
Viewers Module - Qt components for displaying deep-zoom images.

Components
----------
- ``deep_zoom_canvas`` — QWidget surface hosting the navigation engine
  (DeepZoomCanvas, array_to_qimage, normalize_array)
- ``main_window`` — Standalone viewer application window and the
  ``dzviewer`` entry point

Dependencies
------------
PyQt6

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

from dzviewer.viewers.deep_zoom_canvas import DeepZoomCanvas
from dzviewer.viewers.main_window import ViewerMainWindow


def show(path=None, *, grid=1, block=True):
    """Open the deep-zoom viewer window.

    Parameters
    ----------
    path : str or Path, optional
        Image file to open.
    grid : int
        Split the image into a ``grid`` x ``grid`` region collage.
    block : bool
        If ``True`` (default), run the event loop until the window is
        closed.  If ``False``, return immediately.

    Returns
    -------
    ViewerMainWindow
        The viewer window instance.
    """
    import sys

    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    created_app = False
    if app is None:
        app = QApplication(sys.argv)
        created_app = True

    window = ViewerMainWindow(grid=grid)
    if path is not None:
        window.open_file(str(path))
    window.show()

    if block and created_app:
        app.exec()

    return window
