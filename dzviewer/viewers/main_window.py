# -*- coding: utf-8 -*-
"""
ViewerMainWindow - Standalone deep-zoom viewer application window.

Hosts a ``DeepZoomCanvas`` with Open, Home, and zoom actions and a
status bar reporting the zoom level and focused region.  Also provides
the ``dzviewer`` console entry point.

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

# Standard library
import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Optional

_log = logging.getLogger("dzviewer.main_window")

try:
    from PyQt6.QtWidgets import (
        QApplication,
        QFileDialog,
        QMainWindow,
        QMessageBox,
        QToolBar,
    )
    from PyQt6.QtGui import QAction, QKeySequence

    _QT_AVAILABLE = True
except ImportError:
    _QT_AVAILABLE = False

from dzviewer.core.config import ViewerConfig, load_config


def _build_arg_parser() -> argparse.ArgumentParser:
    """Build the argument parser for dzviewer."""
    parser = argparse.ArgumentParser(
        prog="dzviewer",
        description="Deep-zoom image viewer: drag to pan, wheel to zoom, "
        "click a region to focus it, click again to return home.",
    )
    parser.add_argument(
        "file",
        nargs="?",
        default=None,
        help="Image file to open (any format Qt can read).",
    )
    parser.add_argument(
        "--grid",
        type=int,
        default=1,
        metavar="N",
        help="Split the image into an N x N collage of clickable "
        "regions (default: 1, no regions).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        metavar="PATH",
        help="Navigation config JSON (default: ~/.dzviewer/dzviewer_config.json).",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set the logging level (default: WARNING).",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        metavar="PATH",
        help="Write log output to a file (in addition to stderr).",
    )
    return parser


if _QT_AVAILABLE:
    from dzviewer.viewers.deep_zoom_canvas import DeepZoomCanvas

    _IMAGE_FILTER = (
        "Images (*.png *.jpg *.jpeg *.bmp *.tif *.tiff *.gif);;"
        "All Files (*)"
    )

    class ViewerMainWindow(QMainWindow):
        """Top-level deep-zoom viewer window.

        Parameters
        ----------
        config : ViewerConfig, optional
            Navigation constants for the canvas.
        grid : int
            Region collage size applied to opened images.
        parent : QWidget, optional
            Parent widget.
        """

        def __init__(
            self,
            config: Optional[ViewerConfig] = None,
            grid: int = 1,
            parent: Optional[Any] = None,
        ) -> None:
            super().__init__(parent)

            self.setWindowTitle("Deep Zoom Viewer")
            self.resize(1000, 800)

            self.canvas = DeepZoomCanvas(config=config, parent=self)
            self.canvas.set_grid(grid, grid)
            self.setCentralWidget(self.canvas)

            self._create_actions()
            self._create_toolbar()
            self._create_menus()

            self.canvas.viewport_changed.connect(self._update_status)
            self.canvas.image_open_failed.connect(self._on_open_failed)

            self.statusBar().showMessage("Ready")

        # --- Public API ---

        def open_file(self, filepath: str) -> None:
            """Open an image file in the canvas."""
            _log.info("open_file(%r)", filepath)
            self.canvas.open_file(filepath)
            if self.canvas.viewer.handlers_attached:
                self.setWindowTitle(f"Deep Zoom Viewer \u2014 {filepath}")

        # --- Actions ---

        def _create_actions(self) -> None:
            """Create menu/toolbar actions."""
            self._open_action = QAction("&Open Image...", self)
            self._open_action.setShortcut(QKeySequence.StandardKey.Open)
            self._open_action.triggered.connect(self._on_open)

            self._exit_action = QAction("E&xit", self)
            self._exit_action.setShortcut(QKeySequence.StandardKey.Quit)
            self._exit_action.triggered.connect(self.close)

            self._home_action = QAction("&Home", self)
            self._home_action.setShortcut(QKeySequence("Ctrl+0"))
            self._home_action.triggered.connect(self.canvas.viewer.go_home)

            cfg = self.canvas.viewer.config
            self._zoom_in_action = QAction("Zoom &In", self)
            self._zoom_in_action.setShortcut(QKeySequence.StandardKey.ZoomIn)
            self._zoom_in_action.triggered.connect(
                lambda: self.canvas.viewer.zoom(cfg.wheel_zoom_in)
            )

            self._zoom_out_action = QAction("Zoom &Out", self)
            self._zoom_out_action.setShortcut(
                QKeySequence.StandardKey.ZoomOut,
            )
            self._zoom_out_action.triggered.connect(
                lambda: self.canvas.viewer.zoom(cfg.wheel_zoom_out)
            )

            self._regions_action = QAction("Show &Regions", self)
            self._regions_action.setCheckable(True)
            self._regions_action.setChecked(self.canvas.show_regions)
            self._regions_action.toggled.connect(self._on_toggle_regions)

        def _create_menus(self) -> None:
            """Build the menu bar."""
            file_menu = self.menuBar().addMenu("&File")
            file_menu.addAction(self._open_action)
            file_menu.addSeparator()
            file_menu.addAction(self._exit_action)

            view_menu = self.menuBar().addMenu("&View")
            view_menu.addAction(self._home_action)
            view_menu.addAction(self._zoom_in_action)
            view_menu.addAction(self._zoom_out_action)
            view_menu.addSeparator()
            view_menu.addAction(self._regions_action)
            view_menu.addAction(self._toolbar.toggleViewAction())

        def _create_toolbar(self) -> None:
            """Build the main toolbar."""
            self._toolbar = QToolBar("Main", self)
            self._toolbar.setMovable(False)
            self.addToolBar(self._toolbar)

            self._toolbar.addAction(self._open_action)
            self._toolbar.addSeparator()
            self._toolbar.addAction(self._home_action)
            self._toolbar.addAction(self._zoom_in_action)
            self._toolbar.addAction(self._zoom_out_action)

        # --- Slots ---

        def _on_open(self) -> None:
            filepath, _ = QFileDialog.getOpenFileName(
                self, "Open Image", "", _IMAGE_FILTER,
            )
            if filepath:
                self.open_file(filepath)

        def _on_open_failed(self, error: Any) -> None:
            _log.error("Open failed: %s", error)
            QMessageBox.critical(
                self, "Open Error", f"Could not open image:\n\n{error}",
            )

        def _on_toggle_regions(self, checked: bool) -> None:
            self.canvas.show_regions = checked
            self.canvas.update()

        def _update_status(self) -> None:
            viewer = self.canvas.viewer
            focused = viewer.focused_region_id
            msg = f"Zoom: {viewer.zoom_level:.2f}x"
            if focused is not None:
                msg += f"  |  Region: {focused}"
            self.statusBar().showMessage(msg)


    def main() -> None:
        """Entry point for the dzviewer command."""
        args = _build_arg_parser().parse_args()

        # Configure logging
        log_level = getattr(logging, args.log_level, logging.WARNING)
        log_fmt = "%(asctime)s %(name)s %(levelname)s: %(message)s"
        log_datefmt = "%H:%M:%S"

        handlers: list = [logging.StreamHandler()]
        if args.log_file is not None:
            handlers.append(logging.FileHandler(args.log_file))

        logging.basicConfig(
            level=log_level,
            format=log_fmt,
            datefmt=log_datefmt,
            handlers=handlers,
        )

        _log.info("dzviewer starting, log level=%s", args.log_level)

        app = QApplication(sys.argv)
        window = ViewerMainWindow(
            config=load_config(args.config),
            grid=max(1, args.grid),
        )

        if args.file is not None:
            window.open_file(args.file)

        window.show()
        sys.exit(app.exec())

else:

    class ViewerMainWindow:  # type: ignore[no-redef]
        """Stub when Qt is unavailable."""

        def __init__(self, *args: Any, **kwargs: Any) -> None:
            raise ImportError("Qt is required for ViewerMainWindow")

    def main() -> None:
        """Stub entry point."""
        _build_arg_parser().parse_args()
        print("Error: PyQt6 is required. Install with: pip install PyQt6")
        sys.exit(1)
