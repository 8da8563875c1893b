# -*- coding: utf-8 -*-
"""
DeepZoomCanvas - Qt widget hosting the deep-zoom navigation engine.

The widget is the multi-scale surface: it owns a ``LogicalSurface`` for
viewport bookkeeping, reports its own pixel size as the rendered size,
paints the source image projected through the current viewport, and
forwards mouse and wheel events to a ``DeepZoomViewer``.

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
import logging
from typing import Any, List, Optional, Sequence

# Third-party
import numpy as np

try:
    from PyQt6.QtWidgets import QWidget
    from PyQt6.QtGui import QColor, QImage, QPainter, QPen
    from PyQt6.QtCore import QRectF, Qt, pyqtSignal as Signal

    _QT_AVAILABLE = True
except ImportError:
    _QT_AVAILABLE = False

from dzviewer.core.config import ViewerConfig
from dzviewer.navigation.geometry import Point, region_logical_rect
from dzviewer.navigation.surface import LogicalSurface, SubImage, grid_sub_images
from dzviewer.navigation.viewer import DeepZoomViewer, ImageSource

_log = logging.getLogger("dzviewer.deep_zoom_canvas")


# ---------------------------------------------------------------------------
# Pure functions (no Qt dependency)
# ---------------------------------------------------------------------------

def normalize_array(arr: np.ndarray) -> np.ndarray:
    """Min/max stretch an image array to display-ready uint8.

    Parameters
    ----------
    arr : np.ndarray
        ``(H, W)`` grayscale or ``(H, W, 3)`` RGB.  Complex input is
        displayed as magnitude.

    Returns
    -------
    np.ndarray
        uint8 array of the same shape.
    """
    if np.iscomplexobj(arr):
        arr = np.abs(arr)
    if arr.dtype == np.uint8:
        return arr

    arr = arr.astype(np.float64)
    vmin = float(np.nanmin(arr))
    vmax = float(np.nanmax(arr))
    if vmax > vmin:
        arr = (arr - vmin) / (vmax - vmin)
    else:
        arr = np.zeros_like(arr)
    return np.clip(np.nan_to_num(arr) * 255.0, 0, 255).astype(np.uint8)


def array_to_qimage(arr: np.ndarray) -> Any:
    """Convert a numpy array to a QImage.

    Parameters
    ----------
    arr : np.ndarray
        ``(H, W)`` or ``(H, W, 3)`` image.

    Returns
    -------
    QImage
    """
    if not _QT_AVAILABLE:
        raise ImportError("Qt is required for array_to_qimage")

    display = np.ascontiguousarray(normalize_array(arr))
    if display.ndim == 2:
        h, w = display.shape
        return QImage(display.data, w, h, w, QImage.Format.Format_Grayscale8).copy()
    if display.ndim == 3 and display.shape[2] == 3:
        h, w, _ = display.shape
        return QImage(display.data, w, h, 3 * w, QImage.Format.Format_RGB888).copy()
    raise ValueError(f"Unsupported image shape: {arr.shape}")


# ---------------------------------------------------------------------------
# DeepZoomCanvas
# ---------------------------------------------------------------------------

if _QT_AVAILABLE:

    class DeepZoomCanvas(QWidget):
        """Deep-zoom image widget with drag, wheel, and click-to-focus.

        Parameters
        ----------
        config : ViewerConfig, optional
            Navigation constants.
        parent : QWidget, optional
            Parent widget.

        Signals
        -------
        image_open_succeeded()
            Emitted when a source image has been loaded.
        image_open_failed(object)
            Emitted with the error when a source cannot be loaded.
        viewport_changed()
            Emitted after pan, zoom, focus, or home navigation.
        """

        image_open_succeeded = Signal()
        image_open_failed = Signal(object)
        viewport_changed = Signal()

        _BACKGROUND = QColor(32, 32, 32)
        _REGION_PEN = QColor(255, 255, 255, 90)
        _HOVER_PEN = QColor(255, 200, 0)
        _FOCUS_PEN = QColor(0, 200, 255)

        def __init__(
            self,
            config: Optional[ViewerConfig] = None,
            parent: Optional[Any] = None,
        ) -> None:
            super().__init__(parent)

            self._model = LogicalSurface(
                max(1, self.width()), max(1, self.height()),
            )
            self._image: Optional[QImage] = None
            self._grid = (1, 1)
            self.show_regions = True

            self.viewer = DeepZoomViewer(
                self,
                config=config,
                capture_pointer=self.grabMouse,
                release_pointer=self.releaseMouse,
                on_viewport_changed=self._on_viewer_changed,
            )
            self.image_open_succeeded.connect(self.viewer.on_image_open_succeeded)
            self.image_open_failed.connect(self.viewer.on_image_open_failed)

            self.setMouseTracking(True)
            self.setMinimumSize(64, 64)

        # --- Surface contract ---

        @property
        def viewport_origin(self) -> Point:
            return self._model.viewport_origin

        @viewport_origin.setter
        def viewport_origin(self, origin: Point) -> None:
            self._model.viewport_origin = Point(*origin)

        @property
        def viewport_width(self) -> float:
            return self._model.viewport_width

        @viewport_width.setter
        def viewport_width(self, width: float) -> None:
            self._model.viewport_width = float(width)

        @property
        def actual_width(self) -> float:
            return float(max(1, self.width()))

        @property
        def actual_height(self) -> float:
            return float(max(1, self.height()))

        @property
        def aspect_ratio(self) -> float:
            return self._model.aspect_ratio

        @property
        def sub_images(self) -> List[SubImage]:
            return self._model.sub_images

        def element_to_logical_point(self, screen_point: Point) -> Point:
            self._sync_size()
            return self._model.element_to_logical_point(screen_point)

        def logical_to_element_point(self, logical_point: Point) -> Point:
            self._sync_size()
            return self._model.logical_to_element_point(logical_point)

        def zoom_about_logical_point(self, factor: float, x: float, y: float) -> None:
            self._model.zoom_about_logical_point(factor, x, y)

        @property
        def source(self) -> Optional[ImageSource]:
            return self._model.source

        @source.setter
        def source(self, source: Optional[ImageSource]) -> None:
            """Load ``source.uri`` as the surface image.

            Called by the viewer on a source change; emits
            ``image_open_succeeded`` or ``image_open_failed``.
            """
            self._model.source = source
            self._image = None
            self._model.set_sub_images([])
            if source is None:
                self.update()
                return
            image = QImage(source.uri)
            if image.isNull():
                self.update()
                self.image_open_failed.emit(
                    OSError(f"Could not read image: {source.uri}")
                )
                return
            self._install_image(image)

        # --- Public API ---

        def open_file(self, path: str) -> None:
            """Open an image file as the viewer source."""
            self.viewer.source_uri = path

        def set_image(
            self,
            image: Any,
            sub_images: Optional[Sequence[SubImage]] = None,
        ) -> None:
            """Show an in-memory image.

            Parameters
            ----------
            image : QImage or np.ndarray
                Image to display.
            sub_images : Sequence[SubImage], optional
                Navigable regions.  Defaults to the configured grid.
            """
            if isinstance(image, np.ndarray):
                image = array_to_qimage(image)
            self.viewer.source = None
            self._model.source = None
            self._install_image(image, sub_images)

        def set_grid(self, rows: int, cols: int) -> None:
            """Split future images into a ``rows`` x ``cols`` region collage."""
            self._grid = (int(rows), int(cols))

        # --- Qt event overrides ---

        def mousePressEvent(self, event: Any) -> None:
            if event.button() == Qt.MouseButton.LeftButton:
                self.viewer.on_pointer_down(self._event_point(event))
                event.accept()
                return
            super().mousePressEvent(event)

        def mouseMoveEvent(self, event: Any) -> None:
            before = self.viewer.gestures.state.region_under_pointer
            self.viewer.on_pointer_move(self._event_point(event))
            if self.viewer.gestures.state.region_under_pointer != before:
                self.update()

        def mouseReleaseEvent(self, event: Any) -> None:
            if event.button() == Qt.MouseButton.LeftButton:
                self.viewer.on_pointer_up(self._event_point(event))
                event.accept()
                return
            super().mouseReleaseEvent(event)

        def wheelEvent(self, event: Any) -> None:
            delta = event.angleDelta().y()
            if delta == 0:
                event.ignore()
                return
            self.viewer.on_wheel(delta, self._event_point(event))
            event.accept()

        def resizeEvent(self, event: Any) -> None:
            super().resizeEvent(event)
            self._sync_size()

        def paintEvent(self, event: Any) -> None:
            painter = QPainter(self)
            try:
                painter.fillRect(self.rect(), self._BACKGROUND)
                if self._image is None:
                    return
                painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform)
                self._sync_size()

                top_left = self._model.logical_to_element_point(Point(0.0, 0.0))
                bottom_right = self._model.logical_to_element_point(
                    Point(1.0, 1.0 / self._model.aspect_ratio),
                )
                painter.drawImage(
                    QRectF(top_left.x, top_left.y,
                           bottom_right.x - top_left.x,
                           bottom_right.y - top_left.y),
                    self._image,
                )
                if self.show_regions:
                    self._paint_regions(painter)
            finally:
                painter.end()

        # --- Internal ---

        def _install_image(
            self,
            image: Any,
            sub_images: Optional[Sequence[SubImage]] = None,
        ) -> None:
            self._image = image
            self._model.aspect_ratio = image.width() / max(1, image.height())
            if sub_images is None:
                rows, cols = self._grid
                sub_images = (grid_sub_images(rows, cols, self._model.aspect_ratio)
                              if rows * cols > 1 else [])
            self._model.set_sub_images(sub_images)
            _log.debug(
                "Image installed: %dx%d, %d sub-image(s)",
                image.width(), image.height(), len(self._model.sub_images),
            )
            self.image_open_succeeded.emit()
            self.viewer.go_home()

        def _paint_regions(self, painter: Any) -> None:
            hovered = self.viewer.gestures.state.region_under_pointer
            focused = self.viewer.focused_region_id
            painter.setBrush(Qt.BrushStyle.NoBrush)
            for sub in self._model.sub_images:
                rect = region_logical_rect(sub)
                tl = self._model.logical_to_element_point(Point(rect.x, rect.y))
                br = self._model.logical_to_element_point(Point(rect.right, rect.bottom))
                if sub.id == focused:
                    pen = QPen(self._FOCUS_PEN, 2)
                elif sub.id == hovered:
                    pen = QPen(self._HOVER_PEN, 2)
                else:
                    pen = QPen(self._REGION_PEN, 1)
                painter.setPen(pen)
                painter.drawRect(QRectF(tl.x, tl.y, br.x - tl.x, br.y - tl.y))

        def _sync_size(self) -> None:
            self._model.resize(self.actual_width, self.actual_height)

        def _on_viewer_changed(self) -> None:
            self.viewport_changed.emit()
            self.update()

        @staticmethod
        def _event_point(event: Any) -> Point:
            pos = event.position()
            return Point(pos.x(), pos.y())

else:

    class DeepZoomCanvas:  # type: ignore[no-redef]
        """Stub when Qt is unavailable."""

        def __init__(self, *args: Any, **kwargs: Any) -> None:
            raise ImportError("Qt is required for DeepZoomCanvas")
