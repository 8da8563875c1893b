# -*- coding: utf-8 -*-
"""
Configuration Module - Configurable navigation constants for dzviewer.

Provides a ViewerConfig dataclass with the zoom bounds, home width,
drag threshold, double-click window, wheel factors, and focus padding
used by the navigation engine. Loads from
~/.dzviewer/dzviewer_config.json if it exists, otherwise uses the
defaults.

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
import json
import logging
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger(__name__)

_CONFIG_DIR = Path.home() / ".dzviewer"
_CONFIG_FILE = _CONFIG_DIR / "dzviewer_config.json"


@dataclass
class ViewerConfig:
    """Navigation constants with defaults.

    Attributes
    ----------
    zoom_min : float
        Lowest zoom level relative to the home width.
    zoom_max : float
        Highest zoom level relative to the home width.
    home_width : float
        Viewport width of the home (unzoomed) view.
    drag_threshold_px : float
        Pointer travel, per axis, that turns a press into a drag.
        Travel must be strictly greater than this value.
    double_click_ms : float
        Window after a click in which a further click is ignored.
    wheel_zoom_in : float
        Zoom factor for a non-negative wheel delta.
    wheel_zoom_out : float
        Zoom factor for a negative wheel delta.
    focus_padding : float
        Scale applied to a framed region to leave a visual margin.
    """

    zoom_min: float = 0.8
    zoom_max: float = 40.0
    home_width: float = 1.0
    drag_threshold_px: float = 5.0
    double_click_ms: float = 300.0
    wheel_zoom_in: float = 1.5
    wheel_zoom_out: float = 0.5
    focus_padding: float = 1.3

    def zoom_bounds(self) -> Any:
        """Build fresh zoom bounds at the home zoom level.

        Raises
        ------
        ValueError
            If the zoom bounds or home width are invalid.
        """
        from dzviewer.navigation.viewport_state import ZoomBounds

        if self.home_width <= 0:
            raise ValueError(
                f"home_width must be positive, got {self.home_width!r}"
            )
        return ZoomBounds(self.zoom_min, self.zoom_max, 1.0)

    def save(self, path: Optional[Path] = None) -> None:
        """Save config to JSON file."""
        path = path or _CONFIG_FILE
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(asdict(self), f, indent=2)


def load_config(path: Optional[Path] = None) -> ViewerConfig:
    """Load configuration from file, or return defaults.

    Parameters
    ----------
    path : Optional[Path]
        Config file path. Defaults to ~/.dzviewer/dzviewer_config.json.

    Returns
    -------
    ViewerConfig
        Loaded or default configuration.
    """
    path = path or _CONFIG_FILE
    if path.exists():
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            return ViewerConfig(**{
                k: float(v) for k, v in data.items()
                if k in ViewerConfig.__dataclass_fields__
            })
        except Exception as e:
            logger.warning("Failed to load config from %s: %s", path, e)

    return ViewerConfig()
