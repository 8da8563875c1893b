# -*- coding: utf-8 -*-
"""
dzviewer CLI - Launch the deep-zoom viewer.

Usage::

    python -m dzviewer collage.png --grid 4
    python -m dzviewer image.tif --log-level DEBUG

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

from dzviewer.viewers.main_window import main


if __name__ == "__main__":
    main()
