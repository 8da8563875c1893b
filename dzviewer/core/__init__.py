# -*- coding: utf-8 -*-
"""
Core Module - Non-GUI support code for dzviewer.

Contains the navigation configuration defaults and their JSON
persistence.

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
