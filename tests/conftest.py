# tests/conftest.py
"""Pytest configuration for stickybar tests.

Qt-touching modules are imported headless through the offscreen platform.
"""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
