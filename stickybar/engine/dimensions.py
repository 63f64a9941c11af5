"""Measurement records consumed by the affix calculator."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import NamedTuple

_LEADING_INT = re.compile(r'^\s*([+-]?\d+)')


class LayoutMeasurements(NamedTuple):
    """Geometry that only changes on resize/relayout."""

    container_top: int
    container_height: int
    sidebar_height: int
    sidebar_width: int
    viewport_height: int


class ScrollMeasurements(NamedTuple):
    """Geometry that changes on every scroll tick."""

    viewport_top: int
    viewport_left: int
    sidebar_left: int


def coerce_spacing(value) -> int:
    """Coerce a spacing option to an int, falling back to 0.

    Accepts ints, finite floats (truncated) and strings with a leading
    integer such as ``"12px"``. Everything else resolves to 0.
    """
    if isinstance(value, bool) or value is None:
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return 0
        return int(value)
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        return int(match.group(1)) if match else 0
    return 0


def resolve_spacing(option, sidebar=None) -> int:
    """Resolve a spacing option, calling it with the sidebar when callable."""
    if callable(option):
        option = option(sidebar)
    return coerce_spacing(option)


@dataclass(frozen=True)
class DimensionSnapshot:
    """Read-only viewport/container/sidebar geometry for one evaluation."""

    viewport_top: int = 0
    viewport_height: int = 0
    viewport_left: int = 0
    container_top: int = 0
    container_height: int = 0
    sidebar_height: int = 0
    sidebar_width: int = 0
    sidebar_left: int = 0
    top_spacing: int = 0
    bottom_spacing: int = 0

    @property
    def viewport_bottom(self) -> int:
        return self.viewport_top + self.viewport_height

    @property
    def container_bottom(self) -> int:
        return self.container_top + self.container_height

    @classmethod
    def capture(
        cls,
        layout: LayoutMeasurements,
        scroll: ScrollMeasurements,
        *,
        top_spacing=0,
        bottom_spacing=0,
        sidebar=None,
    ) -> "DimensionSnapshot":
        return cls(
            viewport_top=int(scroll.viewport_top),
            viewport_height=int(layout.viewport_height),
            viewport_left=int(scroll.viewport_left),
            container_top=int(layout.container_top),
            container_height=max(0, int(layout.container_height)),
            sidebar_height=max(0, int(layout.sidebar_height)),
            sidebar_width=int(layout.sidebar_width),
            sidebar_left=int(scroll.sidebar_left),
            top_spacing=resolve_spacing(top_spacing, sidebar),
            bottom_spacing=resolve_spacing(bottom_spacing, sidebar),
        )
