"""Platform boundary used by :class:`StickySidebar`."""

from __future__ import annotations

from typing import Any, Callable, Protocol

try:
    from engine import LayoutMeasurements, ScrollMeasurements, TransformSupport
except ModuleNotFoundError:
    from stickybar.engine import LayoutMeasurements, ScrollMeasurements, TransformSupport

# Notification channels a host can deliver.
SCROLL = "scroll"
RESIZE = "resize"
UPDATE = "update"

# Elements observed by the resize sensor.
INNER = "inner"
CONTAINER = "container"

EVENT_KEY = ".stickySidebar"


class SidebarHost(Protocol):
    """What the orchestrator needs from a rendering platform."""

    sidebar: Any

    def locate_container(self, selector: str | None) -> Any: ...

    def ensure_inner_wrapper(self, selector: str) -> Any: ...

    def measure_layout(self) -> LayoutMeasurements: ...

    def measure_scroll(self) -> ScrollMeasurements: ...

    def viewport_width(self) -> int: ...

    def transform_support(self) -> TransformSupport: ...

    def apply_outer_style(self, style: dict) -> None: ...

    def apply_inner_style(self, style: dict) -> None: ...

    def apply_inner_left(self, value) -> None: ...

    def clear_styles(self) -> None: ...

    def set_sticky_marker(self, name: str, enabled: bool) -> None: ...

    def dispatch(self, event_name: str, payload: Any) -> None: ...

    def subscribe(self, kind: str, callback: Callable[[], None]) -> None: ...

    def unsubscribe(self, kind: str, callback: Callable[[], None]) -> None: ...

    def add_resize_listener(self, target: str, callback: Callable[[], None]) -> None: ...

    def remove_resize_listener(self, target: str, callback: Callable[[], None]) -> None: ...

    # Drop the host's own hooks into the toolkit; nothing fires afterwards.
    def detach(self) -> None: ...


def affix_event_name(mode, *, after: bool = False) -> str:
    """``affix.top.stickySidebar`` before applying, ``affixed.top...`` after."""
    prefix = "affixed" if after else "affix"
    return f"{prefix}.{mode.event_name}{EVENT_KEY}"
