"""Sticky sidebar options and how they are merged from their sources."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Dict

from .dimensions import coerce_spacing
from .errors import OptionsError

# Settings keys backing each option.
SETTINGS_KEYS = {
    'top_spacing': 'sticky_top_spacing',
    'bottom_spacing': 'sticky_bottom_spacing',
    'container_selector': 'sticky_container_selector',
    'inner_wrapper_selector': 'sticky_inner_wrapper_selector',
    'sticky_class': 'sticky_class',
    'resize_sensor': 'sticky_resize_sensor',
    'min_width': 'sticky_min_width',
}


@dataclass
class StickySidebarOptions:
    """User-facing options of one sticky sidebar."""

    # int, numeric string or callable(sidebar) resolved every tick.
    top_spacing: Any = 0
    bottom_spacing: Any = 0
    # objectName of an ancestor widget; None means the sidebar's parent.
    container_selector: str | None = None
    inner_wrapper_selector: str = 'inner-wrapper-sticky'
    # Dynamic property toggled while the sidebar is stuck.
    sticky_class: str | None = 'is-affixed'
    resize_sensor: bool = True
    # Breakpoint width; 0 or None disables it.
    min_width: int | None = 0

    @classmethod
    def field_names(cls) -> list[str]:
        return [f.name for f in fields(cls)]

    @classmethod
    def extend(cls, defaults: "StickySidebarOptions | None" = None,
               overrides: Dict[str, Any] | None = None) -> "StickySidebarOptions":
        """Return ``defaults`` with known keys from ``overrides`` applied.

        Unknown keys and ``None`` values are ignored.
        """
        defaults = defaults if defaults is not None else cls()
        known = set(cls.field_names())
        changes = {
            key: value
            for key, value in (overrides or {}).items()
            if key in known and value is not None
        }
        return replace(defaults, **changes)

    @classmethod
    def from_settings(cls, settings) -> "StickySidebarOptions":
        """Read options from a QSettings-like object."""
        defaults = cls()
        values = {}
        for name, key in SETTINGS_KEYS.items():
            default = getattr(defaults, name)
            try:
                value = settings.value(key, default)
            except Exception as e:
                print(f"[SETTINGS] Could not read {key}: {e}")
                continue
            values[name] = _normalize_setting(name, value, default)
        return cls.extend(defaults, values)

    def changed_from(self, other: "StickySidebarOptions") -> Dict[str, Any]:
        """Fields whose value differs from ``other``, as an ``extend`` overrides dict."""
        return {
            name: getattr(self, name)
            for name in self.field_names()
            if getattr(self, name) != getattr(other, name)
        }

    def with_coerced_spacing(self) -> "StickySidebarOptions":
        """Parse non-callable spacings to ints, keeping callables as-is."""
        top = self.top_spacing if callable(self.top_spacing) else coerce_spacing(self.top_spacing)
        bottom = self.bottom_spacing if callable(self.bottom_spacing) else coerce_spacing(self.bottom_spacing)
        return replace(self, top_spacing=top, bottom_spacing=bottom)

    @property
    def breakpoint_width(self) -> int:
        return coerce_spacing(self.min_width)

    def validate(self):
        if not self.inner_wrapper_selector:
            raise OptionsError("inner_wrapper_selector must not be empty.")
        if self.breakpoint_width < 0:
            raise OptionsError(f"min_width must not be negative, got {self.min_width!r}.")
        return self


def _normalize_setting(name: str, value, default):
    """QSettings hands back strings for most backends; map them to types."""
    if name == 'resize_sensor':
        if isinstance(value, str):
            return value.strip().lower() in ('1', 'true', 'yes', 'on')
        return bool(value)
    if name in ('container_selector', 'sticky_class'):
        return str(value) if value else None
    if name == 'inner_wrapper_selector':
        return str(value) if value else default
    if name in ('top_spacing', 'bottom_spacing', 'min_width'):
        return coerce_spacing(value)
    return value
