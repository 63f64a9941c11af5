"""Maps an affix mode to inline style values for the sidebar wrappers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from .affix_state import AffixMode
from .dimensions import DimensionSnapshot

StyleSet = Dict[str, Any]

INNER_RESET: StyleSet = {
    'position': 'relative',
    'top': '',
    'left': '',
    'bottom': '',
    'width': '',
    'transform': 'translate(0, 0)',
}

OUTER_RESET: StyleSet = {
    'height': '',
    'position': '',
}

# Inline properties cleared on teardown and breakpoint entry.
CLEARED_STYLE: StyleSet = {
    'position': '',
    'top': '',
    'left': '',
    'bottom': '',
    'width': '',
    'transform': '',
    'height': '',
}

_OFFSET_MODES = (AffixMode.CONTAINER_BOTTOM, AffixMode.VIEWPORT_UNBOTTOM)


@dataclass(frozen=True)
class TransformSupport:
    """Which CSS-like transforms the host can render."""

    transform: bool = False
    transform3d: bool = False


def resolve(
    mode: AffixMode,
    snapshot: DimensionSnapshot,
    capabilities: TransformSupport | None = None,
    translate_y: int = 0,
) -> Dict[str, StyleSet]:
    """Return the full ``outer``/``inner`` style sets for ``mode``.

    Both sets always contain every reset key; the mode only overlays the
    keys it cares about so nothing from a previous mode survives.
    """
    capabilities = capabilities or TransformSupport()
    inner: StyleSet = {}
    outer: StyleSet = {}

    if mode == AffixMode.VIEWPORT_TOP:
        inner = {
            'position': 'fixed',
            'top': snapshot.top_spacing,
            'left': snapshot.sidebar_left - snapshot.viewport_left,
            'width': snapshot.sidebar_width,
        }
    elif mode == AffixMode.VIEWPORT_BOTTOM:
        inner = {
            'position': 'fixed',
            'top': 'auto',
            'left': snapshot.sidebar_left,
            'bottom': snapshot.bottom_spacing,
            'width': snapshot.sidebar_width,
        }
    elif mode in _OFFSET_MODES:
        if capabilities.transform3d:
            inner = {'transform': f"translate3d(0, {translate_y}px, 0)"}
        elif capabilities.transform:
            inner = {'transform': f"translate(0, {translate_y}px)"}
        else:
            inner = {'position': 'absolute', 'top': snapshot.container_top + translate_y}

    if mode != AffixMode.STATIC:
        outer = {'height': snapshot.sidebar_height, 'position': 'relative'}

    return {
        'outer': {**OUTER_RESET, **outer},
        'inner': {**INNER_RESET, **inner},
    }
