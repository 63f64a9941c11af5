"""Pure affix-type decision logic for a sticky sidebar."""

from __future__ import annotations

from .affix_state import AffixMode, AffixResult, AffixState, ScrollDirection
from .dimensions import DimensionSnapshot


def is_scrolling_top(snapshot: DimensionSnapshot, state: AffixState) -> bool:
    """True while the page scrolls toward its top."""
    return snapshot.viewport_top < state.last_viewport_top


def sidebar_fits_viewport(snapshot: DimensionSnapshot) -> bool:
    return snapshot.sidebar_height < snapshot.viewport_height


def clamp_translate_y(translate_y: int, container_height: int) -> int:
    return min(container_height, max(0, translate_y))


def evaluate(snapshot: DimensionSnapshot, state: AffixState) -> AffixResult:
    """Compute the affix mode and offset for the current scroll position.

    Branches are tried in order and the first match wins. When nothing
    matches, the previous mode and offset from ``state`` are held.
    Only ``state.last_viewport_top`` is written; committing the returned
    mode and offset is left to the caller.
    """
    scrolling_top = is_scrolling_top(snapshot, state)
    direction = ScrollDirection.TOP if scrolling_top else ScrollDirection.BOTTOM

    if state.is_breakpoint:
        state.last_viewport_top = snapshot.viewport_top
        return AffixResult(AffixMode.STATIC, 0, direction)

    mode = state.mode
    translate_y = state.translate_y

    container_top = snapshot.container_top
    container_bottom = snapshot.container_bottom
    sidebar_height = snapshot.sidebar_height
    sidebar_bottom = sidebar_height + container_top
    collider_top = snapshot.viewport_top + snapshot.top_spacing
    collider_bottom = snapshot.viewport_bottom - snapshot.bottom_spacing
    fits = sidebar_fits_viewport(snapshot)

    if scrolling_top:
        if collider_top <= container_top:
            mode, translate_y = AffixMode.STATIC, 0
        elif collider_top <= translate_y + container_top:
            mode, translate_y = AffixMode.VIEWPORT_TOP, collider_top - container_top
        elif not fits and container_top <= collider_top:
            mode = AffixMode.VIEWPORT_BOTTOM
    elif fits:
        if sidebar_height + collider_top >= container_bottom:
            mode, translate_y = AffixMode.CONTAINER_BOTTOM, container_bottom - sidebar_bottom
        elif collider_top >= container_top:
            mode, translate_y = AffixMode.VIEWPORT_TOP, collider_top - container_top
    else:
        if container_bottom <= collider_bottom:
            mode, translate_y = AffixMode.CONTAINER_BOTTOM, container_bottom - sidebar_bottom
        elif sidebar_bottom + translate_y <= collider_bottom:
            mode, translate_y = AffixMode.VIEWPORT_BOTTOM, collider_bottom - sidebar_bottom
        elif container_top + translate_y <= collider_top:
            mode = AffixMode.VIEWPORT_UNBOTTOM

    translate_y = clamp_translate_y(translate_y, snapshot.container_height)

    # Recorded after the direction check above.
    state.last_viewport_top = snapshot.viewport_top
    return AffixResult(mode, translate_y, direction)
