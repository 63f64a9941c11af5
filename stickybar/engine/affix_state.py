from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple


class AffixMode(Enum):
    """Positioning regimes of the sidebar."""
    STATIC = "static"
    VIEWPORT_TOP = "viewport-top"
    VIEWPORT_BOTTOM = "viewport-bottom"
    CONTAINER_BOTTOM = "container-bottom"
    VIEWPORT_UNBOTTOM = "viewport-unbottom"

    @property
    def event_name(self) -> str:
        """Short name used in affix notifications, e.g. ``top``."""
        return self.value.replace("viewport-", "")


class ScrollDirection(Enum):
    TOP = "top"
    BOTTOM = "bottom"


class AffixResult(NamedTuple):
    mode: AffixMode
    translate_y: int
    direction: ScrollDirection


@dataclass
class AffixState:
    """Affix state carried between evaluations of one sidebar."""

    mode: AffixMode = AffixMode.STATIC
    translate_y: int = 0
    last_viewport_top: int = 0
    is_breakpoint: bool = False

    def commit(self, result: AffixResult):
        self.mode = result.mode
        self.translate_y = result.translate_y

    def reset(self):
        self.mode = AffixMode.STATIC
        self.translate_y = 0
        self.last_viewport_top = 0
