"""Affix engine for sticky sidebars.

Pure, platform-independent pieces:
- Dimension snapshots built from host measurements
- The affix calculator (scroll-direction aware state machine)
- The style resolver (mode -> inline style values)
- Options and YAML profiles
"""

from .affix_calculator import evaluate, is_scrolling_top, sidebar_fits_viewport
from .affix_state import AffixMode, AffixResult, AffixState, ScrollDirection
from .dimensions import (DimensionSnapshot, LayoutMeasurements, ScrollMeasurements,
                         coerce_spacing, resolve_spacing)
from .errors import (ContainerNotFoundError, OptionsError, SidebarNotFoundError,
                     StickySidebarError)
from .options import StickySidebarOptions
from .profile_loader import ProfileLoader
from .style_resolver import TransformSupport, resolve

__all__ = [
    'AffixMode',
    'AffixResult',
    'AffixState',
    'ContainerNotFoundError',
    'DimensionSnapshot',
    'LayoutMeasurements',
    'OptionsError',
    'ProfileLoader',
    'ScrollDirection',
    'ScrollMeasurements',
    'SidebarNotFoundError',
    'StickySidebarError',
    'StickySidebarOptions',
    'TransformSupport',
    'coerce_spacing',
    'evaluate',
    'is_scrolling_top',
    'resolve',
    'resolve_spacing',
    'sidebar_fits_viewport',
]
