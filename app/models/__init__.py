"""
Pure Python data models for circuit notation layouts.

This package contains Qt-free data classes that represent placed
schematic elements. All models use only Python standard library types.
"""

from .circuit import CircuitLayout
from .component import (
    COMPONENT_CATEGORIES,
    COMPONENT_SIZES,
    COMPONENT_TYPES,
    DEFAULT_KIND,
    DISPLAY_NAMES,
    SHORT_LABELS,
    ComponentData,
)
from .wire import WireData

__all__ = [
    "CircuitLayout",
    "ComponentData",
    "COMPONENT_TYPES",
    "COMPONENT_CATEGORIES",
    "COMPONENT_SIZES",
    "DEFAULT_KIND",
    "DISPLAY_NAMES",
    "SHORT_LABELS",
    "WireData",
]
