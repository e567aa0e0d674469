"""
System color data.

The built-in iOS system palette and the fixed catalog of semantic colors
the compatibility class is generated from.
"""

from .system_palette import SystemPalette
from .catalog import (
    SemanticColor,
    SystemColor,
    CodableSystemColor,
    SYSTEM_COLORS,
    get_system_colors,
    get_system_color,
)

__all__ = [
    "SystemPalette",
    "SemanticColor",
    "SystemColor",
    "CodableSystemColor",
    "SYSTEM_COLORS",
    "get_system_colors",
    "get_system_color",
]
