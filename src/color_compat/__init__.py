"""
color-compat: UIKit semantic colors for apps that predate dynamic colors.

Resolves the iOS 13 system colors (labels, fills, backgrounds, separators,
accent and gray tiers) under light and dark appearance and renders them as a
Swift compatibility class, or as records with hex and rgba strings.

Architecture:
- Core: appearance modes, channel accessors and string renderings
- Theming: the built-in system palette and the fixed color catalog
- Protocols: pluggable color resolver and generator configuration
- Generator: Swift class and JSON record output
"""

__version__ = "0.1.0"

from color_compat.core import Appearance, ColorCompatError, ColorResolutionFailed
from color_compat.theming import SystemColor, CodableSystemColor, SYSTEM_COLORS
from color_compat.core.code_generator import (
    generate_compatibility_class,
    generate_codable_colors,
    generate_json,
)

__all__ = [
    "__version__",
    "Appearance",
    "ColorCompatError",
    "ColorResolutionFailed",
    "SystemColor",
    "CodableSystemColor",
    "SYSTEM_COLORS",
    "generate_compatibility_class",
    "generate_codable_colors",
    "generate_json",
]
