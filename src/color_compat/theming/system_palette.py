"""
System Palette for iOS semantic colors

Reference values of the UIKit semantic colors introduced in iOS 13, captured
per appearance. Follows the ColorScheme pattern: the dataclass defaults are the
light appearance and ``create_dark_palette`` overrides what changes in dark
mode. Each color is an ``(r, g, b, alpha)`` tuple with 8-bit RGB channels and
an alpha fraction.
"""

import re
from dataclasses import dataclass, fields
from typing import Dict, Optional, Tuple

from PyQt6.QtGui import QColor

RGBA = Tuple[int, int, int, float]

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def field_name_for(color_name: str) -> str:
    """Map a UIKit color name (``secondaryLabel``) to a palette field (``secondary_label``)."""
    return _CAMEL_BOUNDARY.sub("_", color_name).lower()


@dataclass(frozen=True)
class SystemPalette:
    """
    Semantic color values for a single appearance.

    Field names are the snake_case form of the UIKit property names so that
    ``get("tertiarySystemFill")`` finds ``tertiary_system_fill``.
    """

    # ========== LABEL COLORS ==========

    label: RGBA = (0, 0, 0, 1.0)                        # #000000
    secondary_label: RGBA = (60, 60, 67, 0.6)           # #3c3c43 @ 60%
    tertiary_label: RGBA = (60, 60, 67, 0.3)            # #3c3c43 @ 30%
    quaternary_label: RGBA = (60, 60, 67, 0.18)         # #3c3c43 @ 18%

    # ========== FILL COLORS ==========

    system_fill: RGBA = (120, 120, 128, 0.2)            # #787880 @ 20%
    secondary_system_fill: RGBA = (120, 120, 128, 0.16) # #787880 @ 16%
    tertiary_system_fill: RGBA = (118, 118, 128, 0.12)  # #767680 @ 12%
    quaternary_system_fill: RGBA = (116, 116, 128, 0.08) # #747480 @ 8%

    # ========== TEXT ==========

    placeholder_text: RGBA = (60, 60, 67, 0.3)          # #3c3c43 @ 30%

    # ========== BACKGROUNDS ==========

    system_background: RGBA = (255, 255, 255, 1.0)                  # #ffffff
    secondary_system_background: RGBA = (242, 242, 247, 1.0)        # #f2f2f7
    tertiary_system_background: RGBA = (255, 255, 255, 1.0)         # #ffffff
    system_grouped_background: RGBA = (242, 242, 247, 1.0)          # #f2f2f7
    secondary_system_grouped_background: RGBA = (255, 255, 255, 1.0) # #ffffff
    tertiary_system_grouped_background: RGBA = (242, 242, 247, 1.0) # #f2f2f7

    # ========== SEPARATORS ==========

    separator: RGBA = (60, 60, 67, 0.29)                # #3c3c43 @ 29%
    opaque_separator: RGBA = (198, 198, 200, 1.0)       # #c6c6c8

    # ========== LINK AND FIXED TEXT ==========

    link: RGBA = (0, 122, 255, 1.0)                     # #007aff
    dark_text: RGBA = (0, 0, 0, 1.0)                    # #000000
    light_text: RGBA = (255, 255, 255, 0.6)             # #ffffff @ 60%

    # ========== SYSTEM ACCENT COLORS ==========

    system_blue: RGBA = (0, 122, 255, 1.0)              # #007aff
    system_green: RGBA = (52, 199, 89, 1.0)             # #34c759
    system_indigo: RGBA = (88, 86, 214, 1.0)            # #5856d6
    system_orange: RGBA = (255, 149, 0, 1.0)            # #ff9500
    system_pink: RGBA = (255, 45, 85, 1.0)              # #ff2d55
    system_purple: RGBA = (175, 82, 222, 1.0)           # #af52de
    system_red: RGBA = (255, 59, 48, 1.0)               # #ff3b30
    system_teal: RGBA = (90, 200, 250, 1.0)             # #5ac8fa
    system_yellow: RGBA = (255, 204, 0, 1.0)            # #ffcc00

    # ========== GRAY SCALE ==========

    system_gray: RGBA = (142, 142, 147, 1.0)            # #8e8e93
    system_gray2: RGBA = (174, 174, 178, 1.0)           # #aeaeb2
    system_gray3: RGBA = (199, 199, 204, 1.0)           # #c7c7cc
    system_gray4: RGBA = (209, 209, 214, 1.0)           # #d1d1d6
    system_gray5: RGBA = (229, 229, 234, 1.0)           # #e5e5ea
    system_gray6: RGBA = (242, 242, 247, 1.0)           # #f2f2f7

    def to_qcolor(self, color_tuple: RGBA) -> QColor:
        """
        Convert an ``(r, g, b, alpha)`` tuple to a QColor.

        Args:
            color_tuple: 8-bit RGB channels and an alpha fraction

        Returns:
            QColor: Qt color object with alpha applied
        """
        r, g, b, alpha = color_tuple
        color = QColor(r, g, b)
        color.setAlphaF(alpha)
        return color

    def get(self, color_name: str) -> Optional[RGBA]:
        """
        Look up a color tuple by its UIKit name.

        Args:
            color_name: UIKit property name, e.g. ``"systemGray2"``

        Returns:
            The color tuple, or None if the palette has no such color
        """
        return getattr(self, field_name_for(color_name), None)

    def get_color_dict(self) -> Dict[str, RGBA]:
        """Return all colors keyed by field name."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def create_light_palette(cls) -> 'SystemPalette':
        """Light appearance values (the dataclass defaults)."""
        return cls()

    @classmethod
    def create_dark_palette(cls) -> 'SystemPalette':
        """
        Create the dark appearance variant.

        Only colors that change between appearances are overridden; fixed
        colors such as ``darkText`` and ``systemGray`` keep their defaults.

        Returns:
            SystemPalette: Dark appearance palette
        """
        return cls(
            # Labels flip to a light tint on dark backgrounds
            label=(255, 255, 255, 1.0),
            secondary_label=(235, 235, 245, 0.6),
            tertiary_label=(235, 235, 245, 0.3),
            quaternary_label=(235, 235, 245, 0.18),

            # Fills get more opaque
            system_fill=(120, 120, 128, 0.36),
            secondary_system_fill=(120, 120, 128, 0.32),
            tertiary_system_fill=(118, 118, 128, 0.24),
            quaternary_system_fill=(118, 118, 128, 0.18),

            placeholder_text=(235, 235, 245, 0.3),

            # Background tiers
            system_background=(0, 0, 0, 1.0),
            secondary_system_background=(28, 28, 30, 1.0),
            tertiary_system_background=(44, 44, 46, 1.0),
            system_grouped_background=(0, 0, 0, 1.0),
            secondary_system_grouped_background=(28, 28, 30, 1.0),
            tertiary_system_grouped_background=(44, 44, 46, 1.0),

            separator=(84, 84, 88, 0.6),
            opaque_separator=(56, 56, 58, 1.0),

            link=(9, 132, 255, 1.0),

            # Accent colors are brightened for dark backgrounds
            system_blue=(10, 132, 255, 1.0),
            system_green=(48, 209, 88, 1.0),
            system_indigo=(94, 92, 230, 1.0),
            system_orange=(255, 159, 10, 1.0),
            system_pink=(255, 55, 95, 1.0),
            system_purple=(191, 90, 242, 1.0),
            system_red=(255, 69, 58, 1.0),
            system_teal=(100, 210, 255, 1.0),
            system_yellow=(255, 214, 10, 1.0),

            # Gray tiers invert
            system_gray2=(99, 99, 102, 1.0),
            system_gray3=(72, 72, 74, 1.0),
            system_gray4=(58, 58, 60, 1.0),
            system_gray5=(44, 44, 46, 1.0),
            system_gray6=(28, 28, 30, 1.0),
        )
