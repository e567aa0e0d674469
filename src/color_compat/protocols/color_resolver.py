"""Color resolver protocol for turning semantic color names into concrete colors."""

import logging
from typing import Protocol, Optional

from PyQt6.QtGui import QColor

from color_compat.core.appearance import Appearance
from color_compat.theming.system_palette import SystemPalette

logger = logging.getLogger(__name__)


class ColorResolver(Protocol):
    """Protocol for the platform capability that resolves dynamic colors."""

    def resolve(self, name: str, appearance: Appearance) -> Optional[QColor]:
        ...


class SystemPaletteResolver:
    """Resolves colors from the built-in iOS 13 system palette.

    An unspecified appearance resolves like light mode, which is what UIKit
    reports for an unresolved dynamic color under the default trait collection.
    """

    def __init__(self, light: Optional[SystemPalette] = None, dark: Optional[SystemPalette] = None):
        self.light = light or SystemPalette.create_light_palette()
        self.dark = dark or SystemPalette.create_dark_palette()

    def resolve(self, name: str, appearance: Appearance) -> Optional[QColor]:
        palette = self.dark if appearance is Appearance.DARK else self.light
        color_tuple = palette.get(name)
        if color_tuple is None:
            logger.debug(f"No palette entry for '{name}'")
            return None
        return palette.to_qcolor(color_tuple)


_color_resolver: Optional[ColorResolver] = None


def register_color_resolver(resolver: ColorResolver) -> None:
    """Register a global color resolver."""
    global _color_resolver
    _color_resolver = resolver
    logger.debug(f"Registered color resolver {type(resolver).__name__}")


def get_color_resolver() -> ColorResolver:
    """Get the registered color resolver, falling back to the system palette."""
    global _color_resolver
    if _color_resolver is None:
        _color_resolver = SystemPaletteResolver()
    return _color_resolver


def reset_color_resolver() -> None:
    """Drop any registered resolver so the system palette is used again."""
    global _color_resolver
    _color_resolver = None
