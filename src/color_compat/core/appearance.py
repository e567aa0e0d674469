"""Appearance modes a semantic color can be resolved under."""

from enum import Enum


class Appearance(Enum):
    """User interface style used when resolving a dynamic color."""

    UNSPECIFIED = "unspecified"
    LIGHT = "light"
    DARK = "dark"

    @property
    def suffix(self) -> str:
        """Identifier suffix used for generated constants (``Light``/``Dark``)."""
        if self is Appearance.DARK:
            return "Dark"
        return "Light"
