"""
Catalog of UIKit semantic colors.

The fixed, ordered list of system colors the compatibility class is generated
from. Order here is the order of every generated section and of the record
output.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from PyQt6.QtGui import QColor

from color_compat.core.color_accessors import (
    channels,
    color_to_hex_string,
    color_to_rgba_string,
    format_component,
)
from color_compat.core.exceptions import ColorResolutionFailed
from color_compat.protocols.generator_config import (
    AccessorStyle,
    GeneratorConfig,
    get_generator_config,
)
from color_compat.core.appearance import Appearance


@dataclass(frozen=True)
class SemanticColor:
    """Opaque handle for a platform semantic color, e.g. ``UIColor.label``."""

    name: str

    def resolved_color(self, appearance: Appearance) -> QColor:
        """
        Resolve the handle to a concrete color under an appearance.

        Raises:
            ColorResolutionFailed: If the registered resolver has no valid color
        """
        # Import here to avoid circular imports
        from color_compat.protocols.color_resolver import get_color_resolver

        color = get_color_resolver().resolve(self.name, appearance)
        if color is None or not color.isValid():
            raise ColorResolutionFailed(self.name, appearance)
        return color


@dataclass(frozen=True)
class CodableSystemColor:
    """Serializable string renderings of one system color."""

    name: str
    hex_string: str
    rgba_string: str
    dark_hex_string: str
    dark_rgba_string: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "name": self.name,
            "hexString": self.hex_string,
            "rgbaString": self.rgba_string,
            "darkHexString": self.dark_hex_string,
            "darkRgbaString": self.dark_rgba_string,
        }


def _initializer(color_type: str, color: QColor) -> str:
    r, g, b, a = channels(color)
    return (
        f"{color_type}(red: {format_component(r)}, green: {format_component(g)}, "
        f"blue: {format_component(b)}, alpha: {format_component(a)})"
    )


@dataclass(frozen=True)
class SystemColor:
    """A named entry of the catalog and its generated descriptions."""

    name: str
    color: SemanticColor

    @property
    def light_color(self) -> QColor:
        return self.color.resolved_color(Appearance.LIGHT)

    @property
    def dark_color(self) -> QColor:
        return self.color.resolved_color(Appearance.DARK)

    @property
    def codable_representation(self) -> CodableSystemColor:
        return CodableSystemColor(
            name=self.name,
            hex_string=color_to_hex_string(self.color),
            rgba_string=color_to_rgba_string(self.color),
            dark_hex_string=color_to_hex_string(self.dark_color),
            dark_rgba_string=color_to_rgba_string(self.dark_color),
        )

    @property
    def hex_description(self) -> str:
        return color_to_hex_string(self.color)

    @property
    def light_hex_description(self) -> str:
        return color_to_hex_string(self.light_color)

    @property
    def dark_hex_description(self) -> str:
        return color_to_hex_string(self.dark_color)

    def color_description(self, config: Optional[GeneratorConfig] = None) -> str:
        """Initializer literal for the unresolved color."""
        config = config or get_generator_config()
        return _initializer(config.color_type, self.color.resolved_color(Appearance.UNSPECIFIED))

    def constant_name(self, appearance: Appearance) -> str:
        return f"{self.name}{appearance.suffix}"

    def constant_description(self, appearance: Appearance, config: Optional[GeneratorConfig] = None) -> str:
        """Static constant holding the color resolved under ``appearance``."""
        config = config or get_generator_config()
        return (
            f"public static let {self.constant_name(appearance)} = "
            f"{_initializer(config.color_type, self.color.resolved_color(appearance))}"
        )

    def light_color_description(self, config: Optional[GeneratorConfig] = None) -> str:
        return self.constant_description(Appearance.LIGHT, config)

    def dark_color_description(self, config: Optional[GeneratorConfig] = None) -> str:
        return self.constant_description(Appearance.DARK, config)

    def accessor_description(self, config: Optional[GeneratorConfig] = None) -> str:
        """
        Static accessor that switches between the light and dark constants.

        With the availability style the accessor prefers the native semantic
        color when the OS provides it, so the returned text spans several lines
        indented relative to the accessor itself.
        """
        config = config or get_generator_config()
        switch = (
            f"{config.dark_mode_flag} ? {self.constant_name(Appearance.DARK)} "
            f": {self.constant_name(Appearance.LIGHT)}"
        )
        header = f"public static var {self.name}: {config.color_type}"

        if config.accessor_style is AccessorStyle.AVAILABILITY:
            step = config.indent
            return "\n".join([
                f"{header} {{",
                f"{step}if #available(iOS {config.availability_version}, *) {{",
                f"{step}{step}return .{self.name}",
                f"{step}}}",
                f"{step}return {switch}",
                "}",
            ])

        return f"{header} {{ return {switch} }}"


SYSTEM_COLORS: Tuple[SystemColor, ...] = tuple(
    SystemColor(name=name, color=SemanticColor(name))
    for name in (
        "label",
        "secondaryLabel",
        "tertiaryLabel",
        "quaternaryLabel",
        "systemFill",
        "secondarySystemFill",
        "tertiarySystemFill",
        "quaternarySystemFill",
        "placeholderText",
        "systemBackground",
        "secondarySystemBackground",
        "tertiarySystemBackground",
        "systemGroupedBackground",
        "secondarySystemGroupedBackground",
        "tertiarySystemGroupedBackground",
        "separator",
        "opaqueSeparator",
        "link",
        "darkText",
        "lightText",
        "systemBlue",
        "systemGreen",
        "systemIndigo",
        "systemOrange",
        "systemPink",
        "systemPurple",
        "systemRed",
        "systemTeal",
        "systemYellow",
        "systemGray",
        "systemGray2",
        "systemGray3",
        "systemGray4",
        "systemGray5",
        "systemGray6",
    )
)

_BY_NAME: Dict[str, SystemColor] = {entry.name: entry for entry in SYSTEM_COLORS}


def get_system_colors() -> Tuple[SystemColor, ...]:
    """Return the catalog in generation order."""
    return SYSTEM_COLORS


def get_system_color(name: str) -> SystemColor:
    """
    Look up a catalog entry by name.

    Raises:
        KeyError: If the catalog has no such color
    """
    return _BY_NAME[name]
