"""
Color accessor helpers.

Channel access and string renderings for color handles. A handle is either a
concrete ``QColor`` or a semantic color exposing
``resolved_color(appearance) -> QColor``.

Both renderings keep the conversions of the Swift tool whose output existing
apps already embed:

- hex truncates each channel with ``int(value * 255)`` instead of rounding
- rgba scales red, green and blue to 0-255 floats but leaves alpha as a fraction
"""

from typing import Optional, Tuple

from PyQt6.QtGui import QColor

from color_compat.core.appearance import Appearance

Channels = Tuple[float, float, float, float]


def _resolve(color, appearance: Optional[Appearance] = None) -> QColor:
    if isinstance(color, QColor):
        return color
    return color.resolved_color(appearance or Appearance.UNSPECIFIED)


def channels(color, appearance: Optional[Appearance] = None) -> Channels:
    """
    Resolve a color handle and return its normalized channels.

    Args:
        color: QColor or semantic color handle
        appearance: Appearance to resolve a semantic color under
            (defaults to UNSPECIFIED; ignored for a QColor)

    Returns:
        (red, green, blue, alpha) fractions in [0, 1]
    """
    r, g, b, a = _resolve(color, appearance).getRgbF()
    return float(r), float(g), float(b), float(a)


def red(color, appearance: Optional[Appearance] = None) -> float:
    return channels(color, appearance)[0]


def green(color, appearance: Optional[Appearance] = None) -> float:
    return channels(color, appearance)[1]


def blue(color, appearance: Optional[Appearance] = None) -> float:
    return channels(color, appearance)[2]


def alpha(color, appearance: Optional[Appearance] = None) -> float:
    return channels(color, appearance)[3]


def format_component(value: float) -> str:
    """Shortest round-trip decimal form of a channel, e.g. ``0.0`` or ``127.5``."""
    return repr(float(value))


def quantize(value: float) -> int:
    """Truncate a [0, 1] fraction to a byte (no rounding)."""
    return min(max(int(value * 255), 0), 255)


def to_hex_string(r: float, g: float, b: float, a: float) -> str:
    """
    Render channels as ``#rrggbbaa``.

    Args:
        r, g, b, a: Channel fractions in [0, 1]

    Returns:
        str: Lowercase 8-digit hex string with alpha in the low byte
    """
    rgba = quantize(r) << 24 | quantize(g) << 16 | quantize(b) << 8 | quantize(a)
    return f"#{rgba:08x}"


def to_rgba_string(r: float, g: float, b: float, a: float) -> str:
    """
    Render channels as ``rgba(R, G, B, A)``.

    R, G and B are scaled to 0-255 without quantizing; A stays a fraction.
    """
    return (
        f"rgba({format_component(r * 255)}, {format_component(g * 255)}, "
        f"{format_component(b * 255)}, {format_component(a)})"
    )


def color_to_hex_string(color, appearance: Optional[Appearance] = None) -> str:
    return to_hex_string(*channels(color, appearance))


def color_to_rgba_string(color, appearance: Optional[Appearance] = None) -> str:
    return to_rgba_string(*channels(color, appearance))
