"""
Core color utilities.

Appearance modes, color accessor helpers and exceptions shared by the
catalog and the generator. The generator itself lives in
``color_compat.core.code_generator``.
"""

from .appearance import Appearance
from .exceptions import ColorCompatError, ColorResolutionFailed
from .color_accessors import (
    channels,
    red,
    green,
    blue,
    alpha,
    to_hex_string,
    to_rgba_string,
    color_to_hex_string,
    color_to_rgba_string,
)

__all__ = [
    "Appearance",
    "ColorCompatError",
    "ColorResolutionFailed",
    "channels",
    "red",
    "green",
    "blue",
    "alpha",
    "to_hex_string",
    "to_rgba_string",
    "color_to_hex_string",
    "color_to_rgba_string",
]
