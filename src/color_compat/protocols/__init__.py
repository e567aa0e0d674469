"""
Pluggable capabilities and configuration.

Applications register a color resolver to back the semantic colors with a
different platform source, and set a generator config to change the shape of
the emitted class.
"""

from .generator_config import AccessorStyle, GeneratorConfig, set_generator_config, get_generator_config
from .color_resolver import (
    ColorResolver,
    SystemPaletteResolver,
    register_color_resolver,
    get_color_resolver,
    reset_color_resolver,
)

__all__ = [
    "AccessorStyle",
    "GeneratorConfig",
    "set_generator_config",
    "get_generator_config",
    "ColorResolver",
    "SystemPaletteResolver",
    "register_color_resolver",
    "get_color_resolver",
    "reset_color_resolver",
]
