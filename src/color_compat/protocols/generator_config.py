"""Configuration for the generated compatibility class.

Provides hooks for applications to customize naming and style of the emitted
Swift source.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class AccessorStyle(Enum):
    """How the generated per-color accessors pick a value."""

    DARK_MODE_FLAG = "dark-mode-flag"
    AVAILABILITY = "availability"


@dataclass
class GeneratorConfig:
    """Configuration for compatibility class generation.

    Attributes:
        class_name: Name of the generated class
        color_type: Swift color type used in declarations
        superclass: Superclass of the generated class (empty for none)
        objc_members: Whether to prefix the class with ``@objcMembers``
        dark_mode_flag: Name of the static flag that switches appearances
        indent: Indentation used inside the class body
        accessor_style: Accessor body style
        availability_version: iOS version checked by availability accessors
    """

    class_name: str = "ColorCompatibility"
    color_type: str = "UIColor"
    superclass: str = "NSObject"
    objc_members: bool = True
    dark_mode_flag: str = "darkMode"
    indent: str = "    "
    accessor_style: AccessorStyle = AccessorStyle.DARK_MODE_FLAG
    availability_version: str = "13"


# Global config instance (set by application)
_generator_config: Optional[GeneratorConfig] = None


def set_generator_config(config: Optional[GeneratorConfig]) -> None:
    """Set the global generator configuration.

    Args:
        config: GeneratorConfig instance, or None to restore defaults
    """
    global _generator_config
    _generator_config = config


def get_generator_config() -> GeneratorConfig:
    """Get the current generator configuration.

    Returns:
        Current GeneratorConfig or default if not set
    """
    if _generator_config is None:
        return GeneratorConfig()
    return _generator_config
