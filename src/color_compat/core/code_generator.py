"""Compatibility class generation.

Renders the catalog into a Swift class that exposes every system color as a
light constant, a dark constant and an accessor switching between them, or
into a list of serializable records with the hex and rgba strings.

Every entry is resolved before any text is joined, so a resolution failure
aborts generation without returning partial source.
"""

import json
import logging
import textwrap
from typing import Iterable, List, Optional

from color_compat.protocols.generator_config import GeneratorConfig, get_generator_config
from color_compat.theming.catalog import CodableSystemColor, SystemColor, get_system_colors

logger = logging.getLogger(__name__)

LIGHT_BANNER = "// MARK: - Light Style Colors"
DARK_BANNER = "// MARK: - Dark Style Colors"
ACCESSOR_BANNER = "// MARK: - UIElement Colors"


def _catalog(colors: Optional[Iterable[SystemColor]]) -> List[SystemColor]:
    return list(get_system_colors() if colors is None else colors)


def generate_light_declarations(
    colors: Optional[Iterable[SystemColor]] = None,
    config: Optional[GeneratorConfig] = None,
) -> List[str]:
    config = config or get_generator_config()
    return [entry.light_color_description(config) for entry in _catalog(colors)]


def generate_dark_declarations(
    colors: Optional[Iterable[SystemColor]] = None,
    config: Optional[GeneratorConfig] = None,
) -> List[str]:
    config = config or get_generator_config()
    return [entry.dark_color_description(config) for entry in _catalog(colors)]


def generate_accessors(
    colors: Optional[Iterable[SystemColor]] = None,
    config: Optional[GeneratorConfig] = None,
) -> List[str]:
    config = config or get_generator_config()
    return [entry.accessor_description(config) for entry in _catalog(colors)]


def _class_header(config: GeneratorConfig) -> List[str]:
    lines = []
    if config.objc_members:
        lines.append("@objcMembers")
    inheritance = f": {config.superclass}" if config.superclass else ""
    lines.append(f"public class {config.class_name}{inheritance} {{")
    return lines


def _section(banner: str, fragments: List[str]) -> str:
    return "\n".join([banner, *fragments])


def generate_compatibility_class(
    colors: Optional[Iterable[SystemColor]] = None,
    config: Optional[GeneratorConfig] = None,
) -> str:
    """
    Generate the complete compatibility class.

    Args:
        colors: Entries to render (defaults to the built-in catalog)
        config: Generator configuration (defaults to the global config)

    Returns:
        str: Swift source ending in a newline

    Raises:
        ColorResolutionFailed: If any entry cannot be resolved
    """
    config = config or get_generator_config()
    entries = _catalog(colors)

    light = generate_light_declarations(entries, config)
    logger.debug(f"Rendered {len(light)} light declarations")
    dark = generate_dark_declarations(entries, config)
    logger.debug(f"Rendered {len(dark)} dark declarations")
    accessors = generate_accessors(entries, config)
    logger.debug(f"Rendered {len(accessors)} accessors")

    body = "\n\n".join([
        f"public static var {config.dark_mode_flag} = false",
        _section(LIGHT_BANNER, light),
        _section(DARK_BANNER, dark),
        _section(ACCESSOR_BANNER, accessors),
    ])

    lines = _class_header(config)
    lines.append("")
    lines.append(textwrap.indent(body, config.indent))
    lines.append("}")

    logger.info(f"Generated {config.class_name} with {len(entries)} colors")
    return "\n".join(lines) + "\n"


# Alias matching the Swift helper's name
extension_description = generate_compatibility_class


def generate_codable_colors(
    colors: Optional[Iterable[SystemColor]] = None,
) -> List[CodableSystemColor]:
    """Return one serializable record per entry, in catalog order."""
    records = [entry.codable_representation for entry in _catalog(colors)]
    logger.debug(f"Built {len(records)} color records")
    return records


def generate_json(
    colors: Optional[Iterable[SystemColor]] = None,
    indent: int = 2,
) -> str:
    """
    Serialize the color records to JSON.

    Keys keep the camelCase names of the records (``hexString``,
    ``darkRgbaString``, ...) and the list keeps catalog order.
    """
    records = [record.to_dict() for record in generate_codable_colors(colors)]
    return json.dumps(records, indent=indent) + "\n"
