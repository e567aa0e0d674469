"""Tests for the system palette and color catalog."""

import pytest


def test_catalog_order_and_size():
    """Test the catalog is fixed and ordered."""
    from color_compat.theming import SYSTEM_COLORS, get_system_colors

    names = [entry.name for entry in get_system_colors()]
    assert get_system_colors() is SYSTEM_COLORS
    assert len(names) == 35
    assert len(set(names)) == len(names)
    assert names[:4] == ["label", "secondaryLabel", "tertiaryLabel", "quaternaryLabel"]
    assert names[-6:] == [
        "systemGray", "systemGray2", "systemGray3",
        "systemGray4", "systemGray5", "systemGray6",
    ]


def test_get_system_color_unknown_name():
    """Test lookup of a name outside the catalog."""
    from color_compat.theming import get_system_color

    assert get_system_color("separator").name == "separator"
    with pytest.raises(KeyError):
        get_system_color("systemMint")


def test_palettes_cover_catalog():
    """Test both palettes define every catalog color."""
    from color_compat.theming import SYSTEM_COLORS, SystemPalette

    light = SystemPalette.create_light_palette()
    dark = SystemPalette.create_dark_palette()
    for entry in SYSTEM_COLORS:
        assert light.get(entry.name) is not None, entry.name
        assert dark.get(entry.name) is not None, entry.name
    assert len(light.get_color_dict()) == len(SYSTEM_COLORS)


def test_dark_palette_overrides():
    """Test dynamic colors change and fixed colors do not."""
    from color_compat.theming import SystemPalette

    light = SystemPalette.create_light_palette()
    dark = SystemPalette.create_dark_palette()
    assert light.get("label") != dark.get("label")
    assert light.get("darkText") == dark.get("darkText")
    assert light.get("systemGray") == dark.get("systemGray")


def test_field_name_mapping():
    """Test UIKit names map to palette field names."""
    from color_compat.theming.system_palette import field_name_for

    assert field_name_for("label") == "label"
    assert field_name_for("secondarySystemGroupedBackground") == "secondary_system_grouped_background"
    assert field_name_for("systemGray2") == "system_gray2"


def test_hex_descriptions():
    """Test hex descriptions per appearance."""
    from color_compat.theming import get_system_color

    background = get_system_color("systemBackground")
    assert background.hex_description == "#ffffffff"
    assert background.light_hex_description == "#ffffffff"
    assert background.dark_hex_description == "#000000ff"


def test_constant_descriptions():
    """Test light and dark constant declarations."""
    from color_compat.theming import get_system_color

    label = get_system_color("label")
    assert label.light_color_description() == (
        "public static let labelLight = UIColor(red: 0.0, green: 0.0, blue: 0.0, alpha: 1.0)"
    )
    assert label.dark_color_description() == (
        "public static let labelDark = UIColor(red: 1.0, green: 1.0, blue: 1.0, alpha: 1.0)"
    )
    assert label.color_description() == "UIColor(red: 0.0, green: 0.0, blue: 0.0, alpha: 1.0)"


def test_accessor_description():
    """Test the dark mode switching accessor."""
    from color_compat.theming import get_system_color

    assert get_system_color("link").accessor_description() == (
        "public static var link: UIColor { return darkMode ? linkDark : linkLight }"
    )


def test_availability_accessor_description():
    """Test the accessor that prefers the native color."""
    from color_compat.protocols import AccessorStyle, GeneratorConfig
    from color_compat.theming import get_system_color

    config = GeneratorConfig(accessor_style=AccessorStyle.AVAILABILITY)
    assert get_system_color("label").accessor_description(config).splitlines() == [
        "public static var label: UIColor {",
        "    if #available(iOS 13, *) {",
        "        return .label",
        "    }",
        "    return darkMode ? labelDark : labelLight",
        "}",
    ]


def test_codable_representation():
    """Test the serializable record of a catalog entry."""
    from color_compat.theming import get_system_color

    record = get_system_color("systemBackground").codable_representation
    assert record.to_dict() == {
        "name": "systemBackground",
        "hexString": "#ffffffff",
        "rgbaString": "rgba(255.0, 255.0, 255.0, 1.0)",
        "darkHexString": "#000000ff",
        "darkRgbaString": "rgba(0.0, 0.0, 0.0, 1.0)",
    }


def test_appearance_suffixes():
    """Test constant suffixes per appearance."""
    from color_compat.core import Appearance

    assert Appearance.LIGHT.suffix == "Light"
    assert Appearance.DARK.suffix == "Dark"
    assert Appearance.UNSPECIFIED.suffix == "Light"


def test_constant_description_uses_appearance_suffix():
    """Test both constants are named from the appearance they resolve under."""
    from color_compat.core import Appearance
    from color_compat.theming import get_system_color

    label = get_system_color("label")
    assert label.constant_name(Appearance.DARK) == "labelDark"
    assert label.constant_description(Appearance.DARK) == label.dark_color_description()
    assert label.constant_description(Appearance.LIGHT) == label.light_color_description()
    assert label.constant_description(Appearance.LIGHT).startswith("public static let labelLight = ")
