"""Tests for the command line entry point."""

import json

import pytest


def test_swift_to_stdout(capsys):
    """Test default invocation prints the Swift class."""
    from color_compat.cli import main

    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("@objcMembers\npublic class ColorCompatibility: NSObject {")


def test_json_to_file(tmp_path):
    """Test JSON output written to a file."""
    from color_compat.cli import main

    target = tmp_path / "colors.json"
    assert main(["--format", "json", "--output", str(target)]) == 0
    records = json.loads(target.read_text(encoding="utf-8"))
    assert records[0]["name"] == "label"


def test_style_options(capsys):
    """Test class options are passed through to the generator."""
    from color_compat.cli import main

    assert main([
        "--class-name", "Colors",
        "--color-type", "Color",
        "--accessor-style", "availability",
        "--no-objc-members",
    ]) == 0
    out = capsys.readouterr().out
    assert out.startswith("public class Colors: NSObject {")
    assert "if #available(iOS 13, *) {" in out
    assert "= Color(red: " in out


def test_failure_exits_nonzero_without_output(tmp_path, failing_resolver):
    """Test a resolution failure writes nothing and exits 1."""
    from color_compat.cli import main

    target = tmp_path / "ColorCompatibility.swift"
    assert main(["--output", str(target)]) == 1
    assert not target.exists()


def test_unwritable_output_exits_nonzero(tmp_path):
    """Test a missing output directory is reported instead of raising."""
    from color_compat.cli import main

    target = tmp_path / "missing" / "ColorCompatibility.swift"
    assert main(["--output", str(target)]) == 1
    assert not target.exists()


def test_json_rejects_swift_options(capsys):
    """Test Swift-only options are refused for JSON output."""
    from color_compat.cli import main

    with pytest.raises(SystemExit) as excinfo:
        main(["--format", "json", "--class-name", "Colors", "--no-objc-members"])
    assert excinfo.value.code == 2
    err = capsys.readouterr().err
    assert "--class-name" in err
    assert "--no-objc-members" in err
