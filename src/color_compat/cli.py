"""
CLI: Generate the color compatibility class or the color records.
Usage:
  color-compat                                  # Swift class to stdout
  color-compat --format json -o colors.json     # records as JSON
  color-compat --class-name Colors --accessor-style availability
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from color_compat.core.code_generator import generate_compatibility_class, generate_json
from color_compat.core.exceptions import ColorResolutionFailed
from color_compat.protocols.generator_config import AccessorStyle, GeneratorConfig

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="color-compat",
        description="Generate light/dark fallbacks for the iOS system semantic colors.",
    )
    parser.add_argument(
        "--format",
        "-f",
        choices=("swift", "json"),
        default="swift",
        help="Output a Swift compatibility class or JSON color records (default: swift).",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Write to this file instead of stdout.",
    )
    parser.add_argument(
        "--class-name",
        type=str,
        default=None,
        help="Name of the generated class (default: ColorCompatibility). Swift output only.",
    )
    parser.add_argument(
        "--color-type",
        type=str,
        default=None,
        help="Swift color type used in declarations (default: UIColor). Swift output only.",
    )
    parser.add_argument(
        "--accessor-style",
        choices=[style.value for style in AccessorStyle],
        default=None,
        help="Accessor body style (default: dark-mode-flag). Swift output only.",
    )
    parser.add_argument(
        "--no-objc-members",
        action="store_true",
        help="Omit the @objcMembers attribute. Swift output only.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log generation details to stderr.",
    )
    return parser


SWIFT_ONLY_OPTIONS = ("class_name", "color_type", "accessor_style")


def config_from_args(args: argparse.Namespace) -> GeneratorConfig:
    config = GeneratorConfig(objc_members=not args.no_objc_members)
    if args.class_name is not None:
        config.class_name = args.class_name
    if args.color_type is not None:
        config.color_type = args.color_type
    if args.accessor_style is not None:
        config.accessor_style = AccessorStyle(args.accessor_style)
    return config


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.format == "json":
        given = [name for name in SWIFT_ONLY_OPTIONS if getattr(args, name) is not None]
        if args.no_objc_members:
            given.append("no_objc_members")
        if given:
            options = ", ".join("--" + name.replace("_", "-") for name in given)
            parser.error(f"{options} only apply to --format swift")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        if args.format == "json":
            output = generate_json()
        else:
            output = generate_compatibility_class(config=config_from_args(args))
    except ColorResolutionFailed as e:
        logger.error(f"Generation aborted: {e}")
        return 1

    if args.output is None:
        sys.stdout.write(output)
        return 0

    try:
        args.output.write_text(output, encoding="utf-8")
    except OSError as e:
        logger.error(f"Could not write {args.output}: {e}")
        return 1
    logger.info(f"Wrote {args.format} output to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
