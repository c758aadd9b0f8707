#!/usr/bin/env python3
"""Command line entry point: composite two image files through a radial mask."""

import argparse
import logging
import math
import sys
from typing import NoReturn, Sequence

from radialblend.compositor import RadialCompositor
from radialblend.config import RadialBlendConfig
from radialblend.errors import (
    MissingArgumentError,
    ParseError,
    RadialBlendError,
    UsageError,
)
from radialblend.io import load_image, save_image

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = "output.png"


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser raising ``UsageError`` instead of exiting with status 2."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    """Create the command line parser."""
    defaults = RadialBlendConfig()

    parser = _ArgumentParser(
        prog="radialblend",
        description=(
            "Keep the centre of MAIN_IMAGE and replace its surroundings with "
            "BACKGROUND_IMAGE, blending across the circle edge."
        ),
    )
    parser.add_argument("main_image", nargs="?", help="Path to the main image")
    parser.add_argument(
        "background_image", nargs="?", help="Path to the background image"
    )
    parser.add_argument(
        "circle_size",
        nargs="?",
        help=f"Radius of the kept region in normalized units (default: "
        f"{defaults.circle_size})",
    )
    parser.add_argument(
        "edge_fuzz",
        nargs="?",
        help=f"Width of the blended band, 0 for a hard edge (default: "
        f"{defaults.edge_fuzz})",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=DEFAULT_OUTPUT,
        help=f"Where to write the composited image (default: {DEFAULT_OUTPUT})",
    )
    parser.add_argument(
        "--filter",
        dest="interpolation",
        choices=["bicubic", "bilinear"],
        default=defaults.interpolation,
        help="Filter used to resize the background",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def parse_float(arg: str) -> float:
    """Parse a finite float argument.

    Raises:
        ParseError: If ``arg`` is not a finite number
    """
    try:
        value = float(arg)
    except ValueError as err:
        raise ParseError(f"couldn't parse {arg} as a float: {err}") from err
    if not math.isfinite(value):
        raise ParseError(f"couldn't parse {arg} as a finite float")
    return value


def config_from_args(args: argparse.Namespace) -> RadialBlendConfig:
    """Build the blend configuration from parsed arguments."""
    overrides: dict[str, float] = {}
    if args.circle_size is not None:
        overrides["circle_size"] = parse_float(args.circle_size)
    if args.edge_fuzz is not None:
        overrides["edge_fuzz"] = parse_float(args.edge_fuzz)

    return RadialBlendConfig(interpolation=args.interpolation, **overrides)


def composite_files(
    main_path: str | None,
    background_path: str | None,
    output_path: str,
    config: RadialBlendConfig,
) -> None:
    """Load both images, composite them and write the result.

    Nothing is written unless compositing succeeds.
    """
    if main_path is None:
        raise MissingArgumentError("please provide a path to the main image")
    if background_path is None:
        raise MissingArgumentError("please provide a path to the background image")

    main_image = load_image(main_path)
    background_image = load_image(background_path)

    combined = RadialCompositor(config).composite(main_image, background_image)

    save_image(combined, output_path)
    logger.info(f"Saved composited image to {output_path}")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Process exit status: 0 on success, 1 on any failure
    """
    try:
        args = build_parser().parse_args(argv)
    except UsageError as err:
        _configure_logging(verbose=False)
        logger.error(str(err))
        return 1

    _configure_logging(args.verbose)

    try:
        config = config_from_args(args)
        composite_files(args.main_image, args.background_image, args.output, config)
    except (RadialBlendError, ValueError) as err:
        logger.error(str(err))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
