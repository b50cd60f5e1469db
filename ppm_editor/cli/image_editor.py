#!/usr/bin/env python3
"""
PPM image editor command line.

    ppm-editor <in-file> <out-file> <grayscale|invert|emboss|motionblur> [motion-blur-length]

Bad arguments print the usage text and exit with status 0. Unreadable
input, malformed PPM content or an unwritable output path exit with 1.
"""

import argparse
import logging
import sys
from typing import List, Optional

from ..config import Settings, setup_logging
from ..models.errors import InvalidFormat, UsageError
from ..models.image_filter import FILTER_NAMES, parse_filter
from ..pipeline.edit_image import edit_image
from ..services.image_service import ImageService

logger = logging.getLogger(__name__)

USAGE = (
    "USAGE: ppm-editor <in-file> <out-file> "
    "<grayscale|invert|emboss|motionblur> {motion-blur-length}"
)


class _ArgumentParser(argparse.ArgumentParser):
    """argparse raises instead of exiting so bad input lands in usage mode."""

    def error(self, message):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    ap = _ArgumentParser(prog="ppm-editor", usage=USAGE, add_help=False)
    ap.add_argument("in_file")
    ap.add_argument("out_file")
    ap.add_argument("filter", help=f"one of: {', '.join(FILTER_NAMES)}")
    ap.add_argument("extra", nargs="*", help="motion blur length")
    return ap


def instructions() -> None:
    print(USAGE)


def main(argv: Optional[List[str]] = None) -> int:
    settings = Settings.from_env()
    setup_logging(settings)

    argv = sys.argv[1:] if argv is None else argv
    try:
        args = build_parser().parse_args(argv)
        image_filter = parse_filter(args.filter, args.extra)
    except UsageError as err:
        logger.debug(f"Usage error: {err}")
        instructions()
        return 0

    try:
        edit_image(
            args.in_file,
            args.out_file,
            image_filter,
            image_service=ImageService(settings),
        )
    except (InvalidFormat, OSError) as err:
        logger.error(f"Failed to edit {args.in_file}: {err}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
