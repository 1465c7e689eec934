import argparse
import logging
import sys
from typing import List, Optional
import yaml
from .bitmap import Bitmap
from .config import LOG_LEVELS, default_loglevel
from .errors import BitmapError


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="microbmp",
        description="Decode a BMP file and print its header as YAML.",
    )
    parser.add_argument("filename", help="Path to the BMP file.")
    parser.add_argument(
        "--pixels",
        metavar="N",
        type=int,
        default=0,
        help="Also print the first N decoded pixels.",
    )
    parser.add_argument(
        "--loglevel",
        default=default_loglevel(),
        choices=LOG_LEVELS,
        help="Set the logging level (default: %(default)s)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    log_level = getattr(logging, args.loglevel.upper(), logging.INFO)
    logging.getLogger().setLevel(log_level)
    logger = logging.getLogger(__name__)

    try:
        bitmap = Bitmap.from_file(args.filename)
    except BitmapError as e:
        logger.error(f"{args.filename}: {e}")
        return 1

    info = bitmap.describe()
    if args.pixels > 0:
        info["pixels"] = [
            {type(p).__name__: list(p.channels())}
            for p in bitmap.pixels[: args.pixels]
        ]
    yaml.safe_dump(info, sys.stdout, sort_keys=False)
    return 0
