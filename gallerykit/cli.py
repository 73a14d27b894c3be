"""
Command line entry point.

    gallerykit catalog catalog-config.json
    gallerykit thumbnails thumbnail-config.json --workers 4
"""
from dataclasses import replace
from typing import Optional, Sequence
import argparse
import logging
import signal

from . import __version__
from .config.settings import CatalogConfig, ThumbnailConfig
from .core.errors import GalleryError
from .gallery import GalleryGenerator

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FATAL = 2
EXIT_STOPPED = 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gallerykit",
        description="Catalog gallery images and generate their thumbnails",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug output")

    commands = parser.add_subparsers(dest="command", required=True)

    catalog = commands.add_parser("catalog", help="Scan image directories and write the catalog file")
    catalog.add_argument("config", help="JSON file with catalog options")

    thumbnails = commands.add_parser("thumbnails", help="Generate thumbnails for every cataloged image")
    thumbnails.add_argument("config", help="JSON file with thumbnail options")
    thumbnails.add_argument("--workers", type=int, default=None,
                            help="Number of worker processes (overrides max_workers)")
    return parser


def run_catalog(args: argparse.Namespace, generator: GalleryGenerator) -> int:
    config = CatalogConfig.from_file(args.config)
    generator.build_catalog(config)
    return EXIT_OK


def run_thumbnails(args: argparse.Namespace, generator: GalleryGenerator) -> int:
    config = ThumbnailConfig.from_file(args.config)
    if args.workers is not None:
        if args.workers < 1:
            raise GalleryError("--workers must be at least 1")
        config = replace(config, max_workers=args.workers)

    previous = signal.signal(signal.SIGINT, lambda signum, frame: generator.stop())
    try:
        summary = generator.generate_thumbnails(config)
    finally:
        signal.signal(signal.SIGINT, previous)

    return EXIT_STOPPED if summary.stopped else EXIT_OK


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    generator = GalleryGenerator()
    handlers = {
        "catalog": run_catalog,
        "thumbnails": run_thumbnails,
    }

    try:
        return handlers[args.command](args, generator)
    except GalleryError as e:
        logger.error(str(e))
        return EXIT_FATAL
