"""Command-line interface for page-baker."""

import argparse
import json
import logging
import sys
from pathlib import Path

from page_baker.baker import PageBaker
from page_baker.paths import resolve_bake_path
from page_baker.site import Site

DEFAULT_OUTPUT_DIR = Path("./_counter")


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def bake_page(args: argparse.Namespace) -> int:
    """Execute the bake command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    site_dir = args.site.resolve()
    if not site_dir.is_dir():
        logger.error(f"Site directory not found: {site_dir}")
        return 1

    extra_data = None
    if args.data:
        try:
            extra_data = json.loads(args.data)
        except json.JSONDecodeError as e:
            logger.error(f"Invalid --data JSON: {e}")
            return 1
        if not isinstance(extra_data, dict):
            logger.error("--data must be a JSON object")
            return 1

    try:
        site = Site.from_directory(site_dir)
        if args.pretty_urls:
            site.config.set_value("site/pretty_urls", True)
        if args.portable_urls:
            site.config.set_value("baker/portable_urls", True)
        copy_assets = args.copy_assets or bool(
            site.config.get_value("baker/copy_assets", False)
        )

        page = site.get_page(args.uri)
        baker = PageBaker(args.output, {"copy_assets": copy_assets})
        result = baker.bake(page, extra_data)

        logger.info(f"Baked page: '{result.uri}'")
        logger.info(f"  Files: {result.page_count}")
        for baked_file in result.baked_files:
            logger.info(f"    - {baked_file}")
        if result.pagination_data_accessed:
            logger.info("  Paginated: yes")

        return 0

    except Exception as e:
        logger.error(f"Failed to bake page: {e}")
        return 1


def resolve_path(args: argparse.Namespace) -> int:
    """Execute the resolve-path command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    if args.page < 1:
        logger.error(f"Invalid page number: {args.page}")
        return 1

    print(resolve_bake_path(args.output, args.uri, args.page, args.pretty_urls))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="page-baker",
        description="Bake site pages into static files",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    bake_parser = subparsers.add_parser(
        "bake",
        help="Bake one page of a site, with all its sub-pages",
        description="Render a page of a site and write it, and any paginated sub-pages, to the output directory.",
    )
    bake_parser.add_argument(
        "--site",
        type=Path,
        required=True,
        help="Path to the site directory",
    )
    bake_parser.add_argument(
        "--uri",
        type=str,
        required=True,
        help="URI of the page to bake (use '' for the site root)",
    )
    bake_parser.add_argument(
        "--output",
        type=Path,
        default=DEFAULT_OUTPUT_DIR,
        help=f"Output directory (default: {DEFAULT_OUTPUT_DIR})",
    )
    bake_parser.add_argument(
        "--copy-assets",
        action="store_true",
        help="Copy page assets next to the baked files",
    )
    bake_parser.add_argument(
        "--portable-urls",
        action="store_true",
        help="Use a relative site root so the output can be served from anywhere",
    )
    bake_parser.add_argument(
        "--pretty-urls",
        action="store_true",
        help="Bake directory-style URLs (uri/index.html)",
    )
    bake_parser.add_argument(
        "--data",
        type=str,
        default=None,
        help="Extra template data as a JSON object",
    )
    bake_parser.set_defaults(func=bake_page)

    resolve_parser = subparsers.add_parser(
        "resolve-path",
        help="Print the output path of a page without baking it",
        description="Compute where a page number of a page would be baked.",
    )
    resolve_parser.add_argument(
        "--uri",
        type=str,
        required=True,
        help="URI of the page",
    )
    resolve_parser.add_argument(
        "--page",
        type=int,
        default=1,
        help="Page number (default: 1)",
    )
    resolve_parser.add_argument(
        "--output",
        type=Path,
        default=DEFAULT_OUTPUT_DIR,
        help=f"Output directory (default: {DEFAULT_OUTPUT_DIR})",
    )
    resolve_parser.add_argument(
        "--pretty-urls",
        action="store_true",
        help="Use directory-style URLs",
    )
    resolve_parser.set_defaults(func=resolve_path)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
