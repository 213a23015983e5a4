"""Build the static site.

Command-line entry point for the site builder. Parses arguments, configures
logging and runs one full build: detail pages for every published content
item, the listing page, the about page, stale-page cleanup and static asset
copying. Exits with status 1 when the build fails at run level; individual
item failures are logged and do not change the exit status.
"""

import argparse
import locale
import logging
import os
import sys
from pathlib import Path

from folio.config import LOG_DIR, LOG_FILENAME_BUILD_SITE, LOG_FORMAT
from folio.exceptions import ConfigurationError
from folio.pipeline.site_builder import SiteConfig, run_from_config

logger = logging.getLogger(__name__)


def setup_logging(log_level: str = "INFO", enable_file: bool = True) -> None:
    """Configure console and optional file logging for a build run.

    File handler creation errors are ignored so the build can still log to
    the console.
    """
    for h in logging.root.handlers[:]:
        logging.root.removeHandler(h)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if enable_file:
        try:
            LOG_DIR.mkdir(exist_ok=True)
            handlers.insert(
                0,
                logging.FileHandler(LOG_DIR / LOG_FILENAME_BUILD_SITE, mode="a"),
            )
        except OSError:
            pass
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments; unset options fall back to SiteConfig."""
    parser = argparse.ArgumentParser(
        description="Generate the static site from the content directory."
    )
    parser.add_argument("--content", type=Path, default=None)
    parser.add_argument("--output", type=Path, default=None)
    parser.add_argument("--templates", type=Path, default=None)
    parser.add_argument("--assets", type=Path, default=None)
    parser.add_argument(
        "--no-assets", action="store_true", help="Skip static asset copying"
    )
    parser.add_argument("--category", type=str, default=None)
    parser.add_argument("--visible-count", type=int, default=None)
    parser.add_argument(
        "--ratings",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Render rating stars and rating sort keys",
    )
    parser.add_argument(
        "--no-resort",
        action="store_true",
        help="Omit the client-side sort controls",
    )
    parser.add_argument("--year", type=int, default=None)
    parser.add_argument("--log-level", type=str, default="INFO")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint for site generation.

    Returns
    -------
    int
        Process exit status: 0 on success, 1 on run-level failure.
    """
    args = parse_args(argv)
    setup_logging(
        args.log_level,
        enable_file=not bool(os.environ.get("DISABLE_FILE_LOGS")),
    )
    # Display dates use %x, which follows LC_TIME
    try:
        locale.setlocale(locale.LC_TIME, "")
    except locale.Error as error:
        logger.warning(f"Could not apply the user locale, using C dates: {error}")
    try:
        config = SiteConfig(
            content_dir=args.content,
            output_dir=args.output,
            templates_dir=args.templates,
            assets_dir=args.assets,
            skip_assets=args.no_assets,
            category=args.category,
            supports_rating=args.ratings,
            supports_interactive_resort=False if args.no_resort else None,
            visible_count=args.visible_count,
            current_year=args.year,
        )
    except ConfigurationError as error:
        logger.error(f"Invalid configuration: {error}")
        return 1
    return 0 if run_from_config(config) else 1


if __name__ == "__main__":
    sys.exit(main())
