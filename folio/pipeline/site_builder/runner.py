"""Build the static site from the content repository.

This module provides the headless orchestrator of the site builder. One run
is a single linear pass: ensure the output root exists, read and filter the
content items, render every published item, compose the listing page, write
the about page, remove stale detail pages and copy static assets.

Item-level failures are logged and isolated; run-level failures (output
root, templates, content root, listing page, assets) abort the build.

Usage Examples
--------------
Typical programmatic usage with config defaults::

    from folio.pipeline.site_builder.runner import run_from_config
    result = run_from_config()
    assert result is True

Explicit configuration::

    from pathlib import Path
    from folio.pipeline.site_builder import SiteConfig, run_from_config

    run_from_config(
        SiteConfig(
            content_dir=Path("content"),
            output_dir=Path("public"),
            category="review",
            supports_rating=True,
        )
    )
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime

from folio.config import (
    ABOUT_FILENAME,
    ABOUT_TEMPLATE,
    DETAIL_PAGE_SUFFIX,
    DETAIL_TEMPLATE,
    HEADER_TEMPLATE,
    INDEX_FILENAME,
    INDEX_TEMPLATE,
    SORT_SCRIPT_TEMPLATE,
)
from folio.exceptions import AppError, OutputWriteError

from .assets import copy_static_assets
from .config import SiteConfig
from .content_reader import read_content_repository
from .listing import compose_listing
from .models import BuildReport, PublishedItem
from .renderer import (
    render_about_page,
    render_detail_page,
    render_header,
    write_html_output,
)
from .sync import sync_detail_pages
from .templating import TemplateSet

logger = logging.getLogger(__name__)

REQUIRED_TEMPLATES: tuple[str, ...] = (
    HEADER_TEMPLATE,
    DETAIL_TEMPLATE,
    INDEX_TEMPLATE,
    ABOUT_TEMPLATE,
)


def _template_names(config: SiteConfig) -> list[str]:
    names = list(REQUIRED_TEMPLATES)
    if config.supports_interactive_resort:
        names.append(SORT_SCRIPT_TEMPLATE)
    return names


async def build_site(config: SiteConfig) -> BuildReport:
    """Run one full build.

    Parameters
    ----------
    config : SiteConfig
        Build configuration.

    Returns
    -------
    BuildReport
        Published, skipped and failed ids plus the removed stale pages.

    Raises
    ------
    ConfigurationError
        If the templates, content root or static assets are unusable.
    OutputWriteError
        If the output root or the listing page cannot be written.
    """
    logger.info("Starting build process...")
    current_year = config.current_year or datetime.now().year
    try:
        config.output_dir.mkdir(parents=True, exist_ok=True)
        config.detail_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputWriteError(
            f"Cannot create output directory {config.output_dir}: {exc}",
            context={"output_dir": str(config.output_dir)},
        ) from exc

    templates = TemplateSet.load(config.templates_dir, _template_names(config))
    read_result = await read_content_repository(config.content_dir)
    report = BuildReport(skipped=list(read_result.skipped), failed=dict(read_result.failed))

    detail_header = render_header(templates, config.category)
    published: list[PublishedItem] = []
    for item in read_result.items:
        output_path = config.detail_dir / f"{item.id}{DETAIL_PAGE_SUFFIX}"
        try:
            entry, page = render_detail_page(item, templates, config, detail_header)
            await write_html_output(page, output_path)
        except AppError as error:
            logger.error(f"Error processing {config.category} {item.id}: {error}")
            report.failed[item.id] = error.to_dict()
            continue
        logger.info(f"Generated: {output_path}")
        published.append(entry)
        report.published.append(item.id)

    listing_html = compose_listing(
        published, templates, config, render_header(templates, "home"), current_year
    )
    index_path = config.output_dir / INDEX_FILENAME
    await write_html_output(listing_html, index_path)
    logger.info(f"Generated: {index_path}")

    about_path = config.output_dir / ABOUT_FILENAME
    try:
        about_html = render_about_page(
            templates, render_header(templates, "about"), current_year
        )
        await write_html_output(about_html, about_path)
        logger.info(f"Generated: {about_path}")
    except AppError as error:
        logger.error(f"Error generating about page: {error}")

    removed = sync_detail_pages(
        config.detail_dir, report.published, preserve_ids=report.failed
    )
    report.removed = [str(path) for path in removed]

    if config.assets_dir is not None:
        copy_static_assets(config.assets_dir, config.output_dir)
    else:
        logger.info("No assets directory configured, skipping static assets")

    logger.info("Build completed successfully!")
    return report


def run_from_config(config: SiteConfig | None = None) -> bool:
    """Build the site and report success.

    If ``config`` is ``None`` a ``SiteConfig`` is resolved from the
    environment and project defaults.

    Returns
    -------
    bool
        ``True`` if the build completed (individual items may still have
        failed); ``False`` on a run-level failure, which is logged.

    Examples
    --------
    >>> from folio.pipeline.site_builder.runner import run_from_config
    >>> result = run_from_config()
    >>> assert result in (True, False)
    """
    try:
        site_config = config if config is not None else SiteConfig()
        report = asyncio.run(build_site(site_config))
    except Exception:
        logger.exception("Build failed")
        return False
    summary = report.as_dict()
    logger.info(
        "Build summary: published=%d skipped=%d failed=%d removed=%d",
        summary["published"],
        summary["skipped_unpublished"],
        summary["failed"],
        summary["removed_stale"],
    )
    return True


__all__ = ["build_site", "run_from_config"]
