"""Site builder pipeline package.

Re-exports the public surface of the build pipeline so callers can import
from ``folio.pipeline.site_builder`` without reaching into submodules:

- `content_reader`: content discovery, metadata validation and loading.
- `publication`: the publication filter.
- `templating`: template loading and placeholder substitution.
- `renderer`: markdown conversion, detail pages, header and about page.
- `listing`: listing/home page composition.
- `sync`: stale detail-page cleanup.
- `assets`: static asset copying.
- `runner`: the build orchestrator.

Examples
--------
>>> from folio.pipeline.site_builder import SiteConfig, run_from_config
>>> ok = run_from_config(SiteConfig(current_year=2025))  # doctest: +SKIP
"""

from .assets import copy_static_assets
from .config import SiteConfig
from .content_reader import (
    discover_content_ids,
    load_content_item,
    parse_content_date,
    read_content_repository,
    validate_metadata,
)
from .listing import compose_listing, sort_items
from .models import BuildReport, ContentItem, ContentMetadata, PublishedItem, ReadResult
from .publication import is_eligible
from .renderer import (
    convert_markdown,
    format_rating,
    format_tags,
    rating_bucket,
    render_about_page,
    render_detail_page,
    write_html_output,
)
from .runner import build_site, run_from_config
from .sync import sync_detail_pages
from .templating import TemplateSet, render_template

__all__ = [
    "BuildReport",
    "ContentItem",
    "ContentMetadata",
    "PublishedItem",
    "ReadResult",
    "SiteConfig",
    "TemplateSet",
    "build_site",
    "compose_listing",
    "convert_markdown",
    "copy_static_assets",
    "discover_content_ids",
    "format_rating",
    "format_tags",
    "is_eligible",
    "load_content_item",
    "parse_content_date",
    "rating_bucket",
    "read_content_repository",
    "render_about_page",
    "render_detail_page",
    "render_template",
    "run_from_config",
    "sort_items",
    "sync_detail_pages",
    "validate_metadata",
    "write_html_output",
]
