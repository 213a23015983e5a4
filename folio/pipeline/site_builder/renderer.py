"""Detail-page rendering utilities for the static site builder.

This module turns one validated content item into its HTML detail page:
markdown conversion through ``markdown2``, date and tag formatting, the
optional rating stars, and substitution into the ``detail`` template. It also
renders the shared navigation header and the about page, and owns the async
file writer used for every generated document.

System Boundaries
-----------------
- Accepts only validated, eligible items; agnostic to discovery and sync.
- Escapes untrusted metadata text (title, description, author, tags);
  markdown bodies are trusted and converted as-is.
- Failures raise ``folio.exceptions`` errors; the orchestrator decides
  whether they are item-level or fatal.

Example
-------
>>> from folio.pipeline.site_builder import renderer
>>> renderer.rating_bucket(7)
(35, '3.5')
"""

from __future__ import annotations

import asyncio
import html
import math
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path
from typing import Any

import markdown2

from folio.config import (
    ABOUT_TEMPLATE,
    DATE_DISPLAY_FORMAT,
    DETAIL_TEMPLATE,
    HEADER_TEMPLATE,
    MARKDOWN_EXTRAS,
    RATING_BUCKET_MAX,
    RATING_SCALE_MAX,
)
from folio.exceptions import OutputWriteError, TemplateRenderError

from .config import SiteConfig
from .models import ContentItem, PublishedItem
from .templating import TemplateSet

ACTIVE_CLASS_ATTR = 'class="active"'


def convert_markdown(markdown_text: str) -> str:
    r"""Convert a markdown body to HTML.

    Soft line breaks become ``<br />``; GitHub-style tables and fenced code
    blocks are enabled.

    Raises
    ------
    TemplateRenderError
        If ``markdown2`` fails on the input.

    Examples
    --------
    >>> "<br" in convert_markdown("line one\nline two")
    True
    """
    try:
        return str(markdown2.markdown(markdown_text, extras=dict(MARKDOWN_EXTRAS)))
    except Exception as exc:
        raise TemplateRenderError(f"Markdown conversion failed: {exc}") from exc


def format_display_date(value: datetime, fmt: str = DATE_DISPLAY_FORMAT) -> str:
    """Format a content date with the locale-aware short date format."""
    return value.strftime(fmt)


def format_tags(tags: Iterable[str], prefix: str = "") -> str:
    """Render tags as ``<span class="tag">`` elements, preserving their order.

    Examples
    --------
    >>> format_tags(["python", "a&b"])
    '<span class="tag">python</span><span class="tag">a&amp;b</span>'
    >>> format_tags(["x"], prefix=" | ")
    '<span class="tag"> | x</span>'
    """
    return "".join(
        f'<span class="tag">{prefix}{html.escape(tag)}</span>' for tag in tags
    )


def is_numeric_rating(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    # ints are exact and may exceed the float range
    return isinstance(value, int) or math.isfinite(value)


def rating_bucket(rating: Any) -> tuple[int, str]:
    """Map a 0-10 rating to a star bucket (0-50) and a 0-5 display value.

    The rating is clamped to the 0-10 scale; the bucket is ``rating * 5``
    rounded half up and the display value is ``bucket / 10``, so halves
    round up there too. Absent or non-numeric ratings map to ``(0, "0.0")``.

    Examples
    --------
    >>> rating_bucket(7)
    (35, '3.5')
    >>> rating_bucket(-2)
    (0, '0.0')
    >>> rating_bucket(15)
    (50, '5.0')
    >>> rating_bucket(0.5)
    (3, '0.3')
    >>> rating_bucket(None)
    (0, '0.0')
    """
    if not is_numeric_rating(rating):
        return 0, "0.0"
    clamped = float(min(max(rating, 0), RATING_SCALE_MAX))
    bucket = math.floor(clamped * 5 + 0.5)
    bucket = min(max(bucket, 0), RATING_BUCKET_MAX)
    return bucket, f"{bucket / 10:.1f}"


def format_rating(rating: Any) -> str:
    """Render the star rating fragment for a raw rating value."""
    bucket, display = rating_bucket(rating)
    return (
        f'<div class="stars stars-{bucket}" aria-label="{display} out of 5">'
        f'<span class="rating-value">{display}</span></div>'
    )


def render_header(templates: TemplateSet, active_page: str) -> str:
    """Render the navigation header with the active page highlighted.

    ``active_page`` is ``"home"``, ``"about"`` or anything else (no active
    entry, as on detail pages).
    """
    return templates.render(
        HEADER_TEMPLATE,
        {
            "homeActive": ACTIVE_CLASS_ATTR if active_page == "home" else "",
            "aboutActive": ACTIVE_CLASS_ATTR if active_page == "about" else "",
        },
    )


def render_detail_page(
    item: ContentItem, templates: TemplateSet, config: SiteConfig, header: str
) -> tuple[PublishedItem, str]:
    """Render one eligible item into its detail page.

    Parameters
    ----------
    item : ContentItem
        Validated, eligible content item.
    templates : TemplateSet
        Loaded templates; must include ``detail``.
    config : SiteConfig
        Build configuration (category, rating support).
    header : str
        Pre-rendered navigation header.

    Returns
    -------
    tuple[PublishedItem, str]
        The listing record for the item and the full page HTML.

    Raises
    ------
    TemplateRenderError
        If markdown conversion or template substitution fails.
    """
    metadata = item.metadata
    html_body = convert_markdown(item.body)
    if config.supports_rating:
        rating_html = format_rating(metadata.rating)
        rating_value = rating_bucket(metadata.rating)[1]
    else:
        rating_html = ""
        rating_value = ""
    page = templates.render(
        DETAIL_TEMPLATE,
        {
            "title": html.escape(metadata.title),
            "description": html.escape(metadata.description),
            "date": format_display_date(metadata.date),
            "tags": format_tags(metadata.tags, prefix=" | "),
            "content": html_body,
            "header": header,
            "rating": rating_html,
            "ratingValue": rating_value,
            "author": html.escape(metadata.author or ""),
            "category": config.css_prefix,
        },
    )
    published = PublishedItem(
        item=item, url=config.detail_url(item.id), html_body=html_body
    )
    return published, page


def render_about_page(templates: TemplateSet, header: str, current_year: int) -> str:
    """Render the static about page with the current year substituted."""
    return templates.render(
        ABOUT_TEMPLATE, {"header": header, "currentYear": current_year}
    )


async def write_html_output(html_content: str, output_file: Path) -> None:
    """Write HTML to ``output_file`` as UTF-8, creating parent directories.

    Raises
    ------
    OutputWriteError
        If the directory or file cannot be written.
    """

    def _write() -> None:
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(html_content, encoding="utf-8")

    try:
        await asyncio.to_thread(_write)
    except OSError as exc:
        raise OutputWriteError(
            f"Failed to write {output_file}: {exc}",
            context={"path": str(output_file)},
        ) from exc
