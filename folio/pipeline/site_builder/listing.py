"""Listing composer: builds the home page from all published items.

Cards are ordered newest first. The first ``visible_count`` cards are shown,
the rest carry the ``hidden`` class and a "show more" button reveals them.
When interactive re-sort is enabled every card exposes its raw sort keys as
``data-*`` attributes so the companion script can reorder cards in the
browser.
"""

from __future__ import annotations

import html
import logging
from collections.abc import Sequence
from typing import Any

from folio.config import (
    EMPTY_CARD_MESSAGE,
    EMPTY_CARD_TITLE,
    INDEX_TEMPLATE,
    SHOW_MORE_LABEL_FORMAT,
    SORT_SCRIPT_TEMPLATE,
)

from .config import SiteConfig
from .models import PublishedItem
from .renderer import (
    format_display_date,
    format_rating,
    format_tags,
    is_numeric_rating,
)
from .templating import TemplateSet

logger = logging.getLogger(__name__)


def sort_items(items: Sequence[PublishedItem]) -> list[PublishedItem]:
    """Return items sorted by date, newest first.

    The sort is stable: items with equal dates keep their input order, which
    is the reader's name-sorted discovery order.

    Examples
    --------
    Dates ``2024-01-01``, ``2023-06-01`` and ``2025-03-01`` come out as
    ``2025-03-01``, ``2024-01-01``, ``2023-06-01``.
    """
    return sorted(items, key=lambda published: published.metadata.date, reverse=True)


def _raw_rating(rating: Any) -> str:
    return str(rating) if is_numeric_rating(rating) else ""


def render_card(published: PublishedItem, index: int, config: SiteConfig) -> str:
    """Render the summary card of one item at position ``index``."""
    metadata = published.metadata
    hidden = " hidden" if index >= config.visible_count else ""
    attrs = f'data-index="{index}"'
    if config.supports_interactive_resort:
        attrs += f' data-date="{html.escape(metadata.date_raw)}"'
        if config.supports_rating:
            attrs += f' data-rating="{html.escape(_raw_rating(metadata.rating))}"'
    title = html.escape(metadata.title)
    rating_html = format_rating(metadata.rating) if config.supports_rating else ""
    return f"""
        <div class="{config.card_class}{hidden}" {attrs}>
          <a href="{html.escape(published.url)}" class="{config.card_class}-link" aria-label="View {title}"></a>
          <h3>{title}</h3>
          <p>{html.escape(metadata.description)}</p>
          <div class="{config.css_prefix}-footer">
            <div class="{config.css_prefix}-tags">
              {format_tags(metadata.tags)}
            </div>
            <div class="card-meta">
              {rating_html}
              <div class="date-display">{format_display_date(metadata.date)}</div>
            </div>
          </div>
        </div>
      """


def render_empty_card(config: SiteConfig) -> str:
    """Render the placeholder card shown when nothing is published."""
    return f"""
        <div class="{config.card_class} empty-card">
          <h3>{EMPTY_CARD_TITLE}</h3>
          <p>{EMPTY_CARD_MESSAGE}</p>
        </div>
      """


def render_show_more(config: SiteConfig, total: int) -> str:
    """Return the reveal button, or an empty string when every card is visible."""
    if total <= config.visible_count:
        return ""
    label = SHOW_MORE_LABEL_FORMAT.format(category_title=config.category.title())
    return f"""
          <div class="show-more-container">
            <a id="showMoreBtn" class="btn">{label}</a>
          </div>
        """


def render_sort_controls(config: SiteConfig) -> str:
    """Render the client-side sort buttons (date toggle, optional rating)."""
    if not config.supports_interactive_resort:
        return ""
    rating_button = ""
    if config.supports_rating:
        rating_button = """
    <button id="sortRatingBtn" class="sort-btn" data-sort="rating">
      Rating <span class="sort-arrow">↓</span>
    </button>"""
    return f"""
  <div class="sorting-controls">
    <button id="sortToggleBtn" class="sort-btn" data-sort="newest">
      Newest <span class="sort-arrow">↓</span>
    </button>{rating_button}
  </div>
  """


def compose_listing(
    items: Sequence[PublishedItem],
    templates: TemplateSet,
    config: SiteConfig,
    header: str,
    current_year: int,
) -> str:
    """Compose the listing page for all published items.

    Parameters
    ----------
    items : Sequence[PublishedItem]
        Published items in any order.
    templates : TemplateSet
        Loaded templates; must include ``index`` and, when interactive
        re-sort is enabled, ``sort_script``.
    config : SiteConfig
        Build configuration.
    header : str
        Pre-rendered navigation header with "home" active.
    current_year : int
        Year for the footer notice.

    Returns
    -------
    str
        The full listing page HTML.

    Notes
    -----
    Zero items yield a single placeholder card and no reveal button.
    """
    ordered = sort_items(items)
    if ordered:
        cards = "".join(
            render_card(published, index, config)
            for index, published in enumerate(ordered)
        )
        show_more = render_show_more(config, len(ordered))
    else:
        cards = render_empty_card(config)
        show_more = ""
    if config.supports_interactive_resort:
        sort_script = templates.render(
            SORT_SCRIPT_TEMPLATE,
            {"visibleCount": config.visible_count, "cardClass": config.card_class},
        )
    else:
        sort_script = ""
    logger.debug(f"Composed listing with {len(ordered)} cards")
    return templates.render(
        INDEX_TEMPLATE,
        {
            "cards": cards,
            "showMoreBtn": show_more,
            "sortControls": render_sort_controls(config),
            "sortScript": sort_script,
            "currentYear": current_year,
            "header": header,
            "category": config.css_prefix,
        },
    )
