"""Configuration record for one site build.

This module provides SiteConfig, the explicit configuration record passed
into the build orchestrator. It gathers source/output locations and the
capability flags that distinguish the site variants (category naming,
ratings, client-side re-sort, visible card count).

Resolution Order
----------------
1. Explicit keyword arguments given to ``SiteConfig(...)``.
2. Environment variables (``FOLIO_*``), with a project ``.env`` loaded via
   ``python-dotenv`` when present.
3. Defaults from ``folio.config``.

Examples
--------
>>> from pathlib import Path
>>> from folio.pipeline.site_builder.config import SiteConfig
>>> cfg = SiteConfig(content_dir=Path("content"), output_dir=Path("public"))
>>> cfg.detail_dir == Path("public") / cfg.category
True
"""

from __future__ import annotations

import os
import re
from pathlib import Path

from dotenv import load_dotenv

import folio.config as _project_config
from folio.config import (
    DEFAULT_ASSETS_DIR,
    DEFAULT_CATEGORY,
    DEFAULT_CONTENT_DIR,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_TEMPLATES_DIR,
    DEFAULT_VISIBLE_COUNT,
)
from folio.exceptions import ConfigurationError

_CATEGORY_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_-]*$")
_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(
        f"Invalid boolean value for {name}: {raw!r}", context={"variable": name}
    )


def _env_path(name: str, default: Path | None) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw.strip())


class SiteConfig:
    r"""Configuration record for the site builder.

    Attributes
    ----------
    content_dir : Path
        Source root; one subdirectory per content item.
    output_dir : Path
        Output root receiving the listing, about page and detail pages.
    templates_dir : Path
        Directory holding the ``*.html`` templates.
    assets_dir : Path | None
        Static asset source directory; ``None`` skips asset copying.
    category : str
        Output path segment for detail pages (e.g. ``"project"``,
        ``"review"``). Also used for card CSS classes.
    supports_rating : bool
        Render rating stars and expose ``data-rating`` sort keys.
    supports_interactive_resort : bool
        Emit the client-side sort controls, script and ``data-*`` keys.
    visible_count : int
        Number of cards initially visible on the listing page.
    current_year : int | None
        Year substituted into copyright notices; ``None`` means the year at
        build time. Fix it to get byte-identical output across runs.

    Notes
    -----
    Instantiate once per build. No runtime mutation is intended.

    Examples
    --------
    >>> import os
    >>> os.environ["FOLIO_CATEGORY"] = "review"
    >>> SiteConfig().category
    'review'
    """

    def __init__(
        self,
        *,
        content_dir: Path | None = None,
        output_dir: Path | None = None,
        templates_dir: Path | None = None,
        assets_dir: Path | None = None,
        category: str | None = None,
        supports_rating: bool | None = None,
        supports_interactive_resort: bool | None = None,
        visible_count: int | None = None,
        current_year: int | None = None,
        skip_assets: bool = False,
    ) -> None:
        """Resolve every setting and validate the result.

        Raises
        ------
        ConfigurationError
            If the category is not a single safe path segment, the visible
            count is not a positive integer, or an environment flag cannot
            be parsed.
        """
        # Resolve through the module so tests can monkeypatch ENV_FILE.
        env_path = Path(_project_config.ENV_FILE)
        if env_path.exists():
            load_dotenv(env_path, override=False)

        self.content_dir: Path = Path(
            content_dir
            if content_dir is not None
            else _env_path("FOLIO_CONTENT_DIR", DEFAULT_CONTENT_DIR)
        )
        self.output_dir: Path = Path(
            output_dir
            if output_dir is not None
            else _env_path("FOLIO_OUTPUT_DIR", DEFAULT_OUTPUT_DIR)
        )
        self.templates_dir: Path = Path(
            templates_dir
            if templates_dir is not None
            else _env_path("FOLIO_TEMPLATES_DIR", DEFAULT_TEMPLATES_DIR)
        )
        if skip_assets:
            self.assets_dir: Path | None = None
        elif assets_dir is not None:
            self.assets_dir = Path(assets_dir)
        else:
            self.assets_dir = _env_path("FOLIO_ASSETS_DIR", DEFAULT_ASSETS_DIR)

        self.category: str = (
            category
            if category is not None
            else os.getenv("FOLIO_CATEGORY", DEFAULT_CATEGORY)
        ).strip()
        self.supports_rating: bool = (
            supports_rating
            if supports_rating is not None
            else _env_flag("FOLIO_SUPPORTS_RATING", False)
        )
        self.supports_interactive_resort: bool = (
            supports_interactive_resort
            if supports_interactive_resort is not None
            else _env_flag("FOLIO_INTERACTIVE_RESORT", True)
        )
        if visible_count is None:
            raw_count = os.getenv("FOLIO_VISIBLE_COUNT", str(DEFAULT_VISIBLE_COUNT))
            try:
                visible_count = int(raw_count)
            except ValueError as exc:
                raise ConfigurationError(
                    f"FOLIO_VISIBLE_COUNT must be an integer, got {raw_count!r}"
                ) from exc
        self.visible_count: int = visible_count
        self.current_year = current_year
        self._validate()

    def _validate(self) -> None:
        if not _CATEGORY_RE.match(self.category):
            raise ConfigurationError(
                f"Category must be a single path segment, got {self.category!r}",
                context={"category": self.category},
            )
        if isinstance(self.visible_count, bool) or not isinstance(
            self.visible_count, int
        ):
            raise ConfigurationError("visible_count must be an integer")
        if self.visible_count < 1:
            raise ConfigurationError(
                f"visible_count must be at least 1, got {self.visible_count}",
                context={"visible_count": self.visible_count},
            )

    @property
    def detail_dir(self) -> Path:
        """Directory that holds the generated detail pages."""
        return self.output_dir / self.category

    @property
    def css_prefix(self) -> str:
        """Lowercased category used to build CSS class names."""
        return self.category.lower()

    @property
    def card_class(self) -> str:
        """CSS class carried by every listing card."""
        return f"{self.css_prefix}-card"

    def detail_url(self, item_id: str) -> str:
        """Return the site-absolute URL of an item's detail page."""
        return f"/{self.category}/{item_id}.html"

    def __repr__(self) -> str:
        return (
            f"SiteConfig(content_dir={str(self.content_dir)!r}, "
            f"output_dir={str(self.output_dir)!r}, category={self.category!r}, "
            f"supports_rating={self.supports_rating}, "
            f"supports_interactive_resort={self.supports_interactive_resort}, "
            f"visible_count={self.visible_count})"
        )
