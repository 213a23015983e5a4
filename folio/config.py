"""Global configuration constants for the project.

Defines default paths, filenames and presentation defaults used across the
site builder pipeline and its command-line entry point.
"""

from __future__ import annotations

from pathlib import Path

# Project directories
PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
LOG_DIR: Path = PROJECT_ROOT / "logs"
ENV_FILE: Path = PROJECT_ROOT / ".env"

# Source and output locations
DEFAULT_CONTENT_DIR: Path = PROJECT_ROOT / "content"
DEFAULT_OUTPUT_DIR: Path = PROJECT_ROOT / "public"
DEFAULT_TEMPLATES_DIR: Path = PROJECT_ROOT / "templates"
DEFAULT_ASSETS_DIR: Path = PROJECT_ROOT / "assets"

# Per-item source filenames
METADATA_FILENAME: str = "metadata.json"
BODY_FILENAME: str = "content.md"

# Output filenames
INDEX_FILENAME: str = "index.html"
ABOUT_FILENAME: str = "about.html"
DETAIL_PAGE_SUFFIX: str = ".html"

# Template names (files are ``<name>.html`` inside the templates directory)
HEADER_TEMPLATE: str = "header"
DETAIL_TEMPLATE: str = "detail"
INDEX_TEMPLATE: str = "index"
ABOUT_TEMPLATE: str = "about"
SORT_SCRIPT_TEMPLATE: str = "sort_script"

# Publication and presentation defaults
PUBLISHED_STATUS: str = "published"
DEFAULT_CATEGORY: str = "project"
DEFAULT_VISIBLE_COUNT: int = 6
DATE_DISPLAY_FORMAT: str = "%x"
RATING_SCALE_MAX: float = 10.0
RATING_BUCKET_MAX: int = 50
EMPTY_CARD_TITLE: str = "Empty"
EMPTY_CARD_MESSAGE: str = "No posts yet. Check back soon."
SHOW_MORE_LABEL_FORMAT: str = "Show More {category_title}s"

# Static assets
STYLES_SUBDIR: str = "styles"
SCRIPTS_SUBDIR: str = "js"

# Markdown conversion
MARKDOWN_EXTRAS: dict[str, object] = {
    "breaks": {"on_newline": True},
    "tables": None,
    "fenced-code-blocks": None,
    "highlightjs-lang": None,
}

# Logging
LOG_FILENAME_BUILD_SITE: str = "build_site.log"
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
