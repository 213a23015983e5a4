"""Templating utilities for the site builder.

This module owns template file loading, placeholder extraction and
context-driven substitution. Templates are plain HTML files holding
``{{ name }}`` placeholders. Each template has a fixed, enumerable field
contract (``TEMPLATE_FIELDS``).

Boundaries
----------
- Does not write to disk; only reads template files.
- Does not escape values: callers escape untrusted text before rendering
  and pass pre-built HTML fragments as-is.
- Placeholders without a value are left verbatim so they stay visible in
  the output instead of silently disappearing.

Examples
--------
>>> render_template("<h1>{{ title }}</h1>{{ other }}", {"title": "Hi"})
'<h1>Hi</h1>{{ other }}'
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from folio.config import (
    ABOUT_TEMPLATE,
    DETAIL_TEMPLATE,
    HEADER_TEMPLATE,
    INDEX_TEMPLATE,
    SORT_SCRIPT_TEMPLATE,
)
from folio.exceptions import ConfigurationError, TemplateRenderError

logger = logging.getLogger(__name__)

PLACEHOLDER_RE = re.compile(r"\{\{\s*(\w+)\s*\}\}")

TEMPLATE_FIELDS: dict[str, frozenset[str]] = {
    HEADER_TEMPLATE: frozenset({"homeActive", "aboutActive"}),
    DETAIL_TEMPLATE: frozenset(
        {
            "title",
            "description",
            "date",
            "tags",
            "content",
            "header",
            "rating",
            "ratingValue",
            "author",
            "category",
        }
    ),
    INDEX_TEMPLATE: frozenset(
        {
            "cards",
            "showMoreBtn",
            "sortControls",
            "sortScript",
            "currentYear",
            "header",
            "category",
        }
    ),
    ABOUT_TEMPLATE: frozenset({"header", "currentYear"}),
    SORT_SCRIPT_TEMPLATE: frozenset({"visibleCount", "cardClass"}),
}


def load_template(path: Path) -> str:
    """Read the contents of a template file as a string.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    OSError
        If the file cannot be read.
    """
    with path.open("r", encoding="utf-8") as fh:
        return fh.read()


def extract_placeholders_from_template(content: str) -> list[str]:
    """Return a sorted list of unique placeholder names found in the template.

    >>> extract_placeholders_from_template("{{ b }} {{a}} {{ b }}")
    ['a', 'b']
    """
    return sorted(set(PLACEHOLDER_RE.findall(content)))


def render_template(template_content: str, context: Mapping[str, Any]) -> str:
    """Substitute ``{{ name }}`` placeholders with values from ``context``.

    Values are converted with ``str``. A placeholder whose name is missing
    from ``context`` (or maps to ``None``) is kept unchanged.

    Parameters
    ----------
    template_content : str
        Template text.
    context : Mapping[str, Any]
        Placeholder names mapped to their already-escaped values.

    Returns
    -------
    str
        The rendered text.
    """

    def replace_func(match: re.Match[str]) -> str:
        value = context.get(match.group(1))
        if value is None:
            return match.group(0)
        return str(value)

    return PLACEHOLDER_RE.sub(replace_func, template_content)


class TemplateSet:
    """The loaded templates of one build, keyed by template id.

    Examples
    --------
    >>> templates = TemplateSet({"about": "<p>{{ currentYear }}</p>"})
    >>> templates.render("about", {"currentYear": 2025})
    '<p>2025</p>'
    """

    def __init__(self, templates: Mapping[str, str]) -> None:
        self._templates = dict(templates)

    @classmethod
    def load(cls, templates_dir: Path, names: Iterable[str]) -> TemplateSet:
        """Load ``<name>.html`` for every requested template id.

        Placeholders outside a template's field contract are reported once
        here; they stay inert in the rendered output.

        Raises
        ------
        ConfigurationError
            If any template file is missing or unreadable.
        """
        templates: dict[str, str] = {}
        for name in names:
            path = Path(templates_dir) / f"{name}.html"
            try:
                content = load_template(path)
            except (OSError, UnicodeDecodeError) as exc:
                raise ConfigurationError(
                    f"Cannot read template '{name}' at {path}: {exc}",
                    context={"template": name, "path": str(path)},
                ) from exc
            unknown = set(extract_placeholders_from_template(content)) - TEMPLATE_FIELDS.get(
                name, frozenset()
            )
            if unknown:
                logger.warning(
                    f"Template '{name}' has unknown placeholders left as-is: {sorted(unknown)}"
                )
            templates[name] = content
        return cls(templates)

    def __contains__(self, name: object) -> bool:
        return name in self._templates

    def render(self, template_id: str, fields: Mapping[str, Any]) -> str:
        """Render one template with a field mapping.

        Raises
        ------
        TemplateRenderError
            If the template was not loaded or ``fields`` holds names outside
            the template's field contract.
        """
        if template_id not in self._templates:
            raise TemplateRenderError(
                f"Template '{template_id}' is not loaded",
                context={"template": template_id},
            )
        allowed = TEMPLATE_FIELDS.get(template_id)
        if allowed is not None:
            extra = set(fields) - allowed
            if extra:
                raise TemplateRenderError(
                    f"Unsupported fields for template '{template_id}': {sorted(extra)}",
                    context={"template": template_id, "fields": sorted(extra)},
                )
        return render_template(self._templates[template_id], fields)
