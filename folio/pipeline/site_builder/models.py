"""In-memory records passed between the site builder stages.

All records are frozen: a content item is built once by the reader, never
mutated, and discarded at the end of the run. Persistence is the rendered
output, not these objects.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class ContentMetadata:
    """Validated view of one ``metadata.json`` record.

    ``status`` and ``rating`` keep their raw JSON values: the publication
    filter and the rating formatter decide what they mean.
    """

    title: str
    date: datetime
    date_raw: str
    description: str = ""
    tags: tuple[str, ...] = ()
    status: Any = None
    rating: Any = None
    author: str | None = None


@dataclass(frozen=True)
class ContentItem:
    id: str
    metadata: ContentMetadata
    body: str


@dataclass(frozen=True)
class PublishedItem:
    """A rendered content item, ready for the listing page."""

    item: ContentItem
    url: str
    html_body: str

    @property
    def id(self) -> str:
        return self.item.id

    @property
    def metadata(self) -> ContentMetadata:
        return self.item.metadata


@dataclass
class ReadResult:
    """Outcome of reading the content repository.

    Attributes
    ----------
    items : list[ContentItem]
        Eligible, successfully loaded items, in discovery order.
    skipped : list[str]
        Ids of items that loaded but are not published.
    failed : dict[str, dict[str, Any]]
        Item id mapped to the ``AppError.to_dict()`` of its load failure.
    """

    items: list[ContentItem] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    failed: dict[str, dict[str, Any]] = field(default_factory=dict)


@dataclass
class BuildReport:
    """Summary of one build run."""

    published: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    failed: dict[str, dict[str, Any]] = field(default_factory=dict)
    removed: list[str] = field(default_factory=list)

    def as_dict(self) -> dict[str, int]:
        """Return counts suitable for log lines and test assertions."""
        return {
            "published": len(self.published),
            "skipped_unpublished": len(self.skipped),
            "failed": len(self.failed),
            "removed_stale": len(self.removed),
        }
