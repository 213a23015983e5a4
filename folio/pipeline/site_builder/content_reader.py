"""Content repository reader for the site builder.

Enumerates content items under a source root and loads, for each one, the
``metadata.json`` record and the ``content.md`` markdown body. The two reads
of one item are issued concurrently; items themselves are read one at a time
in discovery order.

Failure of one item never aborts the run: the error is logged, recorded in
the returned ``ReadResult`` and the reader moves on. Only a missing or
unreadable source root is fatal.

Usage
-----
>>> import asyncio
>>> from pathlib import Path
>>> result = asyncio.run(read_content_repository(Path("content")))
>>> [item.id for item in result.items]  # doctest: +SKIP
['alpha', 'beta']
"""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Callable, Mapping
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from folio.config import BODY_FILENAME, METADATA_FILENAME
from folio.exceptions import (
    AppError,
    ConfigurationError,
    ContentLoadError,
    DataValidationError,
)

from .models import ContentItem, ContentMetadata, ReadResult
from .publication import is_eligible

logger = logging.getLogger(__name__)


def discover_content_ids(content_dir: Path) -> list[str]:
    """List the candidate content identifiers under ``content_dir``.

    Only immediate subdirectories count; files are ignored. Names are sorted
    so discovery order does not depend on the filesystem.

    Raises
    ------
    ConfigurationError
        If ``content_dir`` does not exist or cannot be listed.
    """
    try:
        entries = list(Path(content_dir).iterdir())
    except OSError as exc:
        raise ConfigurationError(
            f"Cannot list content directory {content_dir}: {exc}",
            context={"content_dir": str(content_dir)},
        ) from exc
    return sorted(entry.name for entry in entries if entry.is_dir())


def parse_content_date(value: Any) -> datetime:
    """Parse an ISO date or datetime string into a naive ``datetime``.

    Aware values are converted to UTC before the timezone is dropped so that
    all dates of one run compare with each other.

    Raises
    ------
    DataValidationError
        If ``value`` is not a string or not ISO formatted.

    Examples
    --------
    >>> parse_content_date("2024-01-15")
    datetime.datetime(2024, 1, 15, 0, 0)
    >>> parse_content_date("2024-01-15T10:30:00Z")
    datetime.datetime(2024, 1, 15, 10, 30)
    """
    if not isinstance(value, str) or not value.strip():
        raise DataValidationError(f"Invalid date value: {value!r}")
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    except (ValueError, OverflowError) as exc:
        raise DataValidationError(f"Invalid date value: {value!r}") from exc
    return parsed


def _optional_text(record: Mapping[str, Any], key: str, default: str | None) -> str | None:
    value = record.get(key)
    if value is None:
        return default
    if not isinstance(value, str):
        raise DataValidationError(
            f"Field '{key}' must be a string", context={"field": key}
        )
    return value


def validate_metadata(record: Any) -> ContentMetadata:
    """Validate a parsed metadata record and build ``ContentMetadata``.

    Parameters
    ----------
    record : Any
        The value parsed from ``metadata.json``.

    Returns
    -------
    ContentMetadata
        Validated metadata with a parsed ``date`` and tags as a tuple.

    Raises
    ------
    DataValidationError
        If the record is not an object, ``title`` or ``date`` is missing or
        malformed, or ``tags`` is not a list of strings.
    """
    if not isinstance(record, Mapping):
        raise DataValidationError("Metadata must be a JSON object")
    title = record.get("title")
    if not isinstance(title, str):
        raise DataValidationError(
            "Field 'title' is required and must be a string",
            context={"field": "title"},
        )
    date_raw = record.get("date")
    date_value = parse_content_date(date_raw)
    tags = record.get("tags")
    if tags is None:
        tags = []
    if not isinstance(tags, list) or not all(isinstance(tag, str) for tag in tags):
        raise DataValidationError(
            "Field 'tags' must be a list of strings", context={"field": "tags"}
        )
    return ContentMetadata(
        title=title,
        date=date_value,
        date_raw=str(date_raw).strip(),
        description=_optional_text(record, "description", "") or "",
        tags=tuple(tags),
        status=record.get("status"),
        rating=record.get("rating"),
        author=_optional_text(record, "author", None),
    )


async def _read_text(path: Path) -> str:
    try:
        return await asyncio.to_thread(path.read_text, encoding="utf-8")
    except FileNotFoundError as exc:
        raise ContentLoadError(
            f"Missing file {path.name}",
            context={"path": str(path)},
            transient=False,
        ) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ContentLoadError(
            f"Cannot read {path.name}: {exc}", context={"path": str(path)}
        ) from exc


async def load_raw_item(content_dir: Path, item_id: str) -> tuple[Any, str]:
    """Load the parsed metadata record and the markdown body of one item.

    Both files are read concurrently.

    Raises
    ------
    ContentLoadError
        If either file is missing or unreadable, or the JSON is malformed.
    """
    item_dir = Path(content_dir) / item_id
    metadata_text, body = await asyncio.gather(
        _read_text(item_dir / METADATA_FILENAME),
        _read_text(item_dir / BODY_FILENAME),
    )
    try:
        record = json.loads(metadata_text)
    except ValueError as exc:
        raise ContentLoadError(
            f"Malformed {METADATA_FILENAME}: {exc}",
            context={"item_id": item_id},
            transient=False,
        ) from exc
    return record, body


async def load_content_item(content_dir: Path, item_id: str) -> ContentItem:
    """Load and validate one content item regardless of its status."""
    record, body = await load_raw_item(content_dir, item_id)
    return ContentItem(id=item_id, metadata=validate_metadata(record), body=body)


async def read_content_repository(
    content_dir: Path,
    *,
    eligible: Callable[[Mapping[str, Any]], bool] = is_eligible,
) -> ReadResult:
    """Read every content item under ``content_dir``.

    The publication filter runs on the raw record before validation, so an
    unpublished draft with incomplete metadata is skipped rather than
    reported as a failure.

    Parameters
    ----------
    content_dir : Path
        Source root; one subdirectory per item.
    eligible : Callable, optional
        Publication filter applied to the raw record.

    Returns
    -------
    ReadResult
        Eligible items in discovery order, ids of skipped items and the
        failures keyed by id.

    Raises
    ------
    ConfigurationError
        If the source root cannot be listed.
    """
    result = ReadResult()
    loaded: dict[str, ContentItem] = {}
    for item_id in discover_content_ids(content_dir):
        logger.info(f"Processing content item: {item_id}")
        try:
            record, body = await load_raw_item(content_dir, item_id)
            if not isinstance(record, Mapping) or not eligible(record):
                status = record.get("status") if isinstance(record, Mapping) else None
                logger.info(f"Skipping {item_id} - status: {status}")
                result.skipped.append(item_id)
                continue
            metadata = validate_metadata(record)
        except AppError as error:
            logger.error(f"Error loading content item {item_id}: {error}")
            result.failed[item_id] = error.to_dict()
            continue
        loaded[item_id] = ContentItem(id=item_id, metadata=metadata, body=body)
    result.items = list(loaded.values())
    return result
