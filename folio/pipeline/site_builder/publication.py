"""Publication filter: decides from metadata alone whether an item is output."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from folio.config import PUBLISHED_STATUS

from .models import ContentMetadata


def is_eligible(metadata: ContentMetadata | Mapping[str, Any]) -> bool:
    """Return True iff the record's ``status`` is, case-insensitively, "published".

    Parameters
    ----------
    metadata : ContentMetadata or Mapping[str, Any]
        Validated metadata or the raw parsed JSON record.

    Returns
    -------
    bool
        False when ``status`` is absent, not a string, or any other value.

    Examples
    --------
    >>> is_eligible({"status": "Published"})
    True
    >>> is_eligible({"status": "draft"})
    False
    >>> is_eligible({})
    False
    """
    if isinstance(metadata, ContentMetadata):
        status = metadata.status
    else:
        status = metadata.get("status")
    if not isinstance(status, str):
        return False
    return status.lower() == PUBLISHED_STATUS
