"""Tests for the publication filter."""

from datetime import datetime

import pytest

from folio.pipeline.site_builder.models import ContentMetadata
from folio.pipeline.site_builder.publication import is_eligible


@pytest.mark.parametrize(
    "record,expected",
    [
        ({"status": "published"}, True),
        ({"status": "Published"}, True),
        ({"status": "PUBLISHED"}, True),
        ({"status": "draft"}, False),
        ({"status": ""}, False),
        ({"status": " published"}, False),
        ({"status": None}, False),
        ({"status": 1}, False),
        ({"status": True}, False),
        ({"status": ["published"]}, False),
        ({}, False),
    ],
)
def test_is_eligible_raw_records(record, expected):
    assert is_eligible(record) is expected


def test_is_eligible_accepts_validated_metadata():
    meta = ContentMetadata(
        title="T", date=datetime(2024, 1, 1), date_raw="2024-01-01", status="Published"
    )
    assert is_eligible(meta) is True
    draft = ContentMetadata(title="T", date=datetime(2024, 1, 1), date_raw="2024-01-01")
    assert is_eligible(draft) is False
