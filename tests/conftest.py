from __future__ import annotations

import json
from typing import Any, Dict, List

import pytest

from evolution_lookup.catalog import decode_catalog
from evolution_lookup.config import DEFAULT_PROPOSALS_BASE_URL
from evolution_lookup.models import Proposal


def make_record(
    identifier: str,
    title: str,
    state: str = ".implemented",
    link: str | None = None,
) -> Dict[str, Any]:
    return {
        "id": identifier,
        "title": title,
        "link": link or f"{identifier.lower()}.md",
        "status": {"state": state},
    }


FEED_RECORDS: List[Dict[str, Any]] = [
    make_record("SE-0296", "Async/await", link="0296-async-await.md"),
    make_record("preview-draft", "  Draft idea for previews\n", state=".awaitingReview"),
    make_record("SE-0306", "Actors", link="0306-actors.md"),
    make_record("SE-0302", "Sendable and @Sendable closures", state=".implemented"),
    make_record("SE-0401", "Remove Actor Isolation Inference caused by Property Wrappers"),
    make_record("SE-0430", "`sending` parameter and result values", state=".activeReview"),
    make_record("other-draft", "Concurrency notes", state=".somethingNew"),
    make_record("SE-0313", "Improved control over actor isolation", state=".acceptedWithRevisions"),
]


@pytest.fixture
def feed_bytes() -> bytes:
    return json.dumps(FEED_RECORDS).encode("utf-8")


@pytest.fixture
def proposals(feed_bytes: bytes) -> List[Proposal]:
    return decode_catalog(feed_bytes, DEFAULT_PROPOSALS_BASE_URL)
