from __future__ import annotations

import logging
from typing import Callable, List

from .catalog import decode_catalog
from .config import AppConfig
from .errors import LookupFailure
from .formatter import item_from_error, item_from_proposal, render_items
from .matcher import find_proposals
from .models import ResultItem

LOGGER = logging.getLogger(__name__)


def build_items(query: str, data: bytes, config: AppConfig) -> List[ResultItem]:
    """Decode the feed payload, match it against the query and format the hits.

    Raises ``DecodeError`` when the payload cannot be decoded.
    """

    proposals = decode_catalog(data, config.proposals_base_url)
    matched = find_proposals(query, proposals)
    return [item_from_proposal(proposal, config.icon) for proposal in matched]


def run_lookup(query: str, fetch: Callable[[], bytes], config: AppConfig) -> List[ResultItem]:
    """Run one fetch-filter-format cycle; failures become a single error item."""

    try:
        data = fetch()
        return build_items(query, data, config)
    except LookupFailure as exc:
        LOGGER.error("Lookup failed: %s", exc)
        return [item_from_error(exc)]


def render_lookup(query: str, data: bytes, config: AppConfig | None = None) -> str:
    """Return the serialized output document for a query over the given feed bytes."""

    config = config or AppConfig()
    return render_items(run_lookup(query, lambda: data, config))
