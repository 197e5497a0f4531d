from __future__ import annotations

import logging
from typing import Iterable, List, Sequence

from .models import Proposal

LOGGER = logging.getLogger(__name__)


def tokenize(query: str) -> List[str]:
    return [word.lower() for word in query.split()]


def _is_number(token: str) -> bool:
    return token.isascii() and token.isdigit()


def searchable_text(proposal: Proposal) -> str:
    number = "" if proposal.number is None else str(proposal.number)
    status = proposal.status.description
    # The status description appears twice; matching is by containment so
    # the repeat does not change results.
    return f"{proposal.identifier} {number} {proposal.title} {status} {status}".lower()


def matches(proposal: Proposal, tokens: Sequence[str]) -> bool:
    """Return True when the proposal satisfies every query token.

    A single numeric token is an exact lookup by proposal number; anything
    else is a case-insensitive substring search over the searchable text.
    """

    if not tokens:
        return True
    if len(tokens) == 1 and _is_number(tokens[0]):
        return proposal.number == int(tokens[0])

    text = searchable_text(proposal)
    return all(token in text for token in tokens)


def rank(proposals: Iterable[Proposal]) -> List[Proposal]:
    """Newest proposals first; proposals without a number keep feed order at the end."""

    return sorted(proposals, key=lambda proposal: proposal.number or 0, reverse=True)


def find_proposals(query: str, proposals: Sequence[Proposal]) -> List[Proposal]:
    tokens = tokenize(query)
    matched = [proposal for proposal in proposals if matches(proposal, tokens)]
    LOGGER.info(
        "Query %r matched %s of %s proposals",
        query,
        len(matched),
        len(proposals),
    )
    return rank(matched)
