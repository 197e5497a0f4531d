from __future__ import annotations

import logging
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from .errors import DecodeError
from .models import Proposal, UnknownState, parse_status

LOGGER = logging.getLogger(__name__)


class FeedStatus(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    state: str


class FeedProposal(BaseModel):
    """Proposal record as published in the JSON feed."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    title: str
    link: str
    status: FeedStatus


_FEED_ADAPTER = TypeAdapter(List[FeedProposal])


def parse_number(identifier: str) -> Optional[int]:
    """Return the trailing numeric segment of an identifier such as ``SE-0401``."""

    segments = [segment for segment in identifier.split("-") if segment]
    if not segments:
        return None
    digits = segments[-1]
    if not (digits.isascii() and digits.isdigit()):
        return None
    return int(digits)


def join_url(base_url: str, link: str) -> str:
    return f"{base_url.rstrip('/')}/{link.lstrip('/')}"


def to_proposal(record: FeedProposal, base_url: str) -> Proposal:
    return Proposal(
        identifier=record.id,
        title=record.title.strip(),
        url=join_url(base_url, record.link),
        status=parse_status(record.status.state),
        number=parse_number(record.id),
    )


def decode_catalog(data: bytes, base_url: str) -> List[Proposal]:
    """Decode the raw feed payload into proposals, keeping feed order.

    Either every record decodes or ``DecodeError`` is raised; unrecognised
    status codes never fail and are carried as ``UnknownState``.
    """

    try:
        records = _FEED_ADAPTER.validate_json(data)
    except ValidationError as exc:
        msg = f"Proposals feed is malformed ({exc.error_count()} validation errors)"
        raise DecodeError(msg) from exc

    proposals = [to_proposal(record, base_url) for record in records]
    unknown = sum(1 for proposal in proposals if isinstance(proposal.status, UnknownState))
    LOGGER.debug("Decoded %s proposals (%s with unknown status)", len(proposals), unknown)
    return proposals
