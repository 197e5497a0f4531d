from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Union


class ProposalState(Enum):
    """Review states published in the proposals feed."""

    AWAITING_REVIEW = (".awaitingReview", "Awaiting Review")
    SCHEDULED_FOR_REVIEW = (".scheduledForReview", "Scheduled for Review")
    ACTIVE_REVIEW = (".activeReview", "Active Review")
    RETURNED_FOR_REVISION = (".returnedForRevision", "Returned for Revision")
    WITHDRAWN = (".withdrawn", "Withdrawn")
    DEFERRED = (".deferred", "Deferred")  # no longer used by the feed
    ACCEPTED = (".accepted", "Accepted")
    ACCEPTED_WITH_REVISIONS = (".acceptedWithRevisions", "Accepted with Revisions")
    REJECTED = (".rejected", "Rejected")
    IMPLEMENTED = (".implemented", "Implemented")
    PREVIEWING = (".previewing", "Previewing")
    ERROR = (".error", "Error")

    def __init__(self, code: str, description: str) -> None:
        self.code = code
        self.description = description

    def __str__(self) -> str:
        return self.description


@dataclass(frozen=True, slots=True)
class UnknownState:
    """Feed state that is not one of the known review states."""

    raw_code: str

    @property
    def description(self) -> str:
        return f"Unknown status: {self.raw_code}"

    def __str__(self) -> str:
        return self.description


Status = Union[ProposalState, UnknownState]

_STATES_BY_CODE: Dict[str, ProposalState] = {state.code: state for state in ProposalState}


def parse_status(code: str) -> Status:
    """Map a feed state code to a Status; unmapped codes are kept as UnknownState."""

    state = _STATES_BY_CODE.get(code)
    if state is None:
        return UnknownState(code)
    return state


@dataclass(frozen=True, slots=True)
class Proposal:
    """Normalized proposal taken from the catalog feed."""

    identifier: str  # e.g. "SE-0401"
    title: str
    url: str
    status: Status
    number: Optional[int]  # trailing numeric segment of the identifier


@dataclass(frozen=True, slots=True)
class ResultItem:
    """One row of launcher script output.

    Only ``title`` is required; unset fields are left out of the serialized
    document instead of being written as null.
    """

    title: str
    subtitle: Optional[str] = None
    label: Optional[str] = None
    badge: Optional[str] = None
    icon: Optional[str] = None
    url: Optional[str] = None
