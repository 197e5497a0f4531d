from __future__ import annotations

import json
import traceback
from dataclasses import asdict
from typing import Any, Dict, Iterable, List

from .config import DEFAULT_ICON
from .models import Proposal, ResultItem


def item_from_proposal(proposal: Proposal, icon: str = DEFAULT_ICON) -> ResultItem:
    status = proposal.status.description
    return ResultItem(
        title=f"{proposal.identifier}: {proposal.title}",
        subtitle=f"{status} • {proposal.title}",
        label=proposal.identifier,
        badge=status,
        icon=icon,
        url=proposal.url,
    )


def describe_error(error: BaseException) -> str:
    message = str(error).strip()
    return message or type(error).__name__


def item_from_error(error: BaseException) -> ResultItem:
    """Build the single diagnostic row shown instead of results.

    The subtitle carries the whole formatted exception chain, which is the
    only place the underlying cause (HTTP status, validation errors) is visible.
    """

    dump = "".join(traceback.format_exception(type(error), error, error.__traceback__))
    return ResultItem(title=f"Error: {describe_error(error)}", subtitle=dump.rstrip())


def item_to_dict(item: ResultItem) -> Dict[str, Any]:
    return {key: value for key, value in asdict(item).items() if value is not None}


def render_items(items: Iterable[ResultItem]) -> str:
    payload: List[Dict[str, Any]] = [item_to_dict(item) for item in items]
    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True)
