"""Response decoder for portal listing envelopes.

The group listing and the user list share one envelope:

    {"query": ..., "total": 2, "start": 1, "num": 100, "nextStart": -1,
     "results": [...groups...]}       # community/groups
     "users":   [...users...]}        # community/groups/{id}/userList

Decoding is pure: equal input bytes always produce equal pages.
"""

import json
from typing import Any, List, Tuple

from infrastructure.clients.portal.errors import DecodeError
from infrastructure.logging import get_module_logger
from modules.portal_groups.domain.models import (
    END_OF_LISTING,
    Group,
    Page,
    PageItem,
    group_from_dict,
    member_from_dict,
)

GROUPS_KEY = "results"
USERS_KEY = "users"

logger = get_module_logger()


def _int_field(envelope: dict, key: str, default: int) -> int:
    value = envelope.get(key)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f"Envelope field '{key}' must be an integer")
    return value


def _error_message(error: Any) -> str:
    if isinstance(error, dict):
        code = error.get("code", "unknown")
        message = error.get("message") or "no message"
        return f"Portal error {code}: {message}"
    return f"Portal error: {error}"


def _decode_groups(raw_items: list) -> Tuple[Tuple[Group, ...], int]:
    """Decode group entries; entries without a usable id are logged and skipped."""
    groups: List[Group] = []
    skipped = 0
    for position, item in enumerate(raw_items):
        try:
            groups.append(group_from_dict(item))
        except DecodeError as e:
            skipped += 1
            logger.warning("group_entry_skipped", position=position, error=e.message)
    return tuple(groups), skipped


def decode_page(body: bytes) -> Page:
    """Parse a listing response body into a Page.

    Items come from ``results`` (groups) or ``users`` (members), whichever is
    present; an envelope with neither is an empty page. A missing
    ``nextStart`` ends the listing. Group entries without a usable id are
    skipped and counted in ``skipped_items``; a bad user entry fails the page.

    Args:
        body: Content-decoded response body

    Returns:
        Decoded Page

    Raises:
        DecodeError: On malformed JSON, a non-object envelope, a portal error
            envelope, both item arrays at once, or a user entry of the wrong shape
    """
    try:
        envelope = json.loads(body)
    except ValueError as e:
        raise DecodeError(f"Malformed JSON: {e}") from e

    if not isinstance(envelope, dict):
        raise DecodeError(f"Envelope must be an object, got {type(envelope).__name__}")

    if "error" in envelope:
        raise DecodeError(_error_message(envelope["error"]))

    raw_groups = envelope.get(GROUPS_KEY)
    raw_users = envelope.get(USERS_KEY)
    if raw_groups is not None and raw_users is not None:
        raise DecodeError("Envelope carries both groups and users")

    raw_items = raw_users if raw_users is not None else (raw_groups if raw_groups is not None else [])
    if not isinstance(raw_items, list):
        raise DecodeError("Envelope items must be an array")

    items: Tuple[PageItem, ...]
    if raw_users is not None:
        items, skipped = tuple(member_from_dict(item) for item in raw_items), 0
    else:
        items, skipped = _decode_groups(raw_items)

    next_start = _int_field(envelope, "nextStart", END_OF_LISTING)
    if next_start < 0 and next_start != END_OF_LISTING:
        raise DecodeError(f"Invalid nextStart: {next_start}")

    return Page(
        items=items,
        skipped_items=skipped,
        total_count=_int_field(envelope, "total", 0),
        start_index=_int_field(envelope, "start", 0),
        page_size=_int_field(envelope, "num", 0),
        next_start_index=next_start,
    )
