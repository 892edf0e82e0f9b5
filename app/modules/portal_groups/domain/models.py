"""Data models for portal groups, members and listing pages.

Lightweight frozen dataclasses (not Pydantic): these values are created by the
response decoder, passed between threads and never mutated.

Key purpose:
  - Group: one public group discovered by the enumerator
  - Member: one entry of a group's user list
  - Page: one decoded response of a paginated listing endpoint
  - OutputRecord: the (group, member) row handed to the output sink

Helper functions (group_from_dict, member_from_dict) convert the portal's
JSON objects into these structures and raise DecodeError on shapes that
cannot be represented.
"""

from dataclasses import dataclass
from typing import Any, Optional, Tuple, Union

from infrastructure.clients.portal.errors import DecodeError

# nextStart value the portal returns on the last page
END_OF_LISTING = -1


@dataclass(frozen=True)
class Group:
    """A public portal group.

    Attributes:
        id: Portal group id (unique, non-empty)
        owner: Username of the group owner
        title: Display title, empty when the portal omits it
        created: Creation time in epoch milliseconds
        modified: Last modification time in epoch milliseconds
    """

    id: str
    owner: str = ""
    title: str = ""
    created: Optional[int] = None
    modified: Optional[int] = None


@dataclass(frozen=True)
class Member:
    """A member of a portal group.

    Attributes:
        username: Portal username
        full_name: Display name
        member_type: Role in the group ("owner", "admin", "member")
        joined: Join time in epoch milliseconds
    """

    username: str
    full_name: str = ""
    member_type: str = ""
    joined: int = 0


PageItem = Union[Group, Member]


@dataclass(frozen=True)
class Page:
    """One page of a paginated listing.

    Attributes:
        items: Groups or members in server order
        total_count: Total size of the remote collection
        start_index: Cursor this page was requested with
        page_size: Page size the server applied
        next_start_index: Cursor of the next page, END_OF_LISTING on the last
        skipped_items: Entries dropped because they could not be decoded
    """

    items: Tuple[PageItem, ...] = ()
    total_count: int = 0
    start_index: int = 0
    page_size: int = 0
    next_start_index: int = END_OF_LISTING
    skipped_items: int = 0

    @property
    def is_last(self) -> bool:
        return self.next_start_index == END_OF_LISTING

    @property
    def groups(self) -> Tuple[Group, ...]:
        return tuple(item for item in self.items if isinstance(item, Group))

    @property
    def members(self) -> Tuple[Member, ...]:
        return tuple(item for item in self.items if isinstance(item, Member))


@dataclass(frozen=True)
class OutputRecord:
    """One emitted (group, member) row."""

    group_id: str
    username: str
    full_name: str
    joined: int

    @classmethod
    def from_member(cls, group: Group, member: Member) -> "OutputRecord":
        return cls(
            group_id=group.id,
            username=member.username,
            full_name=member.full_name,
            joined=member.joined,
        )


def _optional_str(d: dict, key: str) -> str:
    value = d.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DecodeError(f"Field '{key}' must be a string, got {type(value).__name__}")
    return value


def _optional_int(d: dict, key: str) -> Optional[int]:
    value = d.get(key)
    if value is None:
        return None
    # bool is an int subclass; a boolean timestamp is a shape error
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f"Field '{key}' must be an integer, got {type(value).__name__}")
    return value


def group_from_dict(d: Any) -> Group:
    """Convert a portal group object into a Group.

    Args:
        d: One element of the envelope's ``results`` array

    Returns:
        Group with the portal's id, owner, title and timestamps

    Raises:
        DecodeError: If the object is not a dict or has no usable id
    """
    if not isinstance(d, dict):
        raise DecodeError(f"Group entry must be an object, got {type(d).__name__}")

    group_id = d.get("id")
    if not isinstance(group_id, str) or not group_id:
        raise DecodeError("Group entry has no id")

    return Group(
        id=group_id,
        owner=_optional_str(d, "owner"),
        title=_optional_str(d, "title"),
        created=_optional_int(d, "created"),
        modified=_optional_int(d, "modified"),
    )


def member_from_dict(d: Any) -> Member:
    """Convert a portal user-list entry into a Member.

    Args:
        d: One element of the envelope's ``users`` array

    Returns:
        Member with username, full name, member type and join time

    Raises:
        DecodeError: If the object is not a dict or has no username
    """
    if not isinstance(d, dict):
        raise DecodeError(f"User entry must be an object, got {type(d).__name__}")

    username = d.get("username")
    if not isinstance(username, str) or not username:
        raise DecodeError("User entry has no username")

    return Member(
        username=username,
        full_name=_optional_str(d, "fullName"),
        member_type=_optional_str(d, "memberType"),
        joined=_optional_int(d, "joined") or 0,
    )
