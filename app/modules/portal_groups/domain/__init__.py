"""Domain models and errors for the portal groups module."""

from modules.portal_groups.domain.errors import ListingUnavailableError
from modules.portal_groups.domain.models import (
    END_OF_LISTING,
    Group,
    Member,
    OutputRecord,
    Page,
    group_from_dict,
    member_from_dict,
)

__all__ = [
    "END_OF_LISTING",
    "Group",
    "Member",
    "OutputRecord",
    "Page",
    "group_from_dict",
    "member_from_dict",
    "ListingUnavailableError",
]
