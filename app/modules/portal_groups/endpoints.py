"""URL builders for the portal community endpoints."""

from urllib.parse import quote


def _base(base_url: str) -> str:
    return base_url.rstrip("/")


def group_listing_url(base_url: str, start: int = 0, page_size: int = 100) -> str:
    """URL of one page of the public group listing, sorted by title."""
    url = (
        f"{_base(base_url)}/community/groups"
        f"?f=json&q=access:public&sortField=title&sortOrder=&num={page_size}"
    )
    if start:
        url += f"&start={start}"
    return url


def member_list_url(
    base_url: str, group_id: str, start: int = 0, page_size: int = 100
) -> str:
    """URL of one page of a group's user list."""
    url = (
        f"{_base(base_url)}/community/groups/{quote(group_id, safe='')}/userList"
        f"?f=json&num={page_size}"
    )
    if start:
        url += f"&start={start}"
    return url
