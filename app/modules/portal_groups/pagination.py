"""Cursor-driven pagination over portal listing endpoints."""

from typing import Callable, Iterator

from modules.portal_groups.domain.models import Page


def iter_pages(fetch_page: Callable[[int], Page], start: int = 0) -> Iterator[Page]:
    """Lazily yield pages until the portal reports the end of the listing.

    Each page's ``next_start_index`` becomes the cursor of the next request.
    The sequence is potentially infinite if the portal never returns the end
    sentinel, and is not restartable. Exceptions from ``fetch_page`` end the
    iteration and propagate to the caller.

    Args:
        fetch_page: Callable fetching the page at a cursor
        start: Cursor of the first page

    Yields:
        Pages in cursor order
    """
    cursor = start
    while True:
        page = fetch_page(cursor)
        yield page
        if page.is_last:
            return
        cursor = page.next_start_index
