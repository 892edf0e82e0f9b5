"""Unit tests for iter_pages."""

from unittest.mock import MagicMock

import pytest

from infrastructure.clients.portal.errors import TransportError
from modules.portal_groups.domain.models import Group, Page
from modules.portal_groups.pagination import iter_pages


def _page(start, next_start, *ids):
    return Page(
        items=tuple(Group(id=i) for i in ids),
        start_index=start,
        next_start_index=next_start,
    )


@pytest.mark.unit
class TestIterPages:
    """Test suite for cursor-driven pagination."""

    def test_single_page(self):
        """A first page with nextStart -1 yields exactly one page."""
        fetch = MagicMock(return_value=_page(1, -1, "a"))

        pages = list(iter_pages(fetch))

        assert len(pages) == 1
        fetch.assert_called_once_with(0)

    def test_follows_next_start(self):
        """Each page's nextStart becomes the next cursor."""
        responses = {
            0: _page(1, 101, "a"),
            101: _page(101, 201, "b"),
            201: _page(201, -1, "c"),
        }
        cursors = []

        def fetch(cursor):
            cursors.append(cursor)
            return responses[cursor]

        pages = list(iter_pages(fetch))

        assert cursors == [0, 101, 201]
        assert [page.groups[0].id for page in pages] == ["a", "b", "c"]

    def test_custom_start(self):
        """Iteration can begin at a given cursor."""
        fetch = MagicMock(return_value=_page(51, -1))

        list(iter_pages(fetch, start=51))

        fetch.assert_called_once_with(51)

    def test_is_lazy(self):
        """No request is made until the first page is consumed."""
        fetch = MagicMock(return_value=_page(1, -1))

        pages = iter_pages(fetch)
        fetch.assert_not_called()

        next(pages)
        fetch.assert_called_once()

    def test_error_propagates_after_yielded_pages(self):
        """A failing page ends iteration after the pages already yielded."""
        fetch = MagicMock(
            side_effect=[_page(1, 101, "a"), TransportError("boom", status_code=500)]
        )
        seen = []

        with pytest.raises(TransportError):
            for page in iter_pages(fetch):
                seen.append(page)

        assert len(seen) == 1
