"""Unit tests for the community endpoint URL builders."""

import pytest

from modules.portal_groups.endpoints import group_listing_url, member_list_url

BASE = "https://maps.example.net/portal/sharing/rest"


@pytest.mark.unit
class TestGroupListingUrl:
    """Test suite for group_listing_url."""

    def test_first_page(self):
        """The first page carries no start parameter."""
        assert group_listing_url(BASE) == (
            f"{BASE}/community/groups?f=json&q=access:public"
            "&sortField=title&sortOrder=&num=100"
        )

    def test_later_page(self):
        """Later pages carry the cursor."""
        assert group_listing_url(BASE, start=101).endswith("&num=100&start=101")

    def test_trailing_slash_on_base(self):
        """A trailing slash on the base URL is not doubled."""
        assert group_listing_url(BASE + "/") == group_listing_url(BASE)

    def test_page_size(self):
        """The page size is sent as num."""
        assert "&num=25" in group_listing_url(BASE, page_size=25)


@pytest.mark.unit
class TestMemberListUrl:
    """Test suite for member_list_url."""

    def test_first_page(self):
        """The first page carries no start parameter."""
        assert member_list_url(BASE, "abc123") == (
            f"{BASE}/community/groups/abc123/userList?f=json&num=100"
        )

    def test_later_page(self):
        """Later pages carry the cursor."""
        assert member_list_url(BASE, "abc123", start=201) == (
            f"{BASE}/community/groups/abc123/userList?f=json&num=100&start=201"
        )

    def test_group_id_is_escaped(self):
        """Group ids are escaped as a single path segment."""
        url = member_list_url(BASE, "a/b c")

        assert "/community/groups/a%2Fb%20c/userList" in url
