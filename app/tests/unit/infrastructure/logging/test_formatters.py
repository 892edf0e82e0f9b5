"""Unit tests for infrastructure.logging.formatters module.

Tests cover:
- add_app_info processor
- truncate_large_values processor
"""

import pytest

from infrastructure.logging.formatters import add_app_info, truncate_large_values


@pytest.mark.unit
class TestAddAppInfo:
    """Test suite for add_app_info processor factory."""

    def test_add_app_info_adds_name_and_version(self):
        """Processor adds app_name and app_version to event dict."""
        processor = add_app_info("portal-group-members", "0.1.0")
        event_dict = {"event": "harvest_started", "workers": 40}

        result = processor(None, "info", event_dict)

        assert result == {
            "event": "harvest_started",
            "workers": 40,
            "app_name": "portal-group-members",
            "app_version": "0.1.0",
        }

    def test_add_app_info_with_unknown_version(self):
        """Default version is 'unknown' if not provided."""
        processor = add_app_info("portal-group-members")

        result = processor(None, "info", {"event": "test"})

        assert result["app_version"] == "unknown"


@pytest.mark.unit
class TestTruncateLargeValues:
    """Test suite for truncate_large_values processor factory."""

    def test_truncates_long_string(self):
        """Strings longer than max_length are cut and annotated."""
        processor = truncate_large_values(max_length=20)
        html_error_page = "<html>" + "x" * 100 + "</html>"

        result = processor(None, "error", {"event": "member_list_fetch_failed", "error": html_error_page})

        assert result["error"].startswith(html_error_page[:20])
        assert result["error"].endswith(f"[truncated, {len(html_error_page)} chars total]")

    def test_default_length_is_500(self):
        """Default max_length is 500 characters."""
        processor = truncate_large_values()

        result = processor(None, "info", {"short": "a" * 500, "long": "b" * 501})

        assert result["short"] == "a" * 500
        assert result["long"] != "b" * 501

    def test_preserves_non_strings(self):
        """Non-string values are not affected."""
        processor = truncate_large_values(max_length=5)
        event_dict = {"attempt": 123456789, "complete": False, "ids": ["a" * 50]}

        result = processor(None, "info", dict(event_dict))

        assert result == event_dict
