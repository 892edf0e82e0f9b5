"""Test data factories for deterministic test data generation."""

from tests.factories.portal import (
    make_envelope,
    make_error_body,
    make_groups_body,
    make_portal_group,
    make_portal_groups,
    make_portal_user,
    make_users_body,
)

__all__ = [
    "make_envelope",
    "make_error_body",
    "make_groups_body",
    "make_portal_group",
    "make_portal_groups",
    "make_portal_user",
    "make_users_body",
]
