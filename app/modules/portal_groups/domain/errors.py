"""Errors for the portal groups module."""

from typing import Optional


class ListingUnavailableError(Exception):
    """Raised when a group-listing page still fails after its retry budget.

    Attributes:
        url: the listing URL that kept failing
        attempts: number of attempts made
    """

    def __init__(self, message: str, url: str, attempts: int, cause: Optional[Exception] = None):
        super().__init__(message)
        self.url = url
        self.attempts = attempts
        self.cause = cause
