"""Group enumerator: the producer stage of the harvest.

Walks the public group listing page by page and hands every group to the
worker pool through a rendezvous channel. Publishing blocks until a worker
takes the group, which keeps the listing from running ahead of the workers.

Listing failures retry the same cursor with exponential backoff. With
``listing_max_attempts == 0`` retries never give up and a permanently
unreachable portal blocks the run forever.
"""

import time
from typing import Callable

from infrastructure.clients.portal.errors import DecodeError, TransportError
from infrastructure.concurrency import RendezvousChannel
from infrastructure.logging import get_module_logger
from modules.portal_groups.config import HarvestConfig
from modules.portal_groups.domain.errors import ListingUnavailableError
from modules.portal_groups.domain.models import Group, Page
from modules.portal_groups.endpoints import group_listing_url
from modules.portal_groups.fetcher import PageFetcher
from modules.portal_groups.pagination import iter_pages

logger = get_module_logger()

# Keeps 2**attempt within float range on unbounded retries
_MAX_BACKOFF_EXPONENT = 32


def calculate_retry_delay(attempt: int, base_delay: float, max_delay: float) -> float:
    """Calculate the backoff before the next listing attempt.

    Args:
        attempt: Failed attempts so far, minus one (0-indexed)
        base_delay: Delay after the first failure
        max_delay: Upper bound

    Returns:
        Delay in seconds
    """
    exponent = min(attempt, _MAX_BACKOFF_EXPONENT)
    return float(min(base_delay * (2**exponent), max_delay))


class GroupEnumerator:
    """Producer publishing every public group to the work channel.

    Attributes:
        published: Groups handed to workers so far
        skipped: Listing entries dropped for lack of a usable id
        complete: True once the listing's last page was published
    """

    def __init__(
        self,
        fetcher: PageFetcher,
        channel: RendezvousChannel[Group],
        config: HarvestConfig,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._fetcher = fetcher
        self._channel = channel
        self._config = config
        self._sleep = sleep
        self.published = 0
        self.skipped = 0
        self.complete = False
        self.log = logger.bind(component="group_enumerator")

    def run(self) -> int:
        """Enumerate all groups, then close the channel.

        The channel is closed exactly once, whether the listing ended
        normally or enumeration gave up on a page.

        Returns:
            Number of groups published
        """
        self.log.info("group_enumeration_started", base_url=self._config.base_url)

        try:
            for page in iter_pages(self._fetch_listing_page):
                groups = page.groups
                for group in groups:
                    self._channel.send(group)
                    self.published += 1
                self.skipped += page.skipped_items

                self.log.debug(
                    "group_page_published",
                    start=page.start_index,
                    count=len(groups),
                    skipped=page.skipped_items,
                    total=page.total_count,
                    next_start=page.next_start_index,
                )
            self.complete = True

        except ListingUnavailableError as e:
            self.log.error(
                "group_listing_unavailable",
                url=e.url,
                attempts=e.attempts,
                error=str(e.cause),
            )

        finally:
            self._channel.close()

        self.log.info(
            "group_enumeration_finished",
            published=self.published,
            skipped=self.skipped,
            complete=self.complete,
        )
        return self.published

    def _fetch_listing_page(self, cursor: int) -> Page:
        """Fetch the listing page at a cursor, retrying the same cursor on failure.

        Raises:
            ListingUnavailableError: If the retry budget is exhausted
        """
        url = group_listing_url(
            self._config.base_url, start=cursor, page_size=self._config.page_size
        )
        max_attempts = self._config.listing_max_attempts
        attempt = 0

        while True:
            try:
                page = self._fetcher.fetch(url)
                if attempt > 0:
                    self.log.info("group_listing_retry_success", url=url, attempt=attempt + 1)
                return page

            except (TransportError, DecodeError) as e:
                attempt += 1
                if max_attempts and attempt >= max_attempts:
                    raise ListingUnavailableError(
                        f"Group listing failed after {attempt} attempts",
                        url=url,
                        attempts=attempt,
                        cause=e,
                    ) from e

                delay = calculate_retry_delay(
                    attempt - 1,
                    self._config.listing_retry_base_delay,
                    self._config.listing_retry_max_delay,
                )
                self.log.warning(
                    "group_listing_retrying",
                    url=url,
                    attempt=attempt,
                    max_attempts=max_attempts or None,
                    delay=delay,
                    error=str(e),
                    status_code=getattr(e, "status_code", None),
                )
                self._sleep(delay)


__all__ = ["GroupEnumerator", "calculate_retry_delay"]
