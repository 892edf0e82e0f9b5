"""Harvest pipeline wiring the enumerator, the channel and the worker pool.

Architecture:
    GroupEnumerator (producer thread)
        ↓  RendezvousChannel[Group]  (zero capacity, blocks until taken)
    GroupWorkerPool (N worker threads)
        ↓  OutputRecord
    OutputSink (stdout by default)

Usage:
    from modules.portal_groups import HarvestConfig, run_harvest

    config = HarvestConfig(base_url="https://maps.example.net/portal/sharing/rest")
    summary = run_harvest(config)
"""

import threading
from dataclasses import dataclass, field
from typing import List, Optional

from infrastructure.clients.portal import PortalHttpClient
from infrastructure.concurrency import RendezvousChannel
from infrastructure.logging import bind_log_context, get_module_logger, new_run_id
from modules.portal_groups.config import HarvestConfig
from modules.portal_groups.domain.models import Group
from modules.portal_groups.enumerator import GroupEnumerator
from modules.portal_groups.fetcher import PageFetcher, PortalClient
from modules.portal_groups.sink import OutputSink, StreamSink
from modules.portal_groups.workers import GroupWorkerPool, WorkerStats

logger = get_module_logger()


@dataclass
class HarvestSummary:
    """Outcome of one harvest run.

    Attributes:
        run_id: Identifier bound to every log entry of the run
        groups_discovered: Groups published by the enumerator
        groups_skipped: Listing entries dropped for lack of a usable id
        groups_processed: Groups whose whole member list was read
        groups_failed: Groups abandoned after a failed page
        records_emitted: Records handed to the sink
        members_suppressed: Members filtered out as system accounts
        listing_complete: False if enumeration gave up before the last page
        failed_group_ids: Ids of abandoned groups
    """

    run_id: str
    groups_discovered: int = 0
    groups_skipped: int = 0
    groups_processed: int = 0
    groups_failed: int = 0
    records_emitted: int = 0
    members_suppressed: int = 0
    listing_complete: bool = False
    failed_group_ids: List[str] = field(default_factory=list)

    @classmethod
    def from_stats(
        cls,
        run_id: str,
        enumerator: GroupEnumerator,
        worker_stats: List[WorkerStats],
    ) -> "HarvestSummary":
        summary = cls(
            run_id=run_id,
            groups_discovered=enumerator.published,
            groups_skipped=enumerator.skipped,
            listing_complete=enumerator.complete,
        )
        for stats in worker_stats:
            summary.groups_processed += stats.groups_processed
            summary.groups_failed += stats.groups_failed
            summary.records_emitted += stats.records_emitted
            summary.members_suppressed += stats.members_suppressed
            summary.failed_group_ids.extend(stats.failed_group_ids)
        return summary


def build_client(config: HarvestConfig) -> PortalHttpClient:
    """Create the shared client, pooling one connection per worker plus the enumerator."""
    return PortalHttpClient(
        user_agent=config.user_agent,
        pool_size=config.workers + 1,
        connect_timeout=config.connect_timeout,
        read_timeout=config.read_timeout,
        verify_tls=config.verify_tls,
    )


def run_harvest(
    config: HarvestConfig,
    sink: Optional[OutputSink] = None,
    client: Optional[PortalClient] = None,
) -> HarvestSummary:
    """Harvest the members of every public group.

    Starts the enumerator on its own thread and the worker pool on the calling
    thread, then blocks until the enumerator has closed the channel and every
    worker has drained it. Fetch failures are logged and counted, never raised.

    Args:
        config: Run configuration
        sink: Destination of records; prints to stdout when None
        client: Shared portal client; a PortalHttpClient is created (and
            closed afterwards) when None

    Returns:
        HarvestSummary of the run
    """
    run_id = new_run_id()
    sink = sink or StreamSink()
    owns_client = client is None
    shared_client: PortalClient = client or build_client(config)

    with bind_log_context(run_id=run_id):
        logger.info(
            "harvest_started",
            base_url=config.base_url,
            workers=config.workers,
            include_system_accounts=config.include_system_accounts,
            verify_tls=config.verify_tls,
        )

        channel: RendezvousChannel[Group] = RendezvousChannel(name="group channel")
        enumerator = GroupEnumerator(PageFetcher(shared_client), channel, config)
        producer = threading.Thread(
            target=_run_enumerator,
            args=(enumerator, run_id),
            name="group-enumerator",
            daemon=True,
        )

        try:
            producer.start()
            pool = GroupWorkerPool(shared_client, channel, sink, config, run_id=run_id)
            worker_stats = pool.run()
            producer.join()
        finally:
            if owns_client:
                shared_client.close()  # type: ignore[attr-defined]

        summary = HarvestSummary.from_stats(run_id, enumerator, worker_stats)
        logger.info(
            "harvest_complete",
            groups_discovered=summary.groups_discovered,
            groups_skipped=summary.groups_skipped,
            groups_processed=summary.groups_processed,
            groups_failed=summary.groups_failed,
            records_emitted=summary.records_emitted,
            members_suppressed=summary.members_suppressed,
            listing_complete=summary.listing_complete,
        )
        return summary


def _run_enumerator(enumerator: GroupEnumerator, run_id: str) -> None:
    with bind_log_context(run_id=run_id):
        try:
            enumerator.run()
        except Exception as e:
            logger.error("group_enumerator_crashed", error=str(e), exc_info=True)


__all__ = ["HarvestSummary", "build_client", "run_harvest"]
