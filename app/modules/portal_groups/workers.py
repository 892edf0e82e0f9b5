"""Group worker pool: the consumer stage of the harvest.

Each worker pulls groups from the rendezvous channel until it is closed and
drained. For every group it walks the member list page by page and emits one
record per visible member. A failed page abandons that group only; the worker
moves on to the next group without retrying.
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from infrastructure.clients.portal.errors import DecodeError, TransportError
from infrastructure.concurrency import RendezvousChannel
from infrastructure.logging import bind_log_context, get_module_logger
from modules.portal_groups.config import HarvestConfig
from modules.portal_groups.domain.models import Group, OutputRecord
from modules.portal_groups.endpoints import member_list_url
from modules.portal_groups.fetcher import PageFetcher, PortalClient
from modules.portal_groups.filters import should_emit
from modules.portal_groups.pagination import iter_pages
from modules.portal_groups.sink import OutputSink

logger = get_module_logger()

MEMBER_LIST_ACCEPT_ENCODING = "gzip, deflate"


@dataclass
class WorkerStats:
    """Counters owned by a single worker; merged after the pool finishes."""

    worker_id: int
    groups_processed: int = 0
    groups_failed: int = 0
    records_emitted: int = 0
    members_suppressed: int = 0
    failed_group_ids: List[str] = field(default_factory=list)


class GroupWorker:
    """One consumer: drains the channel, harvesting each group's members.

    Args:
        worker_id: Index of this worker within the pool
        client: Shared portal client
        channel: Work channel fed by the enumerator
        sink: Destination of output records
        config: Run configuration
        run_id: Harvest run identifier bound to this worker's logs
    """

    def __init__(
        self,
        worker_id: int,
        client: PortalClient,
        channel: RendezvousChannel[Group],
        sink: OutputSink,
        config: HarvestConfig,
        run_id: Optional[str] = None,
    ) -> None:
        self.worker_id = worker_id
        self._channel = channel
        self._sink = sink
        self._config = config
        self._run_id = run_id
        # Per-worker request state, reused for every group this worker handles
        self._fetcher = PageFetcher(client, accept_encoding=MEMBER_LIST_ACCEPT_ENCODING)
        self.stats = WorkerStats(worker_id=worker_id)
        self.log = logger.bind(component="group_worker", worker_id=worker_id)

    def run(self) -> WorkerStats:
        """Process groups until the channel is closed and drained.

        Returns:
            This worker's statistics
        """
        with bind_log_context(run_id=self._run_id):
            for group in self._channel:
                try:
                    ok = self.process_group(group)
                except Exception as e:
                    self.log.error(
                        "group_processing_exception",
                        group_id=group.id,
                        error=str(e),
                        exc_info=True,
                    )
                    ok = False

                if ok:
                    self.stats.groups_processed += 1
                else:
                    self.stats.groups_failed += 1
                    self.stats.failed_group_ids.append(group.id)

        self.log.debug(
            "group_worker_finished",
            groups_processed=self.stats.groups_processed,
            groups_failed=self.stats.groups_failed,
            records_emitted=self.stats.records_emitted,
        )
        return self.stats

    def process_group(self, group: Group) -> bool:
        """Harvest every member page of one group.

        Args:
            group: Group to process

        Returns:
            True if the whole member list was read, False if a page failed
            and the group's remaining pages were abandoned
        """
        with bind_log_context(group_id=group.id):
            if self._config.verbose:
                self.log.info("processing_group", title=group.title)

            url = member_list_url(self._config.base_url, group.id, page_size=self._config.page_size)
            try:
                for page in iter_pages(self._fetch_member_page(group)):
                    for member in page.members:
                        if should_emit(member, self._config):
                            self._sink.emit(OutputRecord.from_member(group, member))
                            self.stats.records_emitted += 1
                        else:
                            self.stats.members_suppressed += 1

            except TransportError as e:
                self.log.error(
                    "member_list_fetch_failed",
                    url=e.url or url,
                    status_code=e.status_code,
                    error=e.message,
                )
                return False

            except DecodeError as e:
                self.log.error(
                    "member_list_decode_failed",
                    url=e.url or url,
                    error=e.message,
                )
                return False

        return True

    def _fetch_member_page(self, group: Group):
        def fetch(cursor: int):
            url = member_list_url(
                self._config.base_url,
                group.id,
                start=cursor,
                page_size=self._config.page_size,
            )
            return self._fetcher.fetch(url)

        return fetch


class GroupWorkerPool:
    """Fixed-size pool of group workers sharing one client and one channel.

    Args:
        client: Shared portal client
        channel: Work channel fed by the enumerator
        sink: Destination of output records
        config: Run configuration; ``config.workers`` sets the pool size
        run_id: Harvest run identifier bound to worker logs
        worker_factory: Builds each worker; defaults to GroupWorker
    """

    def __init__(
        self,
        client: PortalClient,
        channel: RendezvousChannel[Group],
        sink: OutputSink,
        config: HarvestConfig,
        run_id: Optional[str] = None,
        worker_factory: Optional[Callable[..., GroupWorker]] = None,
    ) -> None:
        self._client = client
        self._channel = channel
        self._sink = sink
        self._config = config
        self._run_id = run_id
        self._worker_factory = worker_factory or GroupWorker

    def run(self) -> List[WorkerStats]:
        """Run all workers and block until every one has returned.

        Returns:
            Statistics of each worker, in worker order
        """
        workers = [
            self._worker_factory(
                worker_id,
                self._client,
                self._channel,
                self._sink,
                self._config,
                run_id=self._run_id,
            )
            for worker_id in range(self._config.workers)
        ]

        logger.debug("group_worker_pool_started", workers=len(workers))
        with ThreadPoolExecutor(
            max_workers=len(workers), thread_name_prefix="group-worker"
        ) as executor:
            futures = [executor.submit(worker.run) for worker in workers]
            return [future.result() for future in futures]


__all__ = ["GroupWorker", "GroupWorkerPool", "WorkerStats"]
