"""Portal group membership harvest.

Enumerates every public group of a portal and emits one record per
(group, member) pair, using one producer thread and a fixed pool of
worker threads joined by a rendezvous channel.

Public API:
    - run_harvest(): Run the whole pipeline
    - HarvestConfig: Run configuration
    - HarvestSummary: Run outcome
    - StreamSink: Default stdout sink
"""

from modules.portal_groups.config import HarvestConfig
from modules.portal_groups.pipeline import HarvestSummary, run_harvest
from modules.portal_groups.sink import OutputSink, StreamSink, format_record

__all__ = [
    "HarvestConfig",
    "HarvestSummary",
    "run_harvest",
    "OutputSink",
    "StreamSink",
    "format_record",
]
