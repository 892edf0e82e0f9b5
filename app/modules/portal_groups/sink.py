"""Output sinks receiving finished records.

Sinks are called concurrently from every worker thread.
"""

import sys
import threading
from typing import Optional, Protocol, TextIO

from modules.portal_groups.domain.models import OutputRecord


class OutputSink(Protocol):
    """Receives one record per visible (group, member) pair."""

    def emit(self, record: OutputRecord) -> None:
        ...


def format_record(record: OutputRecord) -> str:
    """Render a record as ``groupId, username, "fullName", joinedEpochMillis``."""
    return f'{record.group_id}, {record.username}, "{record.full_name}", {record.joined}'


class StreamSink:
    """Writes one line per record to a text stream (stdout by default).

    Args:
        stream: Target stream; resolved to sys.stdout at write time when None
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream
        self._lock = threading.Lock()
        self.count = 0

    def emit(self, record: OutputRecord) -> None:
        line = format_record(record) + "\n"
        stream = self._stream or sys.stdout
        with self._lock:
            stream.write(line)
            self.count += 1

    def flush(self) -> None:
        stream = self._stream or sys.stdout
        with self._lock:
            stream.flush()
