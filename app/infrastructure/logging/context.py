"""Run and group context binding for structured logging.

Binds identifiers to structlog's context variables so every log entry made
inside the block carries them. Context variables are per thread: the pipeline
binds the run id on the calling thread and each worker binds its own
``worker_id``/``group_id`` on its thread.

Usage:
    from infrastructure.logging import bind_log_context

    with bind_log_context(group_id="abc123", worker_id=3):
        logger.info("processing_group")

Dependencies:
    - structlog.contextvars
"""

import uuid
from contextlib import contextmanager
from typing import Any, Generator
import structlog


def new_run_id() -> str:
    """Return a fresh identifier for one harvest run."""
    return str(uuid.uuid4())


@contextmanager
def bind_log_context(**context: Any) -> Generator[None, None, None]:
    """Bind key-value pairs to all logs within the context manager.

    Keys whose value is None are skipped. Only the keys bound here are
    removed on exit, so blocks can be nested.

    Args:
        **context: Key-value pairs to include in logs.

    Yields:
        None - context is automatically bound to structlog's context vars.

    Example:
        with bind_log_context(run_id=new_run_id()):
            with bind_log_context(group_id=group.id):
                logger.info("member_page_fetched", page_start=0)
    """
    bound = {key: value for key, value in context.items() if value is not None}

    structlog.contextvars.bind_contextvars(**bound)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars(*bound.keys())

