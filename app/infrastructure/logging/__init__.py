"""Structured logging infrastructure.

This package provides centralized logging configuration and utilities
for the harvester using structlog.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_module_logger(): Get a logger for the calling module
    - bind_log_context(): Context manager for run/group scoped logging
    - new_run_id(): Generate an identifier for a harvest run

Formatters:
    - add_app_info(): Processor to add app name/version
    - truncate_large_values(): Processor to limit string lengths

Example:
    from infrastructure.logging import (
        configure_logging,
        get_module_logger,
        bind_log_context,
    )

    # At application startup
    configure_logging()

    # In a module
    logger = get_module_logger()
    logger.info("module_initialized")

    # Around a unit of work
    with bind_log_context(group_id="abc123"):
        logger.info("processing_group")
"""

# Core logging setup
from infrastructure.logging.setup import (
    configure_logging,
    get_module_logger,
)

# Context binding
from infrastructure.logging.context import (
    bind_log_context,
    new_run_id,
)

# Log formatters/processors
from infrastructure.logging.formatters import (
    add_app_info,
    truncate_large_values,
)

__all__ = [
    # Setup
    "configure_logging",
    "get_module_logger",
    # Context
    "bind_log_context",
    "new_run_id",
    # Formatters
    "add_app_info",
    "truncate_large_values",
]
