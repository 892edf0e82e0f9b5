"""Structlog configuration for the harvester.

stdout carries harvested records only, so every log line is written to
stderr. Rendering is JSON in production and human-readable otherwise.
Under pytest all output is suppressed.

Usage:
    from infrastructure.logging import configure_logging, get_module_logger

    configure_logging(log_level="DEBUG")

    logger = get_module_logger()
    logger.info("harvest_started", workers=40)
"""

import inspect
import logging
import sys
from typing import Any, List, Optional

import structlog
from structlog.stdlib import BoundLogger

from infrastructure.configuration import settings
from infrastructure.logging.formatters import add_app_info, truncate_large_values

# Portal error bodies can be whole HTML pages
MAX_LOGGED_VALUE_LENGTH = 500

_CALLSITE_PARAMETERS = [
    structlog.processors.CallsiteParameter.FILENAME,
    structlog.processors.CallsiteParameter.LINENO,
    structlog.processors.CallsiteParameter.FUNC_NAME,
    structlog.processors.CallsiteParameter.THREAD_NAME,
]


def _is_test_environment() -> bool:
    """True when running under pytest."""
    return "pytest" in sys.modules


def _build_processors(prod_mode: bool) -> List[Any]:
    processors: List[Any] = [
        # run_id / worker_id / group_id bound with bind_log_context()
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(parameters=_CALLSITE_PARAMETERS),
        add_app_info(settings.APP_NAME, settings.APP_VERSION),
        truncate_large_values(max_length=MAX_LOGGED_VALUE_LENGTH),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if prod_mode:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def _silence_for_tests() -> BoundLogger:
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=logging.CRITICAL + 1, force=True)
    logging.root.setLevel(logging.CRITICAL + 1)
    return structlog.stdlib.get_logger()


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog and the stdlib root logger.

    Called once on import with the values from settings, and again by the CLI
    once ``--verbose`` is known. Repeated calls replace the previous setup.

    Args:
        log_level: Level name overriding settings.LOG_LEVEL
        is_production: Overrides settings.is_production; selects JSON output

    Returns:
        Configured logger instance
    """
    if _is_test_environment():
        return _silence_for_tests()

    prod_mode = settings.is_production if is_production is None else is_production

    structlog.configure(
        processors=_build_processors(prod_mode),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    level_name = (log_level or settings.LOG_LEVEL).upper()
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level_name, logging.INFO),
        force=True,
    )

    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Return a logger bound to the calling module.

    The logger carries ``component`` (last segment of the module name) and
    ``module_path``, e.g. ``workers`` and ``modules.portal_groups.workers``.
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    module = inspect.getmodule(caller) if caller is not None else None

    if module is None:
        return logger.bind(component="unknown")

    return logger.bind(
        component=module.__name__.rsplit(".", 1)[-1],
        module_path=module.__name__,
    )
