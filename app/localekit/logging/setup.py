"""Structlog configuration for localekit.

Library events are rendered as colored key/value lines in development and as
one JSON object per line in production. Nothing is emitted under pytest.

Usage:
    from localekit.logging import configure_logging, get_module_logger

    configure_logging()

    logger = get_module_logger()
    logger.info("registry_initialized", default_locale="en")
"""

import inspect
import logging
import sys
from typing import List, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.typing import Processor

from localekit.configuration import Settings
from localekit.configuration import settings as default_settings

_SILENT = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    """Detect if running in a test environment.

    Returns:
        True if pytest is in sys.modules, False otherwise
    """
    return "pytest" in sys.modules


def build_processors(is_production: bool) -> List[Processor]:
    """Return the processor chain for one rendering mode.

    Args:
        is_production: JSON output when True, console output otherwise.
    """
    if is_production:
        renderer: Processor = structlog.processors.JSONRenderer(ensure_ascii=False)
    else:
        renderer = structlog.dev.ConsoleRenderer()
    return [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
        renderer,
    ]


def _apply(processors: List[Processor], level: int, force: bool = False) -> BoundLogger:
    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=level, force=force)
    return structlog.stdlib.get_logger()


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
    settings: Optional[Settings] = None,
) -> BoundLogger:
    """Configure structlog over the standard logging module.

    Args:
        log_level: Level name overriding ``settings.LOG_LEVEL``.
        is_production: Overrides ``settings.is_production``; selects JSON
            rather than console output.
        settings: Settings to read defaults from (default: module settings).

    Returns:
        Configured logger instance
    """
    settings = settings or default_settings

    if _is_test_environment():
        logging.root.setLevel(_SILENT)
        return _apply(
            [
                structlog.stdlib.add_log_level,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            _SILENT,
            force=True,
        )

    if is_production is None:
        is_production = settings.is_production
    level_name = (log_level or settings.LOG_LEVEL).upper()
    return _apply(
        build_processors(is_production),
        getattr(logging, level_name, logging.INFO),
    )


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Return the package logger bound to the calling module.

    ``component`` is the last dotted part of the caller's module name and
    ``module_path`` the full name.
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
