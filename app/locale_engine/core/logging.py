"""locale-engine structured logging module.

Every module logs through a structlog logger obtained from
get_module_logger(), with snake_case event names and keyword context:

    logger = get_module_logger()
    logger.warning("translation_not_found", key=key, locale=locale)
"""

import inspect
import logging
import sys
from typing import Any, List, Optional

import structlog
from structlog.stdlib import BoundLogger

from locale_engine.core.config import settings

# Translated strings and markup inputs can be large; keep log lines bounded.
MAX_LOGGED_VALUE_LENGTH = 200

SILENT_LEVEL = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    """Detect if running in a test environment."""
    return "pytest" in sys.modules


def truncate_large_values(max_length: int = MAX_LOGGED_VALUE_LENGTH):
    """Create a processor that truncates overly large string values.

    Args:
        max_length: Maximum string length before truncation.

    Returns:
        A structlog processor function.
    """

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        for key, value in event_dict.items():
            if isinstance(value, str) and len(value) > max_length:
                event_dict[key] = (
                    value[:max_length] + f"...[truncated, {len(value)} chars total]"
                )
        return event_dict

    return processor


def _build_processors(prod_mode: bool) -> List[Any]:
    """Processor chain: context, level, timestamp, truncation, renderer."""
    renderer = (
        structlog.processors.JSONRenderer()
        if prod_mode
        else structlog.dev.ConsoleRenderer()
    )
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        truncate_large_values(),
        renderer,
    ]


def _silence_for_tests() -> None:
    """Keep structlog callable under pytest while emitting nothing."""
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=SILENT_LEVEL, force=True)
    logging.root.setLevel(SILENT_LEVEL)


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structured logging for the engine.

    Under pytest all output is suppressed regardless of arguments.

    Args:
        log_level: Level name overriding settings.LOG_LEVEL.
        is_production: JSON output when True, console output when False.
            Defaults to settings.is_production.

    Returns:
        Root structlog logger
    """
    if _is_test_environment():
        _silence_for_tests()
        return structlog.stdlib.get_logger()

    if is_production is None:
        is_production = settings.is_production
    level_name = (log_level or settings.LOG_LEVEL).upper()

    structlog.configure(
        processors=_build_processors(is_production),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level_name, logging.INFO),
    )
    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Return a logger bound to the calling module's name.

    "locale_engine.i18n.plurals" binds component="plurals" and
    module_path="locale_engine.i18n.plurals".
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    module_name = caller.f_globals.get("__name__") if caller is not None else None
    if not module_name:
        return logger.bind(component="unknown")
    return logger.bind(
        component=module_name.rsplit(".", 1)[-1],
        module_path=module_name,
    )
