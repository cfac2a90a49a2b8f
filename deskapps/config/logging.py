"""Logging setup for the console applications.

Menus own stdout, so every log record goes to stderr. The default level is
WARNING, which keeps an interactive session free of routine load/save
records; LOG_LEVEL=INFO or DEBUG brings them back.
"""
import logging
import sys
from typing import Any

import structlog
from pythonjsonlogger import jsonlogger

from deskapps.config.settings import LoggingSettings, settings


def tag_menu_events(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Prefix the event with the menu that logged it.

    The hotel and grade menus bind ``app``; service and storage loggers do
    not, and their events pass through untouched.
    """
    app = event_dict.get("app")
    if app:
        event_dict["event"] = f"[{app}] {event_dict.get('event', '')}"
    return event_dict


def _stderr_handler(logging_settings: LoggingSettings) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    if logging_settings.format == "json":
        handler.setFormatter(jsonlogger.JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    return handler


def configure_logging(logging_settings: LoggingSettings | None = None) -> None:
    """Route structlog through one stderr handler on the root logger.

    Safe to call again; the previous root handlers are replaced.

    Args:
        logging_settings: Level and format; the LOG_* settings when omitted
    """
    logging_settings = logging_settings or settings.logging
    level = getattr(logging, logging_settings.level)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(_stderr_handler(logging_settings))
    root.setLevel(level)

    renderer = (
        structlog.processors.JSONRenderer()
        if logging_settings.format == "json"
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            tag_menu_events,
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.typing.FilteringBoundLogger:
    return structlog.get_logger(name)
