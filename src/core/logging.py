"""Structured logging setup."""

import logging
import sys

import structlog

from src.core.config import Settings

_STDOUT_HANDLER_NAME = "notes-stdout"
_FILE_HANDLER_NAME = "notes-log-file"


def configure_logging(settings: Settings) -> None:
    """Configure structlog on top of stdlib logging.

    Log lines go to stdout and, when ``settings.log_file`` is set, are also
    appended to that file. Safe to call more than once.
    """
    root = logging.getLogger()
    root.setLevel(settings.log_level.upper())

    if not any(h.get_name() == _STDOUT_HANDLER_NAME for h in root.handlers):
        stream_handler = logging.StreamHandler(sys.stdout)
        stream_handler.set_name(_STDOUT_HANDLER_NAME)
        root.addHandler(stream_handler)

    for handler in [h for h in root.handlers if h.get_name() == _FILE_HANDLER_NAME]:
        root.removeHandler(handler)
        handler.close()
    if settings.log_file:
        file_handler = logging.FileHandler(settings.log_file, mode="a", encoding="utf-8")
        file_handler.set_name(_FILE_HANDLER_NAME)
        root.addHandler(file_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer() if settings.log_format == "json" else structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
