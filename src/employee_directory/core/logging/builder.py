# src/employee_directory/core/logging/builder.py
"""
Logging builder: build a dictConfig mapping from Settings and apply it.

    setup_logging(get_settings())

Layout of the produced config:
  - formatters: "standard" (plain, or ColorFormatter when LOG_FORMAT=text) and "json"
  - filters: "request_id", "redact"
  - handlers: "console" always; "file" and "error_file" when LOG_TO_STDOUT is off
  - loggers: root, uvicorn.error, uvicorn.access
"""

from __future__ import annotations

import logging
import logging.config
from pathlib import Path

from employee_directory.config.settings import Settings
from employee_directory.utils.logging import get_project_name

from .filters import RedactFilter, RequestIdFilter
from .formatters import ColorFormatter, JsonFormatter
from .handlers import get_console_handler, get_error_file_handler, get_file_handler

STANDARD_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(request_id)s | %(message)s"


def _writes_files(settings: Settings) -> bool:
    return not settings.LOG_TO_STDOUT


def make_dict_config(settings: Settings) -> dict:
    """
    Build the dictConfig mapping for the given settings. Pure function.
    """
    formatters = {
        "standard": {
            "()": ColorFormatter if settings.LOG_FORMAT == "text" else logging.Formatter,
            "fmt": STANDARD_FORMAT,
        },
        "json": {
            "()": JsonFormatter,
            "env": settings.ENV,
            "service": get_project_name(),
        },
    }

    filters = {
        "request_id": {"()": RequestIdFilter},
        "redact": {"()": RedactFilter},
    }

    handlers: dict[str, dict] = {"console": get_console_handler(settings)}
    if _writes_files(settings):
        handlers["file"] = get_file_handler(settings)
        handlers["error_file"] = get_error_file_handler(settings)

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": formatters,
        "filters": filters,
        "handlers": handlers,
        "loggers": {
            "": {
                "handlers": list(handlers.keys()),
                "level": settings.LOG_LEVEL,
            },
            "uvicorn.error": {
                "level": settings.LOG_LEVEL,
                "handlers": list(handlers.keys()),
                "propagate": False,
            },
            "uvicorn.access": {
                "level": "INFO",
                "handlers": ["console"],
                "propagate": False,
            },
        },
    }


def setup_logging(settings: Settings) -> None:
    """
    Apply the logging configuration.

    Creates LOG_DIR when logging to files, applies dictConfig, and adds a
    RequestIdFilter on the root logger so records handled by handlers attached later
    (pytest's caplog, for instance) still carry `request_id`.
    """
    if _writes_files(settings):
        Path(settings.LOG_DIR).mkdir(parents=True, exist_ok=True)

    logging.config.dictConfig(make_dict_config(settings))

    root = logging.getLogger()
    if not any(isinstance(f, RequestIdFilter) for f in root.filters):
        root.addFilter(RequestIdFilter())

    logging.getLogger(__name__).debug(
        "logging.configured",
        extra={"log_format": settings.LOG_FORMAT, "log_level": settings.LOG_LEVEL, "env": settings.ENV},
    )
