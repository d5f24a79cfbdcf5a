"""Root logger setup shared by the API and the maintenance scripts."""

import logging
import sys
from typing import Optional

from pythonjsonlogger import jsonlogger

from storefront.config import get_settings

LOG_FIELDS = "%(asctime)s %(levelname)s %(name)s %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

# Driver and server loggers that flood INFO with connection chatter.
NOISY_LOGGERS = ("uvicorn.access", "pymongo", "motor")


def build_formatter(log_format: str) -> logging.Formatter:
    """JSON records for ``json``; anything else gets a one-line text layout.

    JSON records rename ``levelname`` to ``level`` and ``asctime`` to
    ``timestamp``; extras passed by the middleware (``request_id``,
    ``status_code`` ...) become top-level keys.
    """
    if log_format == "json":
        return jsonlogger.JsonFormatter(
            LOG_FIELDS,
            datefmt=DATE_FORMAT,
            rename_fields={"levelname": "level", "asctime": "timestamp"},
        )
    return logging.Formatter(
        "%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
        datefmt=DATE_FORMAT,
    )


def setup_logging(level: Optional[str] = None, log_format: Optional[str] = None) -> logging.Logger:
    """Route every record to stdout; arguments override ``LOG_LEVEL`` / ``LOG_FORMAT``."""
    settings = get_settings()
    level = (level or settings.log_level).upper()
    log_format = log_format or settings.log_format

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(build_formatter(log_format))

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level, logging.INFO))

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    root.debug("Logging ready (level=%s, format=%s)", level, log_format)
    return root
