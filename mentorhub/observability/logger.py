"""
Process-wide logging setup.

A single stdout handler on the root logger; every record is stamped with
the current request's correlation id.

Dependencies: logging (stdlib)
System role: Centralized logging configuration
"""

import logging
import sys

from mentorhub.observability.correlation import current_correlation_id

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s [%(correlation_id)s] %(message)s"

# Third-party loggers that are chatty at INFO
NOISY_LOGGERS = {
    "httpx": logging.WARNING,
    "httpcore": logging.WARNING,
    "sqlalchemy.engine": logging.WARNING,
    "passlib": logging.ERROR,
}


class CorrelationIdFilter(logging.Filter):
    """Stamp records with the correlation id, "-" outside requests."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = current_correlation_id() or "-"
        return True


def configure_logging(level: str = "INFO") -> None:
    """
    Replace root handlers with one correlation-aware stdout handler.

    Safe to call more than once; each call leaves exactly one handler.

    Args:
        level: Root log level name
    """
    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)

    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(CorrelationIdFilter())
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))

    root.addHandler(handler)
    root.setLevel(level.upper())

    for name, noisy_level in NOISY_LOGGERS.items():
        logging.getLogger(name).setLevel(noisy_level)
