"""
Observability module.

Logging configuration, request correlation ids and HTTP middleware.
"""

from mentorhub.observability.logger import configure_logging
from mentorhub.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

__all__ = [
    "configure_logging",
    "CorrelationMiddleware",
    "RequestLoggingMiddleware",
]
