"""
Request correlation ids.

Every request is bound to an id (the client's X-Correlation-ID when sent,
a fresh one otherwise) that log records and the response header carry.

Dependencies: contextvars
System role: Request tracing across log lines
"""

import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

CORRELATION_HEADER = "X-Correlation-ID"

_current_id: ContextVar[str | None] = ContextVar("mentorhub_correlation_id", default=None)


def current_correlation_id() -> str | None:
    """Id bound to the running request, None outside a request."""
    return _current_id.get()


@contextmanager
def correlation_scope(incoming: str | None = None) -> Iterator[str]:
    """
    Bind a correlation id for the duration of the block.

    Args:
        incoming: Id supplied by the client, if any

    Yields:
        str: The bound id
    """
    value = incoming or uuid.uuid4().hex
    token = _current_id.set(value)
    try:
        yield value
    finally:
        _current_id.reset(token)
