"""Structured logging for binding discovery and property resolution.

The package logger is silent until the host application attaches a handler.
Every record carries a ``context`` dict with the active trace id, plus the
kind, binding name, and secret *keys* of the event. Secret values never
enter a record.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Final, Iterator, Mapping

TRACE_ID: ContextVar[str | None] = ContextVar("lib_service_bindings_trace_id", default=None)
"""Identifier of the resolution pass currently logging."""

_LOGGER: Final[logging.Logger] = logging.getLogger("lib_service_bindings")
_LOGGER.addHandler(logging.NullHandler())


def get_logger() -> logging.Logger:
    """Return the package logger so applications can attach handlers."""

    return _LOGGER


def bind_trace_id(trace_id: str | None) -> None:
    """Set (or with ``None`` clear) the trace id for the current context."""

    TRACE_ID.set(trace_id)


@contextmanager
def trace_scope(trace_id: str | None) -> Iterator[None]:
    """Bind *trace_id* for the duration of one pass, then restore the previous one.

    Examples
    --------
    >>> with trace_scope('pass-1'):
    ...     TRACE_ID.get()
    'pass-1'
    >>> TRACE_ID.get() is None
    True
    """

    token = TRACE_ID.set(trace_id)
    try:
        yield
    finally:
        TRACE_ID.reset(token)


def log_debug(message: str, **fields: Any) -> None:
    _LOGGER.log(logging.DEBUG, message, extra={"context": _context(fields)})


def log_info(message: str, **fields: Any) -> None:
    _LOGGER.log(logging.INFO, message, extra={"context": _context(fields)})


def log_error(message: str, **fields: Any) -> None:
    _LOGGER.log(logging.ERROR, message, extra={"context": _context(fields)})


def make_event(
    kind: str,
    binding: str | None,
    payload: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Build the fields of a processor event for one kind (and binding, if any).

    >>> make_event('MySQL', 'orders-db', {'keys': 3})
    {'kind': 'MySQL', 'binding': 'orders-db', 'keys': 3}
    """

    event: dict[str, Any] = {"kind": kind, "binding": binding}
    if payload:
        event |= dict(payload)
    return event


def _context(fields: Mapping[str, Any]) -> dict[str, Any]:
    return {"trace_id": TRACE_ID.get(), **fields}
