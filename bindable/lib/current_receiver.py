"""Context-local access to the receiver of the running event handler.

Handlers are plain callables, so the object they are invoked against is
published here for the duration of the call, much like Flask's
`current_app`.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Iterator

_receiver: ContextVar[Any] = ContextVar("bindable_receiver")


def get_receiver() -> Any:
    """Get the receiver the current event handler is invoked against

    Returns:
        Any: The receiver passed to `EventBinder.invoke`, or the binder itself
            when none was given.

    Raises:
        RuntimeError: If called outside of an event handler.
    """
    try:
        return _receiver.get()
    except LookupError:
        raise RuntimeError("Working outside of an event handler context.") from None


@contextmanager
def receiver_context(receiver: Any) -> Iterator[Any]:
    """Make `receiver` current until the block exits, restoring the previous one"""
    token = _receiver.set(receiver)
    try:
        yield receiver
    finally:
        _receiver.reset(token)
