"""Mixin that gives an object `on`/`one`/`off`/`has`/`call` event methods."""

from __future__ import annotations

from typing import Any, Callable, Iterable

from bindable.lib.events import EventBinder

_HOST = object()


class BindableObject:
    """Base class for objects that expose named events to their callers.

    Subclasses list their events in `SINGLE_EVENTS` (one handler at a time)
    and `MASS_EVENTS` (any number of handlers), or pass them to `__init__`.
    Handlers get the host object back from `get_receiver()` unless `call`
    is given another receiver.

    Example:
        ```python
        class Dialog(BindableObject):
            SINGLE_EVENTS = ("show", "close")
            MASS_EVENTS = ("showed", "closed")

        dialog = Dialog()
        dialog.on("closed", lambda: print("bye")).on("closed", log_close)
        dialog.call("closed")
        ```
    """

    SINGLE_EVENTS: tuple[str, ...] = ()
    MASS_EVENTS: tuple[str, ...] = ()

    def __init__(
        self,
        single_events: Iterable[str] | None = None,
        mass_events: Iterable[str] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self._event_binder = EventBinder(
            self.SINGLE_EVENTS if single_events is None else single_events,
            self.MASS_EVENTS if mass_events is None else mass_events,
        )

    @property
    def single_events(self) -> tuple[str, ...]:
        return self._event_binder.single_events

    @property
    def mass_events(self) -> tuple[str, ...]:
        return self._event_binder.mass_events

    def set_events(
        self, single_events: Iterable[str] = (), mass_events: Iterable[str] = ()
    ) -> BindableObject:
        """Replace the single and mass event names."""
        self._event_binder.reconfigure(single_events, mass_events)
        return self

    def on(
        self,
        events: str | list[str] | tuple[str, ...],
        handler: Callable,
        can_unbind: bool = True,
        unbind_after_call: bool = False,
    ) -> BindableObject:
        """Bind a handler to one or more events.

        Args:
            events: Event name, space-delimited names or a list of names.
            handler: Handler function.
            can_unbind: Whether `off()` may remove the handler without it being named.
            unbind_after_call: Remove the handler after its first call.
        """
        self._event_binder.register(events, handler, can_unbind, unbind_after_call)
        return self

    def one(
        self, events: str | list[str] | tuple[str, ...], handler: Callable, can_unbind: bool = True
    ) -> BindableObject:
        """Bind a handler that is removed after its first call."""
        self._event_binder.register_once(events, handler, can_unbind)
        return self

    def off(
        self,
        events: str | list[str] | tuple[str, ...] | None = None,
        handler: Callable | None = None,
    ) -> BindableObject:
        """Remove a handler, or every removable handler, from one or more events."""
        self._event_binder.remove(events, handler)
        return self

    def has(self, event: str) -> bool:
        return self._event_binder.has(event)

    def call(self, event: str, args: Any = (), receiver: Any = _HOST) -> list:
        """Call the handlers of an event with this object as the default receiver.

        Any other receiver, None included, is passed through as given.
        """
        return self._event_binder.invoke(event, args, self if receiver is _HOST else receiver)
