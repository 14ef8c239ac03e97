"""Named-event binder with single and mass handler policies."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable

from bindable.lib.current_receiver import receiver_context
from bindable.lib.utils import is_empty_value, normalize_to_list, wrap_as_arg_list

_DEFAULT_RECEIVER = object()


@dataclass(eq=False)
class Binding:
    """A handler bound to an event.

    Bindings compare by identity, so binding the same handler twice yields
    two distinct records.
    """

    handler: Callable
    removable: bool = True
    auto_remove: bool = False


class EventBinder:
    """Registry of event handlers with two cardinality policies.

    Single events keep at most one handler, registering again replaces it.
    Mass events accumulate handlers, which are invoked in registration order.
    Names that belong to neither policy are ignored on registration.

    Handlers are called synchronously; exceptions bubble up normally.
    """

    def __init__(self, single_events: Iterable[str] = (), mass_events: Iterable[str] = ()):
        self._bindings: dict[str, list[Binding]] = {}
        self.reconfigure(single_events, mass_events)

    @property
    def single_events(self) -> tuple[str, ...]:
        """Events to which only one handler can be bound."""
        return self._single_events

    @property
    def mass_events(self) -> tuple[str, ...]:
        """Events to which any number of handlers can be bound."""
        return self._mass_events

    def reconfigure(
        self, single_events: Iterable[str] = (), mass_events: Iterable[str] = ()
    ) -> None:
        """Replace the single and mass event names.

        Handlers that are already bound are kept, the new names only affect
        later registrations.
        """
        self._single_events = tuple(single_events)
        self._mass_events = tuple(mass_events)
        logging.debug(
            f"Event names set. Single: {list(self._single_events)} Mass: {list(self._mass_events)}"
        )

    def register(
        self,
        events: str | list[str] | tuple[str, ...],
        handler: Callable,
        removable: bool = True,
        auto_remove: bool = False,
    ) -> None:
        """Bind a handler to one or more events.

        Args:
            events: Event name, space-delimited names or a list of names.
            handler: Callable invoked with the arguments given to `invoke`.
            removable: Whether `remove` may strip the handler without it being named.
            auto_remove: Remove the handler right after its first call.

        Raises:
            TypeError: If the handler is not callable.

        Example:
            ```python
            binder.register("close", on_close)
            binder.register("close closed", on_close)
            binder.register(["close", "closed"], on_close, removable=False)
            ```
        """
        if not callable(handler):
            raise TypeError(f"Event handler must be callable, got {type(handler).__name__}")

        for event in normalize_to_list(events):
            # Mass is checked first, a name listed in both accumulates handlers
            if event in self._mass_events:
                self._bindings.setdefault(event, []).append(
                    Binding(handler, removable, auto_remove)
                )
            elif event in self._single_events:
                self._bindings[event] = [Binding(handler, removable, auto_remove)]
            else:
                logging.debug(f"Ignoring handler for unknown event: {event}")

    def register_once(
        self, events: str | list[str] | tuple[str, ...], handler: Callable, removable: bool = True
    ) -> None:
        """Bind a handler that is removed after its first call."""
        self.register(events, handler, removable, auto_remove=True)

    def remove(
        self,
        events: str | list[str] | tuple[str, ...] | None = None,
        handler: Callable | None = None,
    ) -> None:
        """Remove handlers from one or more events.

        Without a handler, every removable handler goes. With a handler, every
        binding of that handler goes, whether it is removable or not.

        Example:
            ```python
            binder.remove(["show", "close"], f1)  # f1 from the given events
            binder.remove("show")                 # removable handlers of "show"
            binder.remove(None, f1)               # f1 from every event
            binder.remove()                       # removable handlers of every event
            ```
        """
        names = list(self._bindings) if is_empty_value(events) else normalize_to_list(events)

        for event in names:
            if not self.has(event):
                continue

            bindings = self._bindings[event]
            bindings[:] = [b for b in bindings if not self._matches(b, handler)]
            if not bindings:
                del self._bindings[event]

    def has(self, event: str) -> bool:
        """Check whether at least one handler is bound to the event."""
        return bool(self._bindings.get(event))

    def invoke(self, event: str, args: Any = (), receiver: Any = _DEFAULT_RECEIVER) -> list:
        """Call every handler bound to the event and collect their return values.

        Args:
            event: A single event name.
            args: Positional arguments as a list, or a single value. A single
                list argument has to be wrapped: `[["first", "second"]]`.
            receiver: Object made available to handlers through
                `get_receiver()`, None included. Defaults to this binder.

        Returns:
            list: Handler results in call order.

        Example:
            ```python
            binder.register("test", lambda: 1)
            binder.register("test", lambda: 2)
            binder.invoke("test")  # [1, 2]
            ```
        """
        if not self.has(event):
            return []

        args = wrap_as_arg_list(args)
        if receiver is _DEFAULT_RECEIVER:
            receiver = self

        results = []
        bindings = self._bindings[event]
        called: set[Binding] = set()
        index = 0
        # Handlers may add or remove bindings of this event while it runs.
        # Replacing or pruning the list ends the run.
        while self._bindings.get(event) is bindings:
            index = self._next_index(bindings, index, called)
            if index == len(bindings):
                break

            binding = bindings[index]
            called.add(binding)
            with receiver_context(receiver):
                results.append(binding.handler(*args))

            if binding.auto_remove:
                self.remove(event, binding.handler)
            index += 1

        return results

    @staticmethod
    def _next_index(bindings: list[Binding], index: int, called: set[Binding]) -> int:
        # Called bindings always form a prefix of the list, removals only shift it left
        index = min(index, len(bindings))
        while index > 0 and bindings[index - 1] not in called:
            index -= 1
        while index < len(bindings) and bindings[index] in called:
            index += 1
        return index

    @staticmethod
    def _matches(binding: Binding, handler: Callable | None) -> bool:
        if handler is None:
            return binding.removable
        return binding.handler == handler
