"""Argument normalization helpers shared by the event binder."""

from __future__ import annotations

from typing import Any


def normalize_to_list(value: Any) -> list | tuple:
    """Turn an event name or a space-delimited list of names into a sequence

    Strings are split on single spaces without any trimming, so repeated
    spaces produce empty names. Lists and tuples are returned unchanged.

    Args:
        value (str | list | tuple): One or more event names.

    Returns:
        list | tuple: The event names.

    Raises:
        TypeError: If the value is neither a string nor a list/tuple.

    Example:
        ```python
        normalize_to_list("show close")  # ['show', 'close']
        ```
    """
    if isinstance(value, str):
        return value.split(" ")
    if isinstance(value, (list, tuple)):
        return value
    raise TypeError(f"Event names must be a string or a list, got {type(value).__name__}")


def is_empty_value(value: Any) -> bool:
    """Check whether a value is None or an empty string"""
    return value is None or (isinstance(value, str) and value == "")


def wrap_as_arg_list(value: Any) -> list | tuple:
    """Wrap a single value into a one-element argument list

    Lists and tuples are returned unchanged, so to pass a single list as one
    argument it has to be wrapped by the caller: `[[1, 2, 3]]`.
    """
    return value if isinstance(value, (list, tuple)) else [value]
