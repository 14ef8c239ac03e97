"""Pytest fixtures for bindable tests."""

import pytest

from bindable.lib.events import EventBinder

SINGLE_EVENTS = ["singleTest", "singleTest2"]
MASS_EVENTS = ["massTest", "massTest2"]


@pytest.fixture
def binder():
    """Create an EventBinder with two single and two mass events."""
    return EventBinder(SINGLE_EVENTS, MASS_EVENTS)
