"""Tests for the EventConfig."""

from __future__ import annotations

import os
import tempfile

import pytest

from bindable.lib.event_config import EventConfig
from bindable.lib.events import EventBinder


@pytest.fixture
def temp_config_file():
    """Create a temporary config file path for testing."""
    fd, path = tempfile.mkstemp(suffix=".ini")
    os.close(fd)
    os.remove(path)
    yield path
    # Cleanup
    if os.path.exists(path):
        os.remove(path)


def test_missing_file_means_no_events(temp_config_file):
    """Test that a missing config file yields empty event lists."""
    config = EventConfig(temp_config_file)

    assert config.get_event_names() == ([], [])


def test_missing_section_means_no_events(temp_config_file):
    """Test that a file without an [EVENTS] section yields empty event lists."""
    with open(temp_config_file, "w", encoding="utf-8") as f:
        f.write("[OTHER]\nkey = value\n")

    config = EventConfig(temp_config_file)

    assert config.get_event_names() == ([], [])


def test_reads_whitespace_separated_names(temp_config_file):
    """Test that names may be spread over several lines."""
    with open(temp_config_file, "w", encoding="utf-8") as f:
        f.write("[EVENTS]\nsingle_events = show close\nmass_events = showed\n    closed\n")

    config = EventConfig(temp_config_file)

    assert config.get_event_names() == (["show", "close"], ["showed", "closed"])


def test_missing_key_means_no_events_of_that_kind(temp_config_file):
    """Test that a section with only one key leaves the other list empty."""
    with open(temp_config_file, "w", encoding="utf-8") as f:
        f.write("[EVENTS]\nmass_events = changed\n")

    config = EventConfig(temp_config_file)

    assert config.get_event_names() == ([], ["changed"])


def test_set_and_get_event_names(temp_config_file):
    """Test that names written with set_event_names can be read back."""
    config = EventConfig(temp_config_file)

    assert config.set_event_names(["show", "close"], ("showed",)) is True

    assert EventConfig(temp_config_file).get_event_names() == (["show", "close"], ["showed"])


def test_set_event_names_reconfigures_target(temp_config_file):
    """Test that the target binder follows the saved names."""
    binder = EventBinder()
    config = EventConfig(temp_config_file, target=binder)

    config.set_event_names(["show"], ["closed"])

    assert binder.single_events == ("show",)
    assert binder.mass_events == ("closed",)


def test_set_event_names_fails_for_unwritable_path(tmp_path):
    """Test that a write failure is reported and the target is left alone."""
    binder = EventBinder(["keep"], [])
    config = EventConfig(str(tmp_path / "missing" / "events.ini"), target=binder)

    assert config.set_event_names(["show"], []) is False
    assert binder.single_events == ("keep",)


def test_apply_hydrates_target(temp_config_file):
    """Test that apply() reconfigures the target from the file."""
    EventConfig(temp_config_file).set_event_names(["show"], ["showed"])
    binder = EventBinder()

    EventConfig(temp_config_file, target=binder).apply()
    binder.register("show showed", lambda: 1)
    binder.register("showed", lambda: 2)

    assert binder.invoke("show") == [1]
    assert binder.invoke("showed") == [1, 2]


def test_apply_without_target_is_noop(temp_config_file):
    """Test that apply() does nothing when no target is set."""
    EventConfig(temp_config_file).apply()

    assert not os.path.exists(temp_config_file)


def test_create_binder(temp_config_file):
    """Test that create_binder() classifies events from the file."""
    EventConfig(temp_config_file).set_event_names(["show"], ["showed", "closed"])

    binder = EventConfig(temp_config_file).create_binder()

    assert binder.single_events == ("show",)
    assert binder.mass_events == ("showed", "closed")


def test_clear_deletes_file(temp_config_file):
    """Test that clear() removes the file and cached names."""
    config = EventConfig(temp_config_file)
    config.set_event_names(["show"], ["showed"])

    assert config.clear() is True

    assert not os.path.exists(temp_config_file)
    assert config.get_event_names() == ([], [])


def test_clear_without_file(temp_config_file):
    """Test that clearing a missing file still succeeds."""
    assert EventConfig(temp_config_file).clear() is True


def test_clear_fails_when_path_is_directory(tmp_path):
    """Test that a delete failure is reported and the directory is kept."""
    config = EventConfig(str(tmp_path))

    assert config.clear() is False
    assert tmp_path.is_dir()
