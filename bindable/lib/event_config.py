"""Event name configuration with ini file persistence."""

from __future__ import annotations

import configparser
import logging
import os
from typing import Iterable

from bindable.lib.events import EventBinder


class EventConfig:
    """Stores which events are single and which are mass in an ini file.

    Names live under the [EVENTS] section as whitespace-separated lists:

        [EVENTS]
        single_events = show close
        mass_events = showed
            closed

    A missing file or section simply means no events.
    """

    SECTION = "EVENTS"

    def __init__(
        self, config_file_path: str = "events.ini", target: EventBinder | None = None
    ) -> None:
        """Initialize with config path and optional binder to keep in sync.

        Args:
            config_file_path: Path to the ini file
            target: Optional binder reconfigured whenever the names change
        """
        self._config_obj = configparser.ConfigParser()
        self._target = target
        self.config_file_path = config_file_path

        logging.debug(f"Using event config file: {self.config_file_path}")

    def get_event_names(self) -> tuple[list[str], list[str]]:
        """Read the (single, mass) event names from the config file."""
        # Silently ignores missing files
        self._config_obj.read(self.config_file_path, encoding="utf-8")

        if not self._config_obj.has_section(self.SECTION):
            return [], []

        section = self._config_obj[self.SECTION]
        return (
            section.get("single_events", "").split(),
            section.get("mass_events", "").split(),
        )

    def set_event_names(self, single_events: Iterable[str], mass_events: Iterable[str]) -> bool:
        """Persist the event names and reconfigure the target binder.

        Returns True on success.
        """
        single_events = list(single_events)
        mass_events = list(mass_events)
        logging.debug(f"Changing event names. Single: {single_events} Mass: {mass_events}")
        try:
            self._config_obj.read(self.config_file_path, encoding="utf-8")

            if self.SECTION not in self._config_obj:
                self._config_obj.add_section(self.SECTION)

            section = self._config_obj[self.SECTION]
            section["single_events"] = " ".join(single_events)
            section["mass_events"] = " ".join(mass_events)

            with open(self.config_file_path, "w", encoding="utf-8") as conf:
                self._config_obj.write(conf)
        except OSError as e:
            logging.error(f"Failed to save event names to {self.config_file_path}: {e}")
            return False

        if self._target is not None:
            self._target.reconfigure(single_events, mass_events)
        return True

    def apply(self) -> None:
        """Reconfigure the target binder from the config file."""
        if self._target is None:
            return

        single_events, mass_events = self.get_event_names()
        self._target.reconfigure(single_events, mass_events)

    def create_binder(self) -> EventBinder:
        """Create a new binder classified from the config file."""
        single_events, mass_events = self.get_event_names()
        return EventBinder(single_events, mass_events)

    def clear(self) -> bool:
        """Delete the config file. Returns True on success."""
        try:
            if os.path.exists(self.config_file_path):
                os.remove(self.config_file_path)
                logging.info(f"Cleared event config: deleted {self.config_file_path}")
            # Drop cached values so they don't come back on the next read
            self._config_obj.clear()
            return True
        except OSError as e:
            logging.error(f"Failed to clear event config: {e}")
            return False
