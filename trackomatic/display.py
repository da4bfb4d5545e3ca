"""State of the device screen: status bar, project list and running time entry."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from trackomatic.timezones import ProjectId, TimeEntryId

log = logging.getLogger(__name__)

NO_RUNNING_TIME_ENTRY = "No running time entry"
NO_PROJECT = "No project"
DATE_PLACEHOLDER = "<Date>"
DATE_FORMAT = "%Y-%m-%d"

PLAY_SYMBOL = "\uf04b"
STOP_SYMBOL = "\uf04d"


class BatterySymbol(StrEnum):
    """Glyphs shown for the battery state."""

    CHARGE = "\uf0e7"
    EMPTY = "\uf244"
    ONE = "\uf243"
    TWO = "\uf242"
    THREE = "\uf241"
    FULL = "\uf240"


def battery_symbol(level: int, charging: bool) -> BatterySymbol:
    """Pick the battery glyph for a charge level in percent."""
    if charging:
        return BatterySymbol.CHARGE
    if level < 10:
        return BatterySymbol.EMPTY
    if level < 30:
        return BatterySymbol.ONE
    if level < 60:
        return BatterySymbol.TWO
    if level < 90:
        return BatterySymbol.THREE
    return BatterySymbol.FULL


@dataclass(frozen=True)
class Project:
    """A project that a time entry can be started for."""

    id: ProjectId
    name: str
    client: str


@dataclass(frozen=True)
class ActiveTimeEntry:
    """The time entry that is currently running."""

    id: TimeEntryId
    project_id: ProjectId | None
    started_at: str


def _local_now() -> datetime:
    return datetime.now().astimezone()


def _ignore(*_args: object) -> None:
    return None


class Display:
    """Holds what the screen shows and turns user actions into callbacks.

    ``battery`` returns ``(level, charging)``; when it is ``None`` the battery
    indicator stays empty.
    """

    def __init__(
        self,
        *,
        on_start: Callable[[ProjectId | None], None] = _ignore,
        on_stop: Callable[[TimeEntryId], None] = _ignore,
        on_refresh: Callable[[], None] = _ignore,
        clock: Callable[[], datetime] = _local_now,
        battery: Callable[[], tuple[int, bool]] | None = None,
    ) -> None:
        self.on_start = on_start
        self.on_stop = on_stop
        self.on_refresh = on_refresh
        self._clock = clock
        self._battery = battery

        self._date_text = DATE_PLACEHOLDER
        self._battery_text = ""
        self._refresh_active = False
        self._wifi_connected = False
        self._username = ""
        self._projects: dict[ProjectId, Project] = {}
        self._highlighted: ProjectId | None = None
        self._active: ActiveTimeEntry | None = None
        self._description = NO_RUNNING_TIME_ENTRY
        self._started_at = ""
        self._button_symbol = PLAY_SYMBOL
        self._errors: list[str] = []

    @property
    def date_text(self) -> str:
        return self._date_text

    @property
    def battery_text(self) -> str:
        return self._battery_text

    @property
    def refresh_active(self) -> bool:
        return self._refresh_active

    @property
    def wifi_connected(self) -> bool:
        return self._wifi_connected

    @property
    def username(self) -> str:
        return self._username

    @property
    def projects(self) -> tuple[Project, ...]:
        return tuple(self._projects.values())

    @property
    def highlighted_project(self) -> ProjectId | None:
        return self._highlighted

    @property
    def active_time_entry(self) -> ActiveTimeEntry | None:
        return self._active

    @property
    def description(self) -> str:
        return self._description

    @property
    def started_at(self) -> str:
        return self._started_at

    @property
    def button_symbol(self) -> str:
        return self._button_symbol

    @property
    def errors(self) -> tuple[str, ...]:
        return tuple(self._errors)

    def set_username(self, username: str) -> None:
        if username != self._username:
            log.info("Updating username label to %r", username)
            self._username = username

    def set_projects(self, projects: Iterable[Project]) -> None:
        self._projects = {project.id: project for project in projects}
        self._highlighted = None

    def set_refresh(self, active: bool) -> None:
        if active != self._refresh_active:
            log.info("Setting refresh state to %s", active)
            self._refresh_active = active

    def set_wifi_connected(self, connected: bool) -> None:
        if connected == self._wifi_connected:
            return
        log.info("Setting WiFi active state to %s", connected)
        self._wifi_connected = connected
        if connected:
            self._run_refresh()

    def set_active_time_entry(
        self,
        time_entry_id: TimeEntryId,
        project_id: ProjectId | None,
        started_at: str,
    ) -> None:
        self.clear_active_time_entry()

        description = NO_PROJECT
        if project_id is not None:
            project = self._projects.get(project_id)
            if project is None:
                log.error("Project ID %s not found in project list", project_id)
                return
            description = project.name
            self._highlighted = project_id

        log.info(
            "Setting active time entry %s started at %r", time_entry_id, started_at
        )
        self._description = description
        self._started_at = started_at
        self._button_symbol = STOP_SYMBOL
        self._active = ActiveTimeEntry(time_entry_id, project_id, started_at)

    def clear_active_time_entry(self) -> None:
        log.info("Clearing active time entry")
        self._description = NO_RUNNING_TIME_ENTRY
        self._started_at = ""
        self._button_symbol = PLAY_SYMBOL
        self._highlighted = None
        self._active = None

    def show_error(self, message: str) -> None:
        self._errors.append(message)

    def close_error(self) -> None:
        """Close the most recently shown error message."""
        if not self._errors:
            raise LookupError("no error message is shown")
        self._errors.pop()

    def update(self) -> None:
        date_text = self._clock().strftime(DATE_FORMAT)
        if date_text != self._date_text:
            log.debug("Updating date label to %r", date_text)
            self._date_text = date_text
        if self._battery is not None:
            level, charging = self._battery()
            self._battery_text = str(battery_symbol(level, charging))

    def click_refresh(self) -> None:
        self._run_refresh()

    def click_start_stop(self) -> None:
        if self._active is not None:
            self.on_stop(self._active.id)
        else:
            self.on_start(None)

    def click_project(self, project_id: ProjectId) -> None:
        if project_id not in self._projects:
            raise KeyError(project_id)
        log.info("Starting time entry for project %s", project_id)
        self.on_start(project_id)

    def _run_refresh(self) -> None:
        self.set_refresh(True)
        try:
            self.on_refresh()
        finally:
            self.set_refresh(False)