# trackomatic

Building blocks for a small, touch-friendly time tracker: the state of its
screen (status bar, project list, running time entry, error messages), its
configuration, a table of POSIX `TZ` strings for IANA zone names, and helpers
for the UTC timestamps a time-tracking service exchanges.

The package has no dependencies outside the standard library.

## Modules

- `trackomatic.timezones` – `posix_timezone(iana_name, default="GMT0")`
  returns the POSIX `TZ` string for an IANA zone name, or `default` when the
  name is not in the table. The full table is `IANA_TO_POSIX`, a read-only
  mapping. The module also defines the identifier aliases `ProjectId`,
  `WorkspaceId` and `TimeEntryId` (all `int`).
- `trackomatic.timeutils` – `format_time(moment, fmt, utc)`,
  `to_utc_timestamp(moment)` and `parse_utc_timestamp(timestamp)`.
- `trackomatic.configuration` – `Configuration`, `WifiConfiguration` and
  `TogglConfiguration`, read from a TOML file or a mapping.
- `trackomatic.display` – `Display`, which holds what the screen shows and
  turns taps into callbacks, with `Project`, `ActiveTimeEntry`,
  `BatterySymbol` and `battery_symbol(level, charging)`.

## Time zones

```python
from trackomatic.timezones import posix_timezone

posix_timezone("Europe/Zurich")             # 'CET-1CEST,M3.5.0,M10.5.0/3'
posix_timezone("Asia/Kolkata")              # 'IST-5:30'
posix_timezone("Etc/GMT+5")                 # '<-05>5'
posix_timezone("Mars/Olympus")              # 'GMT0'
posix_timezone("Mars/Olympus", "UTC0")      # 'UTC0'
```

## Timestamps

```python
from trackomatic.timeutils import format_time, parse_utc_timestamp, to_utc_timestamp

moment = parse_utc_timestamp("2025-06-14T21:16:44.250000Z")
to_utc_timestamp(moment)                    # '2025-06-14T21:16:44.250000Z'
format_time(moment, "%H:%M:%S", True)       # '21:16:44'
format_time(moment, "%H:%M:%S", False)      # the same moment in local time
```

`parse_utc_timestamp` reads the date and time of day from the start of the
string and returns an aware UTC `datetime`; digits after the first `.` (at
most six characters) are added as microseconds. A string it cannot read
raises `ValueError`. `to_utc_timestamp` and `format_time` take naive
datetimes as UTC.

## Configuration

```toml
[toggl]
api_token = "token"

[[wifi]]
ssid = "home"
password = "password"
```

```python
from trackomatic.configuration import Configuration

config = Configuration.load("trackomatic.toml")
config.toggl.api_token
[network.ssid for network in config.wifi]
```

`Configuration.from_dict` builds the same object from a mapping. A missing
`toggl` section, a non-string value or a `wifi` value that is not a list
raises `ValueError`. The `wifi` list may be left out.

## Screen state

```python
from trackomatic.display import Display, Project

display = Display(
    on_start=lambda project_id: print("start", project_id),
    on_stop=lambda entry_id: print("stop", entry_id),
    on_refresh=lambda: print("refresh"),
    battery=lambda: (55, False),
)

display.set_projects([Project(1, "Project A", "Client A")])
display.set_active_time_entry(7, 1, "09:30:00")
display.description          # 'Project A'
display.highlighted_project  # 1

display.click_start_stop()   # calls on_stop(7)
display.clear_active_time_entry()
display.click_start_stop()   # calls on_start(None)
display.click_project(1)     # calls on_start(1)

display.update()             # refreshes date_text and battery_text
```

- `set_wifi_connected(True)` calls `on_refresh` when the state changes to
  connected; `click_refresh` always does. While the callback runs,
  `refresh_active` is `True`.
- `set_active_time_entry` with a project that is not in the list leaves the
  display cleared and logs an error.
- `click_project` raises `KeyError` for an unknown project.
- `show_error` adds a message to `errors`; `close_error` removes the most
  recent one and raises `LookupError` when there is none.
- `battery_symbol` picks `BatterySymbol.CHARGE` while charging, otherwise
  `EMPTY`, `ONE`, `TWO`, `THREE` or `FULL` at the thresholds 10, 30, 60 and
  90 percent.

## What this package does not do

It does not talk to a time-tracking service: there is no HTTP client, no
offline stand-in for one, and nothing that connects a client to `Display`.
It draws nothing on a real screen, reads no touch input or battery, and
joins no wireless network; `Display` only keeps the state and calls the
callbacks you give it. There is no command to run.