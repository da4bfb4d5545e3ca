"""Device configuration: wireless networks and service credentials."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field
from os import PathLike
from typing import Any

_WIFI_SECTION = "wifi"
_SSID_KEY = "ssid"
_PASSWORD_KEY = "password"


@dataclass(frozen=True)
class WifiConfiguration:
    """Credentials of one wireless network."""

    ssid: str
    password: str


@dataclass(frozen=True)
class TogglConfiguration:
    """Credentials for the time-tracking service."""

    api_token: str


def _require_str(data: Mapping[str, Any], key: str, where: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise ValueError(f"{where}: '{key}' must be a string")
    return value


def _wifi_network(entry: Any) -> WifiConfiguration:
    if not isinstance(entry, Mapping):
        raise ValueError("wifi: each entry must be a table")
    ssid = _require_str(entry, _SSID_KEY, _WIFI_SECTION)
    password = _require_str(entry, _PASSWORD_KEY, _WIFI_SECTION)
    return WifiConfiguration(ssid=ssid, password=password)


@dataclass(frozen=True)
class Configuration:
    """All settings the device needs to run."""

    toggl: TogglConfiguration
    wifi: tuple[WifiConfiguration, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Configuration:
        """Build a configuration from a mapping with ``toggl`` and ``wifi`` keys."""
        toggl_data = data.get("toggl")
        if not isinstance(toggl_data, Mapping):
            raise ValueError("configuration: 'toggl' section is missing")
        toggl = TogglConfiguration(_require_str(toggl_data, "api_token", "toggl"))

        wifi_data = data.get(_WIFI_SECTION, [])
        if not isinstance(wifi_data, list):
            raise ValueError("configuration: 'wifi' must be a list")
        networks = tuple(_wifi_network(entry) for entry in wifi_data)
        return cls(toggl=toggl, wifi=networks)

    @classmethod
    def load(cls, path: str | PathLike[str]) -> Configuration:
        """Read a configuration from a TOML file."""
        with open(path, "rb") as handle:
            data = tomllib.load(handle)
        return cls.from_dict(data)