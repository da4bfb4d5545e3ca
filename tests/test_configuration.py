import tomllib

import pytest

from trackomatic.configuration import (
    Configuration,
    TogglConfiguration,
    WifiConfiguration,
)

PASSWORD = "password"


def test_from_dict_reads_all_sections():
    config = Configuration.from_dict(
        {
            "toggl": {"api_token": "token"},
            "wifi": [
                {"ssid": "home", "password": PASSWORD},
                {"ssid": "office", "password": PASSWORD},
            ],
        }
    )
    assert config.toggl == TogglConfiguration(api_token="token")
    assert config.wifi == (
        WifiConfiguration(ssid="home", password=PASSWORD),
        WifiConfiguration(ssid="office", password=PASSWORD),
    )


def test_wifi_order_is_preserved():
    names = ["a", "b", "c"]
    config = Configuration.from_dict(
        {
            "toggl": {"api_token": "token"},
            "wifi": [{"ssid": name, "password": PASSWORD} for name in names],
        }
    )
    assert [network.ssid for network in config.wifi] == names


def test_wifi_defaults_to_empty():
    config = Configuration.from_dict({"toggl": {"api_token": "token"}})
    assert config.wifi == ()


def test_load_from_toml(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text(
        '[toggl]\napi_token = "token"\n\n'
        '[[wifi]]\nssid = "home"\npassword = "password"\n'
    )
    config = Configuration.load(path)
    assert config.toggl.api_token == "token"
    assert config.wifi == (WifiConfiguration(ssid="home", password=PASSWORD),)


def test_missing_toggl_section_raises():
    with pytest.raises(ValueError, match="toggl"):
        Configuration.from_dict({"wifi": []})


def test_non_string_token_raises():
    with pytest.raises(ValueError, match="api_token"):
        Configuration.from_dict({"toggl": {"api_token": 5}})


def test_wifi_entry_without_password_raises():
    with pytest.raises(ValueError, match="password"):
        Configuration.from_dict(
            {"toggl": {"api_token": "token"}, "wifi": [{"ssid": "home"}]}
        )


def test_wifi_not_a_list_raises():
    with pytest.raises(ValueError, match="wifi"):
        Configuration.from_dict({"toggl": {"api_token": "token"}, "wifi": "home"})


def test_invalid_toml_raises(tmp_path):
    path = tmp_path / "broken.toml"
    path.write_text("[toggl\n")
    with pytest.raises(tomllib.TOMLDecodeError):
        Configuration.load(path)


def test_configuration_is_immutable():
    config = Configuration.from_dict({"toggl": {"api_token": "token"}})
    with pytest.raises(AttributeError):
        config.toggl = TogglConfiguration(api_token="placeholder")
    assert config.toggl.api_token == "token"