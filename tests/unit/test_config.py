"""Unit tests for configuration management."""

import dataclasses
import os
from unittest.mock import patch

import pytest

from localcoin.config import TABS, get_settings


def test_get_settings_defaults():
    with patch.dict(os.environ, {}, clear=True):
        settings = get_settings()
    assert settings.api_key is None
    assert settings.base_url == "https://api.coingecko.com/api/v3"
    assert settings.vs_currency == "usd"
    assert settings.per_page == 10
    assert settings.refresh_interval_seconds == 30
    assert settings.request_timeout_seconds == 10.0
    assert settings.map_zoom == 13
    assert settings.log_level == "INFO"


def test_api_key_from_env():
    with patch.dict(os.environ, {"COINGECKO_API_KEY": "abc"}, clear=True):
        assert get_settings().api_key == "abc"


def test_api_key_falls_back_to_web_build_name():
    with patch.dict(os.environ, {"NEXT_PUBLIC_COINGECKO_API_KEY": "web"}, clear=True):
        assert get_settings().api_key == "web"


def test_blank_api_key_is_unset():
    with patch.dict(os.environ, {"COINGECKO_API_KEY": "  "}, clear=True):
        assert get_settings().api_key is None


def test_numeric_overrides():
    env = {"REFRESH_INTERVAL_SECONDS": "60", "MAP_ZOOM": "10", "REQUEST_TIMEOUT_SECONDS": "2.5"}
    with patch.dict(os.environ, env, clear=True):
        settings = get_settings()
    assert settings.refresh_interval_seconds == 60
    assert settings.map_zoom == 10
    assert settings.request_timeout_seconds == 2.5


@pytest.mark.parametrize("raw", ["abc", "0", "-5"])
def test_invalid_interval_falls_back_to_default(raw):
    with patch.dict(os.environ, {"REFRESH_INTERVAL_SECONDS": raw}, clear=True):
        assert get_settings().refresh_interval_seconds == 30


def test_base_url_trailing_slash_stripped():
    with patch.dict(os.environ, {"COINGECKO_BASE_URL": "https://pro-api.coingecko.com/api/v3/"}, clear=True):
        assert get_settings().base_url == "https://pro-api.coingecko.com/api/v3"


def test_settings_are_immutable():
    with patch.dict(os.environ, {}, clear=True):
        settings = get_settings()
    with pytest.raises(dataclasses.FrozenInstanceError):
        settings.per_page = 50  # type: ignore[misc]


def test_tabs_order():
    assert [tab.key for tab in TABS] == ["home", "crypto", "atm"]
