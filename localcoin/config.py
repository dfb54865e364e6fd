"""
Application-wide configuration constants and helper utilities.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List, Optional

DEFAULT_BASE_URL = "https://api.coingecko.com/api/v3"
DEFAULT_VS_CURRENCY = "usd"
DEFAULT_PER_PAGE = 10
DEFAULT_REFRESH_INTERVAL_SECONDS = 30
DEFAULT_REQUEST_TIMEOUT_SECONDS = 10.0
DEFAULT_MAP_ZOOM = 13
DEFAULT_LOG_LEVEL = "INFO"

# Checked in order; the second name is the one used by the web build of the app.
API_KEY_NAMES = ("COINGECKO_API_KEY", "NEXT_PUBLIC_COINGECKO_API_KEY")


@dataclass(frozen=True)
class TabConfig:
    key: str
    label: str


# Ordered tab definitions for the dashboard
TABS: List[TabConfig] = [
    TabConfig("home", "Home"),
    TabConfig("crypto", "Crypto Dashboard"),
    TabConfig("atm", "ATM Locator"),
]


@dataclass(frozen=True)
class Settings:
    api_key: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    vs_currency: str = DEFAULT_VS_CURRENCY
    per_page: int = DEFAULT_PER_PAGE
    refresh_interval_seconds: int = DEFAULT_REFRESH_INTERVAL_SECONDS
    request_timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS
    map_zoom: int = DEFAULT_MAP_ZOOM
    log_level: str = DEFAULT_LOG_LEVEL


def _get_env(name: str) -> Optional[str]:
    val = os.getenv(name)
    if val is None:
        return None
    val = val.strip()
    return val or None


def _get_int(name: str, default: int, minimum: int = 1) -> int:
    raw = _get_env(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value >= minimum else default


def _get_float(name: str, default: float) -> float:
    raw = _get_env(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def get_settings() -> Settings:
    """Resolve settings from the environment.

    `localcoin.bootstrap_env` copies st.secrets and .env values into
    os.environ before this runs, so the environment is the single source.
    Unparseable or non-positive numbers fall back to the defaults.
    """
    api_key = next((v for v in (_get_env(n) for n in API_KEY_NAMES) if v), None)
    return Settings(
        api_key=api_key,
        base_url=(_get_env("COINGECKO_BASE_URL") or DEFAULT_BASE_URL).rstrip("/"),
        vs_currency=(_get_env("COINGECKO_VS_CURRENCY") or DEFAULT_VS_CURRENCY).lower(),
        per_page=_get_int("COINGECKO_PER_PAGE", DEFAULT_PER_PAGE),
        refresh_interval_seconds=_get_int("REFRESH_INTERVAL_SECONDS", DEFAULT_REFRESH_INTERVAL_SECONDS),
        request_timeout_seconds=_get_float("REQUEST_TIMEOUT_SECONDS", DEFAULT_REQUEST_TIMEOUT_SECONDS),
        map_zoom=_get_int("MAP_ZOOM", DEFAULT_MAP_ZOOM, minimum=0),
        log_level=(_get_env("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
    )
