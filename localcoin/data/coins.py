"""
Market data client for the crypto view (CoinGecko /coins/markets).
"""

from __future__ import annotations

import logging
import time
from typing import Dict, List, Tuple

import requests
import streamlit as st

from localcoin.config import Settings
from localcoin.data.models import Coin
from localcoin.errors import CoinFetchError

logger = logging.getLogger(__name__)

API_KEY_HEADER = "x-cg-demo-api-key"
MARKETS_PATH = "/coins/markets"
REFRESH_SLACK_SECONDS = 1.0


def build_request(settings: Settings) -> Tuple[str, Dict[str, str], Dict[str, str]]:
    """Return (url, params, headers) for the markets request."""
    url = f"{settings.base_url}{MARKETS_PATH}"
    params = {
        "vs_currency": settings.vs_currency,
        "order": "market_cap_desc",
        "per_page": str(settings.per_page),
        "page": "1",
        "sparkline": "false",
    }
    headers = {"Content-Type": "application/json"}
    if settings.api_key:
        headers[API_KEY_HEADER] = settings.api_key
    return url, params, headers


def parse_coins(payload) -> List[Coin]:
    if not isinstance(payload, list):
        raise CoinFetchError()
    coins: List[Coin] = []
    for entry in payload:
        if not isinstance(entry, dict):
            logger.warning("Skipping non-object market entry: %r", entry)
            continue
        try:
            coins.append(Coin.from_api(entry))
        except KeyError as exc:
            logger.warning("Skipping market entry missing %s: %r", exc, entry.get("id"))
    return coins


def fetch_coins(settings: Settings) -> List[Coin]:
    """Fetch the top coins by market cap.

    Any transport failure, non-2xx status or undecodable body is reported as
    CoinFetchError; there is no retry here, the next poll tries again.
    """
    url, params, headers = build_request(settings)
    try:
        response = requests.get(
            url,
            params=params,
            headers=headers,
            timeout=settings.request_timeout_seconds,
        )
        response.raise_for_status()
        payload = response.json()
    except requests.RequestException as exc:
        logger.warning("Market data request failed: %s", exc)
        raise CoinFetchError() from exc
    except ValueError as exc:
        logger.warning("Market data response is not valid JSON: %s", exc)
        raise CoinFetchError() from exc

    coins = parse_coins(payload)
    logger.info("Fetched %d coins from %s", len(coins), url)
    return coins


def load_coins(settings: Settings) -> List[Coin]:
    """Wrapper around the cached fetch: refetches once the cached result is
    one polling interval old, less a small slack for timers that fire early.
    """
    fetched_at, coins = _load_coins_impl(settings)
    if time.time() - fetched_at >= settings.refresh_interval_seconds - REFRESH_SLACK_SECONDS:
        clear_coin_cache()
        fetched_at, coins = _load_coins_impl(settings)
    return coins


@st.cache_data(show_spinner=False, max_entries=8)
def _load_coins_impl(settings: Settings) -> Tuple[float, List[Coin]]:
    """Cached by settings; returns (fetch time, coins).
    Exceptions are not cached, so a failed fetch is retried on the next poll.
    """
    return time.time(), fetch_coins(settings)


def clear_coin_cache() -> None:
    _load_coins_impl.clear()  # type: ignore[attr-defined]
