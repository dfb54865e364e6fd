"""Shared test fixtures for the Localcoin dashboard."""

import pytest

from localcoin.data.atms import SAMPLE_ATMS
from localcoin.data.models import Coin, atms_to_frame, coins_to_frame


@pytest.fixture
def market_payload():
    """A trimmed /coins/markets response."""
    return [
        {
            "id": "bitcoin",
            "name": "Bitcoin",
            "symbol": "btc",
            "current_price": 67123.45,
            "price_change_percentage_24h": 1.52,
            "image": "https://assets.coingecko.com/coins/images/1/large/bitcoin.png",
            "market_cap_rank": 1,
        },
        {
            "id": "ethereum",
            "name": "ethereum",
            "symbol": "eth",
            "current_price": 3456.78,
            "price_change_percentage_24h": -2.1,
            "image": "https://assets.coingecko.com/coins/images/279/large/ethereum.png",
            "market_cap_rank": 2,
        },
        {
            "id": "tether",
            "name": "Tether",
            "symbol": "usdt",
            "current_price": 1.0,
            "price_change_percentage_24h": 0.01,
            "image": "https://assets.coingecko.com/coins/images/325/large/Tether.png",
            "market_cap_rank": 3,
        },
        {
            "id": "cardano",
            "name": "cardano",
            "symbol": "ada",
            "current_price": 0.45,
            "price_change_percentage_24h": 4.8,
            "image": "https://assets.coingecko.com/coins/images/975/large/cardano.png",
            "market_cap_rank": 9,
        },
        {
            "id": "avalanche-2",
            "name": "Avalanche",
            "symbol": "avax",
            "current_price": 35.2,
            "price_change_percentage_24h": None,
            "image": "https://assets.coingecko.com/coins/images/12559/large/avax.png",
            "market_cap_rank": 10,
        },
    ]


@pytest.fixture
def coins(market_payload):
    return [Coin.from_api(entry) for entry in market_payload]


@pytest.fixture
def coins_df(coins):
    return coins_to_frame(coins)


@pytest.fixture
def atms_df():
    return atms_to_frame(SAMPLE_ATMS)
