"""
Exception types raised by the data layer.
"""


class LocalcoinError(Exception):
    """Base class for errors surfaced to the dashboard views."""


class CoinFetchError(LocalcoinError):
    """Market data could not be fetched or decoded."""

    def __init__(self, message: str = "Failed to fetch crypto data") -> None:
        super().__init__(message)
