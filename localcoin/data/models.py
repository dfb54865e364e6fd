"""
Record types for the two dashboard views.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Iterable, List, Mapping, Optional

import pandas as pd


class AtmStatus(str, Enum):
    ONLINE = "Online"
    OFFLINE = "Offline"


@dataclass(frozen=True)
class Atm:
    id: int
    location: str
    status: AtmStatus
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    @property
    def is_online(self) -> bool:
        return self.status is AtmStatus.ONLINE

    @property
    def has_coordinates(self) -> bool:
        # 0.0 is a real coordinate, only None counts as missing
        return self.latitude is not None and self.longitude is not None


@dataclass(frozen=True)
class Coin:
    id: str
    name: str
    symbol: str
    current_price: Optional[float]
    price_change_percentage_24h: Optional[float]
    image: str
    market_cap_rank: Optional[int]

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> "Coin":
        """Build a Coin from one entry of the /coins/markets response.

        Raises KeyError when an identifying field is absent; numeric fields
        the API reports as null become None.
        """
        for field_name in ("id", "name", "symbol"):
            if not payload.get(field_name):
                raise KeyError(field_name)
        return cls(
            id=str(payload["id"]),
            name=str(payload["name"]),
            symbol=str(payload["symbol"]),
            current_price=_to_float(payload.get("current_price")),
            price_change_percentage_24h=_to_float(payload.get("price_change_percentage_24h")),
            image=str(payload.get("image") or ""),
            market_cap_rank=_to_int(payload.get("market_cap_rank")),
        )


def _to_float(value: Any) -> Optional[float]:
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _to_int(value: Any) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


COIN_COLUMNS = [
    "id",
    "name",
    "symbol",
    "current_price",
    "price_change_percentage_24h",
    "image",
    "market_cap_rank",
]
ATM_COLUMNS = ["id", "location", "status", "latitude", "longitude"]


def coins_to_frame(coins: Iterable[Coin]) -> pd.DataFrame:
    rows = [asdict(coin) for coin in coins]
    df = pd.DataFrame(rows, columns=COIN_COLUMNS)
    for col in ("current_price", "price_change_percentage_24h"):
        df[col] = pd.to_numeric(df[col], errors="coerce")
    df["market_cap_rank"] = pd.to_numeric(df["market_cap_rank"], errors="coerce").astype("Int64")
    return df


def atms_to_frame(atms: Iterable[Atm]) -> pd.DataFrame:
    rows: List[dict] = []
    for atm in atms:
        row = asdict(atm)
        row["status"] = atm.status.value
        rows.append(row)
    df = pd.DataFrame(rows, columns=ATM_COLUMNS)
    for col in ("latitude", "longitude"):
        df[col] = pd.to_numeric(df[col], errors="coerce")
    return df
