"""
Filter utilities that apply view filters to the coin and ATM datasets.
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Tuple

import pandas as pd

from localcoin.data.models import AtmStatus


class SortField(str, Enum):
    NAME = "name"
    PRICE = "price"
    CHANGE = "change"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


SORT_COLUMNS: Dict[SortField, str] = {
    SortField.NAME: "name",
    SortField.PRICE: "current_price",
    SortField.CHANGE: "price_change_percentage_24h",
}

# Ordered choices for the sort selector
SORT_OPTIONS: List[Tuple[str, SortField, SortDirection]] = [
    ("Name (A-Z)", SortField.NAME, SortDirection.ASC),
    ("Name (Z-A)", SortField.NAME, SortDirection.DESC),
    ("Price (Low to High)", SortField.PRICE, SortDirection.ASC),
    ("Price (High to Low)", SortField.PRICE, SortDirection.DESC),
    ("Change (Low to High)", SortField.CHANGE, SortDirection.ASC),
    ("Change (High to Low)", SortField.CHANGE, SortDirection.DESC),
]


@dataclass(frozen=True)
class CoinQuery:
    search: str = ""
    sort_field: SortField = SortField.NAME
    sort_direction: SortDirection = SortDirection.ASC


DEFAULT_COIN_QUERY = CoinQuery()


def sort_option_to_query(label: str, search: str = "") -> CoinQuery:
    for option_label, field, direction in SORT_OPTIONS:
        if option_label == label:
            return CoinQuery(search=search, sort_field=field, sort_direction=direction)
    raise ValueError(f"Unknown sort option: {label}")


def collation_key(name: str) -> str:
    """Case- and accent-insensitive sort key: "Éthereum" sorts with "ethereum".

    Names differing only by accents or case fall back to the casefolded
    original, joined by NUL so a shorter base name still sorts first.
    """
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()
    return f"{base}\x00{name.casefold()}"


def _name_sort_key(series: pd.Series) -> pd.Series:
    return series.astype(str).map(collation_key)


def filter_and_sort_coins(df: pd.DataFrame, query: CoinQuery) -> pd.DataFrame:
    """
    Return the coins whose name or symbol contains the search text
    (case-insensitive), ordered by the requested field and direction.

    Ties keep their input order; missing prices/changes go last.
    """
    if df.empty:
        return df.copy()

    filtered = df
    search = query.search.strip().casefold()
    if search:
        mask = pd.Series(False, index=df.index)
        for col in ("name", "symbol"):
            if col in df:
                mask |= df[col].astype(str).str.casefold().str.contains(search, regex=False, na=False)
        filtered = df[mask]

    column = SORT_COLUMNS[SortField(query.sort_field)]
    ascending = SortDirection(query.sort_direction) is SortDirection.ASC
    key = _name_sort_key if column == "name" else None
    ordered = filtered.sort_values(
        by=column,
        ascending=ascending,
        kind="mergesort",
        na_position="last",
        key=key,
    )
    ordered = ordered.copy()
    ordered.attrs["applied_query"] = serialize_query(query)
    return ordered


def filter_atms(df: pd.DataFrame, online_only: bool) -> pd.DataFrame:
    """Return all ATMs, or only those whose status is Online. Order is kept."""
    if not online_only or df.empty:
        return df.copy()
    return df[df["status"] == AtmStatus.ONLINE.value].copy()


def serialize_query(query: CoinQuery) -> Dict[str, Any]:
    """
    Convert the CoinQuery dataclass to a JSON-serialisable dictionary to be
    stored in session_state or used for logging/debugging.
    """
    return {
        "search": query.search,
        "sort_field": SortField(query.sort_field).value,
        "sort_direction": SortDirection(query.sort_direction).value,
    }
