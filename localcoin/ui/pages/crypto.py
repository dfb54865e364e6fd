from __future__ import annotations

import logging
from datetime import datetime

import pandas as pd
import streamlit as st

from localcoin.data.coins import load_coins
from localcoin.data.filters import (
    SORT_OPTIONS,
    CoinQuery,
    filter_and_sort_coins,
    sort_option_to_query,
)
from localcoin.data.models import coins_to_frame
from localcoin.errors import CoinFetchError
from localcoin.ui.components.formatting import (
    format_change,
    format_price,
    format_rank,
)
from localcoin.ui.components.kpi import KpiCard, render_kpi_cards
from localcoin.ui.components.tables import render_table
from localcoin.ui.pages.context import PageContext

logger = logging.getLogger(__name__)

NO_RESULTS_MESSAGE = "No coins found matching your search."


def _prepare_display(df: pd.DataFrame) -> pd.DataFrame:
    return pd.DataFrame(
        {
            "Rank": df["market_cap_rank"].map(format_rank),
            "Icon": df["image"],
            "Coin": df["name"],
            "Symbol": df["symbol"].astype(str).str.upper(),
            "Price (USD)": df["current_price"].map(format_price),
            "24h Change": df["price_change_percentage_24h"].map(format_change),
        }
    )


def _market_cards(all_coins: pd.DataFrame, shown: int) -> list[KpiCard]:
    cards = [KpiCard("Coins Shown", value_display=f"{shown} of {len(all_coins)}")]
    changes = all_coins.dropna(subset=["price_change_percentage_24h"])
    if not changes.empty:
        top = changes.loc[changes["price_change_percentage_24h"].idxmax()]
        bottom = changes.loc[changes["price_change_percentage_24h"].idxmin()]
        cards.append(
            KpiCard(
                "Top Gainer (24h)",
                value_display=str(top["name"]),
                delta=float(top["price_change_percentage_24h"]),
            )
        )
        cards.append(
            KpiCard(
                "Top Loser (24h)",
                value_display=str(bottom["name"]),
                delta=float(bottom["price_change_percentage_24h"]),
            )
        )
    return cards


def render_market_table(context: PageContext, query: CoinQuery) -> None:
    try:
        with st.spinner("Loading crypto data..."):
            coins = load_coins(context.settings)
    except CoinFetchError as exc:
        logger.error("Crypto view could not load market data: %s", exc)
        st.error(f"Error: {exc}")
        return

    all_coins = coins_to_frame(coins)
    ordered = filter_and_sort_coins(all_coins, query)

    render_kpi_cards(_market_cards(all_coins, len(ordered)), columns=3)

    st.subheader("Top Cryptocurrencies")
    st.caption(
        f"Showing {len(ordered)} of {len(all_coins)} coins · "
        f"updated {datetime.now().strftime('%H:%M:%S')}"
    )
    render_table(
        _prepare_display(ordered),
        column_config={
            "Icon": st.column_config.ImageColumn("", width="small"),
            "Price (USD)": st.column_config.TextColumn("Price (USD)"),
            "24h Change": st.column_config.TextColumn("24h Change"),
        },
        empty_message=NO_RESULTS_MESSAGE,
        highlight_cols=["24h Change"],
    )


def render(context: PageContext) -> None:
    st.header("Crypto Dashboard")
    st.write("Live cryptocurrency prices and market data")

    with st.container(border=True):
        st.markdown("**Search & Filter**")
        st.caption("Search coins by name or symbol, and sort by different criteria")
        col_search, col_sort = st.columns([3, 1])
        with col_search:
            search = st.text_input(
                "Search",
                placeholder="Search by name or symbol...",
                key="crypto_search",
                label_visibility="collapsed",
            )
        with col_sort:
            sort_label = st.selectbox(
                "Sort by",
                options=[label for label, _, _ in SORT_OPTIONS],
                index=0,
                key="crypto_sort",
                label_visibility="collapsed",
            )

    query = sort_option_to_query(sort_label, search=search)
    st.session_state["crypto_active_query"] = query

    poll = st.fragment(run_every=context.settings.refresh_interval_seconds)(render_market_table)
    poll(context, query)
