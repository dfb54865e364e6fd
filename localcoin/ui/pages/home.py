from __future__ import annotations

from typing import Sequence

import streamlit as st

from localcoin.ui.pages.context import PageContext

CRYPTO_FEATURES = [
    "Top 10 cryptocurrencies",
    "Real-time price updates",
    "Search and filter",
    "Sort by price and change",
]
ATM_FEATURES = [
    "Multiple locations",
    "Online/Offline status",
    "Interactive map view",
    "Filter by status",
]


def _feature_card(title: str, description: str, features: Sequence[str], hint: str) -> None:
    with st.container(border=True):
        st.subheader(title)
        st.write(description)
        st.markdown("\n".join(f"- {feature}" for feature in features))
        st.caption(hint)


def render(context: PageContext) -> None:
    st.header("Welcome to Localcoin")
    st.write("Explore our cryptocurrency dashboard and ATM locator")

    left, right = st.columns(2)
    with left:
        _feature_card(
            "📈 Crypto Dashboard",
            "View live cryptocurrency prices, search and filter coins, and track market changes",
            CRYPTO_FEATURES,
            "Open the **Crypto Dashboard** tab to view prices.",
        )
    with right:
        _feature_card(
            "📍 ATM Locator",
            "Find Localcoin ATMs near you with real-time status and map integration",
            ATM_FEATURES,
            "Open the **ATM Locator** tab to find ATMs.",
        )
