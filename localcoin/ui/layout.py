"""
Layout helpers for the Streamlit application (page config and sidebar).
"""

from __future__ import annotations

import streamlit as st

from localcoin.config import Settings
from localcoin.data.coins import clear_coin_cache


def setup_page() -> None:
    """Set Streamlit page configuration."""
    st.set_page_config(
        page_title="Localcoin",
        layout="wide",
        page_icon=":coin:",
    )


def sidebar_ui(settings: Settings) -> None:
    st.sidebar.header("Localcoin")
    if st.sidebar.button("🔄 Refresh Data"):
        clear_coin_cache()
        st.toast("Market data will be refetched", icon="🔄")

    st.sidebar.caption(f"Prices refresh every {settings.refresh_interval_seconds}s.")
    if settings.api_key:
        st.sidebar.caption("CoinGecko API key: configured")
    else:
        st.sidebar.caption("CoinGecko API key: not set (public rate limits apply)")
