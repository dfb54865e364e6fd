from __future__ import annotations

from typing import Any, MutableMapping, Optional

import pandas as pd
import streamlit as st

from localcoin.data.atms import SAMPLE_ATMS, get_atm
from localcoin.data.filters import filter_atms
from localcoin.data.models import Atm, AtmStatus, atms_to_frame
from localcoin.ui.components.kpi import KpiCard, render_kpi_cards
from localcoin.ui.components.maps import PLACEHOLDER_TEXT, render_atm_map
from localcoin.ui.components.tables import render_table
from localcoin.ui.components.formatting import pluralize
from localcoin.ui.pages.context import PageContext

SELECTED_KEY = "atm_selected_id"
TABLE_KEY = "atm_table"
LAST_PICK_KEY = "atm_last_pick"
TABLE_GENERATION_KEY = "atm_table_generation"
NO_RESULTS_MESSAGE = "No ATMs found."


def status_badge(status: str) -> str:
    if status == AtmStatus.ONLINE.value:
        return f":green-background[🟢 {status}]"
    return f":gray-background[⚪ {status}]"


def selected_atm(state: MutableMapping[str, Any]) -> Optional[Atm]:
    # Resolved against the full list so the online filter does not drop it
    return get_atm(state.get(SELECTED_KEY))


def table_key(state: MutableMapping[str, Any], online_only: bool) -> str:
    # Filter and generation are part of the key: a new key starts with no row ticked
    scope = "online" if online_only else "all"
    return f"{TABLE_KEY}_{scope}_{state.get(TABLE_GENERATION_KEY, 0)}"


def apply_pick(
    state: MutableMapping[str, Any],
    key: str,
    picked: Optional[int],
    filtered: pd.DataFrame,
) -> bool:
    """Record the table's row selection; True when it selected a new ATM.

    Table selections persist across reruns, so only a pick that differs from
    the last one seen for this table changes the selected ATM.
    """
    pick = (key, picked)
    if pick == state.get(LAST_PICK_KEY):
        return False
    state[LAST_PICK_KEY] = pick
    if picked is None or not 0 <= picked < len(filtered):
        return False
    state[SELECTED_KEY] = int(filtered.iloc[picked]["id"])
    return True


def clear_selection(state: MutableMapping[str, Any]) -> None:
    state.pop(SELECTED_KEY, None)
    state.pop(LAST_PICK_KEY, None)
    state[TABLE_GENERATION_KEY] = state.get(TABLE_GENERATION_KEY, 0) + 1


def _row_position(filtered: pd.DataFrame, atm: Optional[Atm]) -> Optional[int]:
    if atm is None:
        return None
    matches = (filtered["id"] == atm.id).to_numpy().nonzero()[0]
    return int(matches[0]) if len(matches) else None


def _prepare_display(df: pd.DataFrame) -> pd.DataFrame:
    return pd.DataFrame(
        {
            "Location": df["location"],
            "Status": df["status"].map(lambda s: f"🟢 {s}" if s == AtmStatus.ONLINE.value else f"⚪ {s}"),
        }
    )


def _status_cards(all_atms: pd.DataFrame) -> list[KpiCard]:
    online = int((all_atms["status"] == AtmStatus.ONLINE.value).sum())
    return [
        KpiCard("Total ATMs", value=len(all_atms)),
        KpiCard("Online", value=online),
        KpiCard("Offline", value=len(all_atms) - online),
    ]


def render(context: PageContext) -> None:
    st.header("ATM Locator")
    st.write("Find Localcoin ATMs near you")

    all_atms = atms_to_frame(SAMPLE_ATMS)
    render_kpi_cards(_status_cards(all_atms), columns=3)

    with st.container(border=True):
        col_title, col_toggle = st.columns([3, 1])
        with col_toggle:
            online_only = st.toggle("Show Online Only", value=False, key="atm_online_only")
        filtered = filter_atms(all_atms, online_only).reset_index(drop=True)
        with col_title:
            st.markdown("**Filter ATMs**")
            st.caption(f"{pluralize(len(filtered), 'ATM')} found")

    list_col, map_col = st.columns(2)

    with list_col:
        st.subheader("Available ATMs")
        st.caption("Click on an ATM to view it on the map")
        current = selected_atm(st.session_state)
        key = table_key(st.session_state, online_only)
        picked = render_table(
            _prepare_display(filtered),
            empty_message=NO_RESULTS_MESSAGE,
            highlight_row=_row_position(filtered, current),
            key=key,
            selectable=True,
        )
        if apply_pick(st.session_state, key, picked, filtered):
            st.rerun()
        if current is not None and st.button("Clear selection", key="atm_clear"):
            clear_selection(st.session_state)
            st.rerun()

    with map_col:
        st.subheader("Map Preview")
        st.caption(f"Viewing {current.location} ATM" if current else PLACEHOLDER_TEXT)
        render_atm_map(current, context.settings.map_zoom)
        if current is not None:
            with st.container(border=True):
                st.markdown(f"**{current.location}**")
                st.markdown(f"Status: {status_badge(current.status.value)}")
