"""
Plotly map factory and renderer for the ATM locator.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import plotly.express as px
import plotly.graph_objects as go
import streamlit as st

from localcoin.data.models import Atm, AtmStatus

MAP_HEIGHT = 400
MAP_STYLE = "open-street-map"
PLACEHOLDER_TEXT = "Select an ATM to view on map"
STATUS_COLORS = {
    AtmStatus.ONLINE.value: "#22c55e",
    AtmStatus.OFFLINE.value: "#6b7280",
}


@dataclass(frozen=True)
class MapView:
    key: str
    center: Tuple[float, float]
    zoom: int
    label: str
    status: str


def build_map_view(atm: Optional[Atm], zoom: int) -> Optional[MapView]:
    """Where the map should look for the selected ATM, or None for the placeholder.

    The key is derived from the ATM id so a different selection mounts a new
    chart instead of panning the previous one.
    """
    if atm is None or not atm.has_coordinates:
        return None
    return MapView(
        key=f"atm_map_{atm.id}",
        center=(float(atm.latitude), float(atm.longitude)),
        zoom=zoom,
        label=atm.location,
        status=atm.status.value,
    )


def map_figure(view: MapView) -> go.Figure:
    lat, lon = view.center
    fig = px.scatter_map(
        lat=[lat],
        lon=[lon],
        hover_name=[view.label],
        color=[view.status],
        color_discrete_map=STATUS_COLORS,
        zoom=view.zoom,
        center={"lat": lat, "lon": lon},
        map_style=MAP_STYLE,
    )
    fig.update_traces(
        marker=dict(size=16),
        hovertemplate=f"<b>{view.label}</b><br>Status: {view.status}<extra></extra>",
    )
    fig.update_layout(
        height=MAP_HEIGHT,
        margin=dict(l=0, r=0, t=0, b=0),
        showlegend=False,
        uirevision=view.key,
    )
    return fig


def render_atm_map(atm: Optional[Atm], zoom: int) -> Optional[MapView]:
    view = build_map_view(atm, zoom)
    if view is None:
        with st.container(border=True, height=MAP_HEIGHT):
            st.caption(PLACEHOLDER_TEXT)
        return None
    st.plotly_chart(
        map_figure(view),
        use_container_width=True,
        config={"displayModeBar": False, "scrollZoom": True},
        key=view.key,
    )
    return view
