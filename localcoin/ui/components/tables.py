"""
Reusable helpers for rendering data tables with consistent configuration.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import pandas as pd
import streamlit as st

POSITIVE_COLOR = "color: #2ca02c;"
NEGATIVE_COLOR = "color: #d62728;"
SELECTED_ROW_STYLE = "background-color: rgba(151, 166, 195, 0.25);"


def change_color(val) -> str:
    """Green for non-negative values, red for negative; accepts '+1.2%' strings."""
    try:
        if isinstance(val, str):
            val = val.replace("%", "").replace(",", "").replace("+", "")
        num = float(val)
    except (TypeError, ValueError):
        return ""
    if num != num:
        return ""
    return POSITIVE_COLOR if num >= 0 else NEGATIVE_COLOR


def render_table(
    df: pd.DataFrame,
    column_config: Optional[Dict[str, Any]] = None,
    height: Optional[int] = None,
    empty_message: str = "No data to display.",
    highlight_cols: Optional[List[str]] = None,
    highlight_row: Optional[int] = None,
    key: Optional[str] = None,
    selectable: bool = False,
) -> Optional[int]:
    """
    Render `df` with st.dataframe.

    `highlight_cols` get positive/negative colouring, `highlight_row` is a
    positional row index drawn as selected. When `selectable` is set the
    table allows single-row selection and the positional index of the row
    picked in this run is returned.
    """
    if df.empty:
        st.info(empty_message)
        return None

    dataframe_obj: Any = df
    highlight_cols = [col for col in (highlight_cols or []) if col in df.columns]
    if highlight_cols or highlight_row is not None:
        styler = df.style
        if highlight_cols:
            styler = styler.map(change_color, subset=highlight_cols)
        if highlight_row is not None and 0 <= highlight_row < len(df):
            def _row_style(row: pd.Series) -> List[str]:
                selected = df.index.get_loc(row.name) == highlight_row
                return [SELECTED_ROW_STYLE if selected else ""] * len(row)

            styler = styler.apply(_row_style, axis=1)
        dataframe_obj = styler

    kwargs: Dict[str, Any] = dict(
        use_container_width=True,
        hide_index=True,
        column_config={k: v for k, v in (column_config or {}).items() if k in df.columns},
    )
    if height is not None:
        kwargs["height"] = height
    if key is not None:
        kwargs["key"] = key

    if not selectable:
        st.dataframe(dataframe_obj, **kwargs)
        return None

    event = st.dataframe(
        dataframe_obj,
        on_select="rerun",
        selection_mode="single-row",
        **kwargs,
    )
    rows = event.selection.rows if event is not None else []
    return int(rows[0]) if rows else None
