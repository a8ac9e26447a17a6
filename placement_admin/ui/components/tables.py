"""
Reusable helpers for rendering record lists with consistent configuration.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence

import pandas as pd
import streamlit as st

from placement_admin.ui.components.formatting import format_date


@dataclass(frozen=True)
class Column:
    field: str
    label: str
    kind: str = "text"  # text | date | link | badge
    link_text: str = "Open"
    width: float = 2.0


def render_table(
    df: pd.DataFrame,
    columns: Sequence[Column],
    height: Optional[int] = None,
    empty_message: str = "Nothing to display.",
) -> None:
    if df.empty:
        st.info(empty_message)
        return

    column_config: Dict[str, Any] = {}
    for col in columns:
        if col.kind == "link":
            column_config[col.label] = st.column_config.LinkColumn(col.label, display_text=col.link_text)
        elif col.kind == "date":
            column_config[col.label] = st.column_config.DateColumn(col.label, format="DD MMM YYYY")

    display = df.copy()
    for col in columns:
        if col.kind == "date" and col.label in display:
            display[col.label] = pd.to_datetime(display[col.label], errors="coerce")

    kwargs: Dict[str, Any] = {"width": "stretch", "hide_index": True, "column_config": column_config}
    if height is not None:
        kwargs["height"] = height
    st.dataframe(display, **kwargs)


def _render_cell(record: Any, column: Column) -> None:
    value = getattr(record, column.field)
    if column.kind == "date":
        st.write(format_date(value))
    elif column.kind == "link":
        if value:
            st.link_button(column.link_text, value)
        else:
            st.write("–")
    elif column.kind == "badge":
        st.markdown(f"`{value}`")
    else:
        st.write(value)


def render_record_rows(
    records: Sequence[Any],
    columns: Sequence[Column],
    actions: Optional[Callable[[Any], None]] = None,
    actions_width: float = 1.5,
    actions_label: str = "Actions",
    empty_message: str = "Nothing to display.",
) -> None:
    """
    Render one row of Streamlit columns per record.

    ``actions`` is called inside the trailing column of each row so pages can
    place their own buttons or selects there.
    """
    if not records:
        st.info(empty_message)
        return

    widths: List[float] = [c.width for c in columns]
    if actions is not None:
        widths.append(actions_width)

    header = st.columns(widths)
    for cell, column in zip(header, columns):
        cell.markdown(f"**{column.label}**")
    if actions is not None:
        header[-1].markdown(f"**{actions_label}**")

    for record in records:
        cells = st.columns(widths)
        for cell, column in zip(cells, columns):
            with cell:
                _render_cell(record, column)
        if actions is not None:
            with cells[-1]:
                actions(record)
