"""
Plotly chart factory functions with consistent styling for the dashboard.
"""

from __future__ import annotations

from typing import Dict, List, Optional

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st


DEFAULT_TEMPLATE = "plotly_white"
DEFAULT_COLOR_SEQUENCE = [
    "#2563eb",  # primary: applications
    "#7c3aed",  # secondary: placements
    "#16a34a",
    "#dc2626",
    "#f59e0b",
    "#64748b",
]

STATUS_COLORS: Dict[str, str] = {
    "Pending": "#f59e0b",
    "Done": "#16a34a",
    "Rejected": "#dc2626",
    "Active": "#16a34a",
    "Closed": "#64748b",
    "Draft": "#f59e0b",
    "Admin": "#dc2626",
    "Manager": "#f59e0b",
    "Staff": "#16a34a",
}


def _configure_layout(
    fig: go.Figure,
    title: Optional[str] = None,
    yaxis_title: Optional[str] = None,
    legend_title: Optional[str] = None,
) -> go.Figure:
    fig.update_layout(
        template=DEFAULT_TEMPLATE,
        colorway=DEFAULT_COLOR_SEQUENCE,
        title=title,
        legend_title=legend_title,
        margin=dict(l=40, r=20, t=60, b=40),
    )
    if yaxis_title:
        fig.update_yaxes(title=yaxis_title)
    return fig


def render_plotly(fig: go.Figure) -> None:
    st.plotly_chart(fig, width="stretch", config={"displayModeBar": False})


def bar_chart(
    df: pd.DataFrame,
    x: str,
    y: str,
    color: Optional[str] = None,
    barmode: str = "group",
    title: Optional[str] = None,
    yaxis_title: Optional[str] = None,
    category_orders: Optional[Dict[str, List[str]]] = None,
    text_auto: bool = False,
) -> go.Figure:
    fig = px.bar(
        df,
        x=x,
        y=y,
        color=color,
        barmode=barmode,
        category_orders=category_orders,
        text_auto=text_auto,
    )
    fig = _configure_layout(fig, title, yaxis_title)
    fig.update_xaxes(showgrid=False)
    fig.update_yaxes(showgrid=True, griddash="dash", zeroline=True)
    if text_auto:
        fig.update_traces(textposition="outside", cliponaxis=False)
    return fig


def pie_chart(
    df: pd.DataFrame,
    names: str,
    values: str,
    title: Optional[str] = None,
    color_map: Optional[Dict[str, str]] = None,
) -> go.Figure:
    fig = px.pie(
        df,
        names=names,
        values=values,
        color=names,
        color_discrete_map=color_map or STATUS_COLORS,
    )
    fig.update_traces(textinfo="label+value", sort=False)
    fig = _configure_layout(fig, title)
    return fig
