from __future__ import annotations

from typing import List

import pandas as pd
import streamlit as st

from placement_admin.data import seed
from placement_admin.ui.components.charts import bar_chart, pie_chart, render_plotly
from placement_admin.ui.components.kpi import KpiCard, render_kpi_cards
from placement_admin.ui.components.tables import Column, render_table
from placement_admin.ui.pages.context import PageContext

ACTIVITY_COLUMNS = [
    Column("action", "Activity"),
    Column("subject", "Subject"),
    Column("time", "When"),
]


def _stat_cards() -> List[KpiCard]:
    return [
        KpiCard(
            label=stat["title"],
            value_display=stat["value"],
            delta_display=stat["trend"],
            delta_color="off" if stat["trend"] == "stable" else "normal",
            help_text=stat["description"],
        )
        for stat in seed.OVERVIEW_STATS
    ]


def render(ctx: PageContext) -> None:
    st.subheader("Dashboard Overview")
    st.caption("Welcome back! Here's what's happening with your placement management system.")

    render_kpi_cards(_stat_cards(), columns=4)
    st.divider()

    left, right = st.columns(2)
    with left:
        status_df = seed.status_distribution()
        render_plotly(
            pie_chart(
                status_df,
                names="Status",
                values="Applications",
                title="Application Status Distribution",
            )
        )
        st.caption("Current status of all applications")
    with right:
        trends_df = seed.monthly_trends()
        render_plotly(
            bar_chart(
                trends_df,
                x="month",
                y="Count",
                color="Series",
                title="Monthly Trends",
                yaxis_title="Count",
            )
        )
        st.caption("Applications vs Successful Placements")

    st.divider()
    st.markdown("#### Recent Activity")
    st.caption("Latest updates from the system")
    activity = pd.DataFrame(seed.RECENT_ACTIVITY)
    activity = activity[[c.field for c in ACTIVITY_COLUMNS]].rename(
        columns={c.field: c.label for c in ACTIVITY_COLUMNS}
    )
    render_table(activity, ACTIVITY_COLUMNS, empty_message="No recent activity.")
