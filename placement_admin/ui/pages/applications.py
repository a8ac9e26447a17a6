from __future__ import annotations

import streamlit as st

from placement_admin.data.models import APPLICATION_STATUSES, Application
from placement_admin.data.store import EntityCollection
from placement_admin.notifications import NotificationCenter
from placement_admin.ui.components.kpi import KpiCard, render_kpi_cards
from placement_admin.ui.components.tables import Column, render_record_rows
from placement_admin.ui.pages.context import PageContext

COLLECTION_KEY = "applications"
SEARCH_KEY = "pa_applications_search"

COLUMNS = [
    Column("student_name", "Student Name", width=1.8),
    Column("email", "Email", width=2.2),
    Column("application_reason", "Application Reason", width=2.5),
    Column("submitted_date", "Submitted Date", kind="date", width=1.4),
]


def status_key(application_id: str) -> str:
    return f"pa_applications_status_{application_id}"


def change_status(collection: EntityCollection, notifier: NotificationCenter, application_id: str) -> None:
    new_status = st.session_state[status_key(application_id)]
    application = collection.set_field(application_id, "status", new_status)
    notifier.push(
        "Status Updated",
        f"{application.student_name}'s application status changed to {new_status}",
    )


def render(ctx: PageContext) -> None:
    collection = ctx.collections[COLLECTION_KEY]

    st.subheader("Applications Management")
    st.caption("Review and manage student applications for internships and placements.")

    counts = collection.count_by("status")
    render_kpi_cards(
        [KpiCard(f"{status} Applications", value=count) for status, count in counts.items()],
        columns=max(len(counts), 1),
    )

    st.markdown("#### Student Applications")
    st.caption("Manage and track application statuses")
    term = st.text_input("Search applications", key=SEARCH_KEY, placeholder="Search applications...")
    visible = collection.search(term)

    def _status_select(application: Application) -> None:
        key = status_key(application.id)
        if st.session_state.get(key) != application.status:
            st.session_state[key] = application.status
        st.selectbox(
            "Status",
            options=list(APPLICATION_STATUSES),
            key=key,
            label_visibility="collapsed",
            on_change=change_status,
            args=(collection, ctx.notifier, application.id),
        )

    render_record_rows(
        visible,
        COLUMNS,
        actions=_status_select,
        actions_width=1.4,
        actions_label="Status",
        empty_message="No applications found matching your search.",
    )
