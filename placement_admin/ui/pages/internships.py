from __future__ import annotations

import streamlit as st

from placement_admin.data.models import Internship
from placement_admin.ui.components import entity_form
from placement_admin.ui.components.entity_form import EditorConfig
from placement_admin.ui.components.kpi import KpiCard, render_kpi_cards
from placement_admin.ui.components.tables import Column, render_record_rows
from placement_admin.ui.pages.context import PageContext
from placement_admin.ui.pages.helpers import active_count, posted_in_month, total_applicants

COLLECTION_KEY = "internships"
SEARCH_KEY = "pa_internships_search"

EDITOR = EditorConfig(
    key=COLLECTION_KEY,
    add_button="Add New Internship",
    add_title="Add New Internship",
    edit_title="Edit Internship",
    on_created=lambda item: ("Internship Added", "New internship has been posted successfully."),
    on_updated=lambda item: ("Internship Updated", "Internship details have been updated successfully."),
    on_deleted=lambda item: ("Internship Deleted", "Internship has been removed successfully."),
)

COLUMNS = [
    Column("title", "Title", width=2.5),
    Column("company_name", "Company", width=2.0),
    Column("duration", "Duration", width=1.2),
    Column("status", "Status", kind="badge", width=1.0),
    Column("applicants", "Applicants", width=1.0),
    Column("apply_link", "Apply Link", kind="link", link_text="Apply", width=1.0),
]


def render(ctx: PageContext) -> None:
    collection = ctx.collections[COLLECTION_KEY]
    schema = collection.schema
    internships = collection.records

    title_col, action_col = st.columns([4, 1])
    with title_col:
        st.subheader("Internship Management")
        st.caption("Manage available internship opportunities and track applications.")
    with action_col:
        entity_form.render_add_button(EDITOR, schema)

    entity_form.render_editor(EDITOR, collection, ctx.notifier)

    render_kpi_cards(
        [
            KpiCard("Active Internships", value=active_count(internships)),
            KpiCard("Total Applicants", value=total_applicants(internships)),
            KpiCard("Posted This Month", value=posted_in_month(internships)),
        ],
        columns=3,
    )

    st.markdown("#### All Internships")
    st.caption("Manage and track internship opportunities")
    term = st.text_input("Search internships", key=SEARCH_KEY, placeholder="Search internships...")
    visible = collection.search(term)

    def _actions(item: Internship) -> None:
        edit_col, delete_col = st.columns(2)
        with edit_col:
            entity_form.render_edit_button(EDITOR, schema, item)
        with delete_col:
            entity_form.render_delete_button(EDITOR, collection, ctx.notifier, item)

    render_record_rows(
        visible,
        COLUMNS,
        actions=_actions,
        empty_message="No internships found matching your search.",
    )
