from __future__ import annotations

import streamlit as st

from placement_admin.data.models import ExamData
from placement_admin.ui.components import entity_form
from placement_admin.ui.components.entity_form import EditorConfig
from placement_admin.ui.components.tables import Column, render_record_rows
from placement_admin.ui.pages.context import PageContext

COLLECTION_KEY = "exam_data"
SEARCH_KEY = "pa_exam_data_search"

EDITOR = EditorConfig(
    key=COLLECTION_KEY,
    add_button="Add New Entry",
    add_title="Add New Exam Data",
    edit_title="Edit Exam Data",
    on_created=lambda item: ("Data Added", "New exam data has been added successfully."),
    on_updated=lambda item: ("Data Updated", "Exam data has been updated successfully."),
    on_deleted=lambda item: ("Data Deleted", "Exam data has been deleted successfully."),
)

COLUMNS = [
    Column("exam_date", "Exam Date", kind="date", width=1.5),
    Column("timetable", "Timetable", width=2.5),
    Column("drive_link", "Drive Link", kind="link", link_text="View File", width=1.5),
    Column("general_query", "General Query", width=3.0),
]


def render(ctx: PageContext) -> None:
    collection = ctx.collections[COLLECTION_KEY]
    schema = collection.schema

    title_col, action_col = st.columns([4, 1])
    with title_col:
        st.subheader("Dynamic Data Management")
        st.caption("Manage exam schedules, timetables, and general information.")
    with action_col:
        entity_form.render_add_button(EDITOR, schema)

    entity_form.render_editor(EDITOR, collection, ctx.notifier)

    st.markdown("#### Exam Data")
    term = st.text_input("Search exam data", key=SEARCH_KEY, placeholder="Search exam data...")
    visible = collection.search(term)

    def _actions(item: ExamData) -> None:
        edit_col, delete_col = st.columns(2)
        with edit_col:
            entity_form.render_edit_button(EDITOR, schema, item)
        with delete_col:
            entity_form.render_delete_button(EDITOR, collection, ctx.notifier, item)

    render_record_rows(
        visible,
        COLUMNS,
        actions=_actions,
        empty_message="No exam data found matching your search.",
    )
