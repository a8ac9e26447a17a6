from __future__ import annotations

import streamlit as st

from placement_admin.data.models import ACCESS_LEVELS, SECTIONS, StaffMember
from placement_admin.ui.components import entity_form
from placement_admin.ui.components.entity_form import EditorConfig
from placement_admin.ui.components.kpi import KpiCard, render_kpi_cards
from placement_admin.ui.components.tables import Column, render_record_rows
from placement_admin.ui.pages.context import PageContext
from placement_admin.ui.pages.helpers import section_stats

COLLECTION_KEY = "staff"

EDITOR = EditorConfig(
    key=COLLECTION_KEY,
    add_button="Add New Staff",
    add_title="Add New Staff Member",
    submit_label="Add Staff",
    on_created=lambda member: ("Staff Added", f"{member.name} has been added to {member.section} section."),
    on_deleted=lambda member: ("Staff Removed", f"{member.name} has been removed from the system."),
)

COLUMNS = [
    Column("name", "Name", width=2.0),
    Column("role", "Role", width=2.0),
    Column("email", "Email", width=2.4),
    Column("access_level", "Access Level", kind="badge", width=1.2),
    Column("join_date", "Join Date", kind="date", width=1.3),
]


def _stats_card(section: str, stats: dict) -> KpiCard:
    breakdown = " • ".join(f"{stats[level]} {level}" for level in ACCESS_LEVELS)
    return KpiCard(f"{section} Section", value=stats["total"], help_text=breakdown)


def render(ctx: PageContext) -> None:
    collection = ctx.collections[COLLECTION_KEY]
    schema = collection.schema
    staff = collection.records

    title_col, action_col = st.columns([4, 1])
    with title_col:
        st.subheader("Staff Management")
        st.caption("Manage staff members across different sections and their access levels.")
    with action_col:
        entity_form.render_add_button(EDITOR, schema)

    entity_form.render_editor(EDITOR, collection, ctx.notifier)

    render_kpi_cards(
        [_stats_card(section, section_stats(staff, section)) for section in SECTIONS],
        columns=len(SECTIONS),
    )

    def _actions(member: StaffMember) -> None:
        entity_form.render_delete_button(EDITOR, collection, ctx.notifier, member)

    tabs = st.tabs([f"{section} ({len(collection.where('section', section))})" for section in SECTIONS])
    for tab, section in zip(tabs, SECTIONS):
        with tab:
            render_record_rows(
                collection.where("section", section),
                COLUMNS,
                actions=_actions,
                actions_width=1.0,
                empty_message=f"No staff members found in {section} section.",
            )
