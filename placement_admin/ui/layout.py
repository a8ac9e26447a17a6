"""
Layout helpers for the Streamlit application (page config, sidebar navigation).
"""

from __future__ import annotations

import logging

import streamlit as st

from placement_admin.config import LOGIN_PATH, NAV_ITEMS, NavItem, Settings
from placement_admin.ui import state
from placement_admin.ui.pages.context import PageContext

logger = logging.getLogger(__name__)


def setup_page(settings: Settings) -> None:
    """Set Streamlit page configuration and top-level styling."""
    st.set_page_config(
        page_title=settings.page_title,
        layout="wide",
        page_icon=":mortar_board:",
    )
    _inject_sidebar_nav_style()


def logout(ctx: PageContext) -> None:
    state.set_authenticated(False)
    logger.info("Admin logged out")
    ctx.notifier.push("Logged Out", "You have been successfully logged out.")
    ctx.navigate(LOGIN_PATH)


def render_sidebar(ctx: PageContext, active: NavItem) -> None:
    with st.sidebar:
        st.markdown("### Admin Panel")
        st.caption("Placement System")
        st.divider()
        for item in NAV_ITEMS:
            st.button(
                item.label,
                key=f"pa_nav_{item.key}",
                type="primary" if item.key == active.key else "secondary",
                width="stretch",
                on_click=ctx.navigate,
                args=(item.path,),
            )
        st.divider()
        st.button(
            "Logout",
            key="pa_logout",
            width="stretch",
            on_click=logout,
            args=(ctx,),
        )


def _inject_sidebar_nav_style() -> None:
    """Highlight the active navigation entry (rendered as a PRIMARY button) in the sidebar.

    Scoped to the sidebar container to avoid impacting primary buttons in the main content.
    """
    st.markdown(
        """
        <style>
        div[data-testid="stSidebar"] button[kind="primary"],
        div[data-testid="stSidebar"] button[data-testid="baseButton-primary"] {
            background-color: #2563eb !important;
            border-color: #2563eb !important;
            color: #ffffff !important;
        }
        div[data-testid="stSidebar"] button[kind="secondary"],
        div[data-testid="stSidebar"] button[data-testid="baseButton-secondary"] {
            justify-content: flex-start;
        }
        </style>
        """,
        unsafe_allow_html=True,
    )
