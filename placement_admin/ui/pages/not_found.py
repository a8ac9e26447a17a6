from __future__ import annotations

import streamlit as st

from placement_admin.config import LOGIN_PATH
from placement_admin.ui import state
from placement_admin.ui.pages.context import PageContext


def render(ctx: PageContext) -> None:
    st.title("404")
    st.write(f"Oops! Page `{state.current_path()}` not found.")
    st.button("Return to Home", key="pa_not_found_home", on_click=ctx.navigate, args=(LOGIN_PATH,))
