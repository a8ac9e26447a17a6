from __future__ import annotations

import streamlit as st

from placement_admin.auth import check_credentials
from placement_admin.config import DASHBOARD_PATH, Settings
from placement_admin.ui import state
from placement_admin.ui.pages.context import PageContext

USERNAME_KEY = "pa_login_username"
PASSWORD_KEY = "pa_login_password"


def attempt_login(ctx: PageContext) -> bool:
    username = st.session_state.get(USERNAME_KEY, "") or ""
    password = st.session_state.get(PASSWORD_KEY, "") or ""
    if check_credentials(username, password, ctx.settings.credentials):
        state.set_authenticated(True)
        ctx.notifier.push("Login Successful", "Welcome back, Admin!")
        st.session_state[PASSWORD_KEY] = ""
        ctx.navigate(DASHBOARD_PATH)
        return True
    state.set_authenticated(False)
    ctx.notifier.push("Login Failed", "Invalid username or password", variant="destructive")
    return False


def render(ctx: PageContext) -> None:
    _, center, _ = st.columns([1, 2, 1])
    with center:
        with st.container(border=True):
            st.title("Welcome Back, Admin!")
            st.caption("Sign in to access the placement management system")
            st.text_input("Username", key=USERNAME_KEY, placeholder="Enter your username")
            st.text_input("Password", key=PASSWORD_KEY, type="password", placeholder="Enter your password")
            st.button(
                "Sign In",
                key="pa_login_submit",
                type="primary",
                width="stretch",
                on_click=attempt_login,
                args=(ctx,),
            )
            if ctx.settings.credentials == Settings().credentials:
                st.caption(f"Demo credentials: {ctx.settings.admin_username} / {ctx.settings.admin_password}")
