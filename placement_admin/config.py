"""
Application-wide configuration: settings resolved from env/secrets and the
ordered navigation table.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import List, Optional

import streamlit as st

from placement_admin.auth import Credentials

logger = logging.getLogger(__name__)

LOGIN_PATH = "/"
DASHBOARD_PATH = "/dashboard"


@dataclass(frozen=True)
class NavItem:
    key: str
    path: str
    label: str
    requires_login: bool = True


# Ordered sidebar entries for the dashboard shell
NAV_ITEMS: List[NavItem] = [
    NavItem("overview", DASHBOARD_PATH, "Dashboard"),
    NavItem("exam_data", "/dashboard/dynamic-data", "Dynamic Data"),
    NavItem("applications", "/dashboard/applications", "Applications"),
    NavItem("internships", "/dashboard/internships", "Internships"),
    NavItem("staff", "/dashboard/staff", "Staff Management"),
]

LOGIN_ROUTE = NavItem("login", LOGIN_PATH, "Login", requires_login=False)
NOT_FOUND_ROUTE = NavItem("not_found", "", "Not Found", requires_login=False)


def normalize_path(path: Optional[str]) -> str:
    if not path:
        return LOGIN_PATH
    path = "/" + path.strip().strip("/")
    return path


def resolve_route(path: Optional[str]) -> NavItem:
    """Map a path to its route; unknown paths resolve to the not-found route."""
    path = normalize_path(path)
    if path == LOGIN_PATH:
        return LOGIN_ROUTE
    for item in NAV_ITEMS:
        if item.path == path:
            return item
    return NOT_FOUND_ROUTE


@dataclass(frozen=True)
class Settings:
    admin_username: str = "admin"
    admin_password: str = "admin123"
    notification_ttl_seconds: float = 5.0
    log_level: str = "INFO"
    page_title: str = "Placement Admin Panel"

    @property
    def credentials(self) -> Credentials:
        return Credentials(self.admin_username, self.admin_password)


def _get_secret(name: str, default: str | None = None) -> str | None:
    """Try env first, then st.secrets (if available)."""
    val = os.getenv(name)
    if val:
        return val
    try:
        sec = getattr(st, "secrets", None)
        if sec:
            v = sec.get(name)  # type: ignore[index]
            return str(v) if v is not None else default
    except Exception:
        # st.secrets raises when no secrets.toml exists
        pass
    return default


def _get_float(name: str, default: float) -> float:
    raw = _get_secret(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring non-numeric %s=%r; using %s", name, raw, default)
        return default


def load_settings() -> Settings:
    defaults = Settings()
    return Settings(
        admin_username=_get_secret("ADMIN_USERNAME", defaults.admin_username) or defaults.admin_username,
        admin_password=_get_secret("ADMIN_PASSWORD", defaults.admin_password) or defaults.admin_password,
        notification_ttl_seconds=_get_float("NOTIFICATION_TTL_SECONDS", defaults.notification_ttl_seconds),
        log_level=(_get_secret("LOG_LEVEL", defaults.log_level) or defaults.log_level).upper(),
        page_title=_get_secret("PAGE_TITLE", defaults.page_title) or defaults.page_title,
    )
