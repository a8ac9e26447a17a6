"""
Session-scoped state: seeded collections, the notification center, the login
flag and the current navigation path.
"""

from __future__ import annotations

import logging
from typing import Dict

import streamlit as st

from placement_admin.config import LOGIN_PATH, Settings, normalize_path
from placement_admin.data import seed
from placement_admin.data.schemas import (
    APPLICATION_SCHEMA,
    EXAM_DATA_SCHEMA,
    INTERNSHIP_SCHEMA,
    STAFF_SCHEMA,
)
from placement_admin.data.store import EntityCollection
from placement_admin.notifications import NotificationCenter

logger = logging.getLogger(__name__)

AUTH_KEY = "pa_authenticated"
NOTIFIER_KEY = "pa_notifier"
COLLECTIONS_KEY = "pa_collections"
PATH_PARAM = "path"


def seed_collections() -> Dict[str, EntityCollection]:
    return {
        "exam_data": EntityCollection(EXAM_DATA_SCHEMA, seed.EXAM_DATA),
        "applications": EntityCollection(APPLICATION_SCHEMA, seed.APPLICATIONS),
        "internships": EntityCollection(INTERNSHIP_SCHEMA, seed.INTERNSHIPS),
        "staff": EntityCollection(STAFF_SCHEMA, seed.STAFF),
    }


def get_collections() -> Dict[str, EntityCollection]:
    if COLLECTIONS_KEY not in st.session_state:
        st.session_state[COLLECTIONS_KEY] = seed_collections()
        logger.debug("Seeded session collections")
    return st.session_state[COLLECTIONS_KEY]


def get_notifier(settings: Settings) -> NotificationCenter:
    if NOTIFIER_KEY not in st.session_state:
        st.session_state[NOTIFIER_KEY] = NotificationCenter(ttl_seconds=settings.notification_ttl_seconds)
    return st.session_state[NOTIFIER_KEY]


def is_authenticated() -> bool:
    return bool(st.session_state.get(AUTH_KEY, False))


def set_authenticated(value: bool) -> None:
    st.session_state[AUTH_KEY] = value


def current_path() -> str:
    return normalize_path(st.query_params.get(PATH_PARAM, LOGIN_PATH))


def navigate(path: str) -> None:
    st.query_params[PATH_PARAM] = normalize_path(path)
