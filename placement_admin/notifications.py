"""
Per-session notification queue rendered as Streamlit toasts.

A :class:`NotificationCenter` lives in ``st.session_state`` and is handed to
pages through :class:`~placement_admin.ui.pages.context.PageContext`. Widget
callbacks push notifications; the main script renders whatever is pending at
the end of each run, and entries older than the TTL are dropped.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, List

import streamlit as st

logger = logging.getLogger(__name__)

VARIANTS = ("default", "destructive")
VARIANT_ICONS = {
    "default": "✅",
    "destructive": "⚠️",
}


@dataclass
class Notification:
    title: str
    description: str = ""
    variant: str = "default"
    created_at: float = 0.0
    displayed: bool = False

    @property
    def body(self) -> str:
        if not self.description:
            return f"**{self.title}**"
        return f"**{self.title}**  \n{self.description}"


@dataclass
class NotificationCenter:
    ttl_seconds: float = 5.0
    clock: Callable[[], float] = time.monotonic
    items: List[Notification] = field(default_factory=list)

    def push(self, title: str, description: str = "", variant: str = "default") -> Notification:
        if variant not in VARIANTS:
            raise ValueError(f"Unknown notification variant {variant!r}; expected one of {VARIANTS}")
        note = Notification(title=title, description=description, variant=variant, created_at=self.clock())
        self.items.append(note)
        return note

    def expire(self) -> int:
        now = self.clock()
        kept = [n for n in self.items if now - n.created_at < self.ttl_seconds]
        dropped = len(self.items) - len(kept)
        if dropped:
            logger.debug("Expired %d notification(s)", dropped)
        self.items = kept
        return dropped

    def pending(self) -> List[Notification]:
        """Unexpired, not-yet-shown notifications in push order; marks them shown."""
        self.expire()
        fresh = [n for n in self.items if not n.displayed]
        for note in fresh:
            note.displayed = True
        return fresh

    def active(self) -> List[Notification]:
        self.expire()
        return list(self.items)

    def render(self) -> None:
        for note in self.pending():
            st.toast(note.body, icon=VARIANT_ICONS[note.variant])
