from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict

from placement_admin.config import Settings
from placement_admin.data.store import EntityCollection
from placement_admin.notifications import NotificationCenter


@dataclass
class PageContext:
    settings: Settings
    notifier: NotificationCenter
    collections: Dict[str, EntityCollection]
    navigate: Callable[[str], None]
