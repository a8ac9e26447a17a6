from __future__ import annotations

import datetime as dt
from typing import Dict, Iterable, Optional

from placement_admin.data.models import ACCESS_LEVELS, Internship, StaffMember
from placement_admin.ui.components.formatting import parse_iso_date


def section_stats(staff: Iterable[StaffMember], section: str) -> Dict[str, int]:
    members = [m for m in staff if m.section == section]
    stats = {"total": len(members)}
    for level in ACCESS_LEVELS:
        stats[level] = sum(1 for m in members if m.access_level == level)
    return stats


def active_count(internships: Iterable[Internship]) -> int:
    return sum(1 for i in internships if i.status == "Active")


def total_applicants(internships: Iterable[Internship]) -> int:
    return sum(i.applicants for i in internships)


def posted_in_month(internships: Iterable[Internship], today: Optional[dt.date] = None) -> int:
    """
    Postings whose date falls in the same calendar month and year as ``today``.

    The legacy admin panel compared the month alone, which counted last
    year's September postings as "this month"; the year is checked here too.
    """
    today = today or dt.date.today()
    count = 0
    for internship in internships:
        posted = parse_iso_date(internship.posted_date)
        if posted is not None and (posted.year, posted.month) == (today.year, today.month):
            count += 1
    return count
