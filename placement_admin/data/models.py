"""
Record types for the four managed collections.

Each record is a flat dataclass with a string ``id``. Closed value sets are
kept next to the record type so schemas and UI selects share one definition.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

APPLICATION_STATUSES: Tuple[str, ...] = ("Pending", "Done", "Rejected")
INTERNSHIP_STATUSES: Tuple[str, ...] = ("Active", "Closed", "Draft")
ACCESS_LEVELS: Tuple[str, ...] = ("Admin", "Manager", "Staff")
SECTIONS: Tuple[str, ...] = ("Placement", "Exam", "Office")


@dataclass(frozen=True)
class Application:
    id: str
    student_name: str
    email: str
    application_reason: str
    status: str
    submitted_date: str


@dataclass(frozen=True)
class ExamData:
    id: str
    exam_date: str
    timetable: str
    drive_link: str
    general_query: str


@dataclass(frozen=True)
class Internship:
    id: str
    title: str
    company_name: str
    duration: str
    apply_link: str
    status: str
    posted_date: str
    applicants: int = 0


@dataclass(frozen=True)
class StaffMember:
    id: str
    name: str
    role: str
    email: str
    access_level: str
    section: str
    join_date: str
