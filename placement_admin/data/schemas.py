"""
Entity schemas for the four management screens.
"""

from __future__ import annotations

import datetime as dt
from typing import Any, Dict

from placement_admin.data.models import (
    ACCESS_LEVELS,
    APPLICATION_STATUSES,
    INTERNSHIP_STATUSES,
    SECTIONS,
    Application,
    ExamData,
    Internship,
    StaffMember,
)
from placement_admin.data.store import EntitySchema, FormField


def _today() -> str:
    return dt.date.today().isoformat()


def _internship_defaults() -> Dict[str, Any]:
    return {"status": "Active", "posted_date": _today(), "applicants": 0}


def _staff_defaults() -> Dict[str, Any]:
    return {"join_date": _today()}


EXAM_DATA_SCHEMA: EntitySchema[ExamData] = EntitySchema(
    record_type=ExamData,
    label="Exam data",
    form_fields=(
        FormField("exam_date", "Exam Date", kind="date"),
        FormField("timetable", "Timetable Name", placeholder="e.g., Mid-Term Schedule.pdf"),
        FormField("drive_link", "Drive Link", placeholder="https://drive.google.com/..."),
        FormField("general_query", "General Query", placeholder="Contact information or general notes"),
    ),
    required=("exam_date", "timetable"),
    searchable=("timetable", "general_query"),
)

APPLICATION_SCHEMA: EntitySchema[Application] = EntitySchema(
    record_type=Application,
    label="Application",
    form_fields=(),
    searchable=("student_name", "email", "application_reason"),
    choices={"status": APPLICATION_STATUSES},
)

INTERNSHIP_SCHEMA: EntitySchema[Internship] = EntitySchema(
    record_type=Internship,
    label="Internship",
    form_fields=(
        FormField("title", "Internship Title", placeholder="e.g., Software Development Intern"),
        FormField("company_name", "Company Name", placeholder="e.g., TechCorp Inc."),
        FormField("duration", "Duration", placeholder="e.g., 3 months"),
        FormField("apply_link", "Application Link", placeholder="https://company.com/apply"),
    ),
    required=("title", "company_name"),
    searchable=("title", "company_name"),
    choices={"status": INTERNSHIP_STATUSES},
    server_defaults=_internship_defaults,
)

STAFF_SCHEMA: EntitySchema[StaffMember] = EntitySchema(
    record_type=StaffMember,
    label="Staff member",
    form_fields=(
        FormField("name", "Full Name", placeholder="e.g., Dr. John Smith"),
        FormField("role", "Role/Position", placeholder="e.g., Placement Coordinator"),
        FormField("email", "Email Address", kind="email", placeholder="name@college.edu"),
        FormField("section", "Section", kind="select", options=SECTIONS, default="Placement"),
        FormField("access_level", "Access Level", kind="select", options=ACCESS_LEVELS, default="Staff"),
    ),
    required=("name", "email", "role"),
    searchable=("name", "role", "email"),
    choices={"access_level": ACCESS_LEVELS, "section": SECTIONS},
    server_defaults=_staff_defaults,
)
