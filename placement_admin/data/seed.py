"""
Hard-coded sample data used to seed each session.

The record seeds populate the management collections. The overview figures
are fixed aggregates and are not derived from those collections.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

import pandas as pd

from placement_admin.data.models import Application, ExamData, Internship, StaffMember

APPLICATIONS: Tuple[Application, ...] = (
    Application("1", "John Doe", "john.doe@college.edu", "Software Engineering Internship", "Pending", "2024-09-10"),
    Application("2", "Jane Smith", "jane.smith@college.edu", "Data Science Position", "Done", "2024-09-08"),
    Application("3", "Mike Johnson", "mike.johnson@college.edu", "UI/UX Designer Role", "Pending", "2024-09-12"),
    Application("4", "Sarah Wilson", "sarah.wilson@college.edu", "Marketing Internship", "Rejected", "2024-09-05"),
    Application("5", "David Brown", "david.brown@college.edu", "Full Stack Developer", "Done", "2024-09-07"),
)

EXAM_DATA: Tuple[ExamData, ...] = (
    ExamData(
        "1",
        "2024-10-15",
        "Mid-Term Schedule.pdf",
        "https://drive.google.com/file/d/123abc",
        "Contact placement office for queries",
    ),
    ExamData(
        "2",
        "2024-11-20",
        "Final Exam Schedule.pdf",
        "https://drive.google.com/file/d/456def",
        "Exam hall assignments will be posted soon",
    ),
    ExamData(
        "3",
        "2024-12-10",
        "Placement Test Schedule.pdf",
        "https://drive.google.com/file/d/789ghi",
        "Bring ID proof and calculator",
    ),
)

INTERNSHIPS: Tuple[Internship, ...] = (
    Internship(
        "1", "Software Development Intern", "TechCorp Inc.", "3 months",
        "https://techcorp.com/apply/intern-2024", "Active", "2024-09-01", 23,
    ),
    Internship(
        "2", "Data Science Intern", "DataWorks Ltd.", "6 months",
        "https://dataworks.com/careers/intern", "Active", "2024-09-05", 31,
    ),
    Internship(
        "3", "UI/UX Design Intern", "DesignStudio Pro", "4 months",
        "https://designstudio.com/jobs/ux-intern", "Closed", "2024-08-20", 18,
    ),
    Internship(
        "4", "Marketing Intern", "BrandMax Agency", "3 months",
        "https://brandmax.com/careers/marketing-intern", "Active", "2024-09-10", 12,
    ),
)

STAFF: Tuple[StaffMember, ...] = (
    StaffMember("1", "Dr. Sarah Johnson", "Placement Head", "sarah.johnson@college.edu", "Admin", "Placement", "2023-01-15"),
    StaffMember("2", "Prof. Michael Brown", "Exam Coordinator", "michael.brown@college.edu", "Manager", "Exam", "2023-03-20"),
    StaffMember("3", "Ms. Lisa Davis", "Office Administrator", "lisa.davis@college.edu", "Staff", "Office", "2023-06-10"),
    StaffMember("4", "Mr. John Wilson", "Placement Coordinator", "john.wilson@college.edu", "Staff", "Placement", "2023-08-05"),
    StaffMember("5", "Dr. Emily Clark", "Exam Officer", "emily.clark@college.edu", "Manager", "Exam", "2023-09-12"),
)

# ---------- Overview sample aggregates ----------

OVERVIEW_STATS: List[Dict[str, str]] = [
    {"title": "Total Applications", "value": "156", "description": "This month", "trend": "+12%"},
    {"title": "Active Internships", "value": "24", "description": "Currently available", "trend": "+3%"},
    {"title": "Upcoming Exams", "value": "8", "description": "Next 30 days", "trend": "+2"},
    {"title": "Staff Members", "value": "42", "description": "Active users", "trend": "stable"},
]

RECENT_ACTIVITY: List[Dict[str, str]] = [
    {"action": "New internship posted", "subject": "TechCorp Inc.", "time": "2 hours ago", "kind": "success"},
    {"action": "Application status updated", "subject": "John Doe", "time": "4 hours ago", "kind": "info"},
    {"action": "Exam schedule updated", "subject": "Software Engineering", "time": "6 hours ago", "kind": "warning"},
    {"action": "New staff member added", "subject": "Dr. Jane Smith", "time": "1 day ago", "kind": "info"},
]


def status_distribution() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "Status": ["Pending", "Done", "Rejected"],
            "Applications": [45, 85, 26],
        }
    )


def monthly_trends() -> pd.DataFrame:
    """Applications vs placements per month, long format for grouped bars."""
    wide = pd.DataFrame(
        {
            "month": ["Jan", "Feb", "Mar", "Apr", "May", "Jun"],
            "Applications": [65, 78, 90, 81, 95, 102],
            "Placements": [45, 52, 61, 58, 67, 73],
        }
    )
    return wide.melt(id_vars="month", var_name="Series", value_name="Count")
