import datetime as dt

from placement_admin.data import seed
from placement_admin.data.models import Internship
from placement_admin.ui.components.formatting import format_date, format_number, parse_iso_date
from placement_admin.ui.pages.helpers import (
    active_count,
    posted_in_month,
    section_stats,
    total_applicants,
)


def test_section_stats_for_seed():
    assert section_stats(seed.STAFF, "Placement") == {"total": 2, "Admin": 1, "Manager": 0, "Staff": 1}
    assert section_stats(seed.STAFF, "Exam") == {"total": 2, "Admin": 0, "Manager": 2, "Staff": 0}
    assert section_stats(seed.STAFF, "Office") == {"total": 1, "Admin": 0, "Manager": 0, "Staff": 1}


def test_adding_exam_manager_bumps_tab_and_sub_count(staff):
    before = section_stats(staff.records, "Exam")
    staff.create(
        {"name": "Dr. X", "role": "Y", "email": "x@c.edu", "section": "Exam", "access_level": "Manager"}
    )
    after = section_stats(staff.records, "Exam")

    assert after["total"] == before["total"] + 1
    assert after["Manager"] == before["Manager"] + 1
    assert after["Admin"] == before["Admin"]
    assert len(staff.where("section", "Exam")) == 3


def test_internship_summary_for_seed():
    assert active_count(seed.INTERNSHIPS) == 3
    assert total_applicants(seed.INTERNSHIPS) == 84


def test_posted_in_month_compares_year_and_month():
    today = dt.date(2024, 9, 15)
    assert posted_in_month(seed.INTERNSHIPS, today=today) == 3
    # same month, different year
    assert posted_in_month(seed.INTERNSHIPS, today=dt.date(2025, 9, 15)) == 0


def test_posted_in_month_skips_bad_dates():
    odd = Internship("9", "T", "C", "1 month", "", "Draft", "not-a-date", 0)
    assert posted_in_month([odd], today=dt.date(2024, 9, 1)) == 0


def test_formatting():
    assert format_number(1234) == "1,234"
    assert format_number(None) == "–"
    assert parse_iso_date("2024-09-10") == dt.date(2024, 9, 10)
    assert parse_iso_date("") is None
    assert format_date("2024-09-10") == "10 Sep 2024"
    assert format_date("soon") == "soon"
    assert format_date("") == "–"
