import pytest

from placement_admin.data import seed
from placement_admin.data.search import filter_equals, matches_term, search_records

APPLICATION_FIELDS = ("student_name", "email", "application_reason")


@pytest.mark.parametrize("term", ["", None])
def test_empty_term_returns_everything_in_order(term):
    result = search_records(seed.APPLICATIONS, term, APPLICATION_FIELDS)
    assert result == list(seed.APPLICATIONS)


def test_whitespace_is_part_of_the_term():
    assert search_records(seed.APPLICATIONS, "doe ", ("student_name",)) == []
    assert search_records(seed.APPLICATIONS, "   ", APPLICATION_FIELDS) == []
    assert [a.id for a in search_records(seed.APPLICATIONS, "john doe", ("student_name",))] == ["1"]


@pytest.mark.parametrize(
    "term,expected_ids",
    [
        ("john", ["1", "3"]),  # John Doe, mike.johnson@
        ("JANE", ["2"]),
        ("internship", ["1", "4"]),
        ("@college.edu", ["1", "2", "3", "4", "5"]),
        ("nobody", []),
    ],
)
def test_case_insensitive_substring(term, expected_ids):
    result = search_records(seed.APPLICATIONS, term, APPLICATION_FIELDS)
    assert [a.id for a in result] == expected_ids


def test_search_is_idempotent():
    once = search_records(seed.INTERNSHIPS, "intern", ("title", "company_name"))
    twice = search_records(once, "intern", ("title", "company_name"))
    assert once == twice


def test_only_designated_fields_are_searched():
    # "Pending" is a status, not a searchable application field
    assert search_records(seed.APPLICATIONS, "pending", APPLICATION_FIELDS) == []


def test_matches_term_ignores_missing_attributes():
    assert matches_term(seed.STAFF[0], "sarah", ("nickname", "name"))


def test_filter_equals():
    result = filter_equals(seed.STAFF, "access_level", "Manager")
    assert [m.name for m in result] == ["Prof. Michael Brown", "Dr. Emily Clark"]
