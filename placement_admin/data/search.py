"""
Search and filter helpers applied to record sequences before rendering.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Sequence, TypeVar

T = TypeVar("T")


def matches_term(record: Any, term: str, fields: Sequence[str]) -> bool:
    """Case-insensitive substring match of ``term`` against any of ``fields``."""
    needle = term.lower()
    if not needle:
        return True
    for field in fields:
        value = getattr(record, field, None)
        if value is None:
            continue
        if needle in str(value).lower():
            return True
    return False


def search_records(records: Iterable[T], term: str | None, fields: Sequence[str]) -> List[T]:
    """
    Return the records whose searchable fields contain ``term``.

    An empty term keeps every record; any other term, whitespace included, is
    matched as typed (case-folded only). Order is always the
    input order, so applying the same term twice yields the same list.
    """
    records = list(records)
    if term is None or term == "":
        return records
    return [record for record in records if matches_term(record, term, fields)]


def filter_equals(records: Iterable[T], field: str, value: Any) -> List[T]:
    return [record for record in records if getattr(record, field, None) == value]
