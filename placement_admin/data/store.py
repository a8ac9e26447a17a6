"""
Generic in-memory entity manager shared by every management screen.

An :class:`EntitySchema` describes one record type (form fields, required and
searchable fields, closed value sets, server-assigned defaults). An
:class:`EntityCollection` holds an ordered list of records for that schema and
implements search, create, update, delete and single-field transitions.
"""

from __future__ import annotations

import dataclasses
import logging
import time
from dataclasses import dataclass, field
from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Tuple,
    Type,
    TypeVar,
)

from placement_admin.data.search import filter_equals, search_records
from placement_admin.errors import (
    InvalidFieldValue,
    MissingRequiredFields,
    RecordNotFound,
    UnknownField,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def timestamp_id() -> str:
    """Millisecond wall-clock timestamp as a string."""
    return str(int(time.time() * 1000))


@dataclass(frozen=True)
class FormField:
    name: str
    label: str
    kind: str = "text"  # text | date | email | select
    placeholder: str = ""
    options: Tuple[str, ...] = ()
    default: str = ""


@dataclass(frozen=True)
class EntitySchema(Generic[T]):
    record_type: Type[T]
    label: str
    form_fields: Tuple[FormField, ...]
    required: Tuple[str, ...] = ()
    searchable: Tuple[str, ...] = ()
    choices: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)
    server_defaults: Optional[Callable[[], Dict[str, Any]]] = None

    @property
    def field_names(self) -> Tuple[str, ...]:
        return tuple(f.name for f in dataclasses.fields(self.record_type))

    @property
    def form_field_names(self) -> Tuple[str, ...]:
        return tuple(f.name for f in self.form_fields)

    def empty_form(self) -> Dict[str, str]:
        return {f.name: f.default for f in self.form_fields}

    def form_from(self, record: T) -> Dict[str, Any]:
        return {name: getattr(record, name) for name in self.form_field_names}

    def missing_required(self, form: Mapping[str, Any]) -> List[str]:
        return [name for name in self.required if not str(form.get(name) or "").strip()]

    def validate_value(self, name: str, value: Any) -> None:
        if name not in self.field_names or name == "id":
            raise UnknownField(self.label, name)
        allowed = self.choices.get(name)
        if allowed is not None and value not in allowed:
            raise InvalidFieldValue(name, value, allowed)


class EntityCollection(Generic[T]):
    """Ordered, id-addressable list of records; insertion order is display order."""

    def __init__(
        self,
        schema: EntitySchema[T],
        records: Iterable[T] = (),
        id_factory: Callable[[], str] = timestamp_id,
    ):
        self.schema = schema
        self._id_factory = id_factory
        self._records: List[T] = []
        for record in records:
            if self._index_of(record.id) is not None:  # type: ignore[attr-defined]
                raise ValueError(f"duplicate {schema.label} id {record.id!r}")  # type: ignore[attr-defined]
            self._records.append(record)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._records))

    def __contains__(self, record_id: object) -> bool:
        return self._index_of(record_id) is not None

    @property
    def records(self) -> Tuple[T, ...]:
        return tuple(self._records)

    @property
    def ids(self) -> List[str]:
        return [r.id for r in self._records]  # type: ignore[attr-defined]

    def _index_of(self, record_id: object) -> Optional[int]:
        for idx, record in enumerate(self._records):
            if record.id == record_id:  # type: ignore[attr-defined]
                return idx
        return None

    def _require_index(self, record_id: str) -> int:
        idx = self._index_of(record_id)
        if idx is None:
            raise RecordNotFound(self.schema.label, record_id)
        return idx

    def _next_id(self) -> str:
        candidate = self._id_factory()
        taken = set(self.ids)
        bump = 0
        while candidate in taken:
            # two creates inside one clock tick; step past the collision
            bump += 1
            if candidate.isdigit():
                candidate = str(int(candidate) + 1)
            else:
                candidate = f"{candidate}-{bump}"
        return candidate

    def get(self, record_id: str) -> T:
        return self._records[self._require_index(record_id)]

    def search(self, term: str | None) -> List[T]:
        return search_records(self._records, term, self.schema.searchable)

    def where(self, field_name: str, value: Any) -> List[T]:
        return filter_equals(self._records, field_name, value)

    def count_by(self, field_name: str) -> Dict[Any, int]:
        counts: Dict[Any, int] = {}
        for record in self._records:
            key = getattr(record, field_name)
            counts[key] = counts.get(key, 0) + 1
        return counts

    def can_submit(self, form: Mapping[str, Any]) -> bool:
        return not self.schema.missing_required(form)

    def _clean_form(self, form: Mapping[str, Any]) -> Dict[str, Any]:
        allowed = set(self.schema.form_field_names)
        for name in form:
            if name not in allowed:
                raise UnknownField(self.schema.label, name)
        missing = self.schema.missing_required(form)
        if missing:
            raise MissingRequiredFields(self.schema.label, missing)
        values = self.schema.empty_form()
        values.update(form)
        for name, value in values.items():
            self.schema.validate_value(name, value)
        return values

    def create(self, form: Mapping[str, Any]) -> T:
        values = self._clean_form(form)
        if self.schema.server_defaults is not None:
            for name, value in self.schema.server_defaults().items():
                values.setdefault(name, value)
        record = self.schema.record_type(id=self._next_id(), **values)  # type: ignore[call-arg]
        self._records.append(record)
        logger.info("%s created id=%s", self.schema.label, record.id)  # type: ignore[attr-defined]
        return record

    def update(self, record_id: str, form: Mapping[str, Any]) -> T:
        idx = self._require_index(record_id)
        values = self._clean_form(form)
        updated = dataclasses.replace(self._records[idx], **values)
        self._records[idx] = updated
        logger.info("%s updated id=%s", self.schema.label, record_id)
        return updated

    def set_field(self, record_id: str, field_name: str, value: Any) -> T:
        idx = self._require_index(record_id)
        self.schema.validate_value(field_name, value)
        updated = dataclasses.replace(self._records[idx], **{field_name: value})
        self._records[idx] = updated
        logger.info("%s id=%s %s -> %s", self.schema.label, record_id, field_name, value)
        return updated

    def delete(self, record_id: str) -> T:
        idx = self._require_index(record_id)
        removed = self._records.pop(idx)
        logger.info("%s deleted id=%s", self.schema.label, record_id)
        return removed
