"""
Exception types raised by the in-memory data layer.
"""

from __future__ import annotations


class PlacementAdminError(Exception):
    """Base class for dashboard data-layer errors."""


class RecordNotFound(PlacementAdminError, KeyError):
    def __init__(self, entity: str, record_id: str):
        self.entity = entity
        self.record_id = record_id
        super().__init__(f"{entity} with id {record_id!r} not found")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class UnknownField(PlacementAdminError, KeyError):
    def __init__(self, entity: str, field: str):
        self.entity = entity
        self.field = field
        super().__init__(f"{entity} has no field {field!r}")

    def __str__(self) -> str:
        return self.args[0]


class InvalidFieldValue(PlacementAdminError, ValueError):
    def __init__(self, field: str, value: object, allowed):
        self.field = field
        self.value = value
        self.allowed = tuple(allowed)
        super().__init__(
            f"{value!r} is not a valid {field}; expected one of {', '.join(self.allowed)}"
        )


class MissingRequiredFields(PlacementAdminError, ValueError):
    def __init__(self, entity: str, fields):
        self.entity = entity
        self.fields = tuple(fields)
        super().__init__(f"{entity} is missing required fields: {', '.join(self.fields)}")
