"""Typed errors raised by the store-facing and query layers.

Helpers under ``app.services`` translate these into ``HTTPException``.
"""


class QueryValidationError(ValueError):
    """Malformed filter/sort/page specification."""


class NotFoundError(LookupError):
    """No record with the given id exists in the store."""

    def __init__(self, entity: str, record_id):
        super().__init__(f"{entity} not found")
        self.entity = entity
        self.record_id = record_id


class CapacityParseError(ValueError):
    """A stored capacity value is not a number."""

    def __init__(self, record_id, value):
        super().__init__(f"Project {record_id} has a non-numeric capacity: {value!r}")
        self.record_id = record_id
        self.value = value
