"""Errors raised by the in-memory stores."""


class RecordNotFoundError(LookupError):
    """Raised when a record id does not exist."""

    def __init__(self, kind: str, record_id: object) -> None:
        super().__init__(f"{kind} {record_id} not found")
        self.kind = kind
        self.record_id = record_id


class DuplicateRecordError(ValueError):
    """Raised when a unique field (e.g. a catalog item name) is already taken."""
