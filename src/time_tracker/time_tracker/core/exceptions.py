class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""


class InvalidPeriod(ValidationError):
    """Raised when a report period is malformed or ends before it starts."""


class InvalidFilter(ValidationError):
    """Raised when a report filter value cannot be interpreted."""


class RecordComputeFailure(DomainError):
    """Raised while aggregating a single record.

    The aggregator catches it per record, so it never reaches callers.
    """

    def __init__(self, record_key: tuple[str, str], reason: str):
        super().__init__(f"{record_key[0]}@{record_key[1]}: {reason}")
        self.record_key = record_key
        self.reason = reason
