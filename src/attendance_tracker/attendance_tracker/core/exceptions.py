class DomainError(Exception):
    """Base exception for attendance rule violations."""


class ValidationError(DomainError):
    """Raised when client input is missing or malformed."""


class RecordNotFoundError(DomainError):
    """Raised when an update/delete matched no row and missing records are reported."""


class StorageError(DomainError):
    """Raised when the underlying store fails; the driver error is chained."""
