class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced volunteer, game date or record does not exist."""


class StoreError(DomainError):
    """Base exception for failures reported by the data store."""


class StoreUnavailableError(StoreError):
    """Raised on network/transport failures talking to the data store."""


class ConstraintViolationError(StoreError):
    """Raised when the store rejects a write (unique or foreign key)."""
