class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is missing or malformed."""


class NotFoundError(DomainError):
    """Raised when a referenced employee or record does not exist."""


class StoreError(DomainError):
    """Raised when the backing store cannot be reached or a query fails."""


class DuplicateEventError(DomainError):
    """Raised by a store when an event of that kind already exists for the day."""
