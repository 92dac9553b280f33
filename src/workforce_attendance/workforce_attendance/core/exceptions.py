class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthorizationError(DomainError):
    """Raised when the acting user lacks permission for an action."""


class PolicyBlockedError(DomainError):
    """Deterministic business-rule refusal (already clocked in, pending request, ...)."""


class LocationUnavailableError(DomainError):
    """Raised when device geolocation was denied, failed or timed out."""


class NotFoundError(DomainError):
    """Raised when a record does not exist or is not in the expected state."""


class PersistenceError(DomainError):
    """Raised when the underlying storage operation failed."""


class ConflictError(PersistenceError):
    """Raised when a storage uniqueness constraint rejected a write."""
