class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when credentials or the bearer token are missing or invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class NotFoundError(DomainError):
    """Raised when a referenced user, event, session or request is absent."""


class ConflictError(DomainError):
    """Raised when a unique value (e.g. e-mail) is already taken."""


class StorageTimeoutError(DomainError):
    """Raised when a collection lock cannot be acquired in time."""
