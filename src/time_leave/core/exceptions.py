class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthorizationError(DomainError):
    """Raised when the current viewer role lacks permission for an action."""


class NotFoundError(DomainError):
    """Raised when a referenced employee, project or request does not exist."""


class MissingDateRange(ValidationError):
    """Raised when a leave submission lacks a start or end date."""


class InvalidDateRange(ValidationError):
    """Raised when a leave end date precedes its start date."""


class InsufficientBalance(ValidationError):
    """Raised when requested days exceed the balance without cash-out."""


class InvalidTransition(ValidationError):
    """Raised when a request is decided outside its allowed status flow."""
