"""Domain errors raised by use cases and translated to HTTP responses."""


class DomainError(Exception):
    """Base error for business rule violations."""

    status_code = 400

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(DomainError):
    """Raised when a payload does not satisfy a business rule."""


class LimitExceededError(DomainError):
    """Raised when an application cap would be exceeded."""


class DuplicateEntryError(DomainError):
    """Raised when an entity already exists for the same natural key."""


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist for the caller."""

    status_code = 404


class AuthenticationError(DomainError):
    status_code = 401


class PermissionDeniedError(DomainError):
    status_code = 403


__all__ = [
    "AuthenticationError",
    "DomainError",
    "DuplicateEntryError",
    "LimitExceededError",
    "NotFoundError",
    "PermissionDeniedError",
    "ValidationError",
]
