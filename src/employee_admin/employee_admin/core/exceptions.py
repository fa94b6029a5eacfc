class DomainError(Exception):
    """Base exception for business rule violations."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class DuplicateKeyError(DomainError):
    """Raised by a repository when the storage rejects a duplicate unique key."""
