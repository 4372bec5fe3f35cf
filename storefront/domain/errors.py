# storefront/domain/errors.py


class ValidationError(ValueError):
    """Input is missing or out of range. Client-fixable."""


class NotFoundError(LookupError):
    pass


class ConflictError(ValueError):
    """Unique identifier already taken (e.g. email on register)."""


class AuthenticationError(PermissionError):
    """Bad or missing credentials. The message never says which part was wrong."""

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)
