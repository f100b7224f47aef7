class AccountError(Exception):
    """Base exception for account and role operations."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class ValidationError(AccountError):
    """Missing or malformed input."""
    status_code = 400


class UnauthorizedError(AccountError):
    """Bad credentials or a missing/invalid bearer token."""
    status_code = 401


class ForbiddenError(AccountError):
    """Authenticated, but none of the required roles is held."""
    status_code = 403


class NotFoundError(AccountError):
    status_code = 404


class ConflictError(AccountError):
    """Uniqueness or state conflict."""
    status_code = 409
