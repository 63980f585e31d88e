# loadgrid/exceptions.py

class DomainError(Exception):
    """Base class for engine-level errors."""
    def __init__(self, message: str, *, code: str | None = None):
        super().__init__(message)
        self.code = code or self.__class__.__name__


class ValidationError(DomainError):
    """Raised when a caller passes arguments outside the accepted range."""


class NotFoundError(DomainError):
    """Raised when a requested resource is not present in the input."""
