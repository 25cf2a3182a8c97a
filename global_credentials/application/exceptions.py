"""Application layer exceptions."""


class ApplicationError(Exception):
    """Base exception for application errors."""


class TransportError(ApplicationError):
    """Raised by backend clients when a request fails or its payload cannot be read."""

    def __init__(self, message: str, *, raw_body: str | None = None) -> None:
        super().__init__(message)
        self.raw_body = raw_body


class BackendError(ApplicationError):
    """Raised when a backend operation fails or returns no payload."""

    def __init__(self, operation: str, detail: str, *, raw_body: str | None = None) -> None:
        super().__init__(f"Failure when executing {operation}: {detail}")
        self.operation = operation
        self.detail = detail
        self.raw_body = raw_body


class StateWriteError(ApplicationError):
    """Raised when a normalized result cannot be written into the output state."""

    def __init__(self, operation: str, field_name: str, detail: str) -> None:
        super().__init__(f"Failure when setting {operation} response: {detail}")
        self.operation = operation
        self.field_name = field_name
        self.detail = detail


class ConfigurationError(ApplicationError):
    """Raised when configuration is invalid."""
