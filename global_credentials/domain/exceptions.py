"""Domain exceptions."""


class DomainError(Exception):
    """Base exception for domain errors."""


class InvalidArgumentError(DomainError):
    """Raised when a required input is malformed, such as an empty credential id."""
