"""Domain value objects - Immutable objects defined by their attributes."""

from .credential_type import CredentialType
from .filters import CredentialFilters
from .retrieval_method import RetrievalMethod

__all__ = [
    "CredentialFilters",
    "CredentialType",
    "RetrievalMethod",
]
