"""Application use cases."""

from .read_global_credential import ReadGlobalCredential, ReadResult

__all__ = [
    "ReadGlobalCredential",
    "ReadResult",
]
