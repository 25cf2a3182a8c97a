"""Application ports - Interfaces for external adapters."""

from .discovery_client import BackendResponse, DiscoveryClient
from .state_container import InputAccessor, StateContainer

__all__ = [
    "BackendResponse",
    "DiscoveryClient",
    "InputAccessor",
    "StateContainer",
]
