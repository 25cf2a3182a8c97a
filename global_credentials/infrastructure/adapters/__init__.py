"""Infrastructure adapters - Implementations of application ports."""

from .catalyst_center import CatalystCenterClient, CatalystCenterConfig
from .schema import ResourceData

__all__ = [
    "CatalystCenterClient",
    "CatalystCenterConfig",
    "ResourceData",
]
