"""Catalyst Center adapter."""

from .client import CatalystCenterClient, CatalystCenterConfig

__all__ = [
    "CatalystCenterClient",
    "CatalystCenterConfig",
]
