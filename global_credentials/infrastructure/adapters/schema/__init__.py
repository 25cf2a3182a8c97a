"""Schema adapter: output models and the resource data state container."""

from .models import SENSITIVE_FIELDS, CredentialSubTypeItem, GlobalCredentialItem
from .resource_data import ResourceData

__all__ = [
    "SENSITIVE_FIELDS",
    "CredentialSubTypeItem",
    "GlobalCredentialItem",
    "ResourceData",
]
