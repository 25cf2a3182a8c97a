"""Domain entities - Objects with identity and lifecycle."""

from .credential import (
    CliCredential,
    CredentialIdentity,
    CredentialVariant,
    GlobalCredential,
    HttpCredential,
    NetconfCredential,
    SnmpV2ReadCommunityCredential,
    SnmpV2WriteCommunityCredential,
    SnmpV3Credential,
    UnknownCredential,
)
from .credential_sub_type import CredentialSubType

__all__ = [
    "CliCredential",
    "CredentialIdentity",
    "CredentialSubType",
    "CredentialVariant",
    "GlobalCredential",
    "HttpCredential",
    "NetconfCredential",
    "SnmpV2ReadCommunityCredential",
    "SnmpV2WriteCommunityCredential",
    "SnmpV3Credential",
    "UnknownCredential",
]
