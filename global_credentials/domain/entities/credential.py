"""Global credential entity and its per-kind variants."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Self

from ..value_objects import CredentialType


def _sparse(**fields: Any) -> dict[str, Any]:
    """Keep only fields carrying a value; empty strings and zero ports are dropped."""
    return {name: value for name, value in fields.items() if value not in (None, "", 0)}


def _as_str(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _as_port(value: Any) -> int | None:
    if value is None or value == "" or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return int(number) if number.is_integer() else None


@dataclass(frozen=True, slots=True)
class CredentialIdentity:
    """Fields shared by every credential kind."""

    id: str
    credential_type: str
    comments: str = ""
    description: str = ""
    instance_tenant_id: str = ""
    instance_uuid: str = ""

    def to_item(self) -> dict[str, Any]:
        """Common fields are always emitted, even when empty."""
        return {
            "comments": self.comments,
            "credential_type": self.credential_type,
            "description": self.description,
            "id": self.id,
            "instance_tenant_id": self.instance_tenant_id,
            "instance_uuid": self.instance_uuid,
        }


@dataclass(frozen=True, slots=True)
class CliCredential:
    """CLI credential (SSH/Telnet login)."""

    identity: CredentialIdentity
    username: str = ""
    password: str = ""
    enable_password: str = ""

    def to_item(self) -> dict[str, Any]:
        return self.identity.to_item() | _sparse(
            username=self.username,
            password=self.password,
            enable_password=self.enable_password,
        )


@dataclass(frozen=True, slots=True)
class SnmpV3Credential:
    """SNMPv3 user credential."""

    identity: CredentialIdentity
    username: str = ""
    auth_password: str = ""
    auth_type: str = ""
    privacy_password: str = ""
    privacy_type: str = ""
    snmp_mode: str = ""

    def to_item(self) -> dict[str, Any]:
        return self.identity.to_item() | _sparse(
            username=self.username,
            auth_password=self.auth_password,
            auth_type=self.auth_type,
            privacy_password=self.privacy_password,
            privacy_type=self.privacy_type,
            snmp_mode=self.snmp_mode,
        )


@dataclass(frozen=True, slots=True)
class SnmpV2ReadCommunityCredential:
    """SNMPv2c read community."""

    identity: CredentialIdentity
    read_community: str = ""

    def to_item(self) -> dict[str, Any]:
        return self.identity.to_item() | _sparse(read_community=self.read_community)


@dataclass(frozen=True, slots=True)
class SnmpV2WriteCommunityCredential:
    """SNMPv2c write community."""

    identity: CredentialIdentity
    write_community: str = ""

    def to_item(self) -> dict[str, Any]:
        return self.identity.to_item() | _sparse(write_community=self.write_community)


@dataclass(frozen=True, slots=True)
class HttpCredential:
    """HTTP(S) read or write credential."""

    identity: CredentialIdentity
    username: str = ""
    password: str = ""
    port: int | None = None
    secure: str = ""

    def to_item(self) -> dict[str, Any]:
        return self.identity.to_item() | _sparse(
            username=self.username,
            password=self.password,
            port=self.port,
            secure=self.secure,
        )


@dataclass(frozen=True, slots=True)
class NetconfCredential:
    """NETCONF credential."""

    identity: CredentialIdentity
    netconf_port: str = ""

    def to_item(self) -> dict[str, Any]:
        return self.identity.to_item() | _sparse(netconf_port=self.netconf_port)


@dataclass(frozen=True, slots=True)
class UnknownCredential:
    """Credential of a kind this package does not know; keeps every non-empty field."""

    identity: CredentialIdentity
    username: str = ""
    password: str = ""
    enable_password: str = ""
    netconf_port: str = ""
    read_community: str = ""
    write_community: str = ""
    auth_password: str = ""
    auth_type: str = ""
    privacy_password: str = ""
    privacy_type: str = ""
    snmp_mode: str = ""
    secure: str = ""
    port: int | None = None

    def to_item(self) -> dict[str, Any]:
        return self.identity.to_item() | _sparse(
            username=self.username,
            password=self.password,
            enable_password=self.enable_password,
            netconf_port=self.netconf_port,
            read_community=self.read_community,
            write_community=self.write_community,
            auth_password=self.auth_password,
            auth_type=self.auth_type,
            privacy_password=self.privacy_password,
            privacy_type=self.privacy_type,
            snmp_mode=self.snmp_mode,
            secure=self.secure,
            port=self.port,
        )


CredentialVariant = (
    CliCredential
    | SnmpV3Credential
    | SnmpV2ReadCommunityCredential
    | SnmpV2WriteCommunityCredential
    | HttpCredential
    | NetconfCredential
    | UnknownCredential
)


@dataclass(frozen=True, slots=True)
class GlobalCredential:
    """
    A global credential as returned by the backend.

    Carries the full superset of type-specific fields; only the subset that
    applies to ``credential_type`` is meaningful. Use ``to_variant`` to get
    the typed view.
    """

    id: str
    credential_type: str
    comments: str = ""
    description: str = ""
    instance_tenant_id: str = ""
    instance_uuid: str = ""
    username: str = ""
    password: str = ""
    enable_password: str = ""
    auth_password: str = ""
    auth_type: str = ""
    privacy_password: str = ""
    privacy_type: str = ""
    snmp_mode: str = ""
    read_community: str = ""
    write_community: str = ""
    port: int | None = None
    secure: str = ""
    netconf_port: str = ""

    @property
    def identity(self) -> CredentialIdentity:
        return CredentialIdentity(
            id=self.id,
            credential_type=self.credential_type,
            comments=self.comments,
            description=self.description,
            instance_tenant_id=self.instance_tenant_id,
            instance_uuid=self.instance_uuid,
        )

    def to_variant(self) -> CredentialVariant:
        """Project this record onto the variant matching its discriminant."""
        identity = self.identity
        match CredentialType.parse(self.credential_type):
            case CredentialType.CLI:
                return CliCredential(
                    identity,
                    username=self.username,
                    password=self.password,
                    enable_password=self.enable_password,
                )
            case CredentialType.SNMPV3:
                return SnmpV3Credential(
                    identity,
                    username=self.username,
                    auth_password=self.auth_password,
                    auth_type=self.auth_type,
                    privacy_password=self.privacy_password,
                    privacy_type=self.privacy_type,
                    snmp_mode=self.snmp_mode,
                )
            case CredentialType.SNMPV2_READ_COMMUNITY:
                return SnmpV2ReadCommunityCredential(identity, read_community=self.read_community)
            case CredentialType.SNMPV2_WRITE_COMMUNITY:
                return SnmpV2WriteCommunityCredential(identity, write_community=self.write_community)
            case CredentialType.HTTP_READ | CredentialType.HTTP_WRITE:
                return HttpCredential(
                    identity,
                    username=self.username,
                    password=self.password,
                    port=self.port,
                    secure=self.secure,
                )
            case CredentialType.NETCONF:
                return NetconfCredential(identity, netconf_port=self.netconf_port)
            case _:
                return UnknownCredential(
                    identity,
                    username=self.username,
                    password=self.password,
                    enable_password=self.enable_password,
                    netconf_port=self.netconf_port,
                    read_community=self.read_community,
                    write_community=self.write_community,
                    auth_password=self.auth_password,
                    auth_type=self.auth_type,
                    privacy_password=self.privacy_password,
                    privacy_type=self.privacy_type,
                    snmp_mode=self.snmp_mode,
                    secure=self.secure,
                    port=self.port,
                )

    @classmethod
    def from_api(cls, raw: dict[str, Any]) -> Self:
        """Factory method to create a GlobalCredential from a backend payload entry."""
        return cls(
            id=_as_str(raw.get("id")),
            credential_type=_as_str(raw.get("credentialType")),
            comments=_as_str(raw.get("comments")),
            description=_as_str(raw.get("description")),
            instance_tenant_id=_as_str(raw.get("instanceTenantId")),
            instance_uuid=_as_str(raw.get("instanceUuid")),
            username=_as_str(raw.get("username")),
            password=_as_str(raw.get("password")),
            enable_password=_as_str(raw.get("enablePassword")),
            auth_password=_as_str(raw.get("authPassword")),
            auth_type=_as_str(raw.get("authType")),
            privacy_password=_as_str(raw.get("privacyPassword")),
            privacy_type=_as_str(raw.get("privacyType")),
            snmp_mode=_as_str(raw.get("snmpMode")),
            read_community=_as_str(raw.get("readCommunity")),
            write_community=_as_str(raw.get("writeCommunity")),
            port=_as_port(raw.get("port")),
            secure=_as_str(raw.get("secure")),
            netconf_port=_as_str(raw.get("netconfPort")),
        )
