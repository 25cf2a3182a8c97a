"""Output schema of the global credential data source."""

from pydantic import BaseModel, ConfigDict, Field, SecretStr


class GlobalCredentialItem(BaseModel):
    """One entry of the ``items`` output. Password fields are masked on display."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    comments: str | None = Field(default=None, description="Comments to identify the Global Credential")
    credential_type: str | None = Field(
        default=None, description="Credential type to identify the application that uses the Global credential"
    )
    description: str | None = Field(default=None, description="Description for Global Credential")
    id: str | None = Field(default=None, description="Id of the Global Credential")
    instance_tenant_id: str | None = Field(default=None, description="Instance Tenant Id of the Global Credential")
    instance_uuid: str | None = Field(default=None, description="Instance Uuid of the Global Credential")

    username: str | None = Field(default=None, description="CLI Username")
    password: SecretStr | None = Field(default=None, description="CLI Password")
    enable_password: SecretStr | None = Field(default=None, description="CLI Enable Password")
    auth_password: SecretStr | None = Field(default=None, description="SNMPV3 Auth Password")
    auth_type: str | None = Field(default=None, description="SNMPV3 Auth Type")
    privacy_password: SecretStr | None = Field(default=None, description="SNMPV3 Privacy Password")
    privacy_type: str | None = Field(default=None, description="SNMPV3 Privacy Type")
    snmp_mode: str | None = Field(default=None, description="SNMP Mode")
    read_community: str | None = Field(default=None, description="SNMP Read Community")
    write_community: str | None = Field(default=None, description="SNMP Write Community")
    port: int | None = Field(default=None, description="HTTP(S) port")
    secure: str | None = Field(default=None, description="Flag for HTTP(S)")
    netconf_port: str | None = Field(default=None, description="Netconf Port")


class CredentialSubTypeItem(BaseModel):
    """The single entry of the ``item`` output."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    response: str | None = Field(
        default=None,
        description="Credential type as 'CLICredential', 'HTTPReadCredential', 'HTTPWriteCredential', "
        "'NetconfCredential', 'SNMPv2ReadCommunity', 'SNMPv2WriteCommunity', 'SNMPv3Credential'",
    )
    version: str | None = None


SENSITIVE_FIELDS: frozenset[str] = frozenset(
    {"password", "enable_password", "auth_password", "privacy_password"}
)
