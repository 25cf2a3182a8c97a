"""Credential type value object."""

from enum import StrEnum


class CredentialType(StrEnum):
    """Discriminant of a global credential record."""

    CLI = "CLI"
    SNMPV3 = "SNMPV3"
    SNMPV2_READ_COMMUNITY = "SNMPV2_READ_COMMUNITY"
    SNMPV2_WRITE_COMMUNITY = "SNMPV2_WRITE_COMMUNITY"
    HTTP_READ = "HTTP_READ"
    HTTP_WRITE = "HTTP_WRITE"
    NETCONF = "NETCONF"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: str) -> "CredentialType | None":
        """Return the matching member, or None for unknown kinds."""
        try:
            return cls(value)
        except ValueError:
            return None
