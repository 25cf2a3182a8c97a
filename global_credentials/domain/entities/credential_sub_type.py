"""Credential sub type record returned by the lookup-by-id operation."""

from dataclasses import dataclass
from typing import Any, Self


@dataclass(frozen=True, slots=True)
class CredentialSubType:
    """Which credential kind a global credential id belongs to."""

    response: str
    version: str = ""

    def to_item(self) -> dict[str, Any]:
        return {"response": self.response, "version": self.version}

    @classmethod
    def from_api(cls, raw: dict[str, Any]) -> Self:
        """Factory method to create a CredentialSubType from a backend payload."""
        return cls(
            response=str(raw.get("response") or ""),
            version=str(raw.get("version") or ""),
        )
