"""Credential filter set value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Self

if TYPE_CHECKING:
    from ...application.ports import InputAccessor


@dataclass(frozen=True, slots=True)
class CredentialFilters:
    """
    Caller supplied filters for a global credential lookup.

    ``None`` means the filter was not supplied. The list filters
    (``credential_sub_type``, ``sort_by``, ``order``) and the lookup key
    (``id``) select different backend operations.
    """

    credential_sub_type: str | None = None
    sort_by: str | None = None
    order: str | None = None
    id: str | None = None

    @property
    def list_filter_flags(self) -> list[bool]:
        """Presence flags of the list filters, in declaration order."""
        return [
            self.credential_sub_type is not None,
            self.sort_by is not None,
            self.order is not None,
        ]

    @property
    def lookup_key_flags(self) -> list[bool]:
        """Presence flags of the lookup key."""
        return [self.id is not None]

    def to_query_params(self) -> dict[str, str]:
        """Build backend query parameters from the list filters that are present."""
        params: dict[str, str] = {}
        if self.credential_sub_type is not None:
            params["credentialSubType"] = self.credential_sub_type
        if self.sort_by is not None:
            params["sortBy"] = self.sort_by
        if self.order is not None:
            params["order"] = self.order
        return params

    @classmethod
    def from_accessor(cls, accessor: InputAccessor) -> Self:
        """Read every filter through an input accessor, honouring presence."""

        def _read(name: str) -> str | None:
            value, present = accessor.get_ok(name)
            return str(value) if present else None

        return cls(
            credential_sub_type=_read("credential_sub_type"),
            sort_by=_read("sort_by"),
            order=_read("order"),
            id=_read("id"),
        )
