"""Domain service shaping backend records into sparse output maps."""

from collections.abc import Sequence
from typing import Any

from ..entities import CredentialSubType, GlobalCredential


class CredentialNormalizer:
    """Domain service normalizing credential records for the output state."""

    def normalize_credentials(
        self, records: Sequence[GlobalCredential] | None
    ) -> list[dict[str, Any]] | None:
        """
        Normalize global credentials into sparse maps.

        Each map holds the common fields plus only the non-empty fields that
        apply to the record's credential type. Values are passed through
        untouched and input order is kept.

        Args:
            records: Records returned by the backend.

        Returns:
            One map per record, or None when there are no records.
        """
        if not records:
            return None
        return [record.to_variant().to_item() for record in records]

    def normalize_sub_type(
        self, record: CredentialSubType | None
    ) -> list[dict[str, Any]] | None:
        """Normalize a credential sub type record into a single-element list."""
        if record is None:
            return None
        return [record.to_item()]
