"""In-memory resource data: inputs of a lookup and its computed outputs."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, ClassVar

from pydantic import BaseModel, SecretStr, TypeAdapter

from .models import CredentialSubTypeItem, GlobalCredentialItem

logger = logging.getLogger(__name__)


class ResourceData:
    """
    State container of the global credential data source.

    Holds the caller's inputs and validates every computed output against
    its schema. Implements the InputAccessor and StateContainer ports.
    """

    INPUT_FIELDS: ClassVar[tuple[str, ...]] = ("credential_sub_type", "id", "order", "sort_by")
    OUTPUT_SCHEMAS: ClassVar[dict[str, TypeAdapter]] = {
        "items": TypeAdapter(list[GlobalCredentialItem] | None),
        "item": TypeAdapter(list[CredentialSubTypeItem] | None),
    }

    def __init__(self, inputs: Mapping[str, Any] | None = None) -> None:
        """
        Initialize with caller inputs.

        Args:
            inputs: Input values by name; None or empty string means not set.
        """
        unknown = set(inputs or {}) - set(self.INPUT_FIELDS)
        if unknown:
            msg = f"Unsupported input fields: {', '.join(sorted(unknown))}"
            raise ValueError(msg)

        self._inputs = dict(inputs or {})
        self._outputs: dict[str, list[BaseModel] | None] = {}
        self._id: str = ""

    @property
    def id(self) -> str:
        return self._id

    def get_ok(self, name: str) -> tuple[Any, bool]:
        """Return the input value and whether it is set to a non-zero value."""
        value = self._inputs.get(name)
        return value, value not in (None, "")

    def set(self, field_name: str, value: Any) -> None:
        """
        Validate and store an output field.

        Raises:
            ValueError: If the field is unknown or the value does not match its schema.
        """
        adapter = self.OUTPUT_SCHEMAS.get(field_name)
        if adapter is None:
            msg = f"Invalid address to set: {field_name}"
            raise ValueError(msg)
        self._outputs[field_name] = adapter.validate_python(value)

    def set_id(self, value: str) -> None:
        self._id = value

    def get(self, field_name: str) -> list[BaseModel] | None:
        return self._outputs.get(field_name)

    def to_dict(self, *, reveal_sensitive: bool = False) -> dict[str, Any]:
        """
        Render the state as plain data.

        Output entries only contain the fields that were set. Sensitive
        values are masked unless ``reveal_sensitive`` is True.
        """
        rendered: dict[str, Any] = {"id": self._id}
        for name in self.INPUT_FIELDS:
            if name != "id" and self.get_ok(name)[1]:
                rendered[name] = self._inputs[name]
        for name in self.OUTPUT_SCHEMAS:
            entries = self._outputs.get(name)
            rendered[name] = (
                None
                if entries is None
                else [self._render_entry(entry, reveal_sensitive=reveal_sensitive) for entry in entries]
            )
        return rendered

    @staticmethod
    def _render_entry(entry: BaseModel, *, reveal_sensitive: bool) -> dict[str, Any]:
        data = entry.model_dump(exclude_unset=True)
        for key, value in data.items():
            if isinstance(value, SecretStr):
                data[key] = value.get_secret_value() if reveal_sensitive else str(value)
        return data
