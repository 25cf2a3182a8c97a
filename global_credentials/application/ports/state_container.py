"""Ports for reading inputs and writing outputs of a data source."""

from typing import Any, Protocol


class InputAccessor(Protocol):
    """Port supplying caller inputs by name."""

    def get_ok(self, name: str) -> tuple[Any, bool]:
        """
        Get an input value and whether it was supplied.

        Returns:
            ``(value, present)``; ``present`` is False when the input was omitted.
        """
        ...


class StateContainer(Protocol):
    """Port receiving normalized results."""

    def set(self, field_name: str, value: Any) -> None:
        """
        Store a top-level output field.

        Raises:
            ValueError: If the value does not fit the field's schema.
        """
        ...

    def set_id(self, value: str) -> None:
        """Store the synthetic identifier of the result."""
        ...
