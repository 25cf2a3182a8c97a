"""Port for the discovery backend - driven/secondary port."""

from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(frozen=True, slots=True)
class BackendResponse:
    """Decoded payload of a backend call plus its raw body for diagnostics."""

    payload: Any | None
    raw_body: str | None = None


class DiscoveryClient(Protocol):
    """
    Port for reading global credentials from the network-management backend.

    Implementations raise ``TransportError`` when the request fails or the
    payload cannot be decoded.
    """

    async def get_global_credentials(self, query: dict[str, str]) -> BackendResponse:
        """
        List global credentials.

        Args:
            query: Query parameters; only filters that were supplied are present.

        Returns:
            Backend response whose payload holds a ``response`` list.
        """
        ...

    async def get_credential_sub_type_by_id(self, credential_id: str) -> BackendResponse:
        """
        Look up the credential sub type of a global credential.

        Args:
            credential_id: Global credential id.

        Returns:
            Backend response whose payload holds ``response`` and ``version``.
        """
        ...
