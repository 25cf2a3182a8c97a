"""Test doubles for application ports."""

from __future__ import annotations

from typing import Any

from global_credentials.application.exceptions import TransportError
from global_credentials.application.ports import BackendResponse


class FakeDiscoveryClient:
    """In-memory DiscoveryClient recording every call."""

    def __init__(
        self,
        *,
        list_response: BackendResponse | None = None,
        sub_type_response: BackendResponse | None = None,
        error: TransportError | None = None,
    ) -> None:
        self.list_response = list_response or BackendResponse(payload={"response": []})
        self.sub_type_response = sub_type_response or BackendResponse(
            payload={"response": "CLICredential", "version": "1.0"}
        )
        self.error = error
        self.calls: list[tuple[str, Any]] = []

    async def get_global_credentials(self, query: dict[str, str]) -> BackendResponse:
        self.calls.append(("get_global_credentials", query))
        if self.error:
            raise self.error
        return self.list_response

    async def get_credential_sub_type_by_id(self, credential_id: str) -> BackendResponse:
        self.calls.append(("get_credential_sub_type_by_id", credential_id))
        if self.error:
            raise self.error
        return self.sub_type_response
