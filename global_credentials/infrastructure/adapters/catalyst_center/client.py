"""Catalyst Center REST API client for the Discovery global credential endpoints."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, ClassVar
from urllib.parse import quote

import httpx

from ....application.exceptions import TransportError
from ....application.ports import BackendResponse

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CatalystCenterConfig:
    """Configuration for the Catalyst Center API client."""

    base_url: str
    username: str
    password: str
    verify_ssl: bool = True
    timeout: float = 30.0


class CatalystCenterClient:
    """
    Async client for the Catalyst Center intent API.

    Handles token authentication and the two global credential read
    operations. Implements the DiscoveryClient port.
    """

    AUTH_PATH: ClassVar[str] = "/dna/system/api/v1/auth/token"
    GLOBAL_CREDENTIAL_PATH: ClassVar[str] = "/dna/intent/api/v1/global-credential"
    TOKEN_HEADER: ClassVar[str] = "X-Auth-Token"

    def __init__(
        self,
        config: CatalystCenterConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            config: Connection settings.
            transport: Optional httpx transport, mainly for tests.
        """
        self._config = config
        self._transport = transport
        self._token: str | None = None

    async def get_global_credentials(self, query: dict[str, str]) -> BackendResponse:
        """GET the global credential list with the given query parameters."""
        logger.debug("Fetching global credentials with %s", sorted(query))
        return await self._get(self.GLOBAL_CREDENTIAL_PATH, params=query)

    async def get_credential_sub_type_by_id(self, credential_id: str) -> BackendResponse:
        """GET the credential sub type of a single global credential."""
        path = f"{self.GLOBAL_CREDENTIAL_PATH}/{quote(credential_id, safe='')}"
        logger.debug("Fetching credential sub type for %s", credential_id)
        return await self._get(path)

    def _new_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._config.base_url.rstrip("/"),
            timeout=self._config.timeout,
            verify=self._config.verify_ssl,
            transport=self._transport,
        )

    async def _acquire_token(self, client: httpx.AsyncClient) -> str:
        """Acquire an auth token with basic credentials, reusing a cached one."""
        if self._token:
            return self._token

        response = await client.post(
            self.AUTH_PATH,
            auth=(self._config.username, self._config.password),
            headers={"Content-Type": "application/json"},
        )
        response.raise_for_status()

        try:
            body: Any = response.json()
        except ValueError as e:
            msg = f"Could not decode authentication response: {e}"
            raise TransportError(msg, raw_body=response.text) from e

        token = body.get("Token") if isinstance(body, dict) else None
        if not token:
            msg = "Authentication response did not contain a token"
            raise TransportError(msg, raw_body=response.text)

        self._token = token
        return token

    async def _get(self, path: str, params: dict[str, str] | None = None) -> BackendResponse:
        """
        Perform an authenticated GET request.

        Args:
            path: API path relative to the base URL.
            params: Query parameters.

        Returns:
            BackendResponse with the decoded JSON payload, or a None payload
            when the body is empty.

        Raises:
            TransportError: If the request fails or the body is not JSON.
        """
        try:
            async with self._new_client() as client:
                token = await self._acquire_token(client)
                response = await client.get(
                    path,
                    params=params or None,
                    headers={
                        self.TOKEN_HEADER: token,
                        "Accept": "application/json",
                    },
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            if e.response.status_code == httpx.codes.UNAUTHORIZED:
                self._token = None
            msg = f"{e.response.status_code} {e.response.reason_phrase} from {e.request.url.path}"
            raise TransportError(msg, raw_body=e.response.text) from e
        except httpx.HTTPError as e:
            msg = f"Request to {path} failed: {e}"
            raise TransportError(msg) from e

        raw_body = response.text
        if not raw_body.strip():
            return BackendResponse(payload=None, raw_body=raw_body)

        try:
            payload: Any = response.json()
        except ValueError as e:
            msg = f"Could not decode response from {path}: {e}"
            raise TransportError(msg, raw_body=raw_body) from e

        return BackendResponse(payload=payload, raw_body=raw_body)
