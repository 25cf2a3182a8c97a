"""Tests for the Catalyst Center client."""

from __future__ import annotations

import httpx
import pytest

from global_credentials.application.exceptions import TransportError
from global_credentials.infrastructure.adapters.catalyst_center import (
    CatalystCenterClient,
    CatalystCenterConfig,
)


@pytest.fixture
def config() -> CatalystCenterConfig:
    return CatalystCenterConfig(base_url="https://dnac.example.com/", username="admin", password="pw")


def _handler(requests: list[httpx.Request], *, status_code: int = 200, body: str | None = None):
    def handle(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        if request.url.path == CatalystCenterClient.AUTH_PATH:
            return httpx.Response(200, json={"Token": "tok"})
        if body is not None:
            return httpx.Response(status_code, text=body)
        return httpx.Response(status_code, json={"response": [], "version": "1.0"})

    return handle


class TestCatalystCenterConfig:
    """Tests for CatalystCenterConfig."""

    def test_defaults(self, config: CatalystCenterConfig) -> None:
        """TLS verification is on and timeout is 30s by default."""
        assert config.verify_ssl is True
        assert config.timeout == 30.0

    def test_config_is_frozen(self, config: CatalystCenterConfig) -> None:
        """Config should be immutable."""
        with pytest.raises(AttributeError):
            config.timeout = 5.0  # type: ignore[misc]


class TestCatalystCenterClient:
    """Tests for CatalystCenterClient."""

    @pytest.mark.asyncio
    async def test_list_sends_token_and_query(self, config: CatalystCenterConfig) -> None:
        """The list call authenticates then sends only the given query parameters."""
        requests: list[httpx.Request] = []
        client = CatalystCenterClient(config, transport=httpx.MockTransport(_handler(requests)))

        response = await client.get_global_credentials({"credentialSubType": "CLI"})

        assert response.payload == {"response": [], "version": "1.0"}
        auth, get = requests
        assert auth.method == "POST"
        assert auth.headers["Authorization"].startswith("Basic ")
        assert get.url.path == "/dna/intent/api/v1/global-credential"
        assert dict(get.url.params) == {"credentialSubType": "CLI"}
        assert get.headers["X-Auth-Token"] == "tok"

    @pytest.mark.asyncio
    async def test_token_is_cached(self, config: CatalystCenterConfig) -> None:
        """A second call reuses the token."""
        requests: list[httpx.Request] = []
        client = CatalystCenterClient(config, transport=httpx.MockTransport(_handler(requests)))

        await client.get_global_credentials({})
        await client.get_credential_sub_type_by_id("abc")

        assert [r.method for r in requests] == ["POST", "GET", "GET"]
        assert requests[-1].url.path == "/dna/intent/api/v1/global-credential/abc"

    @pytest.mark.asyncio
    async def test_empty_query_sends_no_params(self, config: CatalystCenterConfig) -> None:
        """No filters means no query string."""
        requests: list[httpx.Request] = []
        client = CatalystCenterClient(config, transport=httpx.MockTransport(_handler(requests)))

        await client.get_global_credentials({})

        assert requests[-1].url.query == b""

    @pytest.mark.asyncio
    async def test_http_error_raises_transport_error_with_body(self, config: CatalystCenterConfig) -> None:
        """Error statuses raise TransportError carrying the body."""
        requests: list[httpx.Request] = []
        transport = httpx.MockTransport(_handler(requests, status_code=404, body='{"message": "not found"}'))
        client = CatalystCenterClient(config, transport=transport)

        with pytest.raises(TransportError, match="404") as exc_info:
            await client.get_credential_sub_type_by_id("missing")

        assert exc_info.value.raw_body == '{"message": "not found"}'

    @pytest.mark.asyncio
    async def test_invalid_json_raises_transport_error(self, config: CatalystCenterConfig) -> None:
        """An unparseable body raises TransportError."""
        requests: list[httpx.Request] = []
        transport = httpx.MockTransport(_handler(requests, body="<html>oops</html>"))
        client = CatalystCenterClient(config, transport=transport)

        with pytest.raises(TransportError, match="Could not decode") as exc_info:
            await client.get_global_credentials({})

        assert exc_info.value.raw_body == "<html>oops</html>"

    @pytest.mark.asyncio
    async def test_empty_body_has_no_payload(self, config: CatalystCenterConfig) -> None:
        """An empty body yields a None payload."""
        requests: list[httpx.Request] = []
        client = CatalystCenterClient(config, transport=httpx.MockTransport(_handler(requests, body="")))

        response = await client.get_global_credentials({})

        assert response.payload is None

    @pytest.mark.asyncio
    async def test_network_error_raises_transport_error(self, config: CatalystCenterConfig) -> None:
        """Connection failures raise TransportError without a body."""

        def handle(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = CatalystCenterClient(config, transport=httpx.MockTransport(handle))

        with pytest.raises(TransportError) as exc_info:
            await client.get_global_credentials({})

        assert exc_info.value.raw_body is None

    @pytest.mark.asyncio
    async def test_missing_token_raises_transport_error(self, config: CatalystCenterConfig) -> None:
        """An auth response without a token is a transport failure."""

        def handle(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={})

        client = CatalystCenterClient(config, transport=httpx.MockTransport(handle))

        with pytest.raises(TransportError, match="token"):
            await client.get_global_credentials({})

    @pytest.mark.asyncio
    async def test_non_object_auth_response_raises_transport_error(self, config: CatalystCenterConfig) -> None:
        """A JSON auth body that is not an object is a transport failure."""

        def handle(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text='["not", "an", "object"]')

        client = CatalystCenterClient(config, transport=httpx.MockTransport(handle))

        with pytest.raises(TransportError, match="did not contain a token") as exc_info:
            await client.get_global_credentials({})

        assert exc_info.value.raw_body == '["not", "an", "object"]'

    @pytest.mark.asyncio
    async def test_undecodable_auth_response_raises_transport_error(self, config: CatalystCenterConfig) -> None:
        """A non-JSON auth body is reported as an authentication decode failure."""

        def handle(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>login</html>")

        client = CatalystCenterClient(config, transport=httpx.MockTransport(handle))

        with pytest.raises(TransportError, match="Could not decode authentication response") as exc_info:
            await client.get_global_credentials({})

        assert exc_info.value.raw_body == "<html>login</html>"
