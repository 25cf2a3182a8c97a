"""Use case for reading global credentials into a data source state."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any

from ...domain.entities import CredentialSubType, GlobalCredential
from ...domain.exceptions import InvalidArgumentError
from ...domain.services import CredentialNormalizer, MethodResolver
from ...domain.value_objects import CredentialFilters, RetrievalMethod
from ..exceptions import BackendError, StateWriteError, TransportError
from ..ports import BackendResponse, DiscoveryClient, InputAccessor, StateContainer

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ReadResult:
    """Result of the read use case."""

    method: RetrievalMethod | None
    value: list[dict[str, Any]] | None = None
    state_id: str | None = None

    @property
    def performed(self) -> bool:
        """False when no filter was supplied and nothing was requested."""
        return self.method is not None


def synthetic_id() -> str:
    """Non-semantic identifier for the result holder."""
    return str(time.time_ns())


class ReadGlobalCredential:
    """
    Use case reading global credentials from the backend.

    Resolves which operation the inputs ask for, calls the backend,
    normalizes the response and writes it into the state container.
    """

    def __init__(
        self,
        client: DiscoveryClient,
        *,
        resolver: MethodResolver | None = None,
        normalizer: CredentialNormalizer | None = None,
    ) -> None:
        """
        Initialize the use case.

        Args:
            client: Adapter for the discovery backend.
            resolver: Method resolver, defaults to the list-first rules.
            normalizer: Response normalizer.
        """
        self._client = client
        self._resolver = resolver or MethodResolver()
        self._normalizer = normalizer or CredentialNormalizer()

    async def execute(self, inputs: InputAccessor, state: StateContainer) -> ReadResult:
        """
        Execute the read use case.

        Returns:
            ReadResult with the selected method and the value written to state.
            When no filter is supplied the result has no method and the state
            is left untouched.

        Raises:
            InvalidArgumentError: If the credential id is empty.
            BackendError: If the backend call fails or returns no payload.
            StateWriteError: If the result cannot be written to state.
        """
        filters = CredentialFilters.from_accessor(inputs)
        method = self._resolver.resolve(filters)

        match method:
            case RetrievalMethod.GET_GLOBAL_CREDENTIALS:
                value = await self.list_credentials(filters)
            case RetrievalMethod.GET_CREDENTIAL_SUB_TYPE_BY_ID:
                value = await self.lookup_sub_type(filters.id or "")
            case _:
                logger.debug("No filter supplied, nothing to read")
                return ReadResult(method=None)

        try:
            state.set(method.output_field, value)
        except (TypeError, ValueError) as e:
            raise StateWriteError(str(method), method.output_field, str(e)) from e

        state_id = synthetic_id()
        state.set_id(state_id)
        return ReadResult(method=method, value=value, state_id=state_id)

    async def list_credentials(self, filters: CredentialFilters) -> list[dict[str, Any]] | None:
        """Fetch global credentials with the supplied list filters and normalize them."""
        operation = str(RetrievalMethod.GET_GLOBAL_CREDENTIALS)
        payload = await self._call(
            operation, self._client.get_global_credentials(filters.to_query_params())
        )

        if not isinstance(payload, dict):
            raise BackendError(operation, f"Failure at {operation}, unexpected response")

        entries = payload.get("response")
        if entries is not None and not isinstance(entries, list):
            raise BackendError(operation, f"Failure at {operation}, unexpected response")

        records = [GlobalCredential.from_api(entry) for entry in entries or [] if isinstance(entry, dict)]
        logger.info("Retrieved %d global credentials", len(records))
        return self._normalizer.normalize_credentials(records)

    async def lookup_sub_type(self, credential_id: str) -> list[dict[str, Any]] | None:
        """Fetch the credential sub type of a credential id and normalize it."""
        if not credential_id:
            msg = "Global credential id must be a non-empty string"
            raise InvalidArgumentError(msg)

        operation = str(RetrievalMethod.GET_CREDENTIAL_SUB_TYPE_BY_ID)
        payload = await self._call(
            operation, self._client.get_credential_sub_type_by_id(credential_id)
        )
        if not isinstance(payload, dict):
            raise BackendError(operation, f"Failure at {operation}, unexpected response")

        record = CredentialSubType.from_api(payload)
        logger.info("Retrieved credential sub type %s for %s", record.response, credential_id)
        return self._normalizer.normalize_sub_type(record)

    @staticmethod
    async def _call(operation: str, request: Any) -> Any:
        """Await a backend request, turning failures and empty payloads into BackendError."""
        try:
            response: BackendResponse = await request
        except TransportError as e:
            if e.raw_body:
                logger.debug("Retrieved error response %s", e.raw_body)
            raise BackendError(operation, str(e), raw_body=e.raw_body) from e

        if response.payload is None:
            if response.raw_body:
                logger.debug("Retrieved error response %s", response.raw_body)
            raise BackendError(
                operation,
                f"Failure at {operation}, unexpected response",
                raw_body=response.raw_body,
            )
        return response.payload
