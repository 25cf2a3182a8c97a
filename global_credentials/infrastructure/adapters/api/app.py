"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from fastapi import FastAPI, HTTPException, Query, status
from fastapi.responses import JSONResponse

from ....application.exceptions import BackendError, StateWriteError
from ....domain.exceptions import InvalidArgumentError
from ..schema import ResourceData
from .models import ErrorResponse, HealthResponse, LookupResponse

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from ....application.use_cases import ReadGlobalCredential

logger = logging.getLogger(__name__)


def create_app(
    use_case: ReadGlobalCredential,
    version: str = "1.0.0",
) -> FastAPI:
    """
    Create FastAPI application.

    Args:
        use_case: Use case performing the lookup.
        version: Application version string.

    Returns:
        Configured FastAPI application.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan handler."""
        logger.info("API server starting...")
        yield
        logger.info("API server shutting down...")

    app = FastAPI(
        title="Global Credential Lookup API",
        description="Read global credentials (CLI, SNMP, HTTP, NETCONF) from Catalyst Center. "
        "List filters take precedence over an id when both are supplied. "
        "**Password fields are masked in every response.**",
        version=version,
        lifespan=lifespan,
        responses={
            500: {"model": ErrorResponse, "description": "Internal server error"},
        },
    )

    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["Health"],
        summary="Health check",
        description="Check if the service is healthy and running.",
    )
    async def health_check() -> HealthResponse:
        return HealthResponse(
            status="healthy",
            version=version,
            timestamp=datetime.now(UTC),
        )

    @app.get(
        "/api/v1/global-credentials",
        response_model=LookupResponse,
        tags=["Discovery"],
        summary="Look up global credentials",
        description="List global credentials filtered by sub type and sorted, "
        "or return the credential sub type of a single id.",
        responses={
            400: {"model": ErrorResponse, "description": "Invalid input"},
            502: {"model": ErrorResponse, "description": "Backend failure"},
        },
    )
    async def lookup(
        credential_sub_type: str | None = Query(default=None),
        sort_by: str | None = Query(default=None),
        order: str | None = Query(default=None),
        credential_id: str | None = Query(default=None, alias="id"),
    ) -> LookupResponse:
        data = ResourceData(
            {
                "credential_sub_type": credential_sub_type,
                "sort_by": sort_by,
                "order": order,
                "id": credential_id,
            }
        )
        try:
            result = await use_case.execute(data, data)
        except InvalidArgumentError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
        except BackendError as e:
            logger.error("API: %s", e)
            raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e)) from e
        except StateWriteError as e:
            logger.error("API: %s", e)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)
            ) from e

        if not result.performed:
            return LookupResponse()

        rendered = data.to_dict()
        return LookupResponse(
            id=rendered["id"],
            method=str(result.method),
            item=rendered["item"],
            items=rendered["items"],
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request, exc: Exception) -> JSONResponse:  # noqa: ARG001
        """Handle uncaught exceptions."""
        logger.exception("Unhandled exception in API")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error", "detail": str(exc)},
        )

    return app
