#!/usr/bin/env python3
"""
Global Credential Lookup

Composition root and application entry point.
Wires together all layers following hexagonal architecture principles.
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys

from .application.exceptions import ApplicationError
from .application.use_cases import ReadGlobalCredential, ReadResult
from .domain.exceptions import DomainError
from .infrastructure.adapters import CatalystCenterClient, ResourceData
from .infrastructure.config import Settings, load_settings

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)

# Application version
__version__ = "1.0.0"


class ApplicationContainer:
    """
    Dependency injection container.

    Responsible for creating and wiring all application components.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize container with settings."""
        self._settings = settings

    def create_discovery_client(self) -> CatalystCenterClient:
        """Create the Catalyst Center client adapter."""
        return CatalystCenterClient(self._settings.catalyst_center_config)

    def create_read_use_case(self) -> ReadGlobalCredential:
        """Create the lookup use case with all dependencies."""
        return ReadGlobalCredential(self.create_discovery_client())


class Application:
    """
    Main application orchestrator.

    Handles run modes (single lookup or API) and lifecycle.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize application with settings."""
        self._settings = settings
        self._container = ApplicationContainer(settings)

    async def run_once(self) -> tuple[ReadResult, ResourceData]:
        """Execute a single lookup with the filters from the environment."""
        data = ResourceData(self._settings.lookup_inputs)
        use_case = self._container.create_read_use_case()
        result = await use_case.execute(data, data)
        return result, data

    async def run_api(self) -> None:
        """Run in API server mode on the current event loop."""
        import uvicorn

        from .infrastructure.adapters.api import create_app

        logger.info(
            "Starting API server on %s:%d",
            self._settings.api_host,
            self._settings.api_port,
        )

        app = create_app(
            use_case=self._container.create_read_use_case(),
            version=__version__,
        )

        config = uvicorn.Config(
            app,
            host=self._settings.api_host,
            port=self._settings.api_port,
            log_level=self._settings.log_level.lower(),
        )
        await uvicorn.Server(config).serve()

    async def run(self) -> int:
        """
        Run the application based on configuration.

        Returns:
            Exit code (0 for success, 1 for failure).
        """
        if self._settings.api_enabled:
            await self.run_api()
            return 0

        logger.info("Running in single-execution mode")
        try:
            result, data = await self.run_once()
        except (ApplicationError, DomainError) as e:
            logger.error("Lookup failed: %s", e)
            return 1

        if not result.performed:
            logger.warning(
                "No filter supplied; set CREDENTIAL_SUB_TYPE, SORT_BY, ORDER or CREDENTIAL_ID"
            )
            return 0

        print(json.dumps(data.to_dict(), indent=2))  # noqa: T201
        return 0


async def async_main() -> int:
    """Async entry point."""
    try:
        logger.info("Global Credential Lookup starting...")

        settings = load_settings()
        logging.getLogger().setLevel(settings.log_level.upper())

        app = Application(settings)
        return await app.run()

    except ValueError as e:
        logger.error("Configuration error: %s", e)
        return 1
    except KeyboardInterrupt:
        logger.info("Shutting down...")
        return 0
    except Exception:
        logger.exception("Unexpected error")
        return 1


def main() -> None:
    """Main entry point."""
    exit_code = asyncio.run(async_main())
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
