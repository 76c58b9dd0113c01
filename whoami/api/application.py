"""FastAPI application factory for the probe service."""

from fastapi import FastAPI

from whoami.health import HealthStatePort
from whoami.identity import IdentityReporter

from .middleware import RequestLoggingMiddleware
from .routers import (
    api_create_bench_router,
    api_create_data_router,
    api_create_echo_router,
    api_create_health_router,
    api_create_identity_router,
)


def create_api_application(health_state: HealthStatePort, identity_reporter: IdentityReporter) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Documentation routes are disabled so that every unmatched path reaches the
    identity report.

    Args:
        health_state: Shared health state toggled through `/health`.
        identity_reporter: Reporter used by `/`, `/api` and unmatched paths.

    Returns:
        FastAPI: Framework application with all probe routes.

    Raises:
        ValueError: Raised when a dependency is None.
    """

    application = FastAPI(title="whoami", docs_url=None, redoc_url=None, openapi_url=None)
    application.add_middleware(RequestLoggingMiddleware)

    application.include_router(api_create_health_router(health_state=health_state))
    application.include_router(api_create_data_router())
    application.include_router(api_create_echo_router())
    application.include_router(api_create_bench_router())
    application.include_router(api_create_identity_router(identity_reporter=identity_reporter))

    return application
