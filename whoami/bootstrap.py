"""Application bootstrap wiring for dependency assembly."""

from fastapi import FastAPI

from whoami.api import create_api_application
from whoami.config import AppSettings
from whoami.health import InMemoryHealthState
from whoami.identity import IdentityReporter, PsutilNetworkIdentityService


def bootstrap_create_application(settings: AppSettings) -> FastAPI:
    """Assemble the runtime application from validated settings.

    Args:
        settings: Validated startup settings.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        ValueError: Raised when settings is None.
    """

    if settings is None:
        raise ValueError("settings must not be None")

    health_state = InMemoryHealthState()
    identity_reporter = IdentityReporter(
        configured_name=settings.whoami_name,
        network_identity=PsutilNetworkIdentityService(),
    )
    return create_api_application(health_state=health_state, identity_reporter=identity_reporter)
