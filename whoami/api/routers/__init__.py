"""API router package for endpoint composition."""

from .bench import api_create_bench_router
from .data import api_create_data_router
from .echo import api_create_echo_router
from .health import api_create_health_router
from .identity import api_create_identity_router

__all__ = [
    "api_create_bench_router",
    "api_create_data_router",
    "api_create_echo_router",
    "api_create_health_router",
    "api_create_identity_router",
]
