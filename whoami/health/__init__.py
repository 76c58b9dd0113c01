"""Process-wide mutable health signal toggled by external orchestration."""

from .interfaces import HealthStatePort
from .locking import ReadWriteLock
from .state import (
    DEFAULT_HEALTH_STATUS_CODE,
    HealthStatusParseError,
    InMemoryHealthState,
    health_parse_status_code,
)

__all__ = [
    "DEFAULT_HEALTH_STATUS_CODE",
    "HealthStatePort",
    "HealthStatusParseError",
    "InMemoryHealthState",
    "ReadWriteLock",
    "health_parse_status_code",
]
