"""In-memory health status shared by all requests of the process."""

from __future__ import annotations

import json
import logging

from .interfaces import HealthStatePort
from .locking import ReadWriteLock

logger = logging.getLogger(__name__)

DEFAULT_HEALTH_STATUS_CODE = 200

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_JSON_DECODER = json.JSONDecoder()
_JSON_WHITESPACE = " \t\n\r"


class HealthStatusParseError(ValueError):
    """Raised when a health update body is not a JSON integer."""


class InMemoryHealthState(HealthStatePort):
    """Health status code held in process memory behind a reader/writer lock."""

    def __init__(self, initial_status_code: int = DEFAULT_HEALTH_STATUS_CODE):
        """Initialize health state.

        Args:
            initial_status_code: Status code reported until the first update.
        """

        self._lock = ReadWriteLock()
        self._status_code = initial_status_code

    def health_get_status(self) -> int:
        """Return the current status code under a shared lock.

        Returns:
            int: Last stored status code.

        Raises:
            RuntimeError: This implementation does not raise runtime errors.
        """

        with self._lock.read_locked():
            return self._status_code

    def health_set_status(self, status_code: int) -> None:
        """Replace the status code under an exclusive lock.

        Args:
            status_code: New status code; the range is not validated.

        Returns:
            None: The new value is visible to subsequent reads.

        Raises:
            RuntimeError: This implementation does not raise runtime errors.
        """

        with self._lock.write_locked():
            self._status_code = status_code
        logger.info("Update health check status code [%d]", status_code)


def health_parse_status_code(body: bytes) -> int:
    """Decode the first JSON value of a request body as a status code.

    Args:
        body: Raw request body. Data following the first JSON value is ignored.

    Returns:
        int: Decoded status code.

    Raises:
        HealthStatusParseError: Raised when the body is empty, not JSON, or not a
            JSON integer within the signed 64-bit range.
    """

    try:
        text = body.decode("utf-8")
    except UnicodeDecodeError as error:
        raise HealthStatusParseError(f"invalid character in request body: {error.reason}") from error

    document = text.lstrip(_JSON_WHITESPACE)
    if not document:
        raise HealthStatusParseError("EOF")
    try:
        value, _ = _JSON_DECODER.raw_decode(document)
    except json.JSONDecodeError as error:
        raise HealthStatusParseError(f"invalid JSON: {error.msg} at offset {error.pos}") from error
    except (ValueError, RecursionError) as error:
        raise HealthStatusParseError(f"invalid JSON: {error}") from error

    if isinstance(value, bool) or not isinstance(value, int):
        raise HealthStatusParseError(f"json: cannot unmarshal {_health_json_type_name(value)} into status code integer")
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise HealthStatusParseError(f"json: cannot unmarshal number {value} into status code integer")
    return value


def _health_json_type_name(value: object) -> str:
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return "null"
