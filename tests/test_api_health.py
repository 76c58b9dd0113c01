"""Tests for the mutable health endpoint.

These tests validate status reporting, status replacement through POST and
rejection of malformed update bodies.
"""

from fastapi.testclient import TestClient

from whoami.api.application import create_api_application
from whoami.health import InMemoryHealthState
from whoami.identity import IdentityReporter


class _StaticNetworkIdentityService:
    """Test double returning fixed host and interface facts."""

    def identity_lookup_hostname(self) -> str:
        """Return deterministic hostname.

        Returns:
            str: Hostname.

        Raises:
            RuntimeError: Never raised by this test double.
        """

        return "probe-host"

    def identity_lookup_interface_addresses(self) -> list[str]:
        """Return deterministic addresses.

        Returns:
            list[str]: Interface addresses.

        Raises:
            RuntimeError: Never raised by this test double.
        """

        return ["127.0.0.1"]


def _build_client(health_state: InMemoryHealthState) -> TestClient:
    """Create a test client around the given health state.

    Returns:
        TestClient: Client bound to a fresh application.

    Raises:
        ValueError: Raised by the application factory on invalid dependencies.
    """

    identity_reporter = IdentityReporter(configured_name=None, network_identity=_StaticNetworkIdentityService())
    return TestClient(create_api_application(health_state, identity_reporter))


def test_api_health_returns_default_status_with_empty_body() -> None:
    """Return HTTP 200 and no body before any update.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when response does not match expected state.
    """

    client = _build_client(InMemoryHealthState())

    response = client.get("/health")

    assert response.status_code == 200
    assert response.content == b""


def test_api_health_post_replaces_status_for_subsequent_reads() -> None:
    """Report HTTP 503 after an orchestrator posts `503`.

    Returns:
        None: Assertions validate update and read-back behavior.

    Raises:
        AssertionError: Raised when the stored status is not reported.
    """

    health_state = InMemoryHealthState()
    client = _build_client(health_state)

    update_response = client.post("/health", content=b"503")
    read_response = client.get("/health")

    assert update_response.status_code == 200
    assert update_response.content == b""
    assert read_response.status_code == 503
    assert read_response.content == b""
    assert health_state.health_get_status() == 503


def test_api_health_non_post_methods_read_status() -> None:
    """Treat every method other than POST as a status read.

    Returns:
        None: Assertions validate method handling.

    Raises:
        AssertionError: Raised when a non-POST method changes behavior.
    """

    client = _build_client(InMemoryHealthState(initial_status_code=418))

    assert client.put("/health", content=b"200").status_code == 418
    assert client.delete("/health").status_code == 418


def test_api_health_rejects_malformed_body_and_keeps_state() -> None:
    """Return HTTP 400 with error text and leave the status untouched.

    Returns:
        None: Assertions validate error handling.

    Raises:
        AssertionError: Raised when a malformed body changes state.
    """

    health_state = InMemoryHealthState()
    client = _build_client(health_state)

    for body in (b"abc", b'"503"', b"503.5", b"", b"true", b"1" * 5000, b"[" * 100000):
        response = client.post("/health", content=body)

        assert response.status_code == 400
        assert response.headers["content-type"] == "text/plain; charset=utf-8"
        assert response.headers["x-content-type-options"] == "nosniff"
        assert response.text.endswith("\n")
        assert len(response.text.strip()) > 0

    assert health_state.health_get_status() == 200
    assert client.get("/health").status_code == 200
