"""Typed interfaces and contracts for identity reporting."""

from dataclasses import dataclass, field
from typing import Protocol


@dataclass(frozen=True)
class RequestMetadata:
    """Inbound request facts copied verbatim for reporting.

    Attributes:
        remote_address: Peer address formatted as `host:port`.
        method: HTTP method.
        request_uri: Undecoded path plus query string.
        host: Value of the `Host` header.
        protocol: Protocol label such as `HTTP/1.1`.
        headers: Header pairs in arrival order, duplicates preserved.
        body: Raw request body.
    """

    remote_address: str
    method: str
    request_uri: str
    host: str
    protocol: str = "HTTP/1.1"
    headers: tuple[tuple[str, str], ...] = ()
    body: bytes = b""


@dataclass(frozen=True)
class IdentityFacts:
    """Snapshot of process and network identity for one request.

    Attributes:
        hostname: Process hostname, empty when the lookup failed.
        configured_name: Display name injected at startup, if any.
        interface_addresses: Local IP addresses in interface order.
        request: Metadata of the request being answered.
    """

    hostname: str
    configured_name: str | None
    interface_addresses: tuple[str, ...] = field(default_factory=tuple)
    request: RequestMetadata | None = None


class NetworkIdentityPort(Protocol):
    """Port definition for best-effort host and interface lookups."""

    def identity_lookup_hostname(self) -> str:
        """Return the process hostname.

        Returns:
            str: Hostname, or an empty string when the lookup fails.

        Raises:
            RuntimeError: Implementations must not raise lookup failures.
        """

    def identity_lookup_interface_addresses(self) -> list[str]:
        """Return IP addresses bound to local interfaces.

        Returns:
            list[str]: Address strings; interfaces that cannot be read are skipped.

        Raises:
            RuntimeError: Implementations must not raise lookup failures.
        """
