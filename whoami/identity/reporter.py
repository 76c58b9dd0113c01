"""Identity report assembly and rendering.

Two renderings exist: a line-oriented text report followed by the raw
request, and a structured record where empty fields are omitted.
"""

from __future__ import annotations

from .interfaces import IdentityFacts, NetworkIdentityPort, RequestMetadata

_RAW_REQUEST_LEADING_HEADERS = ("host", "user-agent")


class IdentityReporter:
    """Collect and render identity facts for inbound requests."""

    def __init__(self, configured_name: str | None, network_identity: NetworkIdentityPort):
        """Initialize the reporter.

        Args:
            configured_name: Display name fixed for the process lifetime.
            network_identity: Lookup service for hostname and interface addresses.

        Raises:
            ValueError: Raised when network_identity is None.
        """

        if network_identity is None:
            raise ValueError("network_identity must not be None")
        self._configured_name = (configured_name or "").strip() or None
        self._network_identity = network_identity

    @property
    def configured_name(self) -> str | None:
        """Return the display name injected at startup."""

        return self._configured_name

    def identity_collect(self, request: RequestMetadata) -> IdentityFacts:
        """Gather a fresh identity snapshot for one request.

        Args:
            request: Metadata of the request being answered.

        Returns:
            IdentityFacts: Hostname, configured name, addresses and request metadata.

        Raises:
            RuntimeError: Lookups are best effort and never raise.
        """

        return IdentityFacts(
            hostname=self._network_identity.identity_lookup_hostname(),
            configured_name=self._configured_name,
            interface_addresses=tuple(self._network_identity.identity_lookup_interface_addresses()),
            request=request,
        )

    def identity_render_text(self, facts: IdentityFacts) -> str:
        """Render the text report followed by the raw request.

        Args:
            facts: Identity snapshot to render.

        Returns:
            str: One fact per line, then the request line, headers and body.

        Raises:
            RuntimeError: This renderer does not raise runtime errors.
        """

        lines: list[str] = []
        if facts.configured_name:
            lines.append(f"Name: {facts.configured_name}\n")
        lines.append(f"Hostname: {facts.hostname}\n")
        for address in facts.interface_addresses:
            lines.append(f"IP: {address}\n")
        if facts.request is not None:
            lines.append(f"RemoteAddr: {facts.request.remote_address}\n")
            lines.append(identity_render_raw_request(facts.request))
        return "".join(lines)

    def identity_render_structured(self, facts: IdentityFacts) -> dict[str, object]:
        """Render the machine-readable identity record.

        Args:
            facts: Identity snapshot to render.

        Returns:
            dict[str, object]: Record with keys hostname, ip, headers, url, host,
            method and name; empty values are left out.

        Raises:
            RuntimeError: This renderer does not raise runtime errors.
        """

        request = facts.request
        record: dict[str, object] = {
            "hostname": facts.hostname,
            "ip": list(facts.interface_addresses),
            "headers": identity_group_headers(request.headers) if request else {},
            "url": request.request_uri if request else "",
            "host": request.host if request else "",
            "method": request.method if request else "",
            "name": facts.configured_name or "",
        }
        return {key: value for key, value in record.items() if value}


def identity_render_raw_request(request: RequestMetadata) -> str:
    """Serialize a request back to HTTP/1.1 wire form.

    Args:
        request: Request metadata to serialize.

    Returns:
        str: Request line, `Host`, `User-Agent`, remaining headers sorted by
        canonical name, a blank line and the body.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    lines = [f"{request.method} {request.request_uri} {request.protocol}\r\n", f"Host: {request.host}\r\n"]
    for name, value in request.headers:
        if name.lower() == "user-agent":
            lines.append(f"User-Agent: {value}\r\n")

    remaining_headers = [
        (identity_canonical_header_name(name), value)
        for name, value in request.headers
        if name.lower() not in _RAW_REQUEST_LEADING_HEADERS
    ]
    remaining_headers.sort(key=lambda header: header[0])
    for name, value in remaining_headers:
        lines.append(f"{name}: {value}\r\n")
    lines.append("\r\n")
    lines.append(request.body.decode("utf-8", errors="replace"))
    return "".join(lines)


def identity_group_headers(headers: tuple[tuple[str, str], ...]) -> dict[str, list[str]]:
    """Group header values by canonical name, excluding `Host`.

    Args:
        headers: Header pairs in arrival order.

    Returns:
        dict[str, list[str]]: Canonical header name to values in arrival order.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    grouped: dict[str, list[str]] = {}
    for name, value in headers:
        if name.lower() == "host":
            continue
        grouped.setdefault(identity_canonical_header_name(name), []).append(value)
    return grouped


def identity_canonical_header_name(name: str) -> str:
    """Return the MIME canonical form of a header name (`content-type` -> `Content-Type`)."""

    return "-".join(part[:1].upper() + part[1:].lower() for part in name.split("-"))


def identity_format_remote_address(host: str | None, port: int | None) -> str:
    """Format a peer address as `host:port`, bracketing IPv6 hosts.

    Args:
        host: Peer host, or None when unknown.
        port: Peer port, or None when unknown.

    Returns:
        str: Formatted address, empty when the host is unknown.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if not host:
        return ""
    rendered_host = f"[{host}]" if ":" in host else host
    if port is None:
        return rendered_host
    return f"{rendered_host}:{port}"
