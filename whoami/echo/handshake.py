"""Diagnosis of plain HTTP requests that reach the echo endpoint."""

from __future__ import annotations

from collections.abc import Mapping

from fastapi import status

WEBSOCKET_SUPPORTED_VERSION = "13"


def echo_describe_upgrade_failure(method: str, headers: Mapping[str, str]) -> tuple[int, str]:
    """Explain why a request could not be upgraded to a WebSocket.

    Args:
        method: HTTP method of the request.
        headers: Case-insensitive request headers.

    Returns:
        tuple[int, str]: HTTP status to answer with and the operator-facing reason.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if not _echo_header_has_token(headers.get("connection"), "upgrade"):
        return (
            status.HTTP_400_BAD_REQUEST,
            "websocket: the client is not using the websocket protocol: "
            "'upgrade' token not found in 'Connection' header",
        )
    if not _echo_header_has_token(headers.get("upgrade"), "websocket"):
        return (
            status.HTTP_400_BAD_REQUEST,
            "websocket: the client is not using the websocket protocol: "
            "'websocket' token not found in 'Upgrade' header",
        )
    if method != "GET":
        return status.HTTP_405_METHOD_NOT_ALLOWED, "websocket: the client is not using the websocket protocol: request method is not GET"
    if not _echo_header_has_token(headers.get("sec-websocket-version"), WEBSOCKET_SUPPORTED_VERSION):
        return (
            status.HTTP_400_BAD_REQUEST,
            "websocket: unsupported version: 13 not found in 'Sec-Websocket-Version' header",
        )
    if not (headers.get("sec-websocket-key") or "").strip():
        return status.HTTP_400_BAD_REQUEST, "websocket: not a websocket handshake: 'Sec-WebSocket-Key' header is missing or blank"
    return status.HTTP_400_BAD_REQUEST, "websocket: upgrade was not negotiated by the server"


def _echo_header_has_token(value: str | None, token: str) -> bool:
    if not value:
        return False
    return any(part.strip().lower() == token for part in value.split(","))
