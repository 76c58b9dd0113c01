"""Identity routers answering `/api`, `/` and every otherwise unmatched path."""

from __future__ import annotations

import asyncio

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, Response
from starlette.concurrency import run_in_threadpool

from whoami.domain import domain_parse_duration
from whoami.identity import IdentityReporter, RequestMetadata, identity_format_remote_address

from ..query import api_first_query_value
from ..responses import ANY_HTTP_METHOD, PLAIN_TEXT_MEDIA_TYPE


def api_create_identity_router(identity_reporter: IdentityReporter) -> APIRouter:
    """Create identity router with text and structured renderings.

    The text handler is registered on a catch-all path, so any path without a
    dedicated route is answered with the identity report instead of a 404.
    Include this router after every other router.

    Args:
        identity_reporter: Reporter holding the configured name and lookups.

    Returns:
        APIRouter: Router exposing `/api` and the catch-all text report.

    Raises:
        ValueError: Raised when identity_reporter is None.
    """

    if identity_reporter is None:
        raise ValueError("identity_reporter must not be None")

    router = APIRouter(tags=["identity"])

    @router.api_route("/api", methods=ANY_HTTP_METHOD)
    async def api_identity_structured(request: Request) -> JSONResponse:
        """Return the identity record as JSON.

        Args:
            request: Inbound request whose metadata is reported.

        Returns:
            JSONResponse: Identity record with empty fields omitted.

        Raises:
            RuntimeError: Lookups are best effort and never raise.
        """

        request_metadata = await api_build_request_metadata(request, include_body=False)
        facts = await run_in_threadpool(identity_reporter.identity_collect, request_metadata)
        return JSONResponse(content=identity_reporter.identity_render_structured(facts))

    @router.api_route("/{request_path:path}", methods=ANY_HTTP_METHOD)
    async def api_identity_text(request: Request, request_path: str) -> Response:
        """Return the text identity report followed by the raw request.

        Args:
            request: Inbound request; an optional `wait` duration delays the answer.
            request_path: Matched path, unused beyond routing.

        Returns:
            Response: Plain-text identity report.

        Raises:
            RuntimeError: Lookups are best effort and never raise.
        """

        _ = request_path
        wait_seconds = domain_parse_duration(api_first_query_value(request.query_params, "wait"))
        if wait_seconds is not None and wait_seconds > 0:
            await asyncio.sleep(wait_seconds)

        request_metadata = await api_build_request_metadata(request, include_body=True)
        facts = await run_in_threadpool(identity_reporter.identity_collect, request_metadata)
        return Response(
            content=identity_reporter.identity_render_text(facts),
            headers={"Content-Type": PLAIN_TEXT_MEDIA_TYPE},
        )

    return router


async def api_build_request_metadata(request: Request, include_body: bool) -> RequestMetadata:
    """Copy reportable request facts from the ASGI scope.

    Args:
        request: Inbound request.
        include_body: Whether to read and keep the request body.

    Returns:
        RequestMetadata: Verbatim request metadata.

    Raises:
        RuntimeError: Raised if the request body cannot be read.
    """

    raw_path = request.scope.get("raw_path") or request.url.path.encode("utf-8")
    request_uri = raw_path.split(b"?", 1)[0].decode("latin-1")
    query_string = request.scope.get("query_string", b"").decode("latin-1")
    if query_string:
        request_uri = f"{request_uri}?{query_string}"

    remote_address = ""
    if request.client is not None:
        remote_address = identity_format_remote_address(request.client.host, request.client.port)

    return RequestMetadata(
        remote_address=remote_address,
        method=request.method,
        request_uri=request_uri,
        host=request.headers.get("host", ""),
        protocol=f"HTTP/{request.scope.get('http_version', '1.1')}",
        headers=tuple(request.headers.items()),
        body=await request.body() if include_body else b"",
    )
