"""Synthetic payload router for bandwidth and throughput probing."""

from __future__ import annotations

from email.utils import formatdate

from fastapi import APIRouter, Request, status
from fastapi.responses import Response, StreamingResponse

from whoami.domain import (
    PayloadRangeError,
    domain_iter_payload_chunks,
    domain_parse_byte_range,
    domain_parse_payload_spec,
)

from ..query import api_first_query_value
from ..responses import ANY_HTTP_METHOD, PLAIN_TEXT_MEDIA_TYPE, api_plain_error_response


def api_create_data_router() -> APIRouter:
    """Create payload router generating content of a requested size.

    Returns:
        APIRouter: Router exposing `/data`.

    Raises:
        RuntimeError: Raised if router construction fails.
    """

    router = APIRouter(tags=["data"])

    @router.api_route("/data", methods=ANY_HTTP_METHOD)
    def api_data_payload(request: Request) -> Response:
        """Stream `size * unit` bytes of deterministic content.

        Args:
            request: Inbound request carrying `size`, `unit` and `attachment` query parameters.

        Returns:
            Response: Streamed payload, or a ranged download when `attachment` is true.

        Raises:
            RuntimeError: Raised if the response cannot be built.
        """

        query_params = request.query_params
        payload_spec = domain_parse_payload_spec(
            size=api_first_query_value(query_params, "size"),
            unit=api_first_query_value(query_params, "unit"),
            attachment=api_first_query_value(query_params, "attachment"),
        )
        payload_length = payload_spec.byte_length

        if payload_spec.as_attachment:
            return api_data_attachment_response(request, payload_length)

        headers = {"Content-Type": PLAIN_TEXT_MEDIA_TYPE, "Content-Length": str(payload_length)}
        if request.method == "HEAD":
            return Response(status_code=status.HTTP_200_OK, headers=headers)
        return StreamingResponse(domain_iter_payload_chunks(payload_length), headers=headers)

    return router


def api_data_attachment_response(request: Request, payload_length: int) -> Response:
    """Serve the payload as a downloadable file honoring a single byte range.

    Args:
        request: Inbound request, possibly carrying a `Range` header.
        payload_length: Total payload length.

    Returns:
        Response: 200 with the whole payload, 206 with the requested window, or
        416 when the range cannot be satisfied.

    Raises:
        RuntimeError: Raised if the response cannot be built.
    """

    headers = {
        "Content-Disposition": "Attachment",
        "Content-Type": PLAIN_TEXT_MEDIA_TYPE,
        "Accept-Ranges": "bytes",
        "Last-Modified": formatdate(usegmt=True),
    }
    try:
        byte_range = domain_parse_byte_range(request.headers.get("range"), payload_length)
    except PayloadRangeError as error:
        response = api_plain_error_response(str(error), status.HTTP_416_RANGE_NOT_SATISFIABLE)
        response.headers["Content-Range"] = f"bytes */{payload_length}"
        return response

    status_code = status.HTTP_200_OK
    range_start, range_stop = 0, payload_length
    if byte_range is not None:
        status_code = status.HTTP_206_PARTIAL_CONTENT
        range_start, range_stop = byte_range
        headers["Content-Range"] = f"bytes {range_start}-{range_stop - 1}/{payload_length}"
    headers["Content-Length"] = str(range_stop - range_start)

    if request.method == "HEAD":
        return Response(status_code=status_code, headers=headers)
    return StreamingResponse(
        domain_iter_payload_chunks(payload_length, range_start, range_stop),
        status_code=status_code,
        headers=headers,
    )
