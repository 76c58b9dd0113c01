"""Shared response helpers for API routers."""

from fastapi.responses import Response

ANY_HTTP_METHOD = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
PLAIN_TEXT_MEDIA_TYPE = "text/plain; charset=utf-8"


def api_plain_error_response(message: str, status_code: int) -> Response:
    """Build a plain-text error response with a newline-terminated message.

    Args:
        message: Error text returned to the client.
        status_code: HTTP status code.

    Returns:
        Response: Text response with `nosniff` protection.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return Response(
        content=f"{message}\n",
        status_code=status_code,
        headers={"Content-Type": PLAIN_TEXT_MEDIA_TYPE, "X-Content-Type-Options": "nosniff"},
    )
