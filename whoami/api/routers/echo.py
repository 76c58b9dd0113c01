"""Echo router upgrading `/echo` requests to a WebSocket echo channel."""

import logging
from http import HTTPStatus

from fastapi import APIRouter, Request, WebSocket
from fastapi.responses import Response

from whoami.echo import EchoChannel, echo_describe_upgrade_failure

from ..responses import ANY_HTTP_METHOD, api_plain_error_response

logger = logging.getLogger(__name__)


def api_create_echo_router() -> APIRouter:
    """Create echo router with the WebSocket channel and its plain-HTTP rejection.

    Returns:
        APIRouter: Router exposing `/echo` for WebSocket and HTTP scopes.

    Raises:
        RuntimeError: Raised if router construction fails.
    """

    router = APIRouter(tags=["echo"])

    @router.websocket("/echo")
    async def api_echo_channel(websocket: WebSocket) -> None:
        """Run one echo channel for the lifetime of the connection."""

        await EchoChannel(websocket).echo_run()

    @router.api_route("/echo", methods=ANY_HTTP_METHOD)
    def api_echo_upgrade_rejected(request: Request) -> Response:
        """Reject requests that arrive without a WebSocket upgrade.

        Args:
            request: Plain HTTP request to the echo path.

        Returns:
            Response: 400 or 405 carrying the status phrase.

        Raises:
            RuntimeError: This handler does not raise runtime errors.
        """

        status_code, reason = echo_describe_upgrade_failure(request.method, request.headers)
        logger.warning("%s", reason)
        return api_plain_error_response(HTTPStatus(status_code).phrase, status_code)

    return router
