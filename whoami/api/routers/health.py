"""Health endpoint router exposing the mutable health status code."""

from fastapi import APIRouter, Request, status
from fastapi.responses import Response

from whoami.health import HealthStatePort, HealthStatusParseError, health_parse_status_code

from ..responses import ANY_HTTP_METHOD, api_plain_error_response


def api_create_health_router(health_state: HealthStatePort) -> APIRouter:
    """Create health router reading and replacing the reported status code.

    Args:
        health_state: Shared health state owned by the application.

    Returns:
        APIRouter: Router exposing `/health`.

    Raises:
        ValueError: Raised when health_state is None.
    """

    if health_state is None:
        raise ValueError("health_state must not be None")

    router = APIRouter(tags=["health"])

    @router.api_route("/health", methods=ANY_HTTP_METHOD)
    async def api_health_status(request: Request) -> Response:
        """Answer with the stored status code, or store a new one on POST.

        Args:
            request: Inbound request; a POST body carries a JSON integer.

        Returns:
            Response: Empty response whose status is the stored code, HTTP 200
            after an update, or HTTP 400 with the decode error.

        Raises:
            RuntimeError: Raised if the request body cannot be read.
        """

        if request.method == "POST":
            try:
                status_code = health_parse_status_code(await request.body())
            except HealthStatusParseError as error:
                return api_plain_error_response(str(error), status.HTTP_400_BAD_REQUEST)
            health_state.health_set_status(status_code)
            return Response(status_code=status.HTTP_200_OK)

        return Response(status_code=health_state.health_get_status())

    return router
