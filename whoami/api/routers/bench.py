"""Constant minimal response used for throughput probing."""

from fastapi import APIRouter
from fastapi.responses import Response

from ..responses import ANY_HTTP_METHOD


def api_create_bench_router() -> APIRouter:
    """Create benchmark router returning a single fixed byte.

    Returns:
        APIRouter: Router exposing `/bench`.

    Raises:
        RuntimeError: Raised if router construction fails.
    """

    router = APIRouter(tags=["bench"])

    @router.api_route("/bench", methods=ANY_HTTP_METHOD)
    async def api_bench() -> Response:
        return Response(content="1", headers={"Connection": "keep-alive", "Content-Type": "text/plain"})

    return router
