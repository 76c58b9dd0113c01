"""Query-string helpers shared by API routers."""

from starlette.datastructures import QueryParams


def api_first_query_value(query_params: QueryParams, key: str) -> str | None:
    """Return the first value of a repeated query parameter, or None when absent."""

    values = query_params.getlist(key)
    if not values:
        return None
    return values[0]
