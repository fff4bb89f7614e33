from __future__ import annotations

from starlette.requests import Request

UNMATCHED_ROUTE = "unmatched"


def route_template(request: Request) -> str:
    """
    Route template for logs and metric labels (e.g. ``/chat/send-message``).

    Falls back to a fixed label when routing did not match, so raw paths never
    reach log fields or label values.
    """

    route = request.scope.get("route")
    path = getattr(route, "path", None)
    if isinstance(path, str) and path:
        return path
    return UNMATCHED_ROUTE
