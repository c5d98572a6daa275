import logging
from typing import Iterable, Optional

from fastapi import Request
from fastapi.responses import PlainTextResponse

logger = logging.getLogger(__name__)


def is_origin_allowed(origin: Optional[str], allowed: Iterable[str]) -> bool:
    """
    Requests without an Origin header (same-origin, curl, server-to-server) always pass.
    Anything else must match an allow-list entry exactly.
    """
    if not origin:
        return True
    return origin in allowed


async def cors_gate(request: Request, call_next):
    origin = request.headers.get("origin")
    allowed = request.app.state.settings.allowed_origins

    if not is_origin_allowed(origin, allowed):
        logger.warning("Blocked %s %s from origin %s", request.method, request.url.path, origin)
        return PlainTextResponse("Not allowed by CORS", status_code=403)

    return await call_next(request)
