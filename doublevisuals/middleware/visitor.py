import re
from uuid import uuid4

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from doublevisuals.config import get_config
from doublevisuals.utils.context import visitor_id_var
from doublevisuals.utils.logging import get_logger

logger = get_logger(__name__)

_VISITOR_ID = re.compile(r"^[0-9a-f]{32}$")


class VisitorMiddleware(BaseHTTPMiddleware):
    """
    Gives every browser a random visitor id cookie.

    The id only scopes the durable key-value store to one visitor. It is
    bound into the structlog context for the duration of the request.
    """

    def __init__(self, app: ASGIApp, exclude_paths: list[str] | None = None) -> None:
        super().__init__(app)
        self.exclude_paths = set(exclude_paths or [])
        self.config = get_config()

        logger.info(
            "visitor_middleware_initialized",
            cookie_name=self.config.visitor_cookie_name,
            exclude_paths=list(self.exclude_paths),
        )

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if request.url.path in self.exclude_paths:
            return await call_next(request)

        cookie_name = self.config.visitor_cookie_name
        visitor_id = request.cookies.get(cookie_name, "")
        is_new = not _VISITOR_ID.match(visitor_id)
        if is_new:
            visitor_id = uuid4().hex
            logger.debug("visitor_issued", visitor_id=visitor_id)

        request.state.visitor_id = visitor_id
        token = visitor_id_var.set(visitor_id)
        structlog.contextvars.bind_contextvars(visitor_id=visitor_id)
        try:
            response = await call_next(request)
        finally:
            structlog.contextvars.unbind_contextvars("visitor_id")
            visitor_id_var.reset(token)

        if is_new:
            response.set_cookie(
                key=cookie_name,
                value=visitor_id,
                max_age=self.config.consent_cookie_max_age,
                path="/",
                samesite="lax",
                httponly=True,
            )

        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        return response
