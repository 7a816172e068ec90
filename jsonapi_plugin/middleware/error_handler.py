"""JSON:API error handling middleware."""

import logging
from typing import Any

from jsonapi_plugin.core.errors import DEFAULT_ERROR_TITLE, render_error

logger = logging.getLogger(__name__)


class ErrorHandlerMiddleware:
    """Convert unhandled exceptions into JSON:API error documents.

    The exception text is only sent to clients as ``detail`` when ``debug``
    is set; it is always logged.
    """

    def __init__(self, app: Any, debug: bool = False) -> None:
        """Store the ASGI app for middleware chaining."""
        self.app = app
        self.debug = debug

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        """Handle exceptions and serialize JSON:API error documents."""
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return
        try:
            await self.app(scope, receive, send)
        except Exception as exc:  # noqa: BLE001 - last-resort handler
            logger.exception("Unhandled error on %s %s", scope.get("method"), scope.get("path"))
            error: dict[str, Any] = {"status": 500, "title": DEFAULT_ERROR_TITLE}
            if self.debug:
                error["detail"] = str(exc)
            response = render_error(500, [error])
            await response(scope, receive, send)
