"""
Request body size guard.

Notes:
- Content-Length over the limit is rejected before anything is read.
- Bodies without a length (chunked) are counted as they arrive and rejected once
  the running total passes the limit, so at most `max_body_bytes` is ever buffered.
- Plain ASGI (not BaseHTTPMiddleware) so the body can be replayed to the app.
"""

from __future__ import annotations

import logging
from typing import List

from starlette.datastructures import Headers
from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = logging.getLogger(__name__)


class BodySizeLimitMiddleware:
    def __init__(self, app: ASGIApp, max_body_bytes: int):
        self.app = app
        self.max_body_bytes = max_body_bytes

    def _too_large(self, scope: Scope, size: str) -> JSONResponse:
        logger.warning(
            "rejected %s %s: body %s bytes > %d",
            scope.get("method"), scope.get("path"), size, self.max_body_bytes,
        )
        return JSONResponse(
            status_code=413,
            content={"error": "Request body too large", "limit": self.max_body_bytes},
        )

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        length = Headers(scope=scope).get("content-length")
        if length is not None and length.isdigit() and int(length) > self.max_body_bytes:
            await self._too_large(scope, length)(scope, receive, send)
            return

        messages: List[Message] = []
        total = 0
        more_body = True
        while more_body:
            message = await receive()
            messages.append(message)
            if message["type"] != "http.request":
                break  # client went away
            total += len(message.get("body", b""))
            if total > self.max_body_bytes:
                await self._too_large(scope, f">{total}")(scope, receive, send)
                return
            more_body = message.get("more_body", False)

        async def replay() -> Message:
            if messages:
                return messages.pop(0)
            return await receive()

        await self.app(scope, replay, send)
