"""
Request body size limit.

Bodies over max_body_bytes are refused with 413 {"error": ...} before any
route sees them.  A declared Content-Length is checked up front; bodies
sent without one (chunked) are counted as they are received, and the
request is cut off as soon as the running total passes the limit.

Written as plain ASGI; chunked bodies are counted, never buffered, here.
"""

from __future__ import annotations

from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from speech_gateway.core.logging import logger


class BodyTooLarge(Exception):
    pass


class BodySizeLimitMiddleware:
    def __init__(self, app: ASGIApp, max_body_bytes: int) -> None:
        self.app = app
        self.max_body_bytes = max_body_bytes

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        declared = dict(scope["headers"]).get(b"content-length", b"")
        if declared.isdigit() and int(declared) > self.max_body_bytes:
            await self._reject(scope, receive, send, int(declared))
            return

        received = 0
        too_large = False
        response_started = False

        async def limited_receive() -> Message:
            nonlocal received, too_large
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.max_body_bytes:
                    too_large = True
                    raise BodyTooLarge()
            return message

        async def guarded_send(message: Message) -> None:
            nonlocal response_started
            # Whatever the app answers after the cut-off is replaced by the 413.
            if too_large and not response_started:
                return
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, limited_receive, guarded_send)
        except BodyTooLarge:
            pass

        if too_large and not response_started:
            await self._reject(scope, receive, send, received)

    async def _reject(self, scope: Scope, receive: Receive, send: Send, size: int) -> None:
        logger.warning(
            "%s %s rejected: body of %d+ bytes exceeds %d",
            scope.get("method"),
            scope.get("path"),
            size,
            self.max_body_bytes,
        )
        response = JSONResponse(
            {"error": f"request body exceeds {self.max_body_bytes} bytes"},
            status_code=413,
        )
        await response(scope, receive, send)
