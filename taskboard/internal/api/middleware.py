"""
Request logging middleware.
Logs method, URL, request body, response status, response body and timing.
"""

import time

from starlette.types import ASGIApp, Message, Receive, Scope, Send

from taskboard.core.logger import logger

# Bodies larger than this are truncated in the log
MAX_LOGGED_BODY = 2048


def _preview(body: bytes) -> str:
    text = body.decode("utf-8", errors="replace")
    if len(text) > MAX_LOGGED_BODY:
        return text[:MAX_LOGGED_BODY] + "...(truncated)"
    return text


class RequestLoggingMiddleware:
    """Pure ASGI middleware so request bodies stay readable by the route."""

    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        start_time = time.time()
        request_body = bytearray()
        response_body = bytearray()
        status_code = 500

        async def receive_wrapper() -> Message:
            message = await receive()
            if message["type"] == "http.request":
                request_body.extend(message.get("body", b""))
            return message

        async def send_wrapper(message: Message) -> None:
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
            elif message["type"] == "http.response.body":
                response_body.extend(message.get("body", b""))
            await send(message)

        path = scope.get("path", "")
        query = scope.get("query_string", b"").decode("latin-1")
        url = f"{path}?{query}" if query else path

        logger.info(f"{scope['method']} {url}")

        try:
            await self.app(scope, receive_wrapper, send_wrapper)
        finally:
            elapsed_time = time.time() - start_time
            if request_body:
                logger.debug(f"Request body: {_preview(bytes(request_body))}")
            if response_body:
                logger.debug(f"Response body: {_preview(bytes(response_body))}")
            logger.info(
                f"{scope['method']} {url} -> {status_code} ({elapsed_time * 1000:.1f}ms)"
            )
