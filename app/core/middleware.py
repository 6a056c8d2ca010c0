"""
Request body size ceiling.
"""
import logging

from fastapi import HTTPException, status
from fastapi.responses import JSONResponse
from starlette.datastructures import Headers
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from app.core.config import settings

logger = logging.getLogger(__name__)

TOO_LARGE_MESSAGE = "Request entity too large"


class BodySizeLimitMiddleware:
    """
    Reject bodies larger than settings.MAX_BODY_SIZE.

    A declared Content-Length above the ceiling is refused before the app runs.
    Bodies without one (chunked) are counted as they are received; passing the
    ceiling raises HTTPException(413) inside whichever handler is reading the body.
    """

    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        max_body_size = settings.MAX_BODY_SIZE
        content_length = Headers(scope=scope).get("content-length")
        if content_length and content_length.isdigit() and int(content_length) > max_body_size:
            logger.warning(f"Rejected {scope['path']}: declared body of {content_length} bytes")
            response = JSONResponse(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                content={"error": TOO_LARGE_MESSAGE}
            )
            await response(scope, receive, send)
            return

        received = 0

        async def limited_receive() -> Message:
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > max_body_size:
                    logger.warning(f"Rejected {scope['path']}: streamed body passed {max_body_size} bytes")
                    raise HTTPException(
                        status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                        detail=TOO_LARGE_MESSAGE
                    )
            return message

        await self.app(scope, limited_receive, send)
