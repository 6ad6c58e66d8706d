"""
Request body size guard for upload endpoints.

Runs as ASGI middleware so oversized uploads are refused before the
multipart parser or any route handler sees them.
"""
import json
import logging
from typing import Iterable

from starlette.types import ASGIApp, Message, Receive, Scope, Send

from app.core.errors import UploadTooLargeError

logger = logging.getLogger(__name__)

# Room for multipart boundaries, headers and the jobDescription field
MULTIPART_OVERHEAD_BYTES = 1024 * 1024


class _BodyTooLarge(Exception):
    pass


class UploadSizeLimitMiddleware:
    """Reject request bodies larger than the configured upload ceiling."""

    def __init__(
        self,
        app: ASGIApp,
        max_upload_bytes: int,
        paths: Iterable[str] = ("/api/analyze-resume",),
    ):
        self.app = app
        self.max_upload_bytes = max_upload_bytes
        self.max_body_bytes = max_upload_bytes + MULTIPART_OVERHEAD_BYTES
        self.paths = tuple(paths)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or scope["path"] not in self.paths:
            await self.app(scope, receive, send)
            return

        content_length = _content_length(scope)
        if content_length is not None and content_length > self.max_body_bytes:
            logger.warning(
                f"Rejected upload to {scope['path']}: Content-Length {content_length} "
                f"exceeds {self.max_body_bytes}"
            )
            await self._reject(send)
            return

        received = 0
        too_large = False
        rejected = False

        async def limited_receive() -> Message:
            nonlocal received, too_large
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.max_body_bytes:
                    too_large = True
                    raise _BodyTooLarge()
            return message

        async def guarded_send(message: Message) -> None:
            nonlocal rejected
            # The body parser turns our abort into its own error response;
            # replace it with the 413 envelope.
            if too_large:
                if not rejected:
                    rejected = True
                    await self._reject(send)
                return
            await send(message)

        try:
            await self.app(scope, limited_receive, guarded_send)
        except _BodyTooLarge:
            pass

        if too_large:
            logger.warning(f"Rejected streamed upload to {scope['path']}: body exceeds {self.max_body_bytes}")
            if not rejected:
                await self._reject(send)

    async def _reject(self, send: Send) -> None:
        error = UploadTooLargeError(self.max_upload_bytes)
        body = json.dumps({"success": False, "error": error.public_message}).encode("utf-8")
        await send({
            "type": "http.response.start",
            "status": error.status_code,
            "headers": [
                (b"content-type", b"application/json"),
                (b"content-length", str(len(body)).encode("latin-1")),
                (b"connection", b"close"),
            ],
        })
        await send({"type": "http.response.body", "body": body})


def _content_length(scope: Scope):
    for name, value in scope.get("headers", []):
        if name == b"content-length":
            try:
                return int(value)
            except ValueError:
                return None
    return None
