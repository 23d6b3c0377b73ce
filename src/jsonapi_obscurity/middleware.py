"""ASGI middleware that enforces the obscurity prefix before routing.

Wrap the application outermost so the rewritten path is what every other
middleware and the router see::

    app = ObscurityMiddleware(app, ObscurityConfig(prefix="/s3cr3t"))

Requests for ``/s3cr3t/jsonapi/...`` reach the app as ``/jsonapi/...``.
Requests for the API without the prefix get a bare 404.
"""

import logging

from jsonapi_obscurity._internal.asgi import ASGIApp, PathScope, Receive, Scope, Send, with_path
from jsonapi_obscurity.config import ObscurityConfig
from jsonapi_obscurity.errors import HTTPError, PrefixMismatch
from jsonapi_obscurity.languages import LanguageCodeSet
from jsonapi_obscurity.rewriter import PathRewriter

logger = logging.getLogger("jsonapi_obscurity.middleware")


async def send_error_response(error: HTTPError, send: Send) -> None:
    """Translate an HTTPError into a plain-text ASGI response."""
    body = error.detail.encode("utf-8")
    raw_headers: list[tuple[bytes, bytes]] = [
        (b"content-type", b"text/plain; charset=utf-8"),
        (b"content-length", str(len(body)).encode("latin-1")),
    ]
    for name, value in error.headers:
        raw_headers.append((name.lower().encode("latin-1"), value.encode("latin-1")))

    await send(
        {
            "type": "http.response.start",
            "status": error.status,
            "headers": raw_headers,
        }
    )
    await send(
        {
            "type": "http.response.body",
            "body": body,
        }
    )


class ObscurityMiddleware:
    """Pure ASGI middleware around a ``PathRewriter``.

    Handles ``http`` and ``websocket`` scopes. Anything else (lifespan)
    passes straight through.

    The scope handed to the wrapped app is a copy with ``path`` and
    ``raw_path`` rewritten; the original path is kept under
    ``scope["extensions"]["jsonapi_obscurity"]["original_path"]``.
    """

    __slots__ = ("app", "rewriter")

    def __init__(
        self,
        app: ASGIApp,
        config: ObscurityConfig | None = None,
        languages: LanguageCodeSet | None = None,
    ) -> None:
        self.app = app
        self.rewriter = PathRewriter(config or ObscurityConfig(), languages)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] not in ("http", "websocket"):
            await self.app(scope, receive, send)
            return

        # Route on the path below root_path, as the application does
        path = PathScope.from_scope(scope).local_path
        try:
            new_path = self.rewriter.resolve(path)
        except PrefixMismatch as exc:
            await self._reject(scope, exc, send)
            return

        if new_path == path:
            await self.app(scope, receive, send)
            return
        await self.app(with_path(scope, new_path), receive, send)

    async def _reject(self, scope: Scope, exc: PrefixMismatch, send: Send) -> None:
        logger.debug("Rejected %s request for %r", scope["type"], scope["path"])
        if scope["type"] == "websocket":
            # Closing before accept is how an unmapped websocket route is refused.
            await send({"type": "websocket.close", "code": 1000})
            return
        await send_error_response(exc, send)
