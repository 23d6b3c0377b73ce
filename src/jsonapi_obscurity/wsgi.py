"""WSGI middleware that enforces the obscurity prefix before routing.

Same contract as the ASGI middleware, for WSGI hosts::

    application = ObscurityWSGIMiddleware(app, ObscurityConfig.from_env())

``PATH_INFO`` is rewritten, and ``REQUEST_URI`` / ``RAW_URI`` are updated
when the server sets them, so frameworks that re-derive the path from the raw
URI see the same value. The incoming path is kept in
``environ["jsonapi_obscurity.original_path"]``.
"""

import logging
from collections.abc import Callable, Iterable
from typing import Any, TypeAlias

from jsonapi_obscurity.config import ObscurityConfig
from jsonapi_obscurity.errors import PrefixMismatch
from jsonapi_obscurity.languages import LanguageCodeSet
from jsonapi_obscurity.rewriter import PathRewriter

logger = logging.getLogger("jsonapi_obscurity.wsgi")

StartResponse: TypeAlias = Callable[..., Callable[[bytes], object]]
WSGIApp: TypeAlias = Callable[[dict[str, Any], StartResponse], Iterable[bytes]]

_RAW_URI_KEYS = ("REQUEST_URI", "RAW_URI")


class ObscurityWSGIMiddleware:
    """WSGI wrapper around a ``PathRewriter``."""

    __slots__ = ("app", "rewriter")

    def __init__(
        self,
        app: WSGIApp,
        config: ObscurityConfig | None = None,
        languages: LanguageCodeSet | None = None,
    ) -> None:
        self.app = app
        self.rewriter = PathRewriter(config or ObscurityConfig(), languages)

    def __call__(self, environ: dict[str, Any], start_response: StartResponse) -> Iterable[bytes]:
        path = environ.get("PATH_INFO", "") or "/"
        try:
            new_path = self.rewriter.resolve(path)
        except PrefixMismatch as exc:
            logger.debug("Rejected request for %r", path)
            body = exc.detail.encode("utf-8")
            start_response(
                f"{exc.status} {exc.detail}",
                [
                    ("Content-Type", "text/plain; charset=utf-8"),
                    ("Content-Length", str(len(body))),
                ],
            )
            return [body]

        if new_path != path:
            environ["jsonapi_obscurity.original_path"] = path
            environ["PATH_INFO"] = new_path
            # The raw URI still carries SCRIPT_NAME in front of the prefix
            mount = environ.get("SCRIPT_NAME", "").rstrip("/")
            cut = mount + self.rewriter.config.prefix
            for key in _RAW_URI_KEYS:
                raw = environ.get(key)
                if raw and raw.startswith(cut):
                    environ[key] = mount + (raw[len(cut) :] or "/")
        return self.app(environ, start_response)
