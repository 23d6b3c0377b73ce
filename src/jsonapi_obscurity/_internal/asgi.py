"""Typed ASGI definitions.

Replaces the standard Scope = MutableMapping[str, Any] with a typed view of
the fields the middleware reads. Users never see these.
"""

from collections.abc import Awaitable, Callable, MutableMapping
from dataclasses import dataclass
from typing import Any, TypeAlias
from urllib.parse import quote

# Raw ASGI types, as the ASGI protocol defines them
Scope: TypeAlias = MutableMapping[str, Any]
Receive: TypeAlias = Callable[[], Awaitable[MutableMapping[str, Any]]]
Send: TypeAlias = Callable[[MutableMapping[str, Any]], Awaitable[None]]
ASGIApp: TypeAlias = Callable[[Scope, Receive, Send], Awaitable[None]]

EXTENSION_KEY = "jsonapi_obscurity"


@dataclass(frozen=True, slots=True)
class PathScope:
    """Path-related fields parsed from a raw ASGI ``http``/``websocket`` scope.

    Internal only -- the middleware reads this, the wrapped app still gets a
    plain scope dict.

    ASGI servers put ``root_path`` in front of ``path``. ``mount`` is that
    leading part when the path actually carries it, and ``local_path`` is
    what the application routes on.
    """

    path: str
    raw_path: bytes | None
    root_path: str

    @classmethod
    def from_scope(cls, scope: Scope) -> "PathScope":
        """Parse raw ASGI scope into typed object."""
        return cls(
            path=scope["path"],
            raw_path=scope.get("raw_path"),
            root_path=scope.get("root_path", "") or "",
        )

    @property
    def mount(self) -> str:
        root = self.root_path.rstrip("/")
        if root and (self.path == root or self.path.startswith(root + "/")):
            return root
        return ""

    @property
    def local_path(self) -> str:
        return self.path[len(self.mount) :] or "/"

    def rewritten_path(self, new_local_path: str) -> str:
        """Full ``path`` for a rewritten local path, mount kept in front."""
        return self.mount + new_local_path

    def rewritten_raw_path(self, new_local_path: str) -> bytes:
        """``raw_path`` with the same cut that turned the local path into
        ``new_local_path``.

        The original percent-encoding is kept when the raw bytes start with
        the encoded mount and the encoded form of what was removed. Otherwise
        the new path is encoded from scratch.
        """
        local = self.local_path
        removed = local[: len(local) - len(new_local_path)]
        head = quote(self.mount).encode("ascii")
        cut = head + quote(removed).encode("ascii")
        if self.raw_path and removed and self.raw_path.startswith(cut):
            return head + (self.raw_path[len(cut) :] or b"/")
        return quote(self.rewritten_path(new_local_path)).encode("ascii")


def with_path(scope: Scope, new_local_path: str) -> dict[str, Any]:
    """Copy ``scope`` with ``path`` and ``raw_path`` replaced.

    ``new_local_path`` is relative to the mount; the mount stays in front of
    it. The incoming path is recorded under
    ``scope["extensions"]["jsonapi_obscurity"]["original_path"]``. The
    original scope is left untouched.
    """
    parsed = PathScope.from_scope(scope)
    new_scope = dict(scope)
    new_scope["path"] = parsed.rewritten_path(new_local_path)
    new_scope["raw_path"] = parsed.rewritten_raw_path(new_local_path)
    extensions = dict(scope.get("extensions") or {})
    extensions[EXTENSION_KEY] = {"original_path": parsed.path}
    new_scope["extensions"] = extensions
    return new_scope
