"""Path rewriting: the obscurity prefix check.

A request for the API base path must carry the configured prefix in front of
it, optionally followed by one language segment::

    /secret/jsonapi/node/page/1      -> /jsonapi/node/page/1
    /secret/de/jsonapi/node/page/1   -> /de/jsonapi/node/page/1
    /jsonapi/node/page/1             -> not found
    /de/jsonapi/node/page/1          -> not found

Per request the rewriter moves through three steps: ``applies`` decides
whether the path targets the API at all, ``validate`` checks the segment in
front of the base path, and ``rewrite`` cuts the prefix. The language segment
is kept so locale routing downstream still sees it.

All methods are pure string functions over frozen inputs and are safe to call
concurrently.
"""

from __future__ import annotations

import logging
from enum import Enum

from jsonapi_obscurity.config import ObscurityConfig
from jsonapi_obscurity.errors import PrefixMismatch
from jsonapi_obscurity.languages import LanguageCodeSet

logger = logging.getLogger("jsonapi_obscurity.rewriter")


class ValidationOutcome(Enum):
    """Result of checking the segment in front of the API base path."""

    VALID = "valid"
    NOT_FOUND = "not_found"


class PathRewriter:
    """Applies the obscurity prefix rule to request paths.

    Usage::

        rewriter = PathRewriter(ObscurityConfig(prefix="/secret"))
        rewriter.resolve("/secret/jsonapi/node")  # "/jsonapi/node"
        rewriter.resolve("/jsonapi/node")         # raises PrefixMismatch
    """

    __slots__ = ("config", "languages")

    def __init__(
        self,
        config: ObscurityConfig,
        languages: LanguageCodeSet | None = None,
    ) -> None:
        self.config = config
        self.languages = languages if languages is not None else LanguageCodeSet.from_config(config)

    def bare_path(self, path: str) -> str:
        """``path`` with one leading occurrence of the prefix cut off."""
        prefix = self.config.prefix
        if prefix and path.startswith(prefix):
            return path[len(prefix) :]
        return path

    def plain_path(self, path: str) -> str:
        """The bare path with a leading language segment also cut off.

        The segment is only dropped when it is a known language code and
        another segment follows it.
        """
        bare = self.bare_path(path)
        head, sep, rest = bare.lstrip("/").partition("/")
        if sep and head in self.languages:
            return "/" + rest
        return bare

    def applies(self, path: str) -> bool:
        """Whether ``path`` targets the API base path and the rule is on."""
        if not self.config.enabled:
            return False
        return self.plain_path(path).startswith(self.config.api_base_path + "/")

    def observed_prefix(self, path: str) -> str | None:
        """Everything in ``path`` before the API base path segment.

        Returns ``None`` when the base path does not occur as a whole
        segment. The search starts after the configured prefix when the path
        begins with it, so a prefix that itself contains the base path name
        is not mistaken for it.
        """
        needle = self.config.api_base_path + "/"
        prefix = self.config.prefix
        start = len(prefix) if prefix and path.startswith(prefix) else 0
        index = path.find(needle, start)
        if index == -1:
            return None
        return path[:index]

    def validate(self, path: str) -> ValidationOutcome:
        """Check that the base path is preceded by the prefix.

        Two forms are accepted: exactly the prefix, or the prefix followed by
        ``/`` and a known language code. The language candidate is the last
        segment before the base path.
        """
        observed = self.observed_prefix(path)
        if observed is None:
            return ValidationOutcome.NOT_FOUND
        prefix = self.config.prefix
        if observed == prefix:
            return ValidationOutcome.VALID

        langcode = observed.rpartition("/")[2]
        if langcode in self.languages and observed == f"{prefix}/{langcode}":
            return ValidationOutcome.VALID
        return ValidationOutcome.NOT_FOUND

    def rewrite(self, path: str) -> str:
        """Cut the prefix from the start of ``path``; the rest is kept as is.

        A path that is exactly the prefix becomes ``""``.
        """
        return self.bare_path(path)

    def resolve(self, path: str) -> str:
        """Run the full check and return the path routing should see.

        Paths the rule does not apply to come back unchanged.

        Raises:
            PrefixMismatch: If the path targets the API without a valid
                prefix.
        """
        if not self.applies(path):
            return path
        if self.validate(path) is ValidationOutcome.NOT_FOUND:
            logger.debug("Obscurity prefix mismatch for %r", path)
            raise PrefixMismatch()
        rewritten = self.rewrite(path)
        logger.debug("Rewrote %r to %r", path, rewritten)
        return rewritten
