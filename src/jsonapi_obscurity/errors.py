"""jsonapi-obscurity exception hierarchy.

Shared across the rewriter, the host adapters and the CLI so every module
raises and catches the same types.
"""

from dataclasses import dataclass


class ObscurityError(Exception):
    """Base for all jsonapi-obscurity errors."""


class ConfigurationError(ObscurityError):
    """Raised when the obscurity configuration is invalid.

    Raised once, when a config or language set is built. Never per request.
    """


@dataclass(frozen=True, slots=True)
class HTTPError(ObscurityError):
    """An error that maps directly to an HTTP status code.

    Host adapters catch these and render a response from ``status``,
    ``detail`` and ``headers``.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818
    """404: the requested resource does not exist."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class PrefixMismatch(NotFound):  # noqa: N818
    """404: the API base path was requested without the obscurity prefix.

    The detail is always the generic ``"Not Found"``. Whether the prefix or
    the language segment was wrong is never exposed.
    """

    def __init__(self) -> None:
        super().__init__()
