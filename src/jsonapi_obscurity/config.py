"""Obscurity configuration.

ObscurityConfig is a frozen dataclass: immutable after creation, built once
at startup and shared read-only by every request.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from jsonapi_obscurity.errors import ConfigurationError

ENV_BASE_PATH = "JSONAPI_BASE_PATH"
ENV_PREFIX = "JSONAPI_OBSCURITY_PREFIX"
ENV_LANGUAGES = "JSONAPI_OBSCURITY_LANGUAGES"
ENV_LANGUAGE_POLICY = "JSONAPI_OBSCURITY_LANGUAGE_POLICY"


def normalize_prefix(value: str) -> str:
    """Return ``value`` with exactly one leading ``/`` and no trailing ``/``.

    An empty value, or one made only of slashes, normalizes to ``""``
    (feature disabled). Normalizing twice gives the same result::

        normalize_prefix("secret/")    # "/secret"
        normalize_prefix("//a/b//")    # "/a/b"
        normalize_prefix("/")          # ""
    """
    stripped = value.strip().strip("/")
    if not stripped:
        return ""
    return "/" + stripped


@dataclass(frozen=True, slots=True)
class ObscurityConfig:
    """Obscurity prefix configuration. Immutable after creation.

    ``prefix`` is normalized on construction. Override what you need::

        config = ObscurityConfig(prefix="s3cr3t")
        config.prefix  # "/s3cr3t"
    """

    # Path the API routes are mounted under
    api_base_path: str = "/jsonapi"

    # Empty disables the feature
    prefix: str = ""

    # Language segments allowed between prefix and base path
    languages: tuple[str, ...] = ()
    language_policy: str = "standard"  # "standard" or "configured"

    def __post_init__(self) -> None:
        base = self.api_base_path
        if not base.startswith("/") or base == "/" or base.endswith("/"):
            msg = (
                f"api_base_path must start with '/' and have no trailing '/', "
                f"got {base!r}"
            )
            raise ConfigurationError(msg)
        object.__setattr__(self, "prefix", normalize_prefix(self.prefix))
        object.__setattr__(self, "languages", tuple(self.languages))

    @property
    def enabled(self) -> bool:
        """Whether a prefix is configured."""
        return bool(self.prefix)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ObscurityConfig:
        """Build a config from ``JSONAPI_*`` environment variables.

        Unset variables fall back to the field defaults.
        ``JSONAPI_OBSCURITY_LANGUAGES`` is a comma-separated list of codes;
        setting it without a policy selects the ``"configured"`` policy.
        """
        env = os.environ if environ is None else environ
        languages = tuple(
            code.strip() for code in env.get(ENV_LANGUAGES, "").split(",") if code.strip()
        )
        return cls(
            api_base_path=env.get(ENV_BASE_PATH, "/jsonapi"),
            prefix=env.get(ENV_PREFIX, ""),
            languages=languages,
            language_policy=env.get(
                ENV_LANGUAGE_POLICY, "configured" if languages else "standard"
            ),
        )
