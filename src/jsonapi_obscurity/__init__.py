"""jsonapi-obscurity: hide a JSON:API base path behind an operator-chosen prefix.

Requests for ``/<prefix>/jsonapi/...`` (optionally ``/<prefix>/<langcode>/jsonapi/...``)
are rewritten to ``/jsonapi/...`` before routing. Requests for the API without
the prefix get a plain 404.

Basic usage::

    from jsonapi_obscurity import ObscurityConfig, ObscurityMiddleware

    app = ObscurityMiddleware(app, ObscurityConfig(prefix="/s3cr3t"))

The prefix is obscurity, not access control.
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "HTTPError",
    "LanguageCodeSet",
    "NotFound",
    "ObscurityConfig",
    "ObscurityError",
    "ObscurityMiddleware",
    "ObscurityWSGIMiddleware",
    "PathRewriter",
    "PrefixMismatch",
    "ValidationOutcome",
    "normalize_prefix",
]

# name -> module that defines it
_LAZY_IMPORTS: dict[str, str] = {
    "ConfigurationError": "jsonapi_obscurity.errors",
    "HTTPError": "jsonapi_obscurity.errors",
    "LanguageCodeSet": "jsonapi_obscurity.languages",
    "NotFound": "jsonapi_obscurity.errors",
    "ObscurityConfig": "jsonapi_obscurity.config",
    "ObscurityError": "jsonapi_obscurity.errors",
    "ObscurityMiddleware": "jsonapi_obscurity.middleware",
    "ObscurityWSGIMiddleware": "jsonapi_obscurity.wsgi",
    "PathRewriter": "jsonapi_obscurity.rewriter",
    "PrefixMismatch": "jsonapi_obscurity.errors",
    "ValidationOutcome": "jsonapi_obscurity.rewriter",
    "normalize_prefix": "jsonapi_obscurity.config",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import jsonapi_obscurity`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
