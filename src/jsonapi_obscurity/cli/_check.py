"""``jsonapi-obscurity check``: dry-run a request path.

Builds the configuration from the environment, applies command-line
overrides, and prints what the middleware would do with the path. Exits with
code 1 if the path would be rejected.
"""

import argparse
import dataclasses
import sys

from jsonapi_obscurity.config import ObscurityConfig
from jsonapi_obscurity.errors import ConfigurationError, PrefixMismatch
from jsonapi_obscurity.rewriter import PathRewriter


def _build_config(args: argparse.Namespace) -> ObscurityConfig:
    config = ObscurityConfig.from_env()
    overrides: dict[str, object] = {}
    if args.base_path is not None:
        overrides["api_base_path"] = args.base_path
    if args.prefix is not None:
        overrides["prefix"] = args.prefix
    if args.languages:
        overrides["languages"] = tuple(args.languages)
        # Listing languages implies restricting to them
        overrides["language_policy"] = "configured"
    if args.policy is not None:
        overrides["language_policy"] = args.policy
    return dataclasses.replace(config, **overrides)


def run_check(args: argparse.Namespace) -> None:
    """Print ``pass-through``, ``rewrite`` or ``not found`` for ``args.path``."""
    try:
        rewriter = PathRewriter(_build_config(args))
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    path = args.path
    try:
        new_path = rewriter.resolve(path)
    except PrefixMismatch:
        print(f"not found: {path}")
        raise SystemExit(1) from None

    if new_path == path:
        print(f"pass-through: {path}")
    else:
        print(f"rewrite: {path} -> {new_path}")
