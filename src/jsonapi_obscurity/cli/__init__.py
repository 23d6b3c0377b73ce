"""jsonapi-obscurity CLI: check request paths against a prefix configuration.

Entry point registered as ``jsonapi-obscurity`` in ``pyproject.toml``::

    [project.scripts]
    jsonapi-obscurity = "jsonapi_obscurity.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``jsonapi-obscurity`` command."""
    parser = argparse.ArgumentParser(
        prog="jsonapi-obscurity",
        description="jsonapi-obscurity: hide a JSON:API base path behind a prefix.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- jsonapi-obscurity check ------------------------------------------
    check_parser = subparsers.add_parser(
        "check",
        help="Show how a request path would be handled",
        description=(
            "Settings default to the JSONAPI_BASE_PATH, JSONAPI_OBSCURITY_PREFIX, "
            "JSONAPI_OBSCURITY_LANGUAGES and JSONAPI_OBSCURITY_LANGUAGE_POLICY "
            "environment variables."
        ),
    )
    check_parser.add_argument("path", help="Request path (e.g. /s3cr3t/jsonapi/node)")
    check_parser.add_argument("--base-path", default=None, help="API base path")
    check_parser.add_argument("--prefix", default=None, help="Obscurity prefix")
    check_parser.add_argument(
        "--language",
        action="append",
        default=None,
        dest="languages",
        metavar="CODE",
        help="Configured language code (repeatable)",
    )
    check_parser.add_argument(
        "--policy",
        choices=("standard", "configured"),
        default=None,
        help="Which language codes count: the standard table or --language codes",
    )

    # -- jsonapi-obscurity languages --------------------------------------
    subparsers.add_parser("languages", help="List the standard language codes")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "check":
        from jsonapi_obscurity.cli._check import run_check

        run_check(args)
    elif args.command == "languages":
        from jsonapi_obscurity.cli._languages import list_languages

        list_languages(args)
