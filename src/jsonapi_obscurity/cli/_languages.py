"""``jsonapi-obscurity languages``: list the standard language table."""

import argparse

from jsonapi_obscurity.languages import STANDARD_LANGUAGES


def list_languages(args: argparse.Namespace) -> None:
    for code in sorted(STANDARD_LANGUAGES):
        name, native = STANDARD_LANGUAGES[code]
        print(f"{code}\t{name} ({native})")
