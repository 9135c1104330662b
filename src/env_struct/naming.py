"""Field name to environment variable name mapping."""

from __future__ import annotations

import string

_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def derive_key(field_name: str) -> str:
    """Return the environment variable name looked up for ``field_name``.

    Only ASCII letters are upper-cased. Digits, underscores and any other
    characters are kept as they are, and no word splitting is attempted:
    ``helloWorld`` becomes ``HELLOWORLD``, not ``HELLO_WORLD``.
    """
    return field_name.translate(_ASCII_UPPER)
