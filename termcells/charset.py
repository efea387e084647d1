"""Discovery of the character set the terminal environment uses."""

import os
import sys
from collections.abc import Mapping

__all__ = ["get_charset"]

_LOCALE_VARIABLES = ("LC_ALL", "LC_CTYPE", "LANG")


def _locale_charset(environ: Mapping[str, str]) -> str:
    locale = next(
        (environ.get(name, "") for name in _LOCALE_VARIABLES if environ.get(name, "")),
        "",
    )
    if locale in ("POSIX", "C"):
        return "US-ASCII"
    locale = locale.split("@", 1)[0]
    _, dot, codeset = locale.partition(".")
    if not dot:
        # A locale without a codeset is taken to mean UTF-8.
        return "UTF-8"
    return codeset


def get_charset(environ: Mapping[str, str] | None = None) -> str:
    """Return the name of the character set of the current environment.

    On Windows the console is always UTF-16.  Elsewhere the first non-empty
    of LC_ALL, LC_CTYPE and LANG decides, following the POSIX pattern
    ``language[.codeset[@variant]]``; the C and POSIX locales mean US-ASCII
    and a locale without a codeset means UTF-8.
    """
    if sys.platform == "win32":
        return "UTF-16"
    if environ is None:
        environ = os.environ
    return _locale_charset(environ)