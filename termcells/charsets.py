"""A broad set of encodings for legacy locales.

Importing this module registers them all.
"""

from __future__ import annotations

from collections.abc import Iterator

from termcells.encoding import Encoding, get_encoding, register_encoding

__all__ = ["register"]

# Parts of ISO 8859 that get a registered codec, in registration order.
_ISO8859_PARTS = (1, 9, 10, 13, 14, 15, 16, *range(2, 9))

# Parts that also answer to the "8859-N" and "ISO-8859-N" spellings.
_ISO8859_ALIASED = (*range(1, 10), *range(13, 17))

_OTHER_CODECS = {
    "KOI8-R": "koi8_r",
    "KOI8-U": "koi8_u",
    "EUC-JP": "euc_jp",
    "SHIFT_JIS": "shift_jis",
    "ISO2022JP": "iso2022_jp",
    "EUC-KR": "euc_kr",
    "GB18030": "gb18030",
    "GB2312": "hz",
    "GBK": "gbk",
    "Big5": "big5",
}

_OTHER_ALIASES = {
    "SJIS": "Shift_JIS",
    "EUCJP": "EUC-JP",
    "2022-JP": "ISO2022JP",
    "ISO-2022-JP": "ISO2022JP",
    "EUCKR": "EUC-KR",
    # The 1991 reference version of ISO646 is ASCII; some systems use
    # "646" for POSIX locales.
    "646": "US-ASCII",
    "ISO646": "US-ASCII",
    "UTF8": "UTF-8",
}


def _charsets() -> Iterator[tuple[str, str]]:
    for part in _ISO8859_PARTS:
        codec = "latin-1" if part == 1 else f"iso8859_{part}"
        yield f"ISO8859-{part}", codec
    yield from _OTHER_CODECS.items()


def _aliases() -> Iterator[tuple[str, str]]:
    for part in _ISO8859_ALIASED:
        target = f"ISO8859-{part}"
        yield f"8859-{part}", target
        yield f"ISO-8859-{part}", target
    yield from _OTHER_ALIASES.items()


def register() -> None:
    """Register every known encoding and its common aliases."""
    for name, codec in _charsets():
        register_encoding(name, Encoding(name, codec))
    for alias, target in _aliases():
        enc = get_encoding(target)
        if enc is not None:
            register_encoding(alias, enc)


register()