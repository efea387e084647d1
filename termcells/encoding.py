"""Registry of the character encodings used to talk to a terminal.

UTF-8 and US-ASCII are always available.  Other character sets must be
registered by name before they can be found; names are case-insensitive.
"""

from __future__ import annotations

import codecs
import threading
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

__all__ = [
    "Encoding",
    "EncodingFallback",
    "UTF8",
    "ASCII",
    "NOP",
    "register_encoding",
    "set_encoding_fallback",
    "get_encoding",
]


@dataclass(frozen=True)
class Encoding:
    """A character encoding backed by a Python codec."""

    name: str
    codec: str
    encode_errors: str = "strict"
    decode_errors: str = "strict"

    def __post_init__(self) -> None:
        codecs.lookup(self.codec)

    def encode(self, text: str) -> bytes:
        """Encode text into the bytes of this character set."""
        return text.encode(self.codec, self.encode_errors)

    def decode(self, data: bytes) -> str:
        """Decode bytes of this character set into text."""
        return bytes(data).decode(self.codec, self.decode_errors)


# Invalid input decodes to the replacement character.
UTF8 = Encoding("UTF-8", "utf-8", decode_errors="replace")
ASCII = Encoding("US-ASCII", "ascii", decode_errors="replace")

# Passes bytes through unchanged in both directions.
NOP = Encoding("NOP", "utf-8", "surrogateescape", "surrogateescape")


class EncodingFallback(IntEnum):
    """What get_encoding does when no encoding is registered for a name."""

    FAIL = 0  # Find nothing.
    ASCII = 1  # Fall back to 7-bit ASCII.
    UTF8 = 2  # Pass bytes through unmodified, as if they were UTF-8.


_lock = threading.Lock()
_fallback = EncodingFallback.FAIL
_encodings: dict[str, Encoding] = {
    "utf-8": UTF8,
    "utf8": UTF8,
    "us-ascii": ASCII,
    "ascii": ASCII,
    "iso646": ASCII,
}


def register_encoding(charset: str, enc: Encoding) -> None:
    """Register an encoding under a character set name (or an alias)."""
    with _lock:
        _encodings[charset.lower()] = enc


def set_encoding_fallback(fb: EncodingFallback) -> None:
    """Choose how get_encoding behaves for names that are not registered."""
    global _fallback
    with _lock:
        _fallback = EncodingFallback(fb)


def get_encoding(charset: str) -> Optional[Encoding]:
    """Return the encoding registered for a character set name.

    For an unknown name the fallback decides: nothing (None), ASCII, or a
    pass-through encoding.
    """
    with _lock:
        enc = _encodings.get(charset.lower())
        if enc is not None:
            return enc
        if _fallback is EncodingFallback.ASCII:
            return ASCII
        if _fallback is EncodingFallback.UTF8:
            return NOP
        return None