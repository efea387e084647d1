"""Terminal colors: palette entries, 24-bit RGB values and special values.

A color is a 64-bit value.  The low numeric values are palette indices as
used by ECMA-48 and XTerm; with the RGB flag set the low three bytes are an
RGB value instead.  The zero value is the terminal default color.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Protocol, Union, runtime_checkable

from termcells.colornames import GREY_ALIASES, NAMED_PALETTE, NAMED_RGB
from termcells.palette import (
    COLOR_IS_RGB,
    COLOR_SPECIAL,
    COLOR_VALID,
    PALETTE_RGB,
    RGB_MASK,
)

__all__ = [
    "Color",
    "COLOR_DEFAULT",
    "COLOR_RESET",
    "COLOR_NONE",
    "COLOR_NAMES",
    "COLOR_VALUES",
    "new_rgb_color",
    "new_hex_color",
    "get_color",
    "palette_color",
    "from_image_color",
]

_U64 = (1 << 64) - 1
_HEX_DIGITS = re.compile(r"[+-]?[0-9A-Fa-f]+")


class Color(int):
    """A color value; an int whose bits carry flags and the color itself."""

    def __new__(cls, value: int = 0) -> "Color":
        return super().__new__(cls, int(value) & _U64)

    def valid(self) -> bool:
        """Whether the color has been set to a real value."""
        return self & COLOR_VALID != 0

    def is_rgb(self) -> bool:
        """Whether the color is a valid 24-bit RGB value."""
        both = COLOR_VALID | COLOR_IS_RGB
        return self & both == both

    def css(self) -> str:
        """The CSS hex string, such as ``#ABCDEF``, or "" if not valid."""
        if not self.valid():
            return ""
        return f"#{self.hex():06X}"

    def name(self, css: bool = False) -> str:
        """The W3C name of the color.

        Without a name, the CSS hex string is returned if ``css`` is true,
        and an empty string otherwise.
        """
        for color_name, color in COLOR_NAMES.items():
            if color == self:
                return color_name
        return self.css() if css else ""

    def hex(self) -> int:
        """The 24-bit RGB value (R << 16 | G << 8 | B), or -1 if unknown."""
        if not self.valid():
            return -1
        if self & COLOR_IS_RGB:
            return int(self) & RGB_MASK
        return COLOR_VALUES.get(self, -1)

    def rgb(self) -> tuple[int, int, int]:
        """The red, green and blue components, each -1 if unknown."""
        value = self.hex()
        if value < 0:
            return (-1, -1, -1)
        return ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    def true_color(self) -> "Color":
        """The RGB form of the color, overriding any terminal theme."""
        if not self.valid():
            return COLOR_DEFAULT
        if self & COLOR_IS_RGB:
            return Color(self | COLOR_VALID)
        return Color((self.hex() & _U64) | COLOR_IS_RGB | COLOR_VALID)

    def __str__(self) -> str:
        if not self.valid():
            if self == COLOR_NONE:
                return "none"
            if self == COLOR_DEFAULT:
                return "default"
            if self == COLOR_RESET:
                return "reset"
            return ""
        return self.name(True)

    def __repr__(self) -> str:
        return f"Color({int(self):#x})"


# Leave the color unchanged from the terminal's default.
COLOR_DEFAULT = Color(0)

# Go back to the vanilla terminal colors.
COLOR_RESET = Color(COLOR_SPECIAL | 0)

# Do not change the color that is already displayed.
COLOR_NONE = Color(COLOR_SPECIAL | 1)


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def new_hex_color(v: int) -> Color:
    """Return a color for the given 24-bit RGB value."""
    return Color(COLOR_IS_RGB | (_to_int32(v) & _U64) | COLOR_VALID)


def new_rgb_color(r: int, g: int, b: int) -> Color:
    """Return a color from red, green and blue components in 0-255."""
    return new_hex_color(((r & 0xFF) << 16) | ((g & 0xFF) << 8) | (b & 0xFF))


def palette_color(index: int) -> Color:
    """Return the color at the given palette index."""
    return Color((index & _U64) | COLOR_VALID)


def _build_names() -> dict[str, Color]:
    names: dict[str, Color] = {
        name: palette_color(index) for name, index in NAMED_PALETTE.items()
    }
    names.update((name, new_hex_color(value)) for name, value in NAMED_RGB.items())
    names.update((alias, names[target]) for alias, target in GREY_ALIASES.items())
    return names


def _build_values() -> dict[Color, int]:
    values: dict[Color, int] = {
        palette_color(index): value for index, value in enumerate(PALETTE_RGB)
    }
    values.update((new_hex_color(value), value) for value in NAMED_RGB.values())
    return values


# Every recognised color name and the color it stands for.
COLOR_NAMES: dict[str, Color] = _build_names()

# RGB values of the palette colors and the named RGB colors.
COLOR_VALUES: dict[Color, int] = _build_values()


def get_color(name: str) -> Color:
    """Return the color for a W3C name or a ``#rrggbb`` string.

    Anything not recognised gives the default color.
    """
    color = COLOR_NAMES.get(name)
    if color is not None:
        return color
    if len(name) == 7 and name.startswith("#") and _HEX_DIGITS.fullmatch(name[1:]):
        return new_hex_color(int(name[1:], 16))
    return COLOR_DEFAULT


@runtime_checkable
class ImageColor(Protocol):
    """A color that reports alpha-premultiplied 16-bit RGBA components."""

    def rgba(self) -> tuple[int, int, int, int]:
        ...


def from_image_color(image_color: Union[ImageColor, Sequence[int]]) -> Color:
    """Convert an image color to a color, dropping its alpha.

    The argument is either an object with an ``rgba()`` method giving 16-bit
    components, or a sequence of 8-bit (r, g, b[, a]) components.
    """
    if isinstance(image_color, ImageColor):
        r, g, b, _ = image_color.rgba()
        return new_rgb_color(r >> 8, g >> 8, b >> 8)
    r, g, b = tuple(image_color)[:3]
    return new_rgb_color(r, g, b)