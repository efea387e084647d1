"""Color flag bits and the RGB values of the 256-entry terminal palette.

The low palette indices follow ECMA-48 and, beyond the first sixteen,
XTerm: a 6x6x6 color cube from 16 to 231 and a gray ramp from 232 to 255.
"""

__all__ = [
    "COLOR_VALID",
    "COLOR_IS_RGB",
    "COLOR_SPECIAL",
    "RGB_MASK",
    "PALETTE_SIZE",
    "PALETTE_RGB",
]

# The value carries a real color (the zero value means "default").
COLOR_VALID = 1 << 32

# The low three bytes are an RGB value rather than a palette index.
COLOR_IS_RGB = 1 << 33

# The value has a special meaning outside of the color spaces.
COLOR_SPECIAL = 1 << 34

RGB_MASK = 0xFFFFFF

PALETTE_SIZE = 256

_ANSI_RGB = (
    0x000000,  # black
    0x800000,  # maroon
    0x008000,  # green
    0x808000,  # olive
    0x000080,  # navy
    0x800080,  # purple
    0x008080,  # teal
    0xC0C0C0,  # silver
    0x808080,  # gray
    0xFF0000,  # red
    0x00FF00,  # lime
    0xFFFF00,  # yellow
    0x0000FF,  # blue
    0xFF00FF,  # fuchsia
    0x00FFFF,  # aqua
    0xFFFFFF,  # white
)

_CUBE_LEVELS = (0x00, 0x5F, 0x87, 0xAF, 0xD7, 0xFF)

_CUBE_RGB = tuple(
    (red << 16) | (green << 8) | blue
    for red in _CUBE_LEVELS
    for green in _CUBE_LEVELS
    for blue in _CUBE_LEVELS
)

_GRAY_RGB = tuple(
    (level << 16) | (level << 8) | level
    for level in range(0x08, 0x08 + 24 * 10, 10)
)

# RGB value of each palette index, 0 through 255.
PALETTE_RGB: tuple[int, ...] = _ANSI_RGB + _CUBE_RGB + _GRAY_RGB

assert len(PALETTE_RGB) == PALETTE_SIZE