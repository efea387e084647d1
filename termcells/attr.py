"""Text attributes that affect how characters are displayed, apart from color."""

from enum import IntFlag

__all__ = ["AttrMask"]


class AttrMask(IntFlag):
    """A mask of text attributes.

    Attributes can be combined in some cases, for example dim italic.
    Support for each attribute varies from terminal to terminal.
    """

    NONE = 0
    BOLD = 1 << 0
    BLINK = 1 << 1
    REVERSE = 1 << 2
    UNDERLINE = 1 << 3  # Deprecated: an underline style is preferred.
    DIM = 1 << 4
    ITALIC = 1 << 5
    STRIKE_THROUGH = 1 << 6
    INVALID = 1 << 31  # Marks the style or attributes as invalid.