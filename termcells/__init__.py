"""Terminal colors, text attributes, a dirty-tracking cell buffer, basic events and character-set encodings."""

__version__ = "0.1.0"

__all__ = [
    "attr",
    "cell",
    "charset",
    "charsets",
    "color",
    "colorfit",
    "colornames",
    "encoding",
    "errors",
    "events",
    "palette",
]