# termcells

Building blocks for programs that draw on a terminal:

- **Colors** (`termcells.color`): `Color` values for the 256-entry
  ECMA-48/XTerm palette, the W3C named colors and 24-bit RGB, with lookup by
  name or `#rrggbb`.
- **Color fitting** (`termcells.colorfit`): `find_color` picks the closest
  entry of a limited palette by CIE76 distance.
- **Attributes** (`termcells.attr`): `AttrMask` flags for bold, blink,
  reverse, underline, dim, italic and strike-through.
- **Cell buffer** (`termcells.cell`): `CellBuffer`, a grid of character
  cells that tracks which cells changed since they were last drawn.
- **Events** (`termcells.events`, `termcells.errors`): time-stamped
  `EventTime`, `EventFocus` and `EventInterrupt`, the `EventError` error
  event, and the library's exceptions.
- **Character sets** (`termcells.charset`, `termcells.encoding`,
  `termcells.charsets`): detection of the locale's character set and a
  registry of encodings with a configurable fallback.

## Installation

```
pip install termcells
```

## Colors

```python
from termcells.color import (
    COLOR_DEFAULT, get_color, new_rgb_color, palette_color, from_image_color,
)
from termcells.colorfit import find_color

tomato = get_color("tomato")
print(tomato.css())              # "#FF6347"
print(tomato.rgb())              # (255, 99, 71)
print(str(tomato))               # "tomato"

red = get_color("#FF0000")
print(red.hex() == 0xFF0000)     # True
print(red.is_rgb())              # True

print(get_color("door") == COLOR_DEFAULT)   # unknown names give the default

ansi = [palette_color(i) for i in range(16)]
print(find_color(new_rgb_color(250, 10, 10), ansi).name())  # "red"

print(from_image_color((0, 255, 255)).hex() == 0x00FFFF)    # True
```

A `Color` is an `int`. `valid()` tells whether it holds a real color,
`hex()` and `rgb()` give -1 where the value is unknown, `true_color()` gives
the RGB form of a palette color, and `name(css=True)` falls back to the CSS
string when the color has no W3C name. `COLOR_DEFAULT`, `COLOR_RESET` and
`COLOR_NONE` are the special values; `str()` of them is `"default"`,
`"reset"` and `"none"`. `COLOR_NAMES` maps every recognised name (including
the "grey" spellings) to its color, and `COLOR_VALUES` maps colors to their
RGB values.

`from_image_color` accepts either an object with an `rgba()` method giving
16-bit components, or a sequence of 8-bit `(r, g, b[, a])` components; the
alpha is dropped.

## Cell buffer

The buffer does not define a style type. Any value can be used as a style;
when it is a dataclass or a named tuple with `fg` and `bg` color fields, a
color of `COLOR_NONE` leaves the cell's existing color unchanged.

```python
from dataclasses import dataclass

from termcells.cell import CellBuffer
from termcells.color import COLOR_DEFAULT, COLOR_NONE, Color, get_color


@dataclass(frozen=True)
class Style:
    fg: Color = COLOR_DEFAULT
    bg: Color = COLOR_DEFAULT


buf = CellBuffer(80, 24, default_style=Style())
buf.set_content(0, 0, "A", None, Style(fg=get_color("red")))
buf.set_content(0, 0, "A", None, Style(fg=COLOR_NONE, bg=get_color("navy")))

content = buf.get_content(0, 0)
print(content.mainc, content.width)   # A 1
print(str(content.style.fg))          # "red": kept from the first call

if buf.dirty(0, 0):
    ...                               # draw the cell
    buf.set_dirty(0, 0, False)
```

- `get_content` returns a `CellContent(mainc, combc, style, width)` named
  tuple. Empty or control characters read as a space of width 1; a position
  outside the buffer gives a NUL character of width 0.
- Character widths come from `wcwidth`, so East Asian wide characters take
  two columns; changing such a cell marks both columns dirty.
- `fill` sets every cell to one character and style; `resize` keeps the
  overlapping content and leaves it to be redrawn; `invalidate` marks every
  cell dirty.
- `lock_cell` keeps a cell from being reported dirty, for example under an
  image drawn straight to the terminal; `unlock_cell` removes the lock and
  marks the cell dirty.
- Writes outside the buffer are ignored. The buffer is not thread safe.

## Events and errors

```python
from termcells.events import EventFocus, EventInterrupt
from termcells.errors import EventError

focus = EventFocus(True)
print(focus.focused, focus.when())

wake = EventInterrupt({"redraw": True})
print(wake.data())

failure = EventError(OSError("device gone"))
print(str(failure), failure.when())
```

`EventTime` records a time stamp that can be changed with `set_event_time`
or `set_event_now`. `Event` and `EventHandler` are protocols for anything
with a `when()` method and anything with a `handle_event(event)` method.
`termcells.errors` also defines `NoScreenError`, `NoCharsetError` and
`EventQueueFullError`.

## Character sets and encodings

```python
from termcells.charset import get_charset
from termcells.encoding import (
    EncodingFallback, get_encoding, register_encoding, set_encoding_fallback, Encoding,
)
from termcells import charsets          # importing registers the encodings

print(get_charset())                    # e.g. "UTF-8"
print(get_charset({"LANG": "C"}))       # "US-ASCII"

gbk = get_encoding("GBK")
print(gbk.decode(bytes([0x82, 0x74])))  # "倀"

register_encoding("latin2", Encoding("latin2", "iso8859_2"))
set_encoding_fallback(EncodingFallback.ASCII)
```

- `get_charset(environ=None)` reads the first non-empty of `LC_ALL`,
  `LC_CTYPE` and `LANG` and returns the codeset part of the locale. The C
  and POSIX locales give `"US-ASCII"`, a locale without a codeset gives
  `"UTF-8"`, and on Windows the answer is always `"UTF-16"`.
- `Encoding(name, codec)` wraps a Python codec with `encode(text)` and
  `decode(data)`. Names given to `register_encoding` and `get_encoding` are
  case-insensitive.
- UTF-8 and US-ASCII are always registered (as `utf-8`, `utf8`, `us-ascii`,
  `ascii` and `iso646`). Importing `termcells.charsets`, or calling
  `charsets.register()`, adds ISO 8859 parts 1–10 and 13–16, KOI8-R,
  KOI8-U, EUC-JP, Shift_JIS, ISO-2022-JP, EUC-KR, GB18030, GB2312 (HZ), GBK
  and Big5, with aliases such as `8859-15`, `ISO-8859-15`, `SJIS`, `EUCKR`
  and `646`.
- For a name that is not registered, `get_encoding` returns `None` under
  `EncodingFallback.FAIL` (the default), the ASCII encoding under
  `EncodingFallback.ASCII`, and a pass-through encoding (`NOP`) under
  `EncodingFallback.UTF8`.

## What this package does not do

termcells holds the pieces a terminal screen is built from, not the screen
itself. It does not open or drive a terminal or console, read the keyboard
or mouse, look up terminal capabilities, or write escape sequences; there are
no key, mouse, paste or resize events and no style type. `new_console_screen()`
always raises `NoScreenError`.

## Running the tests

```
pip install -e ".[test]"
pytest
```