"""A two-dimensional buffer of character cells for screen implementations."""

from __future__ import annotations

from dataclasses import dataclass, is_dataclass, replace
from typing import Any, NamedTuple, Optional, Sequence

from wcwidth import wcwidth

from termcells.color import COLOR_DEFAULT, COLOR_NONE

__all__ = ["CellBuffer", "CellContent"]

_NUL = "\0"


def _rune_width(ch: str) -> int:
    """Display width of a single character; control characters count as 0."""
    return max(wcwidth(ch), 0)


def _merge_colors(style: Any, current: Any) -> Any:
    """Replace COLOR_NONE colors of ``style`` with those of ``current``."""
    if style is None:
        return style
    changes = {}
    for field in ("fg", "bg"):
        if getattr(style, field, None) == COLOR_NONE:
            changes[field] = (
                getattr(current, field, COLOR_DEFAULT) if current is not None else COLOR_DEFAULT
            )
    if not changes:
        return style
    if is_dataclass(style):
        return replace(style, **changes)
    if hasattr(style, "_replace"):
        return style._replace(**changes)
    raise TypeError(f"cannot update the colors of style {style!r}")


class CellContent(NamedTuple):
    """What a cell holds: main character, combining characters, style, width."""

    mainc: str
    combc: tuple[str, ...]
    style: Any
    width: int


@dataclass
class _Cell:
    curr_style: Any = None
    last_style: Any = None
    curr_main: str = _NUL
    curr_comb: tuple[str, ...] = ()
    last_main: str = _NUL
    last_comb: tuple[str, ...] = ()
    width: int = 0
    lock: bool = False


class CellBuffer:
    """A grid of character cells that tracks which cells need redrawing.

    Styles are dataclasses or named tuples with ``fg`` and ``bg`` color
    fields; a color of COLOR_NONE leaves the cell's color unchanged.
    Not thread safe.
    """

    def __init__(self, w: int = 0, h: int = 0, default_style: Any = None) -> None:
        self._w = 0
        self._h = 0
        self._default_style = default_style
        self._cells: list[_Cell] = []
        self.resize(w, h)

    def _new_cell(self) -> _Cell:
        return _Cell(curr_style=self._default_style, last_style=self._default_style)

    def _cell(self, x: int, y: int) -> Optional[_Cell]:
        if 0 <= x < self._w and 0 <= y < self._h:
            return self._cells[y * self._w + x]
        return None

    def set_content(
        self, x: int, y: int, mainc: str, combc: Optional[Sequence[str]], style: Any
    ) -> None:
        """Set the main character, combining characters and style of a cell.

        Positions outside the buffer are ignored.
        """
        cell = self._cell(x, y)
        if cell is None:
            return
        comb = tuple(combc or ())
        # Mark every column of a wide character dirty when its content changes.
        if cell.width > 0 and (mainc != cell.curr_main or comb != cell.curr_comb):
            for dx in range(cell.width):
                self.set_dirty(x + dx, y, True)
        cell.curr_comb = comb
        if cell.curr_main != mainc:
            cell.width = _rune_width(mainc)
        cell.curr_main = mainc
        cell.curr_style = _merge_colors(style, cell.curr_style)

    def get_content(self, x: int, y: int) -> CellContent:
        """Return the content of a cell.

        An empty or control character reads as a space of width 1.  Outside
        the buffer a NUL character of width 0 is returned.
        """
        cell = self._cell(x, y)
        if cell is None:
            return CellContent(_NUL, (), self._default_style, 0)
        mainc, width = cell.curr_main, cell.width
        if width == 0 or mainc < " ":
            mainc, width = " ", 1
        return CellContent(mainc, cell.curr_comb, cell.curr_style, width)

    def size(self) -> tuple[int, int]:
        """Return the (width, height) of the buffer in cells."""
        return self._w, self._h

    def invalidate(self) -> None:
        """Mark every cell dirty."""
        for cell in self._cells:
            cell.last_main = _NUL

    def dirty(self, x: int, y: int) -> bool:
        """Whether the cell changed since it was last marked clean."""
        cell = self._cell(x, y)
        if cell is None or cell.lock:
            return False
        return (
            cell.last_main == _NUL
            or cell.last_main != cell.curr_main
            or cell.last_style != cell.curr_style
            or cell.last_comb != cell.curr_comb
        )

    def set_dirty(self, x: int, y: int, dirty: bool) -> None:
        """Mark a cell dirty, or clean once it has been displayed."""
        cell = self._cell(x, y)
        if cell is None:
            return
        if dirty:
            cell.last_main = _NUL
            return
        if cell.curr_main == _NUL:
            cell.curr_main = " "
        cell.last_main = cell.curr_main
        cell.last_comb = cell.curr_comb
        cell.last_style = cell.curr_style

    def lock_cell(self, x: int, y: int) -> None:
        """Keep a cell from being drawn until it is unlocked."""
        cell = self._cell(x, y)
        if cell is not None:
            cell.lock = True

    def unlock_cell(self, x: int, y: int) -> None:
        """Remove the lock from a cell and mark it dirty."""
        cell = self._cell(x, y)
        if cell is not None:
            cell.lock = False
            self.set_dirty(x, y, True)

    def resize(self, w: int, h: int) -> None:
        """Change the dimensions, keeping the overlapping content.

        Kept cells are marked dirty so that they are redrawn.
        """
        if self._w == w and self._h == h:
            return
        w, h = max(w, 0), max(h, 0)
        cells = [self._new_cell() for _ in range(w * h)]
        for y in range(min(h, self._h)):
            for x in range(min(w, self._w)):
                old = self._cells[y * self._w + x]
                new = cells[y * w + x]
                new.curr_main = old.curr_main
                new.curr_comb = old.curr_comb
                new.curr_style = old.curr_style
                new.width = old.width
        self._cells = cells
        self._w = w
        self._h = h

    def fill(self, r: str, style: Any) -> None:
        """Fill every cell with one character and style.

        Combining and wide characters are not supported here.
        """
        for cell in self._cells:
            cell.curr_main = r
            cell.curr_comb = ()
            cell.curr_style = _merge_colors(style, cell.curr_style)
            cell.width = 1