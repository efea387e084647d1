from dataclasses import dataclass, replace

from termcells.cell import CellBuffer
from termcells.color import (
    COLOR_DEFAULT,
    COLOR_NONE,
    get_color,
)


@dataclass(frozen=True)
class _Style:
    fg: int = COLOR_DEFAULT
    bg: int = COLOR_DEFAULT
    attrs: int = 0


BLACK = get_color("black")
WHITE = get_color("white")
RED = get_color("red")
PINK = get_color("pink")


def test_color_none_keeps_existing_colors():
    cb = CellBuffer()
    cb.resize(80, 24)
    st = _Style(fg=BLACK, bg=WHITE)
    cb.fill(" ", st)
    assert cb.get_content(0, 0).style == st

    st2 = replace(st, fg=COLOR_NONE, bg=COLOR_NONE)
    cb.fill("X", st2)
    assert cb.get_content(0, 0).style == st

    red = replace(st, fg=RED, bg=COLOR_NONE)
    cb.set_content(1, 0, " ", None, red)
    assert cb.get_content(1, 0).style == replace(red, bg=st.bg)
    assert cb.get_content(0, 0).style == st

    pink = replace(st, bg=PINK, fg=COLOR_NONE)
    cb.set_content(1, 0, " ", None, pink)
    assert cb.get_content(1, 0).style == replace(pink, fg=RED)


def test_size_and_resize():
    cb = CellBuffer(10, 5)
    assert cb.size() == (10, 5)
    cb.resize(3, 2)
    assert cb.size() == (3, 2)


def test_set_and_get_content():
    cb = CellBuffer(4, 2, default_style=_Style())
    st = _Style(fg=RED)
    cb.set_content(2, 1, "a", ["\u0301"], st)
    content = cb.get_content(2, 1)
    assert content.mainc == "a"
    assert content.combc == ("\u0301",)
    assert content.style == st
    assert content.width == 1


def test_empty_cell_reads_as_space():
    cb = CellBuffer(2, 2)
    content = cb.get_content(0, 0)
    assert (content.mainc, content.width) == (" ", 1)


def test_control_character_reads_as_space():
    cb = CellBuffer(2, 2)
    cb.set_content(0, 0, "\x07", None, _Style())
    assert cb.get_content(0, 0).mainc == " "


def test_out_of_range_is_ignored():
    cb = CellBuffer(2, 2)
    cb.set_content(5, 5, "z", None, _Style())
    assert cb.get_content(5, 5).width == 0
    assert cb.get_content(-1, 0).mainc == "\0"
    assert cb.dirty(7, 7) is False


def test_wide_character_width():
    cb = CellBuffer(4, 1)
    cb.set_content(0, 0, "十", None, _Style())
    assert cb.get_content(0, 0).width == 2


def test_dirty_tracking():
    cb = CellBuffer(3, 1)
    assert cb.dirty(0, 0) is True
    cb.set_dirty(0, 0, False)
    assert cb.dirty(0, 0) is False
    cb.set_content(0, 0, "q", None, _Style())
    assert cb.dirty(0, 0) is True
    cb.set_dirty(0, 0, False)
    assert cb.dirty(0, 0) is False
    cb.set_dirty(0, 0, True)
    assert cb.dirty(0, 0) is True


def test_style_change_makes_dirty():
    cb = CellBuffer(1, 1)
    cb.set_content(0, 0, "a", None, _Style())
    cb.set_dirty(0, 0, False)
    cb.set_content(0, 0, "a", None, _Style(fg=RED))
    assert cb.dirty(0, 0) is True


def test_combining_change_makes_dirty():
    cb = CellBuffer(1, 1)
    cb.set_content(0, 0, "a", None, _Style())
    cb.set_dirty(0, 0, False)
    cb.set_content(0, 0, "a", ["\u0308"], _Style())
    assert cb.dirty(0, 0) is True


def test_wide_change_dirties_both_columns():
    cb = CellBuffer(3, 1)
    cb.set_content(0, 0, "十", None, _Style())
    cb.set_dirty(0, 0, False)
    cb.set_dirty(1, 0, False)
    assert cb.dirty(1, 0) is False
    cb.set_content(0, 0, "a", None, _Style())
    assert cb.dirty(1, 0) is True


def test_invalidate_marks_everything_dirty():
    cb = CellBuffer(2, 2)
    for x in range(2):
        for y in range(2):
            cb.set_dirty(x, y, False)
    cb.invalidate()
    assert all(cb.dirty(x, y) for x in range(2) for y in range(2))


def test_lock_and_unlock():
    cb = CellBuffer(2, 1)
    cb.lock_cell(0, 0)
    cb.set_content(0, 0, "a", None, _Style())
    assert cb.dirty(0, 0) is False
    cb.unlock_cell(0, 0)
    assert cb.dirty(0, 0) is True


def test_resize_preserves_content_and_invalidates():
    cb = CellBuffer(3, 3)
    st = _Style(bg=RED)
    cb.set_content(1, 1, "m", None, st)
    cb.set_dirty(1, 1, False)
    cb.resize(5, 4)
    content = cb.get_content(1, 1)
    assert (content.mainc, content.style) == ("m", st)
    assert cb.dirty(1, 1) is True


def test_resize_same_size_keeps_state():
    cb = CellBuffer(3, 3)
    cb.set_content(0, 0, "k", None, _Style())
    cb.set_dirty(0, 0, False)
    cb.resize(3, 3)
    assert cb.dirty(0, 0) is False
    assert cb.get_content(0, 0).mainc == "k"


def test_resize_shrink_drops_content():
    cb = CellBuffer(3, 3)
    cb.set_content(2, 2, "e", None, _Style())
    cb.resize(2, 2)
    cb.resize(3, 3)
    assert cb.get_content(2, 2).mainc == " "


def test_fill_clears_combining():
    cb = CellBuffer(2, 1)
    cb.set_content(0, 0, "a", ["\u0301"], _Style())
    cb.fill("x", _Style())
    content = cb.get_content(0, 0)
    assert (content.mainc, content.combc, content.width) == ("x", (), 1)