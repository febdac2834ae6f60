from __future__ import annotations

import pytest

from tictactoe.core.grid import Grid, LineKind, move_to_slot, slot_to_move
from tictactoe.errors import InvalidPlacement, OutOfRange
from tictactoe.models import Mark, Move


def test_new_grid_is_empty() -> None:
    g = Grid()
    assert g.size == 3
    assert g.is_empty()
    assert not g.is_full()
    assert all(g.get(r, c) == Mark.empty for r in range(3) for c in range(3))


def test_grid_size_must_be_positive() -> None:
    with pytest.raises(ValueError):
        Grid(0)


@pytest.mark.parametrize("size", [1, 3, 4, 5])
def test_lines_cover_rows_columns_and_both_diagonals(size: int) -> None:
    lines = Grid(size).lines()
    kinds = [line.kind for line in lines]

    assert len(lines) == 2 * size + 2
    assert kinds.count(LineKind.row) == size
    assert kinds.count(LineKind.column) == size
    assert lines[-2].cells == tuple((k, k) for k in range(size))
    assert lines[-1].cells == tuple((k, size - 1 - k) for k in range(size))


@pytest.mark.parametrize("mark", [Mark.x, Mark.o])
def test_line_of_is_true_only_for_a_complete_line(mark: Mark) -> None:
    other = Mark.o if mark == Mark.x else Mark.x

    for line in Grid().lines():
        g = Grid()
        for r, c in line.cells:
            g.place(r, c, mark)

        assert g.line_of(mark, line)
        assert not g.line_of(other, line)
        assert [ln for ln in g.lines() if g.line_of(mark, ln)] == [line]

    for line in Grid().lines():
        g = Grid()
        *head, (last_r, last_c) = line.cells
        for r, c in head:
            g.place(r, c, mark)
        assert not g.line_of(mark, line)

        g.place(last_r, last_c, other)
        assert not g.line_of(mark, line)


def test_place_sets_only_the_target_cell() -> None:
    g = Grid()
    g.place(1, 2, Mark.x)

    assert g.get(1, 2) == Mark.x
    assert g.count(Mark.x) == 1
    assert g.count(Mark.empty) == 8


def test_place_on_occupied_cell_is_rejected() -> None:
    g = Grid()
    g.place(0, 0, Mark.x)

    with pytest.raises(InvalidPlacement) as e:
        g.place(0, 0, Mark.o)

    assert "already taken" in str(e.value)
    assert g.get(0, 0) == Mark.x


@pytest.mark.parametrize("row,col", [(-1, 0), (3, 0), (0, -1), (0, 3), (5, 5)])
def test_place_out_of_range_is_an_invalid_placement(row: int, col: int) -> None:
    g = Grid()
    with pytest.raises(InvalidPlacement):
        g.place(row, col, Mark.x)
    with pytest.raises(OutOfRange):
        g.get(row, col)
    assert g.is_empty()


def test_place_empty_mark_is_rejected() -> None:
    g = Grid()
    with pytest.raises(InvalidPlacement):
        g.place(0, 0, Mark.empty)


def test_queries_do_not_mutate() -> None:
    g = Grid()
    g.place(0, 0, Mark.x)
    g.place(1, 1, Mark.o)
    before = g.rows()

    g.get(0, 0)
    g.is_full()
    for line in g.lines():
        g.line_of(Mark.x, line)
        g.line_of(Mark.o, line)
    g.winning_lines(Mark.x)

    assert g.rows() == before


def test_rows_returns_a_copy() -> None:
    g = Grid()
    rows = g.rows()
    rows[0][0] = Mark.x
    assert g.get(0, 0) == Mark.empty


def test_is_full_only_when_every_cell_is_marked() -> None:
    g = Grid()
    cells = [(r, c) for r in range(3) for c in range(3)]
    for i, (r, c) in enumerate(cells):
        assert not g.is_full()
        g.place(r, c, Mark.x if i % 2 == 0 else Mark.o)
    assert g.is_full()


def test_winning_lines_reports_every_completed_line() -> None:
    g = Grid()
    for r in range(3):
        for c in range(3):
            g.place(r, c, Mark.x)

    assert len(g.winning_lines(Mark.x)) == 8
    assert g.has_line(Mark.x)
    assert not g.has_line(Mark.o)


def test_slot_numbers_are_row_major_and_one_based() -> None:
    assert slot_to_move(1) == Move(row=0, col=0)
    assert slot_to_move(3) == Move(row=0, col=2)
    assert slot_to_move(4) == Move(row=1, col=0)
    assert slot_to_move(9) == Move(row=2, col=2)
    assert slot_to_move(5, size=4) == Move(row=1, col=0)

    assert [move_to_slot(slot_to_move(s)) for s in range(1, 10)] == list(range(1, 10))


def test_slot_out_of_range_messages() -> None:
    with pytest.raises(OutOfRange) as low:
        slot_to_move(0)
    assert str(low.value) == "Slot must be greater than 0"

    with pytest.raises(OutOfRange) as high:
        slot_to_move(10)
    assert str(high.value) == "Slot must be smaller than 10"

    with pytest.raises(OutOfRange):
        move_to_slot(Move(row=3, col=0))
