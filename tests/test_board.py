"""Tests for pieces, cells, lines and the board."""

import pytest

from gobblet_rules import Board, Cell, CellState, Line, LineKind, Player, Size
from gobblet_rules.errors import CellError, ColumnOutOfBounds, RowOutOfBounds


class TestTypes:
    """Tests for basic types."""

    def test_player_opponent(self) -> None:
        assert Player.ONE.opponent() == Player.TWO
        assert Player.TWO.opponent() == Player.ONE
        assert ~Player.ONE == Player.TWO
        assert ~~Player.TWO == Player.TWO

    def test_player_text(self) -> None:
        assert str(Player.ONE) == "Player 1"
        assert Player.TWO.abbrev == "P2"

    def test_size_order(self) -> None:
        assert Size.SMALL < Size.MEDIUM < Size.LARGE
        assert list(Size) == [Size.SMALL, Size.MEDIUM, Size.LARGE]

    def test_size_can_gobble(self) -> None:
        assert Size.LARGE.can_gobble(Size.MEDIUM)
        assert Size.LARGE.can_gobble(Size.SMALL)
        assert Size.MEDIUM.can_gobble(Size.SMALL)
        assert not Size.SMALL.can_gobble(Size.SMALL)
        assert not Size.MEDIUM.can_gobble(Size.LARGE)

    def test_size_text(self) -> None:
        assert str(Size.MEDIUM) == "Medium"
        assert Size.LARGE.abbrev == "L"


class TestCell:
    """Tests for cell coordinates."""

    def test_bounds(self) -> None:
        with pytest.raises(RowOutOfBounds):
            Cell(3, 0)
        with pytest.raises(ColumnOutOfBounds):
            Cell(0, 3)
        # Row is checked first
        with pytest.raises(RowOutOfBounds):
            Cell(3, 3)
        with pytest.raises(CellError):
            Cell(-1, 0)

        cell = Cell(2, 2)
        assert (cell.row, cell.col) == (2, 2)

    def test_equality(self) -> None:
        assert Cell(1, 2) == Cell(1, 2)
        assert Cell(1, 2) != Cell(2, 1)
        assert len({Cell(0, 0), Cell(0, 0), Cell(0, 1)}) == 2

    def test_all_cells(self) -> None:
        cells = list(Cell.all())
        assert len(cells) == 9
        assert cells[0] == Cell(0, 0)
        assert cells[-1] == Cell(2, 2)
        assert [c.index for c in cells] == list(range(9))


class TestCellState:
    """Tests for derived cell queries."""

    def test_empty(self) -> None:
        state = CellState()
        assert state.controlled_by() is None
        assert state.top_size() is None
        assert str(state) == "    "

    def test_largest_piece_controls(self) -> None:
        state = CellState()
        state[Size.SMALL] = Player.ONE
        assert state.controlled_by() == Player.ONE
        assert state.top_size() == Size.SMALL

        state[Size.LARGE] = Player.TWO
        assert state.controlled_by() == Player.TWO
        assert state.top_size() == Size.LARGE
        # Covered piece is hidden, not removed
        assert state[Size.SMALL] == Player.ONE
        assert str(state) == "P2-L"

    def test_medium_over_small(self) -> None:
        state = CellState(small=Player.TWO, medium=Player.ONE)
        assert state.controlled_by() == Player.ONE
        assert state.top_size() == Size.MEDIUM


class TestLine:
    """Tests for winning lines."""

    def test_all_lines(self) -> None:
        lines = list(Line.all())
        assert len(lines) == 8
        assert lines[:3] == [Line.row(0), Line.row(1), Line.row(2)]
        assert lines[3:6] == [Line.column(0), Line.column(1), Line.column(2)]
        assert lines[6:] == [Line.DIAGONAL_UP, Line.DIAGONAL_DOWN]

    def test_matches(self) -> None:
        assert Line.row(0).matches(Cell(0, 2))
        assert not Line.row(0).matches(Cell(1, 2))
        assert Line.column(1).matches(Cell(2, 1))
        assert Line.DIAGONAL_UP.matches(Cell(0, 2))
        assert Line.DIAGONAL_UP.matches(Cell(2, 0))
        assert not Line.DIAGONAL_UP.matches(Cell(0, 0))
        assert Line.DIAGONAL_DOWN.matches(Cell(1, 1))
        assert not Line.DIAGONAL_DOWN.matches(Cell(1, 0))

    def test_invalid_index(self) -> None:
        with pytest.raises(ValueError):
            Line.row(3)
        with pytest.raises(ValueError):
            Line(LineKind.DIAGONAL_UP, 0)

    def test_text(self) -> None:
        assert str(Line.row(0)) == "row 1"
        assert str(Line.column(2)) == "column 3"
        assert str(Line.DIAGONAL_UP) == "diagonal ↗"
        assert str(Line.DIAGONAL_DOWN) == "diagonal ↘"


class TestBoard:
    """Tests for board access and display."""

    def test_read_write(self) -> None:
        board = Board()
        cell = Cell(1, 1)
        assert board.read(cell, Size.SMALL) is None

        board.write(cell, Size.SMALL, Player.ONE)
        board.write(cell, Size.MEDIUM, Player.TWO)
        assert board.read(cell, Size.SMALL) == Player.ONE
        assert board.controlling_player(cell) == Player.TWO
        assert board.top_size(cell) == Size.MEDIUM

        board.write(cell, Size.MEDIUM, None)
        assert board.controlling_player(cell) == Player.ONE
        assert board.top_size(cell) == Size.SMALL

    def test_cells_on_line(self) -> None:
        board = Board()
        for line in Line.all():
            cells = [cell for cell, _ in board.cells_on_line(line)]
            assert len(cells) == 3
            assert all(line.matches(cell) for cell in cells)

        diagonal = [cell for cell, _ in board.cells_on_line(Line.DIAGONAL_UP)]
        assert set(diagonal) == {Cell(0, 2), Cell(1, 1), Cell(2, 0)}

    def test_count(self) -> None:
        board = Board()
        board.write(Cell(0, 0), Size.SMALL, Player.ONE)
        board.write(Cell(2, 2), Size.SMALL, Player.ONE)
        board.write(Cell(1, 1), Size.SMALL, Player.TWO)
        assert board.count(Player.ONE, Size.SMALL) == 2
        assert board.count(Player.TWO, Size.SMALL) == 1
        assert board.count(Player.ONE, Size.LARGE) == 0

    def test_copy(self) -> None:
        board = Board()
        board.write(Cell(0, 0), Size.SMALL, Player.ONE)

        copy = board.copy()
        assert copy == board

        # Modifications to copy don't affect original
        copy.write(Cell(0, 0), Size.LARGE, Player.TWO)
        assert board.read(Cell(0, 0), Size.LARGE) is None
        assert copy != board

    def test_render_empty(self) -> None:
        expected = (
            "    |    |    \n"
            "--------------\n"
            "    |    |    \n"
            "--------------\n"
            "    |    |    \n"
        )
        assert Board().render() == expected

    def test_render_pieces(self) -> None:
        board = Board()
        board.write(Cell(0, 0), Size.SMALL, Player.ONE)
        board.write(Cell(1, 1), Size.SMALL, Player.ONE)
        board.write(Cell(1, 1), Size.LARGE, Player.TWO)
        board.write(Cell(2, 2), Size.MEDIUM, Player.TWO)

        rows = board.render().splitlines()
        assert rows[0] == "P1-S|    |    "
        assert rows[2] == "    |P2-L|    "
        assert rows[4] == "    |    |P2-M"

        # Rendering is idempotent
        assert str(board) == board.render()
