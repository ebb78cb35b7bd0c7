from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Iterator

from gobblet_rules.errors import ColumnOutOfBounds, RowOutOfBounds
from gobblet_rules.types import Player, Size

BOARD_SIZE = 3


@dataclass(frozen=True)
class Cell:
    """
    Coordinates of a square on the board, 0-indexed.

    Raises RowOutOfBounds or ColumnOutOfBounds if either component
    falls outside the 3x3 grid.
    """

    row: int
    col: int

    def __post_init__(self) -> None:
        if not 0 <= self.row < BOARD_SIZE:
            raise RowOutOfBounds(self.row)
        if not 0 <= self.col < BOARD_SIZE:
            raise ColumnOutOfBounds(self.col)

    @property
    def index(self) -> int:
        """Offset of this cell in row-major order."""
        return self.row * BOARD_SIZE + self.col

    @staticmethod
    def all() -> Iterator[Cell]:
        """Iterate over all cells, row by row."""
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                yield Cell(row, col)

    def __str__(self) -> str:
        return f"{self.row},{self.col}"


@dataclass
class CellState:
    """
    The contents of a cell: at most one piece of each size.

    Smaller pieces stay in their slot when covered by a larger one, so a
    cell can hold pieces of both players at once.
    """

    small: Player | None = None
    medium: Player | None = None
    large: Player | None = None

    def __getitem__(self, size: Size) -> Player | None:
        return getattr(self, size.name.lower())

    def __setitem__(self, size: Size, player: Player | None) -> None:
        setattr(self, size.name.lower(), player)

    def top_size(self) -> Size | None:
        """Size of the largest piece in the cell, or None if empty."""
        for size in reversed(Size):
            if self[size] is not None:
                return size
        return None

    def controlled_by(self) -> Player | None:
        """The owner of the largest piece in the cell, or None if empty."""
        size = self.top_size()
        return self[size] if size is not None else None

    def __str__(self) -> str:
        player = self.controlled_by()
        if player is None:
            return "    "
        size = self.top_size()
        assert size is not None
        return f"{player.abbrev}-{size.abbrev}"


class LineKind(Enum):
    ROW = "row"
    COLUMN = "column"
    DIAGONAL_UP = "diagonal_up"  # row + col == 2
    DIAGONAL_DOWN = "diagonal_down"  # row == col


@dataclass(frozen=True)
class Line:
    """One of the eight winning lines: 3 rows, 3 columns, 2 diagonals."""

    kind: LineKind
    index: int | None = None

    DIAGONAL_UP: ClassVar[Line]
    DIAGONAL_DOWN: ClassVar[Line]

    def __post_init__(self) -> None:
        if self.kind in (LineKind.ROW, LineKind.COLUMN):
            if self.index is None or not 0 <= self.index < BOARD_SIZE:
                raise ValueError(f"Invalid {self.kind.value} index: {self.index}")
        elif self.index is not None:
            raise ValueError("Diagonals take no index")

    @classmethod
    def row(cls, index: int) -> Line:
        return cls(LineKind.ROW, index)

    @classmethod
    def column(cls, index: int) -> Line:
        return cls(LineKind.COLUMN, index)

    def matches(self, cell: Cell) -> bool:
        """Check if a cell lies on this line."""
        if self.kind == LineKind.ROW:
            return cell.row == self.index
        if self.kind == LineKind.COLUMN:
            return cell.col == self.index
        if self.kind == LineKind.DIAGONAL_UP:
            return cell.row + cell.col == BOARD_SIZE - 1
        return cell.row == cell.col

    @staticmethod
    def all() -> Iterator[Line]:
        """
        Iterate over all lines: rows, then columns, then the up and down
        diagonals. Victory detection reports the first complete line in
        this order.
        """
        for i in range(BOARD_SIZE):
            yield Line.row(i)
        for i in range(BOARD_SIZE):
            yield Line.column(i)
        yield Line.DIAGONAL_UP
        yield Line.DIAGONAL_DOWN

    def __str__(self) -> str:
        if self.kind == LineKind.ROW:
            return f"row {self.index + 1}"  # type: ignore[operator]
        if self.kind == LineKind.COLUMN:
            return f"column {self.index + 1}"  # type: ignore[operator]
        if self.kind == LineKind.DIAGONAL_UP:
            return "diagonal ↗"
        return "diagonal ↘"


Line.DIAGONAL_UP = Line(LineKind.DIAGONAL_UP)
Line.DIAGONAL_DOWN = Line(LineKind.DIAGONAL_DOWN)


@dataclass
class Board:
    """
    A 3x3 grid of cells, each tracking an optional owner per piece size.

    The board does no validation of its own; legality is enforced by Game.
    """

    _cells: list[CellState] = field(
        default_factory=lambda: [CellState() for _ in range(BOARD_SIZE * BOARD_SIZE)]
    )

    def copy(self) -> Board:
        """Create an independent copy of the board."""
        return Board([CellState(c.small, c.medium, c.large) for c in self._cells])

    # --- Cell access ---

    def __getitem__(self, cell: Cell) -> CellState:
        return self._cells[cell.index]

    def read(self, cell: Cell, size: Size) -> Player | None:
        """Get the owner of the piece of a given size at a cell."""
        return self[cell][size]

    def write(self, cell: Cell, size: Size, player: Player | None) -> None:
        """Set or clear the piece of a given size at a cell."""
        self[cell][size] = player

    def controlling_player(self, cell: Cell) -> Player | None:
        return self[cell].controlled_by()

    def top_size(self, cell: Cell) -> Size | None:
        return self[cell].top_size()

    # --- Iteration ---

    def cells(self) -> Iterator[tuple[Cell, CellState]]:
        """Iterate over every cell and its state, row by row."""
        for cell in Cell.all():
            yield cell, self[cell]

    def cells_on_line(self, line: Line) -> list[tuple[Cell, CellState]]:
        """Get the three cells (and their states) lying on a line."""
        return [(cell, state) for cell, state in self.cells() if line.matches(cell)]

    def count(self, player: Player, size: Size) -> int:
        """Count the cells holding a piece of this player and size."""
        return sum(1 for _, state in self.cells() if state[size] == player)

    # --- Display ---

    def render(self) -> str:
        """
        Text representation of the board.

        Each cell shows the controlling player and top size (``P1-S``) or
        four blanks; columns are split by ``|`` and rows by a dashed line.
        """
        lines = []
        for row in range(BOARD_SIZE):
            if row > 0:
                lines.append("-" * 14)
            lines.append("|".join(str(self[Cell(row, col)]) for col in range(BOARD_SIZE)))
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.render()
