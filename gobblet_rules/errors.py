"""
Error types raised by the rules engine.

There are three closed families:

- ``CellError``: a coordinate outside the 3x3 board.
- ``ParseCellError`` / ``ParseMoveError``: malformed move text. These never
  touch game state.
- ``SubmitMoveError``: a well-formed move that is illegal in the current
  position. A rejected move leaves the game unchanged.

Every error is recoverable; callers are expected to report it and ask the
same player for another move. The human-readable text lives in ``message``;
structured context (counts, tokens, wrapped errors) lives in attributes.
"""

from __future__ import annotations


class _RulesError(Exception):
    message = ""

    def __str__(self) -> str:
        return self.message


# --- Cell construction ---


class CellError(_RulesError, ValueError):
    """A cell coordinate is outside the board."""

    message = "Cell out of bounds"

    def __init__(self, value: int) -> None:
        super().__init__(value)
        self.value = value


class RowOutOfBounds(CellError):
    message = "Row out of bounds"


class ColumnOutOfBounds(CellError):
    message = "Column out of bounds"


# --- Move text parsing ---


class ParseCellError(_RulesError, ValueError):
    """A ``row,col`` token could not be turned into a cell."""

    message = "Invalid cell"

    def __init__(self, token: str) -> None:
        super().__init__(token)
        self.token = token


class CellTooFewParts(ParseCellError):
    message = "Too few parts: a cell should be row,col"


class InvalidRow(ParseCellError):
    message = "Invalid row"


class InvalidColumn(ParseCellError):
    message = "Invalid column"


class CellOutOfBounds(ParseCellError):
    def __init__(self, token: str, cell_error: CellError) -> None:
        super().__init__(token)
        self.cell_error = cell_error

    @property
    def message(self) -> str:  # type: ignore[override]
        return f"Out of bounds: {self.cell_error}"


class ParseMoveError(_RulesError, ValueError):
    """Move text did not match ``<player> <size> <source> <arrow> <target>``."""

    message = "Invalid move"


class TooFewParts(ParseMoveError):
    def __init__(self, count: int) -> None:
        super().__init__(count)
        self.count = count

    @property
    def message(self) -> str:  # type: ignore[override]
        return f"Too few parts: expected 5, got {self.count}"


class TooManyParts(ParseMoveError):
    def __init__(self, count: int) -> None:
        super().__init__(count)
        self.count = count

    @property
    def message(self) -> str:  # type: ignore[override]
        return f"Too many parts: expected 5, got {self.count}"


class InvalidPlayer(ParseMoveError):
    message = "Invalid player"

    def __init__(self, token: str) -> None:
        super().__init__(token)
        self.token = token


class InvalidSize(ParseMoveError):
    message = "Invalid size"

    def __init__(self, token: str) -> None:
        super().__init__(token)
        self.token = token


class InvalidSource(ParseMoveError):
    def __init__(self, cell_error: ParseCellError) -> None:
        super().__init__(cell_error)
        self.cell_error = cell_error

    @property
    def message(self) -> str:  # type: ignore[override]
        return f"Invalid source: {self.cell_error}"


class InvalidTarget(ParseMoveError):
    def __init__(self, cell_error: ParseCellError) -> None:
        super().__init__(cell_error)
        self.cell_error = cell_error

    @property
    def message(self) -> str:  # type: ignore[override]
        return f"Invalid target: {self.cell_error}"


# --- Move submission ---


class SubmitMoveError(_RulesError):
    """A move was rejected by the game."""

    message = "Illegal move"


class GameOver(SubmitMoveError):
    message = "The game has already ended"


class OutOfTurn(SubmitMoveError):
    message = "Other player's turn"


class PieceNotAtSource(SubmitMoveError):
    message = "Piece is not present at source"


class PieceNotInInventory(SubmitMoveError):
    message = "Piece not available to be moved from inventory"


class PieceBlockedAtSource(SubmitMoveError):
    message = "Piece is present at source, but is blocked by a larger piece"


class TargetBlocked(SubmitMoveError):
    message = "A piece of the same or greater size is already at the destination"
