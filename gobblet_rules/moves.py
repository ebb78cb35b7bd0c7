from __future__ import annotations

import re
from dataclasses import dataclass

from gobblet_rules.board import Cell
from gobblet_rules.errors import (
    CellError,
    CellOutOfBounds,
    CellTooFewParts,
    InvalidColumn,
    InvalidPlayer,
    InvalidRow,
    InvalidSize,
    InvalidSource,
    InvalidTarget,
    ParseCellError,
    TooFewParts,
    TooManyParts,
)
from gobblet_rules.types import Player, Size

INVENTORY_TOKEN = "_"
ARROW_TOKEN = ">"

_PLAYERS = {"P1": Player.ONE, "p1": Player.ONE, "P2": Player.TWO, "p2": Player.TWO}
_SIZES = {"S": Size.SMALL, "M": Size.MEDIUM, "L": Size.LARGE}
_COORDINATE = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True)
class Move:
    """
    Represents a move in the game.

    A move is either:
    - Place from inventory: source is None
    - Move on board: source is the cell the piece currently occupies

    In both cases, target is the destination.
    """

    player: Player
    size: Size
    source: Cell | None
    target: Cell

    @property
    def is_from_inventory(self) -> bool:
        """True if this move places a piece from the player's inventory."""
        return self.source is None

    def __str__(self) -> str:
        return move_to_notation(self)


def move_to_notation(move: Move) -> str:
    """
    Convert a move to its text form.

    Inventory placement: P1 S _ > 1,1
    Board move: P2 L 0,0 > 2,2
    """
    source = INVENTORY_TOKEN if move.source is None else str(move.source)
    return f"{move.player.abbrev} {move.size.abbrev} {source} {ARROW_TOKEN} {move.target}"


def notation_to_move(notation: str) -> Move:
    """
    Parse move text: ``<player> <size> <source> <arrow> <target>``.

    The arrow token is required but its content is not checked. Raises a
    ParseMoveError subclass describing the first problem found.
    """
    parts = notation.split()
    if len(parts) < 5:
        raise TooFewParts(len(parts))
    if len(parts) > 5:
        raise TooManyParts(len(parts))

    player_token, size_token, source_token, _arrow, target_token = parts

    player = _PLAYERS.get(player_token)
    if player is None:
        raise InvalidPlayer(player_token)

    size = _SIZES.get(size_token.upper())
    if size is None:
        raise InvalidSize(size_token)

    source: Cell | None = None
    if source_token != INVENTORY_TOKEN:
        try:
            source = parse_cell(source_token)
        except ParseCellError as e:
            raise InvalidSource(e) from e

    try:
        target = parse_cell(target_token)
    except ParseCellError as e:
        raise InvalidTarget(e) from e

    return Move(player=player, size=size, source=source, target=target)


def parse_cell(token: str) -> Cell:
    """Parse a ``row,col`` token into a Cell."""
    row_text, sep, col_text = token.partition(",")
    if not sep:
        raise CellTooFewParts(token)
    if not _COORDINATE.fullmatch(row_text):
        raise InvalidRow(token)
    if not _COORDINATE.fullmatch(col_text):
        raise InvalidColumn(token)

    try:
        return Cell(int(row_text), int(col_text))
    except CellError as e:
        raise CellOutOfBounds(token, e) from e
