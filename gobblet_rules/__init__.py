# Core rules engine for Gobblet Gobblers

from gobblet_rules.board import Board, Cell, CellState, Line, LineKind
from gobblet_rules.config import GameConfig
from gobblet_rules.errors import (
    CellError,
    ParseCellError,
    ParseMoveError,
    SubmitMoveError,
)
from gobblet_rules.game import Game, Victory, look_for_victory
from gobblet_rules.moves import Move, move_to_notation, notation_to_move, parse_cell
from gobblet_rules.types import STARTING_INVENTORY, Player, Size

__all__ = [
    "Board",
    "Cell",
    "CellError",
    "CellState",
    "Game",
    "GameConfig",
    "Line",
    "LineKind",
    "Move",
    "ParseCellError",
    "ParseMoveError",
    "Player",
    "STARTING_INVENTORY",
    "Size",
    "SubmitMoveError",
    "Victory",
    "look_for_victory",
    "move_to_notation",
    "notation_to_move",
    "parse_cell",
]
