from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING

from gobblet_rules.board import Board, Line
from gobblet_rules.errors import (
    GameOver,
    OutOfTurn,
    PieceBlockedAtSource,
    PieceNotAtSource,
    PieceNotInInventory,
    SubmitMoveError,
    TargetBlocked,
)
from gobblet_rules.moves import Move
from gobblet_rules.types import STARTING_INVENTORY, Player, Size

if TYPE_CHECKING:
    from gobblet_rules.config import GameConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Victory:
    """The terminal state of a game: who won, and on which line."""

    player: Player
    line: Line

    def __str__(self) -> str:
        return f"{self.player} wins on {self.line}"


class Game:
    """
    Manages a game of Gobblet Gobblers.

    Validates and applies moves, keeps the move history, and detects the
    end of the game. Once a victory is recorded no further moves are accepted.
    """

    def __init__(self, starting_inventory: int = STARTING_INVENTORY) -> None:
        self._board = Board()
        self._starting_inventory = starting_inventory
        self._moves: list[Move] = []
        self._victory: Victory | None = None
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, config: GameConfig) -> Game:
        return cls(starting_inventory=config.starting_inventory)

    # --- State access ---

    @property
    def board(self) -> Board:
        """The current board. Treat as read-only; mutate only via submit()."""
        return self._board

    @property
    def moves(self) -> tuple[Move, ...]:
        """Accepted moves in order of submission."""
        return tuple(self._moves)

    @property
    def outcome(self) -> Victory | None:
        """The victory, or None while the game is in progress."""
        return self._victory

    @property
    def starting_inventory(self) -> int:
        return self._starting_inventory

    def is_over(self) -> bool:
        return self._victory is not None

    def next_player(self) -> Player:
        """The player whose turn it is: the one who did not move last."""
        if not self._moves:
            return Player.ONE
        return self._moves[-1].player.opponent()

    def in_play(self, player: Player, size: Size) -> int:
        """Number of this player's pieces of a size that are on the board."""
        return self._board.count(player, size)

    def inventory(self, player: Player, size: Size) -> int:
        """Number of this player's pieces of a size still off the board."""
        return self._starting_inventory - self.in_play(player, size)

    # --- Moves ---

    def submit(self, move: Move) -> Victory | None:
        """
        Validate and apply a move.

        Returns the victory if the move ends the game, otherwise None.
        Raises a SubmitMoveError subclass if the move is illegal; the game
        is left unchanged in that case.
        """
        with self._lock:
            try:
                self._validate(move)
            except SubmitMoveError as e:
                logger.debug("Rejected %s: %s", move, e)
                raise

            if move.source is not None:
                self._board.write(move.source, move.size, None)
            self._board.write(move.target, move.size, move.player)

            victory = look_for_victory(self._board, move.player)
            self._moves.append(move)
            self._victory = victory

            logger.debug("Accepted move %d: %s", len(self._moves), move)
            if victory is not None:
                logger.info("%s", victory)
            return victory

    def _validate(self, move: Move) -> None:
        if self._victory is not None:
            raise GameOver()

        if move.player != self.next_player():
            raise OutOfTurn()

        if move.source is not None:
            if self._board.read(move.source, move.size) != move.player:
                raise PieceNotAtSource()
            source_size = self._board.top_size(move.source)
            if source_size is not None and source_size > move.size:
                raise PieceBlockedAtSource()
        elif self.in_play(move.player, move.size) >= self._starting_inventory:
            raise PieceNotInInventory()

        target_size = self._board.top_size(move.target)
        if target_size is not None and target_size >= move.size:
            raise TargetBlocked()

    def __repr__(self) -> str:
        status = str(self._victory) if self._victory else f"{self.next_player()} to move"
        return f"Game({status})\n{self._board}"


def look_for_victory(board: Board, last_mover: Player) -> Victory | None:
    """
    Look for a completed line on the board.

    If the move that produced this board left the opponent with a complete
    line, the opponent wins, even if the mover completed a line too. This
    stops a player from winning by uncovering the opponent's line while
    finishing their own. Otherwise the mover wins on their first complete
    line, if any.
    """
    opponent = last_mover.opponent()
    mover_line: Line | None = None

    for line in Line.all():
        owners = {state.controlled_by() for _, state in board.cells_on_line(line)}
        if len(owners) != 1:
            continue
        winner = owners.pop()
        if winner is None:
            continue

        if winner == opponent:
            return Victory(opponent, line)
        if mover_line is None:
            mover_line = line

    if mover_line is None:
        return None
    return Victory(last_mover, mover_line)
