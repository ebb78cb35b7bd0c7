from enum import Enum, IntEnum


class Player(Enum):
    """The two players in the game."""

    ONE = 1
    TWO = 2

    def opponent(self) -> "Player":
        """Return the opposing player."""
        return Player.TWO if self == Player.ONE else Player.ONE

    def __invert__(self) -> "Player":
        return self.opponent()

    @property
    def abbrev(self) -> str:
        """Short form used in move text and on the board, e.g. ``P1``."""
        return f"P{self.value}"

    def __str__(self) -> str:
        return f"Player {self.value}"


class Size(IntEnum):
    """Piece sizes, ordered small to large."""

    SMALL = 1
    MEDIUM = 2
    LARGE = 3

    def can_gobble(self, other: "Size") -> bool:
        """Return True if this size can gobble (cover) the other size."""
        return self > other

    @property
    def abbrev(self) -> str:
        return self.name[0]

    def __str__(self) -> str:
        return self.name.capitalize()


# Pieces of each size each player starts with
STARTING_INVENTORY = 2
