"""Squares, cell contents, enemy pieces and move geometry."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

BOARD_SIZE = 8

KNIGHT_OFFSETS = (
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
    (1, 2),
    (1, -2),
    (-1, 2),
    (-1, -2),
)

_COLUMNS = "abcdefgh"
_ROWS = "12345678"


class Enemy(Enum):
    """Kinds of enemy piece that can appear on the board."""

    KNIGHT = auto()
    ROOK = auto()
    BISHOP = auto()
    QUEEN = auto()
    KING = auto()


class Cell(Enum):
    """Contents of a single square."""

    EMPTY = " "
    KNIGHT = "H"
    MINE = "*"
    FLAG = "X"
    ENEMY = "E"


def is_knight_move(from_x, from_y, to_x, to_y):
    """Return True if a knight on (from_x, from_y) can jump to (to_x, to_y)."""
    return (to_x - from_x, to_y - from_y) in KNIGHT_OFFSETS


def parse_square(text):
    """Turn input such as ``e4`` or ``E 4`` into board coordinates ``(x, y)``.

    ``x`` counts rows from the top (rank 8 is row 1) and ``y`` counts
    columns from the left (file ``a`` is column 1).
    """
    chars = "".join(text.split())
    if len(chars) < 2:
        raise ValueError(f"expected a column letter and a row digit, got {text!r}")
    column, row = chars[0].lower(), chars[1]
    if len(column) != 1 or column not in _COLUMNS:
        raise ValueError(f"column must be a letter from a to h, got {chars[0]!r}")
    if row not in _ROWS:
        raise ValueError(f"row must be a digit from 1 to 8, got {row!r}")
    return BOARD_SIZE + 1 - int(row), _COLUMNS.index(column) + 1


@dataclass
class EnemyFigure:
    """An enemy piece and where it stands; ``x`` and ``y`` are None when absent."""

    kind: Enemy = Enemy.KNIGHT
    x: int | None = None
    y: int | None = None

    @property
    def present(self):
        return self.x is not None and self.y is not None

    def place(self, x, y):
        """Put the enemy on square (x, y)."""
        self.x = x
        self.y = y

    def clear(self):
        """Take the enemy off the board."""
        self.x = None
        self.y = None

    def attacks(self, x, y):
        """Return True if the enemy threatens square (x, y)."""
        if not self.present:
            return False
        if (x, y) == (self.x, self.y):
            return False
        same_line = x == self.x or y == self.y
        same_diagonal = x - y == self.x - self.y or x + y == self.x + self.y
        match self.kind:
            case Enemy.KNIGHT:
                return is_knight_move(x, y, self.x, self.y)
            case Enemy.ROOK:
                return same_line
            case Enemy.BISHOP:
                return same_diagonal
            case Enemy.QUEEN:
                return same_line or same_diagonal
            case Enemy.KING:
                return abs(x - self.x) <= 1 and abs(y - self.y) <= 1
        return False