"""The 8x8 minefield with the player's knight and the target flag."""

from __future__ import annotations

from .pieces import BOARD_SIZE, KNIGHT_OFFSETS, Cell, is_knight_move

MAX_MINES = 25


def _on_board(x, y):
    return 1 <= x <= BOARD_SIZE and 1 <= y <= BOARD_SIZE


def _squares():
    for x in range(1, BOARD_SIZE + 1):
        for y in range(1, BOARD_SIZE + 1):
            yield x, y


class Board:
    """A board indexed by 1-based ``(x, y)`` pairs, x being the row from the top."""

    def __init__(self, rng):
        self._rng = rng
        self._grid = [[Cell.EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        self.initial_mines = 0
        self.max_mines = MAX_MINES
        self.mine_increment = 0
        self.mine_count = 0
        self.remove_mines_num = 0
        self.finished = False

        self.knight = self._random_square()
        while True:
            flag = self._random_square()
            if flag != self.knight and not is_knight_move(*self.knight, *flag):
                break
        self.flag = flag
        self[self.knight] = Cell.KNIGHT
        self[self.flag] = Cell.FLAG

    def _random_square(self):
        return (
            self._rng.randint(1, BOARD_SIZE),
            self._rng.randint(1, BOARD_SIZE),
        )

    @staticmethod
    def _check(pos):
        x, y = pos
        if not _on_board(x, y):
            raise IndexError(f"square {pos!r} is off the board")
        return x, y

    def __getitem__(self, pos):
        x, y = self._check(pos)
        return self._grid[x - 1][y - 1]

    def __setitem__(self, pos, cell):
        x, y = self._check(pos)
        self._grid[x - 1][y - 1] = cell

    def move_knight(self, x, y):
        """Move the player's knight to (x, y), emptying the square it left."""
        self[self.knight] = Cell.EMPTY
        self.knight = (x, y)
        self[x, y] = Cell.KNIGHT

    def place_flag(self):
        """Put a new flag on a square that the knight can still reach."""
        candidates = [
            (x, y)
            for x, y in _squares()
            if self[x, y] not in (Cell.MINE, Cell.KNIGHT)
            and not is_knight_move(*self.flag, x, y)
            and self.has_open_move(x, y)
        ]
        if not candidates:
            raise RuntimeError("no square is left for a new flag")
        self.flag = self._rng.choice(candidates)
        self[self.flag] = Cell.FLAG

    def has_open_move(self, x, y):
        """Return True if some knight jump from (x, y) lands on a square without a mine."""
        return any(
            _on_board(x + dx, y + dy) and self[x + dx, y + dy] is not Cell.MINE
            for dx, dy in KNIGHT_OFFSETS
        )

    def _scatter_mine(self):
        candidates = [
            (x, y)
            for x, y in _squares()
            if self[x, y] not in (Cell.KNIGHT, Cell.FLAG, Cell.MINE)
            and not is_knight_move(x, y, *self.flag)
        ]
        if not candidates:
            raise RuntimeError("no free square is left for a mine")
        self[self._rng.choice(candidates)] = Cell.MINE

    def place_initial_mines(self):
        """Scatter ``initial_mines`` mines, never next to the flag by a knight jump."""
        for _ in range(self.initial_mines):
            self._scatter_mine()

    def add_mines(self, count):
        """Add up to ``count`` mines without exceeding ``max_mines``; return how many."""
        added = 0
        for _ in range(count):
            if self.mine_count >= self.max_mines:
                break
            self._scatter_mine()
            self.mine_count += 1
            added += 1
        return added

    def remove_mines(self, count):
        """Clear up to ``count`` randomly chosen mines; return how many were cleared."""
        mines = [pos for pos in _squares() if self[pos] is Cell.MINE]
        chosen = self._rng.sample(mines, min(count, len(mines)))
        for pos in chosen:
            self[pos] = Cell.EMPTY
        self.mine_count -= len(chosen)
        return len(chosen)

    def clear_enemy(self):
        """Empty every square occupied by an enemy piece."""
        for pos in _squares():
            if self[pos] is Cell.ENEMY:
                self[pos] = Cell.EMPTY