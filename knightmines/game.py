"""Game modes, move handling and the rules that end a round."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .pieces import BOARD_SIZE, Cell, Enemy, EnemyFigure, is_knight_move, parse_square

MAX_ILLEGAL_MOVES = 3


class GameMode(IntEnum):
    """The modes a player can choose from."""

    TUTORIAL = 0
    EASY = 1
    MEDIUM = 2
    SURVIVAL = 3
    MULTIGAME = 4


@dataclass(frozen=True)
class ModeSettings:
    """Mine counts and limits that a mode fixes."""

    initial_mines: int
    mine_increment: int
    remove_mines: int
    max_moves: int
    rounds: int
    boards: int


_SETTINGS = {
    GameMode.TUTORIAL: ModeSettings(10, 1, 1, 10, 1, 1),
    GameMode.EASY: ModeSettings(12, 2, 2, 20, 3, 1),
    GameMode.MEDIUM: ModeSettings(12, 3, 3, 50, 10, 1),
    GameMode.SURVIVAL: ModeSettings(5, 3, 5, 10000, 10000, 1),
    GameMode.MULTIGAME: ModeSettings(5, 3, 5, 10000, 10000, 2),
}


def settings_for(mode):
    """Return the settings of a mode; raise ValueError for an unknown mode."""
    return _SETTINGS[GameMode(mode)]


class InvalidMove(ValueError):
    """A move that could not be read or is not a knight's jump."""

    def __init__(self, message, game_over=False):
        super().__init__(message)
        self.game_over = game_over


def _squares():
    for x in range(1, BOARD_SIZE + 1):
        for y in range(1, BOARD_SIZE + 1):
            yield x, y


class Game:
    """Counters and rules shared by every board of one game."""

    def __init__(self, mode, rng):
        self.mode = GameMode(mode)
        self.settings = settings_for(self.mode)
        self.rng = rng
        self.flags = 0
        self.moves = 0
        self.illegal_streak = 0

    def setup_board(self, board):
        """Apply the mode's mine settings to a board and lay its first mines."""
        settings = self.settings
        board.initial_mines = settings.initial_mines
        board.mine_count = settings.initial_mines
        board.mine_increment = settings.mine_increment
        board.remove_mines_num = settings.remove_mines
        board.place_initial_mines()

    def spawn_enemy(self, board, enemy):
        """Give the enemy a random kind and a square from which it does not threaten the knight."""
        enemy.kind = self.rng.choice(list(Enemy))

        def safe(pos):
            if board[pos] in (Cell.KNIGHT, Cell.MINE, Cell.FLAG):
                return False
            if is_knight_move(*board.knight, *pos):
                return False
            return not EnemyFigure(enemy.kind, *pos).attacks(*board.knight)

        candidates = [pos for pos in _squares() if safe(pos)]
        if not candidates:
            raise RuntimeError("no square is left for an enemy piece")
        enemy.place(*self.rng.choice(candidates))
        board[enemy.x, enemy.y] = Cell.ENEMY

    def status_line(self):
        """Return the counters shown before each move."""
        if self.mode < GameMode.SURVIVAL:
            return (
                f"Moves left: {self.settings.max_moves - self.moves}\n"
                f"Flags left: {self.settings.rounds - self.flags}"
            )
        return f"Flags captured: {self.flags}"

    def _rejection(self, board, reason):
        self.illegal_streak += 1
        if self.illegal_streak >= MAX_ILLEGAL_MOVES:
            self.illegal_streak = 0
            board.finished = True
            return InvalidMove(
                f"You entered {MAX_ILLEGAL_MOVES} invalid inputs in a row. You lose.",
                game_over=True,
            )
        return InvalidMove(reason)

    def play_move(self, board, enemy, text):
        """Jump the knight to the square named by ``text``; return the messages it produced."""
        if board.finished:
            raise RuntimeError("the game on this board is already over")
        try:
            x, y = parse_square(text)
        except ValueError as exc:
            raise self._rejection(board, str(exc)) from exc
        if not is_knight_move(*board.knight, x, y):
            raise self._rejection(board, f"{text.strip()!r} is not a knight's move")

        self.illegal_streak = 0
        self.moves += 1
        messages = []

        def finish(message):
            board.finished = True
            messages.append(message)

        if self.moves == self.settings.max_moves:
            finish("Moves limit reached. You lose.")

        cell = board[x, y]
        if cell is Cell.FLAG:
            self._capture_flag(board, enemy, x, y, finish)
        elif cell is Cell.MINE:
            board.move_knight(x, y)
            if self.mode is GameMode.MULTIGAME:
                board.finished = True
            else:
                finish("You stepped on a mine. Game over.")
        elif not board.has_open_move(*board.flag):
            finish(f"Impossible to reach the flag. Game over.\nFinal score: {self.flags}")

        if cell is Cell.ENEMY:
            enemy.clear()
            board.clear_enemy()
            self.flags += 1

        board.move_knight(x, y)

        if enemy.attacks(x, y):
            finish("You were taken by the enemy figure. Game over.")
            enemy.clear()
            board.clear_enemy()
            board[x, y] = Cell.ENEMY
        return messages

    def _capture_flag(self, board, enemy, x, y, finish):
        enemy.clear()
        board.clear_enemy()
        self.flags += 1
        board.move_knight(x, y)
        if self.mode is GameMode.TUTORIAL:
            finish(f"Congratulations! You found the target within {self.moves} moves. You won!")
            return
        if self.flags == self.settings.rounds:
            finish(
                f"Congratulations! You found {self.settings.rounds} flags "
                f"in {self.moves} moves. You win!"
            )
            return
        if self.flags % 3 == 0:
            self._reshuffle_mines(board)
        else:
            board.add_mines(board.mine_increment)
        board.place_flag()
        self.spawn_enemy(board, enemy)

    @staticmethod
    def _reshuffle_mines(board):
        board.remove_mines(board.remove_mines_num)
        wanted = board.mine_increment + board.remove_mines_num
        if board.mine_count + wanted >= board.max_mines:
            board.add_mines(board.remove_mines_num)
        else:
            board.add_mines(wanted)