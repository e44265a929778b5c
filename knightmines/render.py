"""Text drawing of one board or of several boards side by side."""

from __future__ import annotations

from .pieces import BOARD_SIZE, Cell, Enemy

CLEAR_SCREEN = "\033[2J\033[H\n"

_TOP = " ___" * BOARD_SIZE
_BOTTOM = "|___" * BOARD_SIZE + "|"
_FILES = "  A   B   C   D   E   F   G   H"

_ENEMY_GLYPHS = {
    Enemy.KNIGHT: "\u2658",
    Enemy.ROOK: "\u2656",
    Enemy.BISHOP: "\u2657",
    Enemy.QUEEN: "\u2655",
    Enemy.KING: "\u2654",
}


def _cell_text(cell, enemy):
    match cell:
        case Cell.KNIGHT:
            return "\u265e | "
        case Cell.FLAG:
            return "\U0001f6a9| "
        case Cell.MINE:
            return "\U0001f4a3| "
        case Cell.ENEMY:
            return _ENEMY_GLYPHS[enemy.kind] + " | "
    return "\u200b  | "


def _row_text(board, enemy, x):
    return "".join(
        _cell_text(board[x, y], enemy) for y in range(1, BOARD_SIZE + 1)
    )


def render_board(board, enemy):
    """Return the drawing of a single board, ranks down the right side."""
    parts = [_TOP, "\n"]
    for x in range(1, BOARD_SIZE + 1):
        rank = BOARD_SIZE + 1 - x
        parts.append(f"| {_row_text(board, enemy, x)}  {rank}\n{_BOTTOM}\n")
    parts.append(_FILES + "\n")
    return "".join(parts)


def render_boards(pairs):
    """Return the drawing of several ``(board, enemy)`` pairs side by side."""
    pairs = list(pairs)
    if not pairs:
        raise ValueError("at least one board is needed")
    last = len(pairs) - 1
    parts = [_TOP + "\t" for _ in pairs]
    for x in range(1, BOARD_SIZE + 1):
        parts.append("\n| ")
        for index, (board, enemy) in enumerate(pairs):
            parts.append(_row_text(board, enemy, x))
            if index < last:
                parts.append("\t| ")
        parts.append(f"  {BOARD_SIZE + 1 - x}\n")
        parts.extend(_BOTTOM + "\t" for _ in pairs)
    parts.append("\n")
    parts.extend(_FILES + "\t\t" for _ in pairs)
    return "".join(parts)