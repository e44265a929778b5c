"""Terminal front end: choose a mode, then play moves until every board is over."""

from __future__ import annotations

import argparse
import random
import sys

from .board import Board
from .game import Game, GameMode, InvalidMove
from .pieces import EnemyFigure
from .render import CLEAR_SCREEN, render_board, render_boards

MODE_MENU = (
    "Select game mode: \n\n\n"
    "0 - Tutorial\t 1 - Easy\t 2 - Medium\t 3 - Survival\t 4 - Multigame\n\n\n"
)
MOVE_PROMPT = "Enter next valid move: "


def _take_turn(game, board, enemy, read_line, write):
    """Ask for moves until one is accepted or the board is lost; return its messages."""
    while True:
        write("\n" + game.status_line() + "\n")
        text = read_line(MOVE_PROMPT)
        try:
            return game.play_move(board, enemy, text)
        except InvalidMove as exc:
            if exc.game_over:
                return [str(exc)]
            write(f"{exc}\n")


def _write_messages(messages, write):
    for message in messages:
        write(message + "\n")


def _play_single(game, board, enemy, read_line, write):
    while not board.finished:
        write(CLEAR_SCREEN + render_board(board, enemy))
        messages = _take_turn(game, board, enemy, read_line, write)
        if board.finished:
            write(CLEAR_SCREEN + render_board(board, enemy))
        _write_messages(messages, write)


def _play_multi(game, boards, enemies, read_line, write):
    pairs = list(zip(boards, enemies))
    while True:
        active = [
            (number, board, enemy)
            for number, (board, enemy) in enumerate(pairs, start=1)
            if not board.finished
        ]
        write(CLEAR_SCREEN + render_boards(pairs))
        if not active:
            write("\n")
            return
        for number, board, enemy in active:
            write(f"\nBOARD {number} ACTIVE\n")
            messages = _take_turn(game, board, enemy, read_line, write)
            write(CLEAR_SCREEN + render_boards(pairs) + "\n")
            _write_messages(messages, write)


def run(game, read_line, write):
    """Set up the boards for ``game`` and play it to the end.

    ``read_line(prompt)`` supplies the player's input and raises EOFError when
    there is no more; ``write(text)`` shows output. Returns the list of boards.
    """
    boards = [Board(game.rng) for _ in range(game.settings.boards)]
    enemies = [EnemyFigure() for _ in boards]
    for board in boards:
        game.setup_board(board)
    for board, enemy in reversed(list(zip(boards, enemies))):
        game.spawn_enemy(board, enemy)

    try:
        if len(boards) == 1:
            _play_single(game, boards[0], enemies[0], read_line, write)
        else:
            _play_multi(game, boards, enemies, read_line, write)
    except EOFError:
        for board in boards:
            board.finished = True
        write("\n")
    return boards


def _choose_mode(read_line, write):
    write(CLEAR_SCREEN + MODE_MENU)
    while True:
        text = read_line("").strip()
        try:
            value = int(text)
        except ValueError:
            continue
        if value in set(GameMode):
            write("\n\n\n")
            return GameMode(value)


def _write_stdout(text):
    sys.stdout.write(text)
    sys.stdout.flush()


def main(argv=None):
    """Start the game on the terminal; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="knightmines",
        description="Guide a knight to the flags without stepping on a mine.",
    )
    parser.add_argument(
        "--mode",
        type=int,
        choices=[int(mode) for mode in GameMode],
        help="0 tutorial, 1 easy, 2 medium, 3 survival, 4 multigame",
    )
    parser.add_argument("--seed", type=int, help="seed for the random board layout")
    args = parser.parse_args(argv)

    if args.mode is None:
        try:
            mode = _choose_mode(input, _write_stdout)
        except EOFError:
            _write_stdout("\n")
            return 1
    else:
        mode = GameMode(args.mode)

    game = Game(mode, random.Random(args.seed))
    run(game, input, _write_stdout)
    return 0