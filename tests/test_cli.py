import io
import random
import sys

import pytest

from knightmines.board import Board
from knightmines.cli import main, run
from knightmines.game import Game, GameMode
from knightmines.pieces import BOARD_SIZE, KNIGHT_OFFSETS, parse_square


def _reader(lines):
    it = iter(lines)
    prompts = []

    def read_line(prompt):
        prompts.append(prompt)
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read_line, prompts


def _collector():
    chunks = []
    return chunks, chunks.append


def _square_text(x, y):
    return "abcdefgh"[y - 1] + str(BOARD_SIZE + 1 - x)


def _first_knight(seed):
    return Board(random.Random(seed)).knight


def test_end_of_input_finishes_single_board():
    game = Game(GameMode.TUTORIAL, random.Random(1))
    read_line, _ = _reader([])
    chunks, write = _collector()
    boards = run(game, read_line, write)
    assert len(boards) == 1
    assert boards[0].finished
    output = "".join(chunks)
    assert "  A   B   C   D   E   F   G   H" in output
    assert game.moves == 0


def test_three_invalid_inputs_lose():
    game = Game(GameMode.TUTORIAL, random.Random(2))
    read_line, prompts = _reader(["zz", "zz", "zz", "a1"])
    chunks, write = _collector()
    boards = run(game, read_line, write)
    output = "".join(chunks)
    assert "You entered 3 invalid inputs in a row. You lose." in output
    assert boards[0].finished
    assert game.moves == 0
    assert len(prompts) == 3
    assert output.count("Moves left: 10") == 3


def test_prompt_is_passed_to_reader():
    game = Game(GameMode.EASY, random.Random(3))
    read_line, prompts = _reader([])
    _, write = _collector()
    boards = run(game, read_line, write)
    assert prompts == ["Enter next valid move: "]
    assert len(boards) == 1
    assert boards[0].finished is True
    assert game.moves == 0


@pytest.mark.parametrize("seed", [4, 11, 25])
def test_legal_move_is_played(seed):
    kx, ky = _first_knight(seed)
    target = next(
        (kx + dx, ky + dy)
        for dx, dy in KNIGHT_OFFSETS
        if 1 <= kx + dx <= BOARD_SIZE and 1 <= ky + dy <= BOARD_SIZE
    )
    text = _square_text(*target)
    assert parse_square(text) == target

    game = Game(GameMode.SURVIVAL, random.Random(seed))
    read_line, _ = _reader([text])
    _, write = _collector()
    boards = run(game, read_line, write)
    assert game.moves == 1
    assert boards[0].knight == target


def test_multigame_uses_two_boards():
    game = Game(GameMode.MULTIGAME, random.Random(5))
    read_line, _ = _reader([])
    chunks, write = _collector()
    boards = run(game, read_line, write)
    assert len(boards) == 2
    assert all(board.finished for board in boards)
    output = "".join(chunks)
    assert "BOARD 1 ACTIVE" in output
    assert output.count("  A   B   C   D   E   F   G   H") >= 2


def test_multigame_invalid_inputs_finish_first_board_then_second():
    game = Game(GameMode.MULTIGAME, random.Random(6))
    read_line, _ = _reader(["zz"] * 6)
    chunks, write = _collector()
    boards = run(game, read_line, write)
    output = "".join(chunks)
    assert output.count("You entered 3 invalid inputs in a row. You lose.") == 2
    assert "BOARD 2 ACTIVE" in output
    assert all(board.finished for board in boards)


def test_main_with_mode_option(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    assert main(["--mode", "0", "--seed", "3"]) == 0
    out = capsys.readouterr().out
    assert "Moves left: 10" in out


def test_main_prompts_for_mode(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("9\nabc\n3\n"))
    assert main(["--seed", "8"]) == 0
    out = capsys.readouterr().out
    assert "Select game mode:" in out
    assert "Flags captured: 0" in out


def test_main_without_any_mode_input(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    assert main([]) == 1
    assert "Select game mode:" in capsys.readouterr().out


def test_main_rejects_unknown_mode():
    with pytest.raises(SystemExit) as info:
        main(["--mode", "7"])
    assert info.value.code == 2