# knightmines

A small terminal puzzle game played on an 8×8 chessboard. You control a
knight (♞) and must reach the flag (🚩) using knight's jumps only. Mines
(💣) are scattered across the board, and an enemy piece (knight, rook,
bishop, queen or king) stands somewhere on it. Step on a mine, or land on a
square the enemy attacks, and the game is over. Landing on the enemy itself
captures it and counts as a flag.

## Installing

```
pip install .
```

## Playing

```
knightmines
```

Without options the game asks for a mode. You can also give it directly,
and fix the random layout with a seed:

```
knightmines --mode 1 --seed 42
```

| Mode | Name      | Flags to win | Move limit | Boards |
|------|-----------|--------------|------------|--------|
| 0    | Tutorial  | 1            | 10         | 1      |
| 1    | Easy      | 3            | 20         | 1      |
| 2    | Medium    | 10           | 50         | 1      |
| 3    | Survival  | 10000        | 10000      | 1      |
| 4    | Multigame | 10000        | 10000      | 2      |

Enter each move as a file letter followed by a rank digit, for example
`c3` or `F 6`. Entries that cannot be read, or that are not a knight's
jump from the current square, are rejected; three rejected entries in a row
end the game on that board. Before each move the remaining moves and flags
are shown (in Survival and Multigame, the number of flags captured).

After each captured flag new mines are laid (never more than 25 counted on
a board), a new flag is placed, and a new enemy piece appears. On every
third flag some mines are cleared first and then relaid. If no knight's
jump onto the flag's square is left free of mines, the game ends with your
final score.

In Multigame two boards are drawn side by side, and you move on each board
in turn until both games have ended. End of input stops the game.

## Using it as a library

- `knightmines.game.Game(mode, rng)` holds the counters and rules;
  `Game.play_move(board, enemy, text)` plays one move and returns the
  messages it produced, raising `InvalidMove` for a rejected entry.
  `settings_for(mode)` returns the `ModeSettings` of a `GameMode`.
- `knightmines.board.Board(rng)` is the board, indexed by 1-based
  `(row, column)` pairs holding `Cell` values.
- `knightmines.pieces` has `EnemyFigure`, `is_knight_move` and
  `parse_square`.
- `knightmines.render.render_board(board, enemy)` and
  `render_boards(pairs)` return the text drawn in the terminal.
- `knightmines.cli.run(game, read_line, write)` plays a whole game with any
  line reader and writer you supply.

Boards and games take a `random.Random` instance, so a game can be replayed
exactly from a seed.

## What it does not do

Scores are not kept: there is no scoreboard and nothing is saved between
games.