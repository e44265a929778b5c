"""A terminal game: guide a knight to the flags across a mined chessboard."""

__version__ = "0.1.0"