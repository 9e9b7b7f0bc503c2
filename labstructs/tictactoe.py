"""Tic-tac-toe with a minimax opponent playing X."""

from __future__ import annotations

import argparse
import enum
from functools import lru_cache
from typing import Callable, List, Optional, Sequence, Tuple

PLAYER_X = "X"
PLAYER_O = "O"
EMPTY = " "
WIN_SCORE = 10

Board = List[List[str]]
_Cells = Tuple[Tuple[str, ...], ...]

_LINES = (
    tuple((r, c) for c in range(3) for r in [row])
    for row in range(3)
)
_ALL_LINES: Tuple[Tuple[Tuple[int, int], ...], ...] = (
    *tuple(tuple((r, c) for c in range(3)) for r in range(3)),
    *tuple(tuple((r, c) for r in range(3)) for c in range(3)),
    ((0, 0), (1, 1), (2, 2)),
    ((0, 2), (1, 1), (2, 0)),
)


class Outcome(enum.IntEnum):
    """State of a game."""

    O_WINS = -1
    DRAW = 0
    X_WINS = 1
    ONGOING = 2


_MESSAGES = {
    Outcome.X_WINS: "PLAYER_X (AI) wins!",
    Outcome.O_WINS: "PLAYER_O wins!",
    Outcome.DRAW: "It's a draw!",
}


def empty_board() -> Board:
    """A fresh 3x3 board of empty cells."""
    return [[EMPTY] * 3 for _ in range(3)]


def render_board(board: Sequence[Sequence[str]]) -> str:
    """The board drawn with ``|`` and ``---+---+---`` separators."""
    rows = ["|".join(f" {cell} " for cell in row) for row in board]
    return "\n---+---+---\n".join(rows)


def moves_left(board: Sequence[Sequence[str]]) -> bool:
    """Whether any cell is still empty."""
    return any(cell == EMPTY for row in board for cell in row)


def evaluate(board: Sequence[Sequence[str]]) -> int:
    """+10 if X has a line, -10 if O has one, else 0."""
    for line in _ALL_LINES:
        first, second, third = (board[r][c] for r, c in line)
        if first == second == third:
            if first == PLAYER_X:
                return WIN_SCORE
            if first == PLAYER_O:
                return -WIN_SCORE
    return 0


def _freeze(board: Sequence[Sequence[str]]) -> _Cells:
    cells = tuple(tuple(row) for row in board)
    if len(cells) != 3 or any(len(row) != 3 for row in cells):
        raise ValueError("board must be 3x3")
    return cells


def _empty_cells(cells: _Cells) -> List[Tuple[int, int]]:
    return [(r, c) for r in range(3) for c in range(3) if cells[r][c] == EMPTY]


def _place(cells: _Cells, row: int, col: int, mark: str) -> _Cells:
    return tuple(
        tuple(mark if (r, c) == (row, col) else cell for c, cell in enumerate(line))
        for r, line in enumerate(cells)
    )


@lru_cache(maxsize=None)
def _minimax(cells: _Cells, depth: int, is_max: bool) -> int:
    score = evaluate(cells)
    if score == WIN_SCORE:
        return score - depth
    if score == -WIN_SCORE:
        return score + depth
    if not moves_left(cells):
        return 0
    mark = PLAYER_X if is_max else PLAYER_O
    scores = (
        _minimax(_place(cells, r, c, mark), depth + 1, not is_max)
        for r, c in _empty_cells(cells)
    )
    return max(scores) if is_max else min(scores)


def minimax(board: Sequence[Sequence[str]], depth: int, is_max: bool) -> int:
    """Minimax value of ``board``; quicker wins and slower losses score better."""
    return _minimax(_freeze(board), depth, bool(is_max))


def find_best_move(board: Sequence[Sequence[str]]) -> Optional[Tuple[int, int]]:
    """The first cell with the best minimax value for X, or None if full."""
    cells = _freeze(board)
    best_value = -1000
    best: Optional[Tuple[int, int]] = None
    for r, c in _empty_cells(cells):
        value = _minimax(_place(cells, r, c, PLAYER_X), 0, False)
        if value > best_value:
            best_value = value
            best = (r, c)
    return best


def check_winner(board: Sequence[Sequence[str]]) -> Outcome:
    """Whether X or O has won, the board is drawn, or play goes on."""
    score = evaluate(board)
    if score == WIN_SCORE:
        return Outcome.X_WINS
    if score == -WIN_SCORE:
        return Outcome.O_WINS
    if not moves_left(board):
        return Outcome.DRAW
    return Outcome.ONGOING


def play(
    read_move: Callable[[Board], Tuple[int, int]],
    write: Callable[[str], object] = print,
) -> Outcome:
    """Play one game, X by minimax and O by ``read_move``; return the result."""
    board = empty_board()
    write("Welcome to 3x3 Tic-Tac-Toe!")
    write(render_board(board))
    x_to_move = True
    while True:
        outcome = check_winner(board)
        if outcome is not Outcome.ONGOING:
            write(_MESSAGES[outcome])
            return outcome
        if x_to_move:
            move = find_best_move(board)
            assert move is not None
            row, col = move
            board[row][col] = PLAYER_X
            write("PLAYER_X (AI) makes a move:")
        else:
            row, col = read_move([line[:] for line in board])
            if 0 <= row < 3 and 0 <= col < 3 and board[row][col] == EMPTY:
                board[row][col] = PLAYER_O
            else:
                write("Invalid move. Try again.")
                continue
        write(render_board(board))
        x_to_move = not x_to_move


def _prompt_move(board: Board) -> Tuple[int, int]:
    text = input("PLAYER_O, enter your move (row and column): ")
    try:
        row, col = (int(part) for part in text.split())
    except ValueError:
        return -1, -1
    return row, col


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play a game against the computer on the terminal."""
    parser = argparse.ArgumentParser(
        prog="labstructs-tictactoe",
        description="Play tic-tac-toe as O against a minimax opponent.",
    )
    parser.parse_args(argv)
    try:
        play(_prompt_move)
    except (EOFError, KeyboardInterrupt):
        print()
        return 1
    return 0