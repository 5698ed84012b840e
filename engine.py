# engine.py
from __future__ import annotations
from typing import Iterator, List, Optional, Tuple
from models import (
    BOARD_CELLS, EMPTY_BOARD, Board, Cell, Draw, InProgress, InvalidArgument, Status, Winner,
)

Line = Tuple[int, int, int]

LINES: Tuple[Line, ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # cols
    (0, 4, 8), (2, 4, 6),             # diags
)


# ---- win evaluator ----
def winning_line(board: Board) -> Optional[Line]:
    """First line in LINES held entirely by one player, or None."""
    for a, b, c in LINES:
        if board[a] is not Cell.EMPTY and board[a] is board[b] is board[c]:
            return (a, b, c)
    return None


def winner(board: Board) -> Cell:
    line = winning_line(board)
    if line is None:
        return Cell.EMPTY
    return board[line[0]]


def is_full(board: Board) -> bool:
    return all(c is not Cell.EMPTY for c in board)


class HistoryView:
    """Read-only, re-iterable view of (move_number, snapshot) pairs."""

    def __init__(self, history: List[Board]):
        self._history = history

    def __iter__(self) -> Iterator[Tuple[int, Board]]:
        # each pass walks a copy taken when it starts; later engine moves do not affect it
        return enumerate(tuple(self._history))

    def __len__(self) -> int:
        return len(self._history)


class Engine:
    def __init__(self):
        self._history: List[Board] = [EMPTY_BOARD]
        self._cursor = 0

    # ---- helpers ----
    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def move_count(self) -> int:
        return len(self._history) - 1

    def current_snapshot(self) -> Board:
        return self._history[self._cursor]

    def current_mover(self) -> Cell:
        return Cell.X if self._cursor % 2 == 0 else Cell.O

    def history_view(self) -> HistoryView:
        return HistoryView(self._history)

    # ---- rules & checks ----
    def status(self) -> Status:
        board = self.current_snapshot()
        w = winner(board)
        if w is not Cell.EMPTY:
            return Winner(w)
        if is_full(board):
            return Draw()
        return InProgress(self.current_mover())

    def winning_line(self) -> Optional[Line]:
        return winning_line(self.current_snapshot())

    def status_text(self) -> str:
        st = self.status()
        if isinstance(st, Winner):
            return f"Winner: {st.player}"
        if isinstance(st, Draw):
            return "Draw"
        return f"Next player: {st.next_player}"

    @staticmethod
    def move_description(move: int) -> str:
        return f"Go to move #{move}" if move else "Go to game start"

    # ---- moves ----
    def apply_move(self, cell_index: int) -> bool:
        """Place the current mover's mark at ``cell_index`` (0..8, row-major).

        Returns False, leaving history and cursor untouched, when the cell is
        occupied or the displayed position is already won. Raises
        InvalidArgument when ``cell_index`` is not a board index.
        """
        if isinstance(cell_index, bool) or not isinstance(cell_index, int) \
                or not 0 <= cell_index < BOARD_CELLS:
            raise InvalidArgument(f"cell index must be in 0..{BOARD_CELLS - 1}, got {cell_index!r}")

        base = self.current_snapshot()
        if winner(base) is not Cell.EMPTY:
            return False
        if base[cell_index] is not Cell.EMPTY:
            return False

        mover = self.current_mover()
        nxt = base[:cell_index] + (mover,) + base[cell_index + 1:]

        # moving from a past position discards the moves after it
        del self._history[self._cursor + 1:]
        self._history.append(nxt)
        self._cursor = len(self._history) - 1
        return True

    def jump_to(self, move: int) -> None:
        if isinstance(move, bool) or not isinstance(move, int) \
                or not 0 <= move < len(self._history):
            raise InvalidArgument(f"move must be in 0..{len(self._history) - 1}, got {move!r}")
        self._cursor = move
