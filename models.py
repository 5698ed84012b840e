# models.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

BOARD_CELLS = 9


class Cell(Enum):
    EMPTY = " "
    X = "X"
    O = "O"

    def __str__(self) -> str:
        return self.value


# A board is an immutable row-major 9-tuple; every snapshot in history is one
Board = Tuple[Cell, ...]

EMPTY_BOARD: Board = (Cell.EMPTY,) * BOARD_CELLS


class InvalidArgument(ValueError):
    """Raised when the engine is called with an index outside its domain."""


@dataclass(frozen=True)
class Winner:
    player: Cell


@dataclass(frozen=True)
class InProgress:
    next_player: Cell


@dataclass(frozen=True)
class Draw:
    pass


Status = Union[Winner, InProgress, Draw]
