from models import Board, Cell

_CHARS = {" ": Cell.EMPTY, ".": Cell.EMPTY, "X": Cell.X, "O": Cell.O}


def board_from(text: str) -> Board:
    """Build a board from 9 characters of X, O and '.'/' ' for empty."""
    assert len(text) == 9, text
    return tuple(_CHARS[ch] for ch in text)


def play(engine, *cells):
    for cell in cells:
        assert engine.apply_move(cell), f"move {cell} was rejected"
