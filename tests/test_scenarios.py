from engine import Engine
from models import EMPTY_BOARD, Cell, Winner
from tests.helpers import board_from, play


def test_top_row_win():
    engine = Engine()
    play(engine, 0, 4, 1, 3, 2)
    assert engine.status() == Winner(Cell.X)
    assert engine.winning_line() == (0, 1, 2)
    assert engine.current_snapshot() == board_from("XXXOO....")

    assert engine.apply_move(6) is False
    assert engine.move_count == 5
    assert engine.cursor == 5


def test_middle_row_completed_by_o_ends_game():
    # X0 O4 X1 O3 X8 O5: O owns 3-4-5 before X can take 2
    engine = Engine()
    play(engine, 0, 4, 1, 3, 8, 5)
    assert engine.status() == Winner(Cell.O)
    assert engine.apply_move(2) is False
    assert engine.current_snapshot() == board_from("XX.OOO..X")


def test_jump_to_start_discards_branch():
    engine = Engine()
    play(engine, 0, 4, 1, 3, 8)
    engine.jump_to(0)
    assert engine.current_snapshot() == EMPTY_BOARD
    assert engine.move_count == 5

    assert engine.apply_move(0)
    assert len(engine.history_view()) == 2
    assert engine.cursor == 1
    assert engine.current_snapshot() == board_from("X........")
