import pytest

from tictactoe.game_logic import (
    Cell, Player, InProgress, Win, Draw, WINNING_LINES,
    new_grid, detect_winning_line, is_draw, evaluate,
    can_accept_move, apply_move, next_player, key_to_index,
)

E, X, O = Cell.EMPTY, Cell.X, Cell.O

FULL_NO_WIN = (X, O, X,
               X, O, O,
               O, X, X)


def play(moves):
    """alternate X/O from an empty board, skipping rejected moves"""
    grid, player = new_grid(), Player.X
    for index in moves:
        if can_accept_move(grid, index, evaluate(grid)):
            grid = apply_move(grid, index, player)
            player = next_player(player)
    return grid, player


def test_empty_grid_has_no_winner_and_is_not_a_draw():
    grid = new_grid()
    assert len(grid) == 9
    assert detect_winning_line(grid) is None
    assert not is_draw(grid)
    assert evaluate(grid) == InProgress()


def test_full_grid_without_line_is_a_draw():
    assert detect_winning_line(FULL_NO_WIN) is None
    assert is_draw(FULL_NO_WIN)
    assert evaluate(FULL_NO_WIN) == Draw()


def test_top_row_win():
    grid = (X, X, X, E, E, E, E, E, E)
    assert detect_winning_line(grid) == (Player.X, (0, 1, 2))


def test_main_diagonal_win():
    grid = (X, E, E, E, X, E, E, E, X)
    assert detect_winning_line(grid) == (Player.X, (0, 4, 8))


@pytest.mark.parametrize("line", WINNING_LINES)
def test_every_line_is_detected_for_o(line):
    grid = tuple(O if i in line else E for i in range(9))
    assert detect_winning_line(grid) == (Player.O, line)


def test_mixed_line_is_not_a_win():
    grid = (X, O, X, E, E, E, E, E, E)
    assert detect_winning_line(grid) is None


def test_rows_are_reported_before_other_lines():
    grid = (X, X, X, E, E, E, O, O, O)
    assert detect_winning_line(grid) == (Player.X, (0, 1, 2))


def test_columns_are_reported_before_diagonals():
    grid = (X, E, E, X, X, E, X, E, X)
    assert detect_winning_line(grid) == (Player.X, (0, 3, 6))


def test_win_beats_full_board():
    grid = (X, X, X,
            O, O, X,
            X, O, O)
    assert is_draw(grid)
    assert evaluate(grid) == Win(Player.X, (0, 1, 2))


def test_can_accept_move_on_empty_cell_in_progress():
    assert can_accept_move(new_grid(), 4, InProgress())


@pytest.mark.parametrize("index", [-1, 9, 100, None, "4", 1.0, True])
def test_can_accept_move_rejects_off_board_index(index):
    assert not can_accept_move(new_grid(), index, InProgress())


def test_can_accept_move_rejects_occupied_cell_regardless_of_outcome():
    grid = (X, O, E, E, E, E, E, E, E)
    for outcome in (InProgress(), Draw(), Win(Player.X, (0, 1, 2))):
        assert not can_accept_move(grid, 0, outcome)
        assert not can_accept_move(grid, 1, outcome)


@pytest.mark.parametrize("outcome", [Win(Player.O, (2, 4, 6)), Draw()])
def test_can_accept_move_rejects_everything_once_finished(outcome):
    grid = new_grid()
    assert not any(can_accept_move(grid, i, outcome) for i in range(9))


def test_apply_move_returns_new_grid_and_leaves_input_alone():
    original = new_grid()
    first = apply_move(original, 4, Player.X)
    second = apply_move(new_grid(), 4, Player.X)
    assert first == second
    assert first[4] is Cell.X
    assert original == new_grid()
    assert first is not original


def test_apply_move_accepts_a_list_without_mutating_it():
    original = [E] * 9
    result = apply_move(original, 0, Player.O)
    assert original == [E] * 9
    assert result == (O,) + (E,) * 8


@pytest.mark.parametrize("index", [0, -1, 9])
def test_apply_move_with_bad_index_is_a_no_op(index):
    grid = (X, E, E, E, E, E, E, E, E)
    assert apply_move(grid, index, Player.O) == grid


def test_next_player_toggles():
    assert next_player(Player.X) is Player.O
    assert next_player(Player.O) is Player.X


def test_player_marks():
    assert Player.X.mark is Cell.X
    assert Player.O.mark is Cell.O


@pytest.mark.parametrize("key, index", [("1", 0), ("5", 4), ("9", 8)])
def test_digit_keys_map_to_cells(key, index):
    assert key_to_index(key) == index


@pytest.mark.parametrize("key", ["0", "a", "", "10", " ", None, 5])
def test_other_keys_are_ignored(key):
    assert key_to_index(key) is None


def test_x_wins_across_the_top():
    grid, _ = play([0, 3, 1, 4, 2])
    assert evaluate(grid) == Win(Player.X, (0, 1, 2))


def test_full_board_draw():
    grid, _ = play([0, 1, 2, 4, 3, 5, 7, 6, 8])
    assert all(cell is not E for cell in grid)
    assert evaluate(grid) == Draw()


def test_o_completes_anti_diagonal_before_board_fills():
    # 8th move closes 2-4-6 for O, the 9th is then refused
    grid, player = play([0, 1, 3, 4, 5, 6, 8, 2, 7])
    assert evaluate(grid) == Win(Player.O, (2, 4, 6))
    assert grid[7] is E
    assert player is Player.X
