from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# checked in this order: rows, cols, diags
WINNING_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


class Cell(Enum):
    """
    one square of the board
    """
    EMPTY = ''
    X = 'X'
    O = 'O'


class Player(Enum):
    """
    the two sides, X always opens
    """
    X = 'X'
    O = 'O'

    @property
    def mark(self):
        # cell this player writes
        return Cell(self.value)


@dataclass(frozen=True)
class InProgress:
    pass


@dataclass(frozen=True)
class Win:
    player: Player
    line: Tuple[int, int, int]


@dataclass(frozen=True)
class Draw:
    pass


def new_grid():
    """
    fresh board, all nine cells empty
    """
    return (Cell.EMPTY,) * CELL_COUNT


def detect_winning_line(grid) -> Optional[Tuple[Player, Tuple[int, int, int]]]:
    """
    first line of three matching marks as (player, line), else None
    """
    for a, b, c in WINNING_LINES:
        v = grid[a]
        if v is not Cell.EMPTY and v == grid[b] == grid[c]:
            return Player(v.value), (a, b, c)
    return None


def is_draw(grid):
    """
    true when no cell is empty; check for a win first
    """
    return all(cell is not Cell.EMPTY for cell in grid)


def evaluate(grid):
    """
    derive the outcome: win beats a full board
    """
    found = detect_winning_line(grid)
    if found:
        return Win(*found)
    if is_draw(grid):
        return Draw()
    return InProgress()


def can_accept_move(grid, index, outcome):
    """
    legal only while in progress, on the board, on an empty cell
    """
    if not isinstance(outcome, InProgress):
        return False
    # bools are ints, but never a cell index
    if not isinstance(index, int) or isinstance(index, bool):
        return False
    return 0 <= index < CELL_COUNT and grid[index] is Cell.EMPTY


def apply_move(grid, index, player):
    """
    new grid with player's mark at index

    an occupied or off-board index is a no-op: the grid comes back unchanged.
    game-over is not checked here, callers go through can_accept_move.
    """
    grid = tuple(grid)
    if not (isinstance(index, int) and 0 <= index < CELL_COUNT) \
       or grid[index] is not Cell.EMPTY:
        return grid
    return grid[:index] + (player.mark,) + grid[index + 1:]


def next_player(player):
    return Player.O if player is Player.X else Player.X


def key_to_index(key):
    """
    keys '1'..'9' pick cells 0..8, anything else is ignored
    """
    if isinstance(key, str) and len(key) == 1 and '1' <= key <= '9':
        return int(key) - 1
    return None


# ---------------------------------------------------------------------------
# state + actions
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class GameState:
    """
    everything the screen needs: board and whose turn it is
    """
    grid: Tuple[Cell, ...] = field(default_factory=new_grid)
    current_player: Player = Player.X

    @classmethod
    def initial(cls):
        return cls()

    @property
    def outcome(self):
        return evaluate(self.grid)

    @property
    def winning_line(self):
        found = detect_winning_line(self.grid)
        return found[1] if found else None

    @property
    def is_over(self):
        return not isinstance(self.outcome, InProgress)


@dataclass(frozen=True)
class PlaceMark:
    index: int


@dataclass(frozen=True)
class PressKey:
    key: str


@dataclass(frozen=True)
class NewGame:
    pass


@dataclass(frozen=True)
class ClearBoard:
    pass


def reduce(state, action):
    """
    one transition per user action
    returns the same state object when the action is rejected or ignored
    """
    if isinstance(action, PressKey):
        index = key_to_index(action.key)
        if index is None:
            return state
        action = PlaceMark(index)

    if isinstance(action, PlaceMark):
        if not can_accept_move(state.grid, action.index, state.outcome):
            return state
        return GameState(
            grid=apply_move(state.grid, action.index, state.current_player),
            current_player=next_player(state.current_player),
        )

    if isinstance(action, NewGame):
        return GameState()

    if isinstance(action, ClearBoard):
        # keep whoever was to move
        return GameState(current_player=state.current_player)

    raise TypeError(f"unknown action: {action!r}")


def status_text(state):
    """
    status line shown above the board
    """
    outcome = state.outcome
    if isinstance(outcome, Win):
        return f"Winner: {outcome.player.value}"
    if isinstance(outcome, Draw):
        return "It's a draw"
    return f"Current player: {state.current_player.value}"
