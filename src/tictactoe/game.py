"""Core rules for pass-and-play Tic-Tac-Toe: win/draw detection and turns."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, Optional, Tuple


class Player(str, Enum):
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        return Player.O if self is Player.X else Player.X


class GameStatus(str, Enum):
    PLAYING = "playing"
    WON = "won"
    DRAW = "draw"


Cell = Optional[Player]  # None means empty
Board = Tuple[Cell, ...]

BOARD_SIZE = 9

WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)

EMPTY_BOARD: Board = (None,) * BOARD_SIZE


@dataclass(frozen=True)
class GameState:
    board: Board = EMPTY_BOARD
    current_player: Player = Player.X
    move_count: int = 0
    status: GameStatus = GameStatus.PLAYING
    winner: Optional[Player] = None


def new_game() -> GameState:
    """Empty board, X to move."""
    return GameState()


def find_winning_line(board: Board) -> Optional[Tuple[int, int, int]]:
    """Return the first fully occupied line, scanning rows, columns, diagonals."""
    for a, b, c in WINNING_LINES:
        v = board[a]
        if v is not None and v == board[b] == board[c]:
            return (a, b, c)
    return None


def evaluate(board: Board, move_count: int) -> Tuple[GameStatus, Optional[Player]]:
    line = find_winning_line(board)
    if line is not None:
        return GameStatus.WON, board[line[0]]
    if move_count == BOARD_SIZE:
        return GameStatus.DRAW, None
    return GameStatus.PLAYING, None


def is_valid_move(state: GameState, index: object) -> bool:
    # bool is an int subclass; True/False are not cell indices
    if not isinstance(index, int) or isinstance(index, bool):
        return False
    if not 0 <= index < BOARD_SIZE:
        return False
    return state.status is GameStatus.PLAYING and state.board[index] is None


def apply_move(state: GameState, index: int) -> GameState:
    """Place the current player's mark at ``index`` and return the next state.

    Invalid moves (out of range, occupied cell, finished game) are ignored:
    the very same ``state`` object is returned.
    """
    if not is_valid_move(state, index):
        return state

    cells = list(state.board)
    cells[index] = state.current_player
    board: Board = tuple(cells)
    move_count = state.move_count + 1
    status, winner = evaluate(board, move_count)
    return GameState(
        board=board,
        current_player=state.current_player.opposite(),
        move_count=move_count,
        status=status,
        winner=winner,
    )


def status_message(state: GameState) -> str:
    if state.status is GameStatus.WON:
        return f"Player {state.winner.value} wins!"
    if state.status is GameStatus.DRAW:
        return "It's a draw!"
    return f"Player {state.current_player.value}'s turn"


def is_cell_enabled(state: GameState, index: int) -> bool:
    return state.status is GameStatus.PLAYING and state.board[index] is None


def _zero_scores() -> Dict[Player, int]:
    return {Player.X: 0, Player.O: 0}


@dataclass
class GameEngine:
    """Owns the current game and the running score across restarts.

    All mutation goes through :meth:`apply_move`, :meth:`restart` and
    :meth:`reset_scores`; callers read ``state`` and ``scores`` only.
    """

    state: GameState = field(default_factory=new_game)
    scores: Dict[Player, int] = field(default_factory=_zero_scores)

    # ---- API used by the web layer ----

    def apply_move(self, index: int) -> bool:
        """Play ``index`` for the current player. Returns False if ignored."""
        previous = self.state
        self.state = apply_move(previous, index)
        if self.state is previous:
            return False
        if self.state.status is GameStatus.WON:
            self.scores[self.state.winner] += 1
        return True

    def restart(self) -> None:
        self.state = new_game()

    def reset_scores(self) -> None:
        self.scores = _zero_scores()
        self.restart()

    @property
    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        if self.state.status is not GameStatus.WON:
            return None
        return find_winning_line(self.state.board)

    def status_message(self) -> str:
        return status_message(self.state)

    def clone(self) -> "GameEngine":
        return GameEngine(state=replace(self.state), scores=dict(self.scores))
