"""Unit tests for Tic-Tac-Toe game logic."""

import pytest

from tictactoe.game import (
    WINNING_LINES,
    GameEngine,
    GameState,
    GameStatus,
    Player,
    apply_move,
    evaluate,
    is_cell_enabled,
    new_game,
    status_message,
)

X, O = Player.X, Player.O


def _play(engine, *indices):
    for index in indices:
        engine.apply_move(index)
    return engine


def test_initial_state():
    state = new_game()
    assert state.board == (None,) * 9
    assert state.current_player is X
    assert state.move_count == 0
    assert state.status is GameStatus.PLAYING
    assert state.winner is None


@pytest.mark.parametrize("line", WINNING_LINES)
@pytest.mark.parametrize("player", [X, O])
def test_every_line_wins(line, player):
    board = tuple(player if i in line else None for i in range(9))
    assert evaluate(board, 3) == (GameStatus.WON, player)


def test_full_board_without_line_is_draw():
    board = (X, O, X, O, X, O, O, X, O)
    assert evaluate(board, 9) == (GameStatus.DRAW, None)


def test_partial_board_without_line_is_playing():
    board = (X, O, None, None, None, None, None, None, None)
    assert evaluate(board, 2) == (GameStatus.PLAYING, None)


def test_win_on_ninth_move_beats_draw():
    board = (X, O, X, O, X, O, X, O, X)
    assert evaluate(board, 9) == (GameStatus.WON, X)


def test_lines_checked_in_fixed_order():
    # Rows are checked before columns.
    board = (X, X, X, X, None, None, X, None, None)
    assert evaluate(board, 5) == (GameStatus.WON, X)
    board = (O, O, O, X, X, X, None, None, None)
    assert evaluate(board, 6) == (GameStatus.WON, O)


def test_turns_alternate():
    engine = GameEngine()
    seen = [engine.state.current_player]
    for index in (0, 1, 2, 3):
        engine.apply_move(index)
        seen.append(engine.state.current_player)
    assert seen == [X, O, X, O, X]


def test_row_win_increments_score():
    engine = GameEngine()
    engine.scores[X] = 2
    _play(engine, 0, 3, 1, 4, 2)
    assert engine.state.board[:3] == (X, X, X)
    assert engine.state.status is GameStatus.WON
    assert engine.state.winner is X
    assert engine.scores == {X: 3, O: 0}
    assert engine.winning_line == (0, 1, 2)


def test_column_win_for_o():
    engine = _play(GameEngine(), 0, 1, 3, 4, 8, 7)
    assert engine.state.winner is O
    assert engine.scores == {X: 0, O: 1}


def test_draw_scenario_keeps_scores():
    engine = GameEngine()
    _play(engine, 0, 1, 2, 4, 3, 5, 7, 6, 8)
    assert engine.state.board == (X, O, X, X, O, O, O, X, X)
    assert engine.state.status is GameStatus.DRAW
    assert engine.state.winner is None
    assert engine.state.move_count == 9
    assert engine.winning_line is None
    assert engine.scores == {X: 0, O: 0}


def test_occupied_cell_is_ignored():
    engine = _play(GameEngine(), 4)
    before = engine.clone()
    assert engine.apply_move(4) is False
    assert engine.state == before.state
    assert engine.scores == before.scores


@pytest.mark.parametrize("index", [-1, 9, 100, True, "3", None, 1.0])
def test_invalid_index_is_ignored(index):
    engine = GameEngine()
    assert engine.apply_move(index) is False
    assert engine.state == new_game()


def test_moves_after_win_are_ignored():
    engine = _play(GameEngine(), 0, 3, 1, 4, 2)
    finished = engine.state
    assert engine.apply_move(8) is False
    assert engine.state is finished
    assert engine.scores[X] == 1


def test_pure_transition_does_not_mutate_input():
    state = new_game()
    nxt = apply_move(state, 4)
    assert state == GameState()
    assert nxt.board[4] is X
    assert nxt.move_count == 1
    assert nxt.current_player is O
    assert apply_move(nxt, 4) is nxt


def test_move_count_matches_filled_cells():
    engine = GameEngine()
    for index in (4, 0, 8, 2, 6):
        engine.apply_move(index)
        filled = sum(cell is not None for cell in engine.state.board)
        assert engine.state.move_count == filled


def test_restart_keeps_scores():
    engine = _play(GameEngine(), 0, 3, 1, 4, 2)
    engine.restart()
    assert engine.state == new_game()
    assert engine.scores == {X: 1, O: 0}


def test_reset_scores_restarts():
    engine = _play(GameEngine(), 0, 3, 1, 4, 2)
    engine.apply_move(5)
    engine.reset_scores()
    assert engine.scores == {X: 0, O: 0}
    assert engine.state == new_game()


def test_status_messages():
    engine = GameEngine()
    assert status_message(engine.state) == "Player X's turn"
    engine.apply_move(0)
    assert engine.status_message() == "Player O's turn"
    _play(engine, 3, 1, 4, 2)
    assert engine.status_message() == "Player X wins!"
    engine.restart()
    _play(engine, 0, 1, 2, 4, 3, 5, 7, 6, 8)
    assert engine.status_message() == "It's a draw!"


def test_cells_disabled_when_filled_or_finished():
    engine = _play(GameEngine(), 0)
    assert not is_cell_enabled(engine.state, 0)
    assert is_cell_enabled(engine.state, 1)
    _play(engine, 3, 1, 4, 2)
    assert not any(is_cell_enabled(engine.state, i) for i in range(9))
