"""FastAPI-powered web UI for playing pass-and-play Tic-Tac-Toe in the browser."""

from __future__ import annotations

import logging
import threading
import uuid
from dataclasses import dataclass, field
from typing import Dict, Tuple

from fastapi import FastAPI, HTTPException, Response
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, Field, StrictInt

from .game import GameEngine, GameStatus, Player, is_cell_enabled

logger = logging.getLogger(__name__)


@dataclass
class GameSession:
    """Container for one browser's game engine."""

    engine: GameEngine = field(default_factory=GameEngine)
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)


SESSIONS: Dict[str, GameSession] = {}
app = FastAPI(
    title="Tic Tac Toe", description="Two-player pass-and-play tic-tac-toe"
)


class MoveRequest(BaseModel):
    """Request payload for marking a cell on an existing game.

    Any integer is accepted; indices outside the board are ignored by the
    engine rather than rejected.
    """

    index: StrictInt = Field(description="Cell index, row-major from 0 to 8")


def _create_session() -> Tuple[str, GameSession]:
    """Create a new game session and register it for later access."""

    session = GameSession()
    session_id = uuid.uuid4().hex
    SESSIONS[session_id] = session
    logger.info("Created game %s", session_id)
    return session_id, session


def _get_session(game_id: str) -> GameSession:
    try:
        return SESSIONS[game_id]
    except KeyError as exc:
        raise HTTPException(status_code=404, detail="Game not found") from exc


def _serialize_session(game_id: str, session: GameSession) -> Dict[str, object]:
    with session.lock:
        engine = session.engine
        state = engine.state
        line = engine.winning_line
        return {
            "id": game_id,
            "board": [cell.value if cell is not None else "" for cell in state.board],
            "currentPlayer": state.current_player.value,
            "moveCount": state.move_count,
            "status": state.status.value,
            "winner": state.winner.value if state.winner is not None else None,
            "winningLine": list(line) if line is not None else None,
            "statusMessage": engine.status_message(),
            "enabledCells": [
                is_cell_enabled(state, index) for index in range(len(state.board))
            ],
            "scores": {player.value: engine.scores[player] for player in Player},
        }


def _apply_player_move(game_id: str, session: GameSession, index: int) -> None:
    with session.lock:
        engine = session.engine
        player = engine.state.current_player
        if not engine.apply_move(index):
            logger.debug("Ignored move at %s in game %s", index, game_id)
            return

        state = engine.state
        if state.status is GameStatus.WON:
            logger.info(
                "Game %s won by %s (score X=%d O=%d)",
                game_id,
                player.value,
                engine.scores[Player.X],
                engine.scores[Player.O],
            )
        elif state.status is GameStatus.DRAW:
            logger.info("Game %s ended in a draw", game_id)


@app.post("/api/game")
def create_game() -> Dict[str, object]:
    game_id, session = _create_session()
    return _serialize_session(game_id, session)


@app.get("/api/game/{game_id}")
def get_game(game_id: str) -> Dict[str, object]:
    session = _get_session(game_id)
    return _serialize_session(game_id, session)


@app.post("/api/game/{game_id}/move")
def make_move(game_id: str, request: MoveRequest) -> Dict[str, object]:
    session = _get_session(game_id)
    _apply_player_move(game_id, session, request.index)
    return _serialize_session(game_id, session)


@app.post("/api/game/{game_id}/restart")
def restart_game(game_id: str) -> Dict[str, object]:
    session = _get_session(game_id)
    with session.lock:
        session.engine.restart()
    return _serialize_session(game_id, session)


@app.post("/api/game/{game_id}/reset-scores")
def reset_scores(game_id: str) -> Dict[str, object]:
    session = _get_session(game_id)
    with session.lock:
        session.engine.reset_scores()
    logger.info("Scores reset for game %s", game_id)
    return _serialize_session(game_id, session)


@app.delete("/api/game/{game_id}", status_code=204)
def delete_game(game_id: str) -> Response:
    if SESSIONS.pop(game_id, None) is None:
        raise HTTPException(status_code=404, detail="Game not found")
    logger.info("Removed game %s", game_id)
    return Response(status_code=204)


@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "ok"}


@app.get("/", response_class=HTMLResponse)
def index() -> str:
    return HTML_PAGE


HTML_PAGE = """<!DOCTYPE html>
<html lang=\"en\">
  <head>
    <meta charset=\"utf-8\" />
    <meta name=\"viewport\" content=\"width=device-width, initial-scale=1\" />
    <title>Tic Tac Toe</title>
    <link rel=\"preconnect\" href=\"https://fonts.googleapis.com\" />
    <link rel=\"preconnect\" href=\"https://fonts.gstatic.com\" crossorigin />
    <link
      href=\"https://fonts.googleapis.com/css2?family=Poppins:wght@400;500;600;700&display=swap\"
      rel=\"stylesheet\"
    />
    <style>
      :root {
        color-scheme: light;
        font-family: 'Poppins', system-ui, -apple-system, BlinkMacSystemFont, \"Segoe UI\", sans-serif;
        font-weight: 400;
        --accent-x: #3a66ff;
        --accent-o: #ff5a7a;
      }
      * {
        box-sizing: border-box;
      }
      body {
        margin: 0;
        background: radial-gradient(circle at top, #f2f5ff, #dbe0ff 40%, #cfd8ff 70%);
        min-height: 100vh;
        display: flex;
        flex-direction: column;
        align-items: center;
        padding: 2rem 1rem 3rem;
        color: #13203a;
      }
      main {
        background: rgba(255, 255, 255, 0.92);
        border-radius: 18px;
        box-shadow: 0 20px 40px rgba(34, 47, 79, 0.16);
        padding: clamp(1.5rem, 4vw, 2.5rem);
        width: min(460px, 100%);
      }
      h1 {
        margin: 0 0 1.5rem;
        font-size: clamp(1.8rem, 2.4vw + 1.2rem, 2.6rem);
        text-align: center;
        letter-spacing: 0.06em;
        color: #0c1a33;
        text-shadow: 0 2px 6px rgba(9, 24, 46, 0.15);
      }
      .board {
        display: grid;
        grid-template-columns: repeat(3, 1fr);
        gap: 0.6rem;
        margin: 0 auto;
        width: min(320px, 100%);
      }
      .square {
        aspect-ratio: 1;
        border-radius: 14px;
        border: 1px solid rgba(60, 70, 120, 0.25);
        background: white;
        font-size: 2.4rem;
        font-weight: 700;
        font-family: inherit;
        cursor: pointer;
        transition: transform 0.1s ease, box-shadow 0.1s ease;
      }
      .square:hover:enabled {
        transform: translateY(-1px);
        box-shadow: 0 8px 18px rgba(0, 64, 128, 0.12);
      }
      .square:disabled {
        cursor: default;
      }
      .square.winning {
        background: #fff6d6;
        box-shadow: 0 0 0 3px rgba(255, 196, 0, 0.6);
      }
      .mark-X {
        color: var(--accent-x);
      }
      .mark-O {
        color: var(--accent-o);
      }
      .status {
        text-align: center;
        margin: 1.5rem 0 1rem;
        font-size: 1.2rem;
        font-weight: 600;
      }
      .controls-area {
        display: flex;
        flex-direction: column;
        align-items: center;
        gap: 1rem;
      }
      .scoreboard {
        display: flex;
        gap: 1rem;
      }
      .score {
        display: flex;
        flex-direction: column;
        align-items: center;
        min-width: 5rem;
        padding: 0.5rem 1rem;
        border-radius: 12px;
        background: rgba(226, 232, 255, 0.6);
      }
      .score .label {
        font-weight: 700;
      }
      .score-value {
        font-size: 1.4rem;
        font-weight: 600;
      }
      .controls {
        display: flex;
        gap: 0.75rem;
      }
      .controls button {
        font-size: 1rem;
        padding: 0.55rem 0.95rem;
        border-radius: 999px;
        border: 1px solid rgba(60, 70, 120, 0.25);
        background: white;
        cursor: pointer;
        font-family: inherit;
      }
      .controls button.secondary {
        background: rgba(226, 232, 255, 0.9);
      }
      footer {
        margin-top: 1.5rem;
        font-size: 0.85rem;
        color: rgba(19, 32, 58, 0.65);
      }
      .heart {
        color: var(--accent-o);
      }
    </style>
  </head>
  <body>
    <main>
      <h1>Tic Tac Toe</h1>
      <div class=\"board\" id=\"board\"></div>
      <div class=\"status\" id=\"status\" aria-live=\"polite\">Loading…</div>
      <div class=\"controls-area\">
        <div class=\"scoreboard\">
          <div class=\"score\">
            <span class=\"label mark-X\">X</span>
            <span class=\"score-value\" id=\"score-x\">0</span>
          </div>
          <div class=\"score\">
            <span class=\"label mark-O\">O</span>
            <span class=\"score-value\" id=\"score-o\">0</span>
          </div>
        </div>
        <div class=\"controls\">
          <button type=\"button\" id=\"restart\">Restart Game</button>
          <button type=\"button\" class=\"secondary\" id=\"reset-scores\">Reset Scores</button>
        </div>
      </div>
    </main>
    <footer>
      Made with <span class=\"heart\">&hearts;</span> using FastAPI
    </footer>
    <script>
      const boardEl = document.getElementById('board');
      const statusEl = document.getElementById('status');
      const scoreXEl = document.getElementById('score-x');
      const scoreOEl = document.getElementById('score-o');
      const restartButton = document.getElementById('restart');
      const resetScoresButton = document.getElementById('reset-scores');

      let gameId = null;
      let gameState = null;

      function describeCell(mark) {
        if (mark === 'X') return 'cross';
        if (mark === 'O') return 'nought';
        return 'empty';
      }

      function render() {
        boardEl.innerHTML = '';
        if (!gameState) {
          return;
        }
        const winningLine = gameState.winningLine || [];
        gameState.board.forEach((mark, index) => {
          const square = document.createElement('button');
          square.type = 'button';
          square.classList.add('square');
          square.setAttribute('aria-label', `Square ${index + 1} ${describeCell(mark)}`);
          if (mark) {
            const span = document.createElement('span');
            span.classList.add(`mark-${mark}`);
            span.textContent = mark;
            square.appendChild(span);
          }
          if (winningLine.includes(index)) {
            square.classList.add('winning');
          }
          square.disabled = !gameState.enabledCells[index];
          square.addEventListener('click', () => sendMove(index).catch(reportError));
          boardEl.appendChild(square);
        });
        statusEl.textContent = gameState.statusMessage;
        scoreXEl.textContent = gameState.scores.X;
        scoreOEl.textContent = gameState.scores.O;
      }

      async function request(path, options = {}) {
        const response = await fetch(path, {
          headers: { 'Content-Type': 'application/json' },
          ...options,
        });
        if (!response.ok) {
          throw new Error(`Request failed with status ${response.status}`);
        }
        return response.json();
      }

      async function startGame() {
        gameState = await request('/api/game', { method: 'POST' });
        gameId = gameState.id;
        render();
      }

      async function sendMove(index) {
        if (!gameId) return;
        gameState = await request(`/api/game/${gameId}/move`, {
          method: 'POST',
          body: JSON.stringify({ index }),
        });
        render();
      }

      async function restart() {
        if (!gameId) return;
        gameState = await request(`/api/game/${gameId}/restart`, { method: 'POST' });
        render();
      }

      async function resetScores() {
        if (!gameId) return;
        gameState = await request(`/api/game/${gameId}/reset-scores`, { method: 'POST' });
        render();
      }

      function reportError(error) {
        statusEl.textContent = error.message;
      }

      restartButton.addEventListener('click', () => restart().catch(reportError));
      resetScoresButton.addEventListener('click', () => resetScores().catch(reportError));
      startGame().catch(reportError);
    </script>
  </body>
</html>
"""
