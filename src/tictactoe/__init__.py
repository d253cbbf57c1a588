"""Tic-Tac-Toe package exposing the game engine and the web application."""

from .game import GameEngine, GameState, GameStatus, Player
from .ui import app

__all__ = ["GameEngine", "GameState", "GameStatus", "Player", "app"]
