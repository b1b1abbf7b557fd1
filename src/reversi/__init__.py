"""
Reversi - Othello rules engine with a negamax opponent.

This package implements the 8x8 board rules (flip computation, legal moves,
turn management) and a depth-bounded negamax move chooser with a noisy
corner/edge heuristic.
"""

from .board import BOARD_SIZE, Board, Piece, Position
from .game import GameState, compute_flips, legal_moves, is_game_over, winner
from .heuristic import CORNER_BONUS, SIDE_BONUS, NOISE, HeuristicEvaluator
from .negamax import MAX_DEPTH, SearchStats, negamax, best_move
from .selector import Strategy, MoveSelector, make_selector
from .notation import NotationError, parse_position, format_position
from .arena import GameRecord, play_game, run_match

__version__ = "0.1.0"
__all__ = [
    "BOARD_SIZE",
    "Board",
    "Piece",
    "Position",
    "GameState",
    "compute_flips",
    "legal_moves",
    "is_game_over",
    "winner",
    "CORNER_BONUS",
    "SIDE_BONUS",
    "NOISE",
    "HeuristicEvaluator",
    "MAX_DEPTH",
    "SearchStats",
    "negamax",
    "best_move",
    "Strategy",
    "MoveSelector",
    "make_selector",
    "NotationError",
    "parse_position",
    "format_position",
    "GameRecord",
    "play_game",
    "run_match",
]
