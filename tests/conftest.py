"""
Shared pytest fixtures for the reversi tests.
"""

import numpy as np
import pytest

from reversi import Board, GameState, HeuristicEvaluator, Piece


@pytest.fixture
def opening():
    """Fresh game at the standard opening, X to move."""
    return GameState()


@pytest.fixture
def quiet_evaluator():
    """Evaluator with the random term disabled."""
    return HeuristicEvaluator(noise=0, rng=np.random.default_rng(0))


@pytest.fixture
def o_must_pass():
    """X: (0,0), O: (0,1), O to move. O has no move, X can capture at (0,2)."""
    board = Board.from_strings([
        "XO......",
        "........",
        "........",
        "........",
        "........",
        "........",
        "........",
        "........",
    ])
    return GameState(board, Piece.O)
