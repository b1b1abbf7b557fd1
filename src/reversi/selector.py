"""
Move selection policies: uniform random or negamax search.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

import numpy as np

from .board import Position
from .game import GameState
from .heuristic import NOISE, HeuristicEvaluator
from .negamax import MAX_DEPTH, best_move

logger = logging.getLogger(__name__)


class Strategy(str, Enum):
    RANDOM = "random"
    NEGAMAX = "negamax"


@dataclass
class MoveSelector:
    """Chooses a move for the player to move using one fixed strategy."""

    strategy: Strategy = Strategy.NEGAMAX
    max_depth: int = MAX_DEPTH
    evaluator: HeuristicEvaluator = field(default_factory=HeuristicEvaluator)
    rng: np.random.Generator = field(default_factory=np.random.default_rng, repr=False)

    def __post_init__(self):
        self.strategy = Strategy(self.strategy)
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be >= 1, got {self.max_depth}")

    def select(self, state: GameState) -> Position:
        """
        Pick a move for ``state.current_player``.

        Raises:
            ValueError: if there are no legal moves (the caller must pass)
        """
        moves = state.legal_moves()
        if not moves:
            raise ValueError(f"{state.current_player} has no legal moves to select from")

        if self.strategy is Strategy.RANDOM:
            move = moves[int(self.rng.integers(len(moves)))]
        else:
            move, _ = best_move(state, self.evaluator, self.max_depth)

        logger.debug("%s selected %s for %s", self.strategy.value, tuple(move), state.current_player)
        return move


def make_selector(
    strategy: Union[Strategy, str] = Strategy.NEGAMAX,
    seed: Optional[int] = None,
    max_depth: int = MAX_DEPTH,
    noise: int = NOISE,
) -> MoveSelector:
    """Build a selector whose evaluator shares one seeded generator."""
    rng = np.random.default_rng(seed)
    evaluator = HeuristicEvaluator(noise=noise, rng=rng)
    return MoveSelector(strategy=Strategy(strategy), max_depth=max_depth, evaluator=evaluator, rng=rng)
