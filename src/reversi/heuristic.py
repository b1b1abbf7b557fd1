"""
Heuristic position evaluation.

Score from one player's perspective:
  material (own tiles - opponent tiles)
  + corner/edge bonuses (subtracted for opponent-owned tiles)
  + uniform noise in [-noise, noise), resampled on every call
"""

from dataclasses import dataclass, field
from typing import Dict

import numpy as np

from .board import BOARD_SIZE, Piece
from .game import GameState

CORNER_BONUS = 4
SIDE_BONUS = 2
NOISE = 100


def bonus_weights(corner_bonus: int = CORNER_BONUS, side_bonus: int = SIDE_BONUS) -> np.ndarray:
    """
    Build the [8, 8] positional bonus matrix.

    Corners get ``corner_bonus``, the 28 other border tiles get
    ``side_bonus``, the interior gets 0.
    """
    last = BOARD_SIZE - 1
    w = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int64)
    w[0, :] = w[last, :] = side_bonus
    w[:, 0] = w[:, last] = side_bonus
    w[0, 0] = w[0, last] = w[last, 0] = w[last, last] = corner_bonus
    return w


@dataclass
class HeuristicEvaluator:
    """Material + positional evaluator with a symmetric random term."""

    corner_bonus: int = CORNER_BONUS
    side_bonus: int = SIDE_BONUS
    noise: int = NOISE
    rng: np.random.Generator = field(default_factory=np.random.default_rng, repr=False)

    def __post_init__(self):
        if not 0 <= self.side_bonus < self.corner_bonus:
            raise ValueError(
                f"need 0 <= side_bonus < corner_bonus, got {self.side_bonus} and {self.corner_bonus}"
            )
        if self.noise < 0:
            raise ValueError(f"noise must be >= 0, got {self.noise}")
        self._weights = bonus_weights(self.corner_bonus, self.side_bonus)

    def _sample_noise(self) -> int:
        if self.noise == 0:
            return 0
        return int(self.rng.integers(-self.noise, self.noise))

    def _terms(self, state: GameState, player: Piece):
        # +1 for player's tiles, -1 for opponent's, 0 for empty
        persp = state.board.to_array().astype(np.int64) * int(player)
        material = int(persp.sum())
        positional = int((persp * self._weights).sum())
        return material, positional

    def evaluate(self, state: GameState, player: Piece) -> int:
        """Return the score of ``state`` for ``player``; higher is better."""
        material, positional = self._terms(state, player)
        return material + positional + self._sample_noise()

    def breakdown(self, state: GameState, player: Piece) -> Dict[str, int]:
        """Return each component of one evaluation, plus their total."""
        material, positional = self._terms(state, player)
        noise = self._sample_noise()
        return {
            "material": material,
            "positional": positional,
            "noise": noise,
            "total": material + positional + noise,
        }
