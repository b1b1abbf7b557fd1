"""
Depth-bounded negamax search for Reversi.

Every node clones the state before applying a move, so sibling branches
never share mutable state.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .board import Position
from .game import GameState
from .heuristic import HeuristicEvaluator

logger = logging.getLogger(__name__)

MAX_DEPTH = 4


@dataclass
class SearchStats:
    """Node counters for one top-level search."""
    nodes: int = 0
    leaves: int = 0
    passes: int = 0


def negamax(
    state: GameState,
    moves: List[Position],
    previous_was_pass: bool,
    depth: int,
    evaluator: HeuristicEvaluator,
    max_depth: int = MAX_DEPTH,
    stats: Optional[SearchStats] = None,
) -> Tuple[Optional[Position], int]:
    """
    Search ``state`` and return its best move and score.

    Args:
        state: Node to search (not mutated)
        moves: Legal moves for the player to move at this node
        previous_was_pass: Whether the ply leading here was a pass
        depth: Current depth, 0 at the root
        evaluator: Leaf evaluator
        max_depth: Depth at which nodes become leaves

    Returns:
        (best_move, score) where score is from the perspective of the player
        to move at this node. best_move is None at leaves and pass nodes.
    """
    if stats is not None:
        stats.nodes += 1

    if depth >= max_depth or state.board.is_full() or (previous_was_pass and not moves):
        if stats is not None:
            stats.leaves += 1
        return None, evaluator.evaluate(state, state.current_player)

    if not moves:
        if stats is not None:
            stats.passes += 1
        child = state.clone()
        child.pass_turn()
        _, child_score = negamax(
            child, child.legal_moves(), True, depth + 1, evaluator, max_depth, stats
        )
        # The child scores from the opponent's side, same as a move branch
        return None, -child_score

    best_move: Optional[Position] = None
    best_score = None

    for move in moves:
        child = state.clone()
        child.apply_move(move)
        _, child_score = negamax(
            child, child.legal_moves(), False, depth + 1, evaluator, max_depth, stats
        )
        score = -child_score

        # Strictly greater: ties keep the earliest move in row-major order
        if best_score is None or score > best_score:
            best_move = move
            best_score = score

    return best_move, best_score


def best_move(
    state: GameState,
    evaluator: HeuristicEvaluator,
    max_depth: int = MAX_DEPTH,
) -> Tuple[Position, int]:
    """
    Run a full search from the root of ``state``.

    Returns:
        (move, score) for the player to move

    Raises:
        ValueError: if the player to move has no legal moves, or max_depth < 1
    """
    if max_depth < 1:
        raise ValueError(f"max_depth must be >= 1, got {max_depth}")
    moves = state.legal_moves()
    if not moves:
        raise ValueError(f"{state.current_player} has no legal moves; pass instead of searching")

    stats = SearchStats()
    move, score = negamax(state, moves, False, 0, evaluator, max_depth, stats)
    logger.debug(
        "negamax depth=%d player=%s move=%s score=%d nodes=%d leaves=%d passes=%d",
        max_depth, state.current_player, tuple(move), score,
        stats.nodes, stats.leaves, stats.passes,
    )
    return move, score
