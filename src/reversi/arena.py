"""
Game driver and automated matches.

The driver owns the "previous ply was a pass" bit; GameState keeps no
history.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from tqdm.auto import trange

from .board import Piece, Position
from .game import GameState, is_game_over, winner
from .selector import MoveSelector

logger = logging.getLogger(__name__)


@dataclass
class GameRecord:
    """Result of one finished game. A None ply is a pass."""
    x_score: int
    o_score: int
    winner: Optional[Piece]
    plies: List[Optional[Position]] = field(default_factory=list)

    @property
    def passes(self) -> int:
        return sum(1 for p in self.plies if p is None)


def play_game(players: Dict[Piece, MoveSelector], state: Optional[GameState] = None) -> GameRecord:
    """
    Play ``state`` (default: the opening) to completion.

    Args:
        players: Selector for each piece
        state: Starting position, mutated in place

    Returns:
        GameRecord with final scores, winner and the ply list
    """
    if state is None:
        state = GameState()

    plies: List[Optional[Position]] = []
    skipped = False

    while not is_game_over(state, skipped):
        if not state.has_legal_moves():
            logger.debug("%s has no legal moves, passing", state.current_player)
            state.pass_turn()
            plies.append(None)
            skipped = True
            continue

        skipped = False
        move = players[state.current_player].select(state)
        state.apply_move(move)
        plies.append(move)

    x, o = state.scores()
    return GameRecord(x_score=x, o_score=o, winner=winner(state), plies=plies)


def run_match(
    first: MoveSelector,
    second: MoveSelector,
    games: int = 20,
    swap_sides: bool = True,
    progress: bool = True,
) -> Dict[str, float]:
    """
    Play ``games`` games between two selectors.

    With ``swap_sides`` the first selector plays X in even games and O in
    odd games; otherwise it always plays X.

    Returns:
        Dict with 'games', 'first_w', 'first_d', 'first_l' (rates from the
        first selector's point of view)
    """
    if games < 1:
        raise ValueError(f"games must be >= 1, got {games}")

    wins = draws = losses = 0

    for g in trange(games, desc="match", disable=not progress):
        first_side = Piece.X if (not swap_sides or g % 2 == 0) else Piece.O
        players = {first_side: first, first_side.opposite(): second}

        record = play_game(players)
        if record.winner is None:
            draws += 1
        elif record.winner == first_side:
            wins += 1
        else:
            losses += 1
        logger.debug("game %d: X=%d O=%d winner=%s", g, record.x_score, record.o_score, record.winner)

    return {
        "games": games,
        "first_w": wins / games,
        "first_d": draws / games,
        "first_l": losses / games,
    }
