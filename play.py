#!/usr/bin/env python3
"""
Play Reversi in the terminal, or run automated matches.

Usage:
    python play.py                             # Human (X) vs negamax (O)
    python play.py --x negamax --o negamax     # Watch AI vs AI
    python play.py --x negamax --o random --games 50 --depth 3
"""

import sys
import logging
import argparse
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from reversi import (
    MAX_DEPTH,
    NOISE,
    GameState,
    NotationError,
    Piece,
    format_position,
    is_game_over,
    make_selector,
    parse_position,
    run_match,
    winner,
)

PLAYER_CHOICES = ("human", "random", "negamax")


def print_board(state):
    """Pretty print board with legal moves marked '*'."""
    board = state.board
    moves = set(state.legal_moves())
    symbols = {None: ' ', Piece.X: 'X', Piece.O: 'O'}

    print("    " + "   ".join("ABCDEFGH"[:board.col_count()]))
    print("  +" + "---+" * board.col_count())
    for r, row in enumerate(board.rows()):
        cells = []
        for c, tile in enumerate(row):
            cells.append('*' if tile is None and (r, c) in moves else symbols[tile])
        print(f"{r + 1} | " + " | ".join(cells) + " |")
        print("  +" + "---+" * board.col_count())


def print_scores(state):
    x, o = state.scores()
    print(f"Score: X {x} | O {o}")


def prompt_move(state):
    """Ask for a legal move. Returns None on end of input."""
    moves = state.legal_moves()
    while True:
        try:
            line = input("Enter your move (e.g. A1): ")
        except (EOFError, KeyboardInterrupt):
            print()
            return None

        try:
            pos = parse_position(line)
        except NotationError as e:
            print(f"{e}\n")
            continue

        if pos not in moves:
            print(f"Invalid move: {format_position(pos)}. Your move must flip at least one tile.\n")
            continue
        return pos


def play_interactive(selectors):
    """Play one game; ``selectors`` maps Piece -> MoveSelector or None for a human."""
    state = GameState()
    skipped = False

    while True:
        print()
        print_board(state)
        print()
        print_scores(state)

        if is_game_over(state, skipped):
            w = winner(state)
            print(f"The winner is: {w}" if w is not None else "The game ended with a tie")
            return

        player = state.current_player
        print(f"The current piece is: {player}")

        if not state.has_legal_moves():
            print("No moves available. Skipping turn.")
            state.pass_turn()
            skipped = True
            continue
        skipped = False

        selector = selectors[player]
        if selector is None:
            pos = prompt_move(state)
            if pos is None:
                print("Game aborted")
                return
        else:
            pos = selector.select(state)
            print(f"{player} plays: {format_position(pos)}")

        state.apply_move(pos)


def main():
    parser = argparse.ArgumentParser(description="Play Reversi against a negamax opponent")
    parser.add_argument("--x", choices=PLAYER_CHOICES, default="human", help="Who plays X (moves first)")
    parser.add_argument("--o", choices=PLAYER_CHOICES, default="negamax", help="Who plays O")
    parser.add_argument("--depth", type=int, default=MAX_DEPTH, help="Negamax search depth")
    parser.add_argument("--noise", type=int, default=NOISE, help="Evaluator noise range")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--games", type=int, default=1, help="Number of automated games")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    def build(kind, offset):
        if kind == "human":
            return None
        seed = None if args.seed is None else args.seed + offset
        try:
            return make_selector(kind, seed=seed, max_depth=args.depth, noise=args.noise)
        except ValueError as e:
            parser.error(str(e))

    selectors = {Piece.X: build(args.x, 0), Piece.O: build(args.o, 1)}

    if args.games > 1:
        if None in selectors.values():
            parser.error("--games needs two automated players (--x and --o not 'human')")
        print(f"\n{args.x} vs {args.o} ({args.games} games, sides alternate, depth {args.depth})...")
        results = run_match(selectors[Piece.X], selectors[Piece.O], games=args.games)
        print(f"  {args.x} wins:   {results['first_w']:.2%}")
        print(f"  Draws:  {results['first_d']:.2%}")
        print(f"  {args.o} wins:   {results['first_l']:.2%}")
        return

    play_interactive(selectors)


if __name__ == "__main__":
    main()
