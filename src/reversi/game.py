"""
Reversi game rules and state management.

A move is legal iff it targets an empty tile and captures at least one
opponent disc: walking outward in one of the 8 directions, a run of opponent
discs closed off by one of the mover's own discs is flipped.
"""

from typing import List, Optional, Tuple

from .board import Board, Piece, Position, in_bounds

DIRECTIONS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


def compute_flips(board: Board, player: Piece, pos: Tuple[int, int]) -> List[Position]:
    """
    Return the opponent tiles a placement at ``pos`` would capture.

    Raises:
        ValueError: if the tile at ``pos`` is not empty
    """
    if board.tile(pos) is not None:
        raise ValueError(f"cannot compute flips for occupied tile {tuple(pos)}")

    me = int(player)
    opp = -me
    row, col = pos

    flips: List[Position] = []
    for dr, dc in DIRECTIONS:
        run: List[Position] = []
        r, c = row + dr, col + dc
        while in_bounds(r, c):
            v = board.raw(r, c)
            if v == opp:
                run.append(Position(r, c))
            elif v == me:
                # Adjacent own piece leaves run empty: nothing to commit
                flips.extend(run)
                break
            else:
                break
            r += dr
            c += dc
    return flips


def legal_moves(board: Board, player: Piece) -> List[Position]:
    """Return legal moves for ``player`` in row-major order."""
    return [pos for pos in board.empty_positions() if compute_flips(board, player, pos)]


def initial_board() -> Board:
    """Standard opening: X on (3,3),(4,4), O on (3,4),(4,3)."""
    board = Board()
    board.place(Position(3, 3), Piece.X)
    board.place(Position(3, 4), Piece.O)
    board.place(Position(4, 3), Piece.O)
    board.place(Position(4, 4), Piece.X)
    return board


class GameState:
    """
    Board plus side to move and its cached legal moves.

    The cache is recomputed on every transition so it always equals
    ``legal_moves(board, current_player)``.
    """

    def __init__(self, board: Optional[Board] = None, current_player: Piece = Piece.X):
        self._board = board if board is not None else initial_board()
        self._current_player = Piece(current_player)
        self._legal_moves = legal_moves(self._board, self._current_player)

    @property
    def board(self) -> Board:
        return self._board

    @property
    def current_player(self) -> Piece:
        return self._current_player

    def legal_moves(self) -> List[Position]:
        """Legal moves for the player to move (copy, row-major)."""
        return list(self._legal_moves)

    def has_legal_moves(self) -> bool:
        return bool(self._legal_moves)

    def scores(self) -> Tuple[int, int]:
        """Return (count_x, count_o)."""
        return self._board.count(Piece.X), self._board.count(Piece.O)

    def _advance(self) -> None:
        self._current_player = self._current_player.opposite()
        self._legal_moves = legal_moves(self._board, self._current_player)

    def apply_move(self, pos: Tuple[int, int]) -> List[Position]:
        """
        Place the current player's piece at ``pos``, flip captures and pass
        the turn to the opponent.

        Returns:
            The flipped positions.

        Raises:
            ValueError: if ``pos`` is not a legal move for the current player
        """
        pos = Position(*pos)
        if pos not in self._legal_moves:
            raise ValueError(f"{tuple(pos)} is not a legal move for {self._current_player}")

        flips = compute_flips(self._board, self._current_player, pos)
        self._board.place(pos, self._current_player)
        for flip in flips:
            self._board.place(flip, self._current_player)

        self._advance()
        return flips

    def pass_turn(self) -> None:
        """Hand the turn to the opponent without touching the board."""
        self._advance()

    def clone(self) -> "GameState":
        other = GameState.__new__(GameState)
        other._board = self._board.copy()
        other._current_player = self._current_player
        other._legal_moves = list(self._legal_moves)
        return other

    def __repr__(self) -> str:
        x, o = self.scores()
        return f"GameState(to_move={self._current_player}, X={x}, O={o}, moves={len(self._legal_moves)})"


def is_game_over(state: GameState, previous_was_pass: bool) -> bool:
    """
    Terminal check.

    The game ends when the board is full, or when the previous ply was a
    pass and the player to move cannot move either.
    """
    if state.board.is_full():
        return True
    return previous_was_pass and not state.has_legal_moves()


def winner(state: GameState) -> Optional[Piece]:
    """Return the piece with more tiles, or None on a tie."""
    x, o = state.scores()
    if x > o:
        return Piece.X
    if o > x:
        return Piece.O
    return None
