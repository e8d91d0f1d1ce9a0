"""
Edge-matching puzzle solver using backtracking.
"""

import time
from dataclasses import dataclass

from .board import NUM_CELLS, Board
from .pieces import Edges, Piece

# (piece id, its 4 edge tuples indexed by clockwise turns from the start)
Candidate = tuple[int, list[Edges]]


@dataclass
class Solution:
    """A filled board plus the orientation chosen for every piece.

    `edges` lets a caller score the board without touching the pieces,
    e.g. check_board(solution.board, solution.edges).
    """
    board: Board
    turns: dict[int, int]      # piece id -> clockwise quarter turns from its starting orientation
    edges: dict[int, Edges]    # piece id -> edge tuple in that orientation

    def apply(self, pieces: list[Piece]) -> None:
        """Rotate the given pieces into the orientations of this solution."""
        for piece in pieces:
            for _ in range(self.turns.get(piece.id, 0)):
                piece.rotate("clockwise")


def solve(
    board: Board,
    remaining: list[Candidate],
    placed: dict[int, tuple[int, Edges]] | None = None,
    position: int = 0,
    slow: float = 0,
) -> Solution | None:
    """
    Backtracking solver. Returns the first solution found or None.

    Strategy:
    - Fill positions 0..8 in order
    - Try remaining pieces in list order
    - Try each piece's 4 orientations, current one first, then clockwise
    - Recurse on every placement that matches the neighbors placed so far

    Orientations are precomputed values, so nothing is mutated and there is
    no rotation to undo when a branch fails.

    Args:
        placed: piece id -> (turns, edges) for pieces already on `board`
        slow: delay between steps, with a trace line per placement
    """
    placed = placed or {}

    if position >= NUM_CELLS:
        return Solution(
            board=board,
            turns={piece_id: turns for piece_id, (turns, _) in placed.items()},
            edges={piece_id: edges for piece_id, (_, edges) in placed.items()},
        )

    def edges_of(piece_id: int) -> Edges:
        return placed[piece_id][1]

    for i, (piece_id, orientations) in enumerate(remaining):
        for turns, edges in enumerate(orientations):
            if not board.can_place(edges, position, edges_of):
                continue

            new_board = board.copy()
            new_board.place(piece_id, position)

            new_placed = dict(placed)
            new_placed[piece_id] = (turns, edges)

            new_remaining = remaining[:i] + remaining[i + 1:]
            if slow > 0:
                time.sleep(slow)
                print(f"position {position} piece {piece_id} turns {turns} remaining {len(new_remaining)}")
            result = solve(new_board, new_remaining, new_placed, position + 1, slow)

            if result is not None:
                return result

    return None  # No solution found


def solve_pieces(pieces: list[Piece], slow: float = 0) -> Solution | None:
    """
    Main entry point. Searches an empty board with every given piece.
    Pieces are left untouched; use Solution.apply to adopt the result.
    """
    if len({piece.id for piece in pieces}) != len(pieces):
        raise ValueError("Piece ids must be unique")
    if len(pieces) != NUM_CELLS:
        raise ValueError(f"Need exactly {NUM_CELLS} pieces, got {len(pieces)}")

    remaining = [(piece.id, piece.all_orientations()) for piece in pieces]
    return solve(Board(), remaining, slow=slow)
