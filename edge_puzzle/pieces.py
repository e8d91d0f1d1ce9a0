"""
Edge-matching puzzle pieces.

Each piece is a square tile with one symbol per edge, stored clockwise
starting at the top: (top, right, bottom, left).

Rotation cycles that tuple:
- clockwise:     (t, r, b, l) -> (l, t, r, b)
- anticlockwise: (t, r, b, l) -> (r, b, l, t)
"""

import random
from dataclasses import dataclass
from typing import Iterable, Literal

SYMBOLS: tuple[str, ...] = ("+", "-", "×", "÷")
NUM_PIECES = 9

Edges = tuple[str, str, str, str]
Direction = Literal["clockwise", "anticlockwise"]

DIRECTIONS: dict[str, int] = {
    "clockwise": 90,
    "anticlockwise": -90,
}


def rotate_clockwise(edges: Edges) -> Edges:
    """Rotate an edge tuple 90° clockwise: the left edge becomes the top."""
    top, right, bottom, left = edges
    return (left, top, right, bottom)


def rotate_anticlockwise(edges: Edges) -> Edges:
    """Rotate an edge tuple 90° anticlockwise: the right edge becomes the top."""
    top, right, bottom, left = edges
    return (right, bottom, left, top)


def check_direction(direction: str) -> None:
    if direction not in DIRECTIONS:
        raise ValueError(f"Unknown rotation direction {direction!r}")


@dataclass
class Piece:
    """A square tile. `id` is fixed, `edges` and `rotation` track orientation."""
    id: int
    edges: Edges
    rotation: int = 0  # degrees, display only

    def rotate(self, direction: Direction) -> None:
        """Rotate in place (mutates edges and rotation, never id)."""
        check_direction(direction)
        if direction == "clockwise":
            self.edges = rotate_clockwise(self.edges)
        else:
            self.edges = rotate_anticlockwise(self.edges)
        self.rotation = (self.rotation + DIRECTIONS[direction] + 360) % 360

    def all_orientations(self) -> list[Edges]:
        """Return the 4 edge tuples reachable by clockwise turns.

        Index k is the current orientation turned clockwise k times, so
        index 0 is always the current orientation. Symmetric pieces are
        not deduplicated.
        """
        orientations = [self.edges]
        for _ in range(3):
            orientations.append(rotate_clockwise(orientations[-1]))
        return orientations

    def copy(self) -> "Piece":
        return Piece(self.id, self.edges, self.rotation)


def make_piece(piece_id: int, edges: Iterable[str], rotation: int = 0) -> Piece:
    """Helper to create a piece from 4 symbols, e.g. make_piece(0, "+-×÷")."""
    edges = tuple(edges)
    if len(edges) != 4 or any(symbol not in SYMBOLS for symbol in edges):
        raise ValueError(f"Piece edges must be 4 symbols from {SYMBOLS}, got {edges!r}")
    if rotation % 90 != 0:
        raise ValueError(f"Rotation must be a multiple of 90, got {rotation}")
    return Piece(piece_id, edges, rotation % 360)


def random_edges(rng=None) -> Edges:
    """Draw 4 edges independently and uniformly from SYMBOLS."""
    rng = rng or random
    return tuple(rng.choice(SYMBOLS) for _ in range(4))


def generate_pieces(rng=None) -> list[Piece]:
    """Create the 9 starting pieces, ids 0..8, all at rotation 0.

    No two pieces share the same edge tuple as drawn. Rotated duplicates
    are allowed and the set is not guaranteed to be solvable.
    """
    pieces: list[Piece] = []
    used: set[Edges] = set()

    for piece_id in range(NUM_PIECES):
        edges = random_edges(rng)
        while edges in used:
            edges = random_edges(rng)
        used.add(edges)
        pieces.append(Piece(piece_id, edges))

    return pieces
