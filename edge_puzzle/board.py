"""
Board model for the 3x3 edge-matching puzzle.

Cells are numbered row-major 0..8:

    0 1 2
    3 4 5
    6 7 8

row = position // 3, col = position % 3. A cell holds a piece id or None.

Adjacency:
- top neighbor at position - 3 (row > 0)
- right neighbor at position + 1 (col < 2)
- bottom neighbor at position + 3 (row < 2)
- left neighbor at position - 1 (col > 0)

Touching edges must carry the *same* symbol.
"""

from dataclasses import dataclass, field
from typing import Callable, Mapping

from .pieces import Edges

BOARD_SIZE = 3
NUM_CELLS = BOARD_SIZE * BOARD_SIZE

# Edge indices, clockwise from the top
TOP, RIGHT, BOTTOM, LEFT = 0, 1, 2, 3

# Side of the neighbor that faces a given side of this piece
OPPOSITE: dict[int, int] = {TOP: BOTTOM, RIGHT: LEFT, BOTTOM: TOP, LEFT: RIGHT}

EdgeLookup = Callable[[int], Edges] | Mapping[int, Edges]


def check_position(position: int) -> None:
    if not 0 <= position < NUM_CELLS:
        raise ValueError(f"No cell at position {position} (expected 0..{NUM_CELLS - 1})")


def neighbors(position: int) -> list[tuple[int, int]]:
    """Return (side, neighbor_position) for every on-board neighbor."""
    check_position(position)
    row, col = divmod(position, BOARD_SIZE)
    result = []
    if row > 0:
        result.append((TOP, position - BOARD_SIZE))
    if col < BOARD_SIZE - 1:
        result.append((RIGHT, position + 1))
    if row < BOARD_SIZE - 1:
        result.append((BOTTOM, position + BOARD_SIZE))
    if col > 0:
        result.append((LEFT, position - 1))
    return result


def edges_match(edges: Edges, neighbor_edges: Edges, side: int) -> bool:
    """True if `edges` agrees with a neighbor lying on `side` of it."""
    return neighbor_edges[OPPOSITE[side]] == edges[side]


def resolve_lookup(edges_of: EdgeLookup) -> Callable[[int], Edges]:
    if callable(edges_of):
        return edges_of
    return edges_of.__getitem__


@dataclass
class Board:
    """The 9 cells, each None (empty) or a piece id."""
    cells: list[int | None] = field(default_factory=lambda: [None] * NUM_CELLS)

    def __post_init__(self):
        if len(self.cells) != NUM_CELLS:
            raise ValueError(f"Board needs {NUM_CELLS} cells, got {len(self.cells)}")

    def copy(self) -> "Board":
        """Copy for backtracking."""
        return Board(cells=list(self.cells))

    def piece_at(self, position: int) -> int | None:
        check_position(position)
        return self.cells[position]

    def is_occupied(self, position: int) -> bool:
        return self.piece_at(position) is not None

    def place(self, piece_id: int, position: int) -> None:
        """Write a piece id into a cell (mutates). Call can_place first!"""
        if self.is_occupied(position):
            raise ValueError(f"Position {position} is already occupied")
        if piece_id in self.cells:
            raise ValueError(f"Piece {piece_id} is already on the board")
        self.cells[position] = piece_id

    def placed_ids(self) -> set[int]:
        return {piece_id for piece_id in self.cells if piece_id is not None}

    def empty_positions(self) -> list[int]:
        return [pos for pos, piece_id in enumerate(self.cells) if piece_id is None]

    def is_full(self) -> bool:
        return all(piece_id is not None for piece_id in self.cells)

    def can_place(self, edges: Edges, position: int, edges_of: EdgeLookup) -> bool:
        """Check that `edges` at `position` matches every occupied neighbor.

        `edges_of` maps a placed piece id to its current edge tuple (a dict
        or a function). Empty or off-board neighbors are ignored. Pure: the
        board is not touched.
        """
        lookup = resolve_lookup(edges_of)
        for side, neighbor_pos in neighbors(position):
            neighbor_id = self.cells[neighbor_pos]
            if neighbor_id is None:
                continue
            if not edges_match(edges, lookup(neighbor_id), side):
                return False
        return True
