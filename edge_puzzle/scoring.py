"""
Full-board validation.

Scores the 12 adjacent pairs of a filled board: 6 horizontal pairs
(row-major) and then 6 vertical pairs.
"""

from pydantic import BaseModel, computed_field

from .board import BOARD_SIZE, BOTTOM, LEFT, RIGHT, TOP, Board, EdgeLookup, resolve_lookup

TOTAL_PAIRS = (BOARD_SIZE - 1) * BOARD_SIZE * 2

INCOMPLETE_MESSAGE = "Incomplete: Fill all positions on the board"
SUCCESS_MESSAGE = "Success! All edges match correctly and form valid patterns (100% complete)"


class CheckResult(BaseModel):
    """Report of the last solution check."""
    complete: bool
    errors: list[str] = []
    matching_pairs: int = 0
    total_pairs: int = TOTAL_PAIRS
    percentage: int | None = None  # None when the board is incomplete

    @computed_field
    @property
    def success(self) -> bool:
        return self.complete and not self.errors

    @computed_field
    @property
    def message(self) -> str:
        if not self.complete:
            return INCOMPLETE_MESSAGE
        if not self.errors:
            return SUCCESS_MESSAGE
        header = (
            f"Incorrect: Found {len(self.errors)} mismatches "
            f"({self.percentage}% patterns complete)"
        )
        return "\n".join([header, *self.errors])


def check_board(board: Board, edges_of: EdgeLookup) -> CheckResult:
    """Score every adjacency of a full board.

    1-indexed rows and columns are used in the mismatch texts.
    """
    if not board.is_full():
        return CheckResult(complete=False)

    lookup = resolve_lookup(edges_of)
    errors: list[str] = []
    matching = 0

    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE - 1):
            left_piece = lookup(board.cells[row * BOARD_SIZE + col])
            right_piece = lookup(board.cells[row * BOARD_SIZE + col + 1])
            if left_piece[RIGHT] == right_piece[LEFT]:
                matching += 1
            else:
                errors.append(f"Mismatch at row {row + 1}, between columns {col + 1} and {col + 2}")

    for row in range(BOARD_SIZE - 1):
        for col in range(BOARD_SIZE):
            top_piece = lookup(board.cells[row * BOARD_SIZE + col])
            bottom_piece = lookup(board.cells[(row + 1) * BOARD_SIZE + col])
            if top_piece[BOTTOM] == bottom_piece[TOP]:
                matching += 1
            else:
                errors.append(f"Mismatch at column {col + 1}, between rows {row + 1} and {row + 2}")

    # k/12 * 100 never lands on .5, so round() agrees with round-half-up
    percentage = round(matching / TOTAL_PAIRS * 100)

    return CheckResult(
        complete=True,
        errors=errors,
        matching_pairs=matching,
        percentage=percentage,
    )
