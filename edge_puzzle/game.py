"""
Edge-matching puzzle game state.

PuzzleGame is the only object a presentation layer talks to. Commands
never raise for rule violations: a rejected command leaves the state as
it was and explains itself in `message`. ValueError is reserved for
malformed arguments (unknown piece id, position, or direction).
"""

from pydantic import BaseModel

from .board import Board, check_position
from .pieces import NUM_PIECES, Direction, Edges, Piece, check_direction, generate_pieces
from .scoring import CheckResult, check_board
from .solver import solve_pieces

START_MESSAGE = "Select a piece and place it on the board"
ALREADY_PLACED_MESSAGE = "This piece is already placed on the board"
SELECTED_MESSAGE = "Piece selected. Rotate or place it on the board."
NO_SELECTION_MESSAGE = "Select a piece first"
OCCUPIED_MESSAGE = "This position is already occupied"
INVALID_PLACEMENT_MESSAGE = "Invalid placement. Edges must match adjacent pieces."
PLACED_MESSAGE = "Piece placed! Select another piece."
SOLVED_MESSAGE = "Puzzle solved automatically!"
UNSOLVABLE_MESSAGE = "Could not find a valid solution. Try resetting the puzzle."


# Snapshot models
class PieceState(BaseModel):
    id: int
    edges: tuple[str, str, str, str]
    rotation: int


class GameSnapshot(BaseModel):
    pieces: list[PieceState]
    board: list[int | None]
    selected_piece_id: int | None = None
    message: str
    check_result: CheckResult | None = None


class PuzzleGame:
    """A 3x3 edge-matching game: 9 pieces, one board, one selection."""

    def __init__(self, rng=None):
        self._rng = rng
        self._new_game()

    def _new_game(self) -> None:
        self.pieces: list[Piece] = generate_pieces(self._rng)
        self.board = Board()
        self.selected_piece_id: int | None = None
        self.message = START_MESSAGE
        self.check_result: CheckResult | None = None

    # Queries

    def get_state(self) -> GameSnapshot:
        """Read-only copy of the whole game state."""
        return GameSnapshot(
            pieces=[
                PieceState(id=piece.id, edges=piece.edges, rotation=piece.rotation)
                for piece in self.pieces
            ],
            board=list(self.board.cells),
            selected_piece_id=self.selected_piece_id,
            message=self.message,
            check_result=self.check_result.model_copy(deep=True) if self.check_result else None,
        )

    def get_available_pieces(self) -> list[Piece]:
        """Copies of the pieces not on the board, ascending id."""
        placed = self.board.placed_ids()
        available = [piece.copy() for piece in self.pieces if piece.id not in placed]
        return sorted(available, key=lambda piece: piece.id)

    def get_piece(self, piece_id: int) -> Piece:
        for piece in self.pieces:
            if piece.id == piece_id:
                return piece
        raise ValueError(f"No piece with id {piece_id} (expected 0..{NUM_PIECES - 1})")

    def edges_of(self, piece_id: int) -> Edges:
        return self.get_piece(piece_id).edges

    # Commands

    def select_piece(self, piece_id: int) -> None:
        self.get_piece(piece_id)
        if piece_id in self.board.placed_ids():
            self.message = ALREADY_PLACED_MESSAGE
            return

        self.selected_piece_id = piece_id
        self.message = SELECTED_MESSAGE

    def rotate_piece(self, direction: Direction) -> None:
        check_direction(direction)
        if self.selected_piece_id is None:
            self.message = NO_SELECTION_MESSAGE
            return

        self.get_piece(self.selected_piece_id).rotate(direction)

    def place_piece(self, position: int) -> None:
        check_position(position)
        if self.selected_piece_id is None:
            self.message = NO_SELECTION_MESSAGE
            return

        if self.board.is_occupied(position):
            self.message = OCCUPIED_MESSAGE
            return

        piece = self.get_piece(self.selected_piece_id)
        if not self.board.can_place(piece.edges, position, self.edges_of):
            self.message = INVALID_PLACEMENT_MESSAGE
            return

        self.board.place(piece.id, position)
        self.selected_piece_id = None
        self.message = PLACED_MESSAGE

    def check_solution(self) -> CheckResult:
        """Score the board into check_result (board and selection untouched)."""
        self.check_result = check_board(self.board, self.edges_of)
        return self.check_result

    def reset_game(self) -> None:
        """Throw everything away and deal 9 fresh pieces."""
        self._new_game()

    def solve_puzzle(self, slow: float = 0) -> bool:
        """Clear the board and let the solver fill it. Returns True on success."""
        self.board = Board()
        self.selected_piece_id = None

        solution = solve_pieces(self.pieces, slow=slow)
        if solution is None:
            self.message = UNSOLVABLE_MESSAGE
            return False

        solution.apply(self.pieces)
        self.board = solution.board.copy()
        self.message = SOLVED_MESSAGE
        self.check_solution()
        return True
