"""
edge_puzzle - 3x3 edge-matching puzzle engine

Core components:
- Piece: square tile with 4 edge symbols and an orientation
- Board: the 3x3 grid and its adjacency rule
- check_board: full-board scoring
- solve_pieces: backtracking solver
- PuzzleGame: the game state machine used by a presentation layer
"""

from .pieces import SYMBOLS, Piece, generate_pieces, make_piece, rotate_anticlockwise, rotate_clockwise
from .board import BOARD_SIZE, NUM_CELLS, Board, neighbors
from .scoring import CheckResult, check_board
from .solver import Solution, solve, solve_pieces
from .game import GameSnapshot, PieceState, PuzzleGame
from .viz import display_board, render_board
