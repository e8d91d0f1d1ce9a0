"""
Text rendering of the 3x3 board, for debugging.
"""

from .board import BOARD_SIZE, Board, EdgeLookup, resolve_lookup

CELL_WIDTH = 7


def _cell_lines(edges) -> list[str]:
    """Three text lines for one cell: top edge, left/right edges, bottom edge."""
    if edges is None:
        return [" " * CELL_WIDTH, "   .   ", " " * CELL_WIDTH]
    top, right, bottom, left = edges
    return [
        f"   {top}   ",
        f" {left}   {right} ",
        f"   {bottom}   ",
    ]


def render_board(board: Board, edges_of: EdgeLookup) -> str:
    """
    Render the board as a grid of cells.
    Each cell shows its 4 edge symbols around the centre, '.' marks an empty cell.
    """
    lookup = resolve_lookup(edges_of)
    separator = "+" + "+".join("-" * CELL_WIDTH for _ in range(BOARD_SIZE)) + "+"

    lines = [separator]
    for row in range(BOARD_SIZE):
        cells = []
        for col in range(BOARD_SIZE):
            piece_id = board.cells[row * BOARD_SIZE + col]
            cells.append(_cell_lines(None if piece_id is None else lookup(piece_id)))
        for i in range(3):
            lines.append("|" + "|".join(cell[i] for cell in cells) + "|")
        lines.append(separator)
    return "\n".join(lines)


def display_board(board: Board, edges_of: EdgeLookup) -> None:
    """Print the board plus a one-line summary."""
    print(render_board(board, edges_of))
    print(f"Placed: {[piece_id for piece_id in board.cells if piece_id is not None]}")
    print(f"Empty cells: {len(board.empty_positions())}")
