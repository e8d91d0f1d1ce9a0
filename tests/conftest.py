import random

import pytest

from edge_puzzle import PuzzleGame, make_piece

# A solved layout, listed by position 0..8 (piece id == position).
# Edges are (top, right, bottom, left).
SOLVED_EDGES = [
    "++÷-", "--×+", "×÷+-",
    "÷×-+", "×÷+×", "+-×÷",
    "--÷×", "++×-", "×+-+",
]


def solved_pieces():
    return [make_piece(i, edges) for i, edges in enumerate(SOLVED_EDGES)]


def monochrome_pieces():
    """9 single-symbol pieces in 3 colours: no full board can match."""
    return [make_piece(i, symbol * 4) for i, symbol in enumerate("+++---×××")]


class ScriptedRng:
    """Returns symbols from a fixed script, then falls back to a seeded Random."""

    def __init__(self, script):
        self.script = list(script)
        self.fallback = random.Random(0)

    def choice(self, seq):
        if self.script:
            return self.script.pop(0)
        return self.fallback.choice(seq)


@pytest.fixture
def game():
    """A game dealt with the known solvable piece set."""
    g = PuzzleGame()
    g.pieces = solved_pieces()
    return g
