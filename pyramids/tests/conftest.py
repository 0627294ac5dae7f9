"""
Pytest fixtures for pyramids tests.
"""

import pytest

from ..engine_core.state import Color, GameState, Orientation, Piece


def red(size, orientation):
    return Piece(color=Color.RED, size=size, orientation=orientation)


def blue(size, orientation):
    return Piece(color=Color.BLUE, size=size, orientation=orientation)


def board_value(state: GameState) -> int:
    """Total size of all pyramids still on the board."""
    return sum(piece.size for _, piece in state.pieces())


@pytest.fixture
def empty_state() -> GameState:
    """A game with no pieces, red to move."""
    return GameState.new()


@pytest.fixture
def demo_state() -> GameState:
    """Red 3 facing east at (3,2), blue 3 facing south-west at (7,2)."""
    return GameState.new({
        (3, 2): red(3, Orientation.E),
        (7, 2): blue(3, Orientation.SW),
    })


@pytest.fixture
def skirmish_state() -> GameState:
    """A handful of pieces of both colors, red to move."""
    return GameState.new({
        (0, 0): red(1, Orientation.NE),
        (2, 0): red(2, Orientation.N),
        (4, 4): red(3, Orientation.UP),
        (6, 1): red(2, Orientation.W),
        (2, 5): blue(1, Orientation.UP),
        (3, 3): blue(2, Orientation.S),
        (2, 2): blue(3, Orientation.UP),
        (7, 7): blue(1, Orientation.SW),
    })
