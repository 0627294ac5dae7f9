"""
Tests for grid geometry.

Tests:
- Direction vectors
- Straight-line direction matching
- Path tracing and obstruction
"""

import pytest

from ..engine_core.geometry import (
    ORIENTATION_VECTORS,
    direction_vector,
    matches_direction,
    path_between,
    is_obstructed,
)
from ..engine_core.state import Orientation
from .conftest import red, blue


class TestDirectionVector:
    """Tests for the orientation lookup table."""

    def test_every_orientation_has_a_vector(self):
        """All nine orientations are mapped."""
        assert set(ORIENTATION_VECTORS) == set(Orientation)

    @pytest.mark.parametrize("orientation,expected", [
        (Orientation.N, (0, 1)),
        (Orientation.NE, (1, 1)),
        (Orientation.E, (1, 0)),
        (Orientation.SE, (1, -1)),
        (Orientation.S, (0, -1)),
        (Orientation.SW, (-1, -1)),
        (Orientation.W, (-1, 0)),
        (Orientation.NW, (-1, 1)),
        (Orientation.UP, (0, 0)),
    ])
    def test_vectors(self, orientation, expected):
        """Each orientation maps to its unit step."""
        assert direction_vector(orientation) == expected


class TestMatchesDirection:
    """Tests for straight-line direction matching."""

    def test_horizontal(self):
        """East and west travel along a row."""
        assert matches_direction((3, 2), (7, 2), Orientation.E)
        assert matches_direction((7, 2), (0, 2), Orientation.W)

    def test_vertical(self):
        """North and south travel along a column."""
        assert matches_direction((2, 0), (2, 7), Orientation.N)
        assert matches_direction((2, 7), (2, 6), Orientation.S)

    def test_main_diagonals(self):
        """NE and SW travel along the x == y diagonal."""
        assert matches_direction((0, 0), (5, 5), Orientation.NE)
        assert matches_direction((5, 5), (1, 1), Orientation.SW)

    def test_anti_diagonals(self):
        """Diagonals are compared by absolute distance."""
        assert matches_direction((1, 6), (4, 3), Orientation.SE)
        assert matches_direction((4, 3), (1, 6), Orientation.NW)

    def test_wrong_facing(self):
        """Travel along a line the piece does not face is rejected."""
        assert not matches_direction((3, 2), (7, 2), Orientation.N)
        assert not matches_direction((3, 2), (7, 2), Orientation.W)
        assert not matches_direction((0, 0), (5, 5), Orientation.SE)

    def test_bent_path_rejected(self):
        """Knight-like and uneven slopes never match."""
        assert not matches_direction((0, 0), (1, 2), Orientation.NE)
        assert not matches_direction((0, 0), (1, 2), Orientation.N)
        assert not matches_direction((0, 0), (3, 1), Orientation.E)

    def test_zero_displacement_only_matches_up(self):
        """Staying put is reachable only for UP."""
        assert matches_direction((4, 4), (4, 4), Orientation.UP)
        for orientation in Orientation:
            if orientation != Orientation.UP:
                assert not matches_direction((4, 4), (4, 4), orientation)

    def test_up_never_translates(self):
        """UP matches no displacement except zero."""
        assert not matches_direction((4, 4), (4, 5), Orientation.UP)


class TestPath:
    """Tests for path tracing and obstruction."""

    def test_path_excludes_endpoints(self):
        """Start and end are not part of the path."""
        assert path_between((3, 2), (7, 2), Orientation.E) == [(4, 2), (5, 2), (6, 2)]

    def test_adjacent_cells_have_empty_path(self):
        """A one-step move has nothing in between."""
        assert path_between((3, 3), (4, 4), Orientation.NE) == []

    def test_stationary_path_is_empty(self):
        """Turning in place has no path."""
        assert path_between((4, 4), (4, 4), Orientation.UP) == []

    def test_diagonal_path(self):
        """Diagonal paths step on both axes at once."""
        assert path_between((1, 6), (4, 3), Orientation.SE) == [(2, 5), (3, 4)]

    def test_clear_path(self, empty_state):
        """An empty line is not obstructed."""
        board = empty_state.with_piece((7, 2), blue(3, Orientation.SW)).board
        assert not is_obstructed(board, (3, 2), (7, 2), Orientation.E)

    def test_destination_not_counted(self, demo_state):
        """A piece on the destination is a capture question, not an obstruction."""
        assert not is_obstructed(demo_state.board, (3, 2), (7, 2), Orientation.E)

    def test_intermediate_piece_obstructs(self, demo_state):
        """Any piece between start and end blocks the move."""
        board = demo_state.with_piece((5, 2), red(1, Orientation.UP)).board
        assert is_obstructed(board, (3, 2), (7, 2), Orientation.E)

    def test_piece_off_the_line_does_not_obstruct(self, demo_state):
        """Pieces beside the line are ignored."""
        board = demo_state.with_piece((5, 3), red(1, Orientation.UP)).board
        assert not is_obstructed(board, (3, 2), (7, 2), Orientation.E)
