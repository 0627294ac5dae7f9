"""
Move Generator - Enumerates all legal moves from a game state.

Used by:
1. UIs to show the options a player has
2. Callers that want to check a move is in legal_moves()

Design: candidates are produced cheaply along each pyramid's facing,
then filtered through validate_move so the generator can never
disagree with the reducer.
"""

from __future__ import annotations
from dataclasses import dataclass

from ..config import BOARD_SIZE
from .action import Move
from .errors import MoveError
from .geometry import direction_vector
from .reducer import validate_move
from .state import Coord, GameState, Orientation, Piece, on_board


@dataclass
class MoveGenerator:
    """Generates legal moves for the player to move."""

    def generate(self, state: GameState) -> list[Move]:
        """
        Generate all legal moves for the current player.

        Ordered by start cell, then distance travelled, then orientation.
        Returns [] once the game is finished.
        """
        if state.is_terminal:
            return []

        moves = []
        for start, piece in state.pieces(state.current_player):
            for end in self._destinations(start, piece):
                for orientation in Orientation:
                    move = Move(start=start, end=end, orientation=orientation)
                    if self._is_legal(state, move):
                        moves.append(move)
        return moves

    def _destinations(self, start: Coord, piece: Piece) -> list[Coord]:
        """Every cell along the pyramid's facing, nearest first."""
        dir_x, dir_y = direction_vector(piece.orientation)
        if (dir_x, dir_y) == (0, 0):
            return [start]

        cells = []
        for k in range(1, BOARD_SIZE):
            cell = (start[0] + dir_x * k, start[1] + dir_y * k)
            if not on_board(cell):
                break
            cells.append(cell)
        return cells

    def _is_legal(self, state: GameState, move: Move) -> bool:
        try:
            validate_move(state, move)
        except MoveError:
            return False
        return True


def legal_moves(state: GameState) -> list[Move]:
    """Convenience function to list legal moves."""
    return MoveGenerator().generate(state)
