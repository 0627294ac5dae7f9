"""
Engine Core - Deterministic game state and move rules.

The engine is the runtime that:
1. Holds an immutable GameState
2. Validates moves against it
3. Derives the successor state of a legal move
4. Enumerates legal moves
"""

from .state import GameState, Piece, Color, Orientation, Coord, Board, empty_board
from .action import Move, MoveResult
from .errors import (
    ErrorCode,
    MoveError,
    NotYourPieceError,
    VerticalPieceCannotTranslateError,
    NullMoveError,
    IllegalDirectionError,
    ObstructedPathError,
    IllegalCaptureError,
)
from .geometry import direction_vector, matches_direction, is_obstructed, path_between
from .reducer import Reducer, validate_move, make_move, apply_move
from .move_generator import MoveGenerator, legal_moves

__all__ = [
    "GameState",
    "Piece",
    "Color",
    "Orientation",
    "Coord",
    "Board",
    "empty_board",
    "Move",
    "MoveResult",
    "ErrorCode",
    "MoveError",
    "NotYourPieceError",
    "VerticalPieceCannotTranslateError",
    "NullMoveError",
    "IllegalDirectionError",
    "ObstructedPathError",
    "IllegalCaptureError",
    "direction_vector",
    "matches_direction",
    "is_obstructed",
    "path_between",
    "Reducer",
    "validate_move",
    "make_move",
    "apply_move",
    "MoveGenerator",
    "legal_moves",
]
