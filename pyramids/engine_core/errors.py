"""
Move Errors - Typed rejections raised while validating a move.

One subclass per validation rule, checked in this order:

    NOT_YOUR_PIECE                    origin empty or owned by the opponent
    VERTICAL_PIECE_CANNOT_TRANSLATE   origin oriented UP and start != end
    NULL_MOVE                         start == end and orientation unchanged
    ILLEGAL_DIRECTION                 end not reachable along origin's facing
    OBSTRUCTED_PATH                   a piece stands between start and end
    ILLEGAL_CAPTURE                   defender UP and attacker not larger

Usage:
    try:
        state = make_move(state, move)
    except MoveError as e:
        logger.info(f"Rejected: {e.code.value} {e.context}")
"""

from enum import Enum
from typing import Any

__all__ = [
    "ErrorCode",
    "MoveError",
    "NotYourPieceError",
    "VerticalPieceCannotTranslateError",
    "NullMoveError",
    "IllegalDirectionError",
    "ObstructedPathError",
    "IllegalCaptureError",
]


class ErrorCode(str, Enum):
    """Machine-readable rejection codes."""
    NOT_YOUR_PIECE = "NOT_YOUR_PIECE"
    VERTICAL_PIECE_CANNOT_TRANSLATE = "VERTICAL_PIECE_CANNOT_TRANSLATE"
    NULL_MOVE = "NULL_MOVE"
    ILLEGAL_DIRECTION = "ILLEGAL_DIRECTION"
    OBSTRUCTED_PATH = "OBSTRUCTED_PATH"
    ILLEGAL_CAPTURE = "ILLEGAL_CAPTURE"


class MoveError(Exception):
    """Base exception for illegal moves.

    Attributes:
        code: Which rule rejected the move
        message: Human-readable explanation
        context: Coordinates, colors, sizes and orientations involved
    """
    code: ErrorCode

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "code": self.code.value,
            "message": self.message,
            "context": self.context,
        }


class NotYourPieceError(MoveError):
    code = ErrorCode.NOT_YOUR_PIECE


class VerticalPieceCannotTranslateError(MoveError):
    code = ErrorCode.VERTICAL_PIECE_CANNOT_TRANSLATE


class NullMoveError(MoveError):
    code = ErrorCode.NULL_MOVE


class IllegalDirectionError(MoveError):
    code = ErrorCode.ILLEGAL_DIRECTION


class ObstructedPathError(MoveError):
    code = ErrorCode.OBSTRUCTED_PATH


class IllegalCaptureError(MoveError):
    code = ErrorCode.ILLEGAL_CAPTURE
