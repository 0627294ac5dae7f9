"""
Moves - The single kind of action a player can take, and its result.

A move picks up a pyramid, slides it along its current facing and
sets it down with a freely chosen orientation. Moving zero squares
is how an UP pyramid re-orients.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any

from .state import Coord, GameState, Orientation, on_board


@dataclass(frozen=True)
class Move:
    """
    A complete move to be applied to the game state.

    Moves are:
    - Validated before application
    - Applied atomically by the reducer
    """
    start: Coord
    end: Coord
    orientation: Orientation

    def __post_init__(self):
        for name in ("start", "end"):
            coord = tuple(getattr(self, name))
            if len(coord) != 2 or not on_board(coord):
                raise ValueError(f"Move {name} {coord} is off the board")
            object.__setattr__(self, name, coord)

    @property
    def is_stationary(self) -> bool:
        return self.start == self.end

    @classmethod
    def reorient(cls, at: Coord, orientation: Orientation) -> Move:
        """Factory for turning a pyramid in place."""
        return cls(start=at, end=at, orientation=orientation)

    def __str__(self) -> str:
        return f"{self.start}->{self.end} {self.orientation.value}"


@dataclass
class MoveResult:
    """
    Result of applying a move.

    Contains:
    - Whether the move succeeded
    - New state (if succeeded)
    - Error message, code and context (if failed)
    - Human-readable changes
    """
    success: bool
    new_state: GameState | None = None
    error: str | None = None
    error_code: str | None = None
    error_context: dict[str, Any] = field(default_factory=dict)

    state_changes: list[str] = field(default_factory=list)

    @classmethod
    def failure(
        cls,
        error: str,
        error_code: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> MoveResult:
        """Create a failure result."""
        return cls(success=False, error=error, error_code=error_code, error_context=context or {})

    @classmethod
    def success_with_state(cls, state: GameState, changes: list[str] | None = None) -> MoveResult:
        """Create a success result with new state."""
        return cls(success=True, new_state=state, state_changes=changes or [])
