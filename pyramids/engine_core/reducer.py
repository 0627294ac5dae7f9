"""
Reducer - Validates moves and applies them to game state.

The reducer is the single point of state change.
All state changes must go through make_move().

Design principles:
- Pure function: (state, move) -> new_state
- Validates before applying, guards run in a fixed order
- Never touches the input state; a rejected move changes nothing
- Does not check `finished`: callers stop submitting moves once a game is over
"""

from __future__ import annotations
import logging
from dataclasses import dataclass

from ..config import WINNING_SCORE
from .action import Move, MoveResult
from .errors import (
    MoveError,
    NotYourPieceError,
    VerticalPieceCannotTranslateError,
    NullMoveError,
    IllegalDirectionError,
    ObstructedPathError,
    IllegalCaptureError,
)
from .geometry import matches_direction, is_obstructed
from .state import GameState, Orientation

logger = logging.getLogger(__name__)


def validate_move(state: GameState, move: Move) -> None:
    """
    Check that a move is legal in the given state.

    Raises the MoveError subclass of the first rule the move breaks.
    """
    start, end = move.start, move.end
    player = state.current_player
    attacker = state.piece_at(start)

    if attacker is None or attacker.color != player:
        raise NotYourPieceError(
            f"There's no {player.value}'s pyramid at {start}",
            context={"start": start, "color": player.value},
        )

    context = {
        "start": start,
        "end": end,
        "color": attacker.color.value,
        "size": attacker.size,
        "orientation": attacker.orientation.value,
    }

    if attacker.orientation == Orientation.UP and not move.is_stationary:
        raise VerticalPieceCannotTranslateError(
            f"{player.value}'s pyramid at {start} is pointing up - it can only reorient",
            context=context,
        )

    if move.is_stationary and attacker.orientation == move.orientation:
        raise NullMoveError("Null moves are illegal", context=context)

    if not matches_direction(start, end, attacker.orientation):
        raise IllegalDirectionError(f"{attacker} cannot move from {start} to {end}", context=context)

    if is_obstructed(state.board, start, end, attacker.orientation):
        raise ObstructedPathError(f"The move from {start} to {end} is obstructed", context=context)

    # A pyramid turning in place does not defend its own cell, so UP pieces can
    # re-orient (see "Turning in place" in DESIGN.md)
    defender = None if move.is_stationary else state.piece_at(end)
    if defender is not None and not (
        attacker.size > defender.size or defender.orientation != Orientation.UP
    ):
        raise IllegalCaptureError(
            f"{attacker} is not bigger than {defender}, which is pointing up",
            context={
                **context,
                "defender_size": defender.size,
                "defender_color": defender.color.value,
            },
        )


def make_move(state: GameState, move: Move) -> GameState:
    """
    Apply a move, returning the successor state.

    Raises MoveError if the move is illegal; the input state is never changed.
    """
    validate_move(state, move)

    mover = state.current_player
    piece = state.piece_at(move.start)
    captured = None if move.is_stationary else state.piece_at(move.end)

    new_state = (
        state
        .with_piece(move.start, None)
        .with_piece(move.end, piece.reoriented(move.orientation))
    )

    score = dict(state.score)
    finished = state.finished
    if captured is not None:
        score[mover] += captured.size
        logger.info(f"{mover.value} captured {captured} at {move.end}, score {score[mover]}")
        if score[mover] >= WINNING_SCORE:
            finished = True
            logger.info(f"{mover.value} wins with {score[mover]} points")

    # A round is complete once the second player has moved
    turn = state.turn + 1 if mover != state.starting_player else state.turn

    return new_state._copy_with(
        score=score,
        turn=turn,
        current_player=mover.opponent,
        finished=finished,
    )


@dataclass
class Reducer:
    """
    Reducer applies moves to game state.

    Stateless - all state is in GameState.
    Wraps validate_move/make_move in MoveResult so callers that
    prefer result objects to exceptions never see a MoveError.
    """

    def validate(self, state: GameState, move: Move) -> MoveResult:
        """Check a move without applying it."""
        try:
            validate_move(state, move)
        except MoveError as e:
            logger.debug(f"Rejected {move}: {e}")
            return MoveResult.failure(e.message, error_code=e.code.value, context=e.context)
        return MoveResult.success_with_state(state)

    def apply(self, state: GameState, move: Move) -> MoveResult:
        """
        Apply a move to the game state.

        Returns MoveResult with new state or error.
        """
        try:
            new_state = make_move(state, move)
        except MoveError as e:
            logger.debug(f"Rejected {move}: {e}")
            return MoveResult.failure(e.message, error_code=e.code.value, context=e.context)

        return MoveResult.success_with_state(new_state, changes=self._describe(state, move, new_state))

    def _describe(self, before: GameState, move: Move, after: GameState) -> list[str]:
        """Human-readable summary of what a move changed."""
        mover = before.current_player
        piece = before.piece_at(move.start)
        if move.is_stationary:
            changes = [f"{mover.value} turned the pyramid at {move.start} to {move.orientation.value}"]
        else:
            changes = [
                f"{mover.value} moved {piece} from {move.start} to {move.end}, "
                f"now facing {move.orientation.value}"
            ]
            captured = before.piece_at(move.end)
            if captured is not None:
                changes.append(f"{mover.value} captured {captured} (+{captured.size})")
        if after.finished and not before.finished:
            changes.append(f"{mover.value} wins with {after.score[mover]} points")
        return changes


def apply_move(state: GameState, move: Move) -> MoveResult:
    """Convenience function to apply a move."""
    return Reducer().apply(state, move)
