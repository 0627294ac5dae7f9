"""
Pydantic Schemas - JSON snapshot format for states and moves.

The snapshot mirrors the engine's GameState field for field:

    {
      "board": [[{}, {"size": 3, "color": "red", "orientation": "E"}, ...], ...],
      "score": {"red": 0, "blue": 0},
      "turn": 0,
      "currentPlayer": "red",
      "startingPlayer": "red",
      "finished": false
    }

An empty cell is `{}`. Moves look like
`{"start": [3, 2], "end": [7, 2], "orientation": "N"}`.

Loading rejects malformed snapshots with pydantic.ValidationError
before anything reaches the engine.
"""

from typing import Annotated, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from .config import BOARD_SIZE, MIN_PIECE_SIZE, MAX_PIECE_SIZE
from .engine_core.action import Move
from .engine_core.state import Color, GameState, Orientation, Piece


BoardIndex = Annotated[int, Field(ge=0, le=BOARD_SIZE - 1)]
CoordModel = tuple[BoardIndex, BoardIndex]


# =============================================================================
# Board
# =============================================================================

class CellModel(BaseModel):
    """One board cell: either `{}` or a fully specified pyramid."""
    size: Optional[int] = Field(None, ge=MIN_PIECE_SIZE, le=MAX_PIECE_SIZE)
    color: Optional[Color] = None
    orientation: Optional[Orientation] = None

    @model_validator(mode="after")
    def check_all_or_nothing(self):
        present = [v is not None for v in (self.size, self.color, self.orientation)]
        if any(present) and not all(present):
            raise ValueError("A cell needs size, color and orientation together, or none of them")
        return self

    @classmethod
    def from_piece(cls, piece: Optional[Piece]) -> "CellModel":
        if piece is None:
            return cls()
        return cls(size=piece.size, color=piece.color, orientation=piece.orientation)

    def to_piece(self) -> Optional[Piece]:
        if self.size is None:
            return None
        return Piece(color=self.color, size=self.size, orientation=self.orientation)


# =============================================================================
# State
# =============================================================================

class GameStateModel(BaseModel):
    """Serializable snapshot of a GameState."""
    board: list[list[CellModel]]
    score: dict[str, Annotated[int, Field(ge=0)]] = Field(
        default_factory=lambda: {color.value: 0 for color in Color}
    )
    turn: int = Field(0, ge=0)
    current_player: Color = Field(Color.RED, alias="currentPlayer")
    starting_player: Color = Field(Color.RED, alias="startingPlayer")
    finished: bool = False

    model_config = {"populate_by_name": True}

    @field_validator("board")
    @classmethod
    def check_board_shape(cls, board):
        if len(board) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in board):
            raise ValueError(f"Board must be {BOARD_SIZE}x{BOARD_SIZE}")
        return board

    @field_validator("score")
    @classmethod
    def check_both_colors(cls, score):
        if set(score) != {color.value for color in Color}:
            raise ValueError("Score must have an entry for both colors")
        return score

    @classmethod
    def from_state(cls, state: GameState) -> "GameStateModel":
        return cls(
            board=[[CellModel.from_piece(cell) for cell in row] for row in state.board],
            score={color.value: points for color, points in state.score.items()},
            turn=state.turn,
            current_player=state.current_player,
            starting_player=state.starting_player,
            finished=state.finished,
        )

    def to_state(self) -> GameState:
        return GameState(
            board=tuple(tuple(cell.to_piece() for cell in row) for row in self.board),
            score={Color(name): points for name, points in self.score.items()},
            turn=self.turn,
            current_player=self.current_player,
            starting_player=self.starting_player,
            finished=self.finished,
        )


# =============================================================================
# Moves
# =============================================================================

class MoveModel(BaseModel):
    """Serializable move."""
    start: CoordModel
    end: CoordModel
    orientation: Orientation

    @classmethod
    def from_move(cls, move: Move) -> "MoveModel":
        return cls(start=move.start, end=move.end, orientation=move.orientation)

    def to_move(self) -> Move:
        return Move(start=self.start, end=self.end, orientation=self.orientation)


class MoveErrorModel(BaseModel):
    """A rejected move, as reported to callers."""
    code: str
    message: str
    context: dict = Field(default_factory=dict)


# =============================================================================
# Helpers
# =============================================================================

def dump_state(state: GameState) -> dict:
    """GameState -> JSON-compatible dict."""
    return GameStateModel.from_state(state).model_dump(mode="json", by_alias=True, exclude_none=True)


def dump_state_json(state: GameState, indent: Optional[int] = None) -> str:
    """GameState -> JSON text."""
    return GameStateModel.from_state(state).model_dump_json(
        by_alias=True, exclude_none=True, indent=indent
    )


def load_state(data: dict) -> GameState:
    """JSON-compatible dict -> GameState."""
    return GameStateModel.model_validate(data).to_state()


def load_state_json(text: str) -> GameState:
    """JSON text -> GameState."""
    return GameStateModel.model_validate_json(text).to_state()


def load_move_json(text: str) -> Move:
    """JSON text -> Move."""
    return MoveModel.model_validate_json(text).to_move()
