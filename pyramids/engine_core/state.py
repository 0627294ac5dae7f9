"""
Game State - Immutable snapshot of a pyramids game.

Design principles:
- Immutable: all mutations return new state
- Serializable: can be dumped to/loaded from JSON (see pyramids.schemas)
- Structural sharing: rows untouched by a move are reused, never copied
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from ..config import BOARD_SIZE, MIN_PIECE_SIZE, MAX_PIECE_SIZE


Coord = tuple[int, int]


class Color(Enum):
    """The two sides."""
    RED = "red"
    BLUE = "blue"

    @property
    def opponent(self) -> Color:
        return Color.BLUE if self is Color.RED else Color.RED


class Orientation(Enum):
    """Where the apex of a pyramid points."""
    N = "N"
    NE = "NE"
    E = "E"
    SE = "SE"
    S = "S"
    SW = "SW"
    W = "W"
    NW = "NW"
    UP = "UP"  # Standing vertically - can only re-orient


def on_board(coord: Coord) -> bool:
    x, y = coord
    return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE


@dataclass(frozen=True)
class Piece:
    """A pyramid standing on a cell."""
    color: Color
    size: int
    orientation: Orientation

    def __post_init__(self):
        if not MIN_PIECE_SIZE <= self.size <= MAX_PIECE_SIZE:
            raise ValueError(
                f"Piece size must be {MIN_PIECE_SIZE}-{MAX_PIECE_SIZE}, got {self.size}"
            )

    def reoriented(self, orientation: Orientation) -> Piece:
        """Return the same pyramid pointing somewhere else."""
        return Piece(color=self.color, size=self.size, orientation=orientation)

    def __str__(self) -> str:
        return f"{self.color.value}'s {self.size} (oriented {self.orientation.value})"


# A cell is either empty (None) or holds exactly one piece
Cell = Piece | None
Row = tuple[Cell, ...]
Board = tuple[Row, ...]


def empty_board() -> Board:
    """Create an 8x8 board with no pieces."""
    row: Row = (None,) * BOARD_SIZE
    return (row,) * BOARD_SIZE


def _fresh_score() -> dict[Color, int]:
    return {Color.RED: 0, Color.BLUE: 0}


@dataclass(frozen=True)
class GameState:
    """
    Complete game state at a point in time.

    This is the canonical state that the engine operates on.
    All state changes go through the reducer, which always
    returns a new GameState and leaves its input untouched.
    """
    board: Board = field(default_factory=empty_board)
    score: Mapping[Color, int] = field(default_factory=_fresh_score)
    turn: int = 0
    current_player: Color = Color.RED
    starting_player: Color = Color.RED
    finished: bool = False

    def __post_init__(self):
        if len(self.board) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in self.board):
            raise ValueError(f"Board must be {BOARD_SIZE}x{BOARD_SIZE}")
        if set(self.score) != set(Color):
            raise ValueError("Score must have an entry for both colors")
        if any(points < 0 for points in self.score.values()):
            raise ValueError("Scores cannot be negative")
        # Own a private, read-only copy so nothing can change the snapshot later
        object.__setattr__(self, "board", tuple(tuple(row) for row in self.board))
        object.__setattr__(self, "score", MappingProxyType(dict(self.score)))

    def __hash__(self):
        score = tuple(self.score[color] for color in Color)
        return hash((self.board, score, self.turn, self.current_player, self.starting_player, self.finished))

    @classmethod
    def new(
        cls,
        pieces: Mapping[Coord, Piece] | None = None,
        starting_player: Color = Color.RED,
    ) -> GameState:
        """Create a fresh game with the given pieces placed."""
        rows = [list(row) for row in empty_board()]
        for coord, piece in (pieces or {}).items():
            if not on_board(coord):
                raise ValueError(f"{coord} is off the board")
            x, y = coord
            rows[x][y] = piece
        return cls(
            board=tuple(tuple(row) for row in rows),
            current_player=starting_player,
            starting_player=starting_player,
        )

    @property
    def is_terminal(self) -> bool:
        return self.finished

    def piece_at(self, coord: Coord) -> Cell:
        """Get the piece on a cell (None if empty)."""
        x, y = coord
        return self.board[x][y]

    def pieces(self, color: Color | None = None) -> list[tuple[Coord, Piece]]:
        """All pieces on the board, optionally filtered by color."""
        found = []
        for x, row in enumerate(self.board):
            for y, piece in enumerate(row):
                if piece is not None and (color is None or piece.color == color):
                    found.append(((x, y), piece))
        return found

    def with_piece(self, coord: Coord, piece: Cell) -> GameState:
        """Return new state with a single cell replaced."""
        x, y = coord
        row = self.board[x]
        new_row = row[:y] + (piece,) + row[y + 1:]
        new_board = self.board[:x] + (new_row,) + self.board[x + 1:]
        return self._copy_with(board=new_board)

    def _copy_with(self, **kwargs) -> GameState:
        """Create a copy with some fields replaced."""
        return GameState(
            board=kwargs.get("board", self.board),
            score=kwargs.get("score", self.score),
            turn=kwargs.get("turn", self.turn),
            current_player=kwargs.get("current_player", self.current_player),
            starting_player=kwargs.get("starting_player", self.starting_player),
            finished=kwargs.get("finished", self.finished),
        )
