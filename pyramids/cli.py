"""
Pyramids CLI - Command-line interface for the rules engine.

Usage:
    pyramids move <state_file> --start X,Y --end X,Y --orientation O
                                        Apply a move, print the new state
    pyramids moves <state_file>         List the legal moves
    pyramids demo                       Play the sample capture and print both states

State files hold the JSON snapshot described in pyramids.schemas;
"-" reads the snapshot from stdin.
"""

import argparse
import sys

from pydantic import ValidationError

from .config import LOG_LEVELS, configure_logging
from .engine_core import Color, GameState, Move, Orientation, Piece, apply_move, legal_moves
from .schemas import MoveErrorModel, MoveModel, dump_state_json, load_state_json


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Pyramids - rules engine for the 8x8 pyramid game",
        prog="pyramids",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: $PYRAMIDS_LOG_LEVEL)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Move command
    move_parser = subparsers.add_parser("move", help="Apply a move to a state")
    move_parser.add_argument("state_file", help="Path to state JSON ('-' for stdin)")
    move_parser.add_argument("--start", required=True, type=parse_coord, help="Origin as X,Y")
    move_parser.add_argument("--end", required=True, type=parse_coord, help="Destination as X,Y")
    move_parser.add_argument(
        "--orientation", "-o",
        required=True,
        choices=[o.value for o in Orientation],
        help="Orientation after the move",
    )
    move_parser.add_argument("--indent", type=int, default=None, help="Pretty-print JSON")

    # Moves command
    moves_parser = subparsers.add_parser("moves", help="List legal moves for the player to move")
    moves_parser.add_argument("state_file", help="Path to state JSON ('-' for stdin)")

    # Demo command
    subparsers.add_parser("demo", help="Play the sample capture")

    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.command == "move":
        return cmd_move(args)
    elif args.command == "moves":
        return cmd_moves(args)
    elif args.command == "demo":
        return cmd_demo(args)
    else:
        parser.print_help()
        return 1


def parse_coord(text: str) -> tuple[int, int]:
    """Parse 'X,Y' into a coordinate."""
    try:
        x, y = (int(part) for part in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected X,Y but got {text!r}")
    return x, y


def read_state(path: str) -> GameState:
    if path == "-":
        return load_state_json(sys.stdin.read())
    with open(path, "r", encoding="utf-8") as f:
        return load_state_json(f.read())


def cmd_move(args):
    """Apply a move and print the resulting state."""
    try:
        state = read_state(args.state_file)
        move = MoveModel(start=args.start, end=args.end, orientation=args.orientation).to_move()
    except FileNotFoundError:
        print(f"Error: File not found: {args.state_file}")
        return 1
    except ValidationError as e:
        print(f"Error: Invalid input: {e}")
        return 1

    result = apply_move(state, move)
    if not result.success:
        error = MoveErrorModel(code=result.error_code, message=result.error, context=result.error_context)
        print(error.model_dump_json())
        return 1

    print(dump_state_json(result.new_state, indent=args.indent))
    return 0


def cmd_moves(args):
    """List legal moves."""
    try:
        state = read_state(args.state_file)
    except FileNotFoundError:
        print(f"Error: File not found: {args.state_file}")
        return 1
    except ValidationError as e:
        print(f"Error: Invalid input: {e}")
        return 1

    for move in legal_moves(state):
        print(MoveModel.from_move(move).model_dump_json())
    return 0


def demo_state() -> GameState:
    """A red 3 facing a blue 3 down the same line."""
    return GameState.new(
        {
            (3, 2): Piece(color=Color.RED, size=3, orientation=Orientation.E),
            (7, 2): Piece(color=Color.BLUE, size=3, orientation=Orientation.SW),
        },
        starting_player=Color.RED,
    )


def cmd_demo(args):
    """Print the demo state and the state after red captures."""
    state = demo_state()
    print(dump_state_json(state))

    result = apply_move(state, Move(start=(3, 2), end=(7, 2), orientation=Orientation.N))
    for change in result.state_changes:
        print(f"# {change}")
    print(dump_state_json(result.new_state))
    return 0


if __name__ == "__main__":
    sys.exit(main())
