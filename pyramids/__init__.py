"""
Pyramids - Rules engine for a two-player pyramid strategy game.

A deterministic engine for an 8x8 board of oriented pyramids. It provides:
- Immutable game state
- Move validation with typed rejections
- State transitions (movement, capture, scoring, win detection)
- Legal move generation
- A JSON snapshot format
"""

__version__ = "0.1.0"
