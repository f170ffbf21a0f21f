"""
Minesweeper core module.

Provides the hidden mine layout and the player-visible field state.
"""
from .cell import CellStatus, is_guarded, is_hidden, is_revealed
from .mine_field import (
    FieldConfig,
    InvalidConfigurationError,
    MineField,
    MinesweeperError,
    OutOfRangeError,
    mine_field_from_strings,
)
from .visible_field import GameState, VisibleField

__all__ = [
    "CellStatus",
    "is_guarded",
    "is_hidden",
    "is_revealed",
    "FieldConfig",
    "InvalidConfigurationError",
    "MineField",
    "MinesweeperError",
    "OutOfRangeError",
    "mine_field_from_strings",
    "GameState",
    "VisibleField",
]
