"""
Cell status module for Minesweeper.

Defines the integer codes a renderer receives for each square of the
visible field, plus small predicates over those codes.
"""
from enum import IntEnum


# ============================================================================
# Constants
# ============================================================================

class CellStatus(IntEnum):
    """
    Display status of one square.

    Hidden states are negative, revealed squares carry their adjacent
    mine count (0-8), and the terminal states shown at the end of a lost
    game sit above 8. The values are fixed so renderers can rely on them.
    """

    # Hidden
    COVERED = -1
    MINE_GUESS = -2
    QUESTION = -3

    # Revealed; 1-8 are plain adjacency counts
    ZERO = 0

    # Terminal (end of a lost game)
    MINE = 9
    INCORRECT_GUESS = 10
    EXPLODED_MINE = 11


MAX_ADJACENT = 8


# ============================================================================
# Status Predicates
# ============================================================================

def is_hidden(status: int) -> bool:
    """Check if status is covered, guessed or questioned."""
    return status < CellStatus.ZERO


def is_revealed(status: int) -> bool:
    """Check if status is an uncovered adjacency count (0-8)."""
    return CellStatus.ZERO <= status <= MAX_ADJACENT


def is_guarded(status: int) -> bool:
    """
    Check if status blocks uncovering.

    Only COVERED and QUESTION squares may be uncovered; a MINE_GUESS
    protects its square, and anything revealed is already final.
    """
    return status not in (CellStatus.COVERED, CellStatus.QUESTION)
