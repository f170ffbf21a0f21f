"""
Visible field module for Minesweeper.

Tracks what the player sees on top of a MineField: guesses, uncovered
squares with their adjacency counts, the flood-fill reveal, and the
end-of-game board transformation.
"""
import logging
from enum import Enum, auto
from typing import List, Tuple

import numpy as np

from .cell import CellStatus, is_guarded, is_hidden
from .mine_field import MineField, OutOfRangeError

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


# ============================================================================
# Visible Field Class
# ============================================================================

class VisibleField:
    """
    Player-visible state of one game.

    Every square starts COVERED. Moves are cycle_guess() and uncover();
    is_game_over() both reports and finalizes the end of the game. The
    wrapped MineField is fixed for the lifetime of this object.
    """

    def __init__(self, mine_field: MineField) -> None:
        """
        Initialize a fully covered display over mine_field.

        Args:
            mine_field: Mine layout this field covers.
        """
        self._mine_field = mine_field
        self._grid = np.full(
            (mine_field.num_rows, mine_field.num_cols),
            CellStatus.COVERED,
            dtype=np.int8,
        )
        self._guess_count = 0

    def reset(self) -> None:
        """Cover every square again and forget all guesses."""
        self._grid.fill(CellStatus.COVERED)
        self._guess_count = 0

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def mine_field(self) -> MineField:
        """Mine field under this display."""
        return self._mine_field

    @property
    def guess_count(self) -> int:
        """Number of squares the player has marked as mines."""
        return self._guess_count

    @property
    def num_mines_left(self) -> int:
        """
        Mines the player has not yet guessed.

        Only a hint for a counter display: it ignores whether guesses are
        right and goes negative once there are more guesses than mines.
        """
        return self._mine_field.num_mines - self._guess_count

    def get_status(self, row: int, col: int) -> int:
        """
        Get the display status of a square.

        Returns:
            -1/-2/-3 for COVERED/MINE_GUESS/QUESTION, 0-8 for an uncovered
            square's adjacent mine count, 9/10/11 for MINE/INCORRECT_GUESS/
            EXPLODED_MINE.

        Raises:
            OutOfRangeError: If (row, col) is not on the field.
        """
        if not self._mine_field.in_range(row, col):
            raise OutOfRangeError(
                row, col, self._mine_field.num_rows, self._mine_field.num_cols
            )
        return int(self._grid[row, col])

    def status_grid(self) -> np.ndarray:
        """
        Get every square's status as an array.

        Returns:
            2D int8 array of the same codes get_status() returns.
        """
        return self._grid.copy()

    def is_uncovered(self, row: int, col: int) -> bool:
        """Check if a square is on the field and no longer hidden."""
        if not self._mine_field.in_range(row, col):
            return False
        return not is_hidden(self._grid[row, col])

    @property
    def game_state(self) -> GameState:
        """Classify the board without finalizing it (see is_game_over)."""
        if self._has_exploded():
            return GameState.LOST
        if self._all_safe_uncovered():
            return GameState.WON
        return GameState.PLAYING

    # ========================================================================
    # Moves
    # ========================================================================

    def cycle_guess(self, row: int, col: int) -> None:
        """
        Step a hidden square through COVERED -> MINE_GUESS -> QUESTION.

        QUESTION goes back to COVERED. Uncovered squares and locations off
        the field are left alone.
        """
        if not self._mine_field.in_range(row, col):
            return

        status = self._grid[row, col]
        if status == CellStatus.COVERED:
            self._grid[row, col] = CellStatus.MINE_GUESS
            self._guess_count += 1
        elif status == CellStatus.MINE_GUESS:
            self._grid[row, col] = CellStatus.QUESTION
            self._guess_count -= 1
        elif status == CellStatus.QUESTION:
            self._grid[row, col] = CellStatus.COVERED

    def uncover(self, row: int, col: int) -> bool:
        """
        Uncover a square.

        A square with no adjacent mines also uncovers its neighbors, and so
        on outward, so one call can open a whole region bounded by numbered
        squares and the field edge. MINE_GUESS squares are never uncovered
        and stop the spread.

        Args:
            row: Row index to uncover.
            col: Column index to uncover.

        Returns:
            False only if (row, col) holds a mine. Locations off the field,
            guessed squares and squares already uncovered are no-ops that
            return True.
        """
        if not self._mine_field.in_range(row, col):
            return True
        if is_guarded(self._grid[row, col]):
            return True

        if self._mine_field.has_mine(row, col):
            self._grid[row, col] = CellStatus.EXPLODED_MINE
            logger.debug("Mine exploded at (%d, %d)", row, col)
            return False

        revealed = self._flood_reveal(row, col)
        logger.debug("Uncovered %d squares from (%d, %d)", revealed, row, col)
        return True

    def _flood_reveal(self, row: int, col: int) -> int:
        """
        Uncover (row, col) and spread through zero-count squares.

        Each square is uncovered before its neighbors are queued, so the
        guard check skips it if it is reached again.

        Returns:
            Number of squares uncovered.
        """
        pending: List[Tuple[int, int]] = [(row, col)]
        revealed = 0
        while pending:
            row, col = pending.pop()
            if is_guarded(self._grid[row, col]):
                continue
            count = self._mine_field.num_adjacent_mines(row, col)
            self._grid[row, col] = count
            revealed += 1
            if count == CellStatus.ZERO:
                pending.extend(self._mine_field.neighbors(row, col))
        return revealed

    # ========================================================================
    # End of Game
    # ========================================================================

    def is_game_over(self) -> bool:
        """
        Check for a win or loss, finalizing the board if the game ended.

        This query mutates the display when it returns True:

        - Loss (a mine was uncovered): unguessed mines become MINE, guesses
          on safe squares become INCORRECT_GUESS, correct guesses stay
          MINE_GUESS and the exploded mine stays EXPLODED_MINE.
        - Win (every safe square uncovered): each COVERED square becomes a
          MINE_GUESS.

        Calling it again after the game ended changes nothing further.

        Returns:
            True if the game is over.
        """
        if self._has_exploded():
            self._reveal_loss()
            return True
        if self._all_safe_uncovered():
            self._reveal_win()
            return True
        return False

    def _has_exploded(self) -> bool:
        return bool(np.any(self._grid == CellStatus.EXPLODED_MINE))

    def _all_safe_uncovered(self) -> bool:
        uncovered = np.count_nonzero(
            (self._grid >= CellStatus.ZERO) & (self._grid < CellStatus.MINE)
        )
        return uncovered == self._mine_field.num_cells - self._mine_field.num_mines

    def _reveal_loss(self) -> None:
        """Show every mine and every wrong guess."""
        mines = self._mine_field.layout
        guessed = self._grid == CellStatus.MINE_GUESS
        exploded = self._grid == CellStatus.EXPLODED_MINE

        wrong_guesses = guessed & ~mines
        unguessed_mines = mines & ~guessed & ~exploded
        logger.debug(
            "Game lost: %d unguessed mines, %d incorrect guesses",
            np.count_nonzero(unguessed_mines),
            np.count_nonzero(wrong_guesses),
        )
        self._grid[wrong_guesses] = CellStatus.INCORRECT_GUESS
        self._grid[unguessed_mines] = CellStatus.MINE

    def _reveal_win(self) -> None:
        """Flag every square still covered."""
        covered = self._grid == CellStatus.COVERED
        flagged = int(np.count_nonzero(covered))
        if flagged:
            logger.debug("Game won: auto-flagging %d squares", flagged)
        self._grid[covered] = CellStatus.MINE_GUESS
        self._guess_count += flagged

    def __repr__(self) -> str:
        return (
            f"VisibleField(rows={self._mine_field.num_rows}, "
            f"cols={self._mine_field.num_cols}, guesses={self._guess_count})"
        )
