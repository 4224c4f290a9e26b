# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Selection matching for word search puzzles.

Maps a dragged line of cells back to the placed word it spells, and
answers which cells belong to a placed word for highlighting.
"""

import logging
from typing import Iterable, List, Optional, Sequence, Set

from models import Coordinate, Placement, Puzzle


def selection_from_drag(
    start: Coordinate,
    end: Coordinate,
    size: int
) -> List[Coordinate]:
    """
    Snap a drag gesture to a straight line of cells.

    The line takes max(|drow|, |dcol|) steps from `start`, moving one unit
    per step along each axis whose delta is non-zero. Cells outside the
    grid are dropped.

    Args:
        start: Cell where the drag began
        end: Cell currently under the pointer
        size: Grid dimension

    Returns:
        Ordered cells, starting with `start`
    """
    start_row, start_col = start
    row_diff = end[0] - start_row
    col_diff = end[1] - start_col

    steps = max(abs(row_diff), abs(col_diff))
    row_step = (row_diff > 0) - (row_diff < 0)
    col_step = (col_diff > 0) - (col_diff < 0)

    cells = [start]
    for i in range(1, steps + 1):
        r = start_row + row_step * i
        c = start_col + col_step * i
        if 0 <= r < size and 0 <= c < size:
            cells.append((r, c))
    return cells


def is_part_of_word(placement: Placement, row: int, col: int) -> bool:
    """Check whether (row, col) lies on the placement's line."""
    return placement.contains(row, col)


class SelectionMatcher:
    """
    Validates selections against a puzzle's placements.

    A selection matches a placement when its letters spell the word
    (forward or reversed) and every selected cell sits exactly where the
    placement puts that letter. The first placement in placement order
    that satisfies both wins.
    """

    def __init__(
        self,
        grid: Sequence[Sequence[str]],
        placements: Sequence[Placement],
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the matcher.

        Args:
            grid: Filled letter grid
            placements: Placements from the same generation
            logger: Logger instance (uses module logger if not provided)
        """
        self.grid = grid
        self.placements = list(placements)
        self.size = len(grid)
        self.logger = logger if logger else logging.getLogger(__name__)

    @classmethod
    def for_puzzle(cls, puzzle: Puzzle) -> 'SelectionMatcher':
        return cls(puzzle.grid, puzzle.placements)

    def selected_letters(self, selection: Sequence[Coordinate]) -> str:
        return "".join(self.grid[r][c] for r, c in selection).upper()

    def _in_bounds(self, selection: Sequence[Coordinate]) -> bool:
        for r, c in selection:
            if not (0 <= r < self.size and 0 <= c < len(self.grid[r])):
                return False
        return True

    def _follows_line(
        self,
        selection: Sequence[Coordinate],
        placement: Placement,
        reverse: bool
    ) -> bool:
        length = len(placement.word)
        for index, cell in enumerate(selection):
            expected_index = length - 1 - index if reverse else index
            if tuple(cell) != placement.cell_at(expected_index):
                return False
        return True

    def match_placement(
        self,
        selection: Sequence[Coordinate]
    ) -> Optional[Placement]:
        """
        Find the placement a selection corresponds to.

        Args:
            selection: Ordered cells, at least two

        Returns:
            Matching Placement, or None for an invalid selection
        """
        if len(selection) < 2 or not self._in_bounds(selection):
            return None

        selected = self.selected_letters(selection)
        reversed_selected = selected[::-1]
        self.logger.debug(f"Selected word: {selected}")

        for placement in self.placements:
            placed_word = placement.word.upper()

            if placed_word == selected and self._follows_line(
                selection, placement, reverse=False
            ):
                return placement
            if placed_word == reversed_selected and self._follows_line(
                selection, placement, reverse=True
            ):
                return placement

        self.logger.debug("No matching placement found")
        return None

    def match(self, selection: Sequence[Coordinate]) -> Optional[str]:
        """Return the placed word a selection spells, or None."""
        placement = self.match_placement(selection)
        return placement.word if placement else None

    def cells_for_word(self, word: str) -> Set[Coordinate]:
        """Cells covered by the first placement of `word`."""
        word = word.upper()
        for placement in self.placements:
            if placement.word == word:
                return set(placement.cells())
        return set()

    def highlighted_cells(self, found_words: Iterable[str]) -> Set[Coordinate]:
        """Union of the cells of every found word."""
        cells: Set[Coordinate] = set()
        for word in found_words:
            cells |= self.cells_for_word(word)
        return cells

    def words_at(
        self,
        row: int,
        col: int,
        among: Optional[Iterable[str]] = None
    ) -> List[str]:
        """
        Placed words whose line passes through (row, col).

        Args:
            row: Cell row
            col: Cell column
            among: Optional subset of words to consider (e.g. found words)
        """
        allowed = {w.upper() for w in among} if among is not None else None
        return [
            p.word for p in self.placements
            if (allowed is None or p.word in allowed)
            and is_part_of_word(p, row, col)
        ]


def match_selection(
    selection: Sequence[Coordinate],
    puzzle: Puzzle
) -> Optional[str]:
    """Match a selection against a puzzle snapshot."""
    return SelectionMatcher.for_puzzle(puzzle).match(selection)
