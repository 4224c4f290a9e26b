# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Play state for a single word search puzzle.

Tracks which placed words have been found and turns selections into
found / already-found / invalid outcomes.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Set, Tuple

from models import Coordinate, Puzzle
from selection_matcher import SelectionMatcher, selection_from_drag


class SelectionOutcome(Enum):
    FOUND = "found"
    ALREADY_FOUND = "already_found"
    INVALID = "invalid"


@dataclass(frozen=True)
class SelectionResult:
    """Outcome of submitting one selection."""
    outcome: SelectionOutcome
    word: Optional[str] = None
    cells: Tuple[Coordinate, ...] = ()

    @property
    def is_valid(self) -> bool:
        return self.outcome != SelectionOutcome.INVALID


class PuzzleSession:
    """
    One play-through of a puzzle.

    The puzzle snapshot is never modified; new_puzzle() swaps in a fresh
    snapshot and clears progress.

    Usage:
        session = PuzzleSession(puzzle)
        result = session.submit_drag((0, 0), (0, 4))
        if result.outcome is SelectionOutcome.FOUND:
            ...
    """

    def __init__(self, puzzle: Puzzle, logger: Optional[logging.Logger] = None):
        self.logger = logger if logger else logging.getLogger(__name__)
        self.new_puzzle(puzzle)

    def new_puzzle(self, puzzle: Puzzle) -> None:
        """Replace the current puzzle and reset progress."""
        self.puzzle = puzzle
        self.matcher = SelectionMatcher.for_puzzle(puzzle)
        self._found: List[str] = []

    @property
    def found_words(self) -> List[str]:
        """Found words in the order they were found."""
        return list(self._found)

    @property
    def remaining_words(self) -> List[str]:
        return [w for w in self.puzzle.placed_words if w not in self._found]

    @property
    def progress(self) -> Tuple[int, int]:
        return len(self._found), len(self.puzzle.placements)

    def is_solved(self) -> bool:
        return len(self._found) == len(self.puzzle.placements)

    def submit(self, selection: Sequence[Coordinate]) -> SelectionResult:
        """
        Check a selection and record the word if it is newly found.

        Args:
            selection: Ordered cells of the gesture

        Returns:
            SelectionResult describing the outcome
        """
        cells = tuple(tuple(cell) for cell in selection)
        word = self.matcher.match(cells)

        if word is None:
            self.logger.debug(f"Invalid selection: {list(cells)}")
            return SelectionResult(SelectionOutcome.INVALID, cells=cells)

        if word in self._found:
            return SelectionResult(SelectionOutcome.ALREADY_FOUND, word, cells)

        self._found.append(word)
        found, total = self.progress
        self.logger.info(f"Found word: {word} ({found}/{total})")
        return SelectionResult(SelectionOutcome.FOUND, word, cells)

    def submit_drag(self, start: Coordinate, end: Coordinate) -> SelectionResult:
        """Snap a drag gesture to a line and submit it."""
        return self.submit(selection_from_drag(start, end, self.puzzle.size))

    def highlighted_cells(self) -> Set[Coordinate]:
        """Cells covered by any found word."""
        return self.matcher.highlighted_cells(self._found)

    def found_words_at(self, row: int, col: int) -> List[str]:
        """Found words passing through (row, col), for blended highlights."""
        return self.matcher.words_at(row, col, among=self._found)
