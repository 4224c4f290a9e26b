# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Word search grid placement.

Places words along random straight lines in a square grid:
- Longest words first, while the grid is still open
- Bounded random retries per word (abandoned if no fit is found)
- Crossing allowed where letters agree
- Remaining cells filled with random letters
"""

import logging
import random
import re
from typing import List, Optional, Sequence, Tuple

from models import (
    ALPHABET, Direction, Placement, Puzzle, grid_from_rows
)


DEFAULT_SIZE = 15
DEFAULT_MAX_ATTEMPTS = 200

_NON_LETTERS = re.compile(r"[^A-Z]")


def clean_words(words: Sequence[str], size: int) -> List[str]:
    """
    Normalize input words for placement.

    Uppercases, strips everything but A-Z, and drops words that end up
    empty or longer than the grid. Exact duplicates keep their first
    occurrence only.

    Args:
        words: Raw input words
        size: Grid dimension

    Returns:
        Cleaned words in input order
    """
    logger = logging.getLogger(__name__)
    cleaned = []
    seen = set()

    for raw in words:
        word = _NON_LETTERS.sub("", str(raw).upper())
        if not word:
            logger.warning(f"Skipping word with no letters: {raw!r}")
            continue
        if len(word) > size:
            logger.warning(f"Skipping {word}: longer than grid size {size}")
            continue
        if word in seen:
            logger.warning(f"Skipping duplicate word: {word}")
            continue
        seen.add(word)
        cleaned.append(word)

    return cleaned


class PuzzleGenerator:
    """
    Randomized word search generator.

    Each word gets up to `max_attempts` random (direction, origin) draws.
    The first feasible draw is committed; a word with no feasible draw is
    left out and the rest of the puzzle is still built.

    Usage:
        generator = PuzzleGenerator(size=15)
        puzzle = generator.generate(["BLOCK", "CHAIN", "LEDGER"])
        if not puzzle.is_complete():
            print(puzzle.missing_words)
    """

    directions: Tuple[Direction, ...] = tuple(Direction)

    def __init__(
        self,
        size: int = DEFAULT_SIZE,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the generator.

        Args:
            size: Grid dimension
            max_attempts: Random draws allowed per word
            seed: Optional seed for reproducible puzzles
            rng: Optional Random instance (takes precedence over seed)
            logger: Logger instance (uses module logger if not provided)
        """
        if size < 1:
            raise ValueError(f"Grid size must be positive, got {size}")
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be positive, got {max_attempts}")

        self.size = size
        self.max_attempts = max_attempts
        self.rng = rng or random.Random(seed)
        self.logger = logger if logger else logging.getLogger(__name__)

        self.grid: List[List[str]] = self._empty_grid()
        self.placements: List[Placement] = []

        self.stats = {
            "attempts": 0,
            "placed": 0,
            "abandoned": 0,
        }

    def _empty_grid(self) -> List[List[str]]:
        return [['' for _ in range(self.size)] for _ in range(self.size)]

    def can_place_word(
        self,
        word: str,
        row: int,
        col: int,
        direction: Direction
    ) -> bool:
        """
        Check whether `word` fits at (row, col) going `direction`.

        Every letter must land in bounds on an empty cell or on a cell
        already holding the same letter. A line that exactly covers an
        existing placement is refused.
        """
        d_row, d_col = direction.vector
        cells = set()

        for i, letter in enumerate(word):
            r = row + i * d_row
            c = col + i * d_col

            if r < 0 or r >= self.size or c < 0 or c >= self.size:
                return False

            existing = self.grid[r][c]
            if existing and existing != letter:
                return False
            cells.add((r, c))

        for placement in self.placements:
            if len(placement.word) == len(word) and set(placement.cells()) == cells:
                return False

        return True

    def place_word(
        self,
        word: str,
        row: int,
        col: int,
        direction: Direction
    ) -> Placement:
        """Write `word` into the grid and record its placement."""
        placement = Placement(word=word, row=row, col=col, direction=direction)
        for i, (r, c) in enumerate(placement.cells()):
            self.grid[r][c] = word[i]

        self.placements.append(placement)
        return placement

    def _try_place(self, word: str) -> Optional[Placement]:
        for attempt in range(1, self.max_attempts + 1):
            direction = self.rng.choice(self.directions)
            row = self.rng.randrange(self.size)
            col = self.rng.randrange(self.size)
            self.stats["attempts"] += 1

            if self.can_place_word(word, row, col, direction):
                placement = self.place_word(word, row, col, direction)
                self.logger.debug(
                    f"Placed word {word} at {row},{col} going "
                    f"{direction.value} (attempt {attempt})"
                )
                return placement

        return None

    def _fill_empty_cells(self) -> int:
        filled = 0
        for r in range(self.size):
            for c in range(self.size):
                if not self.grid[r][c]:
                    self.grid[r][c] = self.rng.choice(ALPHABET)
                    filled += 1
        return filled

    def generate(self, words: Sequence[str]) -> Puzzle:
        """
        Generate a new puzzle from a word list.

        Args:
            words: Candidate words (uppercase A-Z expected; other
                   characters are stripped)

        Returns:
            Puzzle snapshot; its placements may be fewer than the words
        """
        # Clear any previous state
        self.grid = self._empty_grid()
        self.placements = []
        self.stats = {"attempts": 0, "placed": 0, "abandoned": 0}

        cleaned = clean_words(words, self.size)
        sorted_words = sorted(cleaned, key=len, reverse=True)
        self.logger.debug(f"Attempting to place words: {sorted_words}")

        for word in sorted_words:
            if self._try_place(word):
                self.stats["placed"] += 1
            else:
                self.stats["abandoned"] += 1
                self.logger.warning(
                    f"Could not place word: {word} "
                    f"(gave up after {self.max_attempts} attempts)"
                )

        filler = self._fill_empty_cells()
        self.logger.debug(f"Filled {filler} empty cells with random letters")
        self.logger.debug(f"Final placements: {[p.to_dict() for p in self.placements]}")

        puzzle = Puzzle(
            size=self.size,
            grid=grid_from_rows(self.grid),
            placements=tuple(self.placements),
            words=tuple(sorted_words),
        )
        self.logger.debug("Final grid:\n" + puzzle.to_string())
        return puzzle

    def generate_puzzle(
        self,
        words: Sequence[str]
    ) -> Tuple[List[List[str]], List[Placement]]:
        """Tuple form of generate(): (grid rows, placements)."""
        puzzle = self.generate(words)
        return [list(row) for row in puzzle.grid], list(puzzle.placements)
