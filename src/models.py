# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Data models for the word search generator.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple


Coordinate = Tuple[int, int]

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


class PuzzleFormatError(Exception):
    """Raised when puzzle data is malformed or inconsistent."""
    pass


class Direction(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    DIAGONAL = "diagonal"
    REVERSE_HORIZONTAL = "reverse-horizontal"
    REVERSE_VERTICAL = "reverse-vertical"
    REVERSE_DIAGONAL = "reverse-diagonal"

    @property
    def vector(self) -> Coordinate:
        """Per-step (row, col) offset."""
        return _DIRECTION_VECTORS[self]

    @classmethod
    def from_string(cls, value: str) -> 'Direction':
        """Parse a direction name such as 'reverse-diagonal'."""
        normalized = value.strip().lower().replace("_", "-")
        for direction in cls:
            if direction.value == normalized:
                return direction
        raise ValueError(f"Invalid direction: {value}")


_DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL: (1, 1),
    Direction.REVERSE_HORIZONTAL: (0, -1),
    Direction.REVERSE_VERTICAL: (-1, 0),
    Direction.REVERSE_DIAGONAL: (-1, -1),
}


@dataclass(frozen=True)
class Placement:
    """Where and how a word was written into the grid."""
    word: str
    row: int
    col: int
    direction: Direction

    def cell_at(self, index: int) -> Coordinate:
        """Coordinate of the letter at `index` along the word."""
        d_row, d_col = self.direction.vector
        return (self.row + index * d_row, self.col + index * d_col)

    def cells(self) -> List[Coordinate]:
        """All coordinates covered by this word, origin first."""
        return [self.cell_at(i) for i in range(len(self.word))]

    @property
    def end(self) -> Coordinate:
        return self.cell_at(len(self.word) - 1)

    def contains(self, row: int, col: int) -> bool:
        """Check whether (row, col) lies on this word's line."""
        for i in range(len(self.word)):
            if self.cell_at(i) == (row, col):
                return True
        return False

    def to_dict(self) -> Dict[str, Any]:
        return {
            'word': self.word,
            'row': self.row,
            'col': self.col,
            'direction': self.direction.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Placement':
        try:
            return cls(
                word=str(data['word']).upper(),
                row=int(data['row']),
                col=int(data['col']),
                direction=Direction.from_string(str(data['direction'])),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise PuzzleFormatError(f"Invalid placement {data!r}: {e}")


@dataclass(frozen=True)
class Puzzle:
    """
    Immutable result of one generation: the filled grid plus placements.

    Attributes:
        size: Grid dimension (the grid is size x size)
        grid: Rows of single uppercase letters
        placements: Placed words, in placement order
        words: Cleaned input words, in processing order
    """
    size: int
    grid: Tuple[Tuple[str, ...], ...]
    placements: Tuple[Placement, ...]
    words: Tuple[str, ...] = ()
    _owners: Optional[Mapping[Coordinate, Tuple[Placement, ...]]] = field(
        default=None, init=False, repr=False, compare=False
    )

    def letter_at(self, row: int, col: int) -> str:
        return self.grid[row][col]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    @property
    def placed_words(self) -> List[str]:
        return [p.word for p in self.placements]

    @property
    def missing_words(self) -> List[str]:
        """Input words that could not be placed."""
        placed = set(self.placed_words)
        return [w for w in self.words if w not in placed]

    def is_complete(self) -> bool:
        """True when every input word made it into the grid."""
        return not self.missing_words

    def placement_for(self, word: str) -> Optional[Placement]:
        word = word.upper()
        for placement in self.placements:
            if placement.word == word:
                return placement
        return None

    def cell_owners(self) -> Mapping[Coordinate, Tuple[Placement, ...]]:
        """
        Map each covered coordinate to the placements passing through it.

        Built once on first use; equivalent to walking every placement's
        line for each query.
        """
        if self._owners is None:
            owners: Dict[Coordinate, List[Placement]] = {}
            for placement in self.placements:
                for cell in placement.cells():
                    owners.setdefault(cell, []).append(placement)
            object.__setattr__(self, "_owners", MappingProxyType(
                {cell: tuple(ps) for cell, ps in owners.items()}
            ))
        return self._owners

    def verify(self) -> List[str]:
        """
        Check the grid and placements against each other.

        Returns:
            List of problems (empty if consistent)
        """
        problems = []
        if len(self.grid) != self.size:
            problems.append(f"Grid has {len(self.grid)} rows, expected {self.size}")
        for r, row in enumerate(self.grid):
            if len(row) != self.size:
                problems.append(f"Row {r} has {len(row)} cells, expected {self.size}")
            for c, letter in enumerate(row):
                if len(letter) != 1 or letter not in ALPHABET:
                    problems.append(f"Cell ({r}, {c}) holds invalid letter {letter!r}")
        if problems:
            return problems

        for placement in self.placements:
            for i, (r, c) in enumerate(placement.cells()):
                if not self.in_bounds(r, c):
                    problems.append(f"{placement.word} leaves the grid at ({r}, {c})")
                    break
                if self.grid[r][c] != placement.word[i]:
                    problems.append(
                        f"{placement.word}[{i}] expects '{placement.word[i]}' "
                        f"at ({r}, {c}), grid has '{self.grid[r][c]}'"
                    )
        return problems

    def to_string(self, solution_only: bool = False) -> str:
        """
        Render the grid as text.

        Args:
            solution_only: Replace filler letters with '.'
        """
        owned = self.cell_owners() if solution_only else {}
        lines = []
        for r, row in enumerate(self.grid):
            letters = []
            for c, letter in enumerate(row):
                if solution_only and (r, c) not in owned:
                    letters.append(".")
                else:
                    letters.append(letter)
            lines.append(" ".join(letters))
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'size': self.size,
            'grid': ["".join(row) for row in self.grid],
            'words': list(self.words),
            'placements': [p.to_dict() for p in self.placements],
            'missing_words': self.missing_words,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Puzzle':
        """
        Rebuild a snapshot from its dictionary form.

        Raises:
            PuzzleFormatError: If the data is incomplete or inconsistent
        """
        try:
            rows = data['grid']
            size = int(data.get('size', len(rows)))
        except (KeyError, TypeError, ValueError) as e:
            raise PuzzleFormatError(f"Invalid puzzle data: {e}")

        grid = tuple(tuple(str(row).upper()) for row in rows)
        placements = tuple(
            Placement.from_dict(p) for p in data.get('placements') or []
        )
        words = tuple(str(w).upper() for w in data.get('words') or [])

        puzzle = cls(size=size, grid=grid, placements=placements, words=words)
        problems = puzzle.verify()
        if problems:
            raise PuzzleFormatError(
                "Puzzle data is inconsistent:\n" +
                "\n".join(f"  - {p}" for p in problems)
            )
        return puzzle


def grid_from_rows(rows: Sequence[Sequence[str]]) -> Tuple[Tuple[str, ...], ...]:
    """Freeze a mutable grid into the snapshot representation."""
    return tuple(tuple(row) for row in rows)
