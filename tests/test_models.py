# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""Unit tests for models module."""

import os
import sys
import unittest
from dataclasses import FrozenInstanceError

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from models import Direction, Placement, Puzzle, PuzzleFormatError, grid_from_rows


def sample_puzzle():
    """4x4 puzzle with CAT across the top and XAB down the last column."""
    rows = [
        "CATX",
        "QQQA",
        "QQQB",
        "QQQQ",
    ]
    return Puzzle(
        size=4,
        grid=grid_from_rows(rows),
        placements=(
            Placement("CAT", 0, 0, Direction.HORIZONTAL),
            Placement("XAB", 0, 3, Direction.VERTICAL),
        ),
        words=("CAT", "XAB", "OWL"),
    )


class TestDirection(unittest.TestCase):
    """Tests for Direction enum."""

    def test_vectors(self):
        self.assertEqual(Direction.HORIZONTAL.vector, (0, 1))
        self.assertEqual(Direction.VERTICAL.vector, (1, 0))
        self.assertEqual(Direction.DIAGONAL.vector, (1, 1))
        self.assertEqual(Direction.REVERSE_HORIZONTAL.vector, (0, -1))
        self.assertEqual(Direction.REVERSE_VERTICAL.vector, (-1, 0))
        self.assertEqual(Direction.REVERSE_DIAGONAL.vector, (-1, -1))

    def test_six_directions(self):
        self.assertEqual(len(list(Direction)), 6)

    def test_from_string(self):
        self.assertEqual(Direction.from_string("reverse-diagonal"),
                         Direction.REVERSE_DIAGONAL)
        self.assertEqual(Direction.from_string("REVERSE_VERTICAL"),
                         Direction.REVERSE_VERTICAL)
        self.assertEqual(Direction.from_string(" Horizontal "), Direction.HORIZONTAL)

    def test_from_string_invalid(self):
        with self.assertRaises(ValueError):
            Direction.from_string("anti-diagonal")


class TestPlacement(unittest.TestCase):
    """Tests for Placement."""

    def test_cells_forward(self):
        p = Placement("CAT", 2, 1, Direction.DIAGONAL)
        self.assertEqual(p.cells(), [(2, 1), (3, 2), (4, 3)])
        self.assertEqual(p.end, (4, 3))

    def test_cells_reverse(self):
        p = Placement("CAT", 2, 2, Direction.REVERSE_HORIZONTAL)
        self.assertEqual(p.cells(), [(2, 2), (2, 1), (2, 0)])

    def test_contains(self):
        p = Placement("CAT", 0, 0, Direction.VERTICAL)
        self.assertTrue(p.contains(2, 0))
        self.assertFalse(p.contains(3, 0))
        self.assertFalse(p.contains(0, 1))

    def test_dict_form(self):
        p = Placement("CAT", 1, 2, Direction.REVERSE_VERTICAL)
        data = p.to_dict()
        self.assertEqual(data['direction'], "reverse-vertical")
        self.assertEqual(Placement.from_dict(data), p)

    def test_from_dict_missing_key(self):
        with self.assertRaises(PuzzleFormatError):
            Placement.from_dict({'word': "CAT", 'row': 0})

    def test_from_dict_bad_direction(self):
        with self.assertRaises(PuzzleFormatError):
            Placement.from_dict(
                {'word': "CAT", 'row': 0, 'col': 0, 'direction': "sideways"}
            )


class TestPuzzle(unittest.TestCase):
    """Tests for Puzzle snapshot."""

    def setUp(self):
        self.puzzle = sample_puzzle()

    def test_verify_consistent(self):
        self.assertEqual(self.puzzle.verify(), [])

    def test_verify_letter_mismatch(self):
        bad = Puzzle(
            size=4,
            grid=self.puzzle.grid,
            placements=(Placement("DOG", 3, 0, Direction.HORIZONTAL),),
        )
        problems = bad.verify()
        self.assertEqual(len(problems), 3)
        self.assertIn("DOG", problems[0])

    def test_verify_out_of_bounds(self):
        bad = Puzzle(
            size=4,
            grid=self.puzzle.grid,
            placements=(Placement("CATS", 0, 1, Direction.HORIZONTAL),),
        )
        self.assertTrue(any("leaves the grid" in p for p in bad.verify()))

    def test_verify_bad_shape(self):
        bad = Puzzle(size=4, grid=grid_from_rows(["CAT", "DOG"]), placements=())
        self.assertTrue(bad.verify())

    def test_verify_bad_letter(self):
        bad = Puzzle(size=2, grid=grid_from_rows(["A1", "BC"]), placements=())
        self.assertEqual(len(bad.verify()), 1)

    def test_missing_words(self):
        self.assertEqual(self.puzzle.placed_words, ["CAT", "XAB"])
        self.assertEqual(self.puzzle.missing_words, ["OWL"])
        self.assertFalse(self.puzzle.is_complete())

    def test_placement_for(self):
        self.assertEqual(self.puzzle.placement_for("cat").row, 0)
        self.assertIsNone(self.puzzle.placement_for("OWL"))

    def test_cell_owners(self):
        owners = self.puzzle.cell_owners()
        self.assertEqual([p.word for p in owners[(0, 0)]], ["CAT"])
        self.assertEqual([p.word for p in owners[(2, 3)]], ["XAB"])
        self.assertNotIn((3, 3), owners)

    def test_cell_owners_is_read_only(self):
        owners = self.puzzle.cell_owners()
        with self.assertRaises(TypeError):
            owners[(3, 3)] = ()
        self.assertNotIn((3, 3), self.puzzle.cell_owners())

    def test_cell_owners_built_once_when_empty(self):
        empty = Puzzle(size=2, grid=grid_from_rows(["AB", "CD"]), placements=())
        self.assertEqual(len(empty.cell_owners()), 0)
        self.assertIs(empty.cell_owners(), empty.cell_owners())

    def test_to_string(self):
        self.assertEqual(self.puzzle.to_string().splitlines()[0], "C A T X")
        solution = self.puzzle.to_string(solution_only=True).splitlines()
        self.assertEqual(solution[1], ". . . A")
        self.assertEqual(solution[3], ". . . .")

    def test_dict_round_trip(self):
        data = self.puzzle.to_dict()
        self.assertEqual(data['grid'][0], "CATX")
        self.assertEqual(data['missing_words'], ["OWL"])

        restored = Puzzle.from_dict(data)
        self.assertEqual(restored, self.puzzle)

    def test_from_dict_without_grid(self):
        with self.assertRaises(PuzzleFormatError):
            Puzzle.from_dict({'size': 4})

    def test_from_dict_inconsistent(self):
        data = self.puzzle.to_dict()
        data['grid'][0] = "DOGX"
        with self.assertRaises(PuzzleFormatError):
            Puzzle.from_dict(data)

    def test_snapshot_is_frozen(self):
        with self.assertRaises(FrozenInstanceError):
            self.puzzle.size = 5


if __name__ == '__main__':
    unittest.main()
