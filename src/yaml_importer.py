# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
YAML importer for word search puzzles.

Loads puzzles saved in the YAML intermediate format so they can be
replayed or re-rendered without regenerating the grid.
"""

from pathlib import Path
from typing import Any, Dict

import yaml

from models import Puzzle, PuzzleFormatError


class YAMLImportError(Exception):
    """Raised when YAML import fails."""
    pass


class YAMLImporter:
    """
    Imports word search puzzles from YAML intermediate format.

    Usage:
        importer = YAMLImporter()
        puzzle = importer.load('puzzle.yaml')
    """

    def load(self, path: str) -> Puzzle:
        """
        Load puzzle from YAML file.

        Args:
            path: Path to YAML file

        Returns:
            Puzzle snapshot

        Raises:
            YAMLImportError: If file doesn't exist or is invalid
        """
        path = Path(path)

        if not path.exists():
            raise YAMLImportError(f"Puzzle file not found: {path}")

        with open(path, 'r', encoding='utf-8') as f:
            return self.loads(f.read())

    def loads(self, text: str) -> Puzzle:
        """Parse a puzzle from a YAML string."""
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise YAMLImportError(f"Invalid YAML in puzzle file: {e}")

        if not isinstance(data, dict):
            raise YAMLImportError(
                f"Puzzle file must contain a YAML mapping, got {type(data)}"
            )

        return self.from_data(data)

    def from_data(self, data: Dict[str, Any]) -> Puzzle:
        """Build a Puzzle from a parsed YAML document."""
        meta = data.get('puzzle') or {}
        payload = {
            'grid': data.get('grid'),
            'words': data.get('words'),
            'placements': data.get('placements'),
        }
        if payload['grid'] is None:
            raise YAMLImportError("Puzzle file has no 'grid' section")
        if 'size' in meta:
            payload['size'] = meta['size']

        try:
            return Puzzle.from_dict(payload)
        except PuzzleFormatError as e:
            raise YAMLImportError(str(e))
