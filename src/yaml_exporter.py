# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
YAML exporter for word search puzzles.

Writes a generated puzzle (grid, placements, unplaced words and
generation stats) to the YAML intermediate format.
"""

from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from models import Puzzle


class YAMLExportError(Exception):
    """Raised when YAML export fails."""
    pass


class YAMLExporter:
    """
    Exports word search puzzles to YAML intermediate format.

    Usage:
        exporter = YAMLExporter()
        yaml_str = exporter.export(puzzle, title="Space")
        exporter.save(puzzle, 'output/space_puzzle.yaml', title="Space")
    """

    def build_data(
        self,
        puzzle: Puzzle,
        title: str,
        topic: Optional[str] = None,
        stats: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """Assemble the YAML document as a plain dictionary."""
        data = puzzle.to_dict()
        return {
            'puzzle': {
                'title': title,
                'topic': topic or title,
                'size': puzzle.size,
                'date': datetime.now().strftime("%Y-%m-%d"),
                'word_count': len(puzzle.words),
                'placed_count': len(puzzle.placements),
            },
            'grid': data['grid'],
            'words': data['words'],
            'placements': data['placements'],
            'missing_words': data['missing_words'],
            'stats': dict(stats or {}),
        }

    def export(
        self,
        puzzle: Puzzle,
        title: str,
        topic: Optional[str] = None,
        stats: Optional[Dict[str, Any]] = None
    ) -> str:
        """
        Export puzzle to YAML string.

        Args:
            puzzle: Generated puzzle snapshot
            title: Puzzle title
            topic: Subject the words were drawn from
            stats: Optional generation statistics

        Returns:
            YAML string representation of the puzzle
        """
        data = self.build_data(puzzle, title, topic, stats)

        header = "# Word Search Puzzle Intermediate Format\n"
        header += "# Grid rows are listed top to bottom; placements give the\n"
        header += "# origin (row, col) and direction of every hidden word\n\n"

        try:
            yaml_content = yaml.safe_dump(
                data,
                default_flow_style=False,
                allow_unicode=True,
                sort_keys=False,
                indent=2,
                width=80,
            )
        except yaml.YAMLError as e:
            raise YAMLExportError(f"Could not serialize puzzle: {e}")

        return header + yaml_content

    def save(
        self,
        puzzle: Puzzle,
        path: str,
        title: str,
        topic: Optional[str] = None,
        stats: Optional[Dict[str, Any]] = None
    ) -> str:
        """
        Save puzzle to YAML file.

        Returns:
            Path to saved file
        """
        yaml_content = self.export(puzzle, title, topic, stats)

        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w', encoding='utf-8') as f:
            f.write(yaml_content)

        return str(path)
