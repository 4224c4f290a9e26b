# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
SVG Renderer for word search puzzles.
Draws the letter grid, the word list, and highlighted words.
"""

import re
from html import escape
from typing import Dict, Iterable, List, Optional, Tuple
from dataclasses import dataclass, field

from models import Coordinate, Puzzle
from selection_matcher import SelectionMatcher


# One color per word, cycled when there are more words than colors
HIGHLIGHT_COLORS = [
    "#BBF7D0",  # green
    "#99F6E4",  # teal
    "#A5F3FC",  # cyan
    "#BAE6FD",  # sky
    "#BFDBFE",  # blue
    "#C7D2FE",  # indigo
    "#DDD6FE",  # violet
    "#E9D5FF",  # purple
    "#F5D0FE",  # fuchsia
    "#FBCFE8",  # pink
]


@dataclass
class SVGConfig:
    """Configuration for SVG rendering."""
    cell_size: int = 40
    border_width: int = 2
    padding: int = 40

    # Colors
    background_color: str = "#FFFFFF"
    grid_background: str = "#F3F4F6"
    cell_color: str = "#FFFFFF"
    grid_color: str = "#E5E7EB"
    letter_color: str = "#000000"
    highlight_colors: List[str] = field(default_factory=lambda: list(HIGHLIGHT_COLORS))
    highlight_opacity: float = 0.85

    # Fonts
    font_family: str = "Arial, Helvetica, sans-serif"
    title_font_size: int = 20
    letter_font_size: int = 20
    word_font_size: int = 14

    # Word list
    words_per_row: int = 5
    word_row_height: int = 28


def make_title(subject: str) -> str:
    """
    Build the heading shown above the grid.

    'blockchainBasics' and 'space_travel' become
    'Search for words related to Blockchain Basics' / 'Space Travel'.
    """
    formatted = re.sub(r'([A-Z])', r' \1', subject)
    formatted = formatted.replace('_', ' ').lower().strip()
    title_case = ' '.join(w.capitalize() for w in formatted.split())
    return f"Search for words related to {title_case}"


class SVGRenderer:
    """Renders word search puzzles as SVG."""

    def __init__(self, config: Optional[SVGConfig] = None):
        self.config = config or SVGConfig()

    def _word_colors(self, puzzle: Puzzle) -> Dict[str, str]:
        colors = self.config.highlight_colors
        return {
            word: colors[i % len(colors)]
            for i, word in enumerate(puzzle.placed_words)
        }

    def render(
        self,
        puzzle: Puzzle,
        title: str = "Word Search",
        highlight_words: Optional[Iterable[str]] = None,
        word_list: Optional[List[str]] = None
    ) -> str:
        """
        Render SVG from a puzzle.

        Args:
            puzzle: Puzzle snapshot
            title: Heading text
            highlight_words: Words to highlight (e.g. found words); None
                             highlights nothing
            word_list: Words listed under the title (defaults to the
                       placed words)

        Returns:
            SVG string
        """
        cfg = self.config
        matcher = SelectionMatcher.for_puzzle(puzzle)
        words = word_list if word_list is not None else puzzle.placed_words
        highlighted = [w.upper() for w in highlight_words or []]
        colors = self._word_colors(puzzle)

        grid_px = puzzle.size * cfg.cell_size
        word_rows = max(1, -(-len(words) // cfg.words_per_row))
        word_list_height = word_rows * cfg.word_row_height + 20

        total_width = max(grid_px, 400) + 2 * cfg.padding
        title_y = cfg.padding
        words_y = title_y + 30
        grid_y = words_y + word_list_height + 20
        grid_x = (total_width - grid_px) / 2
        total_height = grid_y + grid_px + cfg.padding

        svg_parts = []

        svg_parts.append(
            f'<svg xmlns="http://www.w3.org/2000/svg" '
            f'viewBox="0 0 {total_width} {total_height}" '
            f'width="{total_width}" height="{total_height}">'
        )
        svg_parts.append(f'  <title>{escape(title)}</title>')

        svg_parts.append('  <style>')
        svg_parts.append(f'    .cell {{ fill: {cfg.cell_color}; stroke: {cfg.grid_color}; stroke-width: 1; }}')
        svg_parts.append(f'    .letter {{ font-family: {cfg.font_family}; font-size: {cfg.letter_font_size}px; font-weight: bold; fill: {cfg.letter_color}; text-anchor: middle; }}')
        svg_parts.append(f'    .title {{ font-family: {cfg.font_family}; font-size: {cfg.title_font_size}px; font-weight: bold; fill: {cfg.letter_color}; text-anchor: middle; }}')
        svg_parts.append(f'    .word {{ font-family: {cfg.font_family}; font-size: {cfg.word_font_size}px; font-weight: bold; fill: {cfg.letter_color}; }}')
        svg_parts.append('    .found { text-decoration: line-through; fill: #9CA3AF; }')
        svg_parts.append('  </style>')

        svg_parts.append(
            f'  <rect x="0" y="0" width="{total_width}" height="{total_height}" '
            f'fill="{cfg.background_color}" />'
        )
        svg_parts.append(
            f'  <text x="{total_width / 2}" y="{title_y}" class="title">{escape(title)}</text>'
        )

        # Word list
        column_width = (total_width - 2 * cfg.padding) / cfg.words_per_row
        for i, word in enumerate(words):
            x = cfg.padding + (i % cfg.words_per_row) * column_width + 10
            y = words_y + 20 + (i // cfg.words_per_row) * cfg.word_row_height
            css = "word found" if word.upper() in highlighted else "word"
            svg_parts.append(
                f'  <text x="{x}" y="{y}" class="{css}">{escape(word.upper())}</text>'
            )

        # Grid background
        svg_parts.append(
            f'  <rect x="{grid_x - 10}" y="{grid_y - 10}" '
            f'width="{grid_px + 20}" height="{grid_px + 20}" rx="8" '
            f'fill="{cfg.grid_background}" stroke="{cfg.grid_color}" '
            f'stroke-width="{cfg.border_width}" />'
        )

        for row in range(puzzle.size):
            for col in range(puzzle.size):
                x = grid_x + col * cfg.cell_size
                y = grid_y + row * cfg.cell_size
                svg_parts.append(
                    f'  <rect x="{x}" y="{y}" '
                    f'width="{cfg.cell_size - 1}" height="{cfg.cell_size - 1}" '
                    f'class="cell" />'
                )

                # Overlapping found words stack their translucent fills
                for word in matcher.words_at(row, col, among=highlighted):
                    svg_parts.append(
                        f'  <rect x="{x}" y="{y}" '
                        f'width="{cfg.cell_size - 1}" height="{cfg.cell_size - 1}" '
                        f'fill="{colors[word]}" fill-opacity="{cfg.highlight_opacity}" '
                        f'class="highlight" data-word="{word}" />'
                    )

                svg_parts.append(
                    f'  <text x="{x + cfg.cell_size / 2}" '
                    f'y="{y + cfg.cell_size / 2 + 7}" '
                    f'class="letter">{puzzle.letter_at(row, col)}</text>'
                )

        svg_parts.append('</svg>')

        return '\n'.join(svg_parts)

    def render_puzzle(self, puzzle: Puzzle, title: str) -> str:
        """Blank puzzle page: grid and word list, nothing highlighted."""
        return self.render(puzzle, title)

    def render_solution(self, puzzle: Puzzle, title: str) -> str:
        """Answer key: every placed word highlighted."""
        return self.render(puzzle, title, highlight_words=puzzle.placed_words)

    def highlight_map(
        self,
        puzzle: Puzzle,
        highlight_words: Iterable[str]
    ) -> Dict[Coordinate, Tuple[str, ...]]:
        """Cells covered by the given words, mapped to those words."""
        matcher = SelectionMatcher.for_puzzle(puzzle)
        words = [w.upper() for w in highlight_words]
        result = {}
        for cell in matcher.highlighted_cells(words):
            result[cell] = tuple(matcher.words_at(cell[0], cell[1], among=words))
        return result

    def save(self, svg_content: str, filepath: str):
        """Save SVG to file."""
        with open(filepath, 'w', encoding='utf-8') as f:
            f.write(svg_content)
