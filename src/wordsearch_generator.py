#!/usr/bin/env python3
# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
AI-Powered Word Search Generator

Generates word search puzzles using:
1. AI (Claude API) for a themed list of simple words
2. Randomized bounded placement in a square grid
3. Text/SVG output and a YAML intermediate format

Usage:
    # With YAML configuration:
    python wordsearch_generator.py --config puzzle.yaml

    # With command-line arguments:
    python wordsearch_generator.py --topic "Blockchain" --size 15

    # With your own words and no API:
    python wordsearch_generator.py --words CAT,DOG,BIRD --size 5
"""

import logging
import os
import sys
import time
from typing import Dict, List, Optional

# Add src to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from models import Puzzle
from puzzle_generator import PuzzleGenerator
from ai_word_generator import AIWordGenerator, WordSourceError
from config import (
    PuzzleConfig, create_argument_parser, load_config,
    discover_api_key, get_model, ConfigValidationError
)
from logging_config import setup_logging
from svg_renderer import SVGRenderer, make_title
from yaml_exporter import YAMLExporter


class WordSearchGenerator:
    """
    Complete word search generator with AI integration.

    Workflow:
    1. Build the word list (explicit words, AI, or fallback list)
    2. Place the words in the grid
    3. Check the snapshot and report unplaced words
    4. Render outputs (text, SVG puzzle, SVG solution)
    5. Export YAML intermediate format
    """

    def __init__(self, config: PuzzleConfig, ai: Optional[AIWordGenerator] = None):
        """
        Initialize the word search generator.

        Args:
            config: PuzzleConfig instance with all settings
            ai: Optional pre-built word source
        """
        self.config = config
        self.start_time = time.time()

        self.log_file_path = setup_logging(
            output_dir=config.output.directory,
            log_level=config.output.log_level,
            log_file_prefix=config.output.log_file_prefix,
            enable_console=config.output.enable_console_logging,
        )
        self.logger = logging.getLogger(__name__)
        self.logger.info(f"Initialized WordSearchGenerator for topic: {config.topic}")
        self.logger.info(f"Grid size: {config.size}x{config.size}")
        self.logger.debug(f"Log file: {self.log_file_path}")

        if ai is not None:
            self.ai = ai
        else:
            api_key = None if config.no_ai else discover_api_key(config)
            self.ai = AIWordGenerator(
                api_key=api_key,
                model=get_model(config),
                max_attempts=config.ai.max_attempts,
                temperature=config.ai.temperature,
                max_tokens=config.ai.max_tokens,
                enabled=not config.no_ai,
                logger=self.logger,
            )

        if config.require_ai and not config.words and not self.ai.is_available():
            raise ConfigValidationError(
                "AI generation is required (--require-ai) but API key not found.\n"
                "Please provide an API key via:\n"
                "  - --api-key CLI argument\n"
                f"  - {config.ai.api_key_env} environment variable"
            )

        self.placer = PuzzleGenerator(
            size=config.size,
            max_attempts=config.generation.max_attempts,
            seed=config.generation.seed,
        )
        self.word_list: List[str] = []
        self.puzzle: Optional[Puzzle] = None

    def build_word_list(self) -> List[str]:
        """Get words from the config, the AI, or the fallback list."""
        if self.config.words:
            self.logger.info("   - Using word list from configuration")
            self.word_list = list(self.config.words)
        else:
            self.word_list = self.ai.generate_words(
                self.config.topic,
                count=self.config.word_count,
                min_length=self.config.min_word_length,
                max_length=self.config.effective_max_word_length(),
                use_fallback=not self.config.require_ai,
            )
        return self.word_list

    def generate(self) -> Optional[Dict[str, str]]:
        """
        Generate a complete word search puzzle.

        Returns:
            Dict of output file paths, or None if generation failed
        """
        self.logger.info("=" * 60)
        self.logger.info("WORD SEARCH GENERATOR")
        self.logger.info("=" * 60)
        self.logger.info(f"   Topic: {self.config.topic}")
        self.logger.info(f"   Size: {self.config.size}x{self.config.size}")
        self.logger.info(f"   AI Available: {self.ai.is_available()}")

        # Step 1: Word list
        self.logger.info("Step 1: Building word list...")
        try:
            self.build_word_list()
        except WordSourceError as e:
            self.logger.error(f"   X {e}")
            return None
        self.logger.info(f"   - {len(self.word_list)} words: {', '.join(self.word_list)}")

        # Step 2: Placement
        self.logger.info("Step 2: Placing words...")
        self.puzzle = self.placer.generate(self.word_list)
        self.logger.info(
            f"   - Placed {len(self.puzzle.placements)} of "
            f"{len(self.puzzle.words)} words"
        )

        # Step 3: Check
        self.logger.info("Step 3: Checking puzzle...")
        problems = self.puzzle.verify()
        if problems:
            self.logger.error("   X Puzzle is inconsistent:")
            for problem in problems:
                self.logger.error(f"      - {problem}")
            return None
        if self.puzzle.missing_words:
            self.logger.warning(
                f"   ! Incomplete puzzle, not placed: "
                f"{', '.join(self.puzzle.missing_words)}"
            )
        else:
            self.logger.info("   - All words placed")

        # Step 4-5: Outputs
        self.logger.info("Step 4: Writing output...")
        output_files = self._write_outputs(self.puzzle)

        elapsed = time.time() - self.start_time
        self.logger.info("=" * 60)
        self.logger.info("GENERATION COMPLETE!")
        self.logger.info("=" * 60)
        self.logger.info("Output files:")
        for name, path in output_files.items():
            self.logger.info(f"   {name}: {path}")

        if self.ai.is_available() and not self.config.words:
            stats = self.ai.get_stats()
            self.logger.info("AI Stats:")
            self.logger.info(f"   API calls: {stats['api_calls']}")
            self.logger.info(f"   Tokens used: {stats['tokens_used']}")

        self.logger.info(f"Placement attempts: {self.placer.stats['attempts']}")
        self.logger.info(f"Generation time: {elapsed:.2f} seconds")

        return output_files

    def _base_name(self) -> str:
        return self.config.topic.lower().replace(" ", "_")[:20] or "puzzle"

    def _write_outputs(self, puzzle: Puzzle) -> Dict[str, str]:
        output_dir = self.config.output.directory
        os.makedirs(output_dir, exist_ok=True)
        base_name = self._base_name()
        formats = self.config.output.formats
        title = self.config.title or make_title(self.config.topic)
        output_files = {}

        if "text" in formats:
            path = os.path.join(output_dir, f"{base_name}_puzzle.txt")
            with open(path, 'w', encoding='utf-8') as f:
                f.write(title + "\n\n")
                f.write(puzzle.to_string() + "\n\n")
                f.write("Words: " + ", ".join(puzzle.placed_words) + "\n")
            output_files["text"] = path

        renderer = SVGRenderer()
        if "svg_puzzle" in formats:
            path = os.path.join(output_dir, f"{base_name}_puzzle.svg")
            renderer.save(renderer.render_puzzle(puzzle, title), path)
            output_files["svg_puzzle"] = path
        if "svg_solution" in formats:
            path = os.path.join(output_dir, f"{base_name}_solution.svg")
            renderer.save(renderer.render_solution(puzzle, title), path)
            output_files["svg_solution"] = path

        if "yaml" in formats:
            stats = {
                'api_calls': self.ai.stats.get('api_calls', 0),
                'placement_attempts': self.placer.stats['attempts'],
                'abandoned_words': self.placer.stats['abandoned'],
                'generation_time_seconds': round(time.time() - self.start_time, 3),
            }
            path = os.path.join(output_dir, f"{base_name}_puzzle.yaml")
            output_files["yaml"] = YAMLExporter().save(
                puzzle, path, title=title, topic=self.config.topic, stats=stats
            )

        return output_files


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args)

        if args.dry_run:
            print("Configuration valid:")
            print(f"  Topic: {config.topic}")
            print(f"  Size: {config.size}")
            print(f"  Words: {', '.join(config.words) or '(from AI)'}")
            print(f"  Max Attempts: {config.generation.max_attempts}")
            print(f"  Output Directory: {config.output.directory}")
            return

        generator = WordSearchGenerator(config)
        if generator.generate() is None:
            sys.exit(1)

    except ConfigValidationError as e:
        print(f"Configuration error: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nGeneration cancelled.")
        sys.exit(0)
    except Exception as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
