# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""End-to-end tests for the word search generator."""

import io
import logging
import os
import sys
import tempfile
import unittest
from contextlib import redirect_stdout
from unittest.mock import MagicMock

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from ai_word_generator import AIWordGenerator
from config import ConfigValidationError, PuzzleConfig
from logging_config import setup_logging
from wordsearch_generator import WordSearchGenerator, main
from yaml_importer import YAMLImporter


def reset_logging():
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()


class FunctionalTestBase(unittest.TestCase):

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.output_dir = self.temp_dir.name

    def tearDown(self):
        reset_logging()
        self.temp_dir.cleanup()

    def make_config(self, **kwargs):
        config = PuzzleConfig(**kwargs)
        config.output.directory = self.output_dir
        config.output.enable_console_logging = False
        config.no_ai = True
        return config


class TestWordSearchGenerator(FunctionalTestBase):
    """Full generation runs without the API."""

    def test_generate_from_word_list(self):
        config = self.make_config(
            topic="Pets", size=6, words=["CAT", "DOG", "BIRD", "FISH"]
        )
        config.generation.seed = 4
        generator = WordSearchGenerator(config)

        outputs = generator.generate()

        self.assertIsNotNone(outputs)
        self.assertEqual(
            set(outputs), {"text", "svg_puzzle", "svg_solution", "yaml"}
        )
        for path in outputs.values():
            self.assertTrue(os.path.exists(path))
        self.assertTrue(outputs["yaml"].endswith("pets_puzzle.yaml"))

        loaded = YAMLImporter().load(outputs["yaml"])
        self.assertEqual(loaded.grid, generator.puzzle.grid)
        self.assertEqual(loaded.placements, generator.puzzle.placements)

    def test_selected_formats_only(self):
        config = self.make_config(topic="Pets", size=6, words=["CAT"])
        config.output.formats = ["text"]

        outputs = WordSearchGenerator(config).generate()

        self.assertEqual(list(outputs), ["text"])
        with open(outputs["text"], encoding='utf-8') as f:
            content = f.read()
        self.assertIn("Search for words related to Pets", content)

    def test_fallback_words_without_api(self):
        config = self.make_config(topic="Nature", size=15, word_count=5)
        generator = WordSearchGenerator(config)

        self.assertIsNotNone(generator.generate())
        self.assertEqual(len(generator.word_list), 5)

    def test_word_source_failure(self):
        ai = AIWordGenerator(client=MagicMock(), max_attempts=1)
        ai.client.messages.create.side_effect = RuntimeError("down")
        config = self.make_config(topic="Nature")
        config.no_ai = False

        self.assertIsNone(WordSearchGenerator(config, ai=ai).generate())

    def test_require_ai_without_key(self):
        config = self.make_config(topic="Nature")
        config.no_ai = False
        config.require_ai = True
        ai = AIWordGenerator(enabled=False)

        with self.assertRaises(ConfigValidationError):
            WordSearchGenerator(config, ai=ai)

    def test_log_file_written(self):
        config = self.make_config(topic="Pets", size=6, words=["CAT"])
        generator = WordSearchGenerator(config)
        generator.generate()

        with open(generator.log_file_path, encoding='utf-8') as f:
            self.assertIn("GENERATION COMPLETE", f.read())


class TestMain(FunctionalTestBase):
    """Tests for the command-line entry point."""

    def test_dry_run(self):
        out = io.StringIO()
        with redirect_stdout(out):
            main(["--words", "CAT,DOG", "--size", "5", "--dry-run"])
        self.assertIn("Configuration valid", out.getvalue())
        self.assertIn("CAT, DOG", out.getvalue())

    def test_invalid_config_exits(self):
        with redirect_stdout(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                main(["--size", "2", "--dry-run"])
        self.assertEqual(ctx.exception.code, 1)

    def test_topic_on_small_grid(self):
        with redirect_stdout(io.StringIO()):
            main([
                "--topic", "Space", "--size", "10", "--no-ai",
                "--output", self.output_dir,
            ])
        loaded = YAMLImporter().load(
            os.path.join(self.output_dir, "space_puzzle.yaml")
        )
        self.assertEqual(loaded.size, 10)
        self.assertTrue(all(len(w) <= 10 for w in loaded.words))

    def test_full_run(self):
        with redirect_stdout(io.StringIO()):
            main([
                "--words", "CAT,DOG,BIRD", "--size", "5", "--no-ai",
                "--seed", "1", "--output", self.output_dir, "--topic", "pets",
            ])
        self.assertTrue(
            os.path.exists(os.path.join(self.output_dir, "pets_puzzle.svg"))
        )


class TestSetupLogging(FunctionalTestBase):
    """Tests for setup_logging."""

    def test_handlers(self):
        path = setup_logging(self.output_dir, log_level="WARNING", timestamp="fixed")
        self.assertEqual(path, os.path.join(self.output_dir, "wordsearch_generator_fixed.log"))

        handlers = logging.getLogger().handlers
        self.assertEqual(len(handlers), 2)
        self.assertEqual(handlers[0].level, logging.DEBUG)
        self.assertEqual(handlers[1].level, logging.WARNING)

    def test_no_duplicate_handlers(self):
        setup_logging(self.output_dir, enable_console=False)
        setup_logging(self.output_dir, enable_console=False)
        self.assertEqual(len(logging.getLogger().handlers), 1)


if __name__ == '__main__':
    unittest.main()
