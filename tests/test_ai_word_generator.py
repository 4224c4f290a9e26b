# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""Unit tests for ai_word_generator module."""

import os
import sys
import unittest
from types import SimpleNamespace
from unittest.mock import MagicMock

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from ai_word_generator import AIWordGenerator, FALLBACK_WORDS, WordSourceError


def api_response(text, input_tokens=20, output_tokens=10):
    """Shape of an Anthropic messages response, as far as the generator reads it."""
    return SimpleNamespace(
        content=[SimpleNamespace(text=text)],
        usage=SimpleNamespace(input_tokens=input_tokens, output_tokens=output_tokens),
    )


def mock_client(*results):
    client = MagicMock()
    client.messages.create.side_effect = list(results)
    return client


FIVE_WORDS = "BLOCK\nCHAIN\nLEDGER\nCRYPTO\nTOKEN\n"


class TestParseWordList(unittest.TestCase):
    """Tests for response cleaning."""

    def setUp(self):
        self.generator = AIWordGenerator(enabled=False)

    def test_strips_and_uppercases(self):
        text = "1. block\n- Chain!\n\n  ledger  \nsmart contract\n"
        self.assertEqual(
            self.generator.parse_word_list(text, 3, 15),
            ["BLOCK", "CHAIN", "LEDGER", "SMARTCONTRACT"]
        )

    def test_length_bounds(self):
        text = "AB\nABC\nABCDEFGHIJKLM\n"
        self.assertEqual(self.generator.parse_word_list(text, 3, 12), ["ABC"])


class TestGenerateWords(unittest.TestCase):
    """Tests for generate_words with a mocked client."""

    def test_first_attempt_succeeds(self):
        client = mock_client(api_response(FIVE_WORDS))
        generator = AIWordGenerator(client=client)

        words = generator.generate_words("blockchain", count=5)

        self.assertEqual(words, ["BLOCK", "CHAIN", "LEDGER", "CRYPTO", "TOKEN"])
        self.assertEqual(client.messages.create.call_count, 1)
        stats = generator.get_stats()
        self.assertEqual(stats["api_calls"], 1)
        self.assertEqual(stats["tokens_used"], 30)
        self.assertEqual(stats["words_generated"], 5)

    def test_prompt_names_subject_and_count(self):
        client = mock_client(api_response(FIVE_WORDS))
        AIWordGenerator(client=client, model="test-model").generate_words(
            "blockchain", count=5
        )
        kwargs = client.messages.create.call_args.kwargs
        self.assertEqual(kwargs["model"], "test-model")
        self.assertIn("EXACTLY 5 words", kwargs["system"])
        self.assertIn("blockchain", kwargs["messages"][0]["content"])

    def test_retries_on_wrong_count(self):
        client = mock_client(
            api_response("BLOCK\nCHAIN\n"),
            api_response(FIVE_WORDS),
        )
        generator = AIWordGenerator(client=client)

        words = generator.generate_words("blockchain", count=5)

        self.assertEqual(len(words), 5)
        self.assertEqual(generator.stats["attempts"], 2)

    def test_retries_after_request_error(self):
        client = mock_client(RuntimeError("overloaded"), api_response(FIVE_WORDS))
        generator = AIWordGenerator(client=client)

        self.assertEqual(len(generator.generate_words("blockchain", count=5)), 5)
        self.assertEqual(generator.stats["failed_calls"], 1)

    def test_gives_up_after_max_attempts(self):
        client = mock_client(
            api_response("BLOCK\n"),
            api_response("BLOCK\nCHAIN\n"),
            api_response("BLOCK\nCHAIN\nTOKEN\n"),
        )
        generator = AIWordGenerator(client=client, max_attempts=3)

        with self.assertRaises(WordSourceError) as ctx:
            generator.generate_words("blockchain", count=5)

        self.assertEqual(ctx.exception.attempts, 3)
        self.assertEqual(ctx.exception.last_count, 3)
        self.assertEqual(client.messages.create.call_count, 3)


class TestFallback(unittest.TestCase):
    """Tests for use without the API."""

    def test_disabled_generator_is_unavailable(self):
        generator = AIWordGenerator(api_key="key", enabled=False)
        self.assertFalse(generator.is_available())

    def test_fallback_words(self):
        generator = AIWordGenerator(enabled=False)
        words = generator.generate_words("anything", count=4)
        self.assertEqual(words, FALLBACK_WORDS[:4])

    def test_fallback_respects_length(self):
        words = AIWordGenerator(enabled=False).fallback_words(10, 3, 5)
        self.assertTrue(words)
        self.assertTrue(all(3 <= len(w) <= 5 for w in words))

    def test_no_fallback_raises(self):
        generator = AIWordGenerator(enabled=False)
        with self.assertRaises(WordSourceError):
            generator.generate_words("anything", use_fallback=False)


if __name__ == '__main__':
    unittest.main()
