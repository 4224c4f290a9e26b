# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
AI Word Generator using Claude API.

Supplies themed word lists for word search puzzles:
- Requests exactly N simple words about a subject
- Cleans and length-filters the response
- Retries a bounded number of times before giving up
- Falls back to a built-in list when no API key is available
"""

import logging
import os
import re
from typing import Dict, List, Optional, Tuple

import anthropic


DEFAULT_MODEL = "claude-sonnet-4-20250514"


class WordSourceError(Exception):
    """Raised when a valid word list cannot be produced."""

    def __init__(self, subject: str, attempts: int, last_count: int):
        self.subject = subject
        self.attempts = attempts
        self.last_count = last_count
        super().__init__(
            f"Failed to generate the requested number of words for "
            f"'{subject}' after {attempts} attempts (last attempt gave "
            f"{last_count})"
        )


FALLBACK_WORDS = [
    "OCEAN", "RIVER", "FOREST", "MOUNTAIN", "VALLEY",
    "DESERT", "ISLAND", "CANYON", "MEADOW", "GLACIER",
    "PLANET", "COMET", "GALAXY", "ORBIT", "ROCKET",
]


class AIWordGenerator:
    """
    Generates word search word lists using Claude API.

    Features:
    - Exact-count themed word lists
    - Response cleaning (letters only, uppercase, length bounds)
    - Bounded retries when the model returns the wrong count
    - Fallback word list when the API is unavailable
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = DEFAULT_MODEL,
        max_attempts: int = 3,
        temperature: float = 0.7,
        max_tokens: int = 200,
        client: Optional[object] = None,
        enabled: bool = True,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the AI word generator.

        Args:
            api_key: Anthropic API key (or set ANTHROPIC_API_KEY env var)
            model: Claude model to use
            max_attempts: Requests allowed per word list
            temperature: Sampling temperature
            max_tokens: Max tokens in each response
            client: Pre-built client (mainly for tests)
            enabled: False never calls the API, even if a key is set
            logger: Logger instance (uses module logger if not provided)
        """
        self.api_key = api_key or os.environ.get("ANTHROPIC_API_KEY")
        if not enabled:
            self.api_key = None
        self.model = model
        self.max_attempts = max_attempts
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.logger = logger if logger else logging.getLogger(__name__)

        if not enabled:
            self.client = None
        elif client is not None:
            self.client = client
        elif self.api_key:
            self.client = anthropic.Anthropic(api_key=self.api_key)
        else:
            self.client = None

        self.stats = {
            "api_calls": 0,
            "attempts": 0,
            "failed_calls": 0,
            "words_generated": 0,
            "tokens_used": 0,
        }

    def is_available(self) -> bool:
        """Check if AI generation is available."""
        return self.client is not None

    def _make_request(self, system_prompt: str, user_prompt: str) -> Optional[str]:
        """
        Make one API request.

        Returns:
            Response text or None if the request failed
        """
        try:
            self.stats["api_calls"] += 1

            response = self.client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                temperature=self.temperature,
                system=system_prompt,
                messages=[{"role": "user", "content": user_prompt}]
            )

            usage = getattr(response, "usage", None)
            if usage is not None:
                self.stats["tokens_used"] += (
                    usage.input_tokens + usage.output_tokens
                )

            return response.content[0].text

        except Exception as e:
            self.stats["failed_calls"] += 1
            self.logger.error(f"AI request error: {e}", exc_info=True)
            return None

    def _build_prompts(
        self,
        subject: str,
        count: int,
        min_length: int,
        max_length: int
    ) -> Tuple[str, str]:
        """Build word list prompts."""
        system_prompt = f"""You are a word search puzzle generator. Generate EXACTLY {count} words following these strict rules:

CRITICAL RULES:
- EXACTLY {count} words total
- Each word MUST be {min_length}-{max_length} letters long
- NO compound words (e.g., 'smartcontract' is not allowed, use 'smart' or 'contract' instead)
- NO special characters, numbers, or spaces
- Only basic English letters A-Z
- Words must be related to the subject

FORMAT:
- One word per line
- All UPPERCASE
- Just the words, no numbering or bullets

Example of VALID words:
BLOCK
CHAIN
LEDGER
CRYPTO
(continue until exactly {count} words)"""

        user_prompt = (
            f"Generate exactly {count} simple words (no compound words) "
            f"related to: {subject}"
        )

        return system_prompt, user_prompt

    def parse_word_list(
        self,
        text: str,
        min_length: int,
        max_length: int
    ) -> List[str]:
        """
        Parse a one-word-per-line response.

        Non-letters are stripped and words are uppercased; words outside
        the length bounds are dropped.
        """
        words = []
        for line in text.strip().split('\n'):
            line = line.strip()
            if not line:
                continue
            word = re.sub(r'[^A-Za-z]', '', line).upper()
            if min_length <= len(word) <= max_length:
                words.append(word)
        return words

    def generate_words(
        self,
        subject: str,
        count: int = 10,
        min_length: int = 3,
        max_length: int = 12,
        use_fallback: bool = True
    ) -> List[str]:
        """
        Generate exactly `count` words related to `subject`.

        Args:
            subject: Topic for the word list (e.g., "blockchain")
            count: Number of words required
            min_length: Minimum word length
            max_length: Maximum word length
            use_fallback: Return built-in words when the API is unavailable

        Returns:
            List of `count` uppercase words

        Raises:
            WordSourceError: If no attempt produced exactly `count` words
        """
        if not self.client:
            if use_fallback:
                self.logger.warning("AI unavailable, using fallback word list")
                return self.fallback_words(count, min_length, max_length)
            raise WordSourceError(subject, 0, 0)

        system_prompt, user_prompt = self._build_prompts(
            subject, count, min_length, max_length
        )

        last_count = 0
        for attempt in range(1, self.max_attempts + 1):
            self.stats["attempts"] += 1
            content = self._make_request(system_prompt, user_prompt)
            if content is None:
                continue

            self.logger.debug(f"Raw response: {content}")
            words = self.parse_word_list(content, min_length, max_length)
            self.logger.debug(f"Processed words: {words}")
            last_count = len(words)

            if len(words) == count:
                self.logger.info(
                    f"Generated {count} words on attempt {attempt}"
                )
                self.stats["words_generated"] += len(words)
                return words

            self.logger.warning(
                f"Attempt {attempt}: got {len(words)} words instead of "
                f"{count}, retrying..."
            )

        self.logger.error(
            f"Failed to generate exactly {count} words after "
            f"{self.max_attempts} attempts"
        )
        raise WordSourceError(subject, self.max_attempts, last_count)

    def fallback_words(
        self,
        count: int = 10,
        min_length: int = 3,
        max_length: int = 12
    ) -> List[str]:
        """Built-in words for use without the API."""
        words = [w for w in FALLBACK_WORDS if min_length <= len(w) <= max_length]
        return words[:count]

    def get_stats(self) -> Dict:
        """Get usage statistics."""
        return self.stats.copy()
