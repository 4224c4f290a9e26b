# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Configuration module for word search generator.

Handles loading configuration from YAML files and command-line arguments,
with proper merging and validation.
"""

import os
import argparse
from pathlib import Path
from dataclasses import dataclass, field, asdict
from typing import Optional, List, Dict, Any

import yaml


# Default model for AI operations
DEFAULT_MODEL = "claude-sonnet-4-20250514"

# Valid configuration values
MIN_SIZE = 5
MAX_SIZE = 25
MAX_AI_WORD_COUNT = 10
VALID_OUTPUT_FORMATS = ["text", "svg_puzzle", "svg_solution", "yaml"]
VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""
    pass


@dataclass
class GenerationConfig:
    """Configuration for grid placement."""
    max_attempts: int = 200
    seed: Optional[int] = None


@dataclass
class OutputConfig:
    """Configuration for output."""
    directory: str = "./output"
    formats: List[str] = field(default_factory=lambda: [
        "text", "svg_puzzle", "svg_solution", "yaml"
    ])
    log_level: str = "INFO"
    log_file_prefix: str = "wordsearch_generator"
    enable_console_logging: bool = True


@dataclass
class AIConfig:
    """Configuration for AI word lists."""
    model: Optional[str] = None
    api_key: Optional[str] = None
    api_key_env: str = "ANTHROPIC_API_KEY"
    model_env: str = "ANTHROPIC_MODEL"
    max_attempts: int = 3
    temperature: float = 0.7
    max_tokens: int = 200


@dataclass
class PuzzleConfig:
    """Complete configuration for puzzle generation."""
    # Puzzle settings
    topic: str = "General Knowledge"
    title: Optional[str] = None
    size: int = 15
    word_count: int = 10
    min_word_length: int = 3
    max_word_length: int = 12
    words: List[str] = field(default_factory=list)

    # Flags
    no_ai: bool = False
    require_ai: bool = False

    # Sub-configurations
    generation: GenerationConfig = field(default_factory=GenerationConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    ai: AIConfig = field(default_factory=AIConfig)

    def __post_init__(self):
        """Convert dicts to dataclass instances if needed."""
        if isinstance(self.generation, dict):
            self.generation = GenerationConfig(**self.generation)
        if isinstance(self.output, dict):
            self.output = OutputConfig(**self.output)
        if isinstance(self.ai, dict):
            self.ai = AIConfig(**self.ai)

    def get_title(self) -> str:
        return self.title or f"{self.topic} Word Search"

    def effective_max_word_length(self) -> int:
        """Longest word worth requesting: never more than the grid holds."""
        return min(self.max_word_length, self.size)

    @classmethod
    def from_yaml(cls, path: str) -> 'PuzzleConfig':
        """
        Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            PuzzleConfig instance

        Raises:
            ConfigValidationError: If file doesn't exist or is invalid
        """
        path = Path(path)
        if not path.exists():
            raise ConfigValidationError(f"Configuration file not found: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigValidationError(f"Invalid YAML in {path}: {e}")

        if not isinstance(data, dict):
            raise ConfigValidationError(
                f"Configuration file must contain a YAML mapping, got {type(data)}"
            )

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> 'PuzzleConfig':
        """Create PuzzleConfig from dictionary."""
        puzzle_data = data.get('puzzle', {}) or {}
        defaults = cls()

        words = puzzle_data.get('words') or []
        for word in words:
            if not isinstance(word, str):
                # Unquoted YES/NO/ON/OFF load as booleans
                raise ConfigValidationError(
                    f"Word list entry {word!r} is not a string; "
                    f"quote it in the YAML file"
                )

        config = cls(
            topic=puzzle_data.get('topic', defaults.topic),
            title=puzzle_data.get('title'),
            size=puzzle_data.get('size', defaults.size),
            word_count=puzzle_data.get('word_count', defaults.word_count),
            min_word_length=puzzle_data.get(
                'min_word_length', defaults.min_word_length
            ),
            max_word_length=puzzle_data.get(
                'max_word_length', defaults.max_word_length
            ),
            words=list(words),
            no_ai=data.get('no_ai', defaults.no_ai),
            require_ai=data.get('require_ai', defaults.require_ai),
        )

        if 'generation' in data:
            gen_data = data['generation'] or {}
            config.generation = GenerationConfig(
                max_attempts=gen_data.get(
                    'max_attempts', config.generation.max_attempts
                ),
                seed=gen_data.get('seed', config.generation.seed),
            )

        if 'output' in data:
            out_data = data['output'] or {}
            config.output = OutputConfig(
                directory=out_data.get('directory', config.output.directory),
                formats=out_data.get('formats', config.output.formats),
                log_level=out_data.get('log_level', config.output.log_level),
                log_file_prefix=out_data.get(
                    'log_file_prefix', config.output.log_file_prefix
                ),
                enable_console_logging=out_data.get(
                    'enable_console_logging',
                    config.output.enable_console_logging
                ),
            )

        if 'ai' in data:
            ai_data = data['ai'] or {}
            config.ai = AIConfig(
                model=ai_data.get('model'),
                api_key=ai_data.get('api_key'),
                api_key_env=ai_data.get('api_key_env', config.ai.api_key_env),
                model_env=ai_data.get('model_env', config.ai.model_env),
                max_attempts=ai_data.get(
                    'max_attempts', config.ai.max_attempts
                ),
                temperature=ai_data.get('temperature', config.ai.temperature),
                max_tokens=ai_data.get('max_tokens', config.ai.max_tokens),
            )

        return config

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> 'PuzzleConfig':
        """
        Create configuration from command-line arguments.

        Args:
            args: Parsed command-line arguments

        Returns:
            PuzzleConfig instance
        """
        config = cls()

        if getattr(args, 'topic', None):
            config.topic = args.topic
        if getattr(args, 'title', None):
            config.title = args.title
        if getattr(args, 'size', None):
            config.size = args.size
        if getattr(args, 'word_count', None):
            config.word_count = args.word_count
        if getattr(args, 'words', None):
            config.words = [w.strip() for w in args.words.split(',') if w.strip()]
        if getattr(args, 'max_attempts', None):
            config.generation.max_attempts = args.max_attempts
        if getattr(args, 'seed', None) is not None:
            config.generation.seed = args.seed
        if getattr(args, 'output', None):
            config.output.directory = args.output
        if getattr(args, 'format', None):
            config.output.formats = args.format.split(',')
        if getattr(args, 'verbose', False):
            config.output.log_level = "DEBUG"
        if getattr(args, 'api_key', None):
            config.ai.api_key = args.api_key
        if getattr(args, 'model', None):
            config.ai.model = args.model
        if getattr(args, 'no_ai', False):
            config.no_ai = True
        if getattr(args, 'require_ai', False):
            config.require_ai = True

        return config

    @classmethod
    def merge(
        cls,
        yaml_config: 'PuzzleConfig',
        cli_config: 'PuzzleConfig'
    ) -> 'PuzzleConfig':
        """
        Merge configurations with CLI taking precedence over YAML.

        Args:
            yaml_config: Configuration loaded from YAML file
            cli_config: Configuration from command-line arguments

        Returns:
            Merged PuzzleConfig instance
        """
        merged = PuzzleConfig(
            topic=yaml_config.topic,
            title=yaml_config.title,
            size=yaml_config.size,
            word_count=yaml_config.word_count,
            min_word_length=yaml_config.min_word_length,
            max_word_length=yaml_config.max_word_length,
            words=list(yaml_config.words),
            no_ai=yaml_config.no_ai,
            require_ai=yaml_config.require_ai,
            generation=yaml_config.generation,
            output=yaml_config.output,
            ai=yaml_config.ai,
        )

        # Override with CLI values (non-default values)
        default = cls()

        if cli_config.topic != default.topic:
            merged.topic = cli_config.topic
        if cli_config.title:
            merged.title = cli_config.title
        if cli_config.size != default.size:
            merged.size = cli_config.size
        if cli_config.word_count != default.word_count:
            merged.word_count = cli_config.word_count
        if cli_config.words:
            merged.words = list(cli_config.words)
        if cli_config.no_ai:
            merged.no_ai = True
        if cli_config.require_ai:
            merged.require_ai = True
        if (cli_config.generation.max_attempts !=
                default.generation.max_attempts):
            merged.generation.max_attempts = cli_config.generation.max_attempts
        if cli_config.generation.seed is not None:
            merged.generation.seed = cli_config.generation.seed
        if cli_config.output.directory != default.output.directory:
            merged.output.directory = cli_config.output.directory
        if cli_config.output.formats != default.output.formats:
            merged.output.formats = cli_config.output.formats
        if cli_config.output.log_level != default.output.log_level:
            merged.output.log_level = cli_config.output.log_level
        if cli_config.ai.api_key:
            merged.ai.api_key = cli_config.ai.api_key
        if cli_config.ai.model:
            merged.ai.model = cli_config.ai.model

        return merged

    def validate(self) -> List[str]:
        """
        Validate configuration values.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if not self.words and (not self.topic or not self.topic.strip()):
            errors.append("Topic cannot be empty when no word list is given")

        if not MIN_SIZE <= self.size <= MAX_SIZE:
            errors.append(
                f"Invalid size {self.size}. Must be between "
                f"{MIN_SIZE} and {MAX_SIZE}"
            )

        if not self.words and not 1 <= self.word_count <= MAX_AI_WORD_COUNT:
            errors.append(
                f"word_count must be between 1 and {MAX_AI_WORD_COUNT}"
            )

        if self.min_word_length < 1:
            errors.append("min_word_length must be at least 1")
        if self.max_word_length < self.min_word_length:
            errors.append("max_word_length must not be below min_word_length")
        if not self.words and self.min_word_length > self.size:
            errors.append(
                f"min_word_length {self.min_word_length} exceeds grid "
                f"size {self.size}"
            )

        if self.generation.max_attempts < 1:
            errors.append("max_attempts must be positive")

        for fmt in self.output.formats:
            if fmt not in VALID_OUTPUT_FORMATS:
                errors.append(
                    f"Invalid output format '{fmt}'. "
                    f"Must be one of: {VALID_OUTPUT_FORMATS}"
                )

        if self.output.log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(
                f"Invalid log level '{self.output.log_level}'. "
                f"Must be one of: {VALID_LOG_LEVELS}"
            )

        if self.ai.max_attempts < 1:
            errors.append("ai.max_attempts must be positive")

        if self.no_ai and self.require_ai:
            errors.append("no_ai and require_ai cannot both be set")

        return errors

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            'puzzle': {
                'topic': self.topic,
                'title': self.title,
                'size': self.size,
                'word_count': self.word_count,
                'min_word_length': self.min_word_length,
                'max_word_length': self.max_word_length,
                'words': list(self.words),
            },
            'no_ai': self.no_ai,
            'require_ai': self.require_ai,
            'generation': asdict(self.generation),
            'output': asdict(self.output),
            'ai': asdict(self.ai),
        }


def discover_api_key(config: PuzzleConfig) -> Optional[str]:
    """
    Discover API key in priority order.

    Priority order:
    1. CLI argument or config file api_key field
    2. Environment variable (ANTHROPIC_API_KEY or custom)

    Args:
        config: PuzzleConfig instance

    Returns:
        API key string or None if not found
    """
    if config.ai.api_key and config.ai.api_key != "null":
        return config.ai.api_key

    env_var = config.ai.api_key_env or "ANTHROPIC_API_KEY"
    if os.environ.get(env_var):
        return os.environ[env_var]

    return None


def get_model(config: PuzzleConfig) -> str:
    """
    Get AI model from config with fallback chain.

    Priority order:
    1. Config ai.model field (from CLI or config file)
    2. Environment variable (ANTHROPIC_MODEL or custom)
    3. Default model

    Args:
        config: PuzzleConfig instance

    Returns:
        Model name string
    """
    if config.ai.model and config.ai.model != "null":
        return config.ai.model

    env_var = config.ai.model_env or "ANTHROPIC_MODEL"
    if os.environ.get(env_var):
        return os.environ[env_var]

    return DEFAULT_MODEL


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Generate word search puzzles from AI or custom word lists",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # AI word list about a topic
  wordsearch-generator --topic "Blockchain" --size 15

  # Explicit words, no AI
  wordsearch-generator --words CAT,DOG,BIRD --size 5

  # YAML configuration, CLI arguments override it
  wordsearch-generator --config puzzle.yaml --seed 42
"""
    )

    parser.add_argument(
        "--config", "-c",
        metavar="PATH",
        help="YAML configuration file"
    )

    # Puzzle settings
    parser.add_argument(
        "--topic", "-t",
        metavar="TEXT",
        help="Subject for the AI word list"
    )
    parser.add_argument(
        "--words", "-w",
        metavar="LIST",
        help="Comma-separated words (skips the AI word list)"
    )
    parser.add_argument(
        "--title",
        metavar="TEXT",
        help="Puzzle title"
    )
    parser.add_argument(
        "--size", "-s",
        type=int,
        metavar="N",
        help="Grid size (default: 15)"
    )
    parser.add_argument(
        "--word-count",
        type=int,
        metavar="N",
        help="Number of AI words to request (default: 10)"
    )

    # Generation settings
    parser.add_argument(
        "--max-attempts",
        type=int,
        metavar="INT",
        help="Random placement attempts per word (default: 200)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        metavar="INT",
        help="Random seed for a reproducible grid"
    )

    # Output settings
    parser.add_argument(
        "--output", "-o",
        metavar="PATH",
        help="Output directory"
    )
    parser.add_argument(
        "--format",
        metavar="FORMATS",
        help=f"Comma-separated output formats ({','.join(VALID_OUTPUT_FORMATS)})"
    )

    # AI settings
    parser.add_argument(
        "--api-key",
        metavar="KEY",
        help="Anthropic API key"
    )
    parser.add_argument(
        "--model",
        metavar="MODEL",
        help="AI model to use"
    )
    parser.add_argument(
        "--no-ai",
        action="store_true",
        help="Never call the API; use the built-in word list"
    )
    parser.add_argument(
        "--require-ai",
        action="store_true",
        help="Fail if no API key is available"
    )

    # Other options
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate config without generating"
    )

    return parser


def load_config(args: Optional[argparse.Namespace] = None) -> PuzzleConfig:
    """
    Load configuration from command-line and/or YAML file.

    Args:
        args: Parsed command-line arguments (if None, parses sys.argv)

    Returns:
        Fully resolved PuzzleConfig

    Raises:
        ConfigValidationError: If configuration is invalid
    """
    if args is None:
        parser = create_argument_parser()
        args = parser.parse_args()

    yaml_config = None
    if getattr(args, 'config', None):
        yaml_config = PuzzleConfig.from_yaml(args.config)

    cli_config = PuzzleConfig.from_args(args)

    if yaml_config:
        config = PuzzleConfig.merge(yaml_config, cli_config)
    else:
        config = cli_config

    errors = config.validate()
    if errors:
        raise ConfigValidationError(
            "Configuration validation failed:\n" +
            "\n".join(f"  - {e}" for e in errors)
        )

    return config
