# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Configuration module for the word jumble generator.

Handles loading configuration from YAML files and command-line arguments,
with proper merging and validation.
"""

import argparse
from pathlib import Path
from dataclasses import dataclass, field, asdict, replace
from typing import Optional, List, Dict, Any, Set

import yaml

from .exceptions import JumbleError
from .validation import VALID_DIFFICULTIES, parse_difficulty, validate_word


VALID_OUTPUT_FORMATS = ["text", "yaml"]
VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""
    pass


@dataclass
class OutputConfig:
    """Configuration for output."""
    directory: str = "./output"
    formats: List[str] = field(default_factory=lambda: ["text"])
    show_solution: bool = False
    log_level: str = "INFO"
    log_file_prefix: str = "word_jumble"
    enable_console_logging: bool = True


@dataclass
class RandomConfig:
    """Configuration for the random source. No seed means a clock seed."""
    seed: Optional[int] = None


@dataclass
class JumbleConfig:
    """Complete configuration for jumble generation."""
    word: str = ""
    difficulty: str = "medium"
    count: int = 1

    output: OutputConfig = field(default_factory=OutputConfig)
    random: RandomConfig = field(default_factory=RandomConfig)

    def __post_init__(self):
        """Convert dicts to dataclass instances if needed."""
        if isinstance(self.output, dict):
            self.output = OutputConfig(**self.output)
        if isinstance(self.random, dict):
            self.random = RandomConfig(**self.random)

    @classmethod
    def from_yaml(cls, path: str) -> 'JumbleConfig':
        """
        Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            JumbleConfig instance

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
    def _from_dict(cls, data: Dict[str, Any]) -> 'JumbleConfig':
        """Create JumbleConfig from dictionary."""
        puzzle_data = data.get('puzzle') or {}

        config = cls(
            word=puzzle_data.get('word', cls.word),
            difficulty=puzzle_data.get('difficulty', cls.difficulty),
            count=puzzle_data.get('count', cls.count),
        )

        if 'output' in data:
            out_data = data['output'] or {}
            default = config.output
            config.output = OutputConfig(
                directory=out_data.get('directory', default.directory),
                formats=_as_list(out_data.get('formats', default.formats)),
                show_solution=out_data.get('show_solution', default.show_solution),
                log_level=out_data.get('log_level', default.log_level),
                log_file_prefix=out_data.get(
                    'log_file_prefix', default.log_file_prefix
                ),
                enable_console_logging=out_data.get(
                    'enable_console_logging', default.enable_console_logging
                ),
            )

        if 'random' in data:
            random_data = data['random'] or {}
            config.random = RandomConfig(seed=random_data.get('seed'))

        return config

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> 'JumbleConfig':
        """
        Create configuration from command-line arguments.

        Args:
            args: Parsed command-line arguments

        Returns:
            JumbleConfig instance
        """
        config = cls()

        if getattr(args, 'word', None):
            config.word = args.word
        if getattr(args, 'difficulty', None):
            config.difficulty = args.difficulty
        if getattr(args, 'count', None) is not None:
            config.count = args.count
        if getattr(args, 'seed', None) is not None:
            config.random.seed = args.seed
        if getattr(args, 'output', None):
            config.output.directory = args.output
        if getattr(args, 'format', None):
            config.output.formats = args.format.split(',')
        if getattr(args, 'show_solution', False):
            config.output.show_solution = True
        if getattr(args, 'verbose', False):
            config.output.log_level = "DEBUG"

        return config

    @classmethod
    def merge(
        cls,
        yaml_config: 'JumbleConfig',
        cli_config: 'JumbleConfig',
        explicit: Optional[Set[str]] = None
    ) -> 'JumbleConfig':
        """
        Merge configurations with CLI taking precedence over YAML.

        Args:
            yaml_config: Configuration loaded from YAML file
            cli_config: Configuration from command-line arguments
            explicit: Settings given on the command line (see
                explicit_settings). These win even when they equal the
                default. Without it, only non-default CLI values win.

        Returns:
            Merged JumbleConfig instance
        """
        merged = JumbleConfig(
            word=yaml_config.word,
            difficulty=yaml_config.difficulty,
            count=yaml_config.count,
            output=replace(yaml_config.output),
            random=replace(yaml_config.random),
        )

        default = cls()

        def overrides(name: str, value: Any, default_value: Any) -> bool:
            if explicit is not None:
                return name in explicit
            return value != default_value

        if overrides('word', cli_config.word, default.word):
            merged.word = cli_config.word
        if overrides('difficulty', cli_config.difficulty, default.difficulty):
            merged.difficulty = cli_config.difficulty
        if overrides('count', cli_config.count, default.count):
            merged.count = cli_config.count
        if overrides('seed', cli_config.random.seed, None):
            merged.random.seed = cli_config.random.seed
        if overrides('directory', cli_config.output.directory,
                     default.output.directory):
            merged.output.directory = cli_config.output.directory
        if overrides('formats', cli_config.output.formats,
                     default.output.formats):
            merged.output.formats = cli_config.output.formats
        if cli_config.output.show_solution:
            merged.output.show_solution = True
        if overrides('log_level', cli_config.output.log_level,
                     default.output.log_level):
            merged.output.log_level = cli_config.output.log_level

        return merged

    def validate(self) -> List[str]:
        """
        Validate configuration values.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if not isinstance(self.word, str):
            errors.append(f"Word must be a string, got {self.word!r}")
        elif not self.word:
            errors.append("Word cannot be empty")
        else:
            try:
                validate_word(self.word)
            except JumbleError as e:
                errors.append(f"Invalid word '{self.word}': {e.message}")

        try:
            parse_difficulty(self.difficulty)
        except JumbleError:
            errors.append(
                f"Invalid difficulty '{self.difficulty}'. "
                f"Must be one of: {VALID_DIFFICULTIES}"
            )

        if not isinstance(self.count, int) or self.count < 1:
            errors.append("count must be a positive integer")

        if self.random.seed is not None and not isinstance(self.random.seed, int):
            errors.append(f"seed must be an integer, got {self.random.seed!r}")

        if not isinstance(self.output.formats, list):
            errors.append(
                f"formats must be a list, got {self.output.formats!r}"
            )
        else:
            for fmt in self.output.formats:
                if fmt not in VALID_OUTPUT_FORMATS:
                    errors.append(
                        f"Invalid output format '{fmt}'. "
                        f"Must be one of: {VALID_OUTPUT_FORMATS}"
                    )

        if not isinstance(self.output.directory, str):
            errors.append(
                f"Output directory must be a string, got {self.output.directory!r}"
            )

        if (not isinstance(self.output.log_level, str)
                or self.output.log_level.upper() not in VALID_LOG_LEVELS):
            errors.append(
                f"Invalid log level '{self.output.log_level}'. "
                f"Must be one of: {VALID_LOG_LEVELS}"
            )

        return errors

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            'puzzle': {
                'word': self.word,
                'difficulty': self.difficulty,
                'count': self.count,
            },
            'output': asdict(self.output),
            'random': asdict(self.random),
        }


def _as_list(value: Any) -> Any:
    """Accept a single YAML scalar where a list is expected."""
    if isinstance(value, str):
        return [value]
    return value


# CLI option -> merge setting name
_CLI_SETTINGS = {
    'word': 'word',
    'difficulty': 'difficulty',
    'count': 'count',
    'seed': 'seed',
    'output': 'directory',
    'format': 'formats',
    'verbose': 'log_level',
}


def explicit_settings(args: argparse.Namespace) -> Set[str]:
    """
    Names of the settings actually given on the command line.

    Options left out of the command line parse to None (or False for
    flags), so a value equal to the default still counts as given.
    """
    explicit = set()
    for option, setting in _CLI_SETTINGS.items():
        value = getattr(args, option, None)
        if value is not None and value is not False:
            explicit.add(setting)
    return explicit


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Generate word jumble puzzles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Using command-line arguments
  word-jumble --word apple --difficulty hard

  # Reproducible batch of puzzles
  word-jumble --word cat --count 5 --seed 42 --format text,yaml

  # CLI arguments override YAML
  word-jumble --config jumble.yaml --word override
"""
    )

    parser.add_argument(
        "--config", "-c",
        metavar="PATH",
        help="YAML configuration file"
    )

    # Puzzle settings
    parser.add_argument(
        "--word", "-w",
        metavar="WORD",
        help="Word to hide (3-10 letters)"
    )
    parser.add_argument(
        "--difficulty", "-d",
        choices=VALID_DIFFICULTIES,
        help="Difficulty level (default: medium)"
    )
    parser.add_argument(
        "--count", "-n",
        type=int,
        metavar="INT",
        help="Number of puzzles to generate (default: 1)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        metavar="INT",
        help="Seed for the random source"
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
        help="Comma-separated output formats (text, yaml)"
    )
    parser.add_argument(
        "--show-solution",
        action="store_true",
        help="Also print the grid with only the hidden word visible"
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


def load_config(args: Optional[argparse.Namespace] = None) -> JumbleConfig:
    """
    Load configuration from command-line and/or YAML file.

    Args:
        args: Parsed command-line arguments (if None, parses sys.argv)

    Returns:
        Fully resolved JumbleConfig

    Raises:
        ConfigValidationError: If configuration is invalid
    """
    if args is None:
        parser = create_argument_parser()
        args = parser.parse_args()

    yaml_config = None
    if getattr(args, 'config', None):
        yaml_config = JumbleConfig.from_yaml(args.config)

    cli_config = JumbleConfig.from_args(args)

    if yaml_config:
        config = JumbleConfig.merge(
            yaml_config, cli_config, explicit=explicit_settings(args)
        )
    else:
        config = cli_config

    errors = config.validate()
    if errors:
        raise ConfigValidationError(
            "Configuration validation failed:\n" +
            "\n".join(f"  - {e}" for e in errors)
        )

    return config
