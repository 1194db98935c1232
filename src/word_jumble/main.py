#!/usr/bin/env python3
# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Word Jumble Generator

Hides a word in a square grid of random letters.

Usage:
    word-jumble --word apple --difficulty hard
    word-jumble --config jumble.yaml --seed 7 --format text,yaml
"""

import logging
import os
import sys
import time
from typing import Dict, List

from .config import (
    JumbleConfig, create_argument_parser, load_config, ConfigValidationError
)
from .exceptions import JumbleError
from .logging_config import setup_logging, log_run_header
from .models import Puzzle
from .puzzle_builder import PuzzleBuilder
from .random_source import get_default_source, seed_default_source
from .renderer import render_puzzle, describe_puzzle
from .yaml_exporter import YAMLExporter, YAMLExportError


class JumbleGenerator:
    """
    Generates one or more jumbles from a JumbleConfig.

    Workflow:
    1. Seed the shared random source (if a seed is configured)
    2. Build the requested number of puzzles
    3. Write text and/or YAML output
    """

    def __init__(self, config: JumbleConfig):
        """
        Initialize the jumble generator.

        Args:
            config: JumbleConfig instance with all settings
        """
        self.config = config
        self.start_time = time.time()

        if config.random.seed is not None:
            source = seed_default_source(config.random.seed)
        else:
            source = get_default_source()
        self.seed = source.seed
        self.builder = PuzzleBuilder(source)

        self.log_file_path = setup_logging(config.output, config.word, self.seed)
        self.logger = logging.getLogger(__name__)
        log_run_header(config, self.seed, self.log_file_path)

    def generate(self) -> List[Puzzle]:
        """
        Build the configured puzzles and write their output files.

        Returns:
            Generated puzzles, in build order

        Raises:
            JumbleError: If the word or difficulty is rejected
        """
        puzzles = []
        for index in range(1, self.config.count + 1):
            puzzle = self.builder.build(self.config.word, self.config.difficulty)
            puzzles.append(puzzle)

            self.logger.info(f"Puzzle {index}: {describe_puzzle(puzzle)}")
            if "text" in self.config.output.formats:
                print(render_puzzle(puzzle))
                if self.config.output.show_solution:
                    print()
                    print(render_puzzle(puzzle, show_solution=True))
                print()

            files = self._write_output(puzzle, index)
            for name, path in files.items():
                self.logger.info(f"   {name}: {path}")

        elapsed = time.time() - self.start_time
        self.logger.info(f"Generated {len(puzzles)} puzzle(s) in {elapsed:.2f} seconds")
        return puzzles

    def _write_output(self, puzzle: Puzzle, index: int) -> Dict[str, str]:
        """Write the configured file formats for one puzzle."""
        files = {}
        base_name = f"{puzzle.hidden_word.lower()}_{puzzle.difficulty.label}_{index}"

        if "yaml" in self.config.output.formats:
            yaml_path = os.path.join(self.config.output.directory, f"{base_name}.yaml")
            try:
                files["yaml"] = YAMLExporter().save(puzzle, yaml_path)
            except YAMLExportError as e:
                self.logger.warning(f"Could not export YAML: {e}")

        return files


def main():
    """Main entry point."""
    parser = create_argument_parser()
    args = parser.parse_args()

    try:
        config = load_config(args)

        if args.dry_run:
            print("Configuration valid:")
            print(f"  Word: {config.word}")
            print(f"  Difficulty: {config.difficulty}")
            print(f"  Count: {config.count}")
            print(f"  Seed: {config.random.seed}")
            print(f"  Formats: {', '.join(config.output.formats)}")
            print(f"  Output Directory: {config.output.directory}")
            return

        generator = JumbleGenerator(config)
        generator.generate()

    except ConfigValidationError as e:
        print(f"Configuration error: {e}")
        sys.exit(1)
    except JumbleError as e:
        print(f"Error: {e.message}")
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nGeneration cancelled.")
        sys.exit(0)


if __name__ == "__main__":
    main()
