"""
Logging configuration for the word jumble generator.

Each run gets its own log file, named after the word and the random seed
so a puzzle batch can be traced back to (and rebuilt from) its log.
"""
#
# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

import logging
import os
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .config import JumbleConfig, OutputConfig


FILE_FORMAT = "%(asctime)s - %(levelname)-8s - %(name)s:%(lineno)d - %(message)s"
CONSOLE_FORMAT = "%(levelname)-8s - %(message)s"
DEBUG_CONSOLE_FORMAT = "%(levelname)-8s - %(name)s - %(message)s"

MAX_LOG_BYTES = 1024 * 1024  # 1 MB
LOG_BACKUPS = 3


def log_file_name(prefix: str, word: str, seed: int) -> str:
    """Timestamped log name carrying the word and seed, e.g. word_jumble_cat_s42_20260101_120000.log"""
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    safe_word = word.lower() if isinstance(word, str) and word.isalpha() else "jumble"
    return f"{prefix}_{safe_word}_s{seed}_{timestamp}.log"


def setup_logging(output: 'OutputConfig', word: str, seed: int) -> str:
    """
    Route log records to a per-run file and, optionally, the console.

    The file always receives DEBUG records (anchor redraws and direction
    choices included); the console gets output.log_level and above.

    Args:
        output: Output settings (directory, level, prefix, console switch)
        word: Hidden word for this run, used in the file name
        seed: Seed of the random source for this run

    Returns:
        Path to the log file
    """
    os.makedirs(output.directory, exist_ok=True)
    log_path = os.path.join(
        output.directory, log_file_name(output.log_file_prefix, word, seed)
    )

    console_level = getattr(logging, output.log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # A second run in the same process replaces the first run's handlers
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    file_handler = RotatingFileHandler(
        log_path, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS, encoding='utf-8'
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(fmt=FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    )
    root_logger.addHandler(file_handler)

    if output.enable_console_logging:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(console_level)
        fmt = DEBUG_CONSOLE_FORMAT if console_level <= logging.DEBUG else CONSOLE_FORMAT
        console_handler.setFormatter(logging.Formatter(fmt=fmt))
        root_logger.addHandler(console_handler)

    return log_path


def log_run_header(config: 'JumbleConfig', seed: int, log_path: str):
    """Log the settings needed to reproduce this run."""
    logger = logging.getLogger(__name__)
    logger.info("=" * 60)
    logger.info("WORD JUMBLE GENERATOR")
    logger.info("=" * 60)
    logger.info(f"   Word: {config.word}")
    logger.info(f"   Difficulty: {config.difficulty}")
    logger.info(f"   Count: {config.count}")
    source = "configured" if config.random.seed is not None else "clock"
    logger.info(f"   Seed: {seed} ({source})")
    logger.info(f"   Formats: {', '.join(config.output.formats) or 'none'}")
    logger.debug(f"   Log file: {log_path}")
