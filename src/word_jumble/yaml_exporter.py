# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
YAML exporter for word jumbles.

Writes a generated puzzle (grid rows, hidden word location) together with
a small metadata block.
"""

from datetime import datetime
from pathlib import Path
from typing import Dict, Any

import yaml

from .models import Puzzle


GENERATOR_NAME = "word-jumble"


class YAMLExportError(Exception):
    """Raised when YAML export fails."""
    pass


class YAMLExporter:
    """
    Exports jumbles to YAML.

    Usage:
        exporter = YAMLExporter()
        yaml_str = exporter.export(puzzle)
        exporter.save(puzzle, 'output/jumble.yaml')
    """

    def export(self, puzzle: Puzzle) -> str:
        """
        Export puzzle to YAML string.

        Args:
            puzzle: Generated jumble

        Returns:
            YAML string representation of the puzzle
        """
        header = "# Word Jumble Puzzle\n"
        header += "# grid rows are listed north to south\n\n"

        yaml_content = yaml.dump(
            self._build_document(puzzle),
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
            indent=2,
            width=80,
        )

        return header + yaml_content

    def save(self, puzzle: Puzzle, path: str) -> str:
        """
        Save puzzle to YAML file.

        Args:
            puzzle: Generated jumble
            path: Output file path

        Returns:
            Path to saved file

        Raises:
            YAMLExportError: If the file cannot be written
        """
        yaml_content = self.export(puzzle)

        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, 'w', encoding='utf-8') as f:
                f.write(yaml_content)
        except OSError as e:
            raise YAMLExportError(f"Could not write {path}: {e}")

        return str(path)

    def _build_document(self, puzzle: Puzzle) -> Dict[str, Any]:
        return {
            'metadata': {
                'generator': GENERATOR_NAME,
                'created': datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
            },
            'puzzle': puzzle.to_dict(),
        }
