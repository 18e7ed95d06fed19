"""
Autocompletion functions for Complexity CLI.
"""

import os
from typing import List

from complexity_cli.core.constants import OUTPUT_FORMATS

SOURCE_EXTENSIONS = (".js", ".mjs", ".cjs", ".jsx")


class Completions:
    """Autocompletion provider for Complexity CLI."""

    @staticmethod
    def output_formats(incomplete: str) -> List[str]:
        """Complete output format names."""
        return [fmt for fmt in OUTPUT_FORMATS if fmt.startswith(incomplete)]

    @staticmethod
    def source_files(incomplete: str) -> List[str]:
        """Complete JavaScript files under the current directory."""
        directory, prefix = os.path.split(incomplete)
        search_dir = directory or "."
        if not os.path.isdir(search_dir):
            return []

        matches = []
        for entry in sorted(os.listdir(search_dir)):
            if not entry.startswith(prefix) or entry.startswith("."):
                continue
            full = os.path.join(directory, entry) if directory else entry
            if os.path.isdir(full) or entry.endswith(SOURCE_EXTENSIONS):
                matches.append(full)
        return matches
