import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Union

from complexity_cli.core.exceptions import ComplexityCLIError, InputError

STDIN_MARKER = "-"


def save_json(file_path: str, data: Union[List, Dict]) -> None:
    """
    Write data to a JSON file, creating parent directories as needed.
    Args:
        file_path: Destination path
        data: JSON-serializable data
    Raises:
        ComplexityCLIError: If the file cannot be written
    """
    path = Path(file_path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
            f.write("\n")
    except OSError as e:
        raise ComplexityCLIError(f"Could not write JSON to {file_path}: {e}") from e


def read_source(file_path: str, stdin: Any = None) -> str:
    """
    Read source text from a file, or from stdin when the path is "-".
    Args:
        file_path: Path to a source file or "-"
        stdin: Stream to read instead of sys.stdin
    Returns:
        The source text
    Raises:
        InputError: If the file is missing or cannot be decoded
    """
    if file_path == STDIN_MARKER:
        stream = stdin if stdin is not None else sys.stdin
        return stream.read()

    path = Path(file_path)
    if not path.is_file():
        raise InputError(f"Source file not found: {file_path}")
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"Could not read {file_path}: {e}") from e
