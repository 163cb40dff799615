"""
File Utilities Module
Common file operations and path handling functions.
"""

import json
from pathlib import Path
from typing import Any


def ensure_directory(directory: Path) -> None:
    """Ensure directory exists, create if necessary."""
    directory.mkdir(parents=True, exist_ok=True)


def read_file_content(file_path: Path) -> str:
    """
    Read a UTF-8 text file, dropping a leading byte order mark.
    
    Args:
        file_path: Path to the file to read
    
    Returns:
        File contents as string
    
    Raises:
        FileNotFoundError: If file doesn't exist
        IOError: If file can't be read
        UnicodeDecodeError: If file is not valid UTF-8
    """
    with open(file_path, 'r', encoding='utf-8-sig') as f:
        return f.read()


def write_json(file_path: Path, data: Any) -> None:
    """Write data as compact JSON, creating parent directories."""
    ensure_directory(file_path.parent)
    with open(file_path, 'w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False)
