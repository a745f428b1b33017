"""
Utility functions for file handling.
"""

from pathlib import Path
from typing import List

from docx_parser.readers.base import ReaderRegistry


def is_lock_file(file_path: Path) -> bool:
    """Word keeps '~$name.docx' owner files next to open documents."""
    return file_path.name.startswith("~$")


def get_processable_files(directory: Path) -> List[Path]:
    """
    Get files to process from a directory (non-recursive).

    Returns every file a registered reader supports, sorted by name, with
    Word lock files left out.
    """
    return sorted(
        path for path in Path(directory).iterdir()
        if path.is_file()
        and not is_lock_file(path)
        and can_process_file(path)
    )


def can_process_file(file_path: Path) -> bool:
    """Check if we have a reader that can process this file."""
    return ReaderRegistry.get_reader_for_file(file_path) is not None
