"""Target path construction for renamed files."""

import os
from datetime import datetime
from pathlib import Path


BASE_NAME_FORMAT = "%Y-%m-%d %H%M%S"


def format_base_name(value: datetime, fmt: str = BASE_NAME_FORMAT) -> str:
    """Format a timestamp as a file base name, e.g. ``2023-05-14 134530``."""
    return value.strftime(fmt)


def candidate_base_name(base_name: str, index: int) -> str:
    """Return the base name for the ``index``-th probe; the first has no suffix."""
    if index == 1:
        return base_name
    return f"{base_name}[{index}]"


def is_same_file(candidate: Path, file_path: Path) -> bool:
    """True if ``candidate`` names ``file_path`` itself, e.g. differing only in case."""
    if candidate == file_path:
        return True
    return candidate.exists() and os.path.samefile(candidate, file_path)


def build_target_path(file_path: Path, new_base_name: str) -> Path:
    """Build a free path in the same folder for renaming ``file_path``.

    The extension is lowercased. Candidates are ``name``, ``name[2]``,
    ``name[3]``, ... and the first one that does not exist wins. If a
    candidate is the file's own base name and does not point at some
    other file, the file keeps its name.

    Args:
        file_path: File to be renamed.
        new_base_name: Desired name without directory or extension.

    Returns:
        Target path for the file.
    """
    current_base_name = file_path.stem
    extension = file_path.suffix.lower()

    index = 1
    while True:
        base_name = candidate_base_name(new_base_name, index)
        candidate = file_path.with_name(base_name + extension)
        if base_name == current_base_name and is_same_file(candidate, file_path):
            return candidate
        if not candidate.exists():
            return candidate
        index += 1
