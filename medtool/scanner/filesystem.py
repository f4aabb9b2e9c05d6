"""Filesystem traversal utilities for finding media files."""

import fnmatch
import logging
import os
from collections.abc import Iterator
from pathlib import Path

logger = logging.getLogger(__name__)


def iter_matching_files(root: Path, pattern: str = "*") -> Iterator[Path]:
    """Yield files under ``root`` whose name matches the glob ``pattern``.

    Each directory's files come before its subdirectories. Order within a
    directory is whatever the OS returns.
    """
    files, subdirs = _scan_directory(root, pattern)
    yield from files
    for subdir in subdirs:
        yield from iter_matching_files(subdir, pattern)


def _scan_directory(directory: Path, pattern: str) -> tuple[list[Path], list[Path]]:
    files: list[Path] = []
    subdirs: list[Path] = []

    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                _classify_entry(entry, pattern, files, subdirs)
    except PermissionError:
        logger.warning("Permission denied scanning directory: %s", directory)
    except OSError as e:
        logger.error("Error scanning directory %s: %s", directory, e)

    return files, subdirs


def _classify_entry(
    entry: os.DirEntry,
    pattern: str,
    files: list[Path],
    subdirs: list[Path],
) -> None:
    try:
        if entry.is_dir(follow_symlinks=False):
            subdirs.append(Path(entry.path))
        elif entry.is_file() and fnmatch.fnmatch(entry.name, pattern):
            files.append(Path(entry.path))
    except OSError as e:
        logger.warning("Error inspecting %s: %s", entry.path, e)
