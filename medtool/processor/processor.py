"""Per-file timestamp stamping and renaming."""

import logging
from datetime import datetime
from pathlib import Path

from medtool.extractor.exiftool import ExiftoolRunner
from medtool.processor.path_builder import (
    BASE_NAME_FORMAT,
    build_target_path,
    format_base_name,
    is_same_file,
)
from medtool.resolver import get_creation_datetime
from medtool.scanner.filetimes import set_file_times


logger = logging.getLogger(__name__)


def list_file(file_path: Path, runner: ExiftoolRunner) -> datetime:
    """Resolve a file's creation time without touching the file."""
    return get_creation_datetime(file_path, runner)


def process_file(
    file_path: Path,
    runner: ExiftoolRunner,
    changes_file_name: bool = True,
    base_name_format: str = BASE_NAME_FORMAT,
) -> datetime:
    """
    Stamp a file with its resolved creation time and optionally rename it.

    The creation and last-modified times are set before the rename, so a
    failed rename leaves the new timestamps in place. An existing file is
    never replaced by the rename.
    """
    created = get_creation_datetime(file_path, runner)
    set_file_times(file_path, created, runner)

    if changes_file_name:
        new_base_name = format_base_name(created, base_name_format)
        target = build_target_path(file_path, new_base_name)
        if target != file_path:
            if not is_same_file(target, file_path) and target.exists():
                raise FileExistsError(f"Target already exists: {target}")
            file_path.rename(target)
            logger.info("Renamed %s -> %s", file_path, target.name)

    return created
