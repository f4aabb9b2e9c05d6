"""Reading and writing filesystem timestamps."""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import sys
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from medtool.extractor.exiftool import ExiftoolRunner

logger = logging.getLogger(__name__)


def get_file_creation_time(file_path: str | Path) -> datetime:
    """Return the file's creation time, or its modification time where none is recorded."""
    stat_result = os.stat(file_path)
    created = getattr(stat_result, "st_birthtime", None)
    if created is None:
        created = stat_result.st_ctime if sys.platform == "win32" else stat_result.st_mtime
    return datetime.fromtimestamp(created)


def set_file_times(
    file_path: str | Path,
    value: datetime,
    runner: ExiftoolRunner | None = None,
) -> None:
    """Set both the creation and the last-modified time of a file.

    Access time is left untouched. Linux filesystems do not allow setting
    the creation time, so only the modified time changes there.
    """
    _set_creation_time(file_path, value, runner)

    stat_result = os.stat(file_path)
    timestamp = value.timestamp()
    os.utime(file_path, (stat_result.st_atime, timestamp))


def _set_creation_time(
    file_path: str | Path,
    value: datetime,
    runner: ExiftoolRunner | None,
) -> None:
    if sys.platform == "darwin" and shutil.which("SetFile"):
        date_str = value.strftime("%m/%d/%Y %H:%M:%S")
        subprocess.run(
            ["SetFile", "-d", date_str, os.fspath(file_path)],
            check=True,
            capture_output=True,
        )
    elif sys.platform == "win32" and runner is not None:
        runner.write_file_create_date(file_path, value)
    elif sys.platform in ("darwin", "win32"):
        logger.warning("Creation time not set, no tool to write it: %s", file_path)
    else:
        logger.debug("Creation time not settable on %s, skipping: %s", sys.platform, file_path)
