"""Exiftool wrapper for metadata extraction."""

import json
import logging
import os
import shutil
import subprocess
from datetime import datetime
from pathlib import Path
from typing import Any

from medtool.extractor.containers import MetadataContainer, group_metadata


logger = logging.getLogger(__name__)


class ExiftoolNotFoundError(Exception):
    """Raised when exiftool is not installed."""


class MetadataReadError(Exception):
    """Raised when exiftool cannot read metadata from a file."""


class ExiftoolRunner:
    """Wrapper for exiftool command execution."""

    # -G1 names each tag by its specific location (ExifIFD, IFD0, Keys, ...)
    # and -a keeps same-named tags that live in different groups.
    EXIFTOOL_ARGS = ["-json", "-G1", "-a", "-api", "QuickTimeUTC"]

    def __init__(self, executable: str = "exiftool") -> None:
        self.executable = executable
        self.version = self._check_exiftool()

    def _check_exiftool(self) -> str:
        path = shutil.which(self.executable)
        if not path:
            raise ExiftoolNotFoundError(
                "exiftool is required but not found.\n"
                "Please install exiftool: https://exiftool.org/install.html"
            )

        result = subprocess.run(
            [self.executable, "-ver"],
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout.strip()

    def read_metadata(self, file_path: str | Path) -> dict[str, Any]:
        """Return the ``Group:Tag`` keyed metadata of a single file."""
        cmd = [self.executable] + self.EXIFTOOL_ARGS + [os.fspath(file_path)]

        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except OSError as e:
            raise MetadataReadError(str(e)) from e

        if result.returncode not in (0, 1):
            raise MetadataReadError(
                result.stderr.strip() or f"exiftool exited with {result.returncode}"
            )

        try:
            data_list = json.loads(result.stdout) if result.stdout.strip() else []
        except json.JSONDecodeError as e:
            raise MetadataReadError(f"JSON parse error: {e}") from e

        if not data_list:
            raise MetadataReadError(result.stderr.strip() or "No output from exiftool")

        metadata = data_list[0]
        error = metadata.get("ExifTool:Error")
        if error:
            raise MetadataReadError(str(error))

        return metadata

    def read_containers(self, file_path: str | Path) -> list[MetadataContainer]:
        """Read a file's metadata grouped into containers."""
        containers = group_metadata(self.read_metadata(file_path))
        logger.debug("Read %d metadata groups from %s", len(containers), file_path)
        return containers

    def write_file_create_date(self, file_path: str | Path, value: datetime) -> None:
        """Set the filesystem creation time through exiftool (Windows and macOS only)."""
        cmd = [
            self.executable,
            "-q",
            f"-FileCreateDate={value.strftime('%Y:%m:%d %H:%M:%S')}",
            os.fspath(file_path),
        ]
        result = subprocess.run(cmd, capture_output=True, text=True, check=False)
        if result.returncode != 0:
            raise OSError(result.stderr.strip() or f"exiftool exited with {result.returncode}")
