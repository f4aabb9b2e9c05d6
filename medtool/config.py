"""Configuration module for medtool."""

import os
from dataclasses import dataclass, field


def _get_log_level() -> str:
    return os.environ.get("MEDTOOL_LOG_LEVEL", "WARNING").upper()


@dataclass
class Config:
    default_pattern: str = "*"
    changes_file_names: bool = True
    base_name_format: str = "%Y-%m-%d %H%M%S"
    exiftool_path: str = "exiftool"
    log_level: str = field(default_factory=_get_log_level)
