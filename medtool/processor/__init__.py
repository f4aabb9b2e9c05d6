"""Applying resolved creation times to files."""

from medtool.processor.path_builder import (
    BASE_NAME_FORMAT,
    build_target_path,
    candidate_base_name,
    format_base_name,
    is_same_file,
)
from medtool.processor.processor import list_file, process_file

__all__ = [
    "BASE_NAME_FORMAT",
    "build_target_path",
    "candidate_base_name",
    "format_base_name",
    "is_same_file",
    "list_file",
    "process_file",
]
