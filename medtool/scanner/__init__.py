"""Scanner module for filesystem traversal."""

from .filesystem import iter_matching_files
from .filetimes import get_file_creation_time, set_file_times
from .progress import WalkError, WalkReporter, WalkStats
from .walker import visit_folder

__all__ = [
    "iter_matching_files",
    "get_file_creation_time",
    "set_file_times",
    "visit_folder",
    "WalkError",
    "WalkReporter",
    "WalkStats",
]
