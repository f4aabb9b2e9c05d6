"""Media Tool - Stamp media files with the creation time found in their metadata."""

__version__ = "0.1.0"

from medtool.extractor import ExiftoolRunner
from medtool.processor import list_file, process_file
from medtool.scanner import visit_folder

__all__ = ["ExiftoolRunner", "list_file", "process_file", "visit_folder"]
