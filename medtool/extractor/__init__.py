"""Metadata extraction from image and video files."""

from medtool.extractor.containers import MetadataContainer, group_metadata
from medtool.extractor.exiftool import (
    ExiftoolNotFoundError,
    ExiftoolRunner,
    MetadataReadError,
)
from medtool.extractor.parser import parse_exif_date

__all__ = [
    "ExiftoolNotFoundError",
    "ExiftoolRunner",
    "MetadataContainer",
    "MetadataReadError",
    "group_metadata",
    "parse_exif_date",
]
