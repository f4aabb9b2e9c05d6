"""Parsed metadata containers."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from medtool.extractor.parser import parse_exif_date


@dataclass(frozen=True)
class MetadataContainer:
    """One metadata group (EXIF IFD, QuickTime atom, ...) read from a file."""

    name: str
    tags: dict[str, Any] = field(default_factory=dict)

    def get_datetime(self, tag: str) -> datetime | None:
        """Return the tag's value as a datetime, or None if absent or not a date."""
        value = self.tags.get(tag)
        if not isinstance(value, str):
            return None
        return parse_exif_date(value)

    def describe(self) -> list[tuple[str, str]]:
        return [(tag, str(value)) for tag, value in self.tags.items()]


def group_metadata(metadata: dict[str, Any]) -> list[MetadataContainer]:
    """Split ``Group:Tag`` keyed exiftool output into containers.

    Containers keep the order in which their first tag appears.
    """
    grouped: dict[str, dict[str, Any]] = {}
    for key, value in metadata.items():
        if ":" not in key:
            continue
        group, tag = key.split(":", 1)
        grouped.setdefault(group, {})[tag] = value
    return [MetadataContainer(name, tags) for name, tags in grouped.items()]
