"""Creation timestamp resolution from metadata containers."""

import logging
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path

from medtool.extractor.containers import MetadataContainer
from medtool.extractor.exiftool import ExiftoolRunner
from medtool.resolver.priority import classify, sort_containers
from medtool.scanner.filetimes import get_file_creation_time


logger = logging.getLogger(__name__)


def creation_datetime_from_container(container: MetadataContainer) -> datetime | None:
    """Return the first date found along the container's tag chain."""
    for tag in classify(container).tags:
        value = container.get_datetime(tag)
        if value is not None:
            return value
    return None


def creation_datetime_from_containers(
    containers: Iterable[MetadataContainer],
) -> datetime | None:
    """
    Pick the creation date from the most reliable container that has one.

    Priority: ExifIFD > IFD0 and friends > QuickTime Keys > QuickTime movie header
    """
    for container in sort_containers(containers):
        value = creation_datetime_from_container(container)
        if value is not None:
            logger.debug("Creation date %s found in %s", value, container.name)
            return value
    return None


def get_creation_datetime(file_path: str | Path, runner: ExiftoolRunner) -> datetime:
    """Resolve a file's creation time, falling back to the filesystem's."""
    containers = runner.read_containers(file_path)
    value = creation_datetime_from_containers(containers)
    if value is None:
        logger.debug("No metadata date in %s, using filesystem creation time", file_path)
        value = get_file_creation_time(file_path)
    return value
