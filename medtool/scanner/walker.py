"""Folder walker applying an action to every matching file."""

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from medtool.scanner.filesystem import iter_matching_files
from medtool.scanner.progress import WalkError, WalkReporter, WalkStats

logger = logging.getLogger(__name__)


def visit_folder(
    folder: Path,
    pattern: str,
    action: Callable[[Path], Any],
    reporter: WalkReporter | None = None,
) -> WalkStats:
    """Run ``action`` on each file under ``folder`` matching ``pattern``.

    A failing file is recorded and reported, and the walk moves on to the
    next one. Nothing already applied to the failing file is undone.
    """
    reporter = reporter or WalkReporter()
    stats = WalkStats()

    for index, path in enumerate(iter_matching_files(folder, pattern), start=1):
        stats.files_visited += 1
        reporter.report_file(index, path)
        try:
            result = action(path)
        except Exception as e:  # pylint: disable=broad-exception-caught
            message = str(e) or type(e).__name__
            logger.debug("Action failed for %s", path, exc_info=True)
            reporter.report_failure(message)
            stats.errors.append(WalkError(path, message))
            continue
        stats.files_succeeded += 1
        reporter.report_success(result)

    reporter.report_completion(stats)
    return stats
