"""Console reporting for folder walks."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import click


@dataclass
class WalkError:
    """A file that failed during a walk."""

    path: Path
    message: str


@dataclass
class WalkStats:
    """Statistics for a folder walk."""

    files_visited: int = 0
    files_succeeded: int = 0
    errors: list[WalkError] = field(default_factory=list)

    @property
    def files_failed(self) -> int:
        return len(self.errors)


class WalkReporter:
    """Reports per-file outcomes and the end-of-walk summary."""

    def report_file(self, index: int, path: Path) -> None:
        click.echo(f"[{index}] {path}", nl=False)

    def report_success(self, result: Any) -> None:
        click.echo(f" ✅ {result}")

    def report_failure(self, message: str) -> None:
        click.echo(f" ❌ {message}")

    def report_completion(self, stats: WalkStats) -> None:
        click.echo("Done!")
        if not stats.errors:
            return
        click.echo(f"{stats.files_failed} file(s) failed:")
        for error in stats.errors:
            click.echo(f"❌ {error.path}: {error.message}")
