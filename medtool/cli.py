"""CLI interface for medtool."""

import logging
import sys
from functools import partial
from pathlib import Path

import click

from medtool.config import Config
from medtool.extractor import ExiftoolNotFoundError, ExiftoolRunner
from medtool.processor import list_file, process_file
from medtool.scanner import visit_folder


logger = logging.getLogger(__name__)

USAGE_READ = "Usage: medtool read <file>"
USAGE_LIST = "Usage: medtool list <folder> [pattern]"
USAGE_PROCESS = "Usage: medtool process <folder> [pattern] [changesFileNames]"

COMMAND_USAGES = {
    "read": USAGE_READ,
    "list": USAGE_LIST,
    "process": USAGE_PROCESS,
}

FOLDER = click.Path(exists=True, file_okay=False, path_type=Path)


@click.group(no_args_is_help=False, add_help_option=False)
@click.pass_context
def cli(ctx: click.Context) -> None:
    ctx.ensure_object(dict)
    ctx.obj.setdefault("config", Config())


def is_true_token(token: str) -> bool:
    """Only a case-insensitive ``true`` enables renaming; any other token disables it."""
    return token.lower() == "true"


def _get_runner(config: Config) -> ExiftoolRunner:
    try:
        return ExiftoolRunner(config.exiftool_path)
    except ExiftoolNotFoundError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@cli.command("read", add_help_option=False)
@click.argument("file", type=click.Path(path_type=Path))
@click.pass_context
def read_metadata(ctx: click.Context, file: Path) -> None:
    """Print every metadata group and tag of FILE."""
    config: Config = ctx.obj["config"]
    runner = _get_runner(config)

    for container in runner.read_containers(file):
        click.echo(f"🟢 {container.name}:")
        for tag, description in container.describe():
            click.echo(f"\t{tag}: {description}")


@cli.command("list", add_help_option=False)
@click.argument("folder", type=FOLDER)
@click.argument("pattern", required=False)
@click.pass_context
def list_folder(ctx: click.Context, folder: Path, pattern: str | None) -> None:
    """Show the creation time resolved for each matching file under FOLDER."""
    config: Config = ctx.obj["config"]
    runner = _get_runner(config)

    visit_folder(folder, pattern or config.default_pattern, partial(list_file, runner=runner))


@cli.command("process", add_help_option=False)
@click.argument("folder", type=FOLDER)
@click.argument("pattern", required=False)
@click.argument("changes_file_names", required=False)
@click.pass_context
def process_folder(
    ctx: click.Context,
    folder: Path,
    pattern: str | None,
    changes_file_names: str | None,
) -> None:
    """Stamp each matching file under FOLDER with its creation time and rename it."""
    config: Config = ctx.obj["config"]
    runner = _get_runner(config)

    if changes_file_names is None:
        renames = config.changes_file_names
    else:
        renames = is_true_token(changes_file_names)

    action = partial(
        process_file,
        runner=runner,
        changes_file_name=renames,
        base_name_format=config.base_name_format,
    )
    visit_folder(folder, pattern or config.default_pattern, action)


def _usage_for(ctx: click.Context | None) -> str:
    if ctx is not None and ctx.command.name in COMMAND_USAGES:
        return COMMAND_USAGES[ctx.command.name]
    return "\n".join(COMMAND_USAGES.values())


def run(args: list[str] | None = None, config: Config | None = None) -> int:
    """Run the CLI and return the process exit code."""
    try:
        cli.main(
            args=args,
            prog_name="medtool",
            obj={"config": config or Config()},
            standalone_mode=False,
        )
    except click.UsageError as e:
        logger.debug("Usage error: %s", e.format_message())
        click.echo(f"Error: {e.format_message()}", err=True)
        click.echo(_usage_for(e.ctx))
        return 1
    except click.Abort:
        return 130
    return 0


def main() -> None:
    """Entry point for the CLI."""
    config = Config()
    logging.basicConfig(
        level=config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    sys.exit(run(config=config))


if __name__ == "__main__":
    main()
