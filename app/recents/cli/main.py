"""Main CLI application entry point.

Defines the Typer application: a single command whose flags select the
action to perform.
"""

import logging
from pathlib import Path
from typing import Annotated, NoReturn

import typer
from rich.markup import escape

from recents import __version__
from recents.cli.display import print_entries, print_include_results
from recents.core.clear import ClearOperation
from recents.core.config import RecentsConfig, load_config
from recents.core.exit_codes import ExitCode
from recents.core.include import IncludeOperation
from recents.core.metadata import MetadataBuilder
from recents.core.prompt import ConfirmPrompt
from recents.models.request import (
    ClearRequest,
    ConfigurationError,
    IncludeRequest,
    MainAction,
)
from recents.models.result import ClearState
from recents.registry.store import FileRegistry
from recents.utils.formatting import print_error, print_info, print_success, print_warning

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="recents",
    help="Basic recent files management from the terminal.",
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"recents version {__version__}")
        raise typer.Exit()


def select_action(add: bool, clear: bool, list_entries: bool) -> MainAction:
    """Pick the single action requested on the command line.

    Args:
        add: ``--add`` was given.
        clear: ``--clear`` was given.
        list_entries: ``--list`` was given.

    Returns:
        The selected action.

    Raises:
        ConfigurationError: If no action or more than one action was given.
    """
    selected = [
        action
        for action, flag in (
            (MainAction.INCLUDE, add),
            (MainAction.CLEAR, clear),
            (MainAction.LIST, list_entries),
        )
        if flag
    ]
    if not selected:
        msg = "No action specified. Use --add, --clear or --list"
        raise ConfigurationError(msg)
    if len(selected) > 1:
        msg = "Only one action can be performed"
        raise ConfigurationError(msg)
    return selected[0]


@app.command()
def main(
    files: Annotated[
        list[str] | None,
        typer.Argument(help="Files to add to recent files.", show_default=False),
    ] = None,
    add: Annotated[
        bool,
        typer.Option("--add", "-a", help="Add FILES to recent files."),
    ] = False,
    clear: Annotated[
        bool,
        typer.Option("--clear", "-c", help="Clear recent files."),
    ] = False,
    list_entries: Annotated[
        bool,
        typer.Option("--list", "-l", help="List recent files."),
    ] = False,
    touch: Annotated[
        bool,
        typer.Option(
            "--touch",
            "-t",
            help="When adding, also update the modification time of each file.",
        ),
    ] = False,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Clear without asking for confirmation."),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="No unnecessary output. Useful for scripting."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging."),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", help="Configuration file to use."),
    ] = None,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Add files to, list or clear your recent files.

    Exit codes: 0 all files added, 100 some files failed, 34 recent files
    cleared, 2 clearing declined, 1 usage or configuration error.

    Examples:
        recents -a notes.txt report.pdf     # Register two files
        recents -at build.log               # Register and touch
        recents -c                          # Clear, asking first
        recents -qcf                        # Clear silently, no prompt
        recents -l                          # Show registered files
    """
    _configure_logging(verbose)

    paths = tuple(files or ())
    try:
        action = select_action(add=add, clear=clear, list_entries=list_entries)
        config = load_config(config_path)
        _warn_ignored_options(action, paths, touch=touch, force=force)
        include_request = (
            IncludeRequest(paths=paths, touch=touch, quiet=quiet)
            if action == MainAction.INCLUDE
            else None
        )
    except ConfigurationError as e:
        _fatal(str(e))

    registry = FileRegistry(config.registry_path)

    if include_request is not None:
        code = _run_include(include_request, registry, config)
    elif action == MainAction.CLEAR:
        code = _run_clear(ClearRequest(force=force, quiet=quiet), registry)
    else:
        code = _run_list(registry)

    raise typer.Exit(code=int(code))


# === Private helper functions ===


def _configure_logging(verbose: bool) -> None:
    """Send log records to stderr, at DEBUG level when verbose."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(name)s: %(message)s")


def _fatal(message: str) -> NoReturn:
    """Report a fatal error and exit, regardless of quiet mode."""
    print_error(escape(message))
    raise typer.Exit(code=int(ExitCode.FATAL))


def _warn_ignored_options(
    action: MainAction,
    paths: tuple[str, ...],
    touch: bool,
    force: bool,
) -> None:
    """Warn about options that have no effect on the selected action."""
    if action == MainAction.INCLUDE and force:
        print_warning("Force option (-f) will be ignored as we are just adding files.")
    if action != MainAction.INCLUDE and touch:
        print_warning(f"Touch option (-t) will be ignored with --{action.value}.")
    if action != MainAction.INCLUDE and paths:
        print_warning(f"{len(paths)} file argument(s) will be ignored with --{action.value}.")


def _run_include(
    request: IncludeRequest,
    registry: FileRegistry,
    config: RecentsConfig,
) -> ExitCode:
    """Register the requested files and report each outcome."""
    operation = IncludeOperation(builder=MetadataBuilder.from_config(config))
    result = operation.run(request, registry)

    if not request.quiet:
        print_include_results(result)

    return ExitCode(result.exit_code)


def _run_clear(request: ClearRequest, registry: FileRegistry) -> ExitCode:
    """Clear the registry after confirmation and report the outcome."""
    confirm = ConfirmPrompt(quiet=request.quiet)
    result = ClearOperation().run(request, registry, confirm)

    if result.clear_state == ClearState.FAILED:
        print_error(f"Could not clear recent files in {escape(str(registry.path))}")
    elif not request.quiet:
        if result.clear_state == ClearState.DONE:
            print_success("Recent files cleared.")
        else:
            print_info("Aborted. Recent files left untouched.")

    return ExitCode(result.exit_code)


def _run_list(registry: FileRegistry) -> ExitCode:
    """Print the registry contents."""
    try:
        entries = registry.entries()
    except OSError as e:
        _fatal(f"Could not read recent files in {registry.path}: {e}")

    print_entries(entries)
    return ExitCode.SUCCESS


if __name__ == "__main__":
    app()
