"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from recents.core.theme import get_theme

if TYPE_CHECKING:
    from recents.models.entry import RecentEntry


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def create_entries_table(title: str = "Recent Files") -> Table:
    """Create a pre-configured table for displaying registry entries.

    Args:
        title: Table title.

    Returns:
        Rich Table configured for entry display.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="entry.header",
        border_style="entry.border",
        row_styles=["", "on grey7"],
    )
    table.add_column("File", no_wrap=True)
    table.add_column("MIME Type", style="entry.mime")
    table.add_column("Added", style="entry.time")
    table.add_column("Modified", style="entry.time")
    return table


def format_entry_row(entry: RecentEntry) -> tuple[str, str, str, str]:
    """Format a registry entry as a table row.

    Args:
        entry: The entry to format.

    Returns:
        Tuple of (name, mime type, added, modified) with Rich markup.
    """
    return (
        f"[entry.file]{escape(entry.display_name)}[/]",
        entry.mime_type,
        _short_timestamp(entry.added),
        _short_timestamp(entry.modified),
    )


def _short_timestamp(timestamp: str | None) -> str:
    """Trim an ISO timestamp to minute precision for display."""
    if not timestamp:
        return "-"
    return timestamp[:16].replace("T", " ")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]", soft_wrap=True)


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}", soft_wrap=True)


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}", soft_wrap=True)


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]", soft_wrap=True)
