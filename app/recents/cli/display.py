"""Shared Rich display functions for operation results.

Turns per-file statuses and registry contents into console output.
"""

from rich.markup import escape

from recents.models.entry import RecentEntry
from recents.models.result import FileOutcome, FileStatus, OperationResult
from recents.utils.formatting import (
    console,
    create_entries_table,
    format_entry_row,
    print_error,
    print_info,
    print_success,
    print_warning,
)


def print_file_status(status: FileStatus) -> None:
    """Print the line for one per-file status.

    Successes go to stdout, failures and touch warnings to stderr.

    Args:
        status: Status to report.
    """
    path = escape(status.canonical_path or status.path)

    if status.outcome == FileOutcome.ADDED:
        if status.already_present:
            print_success(f"File '{path}' updated successfully")
        else:
            print_success(f"File '{path}' added successfully")
    elif status.outcome == FileOutcome.NOT_FOUND:
        print_error(f"'{path}' does not exist!")
    elif status.outcome == FileOutcome.RESOLUTION_FAILED:
        print_error(f"Could not get the path of '{path}': {escape(status.detail or '')}")
    elif status.outcome == FileOutcome.REGISTRY_WRITE_FAILED:
        print_error(f"Could not register '{path}': {escape(status.detail or '')}")
    elif status.outcome == FileOutcome.TOUCH_FAILED:
        print_warning(f"Could not touch '{path}': {escape(status.detail or '')}")


def print_include_results(result: OperationResult) -> None:
    """Print every per-file status followed by a summary.

    Args:
        result: Result of an include operation.
    """
    for status in result.statuses:
        print_file_status(status)

    if result.all_succeeded:
        print_success(f"All {result.succeeded} file(s) registered.")
    else:
        console.print(
            f"\n[success]{result.succeeded} registered[/success], "
            f"[error]{result.failed} failed[/error]"
        )


def print_entries(entries: list[RecentEntry]) -> None:
    """Print registry entries as a table.

    Args:
        entries: Entries to show, in registry order.
    """
    if not entries:
        print_info("No recent files registered.")
        return

    table = create_entries_table()
    for entry in entries:
        table.add_row(*format_entry_row(entry))

    console.print(table)
    console.print(f"\n[entry.time]{len(entries)} recent file(s)[/]")
