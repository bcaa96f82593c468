"""Duplicate detection and batch removal command."""

from collections import defaultdict
from pathlib import Path
from typing import List, Optional

import typer
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn

from dupectl import __version__
from dupectl.core.deleter import delete_files
from dupectl.core.hasher import supported_algorithms
from dupectl.core.models import DeletionOutcome, DeletionPlan, FileRecord, ScanResult
from dupectl.core.planner import build_plan, find_duplicate_groups
from dupectl.core.scanner import scan, validate_root
from dupectl.utils.config import get_config
from dupectl.utils.console import console, err_console, format_size, make_group_table

USAGE = "Usage: dupectl <directory_path>"


def version_callback(value: bool):
    """Show version and exit."""
    if value:
        typer.echo(f"dupectl version {__version__}")
        raise typer.Exit()


def is_confirmed(response: str) -> bool:
    """Only a single 'Y' or 'y' confirms the batch."""
    response = response.strip()
    return len(response) == 1 and response in "Yy"


def dedupe(
    paths: Optional[List[Path]] = typer.Argument(
        None, metavar="DIRECTORY", help="Directory to scan for duplicates", show_default=False
    ),
    algorithm: Optional[str] = typer.Option(
        None, "--algorithm", "-a", help="Hash algorithm (default from config, sha256)"
    ),
    no_progress: bool = typer.Option(False, "--no-progress", help="Do not show the per-file progress line"),
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
):
    """Find files with identical content and delete all but one copy of each."""
    if not paths or len(paths) != 1:
        err_console.print(USAGE, markup=False)
        raise typer.Exit(1)

    config = get_config()
    algorithm = algorithm or config.get("scan", "algorithm", "sha256")
    if algorithm not in supported_algorithms():
        err_console.print(
            f"[error]Error: Unsupported hash algorithm: {escape(str(algorithm))}[/error]\n"
            f"[info]Choose one of: {', '.join(supported_algorithms())}[/info]"
        )
        raise typer.Exit(1)

    chunk_size = config.get("scan", "chunk_size", 128 * 1024)
    if not isinstance(chunk_size, int) or isinstance(chunk_size, bool) or chunk_size <= 0:
        err_console.print(
            f"[error]Error: scan.chunk_size must be a positive integer, got {escape(repr(chunk_size))}[/error]"
        )
        raise typer.Exit(1)

    root = paths[0]
    problem = validate_root(root)
    if problem:
        err_console.print(f"[error]Error: {escape(problem)}[/error]")
        raise typer.Exit(1)

    show_progress = config.get("output", "progress", True) and not no_progress

    console.print(f"[info]Starting scan of directory: {escape(str(root))}[/info]")
    console.print("[info]This may take a while for large directories...[/info]")

    try:
        result = _run_scan(root, algorithm, chunk_size, show_progress)
    except KeyboardInterrupt:
        err_console.print("\n[warning]Operation cancelled by user[/warning]")
        raise typer.Exit(130)

    if not result.ok:
        err_console.print(f"\n[error]Filesystem error during scan: {escape(str(result.error))}[/error]")
        return

    console.print(
        f"[info]Scan complete: {result.files_scanned} files scanned. Checking for duplicates...[/info]"
    )

    groups = find_duplicate_groups(result.digests)
    if not groups:
        console.print("\n[success]No duplicate files found in the directory.[/success]")
        return

    plan = build_plan(groups)
    _print_plan(plan)

    try:
        response = console.input(
            f"[bold]Do you want to delete ALL {len(plan)} files listed above (Y/N)?[/bold] "
        )
    except EOFError:
        response = ""

    if not is_confirmed(response):
        console.print(f"\n[info]Deletion skipped for all {len(plan)} identified files.[/info]")
        return

    _delete(plan)


def _run_scan(root: Path, algorithm: str, chunk_size: int, show_progress: bool) -> ScanResult:
    """Scan root, showing the file currently being hashed on a single status line."""
    if not show_progress:
        return scan(root, algorithm=algorithm, chunk_size=chunk_size)

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task("Scanning...", total=None)

        def report(path: Path) -> None:
            progress.update(task, description=f"Calculating hash for: {escape(str(path))}")

        return scan(root, progress=report, algorithm=algorithm, chunk_size=chunk_size)


def _print_plan(plan: DeletionPlan):
    """List every group with its keeper and duplicates, then the summary."""
    records_by_digest: dict[str, list[FileRecord]] = defaultdict(list)
    for record in plan.records:
        records_by_digest[record.digest].append(record)

    for group in plan.groups:
        console.print(f"\n[keeper]--- Duplicate Group (Keeper: {escape(str(group.keeper))}) ---[/keeper]")
        for record in records_by_digest[group.digest]:
            if record.error is not None:
                err_console.print(
                    f"   [warning]-> Warning: Could not get size for {escape(str(record.path))}[/warning]"
                )
                console.print(f"   -> Duplicate: {escape(str(record.path))} (size unknown)")
            else:
                console.print(f"   -> Duplicate: {escape(str(record.path))} ({format_size(record.size)})")

    table = make_group_table(f"Duplicate Groups ({len(plan.groups)} groups)")
    for i, group in enumerate(plan.groups, 1):
        reclaimable = sum(r.size or 0 for r in records_by_digest[group.digest])
        table.add_row(str(i), group.digest[:12], str(len(group.paths)), format_size(reclaimable))

    console.print()
    console.print(table)

    console.print("\n[bold]Summary:[/bold]")
    console.print(f"  Duplicate files identified: [bold]{len(plan)}[/bold]")
    console.print(f"  Total size to reclaim: [bold]{format_size(plan.total_size)}[/bold]")
    if plan.size_errors:
        console.print(
            f"  [warning]{len(plan.size_errors)} file(s) could not be measured and count as 0 Bytes[/warning]"
        )
    console.print()


def _report_outcome(outcome: DeletionOutcome):
    if outcome.deleted:
        console.print(f"  [success]✓[/success] Deleted {escape(str(outcome.path))}")
    else:
        err_console.print(
            f"  [error]✗ Error deleting {escape(str(outcome.path))}: {escape(outcome.error.message)}[/error]"
        )


def _delete(plan: DeletionPlan):
    """Delete every nominated duplicate and report the tally."""
    console.print("\n[warning]Starting batch deletion (keeping the first file in each group)...[/warning]")
    console.print()

    result = delete_files(plan.paths, on_result=_report_outcome)

    console.print()
    if result.failed:
        console.print(
            f"[warning]Batch operation complete: {result.deleted_count} files successfully deleted, "
            f"{len(result.failed)} errors[/warning]"
        )
    else:
        console.print(
            f"[success]Batch operation complete: {result.deleted_count} files successfully deleted.[/success]"
        )
