"""Rich console setup and shared output helpers."""

from rich.console import Console
from rich.table import Table
from rich.theme import Theme

custom_theme = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "bold red",
        "success": "bold green",
        "keeper": "bold cyan",
        "path": "dim",
    }
)

# Paths are never wrapped so they stay copy-pasteable.
console = Console(theme=custom_theme, soft_wrap=True)
err_console = Console(stderr=True, theme=custom_theme, soft_wrap=True)


def make_group_table(title: str = "Duplicate Groups") -> Table:
    """Create a consistently styled table summarising duplicate groups."""
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("Group", style="cyan", justify="right")
    table.add_column("Digest", style="path")
    table.add_column("Files", justify="right")
    table.add_column("Reclaimable", justify="right")
    return table


def _truncate(value: float) -> str:
    # Four characters of the fixed-point form: truncated, never rounded up.
    return f"{value:.6f}"[:4]


def format_size(size_bytes: int) -> str:
    """Format byte size as human-readable string (Bytes, KB, MB, GB)."""
    if size_bytes >= 1024**3:
        return f"{_truncate(size_bytes / 1024**3)} GB"
    elif size_bytes >= 1024**2:
        return f"{_truncate(size_bytes / 1024**2)} MB"
    elif size_bytes >= 1024:
        return f"{_truncate(size_bytes / 1024)} KB"
    return f"{size_bytes} Bytes"
