"""dupectl - Duplicate File Remover CLI."""

import typer

from dupectl.commands import dedupe

app = typer.Typer(
    name="dupectl",
    help="Find files with identical content and remove the redundant copies.",
    add_completion=False,
)

app.command()(dedupe.dedupe)


if __name__ == "__main__":
    app()
