"""Entry point for benchmarks CLI."""

from typing import Annotated

import typer
from rich.table import Table

import lazyfn as lf

from . import benchs  # pyright: ignore[reportUnusedImport] # noqa: F401
from ._registery import BENCHMARKS, CONSOLE, collect_timings

app = typer.Typer(help="Benchmarks for lazyfn developments.")


@app.command(name="list")
def list_() -> None:
    """Show all registered benchmarks."""
    table = Table("category", "name", "sizes", title="Registered benchmarks")
    for b in BENCHMARKS:
        table.add_row(b.category, b.name, ", ".join(str(v.size) for v in b.variants))
    CONSOLE.print(table)


@app.command()
def run(
    *,
    category: Annotated[
        str | None, typer.Option("--category", "-c", help="Only run benchmarks of this category.")
    ] = None,
) -> None:
    """Run benchmarks and print their median timings."""
    selected = lf.iterate(BENCHMARKS).filter(lambda b: category is None or b.category == category).to_array()
    if not selected:
        CONSOLE.print(f"No benchmarks registered for category {category!r}", style="bold red")
        raise typer.Exit(code=1)
    CONSOLE.print("Running benchmarks...", style="bold blue")
    rows = collect_timings(selected)

    table = Table("category", "name", "size", "runs", "median per run (ms)", title="Results")
    for row in rows:
        table.add_row(row.category, row.name, str(row.size), str(row.runs), f"{row.median * 1000:.3f}")
    CONSOLE.print(table)
    CONSOLE.print("✓ Benchmarks complete", style="bold green")


if __name__ == "__main__":
    app()
