"""Prompt library CLI commands."""

import click
from rich.console import Console
from rich.table import Table

console = Console()


@click.command()
@click.argument("user_id", required=False)
@click.option("-n", "--limit", default=10, type=click.IntRange(min=1), help="Number of records")
@click.option("--usage", is_flag=True, help="Show framework usage counts")
def history(user_id, limit, usage):
    """List saved prompts, newest first.

    Lists every record when USER_ID is omitted.

    Example:

        pf history alice --limit 3
    """
    from ..main import build_store

    store = build_store()
    records = store.list_by_user(user_id) if user_id else store.list_all()

    if not records:
        console.print("[dim]No saved prompts[/dim]")
        return

    table = Table(title="Prompt Library")
    table.add_column("ID", style="cyan")
    table.add_column("Created")
    table.add_column("User")
    table.add_column("Input")
    table.add_column("Frameworks", style="green")

    for record in records[:limit]:
        snippet = record.original_input[:30] + ("..." if len(record.original_input) > 30 else "")
        table.add_row(
            record.id[:8],
            record.created_at[:19],
            record.user_id,
            snippet,
            " + ".join(record.frameworks) or "None"
        )

    console.print(table)

    if usage:
        console.print("\n[bold]Framework usage:[/bold]")
        for framework, count in store.framework_usage(user_id).items():
            console.print(f"  - {framework}: {count}")
