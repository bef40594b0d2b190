"""Main CLI entry point."""

import click
from rich.console import Console

from .commands import (
    enhance,
    detect,
    list_frameworks,
    history,
)

console = Console()


def build_store():
    """Prompt library configured by settings (PF_STORAGE_BACKEND / PF_STORAGE_PATH)."""
    from ..control import create_store
    from ..core.config import get_settings

    storage = get_settings().storage
    return create_store(storage.backend, storage.path)


@click.group()
@click.version_option(version="1.0.0", prog_name="promptforge")
def cli():
    """PromptForge - framework-driven prompt enhancement.

    Detects prompting frameworks in an instruction and rewrites it
    into a structured prompt.

    \b
    Examples:
        pf enhance "Help me write a blog post about coffee"
        pf detect "Write technical API documentation"
        pf frameworks
        pf history alice

    Use --help on any command for more details.
    """
    from ..core.logging_config import configure_logging
    configure_logging()


# Enhancement commands
cli.add_command(enhance)
cli.add_command(detect)
cli.add_command(list_frameworks)

# Library commands
cli.add_command(history)


@cli.command()
@click.option("-h", "--host", default=None, help="Host to bind to")
@click.option("-p", "--port", default=None, type=int, help="Port to listen on")
@click.option("--reload", is_flag=True, help="Enable auto-reload")
@click.option("-w", "--workers", default=1, type=int, help="Number of workers")
def serve(host, port, reload, workers):
    """Start the REST API server.

    Example:

        pf serve --port 8080 --reload
    """
    from ..core.config import get_settings

    api = get_settings().api
    host = host or api.host
    port = port or api.port

    console.print(f"[bold]Starting PromptForge API server...[/bold]")
    console.print(f"  Host: {host}")
    console.print(f"  Port: {port}")
    console.print(f"  Workers: {workers}")
    console.print(f"  Reload: {'Yes' if reload else 'No'}")
    console.print(f"\n[dim]API docs available at http://{host}:{port}/docs[/dim]\n")

    from ..api import run_server
    run_server(host=host, port=port, reload=reload, workers=workers)


@cli.command()
def info():
    """Show information about PromptForge."""
    from rich.panel import Panel

    info_text = """[bold]PromptForge[/bold] - Framework-driven prompt enhancement

[bold]Frameworks:[/bold]
  • [cyan]TCREI[/cyan]: Task, Context, Role, Examples, Iterate
  • [cyan]RSTI[/cyan]: Request, Style, Tone, Intent
  • [cyan]TFCDC[/cyan]: Technical scope, Format, Content, Detail, Constraints

[bold]Deployment:[/bold]
  • Python SDK: import promptforge
  • REST API: pf serve
  • CLI: pf <command>

[bold]Documentation:[/bold]
  API Docs: http://localhost:8000/docs (when server running)
  CLI Help: pf --help
  Command Help: pf <command> --help"""

    console.print(Panel(info_text, title="PromptForge v1.0.0", border_style="green"))


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
