"""Enhancement CLI commands."""

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

console = Console()

AUDIENCE_CHOICES = ["beginner", "intermediate", "expert"]
TONE_CHOICES = ["professional", "casual", "friendly", "formal", "persuasive", "enthusiastic"]
FORMAT_CHOICES = ["article", "list", "code", "email", "summary", "outline", "social_post"]


def _read_prompt(prompt, input_file):
    if input_file:
        with open(input_file) as f:
            prompt = f.read()
    elif not prompt:
        prompt = click.get_text_stream("stdin").read()

    if not prompt or not prompt.strip():
        console.print("[red]Error:[/red] No prompt provided")
        raise click.Abort()
    return prompt


def _candidate_table(candidates, title="Framework Detection"):
    table = Table(title=title)
    table.add_column("Framework", style="cyan")
    table.add_column("Applicable")
    table.add_column("Confidence", style="green")
    table.add_column("Rationale")

    for c in candidates:
        table.add_row(
            c.framework.value,
            "[green]Yes[/green]" if c.applicable else "[dim]No[/dim]",
            f"{c.confidence:.0%}",
            c.rationale
        )
    return table


@click.command()
@click.argument("prompt", required=False)
@click.option("-f", "--file", "input_file", type=click.Path(exists=True), help="Read prompt from file")
@click.option("-o", "--output", "output_file", type=click.Path(), help="Write result to file")
@click.option("-a", "--audience", type=click.Choice(AUDIENCE_CHOICES), help="Audience level")
@click.option("-t", "--tone", type=click.Choice(TONE_CHOICES), help="Tone")
@click.option("--format", "output_format", type=click.Choice(FORMAT_CHOICES), help="Output format")
@click.option("-w", "--words", "word_count", type=click.IntRange(min=1), help="Target word count")
@click.option("-u", "--user", "user_id", help="Save the result to this user's library")
@click.option("-v", "--verbose", is_flag=True, help="Show detailed output")
def enhance(prompt, input_file, output_file, audience, tone, output_format, word_count, user_id, verbose):
    """Rewrite an instruction into a structured prompt.

    Examples:

        pf enhance "Help me write a blog post about coffee"

        pf enhance -f idea.txt --tone casual --words 400

        pf enhance "..." --format list -a beginner -v
    """
    prompt = _read_prompt(prompt, input_file)

    from ...core.exceptions import ValidationError
    from ...enhancement import PromptEnhancer
    from ..main import build_store

    enhancer = PromptEnhancer(store=build_store() if user_id else None)
    defaults = enhancer.config.default_parameters
    parameters = {
        "audienceLevel": audience or defaults.audience_level.value,
        "tone": tone or defaults.tone.value,
        "outputFormat": output_format or defaults.output_format.value,
        "wordCount": word_count or defaults.word_count,
    }

    try:
        result = enhancer.enhance(prompt, parameters=parameters, user_id=user_id)
    except ValidationError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise click.Abort()

    # Output
    if output_file:
        with open(output_file, "w") as f:
            f.write(result.final_prompt)
        console.print(f"[green]Saved to:[/green] {output_file}")
    else:
        if verbose:
            console.print(Panel(result.final_prompt, title="Enhanced Prompt"))
        else:
            click.echo(result.final_prompt)

    if verbose:
        console.print(_candidate_table(result.candidates))
        console.print(f"[bold]Use case:[/bold] {result.use_case.value}")
        applied = ", ".join(result.enhanced.framework_names) or "None"
        console.print(f"[bold]Frameworks applied:[/bold] {applied}")

    if result.record_id:
        console.print(f"[green]Saved to library:[/green] {result.record_id}")


@click.command()
@click.argument("prompt")
def detect(prompt):
    """Show which frameworks apply to a prompt.

    Example:

        pf detect "Write technical API documentation for our REST endpoints"
    """
    from ...enhancement import detect_frameworks, classify_use_case

    console.print(_candidate_table(detect_frameworks(prompt)))
    console.print(f"\n[bold]Use case:[/bold] [green]{classify_use_case(prompt).value}[/green]")


@click.command("frameworks")
def list_frameworks():
    """List the framework catalog."""
    from ...enhancement import FrameworkDetector

    table = Table(title="Prompting Frameworks")
    table.add_column("ID", style="cyan")
    table.add_column("Components")
    table.add_column("Description")

    for info in FrameworkDetector.catalog():
        table.add_row(info["id"], ", ".join(info["components"]), info["description"])

    console.print(table)
