"""CLI interface for chatroute.

Inspect routing decisions and cost estimates from the terminal.
Defaults come from ~/.chatroute/config.yaml.

Quick start:
    chatroute resolve "fix this typo"                  # Route with defaults
    chatroute resolve "plan a launch" -f gpt-5.1       # Request a family
    chatroute resolve "hi" --preset "GPT 5 Mini Thinking"
    chatroute families                                 # Families and prices
    chatroute cost gpt-5-mini-2025-08-07 -i 1200 -o 300
    chatroute limits 1.75 --plan plus
"""

import json

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from chatroute import __version__
from chatroute.config import get_settings
from chatroute.logging_utils import setup_logging
from chatroute.routing import (
    InvalidRoutingInput,
    ModelConfigResolver,
    ModelFamily,
    describe_family,
    map_to_model_id,
)
from chatroute.routing.presets import PRESETS, is_known_preset, settings_from_display_name
from chatroute.usage import MODEL_PRICING, estimate_cost, get_usage_status

app = typer.Typer(
    name="chatroute",
    help="Per-turn model family and reasoning effort routing",
    no_args_is_help=True,
)

console = Console()


def _effort_label(effort) -> str:
    return effort.value if effort is not None else "[dim]omitted[/dim]"


@app.command()
def resolve(
    prompt: str = typer.Argument("", help="Prompt text to route"),
    family: str = typer.Option(None, "--family", "-f",
                               help="auto|gpt-5.1|gpt-5-pro-2025-10-06|gpt-5-mini|gpt-5-nano"),
    speed: str = typer.Option(None, "--speed", "-s",
                              help="Speed preference: auto|instant|thinking"),
    preset: str = typer.Option(None, "--preset", "-p",
                               help='UI preset label, e.g. "GPT 5 Mini Thinking"'),
    as_json: bool = typer.Option(False, "--json", help="Print the config as JSON"),
) -> None:
    """Resolve the model configuration for a prompt.

    Examples:
        chatroute resolve "hi"
        chatroute resolve "design a caching layer" -f gpt-5.1 -s thinking
        chatroute resolve "" --preset "GPT 5 Pro" --json
    """
    settings = get_settings()
    setup_logging(settings.log_level)

    if preset is not None:
        if not is_known_preset(preset):
            console.print(f"[red]Unknown preset: {preset}[/red]")
            raise typer.Exit(1)
        chosen = settings_from_display_name(preset)
        family, speed = chosen.family.value, chosen.speed.value

    requested_family = family or settings.default_family.value
    requested_speed = speed or settings.default_speed.value

    resolver = ModelConfigResolver(trace=settings.trace_decisions)
    try:
        config = resolver.resolve(requested_family, requested_speed, prompt)
    except InvalidRoutingInput as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    if as_json:
        console.print_json(json.dumps(config.to_dict()))
        return

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("Requested", f"{requested_family} / {requested_speed}")
    table.add_row("Family", f"[cyan]{describe_family(config.resolved_family)}[/cyan]")
    table.add_row("Model", config.model_id)
    table.add_row("Effort", _effort_label(config.reasoning_effort))
    table.add_row("Prompt chars", f"{len(prompt.strip()):,}")

    console.print(Panel(table, title="Routing decision", border_style="cyan"))


@app.command()
def families() -> None:
    """List model families, their tier and pricing."""
    table = Table(title="Model families")
    table.add_column("Family", style="cyan")
    table.add_column("Label")
    table.add_column("Tier")
    table.add_column("Model id")
    table.add_column("Input $/1M", justify="right")
    table.add_column("Output $/1M", justify="right", style="green")

    for fam in ModelFamily:
        if fam == ModelFamily.AUTO:
            continue
        model_id = map_to_model_id(fam)
        pricing = MODEL_PRICING.get(model_id)
        table.add_row(
            fam.value,
            describe_family(fam),
            "compact" if fam.is_compact else "full",
            model_id,
            f"{pricing.input:.3f}" if pricing else "-",
            f"{pricing.output:.3f}" if pricing else "-",
        )

    console.print(table)


@app.command()
def presets() -> None:
    """List UI presets and the family/speed they select."""
    table = Table(title="Presets")
    table.add_column("Label", style="cyan")
    table.add_column("Family")
    table.add_column("Speed")

    for label, chosen in PRESETS.items():
        table.add_row(label, chosen.family.value, chosen.speed.value)

    console.print(table)


@app.command()
def cost(
    model_id: str = typer.Argument(..., help="Backend model id"),
    input_tokens: int = typer.Option(0, "--input", "-i", help="Input tokens"),
    cached_tokens: int = typer.Option(0, "--cached", "-c", help="Cached input tokens"),
    output_tokens: int = typer.Option(0, "--output", "-o", help="Output tokens"),
) -> None:
    """Estimate the cost of a single request.

    Example:
        chatroute cost gpt-5.1-2025-11-13 -i 4000 -c 1000 -o 800
    """
    if cached_tokens > input_tokens:
        console.print("[red]Cached tokens cannot exceed input tokens[/red]")
        raise typer.Exit(1)
    if model_id not in MODEL_PRICING:
        console.print(f"[yellow]No pricing for {model_id}, reporting $0[/yellow]")

    usd = estimate_cost(model_id, input_tokens, cached_tokens, output_tokens)
    console.print(f"[bold]{model_id}[/bold]: [green]${usd:.6f}[/green]")


@app.command()
def limits(
    spending: float = typer.Argument(..., help="Spend so far this month (USD)"),
    plan: str = typer.Option(None, "--plan", "-p", help="Plan: free|plus|max"),
) -> None:
    """Check monthly spend against a plan ceiling."""
    status = get_usage_status(spending, plan or get_settings().default_plan)

    pct = status.percentage
    color = "green" if pct < 50 else ("yellow" if pct < 80 else "red")
    console.print(
        f"[{color}]Plan {status.plan.value}: ${status.spending:.4f} / "
        f"${status.limit:.2f} ({pct:.0f}%)[/{color}]"
    )
    if status.exceeded:
        console.print("[red]Limit exceeded[/red]")
    elif status.warning:
        console.print(f"[yellow]Approaching limit, ${status.remaining:.4f} left[/yellow]")


@app.command()
def version() -> None:
    """Show the chatroute version."""
    console.print(f"chatroute {__version__}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
