"""
cerebras_handler.cli — Command-line interface for the Cerebras handler.

Usage:
    cerebras-handler ask "prompt"          Send one prompt, print the answer and usage
    cerebras-handler model                 Show the configured model
    cerebras-handler models                List known Cerebras models
"""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import NoReturn

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cerebras_handler.adapters import CerebrasHandler, TextEvent, UsageEvent
from cerebras_handler.core.errors import HandlerError
from cerebras_handler.core.models import MODEL_CATALOG, HandlerOptions
from cerebras_handler.core.usage import CostTracker

console = Console()


def _setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(name)s] %(levelname)s — %(message)s",
        datefmt="%H:%M:%S",
    )


def _get_options(model: str | None) -> HandlerOptions:
    return HandlerOptions.from_env(model_id=model)


def _fail(exc: HandlerError) -> NoReturn:
    console.print(f"[red]✗[/red] {escape(str(exc))}")
    sys.exit(1)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool) -> None:
    """Cerebras chat completions as a text + usage event stream."""
    _setup_logging(verbose)


# ---------------------------------------------------------------------------
# ask
# ---------------------------------------------------------------------------

async def _ask(options: HandlerOptions, system_prompt: str, prompt: str) -> CostTracker:
    tracker = CostTracker(model=options.model_id)
    async with CerebrasHandler(options) as handler:
        async for event in handler.create_message(
            system_prompt, [{"role": "user", "content": prompt}]
        ):
            if isinstance(event, TextEvent):
                console.print(event.text, markup=False, highlight=False)
            elif isinstance(event, UsageEvent):
                tracker.add_usage(event.input_tokens, event.output_tokens, event.total_cost)
                console.print(
                    f"[dim]tokens in={event.input_tokens} out={event.output_tokens} "
                    f"(estimated) | {tracker.format_cost(event.total_cost)}[/dim]"
                )
    return tracker


@main.command()
@click.argument("prompt")
@click.option("-s", "--system", "system_prompt", default="You are a helpful assistant.",
              help="System prompt.")
@click.option("-m", "--model", default=None, help="Model id (default: CEREBRAS_MODEL or llama-3.3-70b).")
@click.option("--summary", is_flag=True, help="Print a cost summary after the response.")
def ask(prompt: str, system_prompt: str, model: str | None, summary: bool) -> None:
    """Send PROMPT to Cerebras and print the response."""
    options = _get_options(model)
    if not options.api_key:
        console.print("[yellow]Warning:[/yellow] CEREBRAS_API_KEY is not set.")
    try:
        tracker = asyncio.run(_ask(options, system_prompt, prompt))
    except HandlerError as exc:
        _fail(exc)
    if summary:
        console.print(tracker.format_summary())


# ---------------------------------------------------------------------------
# model
# ---------------------------------------------------------------------------

@main.command()
@click.option("-m", "--model", default=None, help="Model id to resolve.")
def model(model: str | None) -> None:
    """Show the configured model and its pricing."""
    handler = CerebrasHandler(_get_options(model))
    try:
        selected = handler.get_model()
    except HandlerError as exc:
        _fail(exc)
    finally:
        asyncio.run(handler.close())

    info = selected.info
    table = Table(title="Model")
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="white")
    table.add_row("Id", selected.id)
    table.add_row("Name", info.name or "—")
    table.add_row("Context window", str(info.context_window or "—"))
    table.add_row("Max tokens", str(info.max_tokens or "—"))
    table.add_row("Input $/M", _per_million(info.input_price))
    table.add_row("Output $/M", _per_million(info.output_price))
    console.print(table)


# ---------------------------------------------------------------------------
# models
# ---------------------------------------------------------------------------

@main.command()
def models() -> None:
    """List known Cerebras models."""
    table = Table(title="Cerebras Models")
    table.add_column("Id", style="yellow")
    table.add_column("Name")
    table.add_column("Context", justify="right")
    table.add_column("Input $/M", justify="right")
    table.add_column("Output $/M", justify="right")
    for model_id, info in MODEL_CATALOG.items():
        table.add_row(
            model_id,
            info.name or "",
            f"{info.context_window:,}" if info.context_window else "—",
            _per_million(info.input_price),
            _per_million(info.output_price),
        )
    console.print(table)


def _per_million(price: float | None) -> str:
    if price is None:
        return "—"
    return f"{price * 1_000_000:.2f}"


if __name__ == "__main__":
    main()
