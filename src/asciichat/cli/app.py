"""Main CLI application using Typer."""
import asyncio

import typer
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from ..config import CompletionMode, Settings
from ..errors import CompletionError
from ..llm import create_gateway
from ..session import extract_fenced_block

# Create Typer app
app = typer.Typer(
    name="asciichat",
    help="Ask a chat model for ascii art from your terminal",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()
err_console = Console(stderr=True)

LOG_LEVELS = ("debug", "info", "warning", "error")


@app.command()
def chat(
    background: bool = typer.Option(
        False,
        "--background",
        "-b",
        help="Send requests from a background worker so the UI stays responsive"
    ),
    review_art: bool = typer.Option(
        True,
        "--review-art/--no-review-art",
        help="Open a review screen when a reply contains ascii art"
    ),
    max_tokens: int | None = typer.Option(
        None,
        "--max-tokens",
        "-t",
        min=1,
        help="Token ceiling per reply (default: OPENAI_MAX_TOKENS or 100)"
    ),
    model: str | None = typer.Option(
        None,
        "--model",
        "-m",
        help="Chat model (default: OPENAI_CHAT_MODEL or gpt-4o-mini)"
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Show log panel with level: debug (all), info, warning, or error"
    ),
):
    """Launch the interactive chat screen."""
    if log_level is not None and log_level.lower() not in LOG_LEVELS:
        err_console.print(f"[red]Error: Unknown log level: {log_level}[/red]")
        raise typer.Exit(code=1)

    settings = Settings.from_env(
        max_tokens=max_tokens,
        model=model,
        completion_mode=CompletionMode.BACKGROUND if background else CompletionMode.BLOCKING,
        review_art=review_art,
        log_level=log_level,
    )

    from ..ui import run_textual_tui

    final_output = asyncio.run(run_textual_tui(settings))
    if final_output is not None:
        typer.echo(final_output)


@app.command()
def ask(
    prompt: str = typer.Argument(..., help="Message to send"),
    max_tokens: int | None = typer.Option(
        None,
        "--max-tokens",
        "-t",
        min=1,
        help="Token ceiling for the reply (default: OPENAI_MAX_TOKENS or 100)"
    ),
    model: str | None = typer.Option(
        None,
        "--model",
        "-m",
        help="Chat model (default: OPENAI_CHAT_MODEL or gpt-4o-mini)"
    ),
):
    """Send a single message and print the reply."""
    settings = Settings.from_env(max_tokens=max_tokens, model=model)

    async def _ask() -> str:
        gateway = create_gateway(settings)
        try:
            if gateway.offline:
                console.print("[yellow]Warning: OPENAI_API_KEY not set, using example art[/yellow]")
            return await gateway.complete(prompt, settings.max_tokens)
        finally:
            await gateway.close()

    try:
        reply = asyncio.run(_ask())
    except CompletionError as e:
        err_console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)

    console.print(Text("ChatGPT: ", style="magenta"), Text(reply), sep="")

    art = extract_fenced_block(reply)
    if art is not None:
        console.print(Panel(Text(art), title="Ascii art", border_style="yellow", expand=False))


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
