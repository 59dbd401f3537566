"""Main CLI application using Typer."""
import asyncio

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from ..conversation import ConversationStateMachine
from ..preferences import ThemeSetting
from .providers import get_preferences, get_transport

# Load environment variables
load_dotenv()

app = typer.Typer(
    name="resumechat",
    help="Chat with the resume agent from your terminal",
    no_args_is_help=True,
    add_completion=True,
)

console = Console()


@app.command()
def chat(
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Show the log panel at this level (debug, info, warning, error)"
    ),
    no_persist: bool = typer.Option(
        False,
        "--no-persist",
        help="Do not read or write the theme preference file"
    ),
):
    """Start the interactive chat TUI."""
    from ..ui import run_textual_tui

    transport = get_transport()
    preferences = get_preferences(persist=not no_persist)
    asyncio.run(run_textual_tui(transport, preferences=preferences, log_level=log_level))


@app.command()
def ask(
    question: str = typer.Argument(..., help="Question to send to the agent"),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Print diagnostic messages"
    ),
):
    """Ask a single question and print the answer."""
    async def _ask():
        transport = get_transport()
        async with transport:
            machine = ConversationStateMachine(transport)
            if verbose:
                machine.set_debug_callback(
                    lambda level, component, message: console.print(
                        f"[dim]{level.upper():<7} \\[{component}] {escape(message)}[/dim]",
                        highlight=False,
                    )
                )
            return await machine.submit(question)

    turn = asyncio.run(_ask())
    if turn is None:
        console.print("[yellow]Nothing to ask: the question is empty.[/yellow]")
        raise typer.Exit(code=1)

    if turn.error:
        console.print(f"[red]Error: {escape(turn.content)}[/red]")
        raise typer.Exit(code=1)

    console.print(Panel(escape(turn.content), title="Answer", border_style="magenta"))


@app.command()
def theme(
    toggle: bool = typer.Option(
        False,
        "--toggle",
        "-t",
        help="Switch between dark and light and save the choice"
    ),
):
    """Show or toggle the saved theme."""
    setting = ThemeSetting(get_preferences())
    mode = setting.load()
    if toggle:
        mode = setting.toggle()
        console.print(f"[green]Theme set to {mode.value}[/green]")
    else:
        console.print(f"Theme: [bold]{mode.value}[/bold]")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
