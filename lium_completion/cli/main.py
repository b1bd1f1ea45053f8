import sys

import click
from rich.console import Console
from rich.panel import Panel

from lium_completion.cli.commands import (
    complete_command,
    install_command,
    script_command,
    simulate_command,
)
from lium_completion.utils.errors import CompletionError
from lium_completion.utils.logging import get_logger

console = Console(stderr=True)
logger = get_logger(__name__)

_debug_mode = False


def handle_exception(e: Exception, debug_mode: bool = False) -> None:
    """Handle exceptions with clean output."""
    exit_code = 1

    if isinstance(e, CompletionError):
        exit_code = getattr(e, "exit_code", 1)
        hint_text = "\n".join([f"[dim]💡 {note}[/dim]" for note in e.hints])
        error_msg = str(e)

        body = f"[red]Error[/red]: {error_msg}"
        if hint_text:
            body += f"\n\n{hint_text}"
        console.print(
            Panel(body, title="[bold]lium-complete Error[/bold]", border_style="red")
        )
    elif isinstance(e, KeyboardInterrupt):
        console.print("[yellow]Interrupted[/yellow]")
        exit_code = 130
    else:
        console.print(
            Panel(
                f"[red]Unexpected Error[/red]: {str(e)}\n\n"
                f"[dim]Run again with --debug for a traceback.[/dim]",
                title="[bold]lium-complete Error[/bold]",
                border_style="red",
            )
        )

    if debug_mode:
        logger.exception(f"Unhandled exception: {e}")
        console.print_exception(show_locals=True)

    sys.exit(exit_code)


def excepthook(exc_type, exc_value, exc_traceback) -> None:
    """Global exception handler."""
    if exc_type is KeyboardInterrupt:
        console.print("[yellow]Interrupted[/yellow]")
        sys.exit(130)
    handle_exception(exc_value, debug_mode=_debug_mode)


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Completion config file (default: ~/.lium/completion.yaml)",
)
@click.option("--debug", is_flag=True, help="Enable debug output")
@click.pass_context
def cli(ctx, config_path, debug):
    """lium-complete - tab completion for the lium DUT tool

    \b
    Examples:
      lium-complete install                     # Hook into ~/.bash_completion
      lium-complete script --shell zsh          # Print the zsh shim
      lium-complete simulate "dut li"           # Show what tab would offer
    """
    global _debug_mode
    _debug_mode = debug
    sys.excepthook = excepthook

    ctx.obj = {
        "config_path": config_path,
        "debug": debug,
    }


cli.add_command(complete_command, "complete")
cli.add_command(script_command, "script")
cli.add_command(install_command, "install")
cli.add_command(simulate_command, "simulate")


if __name__ == "__main__":
    cli()
