from pathlib import Path

import click
from rich.console import Console

from lium_completion.cli.completion import get_bash_completion, get_zsh_completion

console = Console()


@click.command(name="script")
@click.option(
    "--shell",
    type=click.Choice(["bash", "zsh"]),
    default="bash",
    help="Shell type",
)
@click.option("--output", "-o", type=click.Path(), help="Output file")
def script_command(shell: str, output: str):
    """Print the shell completion shim for lium

    \b
    Usage:
      lium-complete script                    Print bash completion (default)
      lium-complete script --shell=zsh        Print zsh completion
      lium-complete script --output <file>    Write to specific file
    """
    if shell == "bash":
        script = get_bash_completion()
    else:
        script = get_zsh_completion()

    if output:
        Path(output).write_text(script + "\n")
        console.print(f"[green]✓[/green] Wrote completion to {output}")
        console.print(f"[dim]Source it in your ~/.{shell}rc[/dim]")
    else:
        click.echo(script)
