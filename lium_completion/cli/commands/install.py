import re
from pathlib import Path

import click
from rich.console import Console

from lium_completion.cli.completion import (
    END_MARKER,
    SHIM_FILENAME,
    START_MARKER,
    ZSH_RC_LINES,
    get_bash_completion,
    source_block,
)
from lium_completion.config.config_manager import ConfigManager
from lium_completion.utils.errors import ResourceError
from lium_completion.utils.logging import get_logger

console = Console()
logger = get_logger(__name__)


def install_shim(home: Path) -> Path:
    """Write the bash shim to ~/.lium and source it from ~/.bash_completion"""
    shim_path = home / ".lium" / SHIM_FILENAME
    rc_file = home / ".bash_completion"

    try:
        shim_path.parent.mkdir(parents=True, exist_ok=True)
        shim_path.write_text(get_bash_completion() + "\n")

        content = rc_file.read_text() if rc_file.exists() else ""
        if START_MARKER in content:
            logger.debug(f"{rc_file} already sources the lium shim")
            return shim_path

        if content and not content.endswith("\n"):
            content += "\n"
        rc_file.write_text(content + source_block(shim_path))
    except OSError as e:
        raise ResourceError(
            f"Could not install completion: {e}",
            hint=f"Check that {home} is writable",
        ) from e

    logger.info(f"Installed {shim_path} and an entry in {rc_file}")
    return shim_path


def remove_shim(home: Path) -> bool:
    """Drop the marked block from ~/.bash_completion and delete the shim"""
    shim_path = home / ".lium" / SHIM_FILENAME
    rc_file = home / ".bash_completion"
    removed = False

    try:
        if rc_file.exists():
            content = rc_file.read_text()
            pattern = re.compile(
                f"{re.escape(START_MARKER)}.*?{re.escape(END_MARKER)}\n*", re.DOTALL
            )
            new_content = pattern.sub("", content)
            if new_content != content:
                rc_file.write_text(new_content)
                removed = True

        if shim_path.exists():
            shim_path.unlink()
            removed = True
    except OSError as e:
        raise ResourceError(f"Could not remove completion: {e}") from e

    return removed


@click.command(name="install")
@click.option(
    "--shell",
    type=click.Choice(["bash", "zsh"]),
    default="bash",
    help="Shell type",
)
@click.option("--remove", is_flag=True, help="Remove completions from ~/.bash_completion")
@click.pass_context
def install_command(ctx, shell: str, remove: bool):
    """Install or remove lium shell completion

    \b
    Usage:
      lium-complete install                 Install bash completion
      lium-complete install --shell=zsh     Install and print zshrc lines
      lium-complete install --remove        Uninstall
    """
    home = Path.home()

    if remove:
        if remove_shim(home):
            console.print("[green]✓[/green] Removed lium completions")
            console.print("[dim]Restart your shell for changes to take effect.[/dim]")
        else:
            console.print("[yellow]No lium completions found to remove.[/yellow]")
        return

    shim_path = install_shim(home)
    console.print(
        f"[green]✓[/green] Installed {shim_path} and an entry in {home / '.bash_completion'}"
    )

    # The only place the settings file is written; a tab press just reads it
    obj = ctx.obj or {}
    config_manager = ConfigManager(obj.get("config_path"), create_default=True, strict=False)
    console.print(f"[dim]Settings: {config_manager.config_path}[/dim]")

    if shell == "zsh":
        console.print("Add the following to your ~/.zshrc:")
        for line in ZSH_RC_LINES:
            console.print(f"  [cyan]{line}[/cyan]")
    else:
        console.print("[dim]Run `source ~/.bash_completion` for the current shell.[/dim]")
