import shlex

import click
from rich.console import Console
from rich.text import Text

from lium_completion.core.app import CompletionApp
from lium_completion.core.context import CompletionContext
from lium_completion.utils.errors import UsageError

console = Console()


@click.command(name="simulate")
@click.argument("arg_str", default="")
@click.pass_context
def simulate_command(ctx, arg_str: str):
    """Simulate a tab press after `lium ARG_STR`

    If ARG_STR ends in a space, the last word is complete and the next,
    empty word is completed. Otherwise the last word is completed.
    """
    try:
        args = shlex.split(arg_str)
    except ValueError as e:
        raise UsageError(f"Cannot split {arg_str!r}: {e}") from e

    words = ["lium", *args]
    if not args or arg_str.endswith(" "):
        words.append("")
    cword = len(words) - 1

    obj = ctx.obj or {}
    app = CompletionApp.create(obj.get("config_path"), debug=obj.get("debug", False))
    candidates = app.complete(words, cword)

    # Fake prompt with the cursor at the end of the input
    console.print(
        Text.assemble(("$", "green bold"), " lium ", arg_str, (" ", "reverse"))
    )
    for i, candidate in enumerate(candidates):
        console.print(Text(candidate, style="reverse" if i == 0 else ""))
    if not candidates:
        console.print("[dim](no candidates)[/dim]")

    repo = CompletionContext.from_words(words, cword).current_repo()
    if repo:
        console.print(f"[dim]repo: {repo}[/dim]")
