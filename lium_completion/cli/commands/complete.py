import click

from lium_completion.core.app import CompletionApp


@click.command(name="complete")
@click.option(
    "--cword",
    type=int,
    required=True,
    help="Index of the word being completed (COMP_CWORD)",
)
@click.argument("words", nargs=-1)
@click.pass_context
def complete_command(ctx, cword: int, words):
    """Print completion candidates for a lium command line

    \b
    Called by the shell shim:
      lium-complete complete --cword "$COMP_CWORD" -- "${COMP_WORDS[@]}"

    One candidate is printed per line.
    """
    obj = ctx.obj or {}
    # A broken config falls back to the defaults
    app = CompletionApp.create(
        obj.get("config_path"), debug=obj.get("debug", False), strict=False
    )

    for candidate in app.complete(words, cword):
        click.echo(candidate)
