"""Completion resolution for the lium command line.

The resolver answers one tab press. It looks at the word before the cursor
first: options whose values it knows how to list (devices, servos,
directories) are completed directly. Otherwise it asks the tool itself for
the help of the current command path and offers options, subcommands or
values for the positional arguments listed there.
"""

from typing import Callable, Dict, Iterable, List, Optional, Sequence

from lium_completion.config.models import OptionSetsConfig
from lium_completion.core.context import CompletionContext
from lium_completion.core.help_parser import HelpSection, parse_help
from lium_completion.core.lium_client import LiumClient
from lium_completion.core.paths import complete_fs
from lium_completion.utils.logging import get_logger

logger = get_logger(__name__)

HELP_FLAG = "--help"


def filter_prefix(words: Iterable[str], prefix: str) -> List[str]:
    """Keep words starting with prefix, dropping duplicates"""
    seen = set()
    matches = []
    for word in words:
        if word.startswith(prefix) and word not in seen:
            seen.add(word)
            matches.append(word)
    return matches


class CompletionResolver:
    """Produces completion candidates for a partially typed lium command"""

    def __init__(
        self,
        options: Optional[OptionSetsConfig] = None,
        client_factory: Callable[[str], LiumClient] = LiumClient,
    ):
        self.options = options or OptionSetsConfig()
        self.client_factory = client_factory

    def resolve(
        self,
        tokens: Sequence[str],
        cword: int,
        current: str,
        previous: str,
    ) -> List[str]:
        ctx = CompletionContext(
            tokens=list(tokens), cword=cword, current=current, previous=previous
        )
        return self.resolve_context(ctx)

    def resolve_context(self, ctx: CompletionContext) -> List[str]:
        if ctx.is_used(HELP_FLAG):
            logger.debug("--help already given, nothing to complete")
            return []

        client = self.client_factory(ctx.program)
        prev = ctx.previous

        if prev in self.options.unsupported:
            # Values of these options are not completed yet
            return []
        if prev in self.options.dut:
            return filter_prefix(client.list_duts(), ctx.current)
        if prev in self.options.servo:
            return filter_prefix(client.list_servos(), ctx.current)
        if prev in self.options.directory:
            return complete_fs(ctx.current, directories_only=True)

        return filter_prefix(self._contextual(ctx, client), ctx.current)

    def _contextual(self, ctx: CompletionContext, client: LiumClient) -> List[str]:
        command_path = ctx.command_path()
        if not command_path:
            # Completing the program name itself is the shell's job
            return []
        result = client.describe(command_path)
        if not result.ok:
            logger.debug(
                f"No help for {' '.join(command_path)!r}: {result.status.value}"
                + (f" ({result.error})" if result.error else "")
            )
            return []

        positional_values: Dict[str, Callable[[], List[str]]] = {
            "dut": client.list_duts,
            "duts": client.list_duts,
            "actions": client.list_dut_actions,
            "tests": client.list_tests,
            "files": lambda: self._files(ctx),
        }

        candidates = []
        for entry in parse_help(result.lines).entries:
            if entry.section == HelpSection.OPTIONS:
                if not ctx.is_used(entry.name):
                    candidates.append(entry.name)
            elif entry.section == HelpSection.POSITIONAL:
                lookup = positional_values.get(entry.name)
                if lookup is not None:
                    candidates.extend(lookup())
            else:
                candidates.append(entry.name)
        return candidates

    @staticmethod
    def _files(ctx: CompletionContext) -> List[str]:
        if ctx.current.startswith("-"):
            return []
        return complete_fs(ctx.current)
