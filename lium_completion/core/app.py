import logging
from typing import List, Optional, Sequence

from lium_completion.config.config_manager import ConfigManager
from lium_completion.core.context import CompletionContext
from lium_completion.core.lium_client import LiumClient
from lium_completion.core.resolver import CompletionResolver
from lium_completion.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


class CompletionApp:
    """
    Wires configuration, the lium client and the resolver together.
    """

    def __init__(
        self, config_path: Optional[str] = None, debug: bool = False, strict: bool = True
    ):
        self.config_manager = ConfigManager(config_path, strict=strict)
        config = self.config_manager.config

        level = logging.DEBUG if debug else logging.getLevelName(config.logging.level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
        setup_logging(level, config.logging.log_file)

        self.timeout = config.lookups.timeout_seconds
        self.resolver = CompletionResolver(config.options, client_factory=self.make_client)
        logger.debug("CompletionApp initialized")

    @classmethod
    def create(
        cls, config_path: Optional[str] = None, debug: bool = False, strict: bool = True
    ) -> "CompletionApp":
        """
        Factory method to create a CompletionApp instance.
        """
        return cls(config_path, debug=debug, strict=strict)

    def make_client(self, program: str) -> LiumClient:
        return LiumClient(program, timeout=self.timeout)

    def complete(self, words: Sequence[str], cword: int) -> List[str]:
        """Candidates for the shell's COMP_WORDS / COMP_CWORD pair"""
        ctx = CompletionContext.from_words(words, cword)
        candidates = self.resolver.resolve_context(ctx)
        logger.debug(f"{len(candidates)} candidates for {ctx.current!r} after {ctx.previous!r}")
        return candidates
