from pathlib import Path
from typing import List, Optional, Sequence

from pydantic import BaseModel, ConfigDict

from lium_completion.utils.errors import UsageError


class CompletionContext(BaseModel):
    """
    The command line as the shell hands it over on a tab press.

    ``tokens[0]`` is the program name and ``cword`` indexes the word being
    completed, which may be one past the last token.
    """

    model_config = ConfigDict(frozen=True)

    tokens: List[str]
    cword: int
    current: str = ""
    previous: str = ""

    @classmethod
    def from_words(cls, words: Sequence[str], cword: int) -> "CompletionContext":
        words = list(words)
        if not words:
            raise UsageError("At least the program name is required")
        if cword < 0:
            raise UsageError(f"Cursor index must not be negative, got {cword}")
        current = words[cword] if cword < len(words) else ""
        previous = words[cword - 1] if 0 < cword <= len(words) else ""
        return cls(tokens=words, cword=cword, current=current, previous=previous)

    @property
    def program(self) -> str:
        return self.tokens[0]

    @property
    def typed(self) -> List[str]:
        """Tokens before the cursor"""
        return self.tokens[: self.cword]

    def is_used(self, *args: str) -> bool:
        """True if one of args was typed before the cursor"""
        typed = self.typed
        return any(arg in typed for arg in args)

    def command_path(self) -> List[str]:
        """Leading subcommand chain, e.g. ['lium', 'dut', 'list']"""
        path = []
        for token in self.typed:
            if token.startswith("-"):
                break
            path.append(token)
        return path

    def current_repo(self, cwd: Optional[Path] = None) -> Optional[str]:
        """Explicit --repo value, else cwd when it looks like a ChromiumOS checkout"""
        typed = self.typed
        for i, token in enumerate(typed):
            if token == "--repo":
                # The value may be the word under the cursor
                return self.tokens[i + 1] if i + 1 < len(self.tokens) else ""

        cwd = cwd or Path.cwd()
        if (cwd / ".repo").is_dir() and (cwd / "chroot").is_dir():
            return str(cwd)
        return None
