"""Exception hierarchy for lium-completion.

None of these are raised while resolving candidates: lookup failures just
mean fewer candidates. They come from the commands a user runs by hand
(install, script, simulate) and carry sysexits-style exit codes.
"""

from pathlib import Path
from typing import List, Optional


class CompletionError(Exception):
    """Base exception for all lium-completion errors."""

    exit_code = 1

    def __init__(self, message: str, exit_code: int | None = None, hint: str | None = None):
        """
        Initialize exception with optional exit code and hint.

        Args:
            message: Error message
            exit_code: Override default exit code
            hint: Helpful hint for resolving the error, stored as a note
        """
        super().__init__(message)
        if exit_code:
            self.exit_code = exit_code
        if hint:
            self.add_note(hint)

    @property
    def hints(self) -> List[str]:
        return list(getattr(self, "__notes__", []))


class ResourceError(CompletionError):
    """The shim or ~/.bash_completion could not be written or removed."""

    exit_code = 75


class ConfigError(CompletionError):
    """completion.yaml cannot be read, parsed or validated.

    When the offending file is known, a final hint tells the user how to get
    back to the built-in option sets.
    """

    exit_code = 78

    def __init__(
        self,
        message: str,
        config_path: Optional[Path] = None,
        hint: str | None = None,
    ):
        super().__init__(message, hint=hint)
        self.config_path = config_path
        if config_path is not None:
            self.add_note(f"Fix or delete {config_path} to use the default option sets")


class UsageError(CompletionError):
    """Bad arguments to lium-complete, such as a negative cursor index."""

    exit_code = 64
