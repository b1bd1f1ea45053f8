"""Subprocess client for the lium tool.

Every lookup spawns the tool once, captures stdout and throws stderr away.
A lookup never raises: launch failures, non-zero exits and timeouts come back
as a failed ``LookupResult`` so the resolver can degrade to fewer candidates.
"""

import subprocess
from enum import Enum
from typing import List, Optional, Sequence

from pydantic import BaseModel

from lium_completion.utils.logging import get_logger

logger = get_logger(__name__)


class LookupStatus(str, Enum):
    OK = "ok"
    EMPTY = "empty"
    FAILED = "failed"


class LookupResult(BaseModel):
    status: LookupStatus
    lines: List[str] = []
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == LookupStatus.OK

    def words(self) -> List[str]:
        """All whitespace-separated words of the output, in order"""
        return [word for line in self.lines for word in line.split()]

    def first_fields(self, separator: Optional[str] = None) -> List[str]:
        """First field of every non-blank line"""
        fields = []
        for line in self.lines:
            if separator is None:
                parts = line.split()
                field = parts[0] if parts else ""
            else:
                field = line.split(separator, 1)[0].strip()
            if field:
                fields.append(field)
        return fields


class LiumClient:
    """Runs the lium tool and its list subcommands"""

    def __init__(self, program: str = "lium", timeout: Optional[float] = None):
        self.program = program
        self.timeout = timeout

    def run(self, argv: Sequence[str]) -> LookupResult:
        """Run a full command line and capture its stdout"""
        argv = list(argv)
        try:
            proc = subprocess.run(
                argv,
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                stdin=subprocess.DEVNULL,
                text=True,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired:
            logger.debug(f"Lookup timed out after {self.timeout}s: {argv}")
            return LookupResult(status=LookupStatus.FAILED, error="timeout")
        except OSError as e:
            logger.debug(f"Lookup could not start: {argv}: {e}")
            return LookupResult(status=LookupStatus.FAILED, error=str(e))

        if proc.returncode != 0:
            logger.debug(f"Lookup exited with {proc.returncode}: {argv}")
            return LookupResult(
                status=LookupStatus.FAILED, error=f"exit status {proc.returncode}"
            )

        lines = [line for line in (proc.stdout or "").splitlines() if line.strip()]
        if not lines:
            return LookupResult(status=LookupStatus.EMPTY)
        return LookupResult(status=LookupStatus.OK, lines=lines)

    def describe(self, command_path: Sequence[str]) -> LookupResult:
        """Help text for a command path such as ['lium', 'dut']"""
        return self.run([*command_path, "--help"])

    def list_duts(self) -> List[str]:
        return self.run([self.program, "dut", "list", "--ids"]).words()

    def list_tests(self) -> List[str]:
        return self.run([self.program, "tast", "list", "--cached"]).first_fields(",")

    def list_servos(self) -> List[str]:
        return self.run([self.program, "servo", "list", "--serials"]).first_fields()

    def list_dut_actions(self) -> List[str]:
        return self.run([self.program, "dut", "do", "--list-actions"]).words()
