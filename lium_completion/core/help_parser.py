"""Turn lium --help output into a typed command schema.

The help text has three sections, each opened by a header line whose first
word is ``Positional``, ``Options:`` or ``Commands:``. Lines are classified by
the last header seen; the first word of each line is the item name.
"""

from enum import Enum
from typing import Iterable, List, Optional

from pydantic import BaseModel

SECTION_HEADERS = {
    "Positional": "positional",
    "Options:": "options",
    "Commands:": "commands",
}


class HelpSection(str, Enum):
    POSITIONAL = "positional"
    OPTIONS = "options"
    COMMANDS = "commands"


class HelpEntry(BaseModel):
    section: HelpSection
    name: str


class HelpSchema(BaseModel):
    """Entries in the order the help text lists them"""

    entries: List[HelpEntry] = []


def parse_help(lines: Iterable[str]) -> HelpSchema:
    """Classify help lines into positional, option and subcommand entries"""
    section: Optional[HelpSection] = None
    entries = []

    for line in lines:
        parts = line.split(None, 1)
        if not parts:
            continue
        head = parts[0]

        if head in SECTION_HEADERS:
            section = HelpSection(SECTION_HEADERS[head])
            continue
        if section is None:
            continue

        if head.startswith("-"):
            # Flags only count inside the options section
            if section == HelpSection.OPTIONS:
                entries.append(HelpEntry(section=section, name=head))
        elif section != HelpSection.OPTIONS:
            entries.append(HelpEntry(section=section, name=head))

    return HelpSchema(entries=entries)
