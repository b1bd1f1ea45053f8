import os
from pathlib import Path
from typing import List

from lium_completion.utils.logging import get_logger

logger = get_logger(__name__)


def complete_paths(text: str, directories_only: bool = False) -> List[str]:
    """List file system entries whose path starts with text

    Candidates keep the directory part exactly as typed, so "~/sr" completes
    to "~/src" rather than an expanded home path.
    """
    head, sep, prefix = text.rpartition("/")
    typed_dir = head + sep
    search_dir = Path(os.path.expanduser(typed_dir)) if typed_dir else Path.cwd()

    try:
        names = sorted(os.listdir(search_dir))
    except OSError as e:
        logger.debug(f"Cannot list {search_dir}: {e}")
        return []

    candidates = []
    for name in names:
        if not name.startswith(prefix):
            continue
        if directories_only and not (search_dir / name).is_dir():
            continue
        candidates.append(typed_dir + name)
    return candidates


def complete_fs(text: str, directories_only: bool = False) -> List[str]:
    """Complete a path, descending into a lone directory match"""
    candidates = complete_paths(text, directories_only)
    if len(candidates) == 1:
        only = candidates[0]
        if Path(os.path.expanduser(only)).is_dir():
            return complete_paths(only + "/", directories_only)
    return candidates
