# softbreaks/utils/gitignore.py
import logging
import os
from typing import List

import pathspec

log = logging.getLogger(__name__)

ALWAYS_IGNORED: List[str] = [".git/"]


def _read_nearest_gitignore(base: str) -> List[str]:
    cur = base
    while True:
        gi = os.path.join(cur, ".gitignore")
        if os.path.exists(gi):
            try:
                with open(gi, "r", encoding="utf-8", errors="ignore") as f:
                    return f.read().splitlines()
            except OSError as e:
                log.debug("Skipping unreadable %s: %s", gi, e)
        parent = os.path.dirname(cur)
        if parent == cur:
            return []
        cur = parent


def get_gitignore(path: str) -> pathspec.PathSpec:
    """
    PathSpec for the nearest .gitignore found walking upward from `path`
    (a file or a directory). '.git/' is always ignored, including when no
    usable .gitignore exists.
    """
    base = os.path.abspath(path or ".")
    if os.path.isfile(base):
        base = os.path.dirname(base)

    lines = ALWAYS_IGNORED + _read_nearest_gitignore(base)
    try:
        return pathspec.PathSpec.from_lines("gitwildmatch", lines)
    except ValueError as e:
        log.warning("Malformed .gitignore near %s: %s", base, e)
        return pathspec.PathSpec.from_lines("gitwildmatch", ALWAYS_IGNORED)
