# softbreaks/utils/discover.py
import os
from typing import Iterable, List, Tuple

import pathspec

DEFAULT_EXTENSIONS: Tuple[str, ...] = (".md", ".markdown", ".txt")


def find_documents(
    path: str,
    spec: pathspec.PathSpec,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
) -> List[str]:
    """
    Sorted POSIX-style paths, relative to `path`, of every file with one of
    `extensions` that `spec` does not ignore. Ignored directories are pruned.
    """
    wanted = tuple(e.lower() if e.startswith(".") else "." + e.lower() for e in extensions)
    found: List[str] = []

    for root, dirs, files in os.walk(path):
        rel_root = os.path.relpath(root, path).replace(os.sep, "/")
        rel_root = "" if rel_root == "." else rel_root + "/"
        # A trailing '/' lets patterns like 'build/' match the directory itself.
        dirs[:] = sorted(d for d in dirs if not spec.match_file("/" + rel_root + d + "/"))
        for name in files:
            if not name.lower().endswith(wanted):
                continue
            rel = rel_root + name
            if not spec.match_file("/" + rel):
                found.append(rel)

    return sorted(found)
