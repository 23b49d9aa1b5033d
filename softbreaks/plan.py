import os
import logging
from typing import Any, Callable, Iterable, List, Optional

from .commit import Change
from .core import resolve_column, wrap_text
from .errors import PlanError
from .settings import Settings
from .utils.discover import DEFAULT_EXTENSIONS, find_documents
from .utils.gitignore import get_gitignore
from .utils.paths import contained_path

log = logging.getLogger(__name__)


def plan_soft_breaks(
    base_path: str,
    files: Optional[Iterable[str]] = None,
    *,
    col: Any = None,
    settings: Optional[Settings] = None,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    log_callback: Optional[Callable[[str], None]] = None,
) -> List[Change]:
    """
    Work out which documents under `base_path` need soft breaks.

    Args:
        base_path: Root directory; every planned path is relative to it.
        files: Relative paths to consider. When None, documents matching
               `extensions` are discovered, honouring the nearest .gitignore.
        col: Explicit column limit; overrides `settings`.
        settings: Settings to read the column limit from.
        extensions: File suffixes picked up during discovery.
        log_callback: Optional function receiving user-facing progress lines.

    Returns:
        One 'modify' Change per document whose text would change.

    Raises:
        PathViolation: a path in `files` escapes `base_path`.
        PlanError: a document could not be read.
    """
    def _log(msg: str):
        if log_callback:
            log_callback(msg)
        log.debug(msg)

    limit = resolve_column(col, settings)
    base_real = os.path.realpath(base_path)

    if files is None:
        spec = get_gitignore(base_real)
        files = find_documents(base_real, spec, extensions)
        _log(f"Found {len(files)} document(s) under {base_path}")

    planned: List[Change] = []
    for rel_path in files:
        resolved = contained_path(base_real, rel_path)
        try:
            # newline="" keeps CRLF documents byte-for-byte where nothing changes.
            with open(resolved, "r", encoding="utf-8", newline="") as f:
                original = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise PlanError(f"Failed to read document '{rel_path}': {e}") from e

        wrapped = wrap_text(original, limit)
        if wrapped == original:
            _log(f"  - {rel_path}: already within {limit} columns")
            continue

        planned.append(
            Change(action="modify", path=rel_path, new_content=wrapped, original_content=original)
        )
        _log(f"  ✔ {rel_path}: soft breaks inserted")

    return planned
