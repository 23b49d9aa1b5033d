# softbreaks/commit/core.py
import contextlib
import logging
import os
import shutil
import tempfile
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ..errors.path import PathViolation
from ..utils.paths import contained_path


log = logging.getLogger(__name__)


@dataclass
class Change:
    """A rewritten document slated for commit."""
    action: str  # only "modify": soft breaks never create, delete or rename files
    path: str
    new_content: Optional[str] = None
    original_content: Optional[str] = None


@dataclass
class CommitSummary:
    """Outcome of a commit operation."""

    success: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)
    dry_run: bool = False
    # Map relative path -> error string (when failed)
    errors: Dict[str, str] = field(default_factory=dict)


def _normalized_path(base_real: str, rel_path: str) -> str:
    """
    Resolve a base-relative path to an existing file while enforcing containment.
    Raises PathViolation if the resolved path escapes base_real.
    """
    resolved = contained_path(base_real, rel_path)
    if not os.path.isfile(resolved):
        raise FileNotFoundError(f"File expected for modification not found: '{rel_path}'")
    return resolved


def _backup_path(dest: str, backup_ext: str) -> str:
    ext = backup_ext if backup_ext.startswith(".") else "." + backup_ext
    return dest + ext


def _write_text(path: str, content: str) -> None:
    # newline="" so "\r\n" documents are written back unchanged.
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)


def _read_text(path: str) -> str:
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def commit_changes(
    base_path: str,
    changes: List[Change],
    *,
    mode: str = "best_effort",
    atomic: bool = False,
    dry_run: bool = False,
    backup_ext: str | None = None,
) -> CommitSummary:
    """
    Write wrapped documents back to disk.

    Args:
        base_path: Root directory the change paths are relative to.
        changes: 'modify' Changes, usually from plan_soft_breaks.
        mode: "best_effort" (default) writes what it can and accumulates failures;
              "fail_fast" stops at the first validation/write error.
        atomic: If True, stage every document to a same-directory tempfile and
                then promote via os.replace(). With mode="fail_fast", earlier
                promotions are rolled back when a later one fails.
        dry_run: If True, validate and report only; nothing is written.
        backup_ext: Optional extension (".bak" or "bak") for a copy of each
                    document's previous content.

    Returns:
        CommitSummary listing written and failed paths.
    """
    if mode not in {"best_effort", "fail_fast"}:
        raise ValueError("mode must be one of {'best_effort','fail_fast'}")

    summary = CommitSummary(dry_run=dry_run)
    base_real = os.path.realpath(base_path)

    def _fail(ch: Change, e: Exception) -> None:
        summary.failed.append(ch.path)
        summary.errors[ch.path] = str(e)
        log.debug("Commit failed for %s: %s", ch.path, e)

    normalized: List[Tuple[Change, str]] = []
    for ch in changes:
        try:
            if ch.action != "modify":
                raise ValueError(f"Unsupported action '{ch.action}' for '{ch.path}'")
            normalized.append((ch, _normalized_path(base_real, ch.path)))
        except (OSError, ValueError, PathViolation) as e:
            _fail(ch, e)
            if mode == "fail_fast":
                return summary

    if dry_run:
        for ch, resolved in normalized:
            dirpath = os.path.dirname(resolved)
            if not os.access(dirpath, os.W_OK):
                _fail(ch, PermissionError(f"No write permission for directory '{dirpath}'"))
                if mode == "fail_fast":
                    return summary
                continue
            summary.success.append(
                f"DRY RUN: Would modify file {ch.path} ({len(ch.new_content or '')} chars)"
            )
        return summary

    if atomic:
        staged: Dict[str, str] = {}  # dest -> tmp
        staging_failed = False

        for ch, resolved in normalized:
            try:
                fd, tmp = tempfile.mkstemp(prefix=".sb-", suffix=".tmp", dir=os.path.dirname(resolved))
                with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
                    f.write(ch.new_content or "")
                staged[resolved] = tmp
            except OSError as e:
                _fail(ch, e)
                staging_failed = True
                if mode == "fail_fast":
                    break

        if staging_failed and mode == "fail_fast":
            # Nothing promoted yet: drop the stage files and leave the tree untouched.
            for tmp in staged.values():
                with contextlib.suppress(OSError):
                    os.remove(tmp)
            return summary

        promoted: List[Tuple[str, Change]] = []
        for ch, resolved in normalized:
            tmp = staged.get(resolved)
            if tmp is None:
                # Staging already failed and was recorded.
                continue
            try:
                if ch.original_content is None:
                    ch.original_content = _read_text(resolved)
                if backup_ext:
                    _write_text(_backup_path(resolved, backup_ext), ch.original_content)
                # mkstemp creates 0600 files; keep the document's own permissions.
                shutil.copymode(resolved, tmp)
                os.replace(tmp, resolved)
                summary.success.append(ch.path)
                promoted.append((resolved, ch))
            except (OSError, UnicodeDecodeError) as e:
                _fail(ch, e)
                with contextlib.suppress(OSError):
                    if os.path.exists(tmp):
                        os.remove(tmp)

                if mode == "fail_fast":
                    for _ch, later_resolved in normalized:
                        later_tmp = staged.get(later_resolved)
                        if later_tmp and os.path.exists(later_tmp):
                            with contextlib.suppress(OSError):
                                os.remove(later_tmp)
                    for pth, pch in reversed(promoted):
                        with contextlib.suppress(OSError):
                            _write_text(pth, pch.original_content or "")
                    summary.success.clear()
                    return summary
        return summary

    # Non-atomic: write each document in place, no rollback.
    for ch, resolved in normalized:
        try:
            if backup_ext:
                shutil.copy2(resolved, _backup_path(resolved, backup_ext))
            if ch.original_content is None:
                ch.original_content = _read_text(resolved)
            _write_text(resolved, ch.new_content or "")
            summary.success.append(ch.path)
        except (OSError, UnicodeDecodeError) as e:
            _fail(ch, e)
            if mode == "fail_fast":
                return summary

    return summary
