"""Insert soft breaks into markdown documents from the command line.

Usage:
    python -m softbreaks [paths...] [--col N] [--settings FILE] [--check]

With no paths the document is read from stdin and written to stdout.
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional

from .commit import commit_changes
from .core import wrap_text
from .errors import SoftBreaksError
from .plan import plan_soft_breaks
from .settings import Settings, load_settings

log = logging.getLogger("softbreaks")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="softbreaks",
        description="Break long markdown lines at the column limit, keeping list, quote and indent alignment.",
    )
    p.add_argument("paths", nargs="*", help="Files or directories to rewrite (default: stdin to stdout)")
    p.add_argument("--col", help="Column limit (default: settings file, else 80)")
    p.add_argument("--settings", help="JSON settings file holding {\"col\": \"80\"}")
    p.add_argument("--check", action="store_true", help="Only report; exit 1 if any file would change")
    p.add_argument("--dry-run", action="store_true", help="Validate writes without touching files")
    p.add_argument("--atomic", action="store_true", help="Stage all files and promote them together")
    p.add_argument("--fail-fast", action="store_true", help="Stop at the first failed write")
    p.add_argument("--backup-ext", help="Keep the previous content next to each file, e.g. .bak")
    p.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
    return p


def _run_paths(args: argparse.Namespace, settings: Settings) -> int:
    changed = 0
    failed = 0
    for target in args.paths:
        if os.path.isdir(target):
            base, files = target, None
        else:
            base, files = os.path.dirname(target) or ".", [os.path.basename(target)]

        changes = plan_soft_breaks(base, files, col=args.col, settings=settings, log_callback=log.info)
        changed += len(changes)
        if args.check:
            for ch in changes:
                print(f"would wrap {os.path.join(base, ch.path)}")
            continue

        summary = commit_changes(
            base,
            changes,
            mode="fail_fast" if args.fail_fast else "best_effort",
            atomic=args.atomic,
            dry_run=args.dry_run,
            backup_ext=args.backup_ext,
        )
        for entry in summary.success:
            log.info("%s", entry)
        for path, err in summary.errors.items():
            print(f"error: {os.path.join(base, path)}: {err}", file=sys.stderr)
        failed += len(summary.failed)

    if failed:
        return 2
    if args.check and changed:
        return 1
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    settings = load_settings(args.settings) if args.settings else Settings()

    try:
        if not args.paths:
            # Bytes in and out so "\r\n" endings survive like they do for files.
            text = sys.stdin.buffer.read().decode("utf-8")
            wrapped = wrap_text(text, args.col, settings=settings)
            if args.check:
                return 1 if wrapped != text else 0
            sys.stdout.buffer.write(wrapped.encode("utf-8"))
            sys.stdout.buffer.flush()
            return 0
        return _run_paths(args, settings)
    except SoftBreaksError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    except UnicodeDecodeError as e:
        print(f"error: stdin is not UTF-8: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
