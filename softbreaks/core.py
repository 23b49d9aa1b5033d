# softbreaks/core.py
import logging
from typing import Any

from ._logging import resolve_logger
from .models.buffer import LineBuffer, ListBuffer
from .models.result import Split
from .settings import Settings, parse_column
from .wrap.fence import is_fence_line
from .wrap.line import wrap_line


def resolve_column(col: Any = None, settings: Settings | None = None) -> int:
    """Column limit from an explicit value, else the settings, else the default."""
    if col is not None:
        return parse_column(col)
    if settings is not None:
        return parse_column(settings.col)
    return parse_column(None)


def insert_soft_breaks(
    buffer: LineBuffer,
    col: Any = None,
    *,
    settings: Settings | None = None,
    logger: logging.Logger | None = None,
    log: bool = False,
) -> int:
    """
    Run one top-to-bottom pass over `buffer`, breaking every line longer than
    the column limit once.

    Lines inside fenced code blocks are left alone. A continuation line written
    by this pass is not looked at again, so a very long line comes out as two
    lines, the second possibly still over the limit.

    Returns the number of lines that were split.
    """
    lg = resolve_logger(logger=logger, enabled=log, name=__name__)
    limit = resolve_column(col, settings)

    in_code_block = False
    inserted = 0
    splits = 0
    for original in range(buffer.line_count()):
        index = original + inserted
        line = buffer.get_line(index)

        if is_fence_line(line):
            in_code_block = not in_code_block
        if in_code_block:
            continue

        result = wrap_line(line, limit)
        if not isinstance(result, Split):
            continue

        before = buffer.line_count()
        buffer.set_line(index, result.joined("\n"))
        lg.debug("Split line %d at column %d", original + 1, len(result.first))
        # Step past everything the host inserted so no continuation is revisited.
        inserted += buffer.line_count() - before
        splits += 1

    if in_code_block:
        lg.debug("Document ends inside an unclosed code fence")
    lg.info("Inserted %d soft break(s) at column %d", splits, limit)
    return splits


def wrap_text(text: str, col: Any = None, **kwargs: Any) -> str:
    """Insert soft breaks into a whole document held in a string."""
    buffer = ListBuffer.from_text(text)
    insert_soft_breaks(buffer, col, **kwargs)
    return buffer.to_text()
