# softbreaks/wrap/line.py
from typing import Optional, Union

from ..models.result import UNCHANGED, Split, _Unchanged
from .prefix import detect_prefix

# Tabs and spaces are interchangeable for every scan below.
_SPACE = " \t"


def _is_space(ch: str) -> bool:
    return ch in _SPACE


def _find_space(line: str, start: int) -> Optional[int]:
    for i in range(start, len(line)):
        if _is_space(line[i]):
            return i
    return None


def _find_non_space(line: str, start: int) -> Optional[int]:
    for i in range(start, len(line)):
        if not _is_space(line[i]):
            return i
    return None


def _rfind_space(line: str, start: int) -> Optional[int]:
    for i in range(start, -1, -1):
        if _is_space(line[i]):
            return i
    return None


def _rfind_non_space(line: str, start: int) -> Optional[int]:
    for i in range(start, -1, -1):
        if not _is_space(line[i]):
            return i
    return None


def _overflow_word_start(line: str, col: int) -> Optional[int]:
    """
    Index of the first character of the word that crosses or starts past `col`.
    None when the line cannot be broken at all.
    """
    if _is_space(line[col]):
        beg = _find_non_space(line, col + 1)
        # Only trailing whitespace past the limit.
        return len(line) if beg is None else beg

    space = _rfind_space(line, col - 1)
    if space is not None:
        return space + 1

    # One token runs from the start of the line through `col`: break after it.
    next_space = _find_space(line, col + 1)
    if next_space is None:
        return None
    return _find_non_space(line, next_space + 1)


def wrap_line(raw_line: str, col: int) -> Union[Split, _Unchanged]:
    """
    Break `raw_line` once so the first part ends on the last word boundary
    before the word overflowing `col`.

    Returns UNCHANGED for short lines and for anything that cannot be split
    between a word and the whitespace after it. The first part keeps the
    original lead-in untouched; the second part starts with the continuation
    prefix from detect_prefix.
    """
    if len(raw_line) <= col:
        return UNCHANGED

    prefix = detect_prefix(raw_line)
    line = prefix + raw_line[len(prefix):]

    overflow_word_beg = _overflow_word_start(line, col)
    if overflow_word_beg is None:
        return UNCHANGED

    last_word_end = _rfind_non_space(line, overflow_word_beg - 1)
    if last_word_end is None:
        # Nothing but the blanked-out lead-in before the overflow word.
        return UNCHANGED

    return Split(raw_line[: last_word_end + 1], prefix + line[overflow_word_beg:])
