# softbreaks/models/buffer.py
from __future__ import annotations

import re
from typing import List, Protocol, runtime_checkable

# "\r\n" first so a CRLF pair is one separator, not a "\r" left on the line.
_LINE_END_RE = re.compile(r"(\r\n|\n)")


@runtime_checkable
class LineBuffer(Protocol):
    """
    Indexed access to a document owned by someone else (an editor, a file).

    `set_line` may receive text holding a single "\\n"; the buffer is then
    expected to turn it into two lines and shift every following index by one.
    """

    def line_count(self) -> int: ...

    def get_line(self, index: int) -> str: ...

    def set_line(self, index: int, text: str) -> None: ...


class ListBuffer:
    """
    In-memory LineBuffer over a list of strings.

    Every line keeps its own ending, so documents mixing "\\n" and "\\r\\n"
    round-trip unchanged. Lines created by a split use `newline`.
    """

    def __init__(self, lines: List[str] | None = None, *, newline: str = "\n", trailing_newline: bool = False):
        self.lines: List[str] = list(lines or [])
        self.newline = newline
        self.endings: List[str] = [newline] * len(self.lines)
        if self.endings and not trailing_newline:
            self.endings[-1] = ""

    @classmethod
    def from_text(cls, text: str) -> "ListBuffer":
        """
        Split `text` on "\\n" and "\\r\\n", remembering each line's ending.
        The most common ending becomes the separator for inserted lines.
        """
        buf = cls()
        if not text:
            return buf
        parts = _LINE_END_RE.split(text)
        lines, endings = parts[0::2], parts[1::2] + [""]
        if text.endswith("\n"):
            # The split leaves an empty piece after the final separator.
            lines.pop()
            endings.pop()
        buf.lines = lines
        buf.endings = endings
        if endings.count("\r\n") > endings.count("\n"):
            buf.newline = "\r\n"
        return buf

    @property
    def trailing_newline(self) -> bool:
        return bool(self.endings) and self.endings[-1] != ""

    def to_text(self) -> str:
        return "".join(line + end for line, end in zip(self.lines, self.endings))

    def line_count(self) -> int:
        return len(self.lines)

    def get_line(self, index: int) -> str:
        return self.lines[index]

    def set_line(self, index: int, text: str) -> None:
        pieces = text.split("\n")
        # The last piece inherits the replaced line's own ending.
        endings = [self.newline] * (len(pieces) - 1) + [self.endings[index]]
        self.lines[index : index + 1] = pieces
        self.endings[index : index + 1] = endings

    def __repr__(self) -> str:
        return f"ListBuffer({self.lines!r})"
