import re

# Three backticks once leading whitespace is stripped; the info string is ignored.
FENCE_RE = re.compile(r"^\s*```")


def is_fence_line(line: str) -> bool:
    """True when `line` opens or closes a fenced code block."""
    return FENCE_RE.match(line) is not None
