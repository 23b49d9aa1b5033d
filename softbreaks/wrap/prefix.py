# softbreaks/wrap/prefix.py
import re
from typing import Callable, List, Tuple

# Markers are indented with tabs only or spaces only, never a mix.
UNORDERED_LIST_RE = re.compile(r"^(?:\t*| *)-[ \t]+")
ORDERED_LIST_RE = re.compile(r"^(?:\t*| *)\d+\.[ \t]+")
BLOCKQUOTE_RE = re.compile(r"^(?:\t*| *)>[ \t]+")
# Leading spaces, optionally after tabs. A run of tabs alone does not count.
INDENT_RE = re.compile(r"^\t* +")


def _blank(lead_in: str) -> str:
    return " " * len(lead_in)


def _verbatim(lead_in: str) -> str:
    return lead_in


# Tried in order; the first pattern that matches decides the prefix.
LEAD_IN_RULES: List[Tuple["re.Pattern[str]", Callable[[str], str]]] = [
    (UNORDERED_LIST_RE, _blank),
    (ORDERED_LIST_RE, _blank),
    (BLOCKQUOTE_RE, _blank),
    (INDENT_RE, _verbatim),
]


def detect_prefix(raw_line: str) -> str:
    """
    Continuation prefix for a line that is about to be wrapped.

    List and quote markers become blank padding of the same width so the
    continuation lines up under the item text. Plain indentation is reused as is.
    """
    for pattern, render in LEAD_IN_RULES:
        m = pattern.match(raw_line)
        if m:
            return render(m.group(0))
    return ""
