from .buffer import LineBuffer, ListBuffer
from .result import UNCHANGED, Split

__all__ = ["LineBuffer", "ListBuffer", "Split", "UNCHANGED"]
