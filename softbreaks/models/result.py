from dataclasses import dataclass


@dataclass(frozen=True)
class Split:
    """A line broken in two at a word boundary."""
    first: str   # original text up to and including the last word that fits
    second: str  # continuation prefix followed by the carried-over words

    def joined(self, sep: str = "\n") -> str:
        return f"{self.first}{sep}{self.second}"


class _Unchanged:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNCHANGED"

    def __bool__(self) -> bool:
        return False


# Returned by wrap_line when a line must be left as-is.
UNCHANGED = _Unchanged()
