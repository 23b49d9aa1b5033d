from .base import SoftBreaksError


class PathViolation(SoftBreaksError):
    """A document path resolves outside of the base directory."""
