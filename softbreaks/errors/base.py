class SoftBreaksError(Exception):
    """Base class for errors raised outside the wrapping core."""
