from .base import SoftBreaksError


class PlanError(SoftBreaksError):
    """A document selected for wrapping could not be read."""
