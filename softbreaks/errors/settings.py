from .base import SoftBreaksError


class SettingsError(SoftBreaksError):
    """Settings could not be persisted."""
