from .base import SoftBreaksError
from .path import PathViolation
from .plan import PlanError
from .settings import SettingsError

__all__ = ["SoftBreaksError", "SettingsError", "PlanError", "PathViolation"]
