from .commit import Change, CommitSummary, commit_changes
from .core import insert_soft_breaks, resolve_column, wrap_text
from .models import UNCHANGED, LineBuffer, ListBuffer, Split
from .plan import plan_soft_breaks
from .settings import DEFAULT_COL, DEFAULT_SETTINGS, Settings, load_settings, parse_column, save_settings
from .wrap import detect_prefix, is_fence_line, wrap_line
from .errors import (
    PathViolation,
    PlanError,
    SettingsError,
    SoftBreaksError,
)

__all__ = [
    "wrap_line",
    "detect_prefix",
    "is_fence_line",
    "insert_soft_breaks",
    "wrap_text",
    "resolve_column",
    "LineBuffer",
    "ListBuffer",
    "Split",
    "UNCHANGED",
    "Settings",
    "DEFAULT_SETTINGS",
    "DEFAULT_COL",
    "parse_column",
    "load_settings",
    "save_settings",
    "plan_soft_breaks",
    "commit_changes",
    "Change",
    "CommitSummary",
    "SoftBreaksError",
    "SettingsError",
    "PlanError",
    "PathViolation",
]
