"""
Column-width configuration.

The only persisted setting is `col`, stored as a string the way a text
field hands it over. Every route to a column width goes through
parse_column, which never fails: junk falls back to DEFAULT_COL.
"""
from __future__ import annotations

import json
import logging
import os
import re
from dataclasses import asdict, dataclass, fields
from typing import Any

from .errors import SettingsError

log = logging.getLogger(__name__)

DEFAULT_COL = 80
MIN_COL = 2

# Leading whitespace, optional sign, then digits; anything after is ignored.
_INT_PREFIX_RE = re.compile(r"^\s*([+-]?\d+)")


@dataclass
class Settings:
    col: str = str(DEFAULT_COL)


DEFAULT_SETTINGS = Settings()


def parse_column(value: Any) -> int:
    """
    Effective column limit for a raw configured value.

    "72" -> 72, " 100abc" -> 100, "abc" -> 80, "1" -> 80, None -> 80.
    """
    if isinstance(value, bool) or value is None:
        return DEFAULT_COL
    if isinstance(value, int):
        col = value
    else:
        m = _INT_PREFIX_RE.match(str(value))
        if not m:
            return DEFAULT_COL
        col = int(m.group(1))
    if col < MIN_COL:
        return DEFAULT_COL
    return col


def load_settings(path: str) -> Settings:
    """
    Read settings from a JSON object file, layered over the defaults.

    Unknown keys are ignored. A missing file yields the defaults; an
    unreadable or malformed one does too, with a warning.
    """
    if not os.path.exists(path):
        return Settings()
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        log.warning("Ignoring settings file %s: %s", path, e)
        return Settings()
    if not isinstance(data, dict):
        log.warning("Ignoring settings file %s: expected a JSON object", path)
        return Settings()

    merged = asdict(DEFAULT_SETTINGS)
    known = {f.name for f in fields(Settings)}
    merged.update({k: str(v) for k, v in data.items() if k in known and v is not None})
    return Settings(**merged)


def save_settings(path: str, settings: Settings) -> None:
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(asdict(settings), f, indent=2)
            f.write("\n")
    except OSError as e:
        raise SettingsError(f"Failed to write settings to '{path}': {e}") from e
