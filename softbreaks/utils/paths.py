# softbreaks/utils/paths.py
import os

from ..errors.path import PathViolation


def contained_path(base_real: str, rel_path: str) -> str:
    """
    Resolve a base-relative path (either slash style) and enforce that it
    stays inside base_real. Raises PathViolation otherwise.
    """
    resolved = os.path.realpath(os.path.join(base_real, *rel_path.replace("\\", "/").split("/")))
    if os.path.commonpath([base_real, resolved]) != base_real:
        raise PathViolation(f"Path traversal attempt detected for '{rel_path}'")
    return resolved
