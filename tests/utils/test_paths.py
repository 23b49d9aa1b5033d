import os

import pytest

from softbreaks.errors import PathViolation
from softbreaks.utils.paths import contained_path


def test_resolves_nested_path(tmp_path):
    base = os.path.realpath(str(tmp_path))
    assert contained_path(base, "docs/a.md") == os.path.join(base, "docs", "a.md")


def test_backslash_separators_are_accepted(tmp_path):
    base = os.path.realpath(str(tmp_path))
    assert contained_path(base, "docs\\a.md") == os.path.join(base, "docs", "a.md")


def test_escape_raises(tmp_path):
    base = os.path.realpath(str(tmp_path / "docs"))
    with pytest.raises(PathViolation, match="Path traversal attempt detected"):
        contained_path(base, "../secret.md")


def test_sibling_with_common_prefix_is_rejected(tmp_path):
    (tmp_path / "docs").mkdir()
    (tmp_path / "docs-old").mkdir()
    base = os.path.realpath(str(tmp_path / "docs"))
    with pytest.raises(PathViolation):
        contained_path(base, "../docs-old/a.md")
