# conftest.py - pytest configuration
import pytest


@pytest.fixture
def write_doc(tmp_path):
    """Create a document under tmp_path, making parent directories as needed."""
    def _write(rel_path: str, text: str):
        target = tmp_path / rel_path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(text.encode("utf-8"))
        return target

    return _write
