# softbreaks/utils/__init__.py
from .discover import DEFAULT_EXTENSIONS, find_documents
from .gitignore import get_gitignore
from .paths import contained_path

__all__ = ["DEFAULT_EXTENSIONS", "contained_path", "find_documents", "get_gitignore"]
