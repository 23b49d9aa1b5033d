from .core import Change, CommitSummary, commit_changes

__all__ = ["Change", "CommitSummary", "commit_changes"]
