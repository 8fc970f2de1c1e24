"""smartcommit — conventional commit messages from unified diffs."""

__version__ = "0.1.0"
