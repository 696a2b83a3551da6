"""kaam: a personal task list kept in one plain-text file."""

__version__ = "0.1.0"
