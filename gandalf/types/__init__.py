"""Gandalf client type definitions.

This module exports all data model types used by the client.
"""

from gandalf.types.gittime import GIT_TIME_FORMAT, format_git_time, parse_git_time
from gandalf.types.repositories import Author, Commit, Log, Repository
from gandalf.types.users import User

__all__ = [
    # Repository types
    "Repository",
    "Author",
    "Commit",
    "Log",
    # User types
    "User",
    # Time handling
    "GIT_TIME_FORMAT",
    "parse_git_time",
    "format_git_time",
]
