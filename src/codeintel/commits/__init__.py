"""
Commit log parsing and ancestry graph.
"""

from .graph import CommitGraph, NearestCommit
from .parents import ROOT_PARENT, flatten_commit_parents, flatten_log_output

__all__ = [
    "CommitGraph",
    "NearestCommit",
    "ROOT_PARENT",
    "flatten_commit_parents",
    "flatten_log_output",
]
