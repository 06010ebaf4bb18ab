"""codeintel - shard hashing and commit graph helpers for code intelligence indexes."""

__version__ = "0.1.0"

from .assignment import ShardRouter, hash_bucket  # noqa: E402
from .commits import CommitGraph, NearestCommit, flatten_commit_parents  # noqa: E402
from .exceptions import CodeIntelError, InvalidArgument, MalformedInput  # noqa: E402

__all__ = [
    "hash_bucket",
    "ShardRouter",
    "flatten_commit_parents",
    "CommitGraph",
    "NearestCommit",
    "CodeIntelError",
    "InvalidArgument",
    "MalformedInput",
]
