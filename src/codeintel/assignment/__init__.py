"""
Key-to-shard assignment.
"""

from .hash_routing import hash_bucket
from .shard_router import ShardRouter

__all__ = ["hash_bucket", "ShardRouter"]
