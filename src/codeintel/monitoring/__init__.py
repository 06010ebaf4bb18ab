"""
Monitoring utilities for codeintel.
"""

from codeintel.monitoring.metrics import COMMIT_EDGES, MALFORMED_COMMIT_LINES, SHARD_ROUTES

__all__ = ["SHARD_ROUTES", "COMMIT_EDGES", "MALFORMED_COMMIT_LINES"]
