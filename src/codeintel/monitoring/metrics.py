"""Prometheus metrics for codeintel components."""

from prometheus_client import Counter

# Counters
SHARD_ROUTES = Counter(
    "codeintel_shard_routes_total", "Number of keys routed to a shard", ["addr"]
)
COMMIT_EDGES = Counter(
    "codeintel_commit_edges_total", "Number of parent edges produced from commit logs"
)
MALFORMED_COMMIT_LINES = Counter(
    "codeintel_malformed_commit_lines_total",
    "Commit log inputs rejected as malformed",
)

__all__ = [
    "SHARD_ROUTES",
    "COMMIT_EDGES",
    "MALFORMED_COMMIT_LINES",
]
