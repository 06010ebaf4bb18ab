"""Shard routing helpers for addressing repositories across backend shards."""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence

from codeintel.assignment.hash_routing import hash_bucket
from codeintel.exceptions import InvalidArgument
from codeintel.monitoring.metrics import SHARD_ROUTES
from codeintel.utils.logging import get_logger

logger = get_logger(__name__)


class ShardRouter:
    """Map keys (repository names) onto a fixed, ordered list of shard addresses."""

    def __init__(self, addrs: Sequence[str]) -> None:
        """
        Initialize shard router.

        Args:
            addrs: Shard addresses. Order matters: every peer that routes the
                same keys must use the same list in the same order.
        """
        if not addrs:
            raise InvalidArgument("at least one shard address is required")
        if any(not addr for addr in addrs):
            raise InvalidArgument("shard addresses must be non-empty")

        self.addrs: tuple[str, ...] = tuple(addrs)

    @property
    def shard_count(self) -> int:
        return len(self.addrs)

    def shard_for(self, key: str) -> int:
        """Hash a key to a shard index."""
        return hash_bucket(key, len(self.addrs))

    def addr_for(self, key: str) -> str:
        """Return the address of the shard responsible for the key."""
        addr = self.addrs[self.shard_for(key)]
        SHARD_ROUTES.labels(addr=addr).inc()
        logger.debug("shard_routed", key=key, addr=addr)
        return addr

    def group_by_addr(self, keys: Iterable[str]) -> Dict[str, List[str]]:
        """
        Partition keys by the address they route to.

        Keys keep their input order within each address; addresses appear in
        the order they were first hit.
        """
        groups: Dict[str, List[str]] = {}
        for key in keys:
            groups.setdefault(self.addr_for(key), []).append(key)
        return groups


__all__ = ["ShardRouter"]
