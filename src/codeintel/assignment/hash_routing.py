"""Hash-based shard routing utilities."""

import hashlib

from codeintel.exceptions import InvalidArgument


def hash_bucket(key: str, bucket_count: int) -> int:
    """
    Deterministic hash -> bucket id using the first 8 bytes of an MD5 digest.

    Must stay bit-compatible with the gitserver client, which reads the digest
    prefix as a big-endian uint64 and takes it modulo the shard count.

    Args:
        key: Input string (e.g., repository name)
        bucket_count: Number of buckets (>= 1)

    Returns:
        Integer in range [0, bucket_count - 1]
    """
    if isinstance(bucket_count, bool) or not isinstance(bucket_count, int):
        raise InvalidArgument("bucket_count must be an integer")
    if bucket_count < 1:
        raise InvalidArgument("bucket_count must be >= 1")

    digest = hashlib.md5(key.encode("utf-8"), usedforsecurity=False).digest()
    value = int.from_bytes(digest[:8], "big")
    return value % bucket_count


__all__ = ["hash_bucket"]
