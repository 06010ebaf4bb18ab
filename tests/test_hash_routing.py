"""Tests for MD5 bucket hashing."""

import hashlib
import struct
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from codeintel.assignment.hash_routing import hash_bucket  # noqa: E402
from codeintel.exceptions import InvalidArgument  # noqa: E402

# Generated by the Go gitserver client:
#   sum := md5.Sum([]byte(value)); val := binary.BigEndian.Uint64(sum[:]); val % uint64(i)
GITSERVER_BUCKETS = {
    "foobar": (
        "0 1 0 1 4 3 2 1 0 9 7 9 12 9 9 1 "
        "16 9 12 9 9 7 15 9 19 25 9 9 26 9 21 "
        "17 18 33 9 9 17 31 12 9 6 9 22 29 9 15 "
        "9 33 16 19 33 25 8 9 29 9 12 55 0 9 46 21 9 17"
    ),
    "github.com/sourcegraph/sourcegraph": (
        "0 0 1 0 3 4 6 4 1 8 10 4 11 6 13 12 "
        "1 10 0 8 13 10 3 4 13 24 19 20 4 28 3 28 "
        "10 18 13 28 22 0 37 28 15 34 4 32 28 26 30 28 "
        "13 38 1 24 41 46 43 20 19 4 20 28 29 34 55 60"
    ),
}


@pytest.mark.unit
@pytest.mark.parametrize("value", sorted(GITSERVER_BUCKETS))
def test_hash_bucket_matches_gitserver(value):
    """Test bucket ids match the Go implementation for 1..64 buckets."""
    expected = [int(x) for x in GITSERVER_BUCKETS[value].split(" ")]
    assert len(expected) == 64

    actual = [hash_bucket(value, i) for i in range(1, 65)]
    assert actual == expected


@pytest.mark.unit
def test_hash_bucket_uses_big_endian_digest_prefix():
    """Test the digest prefix is read as an unsigned big-endian 64-bit integer."""
    key = "github.com/gorilla/mux"
    (prefix,) = struct.unpack(">Q", hashlib.md5(key.encode("utf-8")).digest()[:8])

    for n in (2, 7, 1000, 2**31 - 1, 2**32 + 15, 2**63 + 1):
        assert hash_bucket(key, n) == prefix % n


@pytest.mark.unit
def test_hash_bucket_single_bucket():
    """Test that one bucket always maps to 0."""
    for key in ("a", "foobar", "github.com/sourcegraph/sourcegraph", "日本語"):
        assert hash_bucket(key, 1) == 0


@pytest.mark.unit
def test_hash_bucket_deterministic():
    """Test that same input produces same bucket."""
    key = "github.com/sourcegraph/lsif-go"
    assert hash_bucket(key, 17) == hash_bucket(key, 17)


@pytest.mark.unit
def test_hash_bucket_range():
    """Test results fall inside [0, n)."""
    for n in (1, 2, 3, 16, 255, 4096):
        for i in range(50):
            assert 0 <= hash_bucket(f"repo_{i}", n) < n


@pytest.mark.unit
def test_hash_bucket_no_normalization():
    """Test keys are hashed as given (case and whitespace matter)."""
    n = 2**32
    assert hash_bucket("Foobar", n) != hash_bucket("foobar", n)
    assert hash_bucket("foobar ", n) != hash_bucket("foobar", n)


@pytest.mark.unit
def test_hash_bucket_unicode():
    """Test non-ASCII keys hash their UTF-8 bytes."""
    key = "zażółć gęślą jaźń"
    (prefix,) = struct.unpack(">Q", hashlib.md5(key.encode("utf-8")).digest()[:8])
    assert hash_bucket(key, 97) == prefix % 97


@pytest.mark.unit
@pytest.mark.parametrize("bucket_count", [0, -1, -64])
def test_hash_bucket_invalid_bucket_count(bucket_count):
    """Test validation of bucket_count."""
    with pytest.raises(InvalidArgument, match="bucket_count must be >= 1"):
        hash_bucket("foobar", bucket_count)


@pytest.mark.unit
@pytest.mark.parametrize("bucket_count", [1.0, "4", None, True])
def test_hash_bucket_non_integer_bucket_count(bucket_count):
    """Test bucket_count must be a real integer."""
    with pytest.raises(InvalidArgument, match="must be an integer"):
        hash_bucket("foobar", bucket_count)


@pytest.mark.unit
def test_invalid_argument_is_value_error():
    with pytest.raises(ValueError):
        hash_bucket("foobar", 0)


@pytest.mark.unit
def test_hash_bucket_distribution():
    """Test that hashing spreads keys across buckets."""
    buckets = {hash_bucket(f"github.com/org/repo-{i}", 16) for i in range(160)}
    assert len(buckets) >= 12
