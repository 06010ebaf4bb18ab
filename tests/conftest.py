import sys
from pathlib import Path

import pytest

# Ensure src/ is on sys.path for local test runs without installation
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "unit: fast unit tests")


@pytest.fixture
def clean_env(monkeypatch):
    """Remove codeintel environment variables so defaults apply."""
    for name in (
        "CODEINTEL_SHARD_ADDRS",
        "CODEINTEL_MAX_TRAVERSAL_DISTANCE",
        "CODEINTEL_JSON_LOGS",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def sample_log_lines():
    """
    Small history with a merge:

        a <- b <- d
        a <- c <- d   (d = merge of b, c; b is the first parent)
    """
    return ["d b c", "b a", "c a", "a"]


@pytest.fixture(autouse=True)
def reset_logging():
    """Point logging back at stderr after tests that swap streams."""
    yield
    from codeintel.utils.logging import configure_logging

    configure_logging(level="WARNING")
