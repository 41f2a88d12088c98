"""
Root test configuration.

Test organization:
- unit/        Fast, isolated, in-memory backends
- integration/ Real files in temp directories

Run specific levels:
    pytest tests/unit -v           # Fast feedback loop
    pytest tests/integration -v    # Before commit
    pytest tests -v                # Everything
"""

import sys
from pathlib import Path

# Add project root and shared test helpers to path
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent))

import pytest

from sticky import LogStyle, StickyConfiguration, StickyLogger, StickyStore
from fakes import LogCapture, MemoryBackend


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Fast isolated tests")
    config.addinivalue_line("markers", "integration: Component boundary tests")
    config.addinivalue_line("markers", "slow: Tests that take > 1s")


@pytest.fixture
def log_capture():
    """Collects log lines instead of printing them."""
    return LogCapture()


@pytest.fixture
def verbose_logger(log_capture):
    return StickyLogger(LogStyle.VERBOSE, writer=log_capture)


@pytest.fixture
def memory_backend():
    return MemoryBackend()


@pytest.fixture
def memory_store(memory_backend, verbose_logger):
    """Store over an in-memory backend with verbose logging captured."""
    config = StickyConfiguration(data_dir=Path("/memory"), log_style=LogStyle.VERBOSE)
    return StickyStore(config=config, backend=memory_backend, logger=verbose_logger)
