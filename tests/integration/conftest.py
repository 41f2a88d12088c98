"""
Integration test fixtures.

Integration tests:
- Test component boundaries
- Use real I/O but to temp locations
- Should be deterministic
"""

import shutil
import tempfile
from pathlib import Path

import pytest

from sticky import LogStyle, StickyConfiguration, StickyLogger, StickyStore


@pytest.fixture
def temp_dir():
    """Temporary directory for test data."""
    d = tempfile.mkdtemp()
    yield Path(d)
    shutil.rmtree(d, ignore_errors=True)


@pytest.fixture
def data_dir(temp_dir):
    """Directory the store writes into (created lazily by the backend)."""
    return temp_dir / "sticky"


@pytest.fixture
def config(data_dir):
    return StickyConfiguration(data_dir=data_dir, log_style=LogStyle.VERBOSE)


@pytest.fixture
def make_store(config, log_capture):
    """Factory for fresh stores over the same directory (simulates restarts)."""
    def build() -> StickyStore:
        return StickyStore(config=config, logger=StickyLogger(config.log_style, writer=log_capture))
    return build


@pytest.fixture
def store(make_store):
    return make_store()
