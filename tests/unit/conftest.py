"""
Unit test fixtures.

All unit tests should be:
- Fast (< 100ms)
- Isolated (in-memory backend, no real files)
- Deterministic (same result every time)
"""

import pytest

from fakes import Item, Note


@pytest.fixture
def items():
    """[{key:1,val:"a"},{key:2,val:"b"}]"""
    return [Item(key=1, val="a"), Item(key=2, val="b")]


@pytest.fixture
def notes():
    return [Note(title="first", body="one"), Note(title="second", body="two")]
