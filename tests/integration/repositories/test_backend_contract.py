"""
FileBackend Contract Tests.

Any FileBackend implementation MUST pass these tests.
This ensures backends are interchangeable under StickyStore.

To add a new backend:
1. Implement the FileBackend interface
2. Add a test class that inherits FileBackendContractTests
3. Provide a `backend` fixture that returns your implementation
"""

from abc import ABC

import pytest

from sticky.repositories import JsonFileBackend
from fakes import MemoryBackend


class FileBackendContractTests(ABC):
    """
    Contract tests that any file backend must pass.

    Subclass this and provide a `backend` fixture.
    """

    def test_read_missing_returns_none(self, backend):
        assert backend.read("Missing") is None

    def test_write_then_read(self, backend):
        backend.write("Item", b"[1, 2]")
        assert backend.read("Item") == b"[1, 2]"

    def test_write_overwrites(self, backend):
        backend.write("Item", b"[1, 2, 3, 4]")
        backend.write("Item", b"[]")
        assert backend.read("Item") == b"[]"

    def test_types_are_independent(self, backend):
        backend.write("Item", b"[1]")
        backend.write("Note", b"[2]")

        assert backend.read("Item") == b"[1]"
        assert backend.read("Note") == b"[2]"

    def test_path_for_names_type(self, backend):
        path = backend.path_for("Item")
        assert path.name == "Item.json"
        assert backend.path_for("Note") != path


@pytest.mark.integration
class TestJsonFileBackend(FileBackendContractTests):
    """Run contract tests against JsonFileBackend."""

    @pytest.fixture
    def backend(self, temp_dir):
        return JsonFileBackend(temp_dir / "data")

    def test_creates_directory_on_first_write(self, temp_dir):
        backend = JsonFileBackend(temp_dir / "nested" / "data")
        backend.write("Item", b"[]")

        assert (temp_dir / "nested" / "data" / "Item.json").exists()

    def test_unwritable_location_raises_oserror(self, temp_dir):
        blocker = temp_dir / "blocker"
        blocker.write_text("file")
        backend = JsonFileBackend(blocker)

        with pytest.raises(OSError):
            backend.write("Item", b"[]")


@pytest.mark.integration
class TestMemoryBackend(FileBackendContractTests):
    """The in-memory test double must honour the same contract."""

    @pytest.fixture
    def backend(self):
        return MemoryBackend()
