"""
Unit Tests for the Tool Repository

Load-on-start, save-on-mutation, fallback to defaults and reset.
"""

import json
from datetime import date

import pytest
from pydantic import ValidationError

from toolvault.storage import STORAGE_KEY, ToolNotFoundError, ToolRepository, default_tools


DEFAULT_IDS = [
    "tool-default-milwaukee-drill",
    "tool-default-makita-saw",
    "tool-default-dewalt-driver",
    "tool-default-stihl-chainsaw",
    "tool-default-bosch-hammer",
]


@pytest.fixture
def storage_file(tmp_path):
    return str(tmp_path / "tools.json")


class TestLoading:
    """Initial load and fallback to defaults."""

    def test_in_memory_starts_with_defaults(self, repository):
        assert [tool.id for tool in repository.list()] == DEFAULT_IDS
        assert len(repository) == 5

    def test_missing_file_uses_defaults(self, storage_file):
        assert len(ToolRepository(path=storage_file)) == 5

    def test_corrupt_file_uses_defaults(self, storage_file):
        with open(storage_file, "w") as f:
            f.write("{not json")

        assert [tool.id for tool in ToolRepository(path=storage_file).list()] == DEFAULT_IDS

    def test_empty_collection_uses_defaults(self, storage_file):
        with open(storage_file, "w") as f:
            json.dump({STORAGE_KEY: []}, f)

        assert len(ToolRepository(path=storage_file)) == 5

    def test_invalid_record_uses_defaults(self, storage_file):
        with open(storage_file, "w") as f:
            json.dump({STORAGE_KEY: [{"id": "broken"}]}, f)

        assert len(ToolRepository(path=storage_file)) == 5

    def test_defaults_are_fresh_copies(self):
        first, second = default_tools(), default_tools()

        assert first == second
        assert first[0] is not second[0]


class TestMutations:
    """Add, update and delete persist the whole collection."""

    def test_add_prepends_and_persists(self, storage_file, tool_factory):
        repository = ToolRepository(path=storage_file)

        repository.add(tool_factory(id="tool-new"))

        assert repository.list()[0].id == "tool-new"
        reloaded = ToolRepository(path=storage_file)
        assert len(reloaded) == 6
        assert reloaded.list()[0].id == "tool-new"
        assert reloaded.get("tool-new") == repository.get("tool-new")

    def test_update_merges_fields(self, repository):
        updated = repository.update("tool-default-makita-saw", {"notes": "Blade replaced", "id": "ignored"})

        assert updated.id == "tool-default-makita-saw"
        assert updated.notes == "Blade replaced"
        assert updated.brand == "makita"
        assert repository.get("tool-default-makita-saw").notes == "Blade replaced"
        assert [tool.id for tool in repository.list()] == DEFAULT_IDS

    def test_update_unknown_tool(self, repository):
        with pytest.raises(ToolNotFoundError):
            repository.update("tool-missing", {"notes": "x"})

    def test_update_rejects_invalid_record(self, repository):
        with pytest.raises(ValidationError):
            repository.update("tool-default-makita-saw", {"warranty_end_date": date(2000, 1, 1)})

        assert repository.get("tool-default-makita-saw").warranty_end_date == date(2026, 11, 2)

    def test_delete(self, storage_file):
        repository = ToolRepository(path=storage_file)

        assert repository.delete("tool-default-dewalt-driver") is True
        assert repository.delete("tool-default-dewalt-driver") is False
        assert ToolRepository(path=storage_file).get("tool-default-dewalt-driver") is None

    def test_other_keys_are_preserved(self, storage_file, tool_factory):
        with open(storage_file, "w") as f:
            json.dump({"settings": {"theme": "dark"}}, f)

        ToolRepository(path=storage_file).add(tool_factory())

        with open(storage_file) as f:
            document = json.load(f)
        assert document["settings"] == {"theme": "dark"}
        assert len(document[STORAGE_KEY]) == 6

    def test_storage_key_isolates_collections(self, storage_file, tool_factory):
        ToolRepository(path=storage_file, storage_key="garage-a").add(tool_factory())

        assert len(ToolRepository(path=storage_file, storage_key="garage-a")) == 6
        assert ToolRepository(path=storage_file, storage_key="garage-b").get("tool-test-drill") is None


class TestLookupAndReset:

    def test_require_unknown_raises_key_error(self, repository):
        with pytest.raises(KeyError):
            repository.require("tool-missing")

    def test_get_unknown_returns_none(self, repository):
        assert repository.get("tool-missing") is None

    def test_reset_to_defaults(self, storage_file, tool_factory):
        repository = ToolRepository(path=storage_file)
        repository.add(tool_factory())
        repository.delete("tool-default-bosch-hammer")

        tools = repository.reset_to_defaults()

        assert [tool.id for tool in tools] == DEFAULT_IDS
        with open(storage_file) as f:
            assert STORAGE_KEY not in json.load(f)
        assert [tool.id for tool in ToolRepository(path=storage_file).list()] == DEFAULT_IDS


class TestFailedWrites:
    """A failed write leaves memory and the stored file as they were."""

    @pytest.fixture
    def failing_replace(self, monkeypatch):
        def fail(src, dst):
            raise OSError("disk full")

        monkeypatch.setattr("toolvault.storage.repository.os.replace", fail)

    def test_add(self, storage_file, tool_factory, failing_replace):
        repository = ToolRepository(path=storage_file)

        with pytest.raises(OSError, match="disk full"):
            repository.add(tool_factory(id="tool-new"))

        assert repository.get("tool-new") is None
        assert [tool.id for tool in repository.list()] == DEFAULT_IDS

    def test_update(self, storage_file, failing_replace):
        repository = ToolRepository(path=storage_file)

        with pytest.raises(OSError):
            repository.update("tool-default-makita-saw", {"notes": "Blade replaced"})

        assert repository.get("tool-default-makita-saw").notes != "Blade replaced"

    def test_delete(self, storage_file, failing_replace):
        repository = ToolRepository(path=storage_file)

        with pytest.raises(OSError):
            repository.delete("tool-default-dewalt-driver")

        assert repository.get("tool-default-dewalt-driver") is not None
        assert len(repository) == 5

    def test_reset_keeps_stored_collection(self, storage_file, tool_factory, monkeypatch):
        repository = ToolRepository(path=storage_file)
        repository.add(tool_factory(id="tool-new"))

        def fail(src, dst):
            raise OSError("disk full")

        monkeypatch.setattr("toolvault.storage.repository.os.replace", fail)

        with pytest.raises(OSError):
            repository.reset_to_defaults()

        assert repository.get("tool-new") is not None
        with open(storage_file) as f:
            assert len(json.load(f)[STORAGE_KEY]) == 6
