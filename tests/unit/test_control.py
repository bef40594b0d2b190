"""Tests for the prompt library."""

import json

import pytest

from promptforge.core.exceptions import StorageError, ConfigurationError
from promptforge.control import (
    SavedPrompt,
    MemoryPromptStore,
    FilePromptStore,
    create_store,
)
from promptforge.enhancement import enhance


def _record(user_id="alice", created_at="2024-01-01T00:00:00+00:00", frameworks=None, **kwargs):
    return SavedPrompt(
        original_input=kwargs.get("original_input", "Help me write a blog post about coffee"),
        transformed_prompt=kwargs.get("transformed_prompt", "enhanced"),
        frameworks=frameworks if frameworks is not None else ["TCREI", "RSTI"],
        parameters={"wordCount": 800},
        use_case="general",
        user_id=user_id,
        id=kwargs.get("id", ""),
        created_at=created_at,
    )


@pytest.fixture(params=["memory", "file"])
def store(request, tmp_path):
    """Every backend must behave the same."""
    if request.param == "memory":
        return MemoryPromptStore()
    return FilePromptStore(str(tmp_path / "prompts.json"))


class TestSavedPrompt:
    """Tests for SavedPrompt."""

    def test_from_enhanced(self, coffee_prompt, parameters_dict):
        """Test building a record from a transformation."""
        record = SavedPrompt.from_enhanced(enhance(coffee_prompt, parameters_dict), "alice")
        assert record.original_input == coffee_prompt
        assert record.frameworks == ["TCREI", "RSTI"]
        assert record.parameters == parameters_dict
        assert record.use_case == "general"
        assert record.user_id == "alice"
        assert record.id == ""
        assert record.created_at

    def test_dict_round_trip(self):
        """Test serialization keeps every field."""
        record = _record(id="abc")
        assert SavedPrompt.from_dict(record.to_dict()) == record


class TestPromptStore:
    """Behaviour shared by all store backends."""

    def test_save_assigns_id(self, store):
        """Test save assigns an id."""
        record_id = store.save(_record())
        assert record_id
        assert store.get(record_id).user_id == "alice"

    def test_save_keeps_given_id(self, store):
        """Test an explicit id is kept."""
        assert store.save(_record(id="custom")) == "custom"

    def test_duplicate_id(self, store):
        """Test duplicate ids are rejected."""
        store.save(_record(id="dup"))
        with pytest.raises(StorageError):
            store.save(_record(id="dup"))

    def test_requires_user(self, store):
        """Test records need an owner."""
        with pytest.raises(StorageError):
            store.save(_record(user_id=""))

    def test_get_missing(self, store):
        """Test unknown ids."""
        assert store.get("missing") is None

    def test_list_by_user_newest_first(self, store):
        """Test per-user listing order."""
        store.save(_record(id="old", created_at="2024-01-01T00:00:00+00:00"))
        store.save(_record(id="new", created_at="2024-03-01T00:00:00+00:00"))
        store.save(_record(id="mid", created_at="2024-02-01T00:00:00+00:00"))
        store.save(_record(id="bob", user_id="bob"))

        assert [r.id for r in store.list_by_user("alice")] == ["new", "mid", "old"]
        assert [r.id for r in store.list_by_user("bob")] == ["bob"]
        assert store.list_by_user("carol") == []

    def test_equal_timestamps_newest_insert_first(self, store):
        """Test ties keep the most recently saved record first."""
        for record_id in ("a", "b", "c"):
            store.save(_record(id=record_id))
        assert [r.id for r in store.list_by_user("alice")] == ["c", "b", "a"]

    def test_list_all(self, store):
        """Test listing across users."""
        store.save(_record(id="1", user_id="alice", created_at="2024-01-01T00:00:00+00:00"))
        store.save(_record(id="2", user_id="bob", created_at="2024-01-02T00:00:00+00:00"))
        assert [r.id for r in store.list_all()] == ["2", "1"]

    def test_recent(self, store):
        """Test recent returns at most three records by default."""
        for day in range(1, 6):
            store.save(_record(id=str(day), created_at=f"2024-01-0{day}T00:00:00+00:00"))
        assert [r.id for r in store.recent("alice")] == ["5", "4", "3"]
        assert len(store.recent("alice", limit=1)) == 1

    def test_framework_usage(self, store):
        """Test framework usage counts."""
        store.save(_record(frameworks=["TCREI", "RSTI"]))
        store.save(_record(frameworks=["TCREI"]))
        store.save(_record(user_id="bob", frameworks=["TFCDC"]))

        assert store.framework_usage("alice") == {"TCREI": 2, "RSTI": 1}
        assert store.framework_usage() == {"TCREI": 2, "RSTI": 1, "TFCDC": 1}

    def test_delete(self, store):
        """Test deletion."""
        record_id = store.save(_record())
        assert store.delete(record_id) is True
        assert store.get(record_id) is None
        assert store.delete(record_id) is False

    def test_save_leaves_caller_record_untouched(self, store):
        """Test the assigned id goes to the stored copy only."""
        record = _record()
        record_id = store.save(record)
        assert record.id == ""
        assert store.get(record_id).id == record_id

    def test_later_changes_to_saved_record_ignored(self, store):
        """Test mutating the saved object does not change the library."""
        record = _record(id="abc")
        store.save(record)
        record.transformed_prompt = "changed"
        record.frameworks.append("TFCDC")
        assert store.get("abc").transformed_prompt == "enhanced"
        assert store.get("abc").frameworks == ["TCREI", "RSTI"]

    def test_returned_records_are_copies(self, store):
        """Test mutating a returned record does not change the library."""
        record_id = store.save(_record())

        fetched = store.get(record_id)
        fetched.user_id = "mallory"
        fetched.frameworks.clear()
        fetched.parameters["wordCount"] = 1

        listed = store.list_by_user("alice")[0]
        listed.transformed_prompt = "changed"

        stored = store.get(record_id)
        assert stored.user_id == "alice"
        assert stored.frameworks == ["TCREI", "RSTI"]
        assert stored.parameters == {"wordCount": 800}
        assert stored.transformed_prompt == "enhanced"
        assert store.framework_usage("alice") == {"TCREI": 1, "RSTI": 1}


class TestFilePromptStore:
    """Tests specific to the JSON file backend."""

    def test_persists_across_instances(self, tmp_path):
        """Test records survive a new store instance."""
        path = str(tmp_path / "prompts.json")
        record_id = FilePromptStore(path).save(_record())
        assert FilePromptStore(path).get(record_id) is not None

    def test_file_format(self, tmp_path):
        """Test the on-disk document shape."""
        path = tmp_path / "prompts.json"
        FilePromptStore(str(path)).save(_record(id="abc"))
        data = json.loads(path.read_text())
        assert data["prompts"][0]["id"] == "abc"
        assert data["prompts"][0]["frameworks"] == ["TCREI", "RSTI"]

    def test_creates_parent_directory(self, tmp_path):
        """Test nested paths are created."""
        path = tmp_path / "nested" / "dir" / "prompts.json"
        FilePromptStore(str(path)).save(_record())
        assert path.exists()

    def test_corrupt_file(self, tmp_path):
        """Test unreadable documents raise StorageError."""
        path = tmp_path / "prompts.json"
        path.write_text("{not json")
        with pytest.raises(StorageError):
            FilePromptStore(str(path)).list_all()

    def test_missing_required_field(self, tmp_path):
        """Test records without required fields raise StorageError."""
        path = tmp_path / "prompts.json"
        path.write_text(json.dumps({"prompts": [{"id": "x"}]}))
        with pytest.raises(StorageError):
            FilePromptStore(str(path)).get("x")


class TestCreateStore:
    """Tests for create_store."""

    def test_memory(self):
        assert isinstance(create_store("memory"), MemoryPromptStore)

    def test_file(self, tmp_path):
        store = create_store("file", str(tmp_path / "p.json"))
        assert isinstance(store, FilePromptStore)

    def test_file_without_path(self):
        """Test the file backend needs a path."""
        with pytest.raises(ConfigurationError):
            create_store("file")

    def test_unknown_backend(self):
        """Test unknown backends."""
        with pytest.raises(ConfigurationError) as exc_info:
            create_store("firebase")
        assert exc_info.value.config_key == "PF_STORAGE_BACKEND"
