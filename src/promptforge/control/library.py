"""Prompt library: persistence of enhanced prompts per user."""

import json
import logging
import threading
import uuid
from collections import Counter
from datetime import datetime, timezone
from dataclasses import dataclass, field, asdict, replace
from pathlib import Path
from typing import Dict, List, Optional, Any

from ..core.exceptions import StorageError, ConfigurationError
from ..core.types import EnhancedPrompt

logger = logging.getLogger(__name__)


def _utcnow() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass
class SavedPrompt:
    """A stored prompt transformation."""
    original_input: str
    transformed_prompt: str
    frameworks: List[str]
    parameters: Dict[str, Any]
    use_case: str
    user_id: str
    id: str = ""
    created_at: str = field(default_factory=_utcnow)

    @classmethod
    def from_enhanced(cls, enhanced: EnhancedPrompt, user_id: str) -> "SavedPrompt":
        """Build a record from a transformation result."""
        return cls(
            original_input=enhanced.source_input,
            transformed_prompt=enhanced.final_prompt,
            frameworks=enhanced.framework_names,
            parameters=enhanced.parameters.to_dict() if enhanced.parameters else {},
            use_case=enhanced.use_case.value,
            user_id=user_id,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SavedPrompt":
        """Create from dictionary."""
        return cls(
            id=data.get("id", ""),
            original_input=data["original_input"],
            transformed_prompt=data["transformed_prompt"],
            frameworks=list(data.get("frameworks", [])),
            parameters=dict(data.get("parameters", {})),
            use_case=data.get("use_case", "general"),
            user_id=data["user_id"],
            created_at=data.get("created_at") or _utcnow(),
        )


def _copy(record: SavedPrompt) -> SavedPrompt:
    return replace(
        record,
        frameworks=list(record.frameworks),
        parameters=dict(record.parameters),
    )


def _newest_first(records: List[SavedPrompt]) -> List[SavedPrompt]:
    # Records are held in insertion order; reversing before the stable sort
    # makes equal timestamps come out newest-insert-first.
    return sorted(reversed(records), key=lambda r: r.created_at, reverse=True)


class PromptStore:
    """
    Abstract prompt library.

    Subclasses implement ``_load`` and ``_persist``; ordering, filtering
    and id assignment live here.
    """

    def __init__(self):
        self._lock = threading.Lock()

    def _load(self) -> List[SavedPrompt]:
        raise NotImplementedError

    def _persist(self, records: List[SavedPrompt]) -> None:
        raise NotImplementedError

    def save(self, record: SavedPrompt) -> str:
        """
        Store a copy of a record.

        Args:
            record: The record to store; an id is assigned to the copy if missing

        Returns:
            The record id
        """
        if not record.user_id:
            raise StorageError("Saved prompts require a user_id")

        with self._lock:
            records = self._load()
            if not record.id:
                record = replace(record, id=uuid.uuid4().hex)
            elif any(r.id == record.id for r in records):
                raise StorageError("Duplicate record id", record_id=record.id)
            records.append(record)
            self._persist(records)

        logger.info("Saved prompt %s for user %s", record.id, record.user_id)
        return record.id

    def get(self, record_id: str) -> Optional[SavedPrompt]:
        """Get a record by id."""
        with self._lock:
            for record in self._load():
                if record.id == record_id:
                    return record
        return None

    def list_by_user(self, user_id: str) -> List[SavedPrompt]:
        """List a user's records, newest first."""
        with self._lock:
            records = [r for r in self._load() if r.user_id == user_id]
        return _newest_first(records)

    def list_all(self) -> List[SavedPrompt]:
        """List every record, newest first."""
        with self._lock:
            records = self._load()
        return _newest_first(records)

    def recent(self, user_id: str, limit: int = 3) -> List[SavedPrompt]:
        """Most recent records for a user."""
        return self.list_by_user(user_id)[:limit]

    def framework_usage(self, user_id: Optional[str] = None) -> Dict[str, int]:
        """Count how often each framework was applied."""
        records = self.list_by_user(user_id) if user_id else self.list_all()
        counts = Counter(f for r in records for f in r.frameworks)
        return dict(counts.most_common())

    def delete(self, record_id: str) -> bool:
        """Delete a record. Returns False if it does not exist."""
        with self._lock:
            records = self._load()
            remaining = [r for r in records if r.id != record_id]
            if len(remaining) == len(records):
                return False
            self._persist(remaining)
        logger.info("Deleted prompt %s", record_id)
        return True


class MemoryPromptStore(PromptStore):
    """In-memory prompt library for tests and ephemeral servers."""

    def __init__(self):
        super().__init__()
        self._records: List[SavedPrompt] = []

    def _load(self) -> List[SavedPrompt]:
        return [_copy(r) for r in self._records]

    def _persist(self, records: List[SavedPrompt]) -> None:
        self._records = [_copy(r) for r in records]


class FilePromptStore(PromptStore):
    """Prompt library kept in a single JSON document on disk."""

    def __init__(self, path: str):
        super().__init__()
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def _load(self) -> List[SavedPrompt]:
        if not self.path.exists():
            return []
        try:
            with open(self.path) as f:
                data = json.load(f)
            return [SavedPrompt.from_dict(item) for item in data.get("prompts", [])]
        except (OSError, ValueError, KeyError) as e:
            raise StorageError(f"Could not read prompt library at {self.path}", cause=e) from e

    def _persist(self, records: List[SavedPrompt]) -> None:
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            with open(tmp_path, "w") as f:
                json.dump({"prompts": [r.to_dict() for r in records]}, f, indent=2)
            tmp_path.replace(self.path)
        except OSError as e:
            raise StorageError(f"Could not write prompt library at {self.path}", cause=e) from e


def create_store(backend: str = "memory", path: Optional[str] = None) -> PromptStore:
    """
    Create a prompt store.

    Args:
        backend: "memory" or "file"
        path: JSON file path for the file backend

    Returns:
        PromptStore instance
    """
    if backend == "memory":
        return MemoryPromptStore()
    if backend == "file":
        if not path:
            raise ConfigurationError("File storage requires a path", config_key="PF_STORAGE_PATH")
        return FilePromptStore(path)
    raise ConfigurationError(f"Unknown storage backend: {backend}", config_key="PF_STORAGE_BACKEND")
