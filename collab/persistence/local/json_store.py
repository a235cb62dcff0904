"""Local capability stores.

``JsonFileLocalShareStore`` keeps the mapping in a JSON file on the client
machine. It is written by whoever runs the process and is never validated,
so it must not be used where access control matters.
"""

import json
import threading
from pathlib import Path

import logfire
from pydantic import ValidationError as PydanticValidationError

from collab.domain.model.local_share import LocalShareData
from collab.domain.repository.local_share import LocalShareStore


class JsonFileLocalShareStore(LocalShareStore):
    """JSON file backed local share store.

    File layout::

        {"<resource_id>": {"viewer": "<token>|null",
                           "editor": "<token>|null",
                           "accepted": ["<token>", ...]}}

    Unreadable or malformed content reads as an empty mapping; the next
    save overwrites it.
    """

    def __init__(self, path: str | Path) -> None:
        super().__init__()
        self._path = Path(path)
        self._lock = threading.Lock()

    def load(self) -> dict[str, LocalShareData]:
        with self._lock:
            return self._load()

    def save(self, shares: dict[str, LocalShareData]) -> None:
        payload = {
            resource_id: data.model_dump() for resource_id, data in shares.items()
        }
        with self._lock:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
            tmp_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
            tmp_path.replace(self._path)

    def _load(self) -> dict[str, LocalShareData]:
        if not self._path.exists():
            return {}

        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logfire.warn(
                "Local share store unreadable, treating as empty",
                path=str(self._path),
                error=str(e),
            )
            return {}

        if not isinstance(raw, dict):
            logfire.warn("Local share store malformed", path=str(self._path))
            return {}

        shares = {}
        for resource_id, entry in raw.items():
            try:
                shares[resource_id] = LocalShareData.model_validate(entry)
            except PydanticValidationError:
                logfire.warn(
                    "Skipping malformed local share entry", resource_id=resource_id
                )
        return shares


class InMemoryLocalShareStore(LocalShareStore):
    """In-memory local share store for testing."""

    def __init__(self) -> None:
        super().__init__()
        self._shares: dict[str, dict] = {}

    def load(self) -> dict[str, LocalShareData]:
        # Copies, so callers mutate only what they pass back to save
        return {
            resource_id: LocalShareData.model_validate(entry)
            for resource_id, entry in self._shares.items()
        }

    def save(self, shares: dict[str, LocalShareData]) -> None:
        self._shares = {
            resource_id: data.model_dump() for resource_id, data in shares.items()
        }
