from __future__ import annotations

import json
import logging
import os
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class PriorityStoreError(RuntimeError):
    """Persisting the priority document failed; in-memory state was not changed."""


class PriorityReader(Protocol):
    """Read side used by the aggregator."""

    def is_priority(self, event_id: object) -> bool: ...

    def tags_for(self, event_id: object) -> list[str]: ...


@dataclass(frozen=True)
class PrioritySnapshot:
    event_ids: list[str] = field(default_factory=list)
    tags: dict[str, list[str]] = field(default_factory=dict)

    def to_document(self) -> dict[str, Any]:
        return {"eventIds": list(self.event_ids), "tags": {k: list(v) for k, v in self.tags.items()}}


def _dedupe(values: list[Any]) -> list[str]:
    seen: set[str] = set()
    out: list[str] = []
    for v in values:
        s = str(v)
        if s not in seen:
            seen.add(s)
            out.append(s)
    return out


def _parse_document(data: Any) -> PrioritySnapshot:
    if not isinstance(data, dict):
        return PrioritySnapshot()

    raw_ids = data.get("eventIds")
    event_ids = _dedupe(raw_ids) if isinstance(raw_ids, list) else []

    tags: dict[str, list[str]] = {}
    raw_tags = data.get("tags")
    if isinstance(raw_tags, dict):
        for key, value in raw_tags.items():
            if isinstance(value, list):
                tags[str(key)] = _dedupe(value)

    return PrioritySnapshot(event_ids=event_ids, tags=tags)


class PriorityStore:
    """
    Prioritized event ids and per-event tags, persisted as one JSON document.

    - Keys are always the string form of the upstream event id.
    - Toggles run read-modify-write-persist under one lock; the new state only
      becomes visible after the file has been replaced.
    - Readers see either the state before or after a toggle, never a partial one.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()
        self._state = self._load()

    def _load(self) -> PrioritySnapshot:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return PrioritySnapshot()
        except OSError as e:
            logger.warning("Could not read priorities from %s: %s", self.path, e)
            return PrioritySnapshot()

        try:
            return _parse_document(json.loads(raw))
        except ValueError as e:
            logger.warning("Ignoring unreadable priorities file %s: %s", self.path, e)
            return PrioritySnapshot()

    def _persist(self, state: PrioritySnapshot) -> None:
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(state.to_document(), indent=2), encoding="utf-8")
            os.replace(tmp, self.path)
        except OSError as e:
            tmp.unlink(missing_ok=True)
            logger.error("Failed to persist priorities to %s: %s", self.path, e)
            raise PriorityStoreError(f"Could not save priorities: {e}") from e

    # -----------------------------
    # Reads
    # -----------------------------

    def is_priority(self, event_id: object) -> bool:
        return str(event_id) in self._state.event_ids

    def tags_for(self, event_id: object) -> list[str]:
        return list(self._state.tags.get(str(event_id), []))

    def event_ids(self) -> list[str]:
        return list(self._state.event_ids)

    def snapshot(self) -> PrioritySnapshot:
        state = self._state
        return PrioritySnapshot(
            event_ids=list(state.event_ids),
            tags={k: list(v) for k, v in state.tags.items()},
        )

    # -----------------------------
    # Writes
    # -----------------------------

    def toggle_event_priority(self, event_id: object) -> list[str]:
        """Flip `event_id` in the priority set and return the updated id list."""

        key = str(event_id)
        with self._lock:
            current = self._state
            if key in current.event_ids:
                event_ids = [i for i in current.event_ids if i != key]
            else:
                event_ids = [*current.event_ids, key]

            new_state = PrioritySnapshot(event_ids=event_ids, tags=current.tags)
            self._persist(new_state)
            self._state = new_state
            return list(event_ids)

    def toggle_tag(self, event_id: object, tag: str) -> list[str]:
        """Flip `tag` on `event_id` and return that event's updated tag list."""

        key = str(event_id)
        with self._lock:
            current = self._state
            existing = current.tags.get(key, [])
            if tag in existing:
                updated = [t for t in existing if t != tag]
            else:
                updated = [*existing, tag]

            tags = dict(current.tags)
            tags[key] = updated
            new_state = PrioritySnapshot(event_ids=current.event_ids, tags=tags)
            self._persist(new_state)
            self._state = new_state
            return list(updated)
