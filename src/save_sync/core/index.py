"""Save index data model.

The save index (the ``global`` save object) holds one lightweight summary per
occupied slot so the load menu does not need to open every save file.

Persisted form (JSON object keyed by slot number)::

    {
        "0": {"title": "My Game", "characters": [["Actor1", 0]],
              "faces": [["Actor1", 0]], "playtime": "01:02:03",
              "timestamp": 1700000000000},
        "3": {...}
    }

The RPG Maker MZ array form (a list indexed by slot with null holes) is
accepted when reading.
"""

from collections.abc import Iterator, MutableMapping
from dataclasses import dataclass, field
from typing import Any

from ..logging_config import get_logger

logger = get_logger("index")

PLAYTIME_PLACEHOLDER = "??:??:??"

_KNOWN_KEYS = ("title", "characters", "faces", "playtime", "timestamp")


@dataclass
class IndexEntry:
    """Summary of one save slot as shown by the load menu."""
    title: str
    characters: list[tuple[str, int]] = field(default_factory=list)
    faces: list[tuple[str, int]] = field(default_factory=list)
    playtime: str = PLAYTIME_PLACEHOLDER
    timestamp: int = 0
    extra: dict[str, Any] = field(default_factory=dict)  # Keys we don't interpret

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "IndexEntry":
        """Build an entry from its persisted form.

        Values are kept as stored; unknown keys are carried in ``extra``.
        """
        return cls(
            title=data.get("title", ""),
            characters=[tuple(pair) for pair in data.get("characters") or []],
            faces=[tuple(pair) for pair in data.get("faces") or []],
            playtime=data.get("playtime", PLAYTIME_PLACEHOLDER),
            timestamp=data.get("timestamp", 0),
            extra={k: v for k, v in data.items() if k not in _KNOWN_KEYS},
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert the entry to its persisted form."""
        data = dict(self.extra)
        data.update(
            title=self.title,
            characters=[list(pair) for pair in self.characters],
            faces=[list(pair) for pair in self.faces],
            playtime=self.playtime,
            timestamp=self.timestamp,
        )
        return data


class SaveIndex(MutableMapping):
    """Sparse mapping from slot id to IndexEntry.

    A slot is either present with an entry or absent; ``None`` is never
    stored.
    """

    def __init__(self, entries: dict[int, IndexEntry] | None = None):
        self._entries: dict[int, IndexEntry] = {}
        for slot_id, entry in (entries or {}).items():
            self[slot_id] = entry

    def __getitem__(self, slot_id: int) -> IndexEntry:
        return self._entries[slot_id]

    def __setitem__(self, slot_id: int, entry: IndexEntry) -> None:
        if entry is None:
            raise ValueError(f"Slot {slot_id}: use del to remove an entry")
        self._entries[slot_id] = entry

    def __delitem__(self, slot_id: int) -> None:
        del self._entries[slot_id]

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"SaveIndex(slots={list(self)})"

    @classmethod
    def from_storage(cls, data: Any) -> "SaveIndex":
        """Build an index from the value stored in the index save object.

        Args:
            data: A JSON object keyed by slot number, or an MZ-style list

        Returns:
            SaveIndex with every well-formed entry

        Raises:
            TypeError: If data is neither a list nor a dict
        """
        if isinstance(data, list):
            items = enumerate(data)
        elif isinstance(data, dict):
            items = data.items()
        else:
            raise TypeError(f"Save index must be a list or object, got {type(data).__name__}")

        index = cls()
        for key, value in items:
            if value is None:
                continue
            try:
                slot_id = int(key)
            except (TypeError, ValueError):
                logger.warning("Skipping save index entry with bad slot key %r", key)
                continue
            try:
                if not isinstance(value, dict):
                    raise TypeError(f"entry is a {type(value).__name__}")
                index[slot_id] = IndexEntry.from_dict(value)
            except (TypeError, ValueError) as e:
                logger.warning("Skipping malformed save index entry for slot %d: %s", slot_id, e)
        return index

    def to_storage(self) -> dict[str, dict[str, Any]]:
        """Convert the index to its persisted form."""
        return {str(slot_id): entry.to_dict() for slot_id, entry in self.items()}
