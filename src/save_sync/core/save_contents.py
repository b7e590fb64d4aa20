"""Minimal view of a save file's contents.

The reconciliation pass only needs three things from a save payload: the
active party roster, the actor table, and the frame count at save time.
``SaveContents`` describes that shape structurally; ``JsonSaveContents``
provides it for the JSON payload written by RPG Maker MZ:

    {
        "system": {"_framesOnSave": 21600, ...},
        "party": {"_actors": [3, 1, 2], ...},
        "actors": {"_data": [null, {"_name": "Reid", "_characterName": "Actor1",
                                    "_characterIndex": 0, "_faceName": "Actor1",
                                    "_faceIndex": 0, ...}, ...]},
        ...
    }

Accessors read lazily, so a malformed payload raises KeyError, IndexError or
TypeError at the point a field is first used.
"""

from collections.abc import Sequence
from typing import Any, Protocol

DEFAULT_MAX_BATTLE_MEMBERS = 4


class ActorView(Protocol):
    """An actor's display name and current sprite assignment."""

    @property
    def name(self) -> str: ...

    @property
    def character_name(self) -> str: ...

    @property
    def character_index(self) -> int: ...

    @property
    def face_name(self) -> str: ...

    @property
    def face_index(self) -> int: ...


class PartyView(Protocol):
    @property
    def active_member_ids(self) -> Sequence[int]: ...

    @property
    def max_battle_members(self) -> int: ...


class ActorTable(Protocol):
    def actor(self, actor_id: int) -> ActorView: ...


class SystemView(Protocol):
    @property
    def frames_on_save(self) -> int: ...


class SaveContents(Protocol):
    """The parts of a save payload needed to summarize it."""

    @property
    def party(self) -> PartyView: ...

    @property
    def actors(self) -> ActorTable: ...

    @property
    def system(self) -> SystemView: ...


def _unwrap(value: Any) -> Any:
    """Unwrap a JsonEx array wrapper ({"@a": [...]}) if present."""
    if isinstance(value, dict) and "@a" in value:
        return value["@a"]
    return value


class JsonActor:
    def __init__(self, data: dict[str, Any]):
        self._data = data

    @property
    def name(self) -> str:
        return self._data["_name"]

    @property
    def character_name(self) -> str:
        return self._data["_characterName"]

    @property
    def character_index(self) -> int:
        return self._data["_characterIndex"]

    @property
    def face_name(self) -> str:
        return self._data["_faceName"]

    @property
    def face_index(self) -> int:
        return self._data["_faceIndex"]


class JsonParty:
    def __init__(self, data: dict[str, Any]):
        self._data = data

    @property
    def active_member_ids(self) -> list[int]:
        ids = _unwrap(self._data["_actors"])
        if not isinstance(ids, list):
            raise TypeError(f"Party roster must be a list, got {type(ids).__name__}")
        return ids

    @property
    def max_battle_members(self) -> int:
        # Plugins that change the battle party size store it on the party
        return self._data.get("_maxBattleMembers", DEFAULT_MAX_BATTLE_MEMBERS)


class JsonActorTable:
    def __init__(self, data: dict[str, Any]):
        self._data = data

    def actor(self, actor_id: int) -> JsonActor:
        """Look up an actor by id.

        Raises:
            KeyError: If the table has no data for this actor
        """
        table = _unwrap(self._data["_data"])
        if isinstance(table, dict):
            actor_data = table.get(str(actor_id))
        elif 0 <= actor_id < len(table):
            actor_data = table[actor_id]
        else:
            actor_data = None
        if actor_data is None:
            raise KeyError(f"Actor {actor_id} not found in save data")
        return JsonActor(actor_data)


class JsonSystem:
    def __init__(self, data: dict[str, Any]):
        self._data = data

    @property
    def frames_on_save(self) -> int:
        return self._data["_framesOnSave"]


class JsonSaveContents:
    """SaveContents backed by a decoded MZ save payload."""

    def __init__(self, data: dict[str, Any]):
        if not isinstance(data, dict):
            raise TypeError(f"Save payload must be an object, got {type(data).__name__}")
        self._data = data

    @property
    def party(self) -> JsonParty:
        return JsonParty(self._data["party"])

    @property
    def actors(self) -> JsonActorTable:
        return JsonActorTable(self._data["actors"])

    @property
    def system(self) -> JsonSystem:
        return JsonSystem(self._data["system"])
