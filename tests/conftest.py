import copy
import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from save_sync.core.errors import SaveLoadError, SaveStorageError  # noqa: E402


class FakeStorage:
    """In-memory SaveStorage with fault injection."""

    def __init__(self, max_savefiles=5):
        self.objects = {}
        self.failing_loads = set()
        self.fail_saves = False
        self.saved = []
        self.existence_checks = []
        self._max_savefiles = max_savefiles

    def make_savename(self, savefile_id):
        return "autosave" if savefile_id == 0 else f"file{savefile_id}"

    def max_savefiles(self):
        return self._max_savefiles

    def savefile_exists(self, savefile_id):
        self.existence_checks.append(savefile_id)
        return self.make_savename(savefile_id) in self.objects

    def load_object(self, name):
        if name in self.failing_loads:
            raise SaveLoadError(name, "injected failure")
        if name not in self.objects:
            raise SaveLoadError(name, "file not found")
        return copy.deepcopy(self.objects[name])

    def save_object(self, name, obj):
        if self.fail_saves:
            raise SaveStorageError(f"Could not write save object '{name}'")
        self.objects[name] = copy.deepcopy(obj)
        self.saved.append(name)

    def put_save(self, savefile_id, payload):
        self.objects[self.make_savename(savefile_id)] = payload


def make_actor(name, character=None, face=None):
    character = character or (f"{name}_walk", 0)
    face = face or (f"{name}_face", 0)
    return {
        "_name": name,
        "_characterName": character[0],
        "_characterIndex": character[1],
        "_faceName": face[0],
        "_faceIndex": face[1],
    }


def make_payload(party_ids, frames=0, actors=None, max_battle_members=None):
    """Build an MZ-shaped save payload.

    Actors default to one per party id named "Actor<id>" with sprite index
    equal to the id.
    """
    if actors is None:
        actors = {
            actor_id: make_actor(
                f"Actor{actor_id}",
                character=(f"Actor{actor_id}_walk", actor_id),
                face=(f"Actor{actor_id}_face", actor_id),
            )
            for actor_id in party_ids
        }
    table = [None] * (max(actors, default=0) + 1)
    for actor_id, data in actors.items():
        table[actor_id] = data

    party = {"_actors": list(party_ids)}
    if max_battle_members is not None:
        party["_maxBattleMembers"] = max_battle_members

    system = {}
    if frames is not None:
        system["_framesOnSave"] = frames

    return {"system": system, "party": party, "actors": {"_data": table}}


@pytest.fixture()
def storage():
    return FakeStorage(max_savefiles=5)


@pytest.fixture()
def clock():
    return lambda: 1_700_000_000_000
