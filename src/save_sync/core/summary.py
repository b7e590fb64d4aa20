"""Summary extraction from save file contents.

Turns a loaded save payload into the fields of an index entry: party
portraits (character and face sprites) and playtime.
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from .index import PLAYTIME_PLACEHOLDER
from .save_contents import ActorView, SaveContents

T = TypeVar("T")

FRAMES_PER_SECOND = 60

# Errors raised by a payload that does not have the expected shape
EXTRACTION_ERRORS = (KeyError, IndexError, TypeError, ValueError, AttributeError)


def format_playtime(frames: int, frames_per_second: int = FRAMES_PER_SECOND) -> str:
    """Format an elapsed frame count as HH:MM:SS.

    Each field is zero padded to two digits; hours are not truncated.

    Args:
        frames: Elapsed frames
        frames_per_second: Frame rate the count was recorded at

    Returns:
        Playtime string, e.g. "00:01:30" for 5400 frames
    """
    if isinstance(frames, bool) or not isinstance(frames, (int, float)):
        raise TypeError(f"Frame count must be a number, got {type(frames).__name__}")
    total_seconds = int(frames // frames_per_second)
    hours = total_seconds // 3600
    minutes = (total_seconds // 60) % 60
    seconds = total_seconds % 60
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


@dataclass(frozen=True)
class FieldResult(Generic[T]):
    """Outcome of extracting one summary field.

    ``value`` is the extracted value on success and the default otherwise.
    A field that was never attempted (because an earlier field failed) has
    ``attempted`` set to False.
    """
    value: T
    error: Optional[BaseException] = None
    attempted: bool = True

    @property
    def ok(self) -> bool:
        return self.attempted and self.error is None

    @classmethod
    def success(cls, value: T) -> "FieldResult[T]":
        return cls(value)

    @classmethod
    def failure(cls, default: T, error: BaseException) -> "FieldResult[T]":
        return cls(default, error=error)

    @classmethod
    def skipped(cls, default: T) -> "FieldResult[T]":
        return cls(default, attempted=False)


@dataclass(frozen=True)
class SummaryExtraction:
    """Per-field results of summarizing one save payload."""
    characters: FieldResult[list[tuple[str, int]]]
    faces: FieldResult[list[tuple[str, int]]]
    playtime: FieldResult[str]

    def fields(self) -> dict[str, FieldResult[Any]]:
        return {
            "characters": self.characters,
            "faces": self.faces,
            "playtime": self.playtime,
        }

    @property
    def complete(self) -> bool:
        return all(result.ok for result in self.fields().values())

    @property
    def failed_field(self) -> Optional[str]:
        for name, result in self.fields().items():
            if result.error is not None:
                return name
        return None

    @property
    def error(self) -> Optional[BaseException]:
        name = self.failed_field
        return self.fields()[name].error if name else None


class SummaryExtractor:
    """Extracts index entry fields from SaveContents.

    Extraction runs characters, faces, then playtime. When one field fails
    the remaining fields are not attempted and keep their defaults; fields
    extracted before the failure are kept.
    """

    def __init__(self, frames_per_second: int = FRAMES_PER_SECOND):
        self.frames_per_second = frames_per_second

    def party_members(self, contents: SaveContents) -> list[ActorView]:
        """Resolve the active battle members in roster order.

        Args:
            contents: Loaded save payload

        Returns:
            Actors for the first max_battle_members ids of the roster

        Raises:
            KeyError: If an actor id is not in the actor table
        """
        party = contents.party
        member_ids = list(party.active_member_ids)[:party.max_battle_members]
        actors = contents.actors
        return [actors.actor(actor_id) for actor_id in member_ids]

    def extract_characters(self, contents: SaveContents) -> list[tuple[str, int]]:
        return [(actor.character_name, actor.character_index)
                for actor in self.party_members(contents)]

    def extract_faces(self, contents: SaveContents) -> list[tuple[str, int]]:
        return [(actor.face_name, actor.face_index)
                for actor in self.party_members(contents)]

    def extract_playtime(self, contents: SaveContents) -> str:
        """Format the playtime recorded in the save.

        A payload without a frame count fails rather than guessing.
        """
        return format_playtime(contents.system.frames_on_save, self.frames_per_second)

    def extract(self, contents: SaveContents) -> SummaryExtraction:
        """Extract every summary field, stopping at the first failure.

        Args:
            contents: Loaded save payload

        Returns:
            SummaryExtraction with a FieldResult per field
        """
        steps: list[tuple[str, Callable[[SaveContents], Any], Any]] = [
            ("characters", self.extract_characters, []),
            ("faces", self.extract_faces, []),
            ("playtime", self.extract_playtime, PLAYTIME_PLACEHOLDER),
        ]

        results: dict[str, FieldResult[Any]] = {}
        failed = False
        for name, extract_field, default in steps:
            if failed:
                results[name] = FieldResult.skipped(default)
                continue
            try:
                results[name] = FieldResult.success(extract_field(contents))
            except EXTRACTION_ERRORS as e:
                results[name] = FieldResult.failure(default, e)
                failed = True

        return SummaryExtraction(**results)
