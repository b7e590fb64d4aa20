import pytest

from save_sync.core.save_contents import JsonSaveContents
from save_sync.core.summary import FieldResult, SummaryExtractor, format_playtime

from conftest import make_actor, make_payload


@pytest.mark.parametrize(
    "frames, expected",
    [
        (0, "00:00:00"),
        (59, "00:00:00"),
        (5400, "00:01:30"),
        (3600 * 60 * 2, "02:00:00"),
        ((3600 + 61) * 60, "01:01:01"),
        (100 * 3600 * 60, "100:00:00"),
        (5400.9, "00:01:30"),
    ],
)
def test_format_playtime(frames, expected):
    assert format_playtime(frames) == expected


def test_format_playtime_rejects_non_numbers():
    with pytest.raises(TypeError):
        format_playtime(None)
    with pytest.raises(TypeError):
        format_playtime("5400")


def test_party_order_is_preserved():
    contents = JsonSaveContents(make_payload([2, 1, 3]))
    extractor = SummaryExtractor()

    assert extractor.extract_characters(contents) == [
        ("Actor2_walk", 2), ("Actor1_walk", 1), ("Actor3_walk", 3)
    ]
    assert extractor.extract_faces(contents) == [
        ("Actor2_face", 2), ("Actor1_face", 1), ("Actor3_face", 3)
    ]


def test_roster_truncated_to_max_battle_members():
    contents = JsonSaveContents(make_payload([5, 4, 3, 2, 1]))
    extraction = SummaryExtractor().extract(contents)

    assert extraction.complete
    assert [name for name, _ in extraction.characters.value] == [
        "Actor5_walk", "Actor4_walk", "Actor3_walk", "Actor2_walk"
    ]
    assert len(extraction.faces.value) == 4


def test_custom_max_battle_members():
    contents = JsonSaveContents(make_payload([1, 2, 3], max_battle_members=2))
    extraction = SummaryExtractor().extract(contents)

    assert len(extraction.characters.value) == 2
    assert len(extraction.faces.value) == 2


def test_current_sprites_are_used():
    actors = {1: make_actor("Reid", character=("Hero_Night", 4), face=("Hero_Faces", 7))}
    contents = JsonSaveContents(make_payload([1], actors=actors))
    extraction = SummaryExtractor().extract(contents)

    assert extraction.characters.value == [("Hero_Night", 4)]
    assert extraction.faces.value == [("Hero_Faces", 7)]


def test_full_extraction():
    contents = JsonSaveContents(make_payload([1, 2], frames=5400))
    extraction = SummaryExtractor().extract(contents)

    assert extraction.complete
    assert extraction.failed_field is None
    assert extraction.error is None
    assert extraction.playtime.value == "00:01:30"


def test_missing_actor_stops_extraction():
    payload = make_payload([1, 2], frames=5400, actors={1: make_actor("Reid")})
    extraction = SummaryExtractor().extract(JsonSaveContents(payload))

    assert not extraction.complete
    assert extraction.failed_field == "characters"
    assert isinstance(extraction.error, KeyError)
    assert extraction.characters.value == []
    # Fields after the failure are not attempted, even though playtime is readable
    assert not extraction.faces.attempted
    assert extraction.faces.value == []
    assert not extraction.playtime.attempted
    assert extraction.playtime.value == "??:??:??"


def test_playtime_failure_keeps_portraits():
    payload = make_payload([1, 2], frames=None)
    extraction = SummaryExtractor().extract(JsonSaveContents(payload))

    assert extraction.characters.ok
    assert extraction.faces.ok
    assert len(extraction.characters.value) == 2
    assert extraction.failed_field == "playtime"
    assert extraction.playtime.value == "??:??:??"


def test_jsonex_array_wrappers_are_unwrapped():
    payload = make_payload([1, 2], frames=60)
    payload["party"]["_actors"] = {"@a": payload["party"]["_actors"]}
    payload["actors"]["_data"] = {"@a": payload["actors"]["_data"]}
    extraction = SummaryExtractor().extract(JsonSaveContents(payload))

    assert extraction.complete
    assert extraction.playtime.value == "00:00:01"


def test_custom_frame_rate():
    contents = JsonSaveContents(make_payload([1], frames=300))
    assert SummaryExtractor(frames_per_second=30).extract_playtime(contents) == "00:00:10"


def test_field_result_states():
    assert FieldResult.success(3).ok
    failed = FieldResult.failure("x", ValueError("bad"))
    assert not failed.ok
    assert failed.value == "x"
    skipped = FieldResult.skipped([])
    assert not skipped.ok
    assert skipped.error is None
