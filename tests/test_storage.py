import json
import zlib
from pathlib import Path

import pytest

from save_sync.core.errors import SaveLoadError
from save_sync.core.storage import LocalSaveStorage


def mz_encode(raw: bytes) -> bytes:
    """Encode bytes the way RPG Maker MZ writes a deflated binary string."""
    return zlib.compress(raw).decode("latin-1").encode("utf-8")


def mz_decode(data: bytes) -> bytes:
    return zlib.decompress(data.decode("utf-8").encode("latin-1"))


@pytest.fixture()
def save_dir(tmp_path: Path) -> Path:
    d = tmp_path / "save"
    d.mkdir()
    return d


def test_save_and_load_round_trip(save_dir: Path):
    storage = LocalSaveStorage(save_dir)
    storage.save_object("global", {"1": {"title": "Ünïcode"}})

    assert (save_dir / "global.rmmzsave").is_file()
    assert not (save_dir / "global.rmmzsave.tmp").exists()
    assert storage.load_object("global") == {"1": {"title": "Ünïcode"}}


def test_savenames():
    storage = LocalSaveStorage(Path("unused"))
    assert storage.make_savename(0) == "autosave"
    assert storage.make_savename(1) == "file1"
    assert storage.make_savename(20) == "file20"


def test_savefile_exists(save_dir: Path):
    storage = LocalSaveStorage(save_dir, max_savefiles=3)
    storage.save_object("file2", {"system": {}})

    assert storage.savefile_exists(2)
    assert not storage.savefile_exists(1)
    assert not storage.savefile_exists(0)
    assert storage.max_savefiles() == 3


def test_custom_extension(save_dir: Path):
    storage = LocalSaveStorage(save_dir, extension=".rpgsave")
    storage.save_object("autosave", [])
    assert (save_dir / "autosave.rpgsave").is_file()
    assert storage.savefile_exists(0)


def test_missing_object_raises_load_error(save_dir: Path):
    with pytest.raises(SaveLoadError) as excinfo:
        LocalSaveStorage(save_dir).load_object("global")
    assert excinfo.value.name == "global"


def test_corrupt_data_raises_load_error(save_dir: Path):
    (save_dir / "file1.rmmzsave").write_bytes(b"not zlib at all")
    with pytest.raises(SaveLoadError):
        LocalSaveStorage(save_dir).load_object("file1")


def test_bad_json_raises_load_error(save_dir: Path):
    (save_dir / "file1.rmmzsave").write_bytes(mz_encode(b"{broken"))
    with pytest.raises(SaveLoadError):
        LocalSaveStorage(save_dir).load_object("file1")


def test_reads_file_written_by_mz(save_dir: Path):
    payload = {"system": {"_framesOnSave": 5400}, "party": {"_actors": [1]}, "note": "Ünïcode ✓"}
    (save_dir / "file1.rmmzsave").write_bytes(
        mz_encode(json.dumps(payload, ensure_ascii=False).encode("utf-8"))
    )

    assert LocalSaveStorage(save_dir).load_object("file1") == payload


def test_written_index_is_readable_by_mz(save_dir: Path):
    index = {"1": {"title": "Ünïcode ✓", "playtime": "00:01:30"}}
    LocalSaveStorage(save_dir).save_object("global", index)

    data = (save_dir / "global.rmmzsave").read_bytes()

    assert json.loads(mz_decode(data).decode("utf-8")) == index


def test_raw_zlib_bytes_are_rejected(save_dir: Path):
    # Raw deflate output is not a UTF-8 binary string
    (save_dir / "file1.rmmzsave").write_bytes(zlib.compress(b'{"a": 1}' * 50))
    with pytest.raises(SaveLoadError):
        LocalSaveStorage(save_dir).load_object("file1")


def test_characters_outside_latin1_are_rejected(save_dir: Path):
    (save_dir / "file1.rmmzsave").write_text("✓✓✓", encoding="utf-8")
    with pytest.raises(SaveLoadError) as excinfo:
        LocalSaveStorage(save_dir).load_object("file1")
    assert "binary string" in str(excinfo.value)
