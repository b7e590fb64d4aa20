"""Save storage for RPG Maker MZ style save directories.

Every save object (the ``global`` index and each slot's save file) is a
single file holding zlib-deflated UTF-8 JSON. As in RPG Maker MZ, the
compressed bytes are written as a binary string: each byte is one character
(latin-1), and the file holds that string encoded as UTF-8.

    save/
        global.rmmzsave     - Save index read by the load menu
        autosave.rmmzsave   - Slot 0
        file1.rmmzsave      - Slot 1
        file2.rmmzsave      - Slot 2
"""

import json
import os
import zlib
from pathlib import Path
from typing import Any, Protocol

from .errors import SaveLoadError, SaveStorageError
from ..config.paths import SyncPaths
from ..logging_config import get_logger

logger = get_logger("storage")

AUTOSAVE_NAME = "autosave"


class SaveStorage(Protocol):
    """Storage primitives the reconciliation pass reads through."""

    def load_object(self, name: str) -> Any:
        """Load a named object. Raises SaveLoadError if absent or corrupt."""
        ...

    def save_object(self, name: str, obj: Any) -> None:
        """Persist a named object. Raises SaveStorageError on failure."""
        ...

    def savefile_exists(self, savefile_id: int) -> bool:
        ...

    def max_savefiles(self) -> int:
        ...

    def make_savename(self, savefile_id: int) -> str:
        ...


class LocalSaveStorage:
    """File-backed SaveStorage rooted at a save directory."""

    def __init__(
        self,
        save_dir: Path,
        max_savefiles: int = SyncPaths.MAX_SAVEFILES,
        extension: str = SyncPaths.SAVE_EXTENSION,
    ):
        """Initialize the storage.

        Args:
            save_dir: Directory holding the save files
            max_savefiles: Highest valid slot id
            extension: File extension of save objects, including the dot
        """
        self.save_dir = save_dir
        self.extension = extension
        self._max_savefiles = max_savefiles

    def file_path(self, name: str) -> Path:
        """Get the file path of a named save object."""
        return self.save_dir / f"{name}{self.extension}"

    def max_savefiles(self) -> int:
        return self._max_savefiles

    def make_savename(self, savefile_id: int) -> str:
        """Map a slot id to its save object name.

        Slot 0 is the autosave; the others are numbered files.
        """
        if savefile_id == 0:
            return AUTOSAVE_NAME
        return f"file{savefile_id}"

    def savefile_exists(self, savefile_id: int) -> bool:
        return self.file_path(self.make_savename(savefile_id)).is_file()

    def load_object(self, name: str) -> Any:
        """Load and decode a named save object.

        Args:
            name: Save object name (e.g., "global", "file3")

        Returns:
            The decoded JSON value

        Raises:
            SaveLoadError: If the file is missing or cannot be decoded
        """
        path = self.file_path(name)
        try:
            data = path.read_bytes()
        except FileNotFoundError:
            raise SaveLoadError(name, "file not found") from None
        except OSError as e:
            raise SaveLoadError(name, str(e)) from e

        try:
            compressed = data.decode("utf-8").encode("latin-1")
        except UnicodeError as e:
            raise SaveLoadError(name, f"not a binary string: {e}") from e

        try:
            return json.loads(zlib.decompress(compressed).decode("utf-8"))
        except zlib.error as e:
            raise SaveLoadError(name, f"bad compressed data: {e}") from e
        except (UnicodeDecodeError, ValueError) as e:
            raise SaveLoadError(name, f"bad JSON: {e}") from e

    def save_object(self, name: str, obj: Any) -> None:
        """Encode and write a named save object.

        The data is written to a temporary file first and then moved over
        the target, so a failed write leaves the previous file intact.

        Args:
            name: Save object name
            obj: JSON-serializable value

        Raises:
            SaveStorageError: If the object cannot be encoded or written
        """
        path = self.file_path(name)
        tmp_path = path.with_name(path.name + ".tmp")
        try:
            compressed = zlib.compress(json.dumps(obj, ensure_ascii=False).encode("utf-8"))
        except (TypeError, ValueError) as e:
            raise SaveStorageError(f"Could not encode save object '{name}': {e}") from e
        data = compressed.decode("latin-1").encode("utf-8")

        try:
            self.save_dir.mkdir(parents=True, exist_ok=True)
            tmp_path.write_bytes(data)
            os.replace(tmp_path, path)
        except OSError as e:
            raise SaveStorageError(f"Could not write save object '{name}': {e}") from e
        logger.debug("Wrote %s (%d bytes)", path, len(data))
