"""Reconciliation of the save index against the save files on disk.

A reconciliation pass visits every slot from 0 to max_savefiles:

- a save file with no index entry gets an entry synthesized from the file;
- an index entry with no save file is removed;
- anything else is left alone.

The pass is not atomic: entries changed for earlier slots stay changed if a
later slot fails.
"""

import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from .errors import SaveLoadError
from .index import PLAYTIME_PLACEHOLDER, IndexEntry, SaveIndex
from .save_contents import JsonSaveContents, SaveContents
from .storage import SaveStorage
from .summary import EXTRACTION_ERRORS, SummaryExtractor
from ..logging_config import get_logger

logger = get_logger("reconciler")


def now_ms() -> int:
    """Current time in milliseconds since the epoch."""
    return int(time.time() * 1000)


@dataclass
class ReconcileResult:
    """Outcome of one reconciliation pass."""
    index: SaveIndex
    changed: bool = False
    added: list[int] = field(default_factory=list)
    removed: list[int] = field(default_factory=list)


class IndexReconciler:
    """Brings a SaveIndex in line with the save files present in storage."""

    def __init__(
        self,
        storage: SaveStorage,
        game_title: str,
        extractor: Optional[SummaryExtractor] = None,
        clock: Callable[[], int] = now_ms,
        contents_factory: Callable[[object], SaveContents] = JsonSaveContents,
    ):
        """Initialize the reconciler.

        Args:
            storage: Storage the index and save files are read from
            game_title: Title written into synthesized entries
            extractor: Summary extractor (default SummaryExtractor())
            clock: Returns the synthesis timestamp in ms since the epoch
            contents_factory: Wraps a loaded payload as SaveContents
        """
        self.storage = storage
        self.game_title = game_title
        self.extractor = extractor or SummaryExtractor()
        self.clock = clock
        self.contents_factory = contents_factory

    def reconcile(self, index: SaveIndex) -> ReconcileResult:
        """Add missing entries and remove stale ones.

        The index is updated in place and returned in the result.

        Args:
            index: Index to reconcile

        Returns:
            ReconcileResult with changed=True if any slot was added or removed
        """
        result = ReconcileResult(index=index)
        for savefile_id in range(self.storage.max_savefiles() + 1):
            if self.storage.savefile_exists(savefile_id):
                if savefile_id not in index:
                    index[savefile_id] = self.synthesize(savefile_id)
                    result.added.append(savefile_id)
            elif savefile_id in index:
                del index[savefile_id]
                result.removed.append(savefile_id)
                logger.info("Removed index entry for missing File %d", savefile_id)

        result.changed = bool(result.added or result.removed)
        if result.changed:
            logger.info(
                "Save index updated: %d restored, %d removed",
                len(result.added), len(result.removed)
            )
        else:
            logger.debug("Save index already matches save files")
        return result

    def synthesize(self, savefile_id: int) -> IndexEntry:
        """Build an index entry for a save file that has none.

        Never raises for unreadable or malformed saves: an unreadable save
        gives a placeholder entry, and a malformed one keeps whichever fields
        were extracted before the failure.

        Args:
            savefile_id: Slot to restore

        Returns:
            The synthesized IndexEntry
        """
        logger.warning("Restoring save index entry for File %d...", savefile_id)

        entry = IndexEntry(
            title=self.game_title,
            characters=[],
            faces=[],
            playtime=PLAYTIME_PLACEHOLDER,
            timestamp=self.clock(),
        )

        save_name = self.storage.make_savename(savefile_id)
        try:
            contents = self.contents_factory(self.storage.load_object(save_name))
        except SaveLoadError as e:
            logger.error("Could not read File %d, using placeholder info: %s", savefile_id, e)
            logger.warning("You can still try loading File %d.", savefile_id)
            return entry
        except EXTRACTION_ERRORS as e:
            logger.error("File %d has unexpected save data, using placeholder info: %s", savefile_id, e)
            logger.warning("You can still try loading File %d.", savefile_id)
            return entry

        extraction = self.extractor.extract(contents)
        entry.characters = extraction.characters.value
        entry.faces = extraction.faces.value
        entry.playtime = extraction.playtime.value

        if extraction.complete:
            logger.info("File %d's info has been restored successfully.", savefile_id)
        else:
            logger.error(
                "Failed to restore some of File %d's save info (%s): %r",
                savefile_id, extraction.failed_field, extraction.error
            )
            logger.warning("You can still try loading File %d.", savefile_id)
        return entry
