"""Load, repair and persist the save index"""

from .errors import SaveStorageError
from .index import SaveIndex
from .index_loader import IndexLoader
from .reconciler import IndexReconciler, ReconcileResult
from .storage import SaveStorage
from ..config.paths import SyncPaths
from ..logging_config import get_logger

logger = get_logger("sync_service")


class IndexSyncService:
    """Entry point for keeping the save index in sync with the save files.

    Nothing here raises to the caller: the worst outcome of a failure is an
    index entry with placeholder values, or an index left unsaved.
    """

    def __init__(
        self,
        storage: SaveStorage,
        game_title: str,
        index_name: str = SyncPaths.INDEX_NAME,
        reconciler: IndexReconciler | None = None,
    ):
        self.storage = storage
        self.index_name = index_name
        self.loader = IndexLoader(storage, index_name)
        self.reconciler = reconciler or IndexReconciler(storage, game_title)

    def load_and_repair(self) -> ReconcileResult:
        """Load the save index and reconcile it with the save files.

        Returns:
            ReconcileResult; changed tells the caller whether to save the index
        """
        index = self.loader.load()
        try:
            return self.reconciler.reconcile(index)
        except Exception:
            # Keep whatever the pass managed to update, but don't ask for a save
            logger.exception("Failed to update save index")
            return ReconcileResult(index=index, changed=False)

    def save_index(self, index: SaveIndex) -> bool:
        """Persist the save index.

        Args:
            index: Index to write

        Returns:
            True if the index was written
        """
        try:
            self.storage.save_object(self.index_name, index.to_storage())
        except SaveStorageError as e:
            logger.error("Could not save index: %s", e)
            return False
        logger.info("Save index saved (%d entries)", len(index))
        return True

    def sync(self, persist: bool = True) -> ReconcileResult:
        """Load and repair the index, saving it if anything changed.

        Args:
            persist: If False, never write the index (dry run)

        Returns:
            ReconcileResult of the pass
        """
        result = self.load_and_repair()
        if result.changed and persist:
            self.save_index(result.index)
        return result
