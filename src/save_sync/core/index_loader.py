"""Loading of the persisted save index"""

from .errors import SaveLoadError
from .index import SaveIndex
from .storage import SaveStorage
from ..config.paths import SyncPaths
from ..logging_config import get_logger

logger = get_logger("index_loader")


class IndexLoader:
    """Fetches the save index from storage.

    A missing or unreadable index is replaced by an empty one, so every
    existing save file will be restored by the next reconciliation pass.
    """

    def __init__(self, storage: SaveStorage, index_name: str = SyncPaths.INDEX_NAME):
        self.storage = storage
        self.index_name = index_name

    def load(self) -> SaveIndex:
        """Load the save index.

        Returns:
            The stored SaveIndex, or an empty SaveIndex if it could not be read
        """
        try:
            data = self.storage.load_object(self.index_name)
            index = SaveIndex.from_storage(data)
        except (SaveLoadError, TypeError) as e:
            logger.warning("Could not load save index. Using empty index: %s", e)
            return SaveIndex()

        logger.info("Save index loaded (%d entries)", len(index))
        return index
