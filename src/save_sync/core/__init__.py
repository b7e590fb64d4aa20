"""Core business logic module.

This module contains the save index reconciliation and the storage it runs on.

Submodules:
    index: IndexEntry and SaveIndex, the save index data model
    save_contents: SaveContents protocol and the JSON adapter for MZ save payloads
    summary: SummaryExtractor for party portraits and playtime
    index_loader: IndexLoader, falls back to an empty index on read failure
    reconciler: IndexReconciler, restores missing and removes stale entries
    sync_service: IndexSyncService, loads, repairs and saves the index
    storage: SaveStorage protocol and LocalSaveStorage for zlib/JSON save files
    game_detector: GameDetector for locating saves and the title of a game
    errors: Exception types raised by storage
"""

from .errors import SaveLoadError, SaveStorageError, SaveSyncError
from .index import IndexEntry, SaveIndex
from .index_loader import IndexLoader
from .reconciler import IndexReconciler, ReconcileResult
from .storage import LocalSaveStorage, SaveStorage
from .summary import FieldResult, SummaryExtraction, SummaryExtractor, format_playtime
from .sync_service import IndexSyncService

__all__ = [
    "IndexEntry",
    "IndexLoader",
    "IndexReconciler",
    "IndexSyncService",
    "FieldResult",
    "LocalSaveStorage",
    "ReconcileResult",
    "SaveIndex",
    "SaveLoadError",
    "SaveStorage",
    "SaveStorageError",
    "SaveSyncError",
    "SummaryExtraction",
    "SummaryExtractor",
    "format_playtime",
]
