"""Save Sync - Save index repair for RPG Maker MZ games.

RPG Maker MZ's load menu is populated from a save index (global.rmmzsave),
not from the save files themselves. When save files are restored from a
backup or synced by a cloud service, the index can fall out of step and the
player loses access to saves that are still on disk. This package:
    - Restores missing index entries from the save files (party portraits, playtime)
    - Removes index entries whose save file no longer exists
    - Saves the index only when something changed

Package Structure:
    app: Command-line entry point running one sync pass
    config: Configuration management, paths and settings schema
    core: Save index model, summary extraction, reconciliation and storage

Quick Start:
    Run from command line::

        save-sync path/to/game

    Or programmatically::

        from save_sync.core import IndexSyncService, LocalSaveStorage
        storage = LocalSaveStorage(Path("path/to/game/save"))
        result = IndexSyncService(storage, "My Game").sync()

Configuration:
    - Config file: <user config dir>/SaveSync/configuration.xml
    - Log file: <user config dir>/SaveSync/save_sync.log
"""

__version__ = "1.0.0"
__app_name__ = "Save Sync"
