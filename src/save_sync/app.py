"""Command-line entry point: one sync pass over a game's save directory"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from .config.manager import ConfigurationManager
from .config.schema import Settings
from .core.game_detector import GameDetector
from .core.storage import LocalSaveStorage
from .core.sync_service import IndexSyncService
from .core.reconciler import ReconcileResult
from .logging_config import setup_logging
from . import __version__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="save-sync",
        description="Restore missing and remove stale entries in an RPG Maker MZ save index.",
    )
    parser.add_argument("game_dir", nargs="?", type=Path,
                        help="Game directory (defaults to the last one used)")
    parser.add_argument("--save-dir", type=Path,
                        help="Save directory (defaults to GAME_DIR/save)")
    parser.add_argument("--dry-run", action="store_true",
                        help="Report changes without saving the index")
    parser.add_argument("--debug", action="store_true",
                        help="Log everything to the console")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


class SaveSyncApp:
    """Application orchestrator.

    Resolves settings from configuration and arguments, then runs the sync.
    """

    def __init__(self, settings: Settings, detector: Optional[GameDetector] = None):
        self.settings = settings
        self.detector = detector or GameDetector()

    def run(self, persist: bool = True) -> Optional[ReconcileResult]:
        """Run one sync pass.

        Args:
            persist: If False, changes are reported but not saved

        Returns:
            ReconcileResult, or None if there is no save directory to sync
        """
        title = self.settings.game_title
        save_path = self.settings.resolve_save_path()
        if self.settings.game_path is not None:
            info = self.detector.detect(self.settings.game_path, self.settings.save_path)
            if not info.has_saves():
                return None
            title = title or info.title
            save_path = info.save_path
        elif save_path is None or not save_path.is_dir():
            return None

        storage = LocalSaveStorage(
            save_path,
            max_savefiles=self.settings.max_savefiles,
            extension=self.settings.save_extension,
        )
        service = IndexSyncService(storage, title, index_name=self.settings.index_name)
        return service.sync(persist=persist)


def main(argv: Optional[list[str]] = None) -> int:
    """Application entry point."""
    args = build_parser().parse_args(argv)

    # Initialize logging first
    logger = setup_logging(debug=args.debug)
    logger.info(f"Starting Save Sync v{__version__}")

    config_manager = ConfigurationManager()
    settings = config_manager.load()
    if args.game_dir is not None:
        settings.game_path = args.game_dir.resolve()
    if args.save_dir is not None:
        settings.save_path = args.save_dir.resolve()

    result = SaveSyncApp(settings).run(persist=not args.dry_run)
    if result is None:
        logger.error("No save directory found; pass a game directory or --save-dir")
        print("No save directory found.", file=sys.stderr)
        return 1

    # Remember the directories so the next run can omit them
    if args.game_dir is not None or args.save_dir is not None:
        try:
            config_manager.save()
        except OSError as e:
            logger.warning(f"Could not save configuration: {e}")

    if not result.changed:
        print("Save index is up to date.")
    else:
        action = "Would update" if args.dry_run else "Updated"
        print(
            f"{action} save index: restored {result.added or 'none'}, "
            f"removed {result.removed or 'none'}."
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
