"""Configuration data models"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .paths import SyncPaths


@dataclass
class Settings:
    """Application settings"""
    game_path: Optional[Path] = None
    save_path: Optional[Path] = None
    game_title: str = ""
    max_savefiles: int = SyncPaths.MAX_SAVEFILES
    save_extension: str = SyncPaths.SAVE_EXTENSION
    index_name: str = SyncPaths.INDEX_NAME

    def resolve_save_path(self) -> Optional[Path]:
        """Get the save directory, falling back to the game's save folder.

        Returns:
            The configured save path, the game's save directory, or None
        """
        if self.save_path is not None:
            return self.save_path
        if self.game_path is not None:
            return SyncPaths.save_dir_for(self.game_path)
        return None
