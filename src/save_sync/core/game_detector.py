"""Detect the save directory and title of an RPG Maker MZ game"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..config.paths import SyncPaths
from ..logging_config import get_logger

logger = get_logger("game_detector")


@dataclass
class GameInfo:
    """Paths and title of a detected game"""
    game_path: Path
    save_path: Path
    title: str = ""

    def has_saves(self) -> bool:
        """Check if the game's save directory exists.

        Returns:
            True if save_path is an existing directory
        """
        return self.save_path.is_dir()


class GameDetector:
    """Inspect an MZ game directory.

    The save directory is the ``save`` folder next to ``data``; the title
    comes from ``data/System.json``.
    """

    def read_title(self, game_path: Path) -> str:
        """Read the game title from System.json.

        Args:
            game_path: Game root directory

        Returns:
            The gameTitle value, or an empty string if it can't be read
        """
        system_file = SyncPaths.system_data_for(game_path)
        try:
            data = json.loads(system_file.read_text(encoding="utf-8-sig"))
            title = data.get("gameTitle", "")
        except (OSError, ValueError, AttributeError) as e:
            logger.debug("Could not read game title from %s: %s", system_file, e)
            return ""
        return title if isinstance(title, str) else ""

    def detect(self, game_path: Path, save_path: Optional[Path] = None) -> GameInfo:
        """Detect a game's save directory and title.

        Args:
            game_path: Game root directory
            save_path: Explicit save directory, overriding the default

        Returns:
            GameInfo for the game
        """
        info = GameInfo(
            game_path=game_path,
            save_path=save_path or SyncPaths.save_dir_for(game_path),
            title=self.read_title(game_path),
        )
        logger.debug("Detected game %r with saves in %s", info.title, info.save_path)
        return info
