"""Default paths for configuration, logs and RPG Maker MZ projects"""

import os
from pathlib import Path

from platformdirs import user_config_dir


class SyncPaths:
    """Default paths used by Save Sync.

    Configuration and logs live in the platform's user config directory.
    Game paths are relative to an RPG Maker MZ project root.
    """

    # Configuration file location
    CONFIG_DIR = Path(user_config_dir("SaveSync", appauthor=False))
    CONFIG_FILE = CONFIG_DIR / "configuration.xml"
    LOG_FILE = CONFIG_DIR / "save_sync.log"

    # Layout of an MZ project (relative to the game directory)
    SAVE_DIR_NAME = "save"
    SYSTEM_DATA_FILE = Path("data") / "System.json"

    # Save storage defaults
    SAVE_EXTENSION = ".rmmzsave"
    INDEX_NAME = "global"
    MAX_SAVEFILES = 20

    @classmethod
    def expand_path(cls, path_str: str) -> Path:
        """Expand ~ and environment variables in a path string.

        Args:
            path_str: Path string potentially containing environment variables

        Returns:
            Path object with expanded variables
        """
        return Path(os.path.expandvars(path_str)).expanduser()

    @classmethod
    def ensure_config_dir(cls) -> Path:
        """Ensure the configuration directory exists.

        Returns:
            Path to the configuration directory
        """
        cls.CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        return cls.CONFIG_DIR

    @classmethod
    def save_dir_for(cls, game_path: Path) -> Path:
        """Get the save directory of an MZ project."""
        return game_path / cls.SAVE_DIR_NAME

    @classmethod
    def system_data_for(cls, game_path: Path) -> Path:
        """Get the System.json path of an MZ project."""
        return game_path / cls.SYSTEM_DATA_FILE
