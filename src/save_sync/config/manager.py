"""Configuration management - load/save XML configuration"""

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Optional
from xml.dom import minidom

from .paths import SyncPaths
from .schema import Settings
from ..logging_config import get_logger

logger = get_logger("config_manager")


class ConfigurationManager:
    """Manages application configuration persistence.

    Handles loading and saving configuration to XML format. A missing or
    unreadable configuration file yields default settings.
    """

    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = config_path or SyncPaths.CONFIG_FILE
        self.settings: Optional[Settings] = None

    def load(self) -> Settings:
        """Load configuration from XML file.

        Returns:
            Settings with loaded values, or defaults if the file is missing
            or malformed
        """
        if not self.config_path.exists():
            logger.debug(f"No configuration at {self.config_path}, using defaults")
            self.settings = Settings()
            return self.settings

        logger.debug(f"Loading configuration from {self.config_path}")
        try:
            root = ET.parse(self.config_path).getroot()
        except (ET.ParseError, OSError) as e:
            # Corrupted config = use defaults
            logger.warning(f"Could not load config, using defaults: {e}")
            self.settings = Settings()
            return self.settings

        defaults = Settings()
        settings_elem = root.find("Settings")
        if settings_elem is None:
            self.settings = defaults
            return self.settings

        self.settings = Settings(
            game_path=self._parse_path(settings_elem, "GamePath"),
            save_path=self._parse_path(settings_elem, "SavePath"),
            game_title=self._get_text(settings_elem, "GameTitle", defaults.game_title),
            max_savefiles=self._parse_int(settings_elem, "MaxSavefiles", defaults.max_savefiles),
            save_extension=self._get_text(settings_elem, "SaveExtension", defaults.save_extension),
            index_name=self._get_text(settings_elem, "IndexName", defaults.index_name),
        )
        return self.settings

    def save(self) -> None:
        """Save current configuration to XML file.

        Creates the configuration directory if it doesn't exist.
        """
        if self.settings is None:
            raise ValueError("No configuration to save")

        logger.debug(f"Saving configuration to {self.config_path}")
        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        root = ET.Element("SaveSync", version="1.0")
        settings_elem = ET.SubElement(root, "Settings")
        ET.SubElement(settings_elem, "GamePath").text = str(self.settings.game_path) if self.settings.game_path else ""
        ET.SubElement(settings_elem, "SavePath").text = str(self.settings.save_path) if self.settings.save_path else ""
        ET.SubElement(settings_elem, "GameTitle").text = self.settings.game_title
        ET.SubElement(settings_elem, "MaxSavefiles").text = str(self.settings.max_savefiles)
        ET.SubElement(settings_elem, "SaveExtension").text = self.settings.save_extension
        ET.SubElement(settings_elem, "IndexName").text = self.settings.index_name

        # Write pretty-printed XML
        xml_str = minidom.parseString(ET.tostring(root, encoding="unicode")).toprettyxml(indent="  ")
        # Remove extra blank lines that minidom adds
        lines = [line for line in xml_str.split('\n') if line.strip()]
        self.config_path.write_text('\n'.join(lines), encoding="utf-8")

    # Helper methods for XML parsing
    @staticmethod
    def _get_text(parent: ET.Element, tag: str, default: str = "") -> str:
        """Get text content of a child element."""
        elem = parent.find(tag)
        return elem.text if elem is not None and elem.text else default

    @staticmethod
    def _parse_int(parent: ET.Element, tag: str, default: int) -> int:
        """Parse a non-negative integer from child element."""
        elem = parent.find(tag)
        if elem is None or not elem.text:
            return default
        try:
            value = int(elem.text.strip())
        except ValueError:
            logger.warning(f"Invalid {tag} value {elem.text!r}, using {default}")
            return default
        if value < 0:
            logger.warning(f"Negative {tag} value {value}, using {default}")
            return default
        return value

    @staticmethod
    def _parse_path(parent: ET.Element, tag: str) -> Optional[Path]:
        """Parse a path value from child element."""
        elem = parent.find(tag)
        if elem is not None and elem.text and elem.text.strip():
            return SyncPaths.expand_path(elem.text.strip())
        return None
