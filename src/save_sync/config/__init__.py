"""Configuration management module.

This module provides configuration storage, loading, and data models for the application.

Submodules:
    manager: ConfigurationManager for loading/saving XML configuration
    schema: Settings data class defining the configuration structure
    paths: SyncPaths with the config directory and MZ project layout

The configuration is stored as XML in the user config directory as configuration.xml.
"""

from .manager import ConfigurationManager
from .schema import Settings
from .paths import SyncPaths

__all__ = [
    "ConfigurationManager",
    "Settings",
    "SyncPaths",
]
