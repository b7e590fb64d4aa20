"""Exceptions raised by the save storage layer"""

from typing import Optional


class SaveSyncError(Exception):
    """Base class for save sync errors"""
    pass


class SaveLoadError(SaveSyncError):
    """A named save object is missing, unreadable or corrupt"""

    def __init__(self, name: str, reason: Optional[str] = None):
        self.name = name
        self.reason = reason
        message = f"Could not load save object '{name}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class SaveStorageError(SaveSyncError):
    """A save object could not be written"""
    pass
