"""
Storage error taxonomy.
"""


class StorageError(Exception):
    """Base class for failures of the persistent store."""

    def __init__(self, message: str, path: str = None):
        super().__init__(message)
        self.path = path


class OpenFailed(StorageError):
    """The storage file could not be created, opened or migrated."""


class WriteFailed(StorageError):
    """An insert could not be prepared, bound or committed."""


class ReadFailed(StorageError):
    """A scan could not be executed against the storage engine."""
