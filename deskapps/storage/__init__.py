"""Flat file storage package."""

from deskapps.storage.flat_file_store import FlatFileStore, StorageError

__all__ = ["FlatFileStore", "StorageError"]
