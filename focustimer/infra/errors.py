"""Exceptions raised by the persistence layer."""


class StorageError(Exception):
    """A file could not be read, written or removed."""


class CorruptRecordError(StorageError):
    """A persisted cycle file exists but cannot be decoded."""
