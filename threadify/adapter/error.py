"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class StorageError(AdapterError):
    """Photo storage read/write failure."""

    pass
