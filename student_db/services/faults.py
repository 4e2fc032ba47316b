# /student_db/services/faults.py

"""
The fault taxonomy of the student directory.

Every fault carries a human-readable `message` that can be shown to the user
as-is. Validation and asset faults are raised before the record store is
touched; `StorageFault` is the only one that can come out of the store.
"""


class DirectoryFault(Exception):
    """Base class for every failure the directory reports."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationFault(DirectoryFault):
    """Bad field input. Nothing was written."""


class MissingAssetFault(DirectoryFault):
    """A student cannot be saved without a photo."""

    def __init__(self, message: str = "Please select a student photo."):
        super().__init__(message)


class AssetFault(DirectoryFault):
    """A photo could not be acquired or copied into durable storage."""


class StorageFault(DirectoryFault):
    """The record store could not complete the operation."""
