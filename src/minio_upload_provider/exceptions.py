"""Custom exceptions for the upload provider."""


class InvalidFileError(Exception):
    """Raised when an image upload has no usable content."""

    def __init__(self, file_name: str):
        self.file_name = file_name
        super().__init__(f"File '{file_name}' has an empty or missing buffer")


class StorageDeleteError(Exception):
    """Raised when the object store reports a failed removal."""

    def __init__(self, object_name: str, reason: str):
        self.object_name = object_name
        self.reason = reason
        super().__init__(f"Failed to delete '{object_name}' from storage: {reason}")
