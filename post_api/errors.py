from typing import Optional


class PostCreationError(Exception):
    """Base class for failures that end a create-post request."""

    status_code = 500

    def __init__(self, message: str, detail: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.detail = detail


class MalformedInputError(PostCreationError):
    status_code = 400


class MissingFieldsError(PostCreationError):
    status_code = 400


class InvalidDateError(PostCreationError):
    status_code = 400


class ConflictError(PostCreationError):
    status_code = 409

    @classmethod
    def for_filename(cls, filename: str) -> "ConflictError":
        return cls(f"File already exists: {filename}. Please use a different title.")


class StorageError(PostCreationError):
    status_code = 500


class SerializationError(StorageError):
    pass


class AuthoringDisabledError(PostCreationError):
    status_code = 403
