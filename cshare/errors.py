from typing import Optional


class ShareError(Exception):
    """Base error for everything the client reports to the user."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ValidationError(ShareError):
    """Bad local input: empty answers, unusable upload paths."""


class FileMissingError(ValidationError):
    pass


class FileTooLargeError(ValidationError):
    pass


class AuthError(ShareError):
    pass


class NotFoundError(ShareError):
    pass


class ConflictError(ShareError):
    pass


class NetworkError(ShareError):
    """The service could not be reached; no response was received."""


class UnknownServiceError(ShareError):
    pass


class MissingCredentialError(ShareError):
    pass
