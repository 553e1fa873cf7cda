"""
Minarai client error types.
"""

from typing import Any, Optional


class MinaraiError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class InvalidArgumentError(MinaraiError):
    """Raised when a client is constructed without its required inputs."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("invalid_argument", message, details)


class UploadNotConfiguredError(MinaraiError):
    def __init__(self, message: str = "`image_url` is needed to upload image."):
        super().__init__("upload_not_configured", message)


class ConnectionError(MinaraiError):
    def __init__(self, message: str):
        super().__init__("connection_error", message)
