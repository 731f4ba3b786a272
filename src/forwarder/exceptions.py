"""Exceptions raised by the forwarding pipeline."""

from typing import Optional


class ForwarderError(Exception):
    """Base exception for forwarding errors."""

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        self.original_error = original_error
        super().__init__(message)


class FetchError(ForwarderError):
    """Raised when a raw message cannot be read from S3."""

    def __init__(
        self,
        message: str,
        bucket: str = "",
        key: str = "",
        original_error: Optional[Exception] = None,
    ):
        self.bucket = bucket
        self.key = key
        super().__init__(message, original_error)


class SendError(ForwarderError):
    """Raised when SES rejects or fails to transmit a message."""

    pass
