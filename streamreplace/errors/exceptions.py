"""
Exceptions raised by the stream replacement filters.
"""
from enum import Enum

from .base_error import BaseError
from .error_code import Area, ErrorCode

STREAM_REPLACE_AREA = Area("SR")


class StreamReplaceErrorCode(Enum):
    """Error codes for the SR area."""
    SR1 = ErrorCode(STREAM_REPLACE_AREA, 1)  # invalid configuration
    SR2 = ErrorCode(STREAM_REPLACE_AREA, 2)  # stream closed


class StreamReplaceError(BaseError):
    """Base exception class for stream replacement errors."""
    pass


class InvalidConfigurationError(StreamReplaceError, ValueError):
    """Raised at construction when a filter or locator is given unusable arguments."""

    def __init__(self, message: str, *message_args):
        super().__init__(message, *message_args, error_code=StreamReplaceErrorCode.SR1)


class StreamClosedError(StreamReplaceError, ValueError):
    """Raised when a closed stream is used."""

    def __init__(self, message: str = "I/O operation on closed stream", *message_args):
        super().__init__(message, *message_args, error_code=StreamReplaceErrorCode.SR2)
