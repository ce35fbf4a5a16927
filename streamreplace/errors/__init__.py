from .error_code import (
    Area,
    ErrorCode,
    NO_AREA,
    NO_ERROR_CODE,
    extract_area,
    extract_error_number,
    extract_error_number_from_name,
    parse_code,
)
from .base_error import BaseError
from .exceptions import (
    STREAM_REPLACE_AREA,
    StreamReplaceErrorCode,
    StreamReplaceError,
    InvalidConfigurationError,
    StreamClosedError,
)

__all__ = [
    "Area",
    "ErrorCode",
    "NO_AREA",
    "NO_ERROR_CODE",
    "extract_area",
    "extract_error_number",
    "extract_error_number_from_name",
    "parse_code",
    "BaseError",
    "STREAM_REPLACE_AREA",
    "StreamReplaceErrorCode",
    "StreamReplaceError",
    "InvalidConfigurationError",
    "StreamClosedError",
]
