"""
BaseError: Root of the package's exceptions, carrying an ErrorCode.
"""
from enum import Enum
from typing import Any, Optional, Tuple, Union

from .error_code import ErrorCode, NO_ERROR_CODE


class BaseError(Exception):
    """
    Exception with an error code and optional message arguments.

    The message may contain ``str.format`` placeholders that are bound to
    ``message_args``. The formatted message is prefixed with the error code.
    """

    def __init__(
        self,
        message: str,
        *message_args: Any,
        error_code: Optional[Union[ErrorCode, Enum]] = None,
    ):
        if isinstance(error_code, Enum):
            error_code = error_code.value
        self._error_code: ErrorCode = error_code or NO_ERROR_CODE
        self._raw_message = message
        self._message_args: Tuple[Any, ...] = message_args
        super().__init__(self.get_message())

    @property
    def error_code(self) -> ErrorCode:
        """The error code. Never None; NO_ERROR_CODE when none was given."""
        return self._error_code

    @property
    def message_args(self) -> Tuple[Any, ...]:
        return self._message_args

    def get_message(self, prefix_code: bool = True) -> str:
        """
        Format the message with its arguments.

        Args:
            prefix_code: Whether to prefix the message with the error code.
        """
        message = self._raw_message
        if self._message_args:
            try:
                message = message.format(*self._message_args)
            except (IndexError, KeyError):
                # More placeholders than arguments; keep the template and show the arguments.
                message = f"{message} {list(self._message_args)!r}"
        if prefix_code:
            return f"{self._error_code}: {message}"
        return message
