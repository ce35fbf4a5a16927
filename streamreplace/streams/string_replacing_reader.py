"""
StringReplacingReader: Stream based string replacement as a character source.

Characters are pulled from an upstream source, passed through a
CharSequenceLocator and handed to the caller with every occurrence of the
search string swapped for the replacement. Partial matches that fail to
complete are emitted unchanged and in order.
"""
import logging
from collections import deque
from typing import Deque, MutableSequence, Optional, Union

from .char_sequence_locator import CharSequenceLocator
from .guard import Guard, NoGuard
from .protocols import CharacterSource
from ..config.config import config
from ..errors import InvalidConfigurationError, StreamClosedError

logger = logging.getLogger(__name__)

_READ_ALL_BLOCK_SIZE = 8192


def _configured_chunk_size() -> int:
    """Parse ``STREAMREPLACE_READ_CHUNK_SIZE`` from the config."""
    value = config.STREAMREPLACE_READ_CHUNK_SIZE
    if isinstance(value, int):
        return value
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise InvalidConfigurationError(
            "STREAMREPLACE_READ_CHUNK_SIZE must be a positive integer, got {0!r}", value
        ) from e


class StringReplacingReader:
    """
    Pull filter replacing a fixed string in the characters read from ``source``.

    ``read_into`` follows the ``readinto`` convention of the ``io`` module:
    it returns the number of characters produced, and 0 once the stream is
    exhausted.
    """

    def __init__(
        self,
        source: CharacterSource,
        find: str,
        replace_with: str,
        must_not_follow: Optional[Union[str, Guard, NoGuard]] = None,
        *,
        read_chunk_size: Optional[int] = None,
    ):
        """
        Initialize the reader.

        Args:
            source: The upstream character source. Closed when this reader is closed.
            find: The string to find. Must not be empty.
            replace_with: The string to emit in place of each occurrence. May be empty.
            must_not_follow: Optional guard; occurrences immediately preceded by it are left alone.
            read_chunk_size: How many characters to request from ``source`` per pull.
                Defaults to ``STREAMREPLACE_READ_CHUNK_SIZE``.

        Raises:
            InvalidConfigurationError: If any argument is unusable.
        """
        if source is None:
            raise InvalidConfigurationError("A source to read from is required")
        if not isinstance(replace_with, str):
            raise InvalidConfigurationError("The replacement must be a str, got {0}", type(replace_with).__name__)
        if read_chunk_size is None:
            read_chunk_size = _configured_chunk_size()
        if isinstance(read_chunk_size, bool) or not isinstance(read_chunk_size, int) or read_chunk_size < 1:
            raise InvalidConfigurationError("read_chunk_size must be a positive int, got {0!r}", read_chunk_size)

        self._source = source
        self._locator = CharSequenceLocator(find, must_not_follow)
        self._replace_with = replace_with
        self._read_chunk_size = read_chunk_size

        # Characters decided on but not yet handed to the caller.
        self._pending: Deque[str] = deque()
        # Characters fetched from upstream but not yet fed to the locator.
        self._input = ""
        self._input_pos = 0
        self._eof = False
        self._closed = False
        self._replacement_count = 0
        logger.debug(
            f"StringReplacingReader initialized: find={find!r}, replace_with={replace_with!r}, "
            f"guard={self._locator.guard!r}, read_chunk_size={read_chunk_size}"
        )

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def replacement_count(self) -> int:
        """The number of occurrences replaced so far."""
        return self._replacement_count

    def readable(self) -> bool:
        return True

    def read_into(
        self,
        buffer: MutableSequence[str],
        offset: int = 0,
        length: Optional[int] = None,
    ) -> int:
        """
        Read filtered characters into ``buffer``.

        Args:
            buffer: Mutable sequence receiving one character per slot.
            offset: Index of the first slot to fill.
            length: Maximum number of slots to fill. Defaults to the rest of ``buffer``.

        Returns:
            The number of characters written to ``buffer``, or 0 at end of stream.

        Raises:
            StreamClosedError: If the reader has been closed.
            ValueError: If ``offset``/``length`` fall outside ``buffer``.
        """
        self._check_closed()
        if length is None:
            length = len(buffer) - offset
        if offset < 0 or length < 0 or offset + length > len(buffer):
            raise ValueError(f"offset {offset} and length {length} out of range for buffer of size {len(buffer)}")

        pending = self._pending
        locator = self._locator
        count = 0
        while count < length:
            if pending:
                buffer[offset + count] = pending.popleft()
                count += 1
                continue
            if self._eof:
                break
            char = self._pull()
            if char is None:
                self._eof = True
                pending.extend(locator.purge())
                continue
            replacing = locator.is_replacing()
            displaced = locator.append(char)
            if replacing:
                pending.append(displaced)
            if locator.is_found():
                locator.clear()
                pending.extend(self._replace_with)
                self._replacement_count += 1
        return count

    def read(self, size: Optional[int] = -1) -> str:
        """
        Read up to ``size`` filtered characters, or everything if ``size`` is negative or None.

        Returns:
            The characters read; an empty string at end of stream.
        """
        self._check_closed()
        remaining = size if size is not None and size >= 0 else None
        parts = []
        # Scratch space is bounded by the block size, not by the size requested.
        buffer = [""] * (_READ_ALL_BLOCK_SIZE if remaining is None else min(remaining, _READ_ALL_BLOCK_SIZE))
        while remaining is None or remaining > 0:
            length = len(buffer) if remaining is None else min(remaining, len(buffer))
            count = self.read_into(buffer, 0, length)
            if count == 0:
                break
            parts.append("".join(buffer[:count]))
            if remaining is not None:
                remaining -= count
        return "".join(parts)

    def close(self) -> None:
        """Close this reader and the upstream source."""
        if self._closed:
            return
        self._closed = True
        logger.debug(f"StringReplacingReader closed after {self._replacement_count} replacement(s)")
        self._source.close()

    def _pull(self) -> Optional[str]:
        """Take the next upstream character, or None at end of stream."""
        if self._input_pos >= len(self._input):
            self._input = self._source.read(self._read_chunk_size)
            self._input_pos = 0
            if not self._input:
                return None
        char = self._input[self._input_pos]
        self._input_pos += 1
        return char

    def _check_closed(self) -> None:
        if self._closed:
            raise StreamClosedError("Cannot read from a closed StringReplacingReader")

    def __enter__(self) -> "StringReplacingReader":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
