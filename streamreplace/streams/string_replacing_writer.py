"""
StringReplacingWriter: Stream based string replacement as a character sink.

Characters written to this writer are passed through a CharSequenceLocator
and forwarded to the downstream sink with every occurrence of the search
string swapped for the replacement. Up to ``len(find)`` characters are held
back while a match may still complete; they are released on ``close``.
"""
import logging
from typing import Optional, Union

from .char_sequence_locator import CharSequenceLocator
from .guard import Guard, NoGuard
from .protocols import CharacterSink
from ..errors import InvalidConfigurationError, StreamClosedError

logger = logging.getLogger(__name__)


class StringReplacingWriter:
    """
    Push filter replacing a fixed string in the characters written through it.

    ``flush`` forwards to the sink but keeps any partial match buffered, so a
    match that straddles a flush is still replaced.
    """

    def __init__(
        self,
        sink: CharacterSink,
        find: str,
        replacement: str,
        must_not_follow: Optional[Union[str, Guard, NoGuard]] = None,
    ):
        """
        Initialize the writer.

        Args:
            sink: The destination for the filtered character data. Closed when this writer is closed.
            find: The string to find. Must not be empty.
            replacement: The string to replace any found occurrences with. May be empty.
            must_not_follow: Optional guard; occurrences immediately preceded by it are left alone.

        Raises:
            InvalidConfigurationError: If any argument is unusable.
        """
        if sink is None:
            raise InvalidConfigurationError("A sink to write to is required")
        if not isinstance(replacement, str):
            raise InvalidConfigurationError("The replacement must be a str, got {0}", type(replacement).__name__)
        self._sink = sink
        self._replacement = replacement
        self._locator = CharSequenceLocator(find, must_not_follow)
        self._closed = False
        self._replacement_count = 0
        logger.debug(
            f"StringReplacingWriter initialized: find={find!r}, replacement={replacement!r}, "
            f"guard={self._locator.guard!r}"
        )

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def replacement_count(self) -> int:
        """The number of occurrences replaced so far."""
        return self._replacement_count

    def writable(self) -> bool:
        return True

    def write(self, text: str, offset: int = 0, length: Optional[int] = None) -> int:
        """
        Filter ``text[offset:offset + length]`` into the sink.

        Args:
            text: The characters to write.
            offset: Index of the first character to write.
            length: Number of characters to write. Defaults to the rest of ``text``.

        Returns:
            The number of input characters consumed.

        Raises:
            StreamClosedError: If the writer has been closed.
            ValueError: If ``offset``/``length`` fall outside ``text``.
        """
        self._check_closed()
        if length is None:
            length = len(text) - offset
        if offset < 0 or length < 0 or offset + length > len(text):
            raise ValueError(f"offset {offset} and length {length} out of range for text of size {len(text)}")

        locator = self._locator
        output = []
        for i in range(offset, offset + length):
            replacing = locator.is_replacing()
            displaced = locator.append(text[i])
            if replacing:
                output.append(displaced)
            if locator.is_found():
                output.append(self._replacement)
                locator.clear()
                self._replacement_count += 1
        if output:
            self._sink.write("".join(output))
        return length

    def flush(self) -> None:
        """Flush the sink. Characters held for a partial match stay buffered."""
        self._check_closed()
        self._sink.flush()

    def close(self) -> None:
        """Write any characters still held back, then close the sink."""
        if self._closed:
            return
        self._closed = True
        logger.debug(f"StringReplacingWriter closed after {self._replacement_count} replacement(s)")
        try:
            tail = self._locator.purge()
            if tail:
                self._sink.write(tail)
        finally:
            self._sink.close()

    def _check_closed(self) -> None:
        if self._closed:
            raise StreamClosedError("Cannot write to a closed StringReplacingWriter")

    def __enter__(self) -> "StringReplacingWriter":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
