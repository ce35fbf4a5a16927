"""
IterableStringReader: Presents an iterable of lines as a character source.
"""
from typing import Iterable, Iterator, Optional

from ..errors import StreamClosedError


class IterableStringReader:
    """
    Character source over an iterable of strings.

    Each string is treated as a line and followed by ``'\\n'``, including the
    last one. Lines are pulled from the iterable lazily.
    """

    def __init__(self, lines: Iterable[str]):
        self._lines: Iterator[str] = iter(lines)
        self._current: str = ""
        self._pos: int = 0
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def readable(self) -> bool:
        return True

    def read(self, size: Optional[int] = -1) -> str:
        """
        Read up to ``size`` characters, or everything if ``size`` is negative or None.

        Returns:
            The characters read; an empty string once every line has been read.
        """
        if self._closed:
            raise StreamClosedError("Cannot read from a closed IterableStringReader")
        remaining = size if size is not None and size >= 0 else None
        parts = []
        while remaining is None or remaining > 0:
            if self._pos >= len(self._current):
                line = next(self._lines, None)
                if line is None:
                    break
                self._current = line + "\n"
                self._pos = 0
            end = len(self._current) if remaining is None else min(len(self._current), self._pos + remaining)
            chunk = self._current[self._pos:end]
            parts.append(chunk)
            self._pos = end
            if remaining is not None:
                remaining -= len(chunk)
        return "".join(parts)

    def close(self) -> None:
        self._closed = True

    def __enter__(self) -> "IterableStringReader":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
