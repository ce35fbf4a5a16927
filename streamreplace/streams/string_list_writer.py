"""
StringListWriter: Character sink that collects what is written as a list of lines.
"""
from typing import List

from ..errors import StreamClosedError


class StringListWriter:
    """
    Splits written text into lines on ``'\\n'``, ignoring ``'\\r'``.

    The lines remain available after ``close``, which makes this a convenient
    sink for a StringReplacingWriter since closing the filter closes its sink.
    """

    def __init__(self):
        self._lines: List[str] = []
        self._line: List[str] = []
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def writable(self) -> bool:
        return True

    def write(self, text: str) -> int:
        if self._closed:
            raise StreamClosedError("This writer is closed")
        for char in text:
            if char == "\r":
                continue
            if char == "\n":
                self._lines.append("".join(self._line))
                self._line = []
            else:
                self._line.append(char)
        return len(text)

    def flush(self) -> None:
        pass

    def close(self) -> None:
        """Close the writer, keeping a trailing partial line if there is one."""
        if self._closed:
            return
        if self._line:
            self._lines.append("".join(self._line))
            self._line = []
        self._closed = True

    def to_list(self) -> List[str]:
        """Close the writer and return the lines written."""
        self.close()
        return list(self._lines)

    def __enter__(self) -> "StringListWriter":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
