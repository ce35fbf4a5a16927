"""
Protocols for the character streams wrapped by the replacing filters.

Any text file object (``io.StringIO``, ``open(..., "r")``) satisfies
CharacterSource, and any writable text file object satisfies CharacterSink.
"""
from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class CharacterSource(Protocol):
    """Upstream of a StringReplacingReader."""

    def read(self, size: int = -1) -> str:
        """Return up to ``size`` characters, or an empty string at end of stream."""
        ...

    def close(self) -> None:
        ...


@runtime_checkable
class CharacterSink(Protocol):
    """Downstream of a StringReplacingWriter."""

    def write(self, text: str) -> Optional[int]:
        ...

    def flush(self) -> None:
        ...

    def close(self) -> None:
        ...
