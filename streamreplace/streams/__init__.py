# Streams package
"""
Streaming fixed-string replacement.

Main components:
- CharSequenceLocator: Cyclic buffer that spots a sequence in a character stream
- StringReplacingReader: Pull filter over a character source
- StringReplacingWriter: Push filter in front of a character sink
- IterableStringReader / StringListWriter: Line oriented source and sink
"""
from .guard import Guard, NoGuard, NO_GUARD
from .char_sequence_locator import CharSequenceLocator, LocatorState
from .protocols import CharacterSource, CharacterSink
from .string_replacing_reader import StringReplacingReader
from .string_replacing_writer import StringReplacingWriter
from .iterable_string_reader import IterableStringReader
from .string_list_writer import StringListWriter
from .replacing_factory import (
    create_replacing_reader,
    create_replacing_writer,
    replace_all,
    resolve_mode,
)

__all__ = [
    # Core
    "CharSequenceLocator",
    "LocatorState",
    "Guard",
    "NoGuard",
    "NO_GUARD",

    # Filters
    "StringReplacingReader",
    "StringReplacingWriter",

    # Stream contracts and adapters
    "CharacterSource",
    "CharacterSink",
    "IterableStringReader",
    "StringListWriter",

    # Convenience functions
    "create_replacing_reader",
    "create_replacing_writer",
    "replace_all",
    "resolve_mode",
]
