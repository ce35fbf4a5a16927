from .streams import (
    CharSequenceLocator,
    LocatorState,
    Guard,
    NoGuard,
    NO_GUARD,
    StringReplacingReader,
    StringReplacingWriter,
    CharacterSource,
    CharacterSink,
    IterableStringReader,
    StringListWriter,
    create_replacing_reader,
    create_replacing_writer,
    replace_all,
    resolve_mode,
)
from .errors import (
    BaseError,
    ErrorCode,
    StreamReplaceError,
    InvalidConfigurationError,
    StreamClosedError,
)

__version__ = "0.1.0"

__all__ = [
    "CharSequenceLocator",
    "LocatorState",
    "Guard",
    "NoGuard",
    "NO_GUARD",
    "StringReplacingReader",
    "StringReplacingWriter",
    "CharacterSource",
    "CharacterSink",
    "IterableStringReader",
    "StringListWriter",
    "create_replacing_reader",
    "create_replacing_writer",
    "replace_all",
    "resolve_mode",
    "BaseError",
    "ErrorCode",
    "StreamReplaceError",
    "InvalidConfigurationError",
    "StreamClosedError",
]
