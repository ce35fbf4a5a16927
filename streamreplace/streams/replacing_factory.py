"""
Factory helpers for the replacing filters.

Selects the reader or writer harness based on an explicit argument or the
environment, and offers a whole-string convenience wrapper.
"""
import io
import os
from typing import Callable, Dict, List, Optional, Union

from .guard import Guard, NoGuard
from .protocols import CharacterSink, CharacterSource
from .string_replacing_reader import StringReplacingReader
from .string_replacing_writer import StringReplacingWriter
from ..config.config import config
from ..errors import InvalidConfigurationError

GuardArg = Optional[Union[str, Guard, NoGuard]]

ENV_FACTORY_MODE = "STREAMREPLACE_FACTORY_MODE"


def create_replacing_reader(
    source: CharacterSource,
    find: str,
    replacement: str,
    must_not_follow: GuardArg = None,
    *,
    read_chunk_size: Optional[int] = None,
) -> StringReplacingReader:
    """Create a pull filter over ``source``."""
    return StringReplacingReader(
        source, find, replacement, must_not_follow, read_chunk_size=read_chunk_size
    )


def create_replacing_writer(
    sink: CharacterSink,
    find: str,
    replacement: str,
    must_not_follow: GuardArg = None,
) -> StringReplacingWriter:
    """Create a push filter in front of ``sink``."""
    return StringReplacingWriter(sink, find, replacement, must_not_follow)


class _StringCollector:
    """Sink that keeps everything written to it, even after close."""

    def __init__(self):
        self._parts: List[str] = []

    def write(self, text: str) -> int:
        self._parts.append(text)
        return len(text)

    def flush(self) -> None:
        pass

    def close(self) -> None:
        pass

    def getvalue(self) -> str:
        return "".join(self._parts)


def _replace_with_reader(text: str, find: str, replacement: str, must_not_follow: GuardArg) -> str:
    with create_replacing_reader(io.StringIO(text), find, replacement, must_not_follow) as reader:
        return reader.read()


def _replace_with_writer(text: str, find: str, replacement: str, must_not_follow: GuardArg) -> str:
    collector = _StringCollector()
    with create_replacing_writer(collector, find, replacement, must_not_follow) as writer:
        writer.write(text)
    return collector.getvalue()


MODE_REGISTRY: Dict[str, Callable[[str, str, str, GuardArg], str]] = {
    "reader": _replace_with_reader,
    "writer": _replace_with_writer,
}


def resolve_mode(explicit_mode: Optional[str] = None) -> str:
    """Resolve the harness name from an explicit value, the environment or config."""
    mode = explicit_mode or os.getenv(ENV_FACTORY_MODE, config.STREAMREPLACE_FACTORY_MODE)
    return mode.strip().lower()


def replace_all(
    text: str,
    find: str,
    replacement: str,
    must_not_follow: GuardArg = None,
    *,
    mode: Optional[str] = None,
) -> str:
    """
    Replace every occurrence of ``find`` in ``text`` by streaming it through a filter.

    Args:
        text: The complete input.
        find: The string to find. Must not be empty.
        replacement: The string to emit in its place.
        must_not_follow: Optional guard; occurrences immediately preceded by it are left alone.
        mode: ``"reader"`` or ``"writer"``. Defaults to ``STREAMREPLACE_FACTORY_MODE``.

    Returns:
        The filtered text.
    """
    name = resolve_mode(mode)
    runner = MODE_REGISTRY.get(name)
    if runner is None:
        raise InvalidConfigurationError(
            "Unknown replacement mode '{0}'. Supported: {1}.", name, ", ".join(sorted(MODE_REGISTRY))
        )
    return runner(text, find, replacement, must_not_follow)
