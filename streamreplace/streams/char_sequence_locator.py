"""
CharSequenceLocator: Identifies a character sequence within a stream of characters.

Characters are fed in one at a time and held in a fixed-size cyclic buffer
holding the last ``len(to_locate)`` characters (the pattern window), extended
backwards by ``len(must_not_follow)`` characters (the guard window) when a
guard is configured. After each append the caller can ask whether the pattern
window now matches.
"""
from enum import Enum
from typing import List, Optional, Union

from .guard import Guard, NoGuard
from ..errors import InvalidConfigurationError


class LocatorState(Enum):
    """Fill state of the locator buffer before the next append."""
    EMPTY = "empty"
    ARMED = "armed"
    ARMED_GUARDED = "armed_guarded"


class CharSequenceLocator:
    """
    Cyclic buffer that reports when its tail equals a fixed sequence.

    Typical use, sampling ``is_replacing`` before each append::

        replacing = locator.is_replacing()
        displaced = locator.append(char)
        if replacing:
            emit(displaced)
        if locator.is_found():
            emit(replacement)
            locator.clear()
    """

    def __init__(
        self,
        to_locate: str,
        must_not_follow: Optional[Union[str, Guard, NoGuard]] = None,
    ):
        """
        Initialize the locator.

        Args:
            to_locate: The character sequence to locate. Must not be empty.
            must_not_follow: Optional sequence that must not immediately precede
                ``to_locate`` for a match to count.

        Raises:
            InvalidConfigurationError: If ``to_locate`` is empty or not a str.
        """
        if not isinstance(to_locate, str):
            raise InvalidConfigurationError("The sequence to locate must be a str, got {0}", type(to_locate).__name__)
        if not to_locate:
            raise InvalidConfigurationError("The sequence to locate must not be empty")
        self._to_locate = to_locate
        self._guard = Guard.of(must_not_follow)
        self._must_not_follow = self._guard.text
        self._pattern_length = len(to_locate)
        self._guard_length = len(self._must_not_follow)
        self._capacity = self._pattern_length + self._guard_length
        self._buffer: List[str] = ["\0"] * self._capacity
        # Index of the most recently written slot.
        self._tail = 0
        # Populated slots of the pattern window.
        self._length = 0
        # Populated slots of the guard window.
        self._follow_length = 0

    @property
    def to_locate(self) -> str:
        return self._to_locate

    @property
    def guard(self) -> Union[Guard, NoGuard]:
        return self._guard

    @property
    def capacity(self) -> int:
        """Total number of slots: pattern window plus guard window."""
        return self._capacity

    @property
    def length(self) -> int:
        """The number of characters currently in the pattern window."""
        return self._length

    @property
    def follow_length(self) -> int:
        """The number of characters currently in the guard window."""
        return self._follow_length

    @property
    def state(self) -> LocatorState:
        if self._length < self._pattern_length:
            return LocatorState.EMPTY
        if self._guard_length and self._follow_length == self._guard_length:
            return LocatorState.ARMED_GUARDED
        return LocatorState.ARMED

    def get_length(self) -> int:
        return self._length

    def is_replacing(self) -> bool:
        """
        Determine if the buffer is displacing characters from the head of the sequence.

        Returns:
            True if the pattern window is full, so the next call to ``append``
            will push one character out of it.
        """
        return self._length == self._pattern_length

    def append(self, char: str) -> str:
        """
        Add a character to the tail of the buffer.

        Args:
            char: The character to add.

        Returns:
            The character that just left the pattern window. Only meaningful
            if ``is_replacing`` returned True before this call; otherwise the
            value is whatever the slot held and must be ignored.
        """
        self._tail += 1
        if self._tail >= self._capacity:
            self._tail = 0
        if self._length < self._pattern_length:
            self._length += 1
        elif self._follow_length < self._guard_length:
            self._follow_length += 1
        displaced = self._buffer[self._decrement(self._tail, self._pattern_length)]
        self._buffer[self._tail] = char
        return displaced

    def is_found(self) -> bool:
        """
        Determine whether the pattern window matches the sequence being located.

        When a guard is configured and the guard window is full, a match is
        only reported if the guard window differs from the guard.

        Returns:
            True if ``to_locate`` ends at the most recently appended character.
        """
        if self._length != self._pattern_length:
            return False
        buffer = self._buffer
        cursor = self._tail
        for expected in reversed(self._to_locate):
            if buffer[cursor] != expected:
                return False
            cursor = self._decrement(cursor, 1)
        if self._guard_length and self._follow_length == self._guard_length:
            for expected in reversed(self._must_not_follow):
                if buffer[cursor] != expected:
                    return True
                cursor = self._decrement(cursor, 1)
            return False
        return True

    def purge(self) -> str:
        """
        Remove the current contents of the pattern window.

        The guard window and tail are left in place so guard tracking stays
        correct for any further appends.

        Returns:
            The pattern window characters oldest first, or an empty string.
        """
        start = self._decrement(self._tail, self._length - 1)
        contents = "".join(
            self._buffer[(start + i) % self._capacity] for i in range(self._length)
        )
        self._length = 0
        return contents

    def clear(self) -> None:
        """Clear the buffer, including the guard window."""
        self._tail = 0
        self._length = 0
        self._follow_length = 0

    def _decrement(self, cursor: int, amount: int) -> int:
        return (cursor - amount) % self._capacity

    def __repr__(self) -> str:
        return (
            f"CharSequenceLocator(to_locate={self._to_locate!r}, guard={self._guard!r}, "
            f"length={self._length}, follow_length={self._follow_length})"
        )
