"""
Guard: The optional "must not follow" sequence of a CharSequenceLocator.

A guard is either NO_GUARD, meaning every occurrence of the pattern counts, or
a Guard wrapping the text that, when it immediately precedes the pattern,
suppresses the match.
"""
from typing import Optional, Union

from ..errors import InvalidConfigurationError


class NoGuard:
    """Absence of a guard. Use the NO_GUARD instance."""

    text = ""

    def __len__(self) -> int:
        return 0

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NO_GUARD"


NO_GUARD = NoGuard()


class Guard:
    """
    Text that must not immediately precede the located sequence.

    Instances are immutable and may be shared between locators. The text must
    not be empty. Taken literally, an empty guard precedes every occurrence
    and would suppress every match; instead ``Guard.of("")`` returns NO_GUARD,
    so an empty ``must_not_follow`` leaves every occurrence eligible.
    """

    __slots__ = ("_text",)

    def __init__(self, text: str):
        if not isinstance(text, str):
            raise InvalidConfigurationError("Guard text must be a str, got {0}", type(text).__name__)
        if not text:
            raise InvalidConfigurationError("Guard text must not be empty; use NO_GUARD instead")
        self._text = text

    @property
    def text(self) -> str:
        return self._text

    def __len__(self) -> int:
        return len(self._text)

    def __bool__(self) -> bool:
        return True

    def __eq__(self, other) -> bool:
        if not isinstance(other, Guard):
            return NotImplemented
        return self._text == other._text

    def __hash__(self) -> int:
        return hash(self._text)

    def __repr__(self) -> str:
        return f"Guard({self._text!r})"

    @staticmethod
    def of(value: Optional[Union[str, "Guard", NoGuard]]) -> Union["Guard", NoGuard]:
        """
        Normalise a guard argument.

        None and the empty string both mean no guard.
        """
        if value is None or isinstance(value, NoGuard):
            return NO_GUARD
        if isinstance(value, Guard):
            return value
        if isinstance(value, str):
            return Guard(value) if value else NO_GUARD
        raise InvalidConfigurationError(
            "must_not_follow must be a str, Guard or None, got {0}", type(value).__name__
        )
