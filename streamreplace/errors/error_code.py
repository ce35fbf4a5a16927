"""
ErrorCode: Structured identifiers for errors raised within the package.

An error code is made of an Area, a short identifier for the part of the system
where the error originated, and a number unique within that area. The string
form concatenates the two, e.g. ``SR1``.
"""
import re
from typing import Optional

_CODE_PARSE = re.compile(r"^(\w+?)(\d+)$")


class Area:
    """Identifies an area of the system. The recommended ID is two characters."""

    def __init__(self, area_id: str):
        self._id = area_id

    @property
    def id(self) -> str:
        return self._id

    def __eq__(self, other) -> bool:
        if not isinstance(other, Area):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __str__(self) -> str:
        return self._id

    def __repr__(self) -> str:
        return f"Area({self._id!r})"


class ErrorCode:
    """
    An area plus a number that together identify one kind of error.

    Two codes are equal when both their area and their number match, so a code
    parsed from a string compares equal to the statically defined one.
    """

    def __init__(self, area: Area, number: int):
        self._area = area
        self._number = number

    @property
    def area(self) -> Area:
        return self._area

    @property
    def number(self) -> int:
        return self._number

    def __eq__(self, other) -> bool:
        if not isinstance(other, ErrorCode):
            return NotImplemented
        return self._area == other._area and self._number == other._number

    def __hash__(self) -> int:
        return hash((self._area, self._number))

    def __str__(self) -> str:
        return f"{self._area.id}{self._number}"

    def __repr__(self) -> str:
        return f"ErrorCode({str(self)!r})"


NO_AREA = Area("??")
NO_ERROR_CODE = ErrorCode(NO_AREA, 0)


def extract_error_number_from_name(enum_name: str, area: Area) -> int:
    """
    Extract the error number from an enum member name such as ``SR1``.

    Args:
        enum_name: The member name, which must be prefixed with the area ID.
        area: The area the member belongs to.

    Returns:
        The number that follows the area prefix.

    Raises:
        ValueError: If the name is not prefixed by the area ID or the suffix is not a number.
    """
    if not enum_name.startswith(area.id):
        raise ValueError(f"The error code name '{enum_name}' is not prefixed with the area ID '{area.id}'")
    suffix = enum_name[len(area.id):]
    if not suffix.isdigit():
        raise ValueError(f"The error code name '{enum_name}' does not have a valid number suffix")
    return int(suffix)


def extract_error_number(code: str) -> int:
    """Extract the trailing number from an error code string."""
    match = _CODE_PARSE.match(code)
    if match is None:
        raise ValueError(f"Failed to extract number from error code '{code}'")
    return int(match.group(2))


def extract_area(code: str) -> Area:
    """Extract the leading area from an error code string."""
    match = _CODE_PARSE.match(code)
    if match is None:
        raise ValueError(f"Failed to extract area from error code '{code}'")
    return Area(match.group(1))


def parse_code(code: Optional[str]) -> Optional[ErrorCode]:
    """
    Parse an error code string such as ``sr1`` or ``SR1``.

    The result is a fresh ErrorCode that compares equal to any code with the
    same area and number.

    Returns:
        The parsed code, or None if the value cannot be parsed.
    """
    if code is None:
        return None
    match = _CODE_PARSE.match(code.upper())
    if match is None:
        return None
    return ErrorCode(Area(match.group(1)), int(match.group(2)))
