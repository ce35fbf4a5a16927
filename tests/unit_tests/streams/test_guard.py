"""
Unit tests for the Guard / NO_GUARD variants.
"""
import pytest
from streamreplace.streams.guard import Guard, NoGuard, NO_GUARD
from streamreplace.errors import InvalidConfigurationError


class TestGuardOf:
    """Tests for normalising guard arguments."""

    def test_none_is_no_guard(self):
        assert Guard.of(None) is NO_GUARD

    def test_empty_string_is_no_guard(self):
        assert Guard.of("") is NO_GUARD

    def test_no_guard_passes_through(self):
        assert Guard.of(NO_GUARD) is NO_GUARD

    def test_string_becomes_guard(self):
        guard = Guard.of("\\")
        assert isinstance(guard, Guard)
        assert guard.text == "\\"

    def test_guard_passes_through(self):
        guard = Guard("xy")
        assert Guard.of(guard) is guard

    def test_other_types_rejected(self):
        with pytest.raises(InvalidConfigurationError):
            Guard.of(5)


class TestGuardValue:
    """Tests for the Guard value semantics."""

    def test_empty_guard_rejected(self):
        with pytest.raises(InvalidConfigurationError):
            Guard("")

    def test_length_and_truth(self):
        assert len(Guard("xy")) == 2
        assert bool(Guard("x")) is True
        assert len(NO_GUARD) == 0
        assert bool(NO_GUARD) is False
        assert isinstance(NO_GUARD, NoGuard)

    def test_equality(self):
        assert Guard("ab") == Guard("ab")
        assert Guard("ab") != Guard("ba")
        assert hash(Guard("ab")) == hash(Guard("ab"))
