"""
Unit tests for the StringReplacingWriter push filter.
"""
import io
import pytest
from unittest.mock import MagicMock

from streamreplace.streams.string_replacing_writer import StringReplacingWriter
from streamreplace.streams.string_list_writer import StringListWriter
from streamreplace.errors import InvalidConfigurationError, StreamClosedError

FIND = "\\u0000"
REPLACE = "\\\\u0000"


class RecordingSink(io.StringIO):
    """StringIO that survives close so its value can be inspected afterwards."""

    def __init__(self):
        super().__init__()
        self.close_calls = 0
        self.flush_calls = 0

    def flush(self):
        self.flush_calls += 1

    def close(self):
        self.close_calls += 1


def _write_all(text, find=FIND, replacement=REPLACE, must_not_follow=None, block_size=16):
    """Write ``text`` through a writer in blocks of ``block_size`` and return the sink contents."""
    sink = RecordingSink()
    with StringReplacingWriter(sink, find, replacement, must_not_follow) as writer:
        for start in range(0, len(text), block_size):
            writer.write(text[start:start + block_size])
    return sink.getvalue()


class TestWriterEscapes:
    """Escaping an escape sequence on its way out."""

    @pytest.mark.parametrize("text", [
        "",
        "test",
        "There is no need to escape this string",
        "\\u0000 and some text",
        "and some text \\u0000",
        "and some \\u0000 text",
        "\\u0000 and \\u0000 some \\u0000 text",
        "and \\u0000 some \\u0000 text\\u0000",
        "and \\u0000 some \\u0000 text\\u0000 test",
        "\\u0000 and \\u0000\\u0000 some \\u0000\\u0000\\u0000\\u0000 text\\u0000 test \\u0000",
        "\\u0001 test",
        "test \\u0001 ",
        "test \\u1000 other",
        "Bob \\u0000 test with a twist of something else \\u0000 for this test \\u89 \\10 Test",
        "Bob \\\x00 test \\\\u0000with a twist \x00 of \\\\\x00 something else \\u0000 for this test \\u89 \\10 Test",
    ])
    @pytest.mark.parametrize("block_size", [1, 5, 16, 1000])
    def test_matches_str_replace(self, text, block_size):
        """Output equals str.replace however the input is split across writes."""
        assert _write_all(text, block_size=block_size) == text.replace(FIND, REPLACE)


class TestWriterScenarios:
    """Concrete scenarios for the push filter."""

    def test_guard_suppresses_escaped_occurrence(self):
        assert _write_all("ab cab \\ab", "ab", "X", "\\") == "X cX \\ab"

    def test_empty_replacement_deletes(self):
        assert _write_all("aaaa", "aa", "") == ""

    def test_partial_match_emitted_on_close(self):
        sink = RecordingSink()
        writer = StringReplacingWriter(sink, "abc", "X")
        writer.write("xxab")
        assert sink.getvalue() == "x"
        writer.close()
        assert sink.getvalue() == "xxab"

    def test_write_with_offset_and_length(self):
        sink = RecordingSink()
        with StringReplacingWriter(sink, "abc", "Z") as writer:
            assert writer.write("xxabcxx", 2, 3) == 3
        assert sink.getvalue() == "Z"

    def test_write_returns_consumed_count(self):
        writer = StringReplacingWriter(RecordingSink(), "abc", "Z")
        assert writer.write("hello") == 5

    def test_out_of_range_rejected(self):
        writer = StringReplacingWriter(RecordingSink(), "abc", "Z")
        with pytest.raises(ValueError):
            writer.write("abc", 2, 5)

    def test_replacement_count(self):
        sink = RecordingSink()
        with StringReplacingWriter(sink, "o", "0") as writer:
            writer.write("foo bar boo")
        assert writer.replacement_count == 4

    def test_into_line_sink(self):
        """Line oriented sinks keep their content after the writer closes them."""
        sink = StringListWriter()
        with StringReplacingWriter(sink, "cat", "dog") as writer:
            writer.write("the cat\nsat on the ca")
            writer.write("t\n")
        assert sink.to_list() == ["the dog", "sat on the dog"]


class TestWriterFlush:
    """flush forwards downstream but keeps a partial match."""

    def test_flush_keeps_partial_match(self):
        sink = RecordingSink()
        writer = StringReplacingWriter(sink, "abc", "X")
        writer.write("ab")
        writer.flush()
        assert sink.flush_calls == 1
        assert sink.getvalue() == ""
        writer.write("cd")
        writer.close()
        assert sink.getvalue() == "Xd"

    def test_flush_after_close_rejected(self):
        writer = StringReplacingWriter(RecordingSink(), "abc", "X")
        writer.close()
        with pytest.raises(StreamClosedError):
            writer.flush()


class TestWriterConfiguration:
    """Tests for constructor validation."""

    def test_empty_pattern_rejected(self):
        with pytest.raises(InvalidConfigurationError):
            StringReplacingWriter(RecordingSink(), "", "x")

    def test_missing_sink_rejected(self):
        with pytest.raises(InvalidConfigurationError):
            StringReplacingWriter(None, "a", "x")

    def test_non_string_replacement_rejected(self):
        with pytest.raises(InvalidConfigurationError):
            StringReplacingWriter(RecordingSink(), "a", 3)


class TestWriterLifecycle:
    """Tests for closing and error propagation."""

    def test_write_after_close_rejected(self):
        writer = StringReplacingWriter(RecordingSink(), "abc", "X")
        writer.close()
        with pytest.raises(StreamClosedError):
            writer.write("more")

    def test_closed_error_is_value_error(self):
        """Use after close raises the same base type as the io module."""
        writer = StringReplacingWriter(RecordingSink(), "abc", "X")
        writer.close()
        with pytest.raises(ValueError):
            writer.write("more")

    def test_close_is_idempotent(self):
        sink = RecordingSink()
        writer = StringReplacingWriter(sink, "abc", "X")
        writer.write("ab")
        writer.close()
        writer.close()
        assert writer.closed is True
        assert sink.close_calls == 1
        assert sink.getvalue() == "ab"

    def test_downstream_write_error_propagates(self):
        sink = MagicMock()
        sink.write.side_effect = OSError("pipe closed")
        writer = StringReplacingWriter(sink, "a", "b")
        with pytest.raises(OSError, match="pipe closed"):
            writer.write("xyz")

    def test_close_error_raised_once_and_sink_closed(self):
        """A failing tail write still closes the sink, and a second close is a no-op."""
        sink = MagicMock()
        sink.write.side_effect = OSError("pipe closed")
        writer = StringReplacingWriter(sink, "abc", "X")
        writer.write("ab")
        sink.write.assert_not_called()
        with pytest.raises(OSError):
            writer.close()
        sink.close.assert_called_once_with()
        writer.close()
        sink.close.assert_called_once_with()
