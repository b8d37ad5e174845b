import io

import pytest

from pipex.lines import LineReader


@pytest.mark.parametrize("buffer_size", [1, 2, 3, 5, 1024])
def test_lines_keep_newlines(buffer_size):
    reader = LineReader(io.StringIO("one\ntwo\nthree"), buffer_size)
    assert list(reader) == ["one\n", "two\n", "three"]


@pytest.mark.parametrize("buffer_size", [1, 4, 1024])
def test_round_trip_joins_back(buffer_size):
    text = "alpha\n\nbeta\ngamma delta\n\n\nend\n"
    reader = LineReader(io.StringIO(text), buffer_size)
    lines = list(reader)
    assert "".join(lines) == text
    assert all(line.endswith("\n") for line in lines)


def test_empty_stream_gives_none():
    reader = LineReader(io.StringIO(""))
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_read_line_after_exhaustion_returns_none():
    reader = LineReader(io.StringIO("last"), 2)
    assert reader.read_line() == "last"
    assert reader.read_line() is None


def test_binary_stream():
    reader = LineReader(io.BytesIO(b"ab\ncd\n"), 3)
    assert reader.read_line() == b"ab\n"
    assert reader.read_line() == b"cd\n"
    assert reader.read_line() is None


def test_empty_lines_are_returned():
    reader = LineReader(io.StringIO("\n\n"), 10)
    assert list(reader) == ["\n", "\n"]


def test_invalid_buffer_size():
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), 0)


class _FailingStream:
    def __init__(self):
        self.calls = 0

    def read(self, size):
        self.calls += 1
        if self.calls == 1:
            return "partial"
        raise OSError("read failed")


def test_read_error_propagates_and_discards_pending():
    stream = _FailingStream()
    reader = LineReader(stream, 7)
    with pytest.raises(OSError):
        reader.read_line()
    assert stream.calls == 2