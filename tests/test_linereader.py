import io

import pytest

from solong.linereader import LineReader

SAMPLE = "11111\n10P01\n1C0E1\n\n11111"


@pytest.mark.parametrize("buffer_size", [1, 2, 3, 5, 48, 1000])
def test_lines_match_splitlines(buffer_size):
    reader = LineReader(io.StringIO(SAMPLE), buffer_size)
    assert list(reader) == SAMPLE.splitlines(keepends=True)


@pytest.mark.parametrize("buffer_size", [1, 4, 48])
def test_joined_lines_reproduce_input(buffer_size):
    text = "a\nbb\n\nccc\n"
    reader = LineReader(io.StringIO(text), buffer_size)
    assert "".join(reader) == text


def test_last_line_without_newline_is_kept():
    reader = LineReader(io.StringIO("first\nsecond"), 4)
    assert reader.read_line() == "first\n"
    assert reader.read_line() == "second"
    assert reader.read_line() is None


def test_empty_stream_gives_none():
    reader = LineReader(io.StringIO(""), 8)
    assert reader.read_line() is None
    assert list(reader) == []


def test_none_repeats_after_end():
    reader = LineReader(io.StringIO("x\n"), 8)
    assert reader.read_line() == "x\n"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_blank_lines():
    reader = LineReader(io.StringIO("\n\n"), 1)
    assert list(reader) == ["\n", "\n"]


def test_binary_stream():
    data = b"one\ntwo\nthree"
    reader = LineReader(io.BytesIO(data), 3)
    assert list(reader) == data.splitlines(keepends=True)


def test_default_buffer_size_reads_long_lines():
    text = "z" * 500 + "\n" + "y" * 130
    reader = LineReader(io.StringIO(text))
    assert list(reader) == text.splitlines(keepends=True)


@pytest.mark.parametrize("buffer_size", [0, -3])
def test_rejects_non_positive_buffer(buffer_size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("abc"), buffer_size)


def test_closed_stream_raises():
    stream = io.StringIO("abc\n")
    stream.close()
    reader = LineReader(stream, 4)
    with pytest.raises(ValueError):
        reader.read_line()