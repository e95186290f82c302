import os

import pytest

from ftkit.line_reader import LineReader, get_next_line, get_next_line_multi


@pytest.fixture
def open_file(tmp_path):
    fds = []

    def _open(content, name="data.txt"):
        path = tmp_path / name
        path.write_bytes(content.encode("utf-8"))
        fd = os.open(path, os.O_RDONLY)
        fds.append(fd)
        return fd

    yield _open
    for fd in fds:
        os.close(fd)


def test_lines_keep_newline_and_last_line_has_none(open_file):
    reader = LineReader(open_file("one\ntwo\nthree"))
    assert reader.read_line() == "one\n"
    assert reader.read_line() == "two\n"
    assert reader.read_line() == "three"
    assert reader.read_line() is None


def test_empty_file_gives_none(open_file):
    assert LineReader(open_file("")).read_line() is None


def test_blank_lines(open_file):
    assert list(LineReader(open_file("\n\n"))) == ["\n", "\n"]


@pytest.mark.parametrize("size", [1, 2, 3, 7, 1024])
def test_iteration_round_trip_for_any_buffer_size(open_file, size):
    content = "alpha\nbeta\n\ngamma delta\nend"
    lines = list(LineReader(open_file(content), size))
    assert "".join(lines) == content
    assert all(line.endswith("\n") for line in lines[:-1])


def test_invalid_arguments():
    with pytest.raises(ValueError):
        LineReader(0, 0)
    with pytest.raises(ValueError):
        LineReader(-1)


def test_get_next_line_reads_whole_file(open_file):
    fd = open_file("a\nb\n")
    assert get_next_line(fd) == "a\n"
    assert get_next_line(fd) == "b\n"
    assert get_next_line(fd) is None


def test_get_next_line_negative_fd():
    assert get_next_line(-1) is None


def test_get_next_line_multi_interleaves(open_file):
    first = open_file("1\n2\n", "first.txt")
    second = open_file("x\ny\n", "second.txt")
    assert get_next_line_multi(first) == "1\n"
    assert get_next_line_multi(second) == "x\n"
    assert get_next_line_multi(first) == "2\n"
    assert get_next_line_multi(second) == "y\n"
    assert get_next_line_multi(first) is None
    assert get_next_line_multi(second) is None


@pytest.mark.parametrize("fd", [-1, 512, 10000])
def test_get_next_line_multi_out_of_range(fd):
    assert get_next_line_multi(fd) is None