import os

import pytest

from fractol.linereader import LineReader, get_next_line


def _open_with(tmp_path, name, data):
    path = tmp_path / name
    path.write_bytes(data)
    return os.open(path, os.O_RDONLY)


def _all_lines(reader, fd):
    lines = []
    while (line := reader.read_line(fd)) is not None:
        lines.append(line)
    return lines


@pytest.mark.parametrize("buffer_size", [1, 2, 3, 7, 50, 1000])
def test_reads_all_lines(tmp_path, buffer_size):
    data = b"first line\nsecond\n\nlast without newline"
    fd = _open_with(tmp_path, "a.txt", data)
    try:
        lines = _all_lines(LineReader(buffer_size), fd)
    finally:
        os.close(fd)
    assert b"".join(lines) == data
    assert lines == data.splitlines(keepends=True)


@pytest.mark.parametrize("buffer_size", [1, 4, 50])
def test_trailing_newline(tmp_path, buffer_size):
    data = b"one\ntwo\n"
    fd = _open_with(tmp_path, "b.txt", data)
    try:
        reader = LineReader(buffer_size)
        assert reader.read_line(fd) == b"one\n"
        assert reader.read_line(fd) == b"two\n"
        assert reader.read_line(fd) is None
        assert reader.read_line(fd) is None
    finally:
        os.close(fd)


def test_empty_file(tmp_path):
    fd = _open_with(tmp_path, "empty.txt", b"")
    try:
        assert LineReader().read_line(fd) is None
    finally:
        os.close(fd)


def test_interleaved_descriptors(tmp_path):
    fd1 = _open_with(tmp_path, "x.txt", b"x1\nx2\n")
    fd2 = _open_with(tmp_path, "y.txt", b"y1\ny2\n")
    try:
        reader = LineReader(3)
        assert reader.read_line(fd1) == b"x1\n"
        assert reader.read_line(fd2) == b"y1\n"
        assert reader.read_line(fd1) == b"x2\n"
        assert reader.read_line(fd2) == b"y2\n"
        assert reader.read_line(fd1) is None
        assert reader.read_line(fd2) is None
    finally:
        os.close(fd1)
        os.close(fd2)


def test_pipe_input():
    read_fd, write_fd = os.pipe()
    try:
        os.write(write_fd, b"alpha\nbeta")
        os.close(write_fd)
        assert _all_lines(LineReader(4), read_fd) == [b"alpha\n", b"beta"]
    finally:
        os.close(read_fd)


def test_negative_fd_raises():
    with pytest.raises(ValueError):
        LineReader().read_line(-1)


@pytest.mark.parametrize("size", [0, -5])
def test_bad_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(size)


def test_closed_fd_raises(tmp_path):
    fd = _open_with(tmp_path, "c.txt", b"data\n")
    os.close(fd)
    with pytest.raises(OSError):
        LineReader().read_line(fd)


def test_module_function(tmp_path):
    data = b"hello\nworld\n"
    fd = _open_with(tmp_path, "d.txt", data)
    try:
        assert get_next_line(fd) == b"hello\n"
        assert get_next_line(fd) == b"world\n"
        assert get_next_line(fd) is None
    finally:
        os.close(fd)