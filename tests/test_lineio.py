import os

import pytest

from promptsh.lineio import read_line


@pytest.fixture
def pipe_with():
    opened = []

    def make(payload: bytes) -> int:
        read_fd, write_fd = os.pipe()
        os.write(write_fd, payload)
        os.close(write_fd)
        opened.append(read_fd)
        return read_fd

    yield make
    for fd in opened:
        os.close(fd)


def test_reads_lines_in_order(pipe_with):
    fd = pipe_with(b"hello\nworld\n")
    assert read_line(fd) == "hello\n"
    assert read_line(fd) == "world\n"
    assert read_line(fd) is None


def test_last_line_without_newline(pipe_with):
    fd = pipe_with(b"first\ntail")
    assert read_line(fd) == "first\n"
    assert read_line(fd) == "tail"
    assert read_line(fd) is None


def test_empty_input_is_none(pipe_with):
    fd = pipe_with(b"")
    assert read_line(fd) is None


def test_long_line_round_trip(pipe_with):
    line = "x" * 5000 + "\n"
    fd = pipe_with(line.encode())
    assert read_line(fd) == line


def test_blank_line(pipe_with):
    fd = pipe_with(b"\nnext\n")
    assert read_line(fd) == "\n"
    assert read_line(fd) == "next\n"