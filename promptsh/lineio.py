"""Reading input one line at a time from a file descriptor."""

import os

_ENCODING = "utf-8"


def read_line(fd: int) -> str | None:
    """Read one line from ``fd``, newline included when present.

    Returns None when end of input is reached before anything was read.
    """
    data = bytearray()
    while True:
        byte = os.read(fd, 1)
        if not byte:
            break
        data += byte
        if byte == b"\n":
            break
    if not data:
        return None
    return data.decode(_ENCODING, errors="surrogateescape")