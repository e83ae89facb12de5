"""Line-by-line reading of a single file."""

from typing import BinaryIO, Iterator, Tuple

ENCODING = "utf-8"


def decode_line(raw: bytes) -> str:
    """Strip the line terminator and decode, replacing invalid bytes."""
    if raw.endswith(b"\n"):
        raw = raw[:-1]
    if raw.endswith(b"\r"):
        raw = raw[:-1]
    return raw.decode(ENCODING, errors="replace")


def iter_lines(handle: BinaryIO) -> Iterator[Tuple[int, str]]:
    """
    Yield ``(line_number, text)`` for each line of a binary file handle.

    Lines are split on ``\\n`` only and have no length limit. Numbering
    starts at 1 and a final line without a terminator still counts. Read
    errors propagate to the caller.
    """
    line_number = 0
    for raw in handle:
        line_number += 1
        yield line_number, decode_line(raw)
