from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, Iterator, Union

from canonical import FileAccessError


ENCODING = "utf-8"


def open_binary(path: Union[str, Path], role: str) -> BinaryIO:
    try:
        return open(path, "rb")
    except OSError as e:
        raise FileAccessError(path, role, e) from e


def iter_decoded_lines(stream: BinaryIO, path: Union[str, Path], role: str) -> Iterator[str]:
    """
    Yield the lines of `stream` decoded as UTF-8, line terminators included.

    Each line is decoded on its own so a bad byte is reported against the line
    that holds it.
    """
    line_number = 0
    while True:
        try:
            raw = stream.readline()
        except OSError as e:
            raise FileAccessError(path, role, e, line_number=line_number + 1) from e
        if not raw:
            return
        line_number += 1
        try:
            text = raw.decode(ENCODING)
        except UnicodeDecodeError as e:
            raise FileAccessError(path, role, e, line_number=line_number) from e
        yield text
