from __future__ import annotations

import io
import logging
import os
import sys
from typing import BinaryIO, Iterator, Optional, Sequence, Union

from .constants import LINE_BUFFER_SIZE
from .multi_reader import MultipleFileReader, WritableBuffer


_LOG = logging.getLogger(__name__)


class StdinSource(io.RawIOBase):
    """Raw view of standard input with the same read contract as MultipleFileReader.

    Closing it does not close the process's stdin.
    """

    def __init__(self, stream: Optional[BinaryIO] = None) -> None:
        super().__init__()
        self._stream = stream if stream is not None else sys.stdin.buffer

    @property
    def name(self) -> str:
        return str(getattr(self._stream, "name", "<stdin>"))

    def readable(self) -> bool:
        return True

    def readinto(self, buffer: WritableBuffer) -> Optional[int]:  # type: ignore[override]
        if self.closed:
            raise ValueError("I/O operation on closed file.")
        # At most one underlying read, so pipes and terminals return what is available.
        for attr in ("readinto1", "readinto"):
            readinto = getattr(self._stream, attr, None)
            if readinto is not None:
                return readinto(buffer)
        # Streams without readinto (e.g. some test doubles) still have read().
        mv = memoryview(buffer).cast("B")
        data = self._stream.read(len(mv))
        if data is None:
            return None
        n = len(data)
        mv[:n] = data
        return n


def select_source(
    paths: Sequence[Union[str, os.PathLike[str]]],
    *,
    stdin: Optional[BinaryIO] = None,
) -> io.RawIOBase:
    """Return one raw stream over `paths`, or over stdin when no paths are given.

    Opening is eager; a missing or unreadable file raises SourceOpenError here.
    """
    if not paths:
        _LOG.debug("no input files, reading stdin")
        return StdinSource(stdin)
    return MultipleFileReader.open(paths)


def iter_lines(raw: io.RawIOBase) -> Iterator[str]:
    """Yield lines of `raw` without their line terminator (`\\n` or `\\r\\n`)."""
    with io.BufferedReader(raw, buffer_size=LINE_BUFFER_SIZE) as reader:
        for line in reader:
            if line.endswith(b"\n"):
                line = line[:-1]
                if line.endswith(b"\r"):
                    line = line[:-1]
            yield os.fsdecode(line)
