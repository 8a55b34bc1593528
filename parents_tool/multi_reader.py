"""Read several byte sources back to back as one stream.

`MultipleFileReader` owns an ordered queue of sources. Reads come from the
head of the queue until it reports end of stream, at which point it is closed
and dropped, and reading carries on with the next one. A failing source is
never skipped: it stays at the head, and the error goes to the caller.
"""

from __future__ import annotations

import contextlib
import io
import logging
import os
from collections import deque
from typing import Iterable, Optional, Protocol, Union


_LOG = logging.getLogger(__name__)

WritableBuffer = Union[bytearray, memoryview]


class ByteSource(Protocol):
    """Anything that can fill a buffer and be closed (files, stdin, BytesIO)."""

    def readinto(self, buffer: WritableBuffer, /) -> Optional[int]: ...

    def close(self) -> None: ...


class SourceError(OSError):
    """Base class for failures of an underlying source.

    Carries errno/strerror/filename of the wrapped OSError, which is also kept
    as ``__cause__``.
    """

    @classmethod
    def wrap(cls, err: OSError, source: str) -> "SourceError":
        if err.errno is not None:
            exc = cls(err.errno, err.strerror, source)
        else:
            exc = cls(f"{source}: {err}")
            exc.filename = source
        return exc


class SourceOpenError(SourceError):
    """A named source could not be opened while building a reader."""


class SourceReadError(SourceError):
    """A read from the current source failed."""


def describe_source(src: object) -> str:
    name = getattr(src, "name", None)
    if isinstance(name, (str, bytes, os.PathLike)):
        return os.fsdecode(name)
    return f"<{type(src).__name__}>"


class MultipleFileReader(io.RawIOBase):
    """Sequential reader over an ordered queue of byte sources.

    Ownership of every source passes to the reader. Exhausted sources are
    closed as soon as they report end of stream; the rest are closed by
    `close()` (or when the reader is garbage collected).
    """

    def __init__(self, sources: Iterable[ByteSource]) -> None:
        super().__init__()
        self._sources: deque[ByteSource] = deque()
        self._sources.extend(sources)

    @classmethod
    def open(cls, paths: Iterable[Union[str, os.PathLike[str]]]) -> "MultipleFileReader":
        """Open every path up front, in order, read-only and unbuffered.

        All or nothing: if one path cannot be opened, the handles opened so far
        are closed and SourceOpenError is raised. Nothing is read here.
        """
        with contextlib.ExitStack() as stack:
            handles: list[ByteSource] = []
            for p in paths:
                name = os.fspath(p)
                try:
                    fh = open(name, "rb", buffering=0)
                except OSError as e:
                    _LOG.debug("open failed for %s: %s", name, e)
                    raise SourceOpenError.wrap(e, name) from e
                stack.enter_context(fh)
                handles.append(fh)
                _LOG.debug("opened %s", name)
            reader = cls(handles)
            stack.pop_all()
        return reader

    @property
    def pending(self) -> int:
        """Number of sources not yet exhausted."""
        return len(self._sources)

    def readable(self) -> bool:
        return True

    def readinto(self, buffer: WritableBuffer) -> Optional[int]:  # type: ignore[override]
        if self.closed:
            raise ValueError("I/O operation on closed file.")
        # A zero-length read would look like end of stream on the head source.
        if memoryview(buffer).nbytes == 0:
            return 0

        while self._sources:
            head = self._sources[0]
            try:
                n = head.readinto(buffer)
            except OSError as e:
                _LOG.warning("read failed on %s: %s", describe_source(head), e)
                raise SourceReadError.wrap(e, describe_source(head)) from e
            if n is None:
                # Non-blocking source with nothing available yet; not end of stream.
                return None
            if n > 0:
                return n
            self._sources.popleft()
            _LOG.debug("exhausted %s (%d left)", describe_source(head), len(self._sources))
            head.close()
        return 0

    def close(self) -> None:
        if self.closed:
            return
        errors: list[OSError] = []
        while self._sources:
            src = self._sources.popleft()
            try:
                src.close()
            except OSError as e:
                errors.append(e)
        super().close()
        if errors:
            raise errors[0]
