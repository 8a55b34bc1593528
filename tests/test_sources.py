from __future__ import annotations

import io
import os
import sys
from pathlib import Path

import pytest

from parents_tool.multi_reader import MultipleFileReader, SourceOpenError
from parents_tool.sources import StdinSource, iter_lines, select_source
from tests.fixtures.sources import FILE_1, FILE_2, FakeStdin, read_with_timeout, write_inputs


def test_no_paths_selects_stdin(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(sys, "stdin", FakeStdin(b"from stdin\n"))
    src = select_source([])
    assert isinstance(src, StdinSource)
    assert src.read() == b"from stdin\n"


def test_explicit_stdin_stream_is_used() -> None:
    src = select_source([], stdin=io.BytesIO(b"abc"))
    assert src.read() == b"abc"
    assert src.read() == b""


def test_closing_stdin_source_leaves_stdin_open() -> None:
    stream = io.BytesIO(b"abc")
    src = StdinSource(stream)
    src.close()
    assert src.closed
    assert not stream.closed
    with pytest.raises(ValueError):
        src.readinto(bytearray(2))


def test_stdin_source_without_readinto() -> None:
    class ReadOnly:
        def __init__(self) -> None:
            self._chunks = [b"he", b"llo", b""]

        def read(self, n: int) -> bytes:
            return self._chunks.pop(0)

    src = StdinSource(ReadOnly())  # type: ignore[arg-type]
    assert src.read() == b"hello"


def test_paths_select_multi_reader(tmp_path: Path) -> None:
    paths = write_inputs(tmp_path, FILE_1, FILE_2)
    with select_source(paths) as src:
        assert isinstance(src, MultipleFileReader)
        assert src.read() == FILE_1 + FILE_2


def test_select_source_propagates_open_error(tmp_path: Path) -> None:
    (ok,) = write_inputs(tmp_path, b"ok")
    with pytest.raises(SourceOpenError):
        select_source([ok, tmp_path / "nope"])


def test_iter_lines_strips_terminators() -> None:
    raw = StdinSource(io.BytesIO(b"/var/run/asdf\r\n/tmp/foo/bar\n\nlast"))
    assert list(iter_lines(raw)) == ["/var/run/asdf", "/tmp/foo/bar", "", "last"]


def test_iter_lines_over_files(tmp_path: Path) -> None:
    paths = write_inputs(tmp_path, b"/a/b\n", b"/c/d\n")
    assert list(iter_lines(select_source(paths))) == ["/a/b", "/c/d"]


def test_iter_lines_closes_the_reader(tmp_path: Path) -> None:
    paths = write_inputs(tmp_path, b"x\n")
    r = MultipleFileReader.open(paths)
    list(iter_lines(r))
    assert r.closed


def test_stdin_source_returns_available_bytes_from_open_pipe() -> None:
    r, w = os.pipe()
    stream = os.fdopen(r, "rb")
    try:
        os.write(w, b"abcdef")
        # Write end stays open: the read must not wait for more data or EOF.
        assert read_with_timeout(StdinSource(stream), 1024) == b"abcdef"
    finally:
        os.close(w)
        stream.close()


def test_cat_style_copy_from_pipe_yields_partial_chunks() -> None:
    r, w = os.pipe()
    stream = os.fdopen(r, "rb")
    try:
        src = select_source([], stdin=stream)
        os.write(w, b"first\n")
        assert read_with_timeout(src, 64 * 1024) == b"first\n"
        os.write(w, b"second\n")
        assert read_with_timeout(src, 64 * 1024) == b"second\n"
    finally:
        os.close(w)
        stream.close()
