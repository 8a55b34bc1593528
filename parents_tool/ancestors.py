from __future__ import annotations

import os
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Iterable


def _separators(path_type: type[PurePath]) -> tuple[str, ...]:
    if issubclass(path_type, PureWindowsPath):
        return ("\\", "/")
    if issubclass(path_type, PurePosixPath):
        return ("/",)
    return tuple(s for s in (os.sep, os.altsep) if s)


def _starts_with_curdir(path: str, seps: tuple[str, ...]) -> bool:
    return path == "." or path.startswith(tuple("." + s for s in seps))


def parents_of_path(path: str, skip: int = 0, *, path_type: type[PurePath] = PurePath) -> list[str]:
    """Return every prefix of `path`, shallowest first.

    The path is split with the platform's rules, so the root (or drive/anchor)
    is component 0. Components 0..skip produce nothing; every later component
    produces the path truncated at that depth:

        parents_of_path("/usr/bin/cat")     -> ["/usr", "/usr/bin", "/usr/bin/cat"]
        parents_of_path("/usr/bin/cat", 1)  -> ["/usr/bin", "/usr/bin/cat"]
        parents_of_path("./a/b")            -> ["./a", "./a/b"]

    The root on its own is therefore never printed, even with skip=0. A leading
    `.` is kept as component 0 (pathlib would drop it); interior `.` are not.
    """
    if skip < 0:
        raise ValueError(f"skip must be non-negative, got {skip}")

    seps = _separators(path_type)
    parts = path_type(path).parts
    prefix = ""
    if _starts_with_curdir(path, seps):
        parts = (".",) + parts
        prefix = "." + seps[0]

    result: list[str] = []
    built = path_type()
    for i, part in enumerate(parts):
        if prefix and i == 0:
            current = "."
        else:
            built = built / part
            current = prefix + str(built)
        if i > skip:
            result.append(current)
    return result


def parents_of_paths(paths: Iterable[str], skip: int = 0, *, path_type: type[PurePath] = PurePath) -> list[str]:
    """Flatten `parents_of_path` over several paths, keeping input order."""
    out: list[str] = []
    for p in paths:
        out.extend(parents_of_path(p, skip, path_type=path_type))
    return out
