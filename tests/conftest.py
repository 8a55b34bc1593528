from __future__ import annotations

import logging
import sys
from typing import Iterator

import pytest

import parents_tool.app_logging as al


@pytest.fixture(autouse=True)
def _isolate_env_and_logging(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Clear PARENTS_* config and undo init_app_logging after each test."""
    for var in ("PARENTS_SKIP", "PARENTS_LOG_LEVEL", "PARENTS_LOG_TO_CONSOLE", "PARENTS_LOG_DIR"):
        monkeypatch.delenv(var, raising=False)
    orig_hook = sys.excepthook
    yield
    sys.excepthook = orig_hook
    for attr in ("_initialised", "_log_path"):
        if hasattr(al.init_app_logging, attr):
            delattr(al.init_app_logging, attr)
    pkg_logger = logging.getLogger("parents_tool")
    for h in list(pkg_logger.handlers):
        h.close()
        pkg_logger.removeHandler(h)
    pkg_logger.setLevel(logging.NOTSET)
