from __future__ import annotations

import logging
import sys
import traceback
from datetime import datetime
from pathlib import Path
from typing import Optional

from .constants import (
    DEFAULT_LOG_LEVEL,
    ENV_LOG_DIR,
    ENV_LOG_LEVEL,
    ENV_LOG_TO_CONSOLE,
    LOG_FORMAT,
)
from .util import env_bool, env_str


_LOG = logging.getLogger("parents_tool")


def _resolve_level(name: str) -> int:
    lvl = getattr(logging, name.upper().strip() or DEFAULT_LOG_LEVEL, None)
    if isinstance(lvl, int):
        return lvl
    return getattr(logging, DEFAULT_LOG_LEVEL)


def init_app_logging(component: str = "app") -> Optional[Path]:
    """Initialise logging for one run of a command.

    Configures the `parents_tool` logger from the environment:
      * level from PARENTS_LOG_LEVEL (default WARNING)
      * a stderr handler when PARENTS_LOG_TO_CONSOLE is truthy
      * a timestamped `<component>_<ts>.log` under PARENTS_LOG_DIR when set
      * an excepthook that logs uncaught exceptions

    Stdout is never used; it carries command output.

    Returns the log file path when a file was created, otherwise None.
    """
    # Avoid double-initialisation
    if getattr(init_app_logging, "_initialised", False):
        return getattr(init_app_logging, "_log_path", None)

    level = _resolve_level(env_str(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL))
    pkg_logger = logging.getLogger("parents_tool")
    pkg_logger.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT)

    if env_bool(ENV_LOG_TO_CONSOLE):
        sh = logging.StreamHandler(sys.stderr)
        sh.setLevel(level)
        sh.setFormatter(formatter)
        pkg_logger.addHandler(sh)

    log_path: Optional[Path] = None
    log_dir = env_str(ENV_LOG_DIR)
    if log_dir:
        try:
            logs = Path(log_dir).expanduser()
            logs.mkdir(parents=True, exist_ok=True)
            ts = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
            log_path = logs / f"{component}_{ts}.log"
            fh = logging.FileHandler(log_path, encoding="utf-8")
            fh.setLevel(level)
            fh.setFormatter(formatter)
            pkg_logger.addHandler(fh)
        except OSError as e:
            # Logging must never stop the command itself.
            log_path = None
            print(f"[parents_tool] could not open log file in {log_dir}: {e}", file=sys.stderr)

    def _excepthook(exc_type, exc, tb):
        _LOG.error("Uncaught exception:\n%s", "".join(traceback.format_exception(exc_type, exc, tb)))
        # Preserve default behaviour too.
        sys.__excepthook__(exc_type, exc, tb)

    # No handler: logging's last-resort handler would duplicate the default hook.
    if pkg_logger.handlers:
        sys.excepthook = _excepthook

    from . import __version__

    _LOG.info("=== parents_tool %s (%s) ===", __version__, component)
    _LOG.debug("cwd=%s", str(Path.cwd()))
    _LOG.debug("python=%s", sys.version.replace("\n", " "))

    setattr(init_app_logging, "_initialised", True)
    setattr(init_app_logging, "_log_path", log_path)
    return log_path


def current_log_path() -> Optional[Path]:
    """Return the current per-run log path, if one was created."""
    return getattr(init_app_logging, "_log_path", None)
