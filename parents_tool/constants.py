from __future__ import annotations

# ---------------------------------------------------------------------------
# Environment configuration
# ---------------------------------------------------------------------------

ENV_SKIP = "PARENTS_SKIP"
ENV_LOG_LEVEL = "PARENTS_LOG_LEVEL"
ENV_LOG_TO_CONSOLE = "PARENTS_LOG_TO_CONSOLE"
ENV_LOG_DIR = "PARENTS_LOG_DIR"

DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# ---------------------------------------------------------------------------
# I/O
# ---------------------------------------------------------------------------

# Bytes per copy step for `cat`.
CAT_CHUNK_SIZE = 64 * 1024

# Buffer size for line reading on top of raw sources.
LINE_BUFFER_SIZE = 8 * 1024
