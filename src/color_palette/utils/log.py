"""
log.py.

Does: Opt-in stderr tracing for palette internals, one line per event.
      Topics are switched on with COLOR_PALETTE_DEBUG_TOPICS="resolve,loader" (or "all").
Used by: palette alias resolution (topic "resolve").
"""

import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["debug", "enabled", "reload_topics"]

TOPICS_ENV_VAR = "COLOR_PALETTE_DEBUG_TOPICS"

_active: frozenset[str] = frozenset()


def reload_topics() -> None:
    """Does: Re-read the active topics from the environment."""
    global _active
    raw = os.environ.get(TOPICS_ENV_VAR, "")
    _active = frozenset(part.strip().lower() for part in raw.split(",") if part.strip())


reload_topics()


def enabled(topic: str) -> bool:
    return bool(_active) and ("all" in _active or topic.strip().lower() in _active)


def debug(
    msg: str,
    topic: str = "palette",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Does: Write `[time] [topic][LEVEL] msg` when `topic` is active; otherwise nothing."""
    if not enabled(topic):
        return
    stamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    line = f"[{stamp}] [{topic.strip().lower()}][{level.upper()}] {msg}"
    print(line, file=stream or sys.stderr)
