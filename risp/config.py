from __future__ import annotations
import logging
import os
import sys
from pathlib import Path

logger = logging.getLogger(__name__)

# Defaults
_DEFAULT_MAX_DEPTH = 256
_DEFAULT_HISTORY = Path('~') / '.risp_history.txt'
_DEFAULT_PROMPT = 'risp >> '

# Frames kept free for the caller, and Python frames spent per nesting
# level by the deepest of reader, evaluator and printer.
_RESERVED_FRAMES = 200
_FRAMES_PER_LEVEL = 3


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        logger.warning("ignoring %s=%r: not an integer", var, raw)
        return default
    if value < 1:
        logger.warning("ignoring %s=%r: must be positive", var, raw)
        return default
    return value


def depth_ceiling() -> int:
    """Deepest nesting the current recursion limit can walk safely."""
    return max(1, (sys.getrecursionlimit() - _RESERVED_FRAMES) // _FRAMES_PER_LEVEL)


def clamp_depth(depth: int) -> int:
    ceiling = depth_ceiling()
    if depth > ceiling:
        logger.warning("max depth %d exceeds the recursion limit, using %d", depth, ceiling)
        return ceiling
    return depth


def get_max_depth() -> int:
    return clamp_depth(int_from_env('RISP_MAX_DEPTH', _DEFAULT_MAX_DEPTH))


def get_history_path() -> Path:
    raw = os.environ.get('RISP_HISTORY')
    p = Path(raw.strip()) if raw and raw.strip() else _DEFAULT_HISTORY
    return p.expanduser()


def get_prompt() -> str:
    return os.environ.get('RISP_PROMPT') or _DEFAULT_PROMPT
