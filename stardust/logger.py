"""Levelled console logging with caller location and hex buffer dumps."""

from __future__ import annotations

import enum
import functools
import inspect
import os
import re
import sys
from types import FrameType

ENV_VAR = "LOG_LVL"


class Level(enum.IntEnum):
    WARN = 0
    INFO = 1
    DEBUG = 2


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


@functools.lru_cache(maxsize=None)
def get_log_level() -> Level:
    """Return the level set by ``LOG_LVL``, read once and cached."""
    env = os.environ.get(ENV_VAR)
    if env is None:
        return Level.WARN
    value = _atoi(env)
    if value < Level.WARN or value > Level.DEBUG:
        return Level.WARN
    return Level(value)


def _base(path: str) -> str:
    return re.split(r"[/\\]", path)[-1]


def _prefix(level: Level, caller: FrameType | None) -> str:
    spacing = "" if level is Level.DEBUG else " "
    if caller is None:
        location = "?:? (0)"
    else:
        code = caller.f_code
        location = f"{_base(code.co_filename)}:{code.co_name} ({caller.f_lineno})"
    return f"[{level.name}] {spacing}[{location}] "


def _caller() -> FrameType | None:
    frame = inspect.currentframe()
    if frame is None or frame.f_back is None:
        return None
    return frame.f_back.f_back


def log(level: Level, fmt: str, *args: object) -> None:
    """Print a message; with arguments, ``fmt`` is a printf-style format."""
    if level > get_log_level():
        return
    message = fmt % args if args else fmt
    print(_prefix(level, _caller()) + message, file=sys.stdout)


def log_buffer(level: Level, data: bytes | bytearray, len_to_print: int) -> None:
    """Print up to ``len_to_print`` bytes of ``data`` as hex."""
    if level > get_log_level():
        return
    total = len(data)
    dump = "".join(f"{byte:02x} " for byte in bytes(data[:len_to_print]))
    if total >= len_to_print:
        dump += f"... ({total} bytes total)"
    print(_prefix(level, _caller()) + dump, file=sys.stdout)