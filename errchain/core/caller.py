from __future__ import annotations

import inspect
import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Frame:
    function: str
    file: str
    line: int


UNKNOWN_FRAME = Frame(function="unknown", file="", line=0)


def resolve(skip: int = 0, *, strip_cwd: bool = True) -> str:
    """Return ``file:line`` of the code that called us.

    skip=0 is the line that invoked resolve(); each extra skip moves one
    frame further up the stack. A stack that is too shallow
    gives ``unknown:0``.
    """
    frame = _frame_at(skip + 2)
    location = f"{frame.file or frame.function}:{frame.line}"
    if strip_cwd:
        location = _strip_cwd(location)
    return location


def caller_frame(skip: int = 0) -> Frame:
    """Structured variant of resolve(); same skip semantics."""
    return _frame_at(skip + 2)


def _frame_at(depth: int) -> Frame:
    # depth 0 is this function, 1 its caller, and so on.
    if depth < 2:
        raise ValueError("skip must be >= 0")

    current = inspect.currentframe()
    if current is None:  # pragma: no cover - interpreter without frame support
        return UNKNOWN_FRAME

    try:
        f = current
        for _ in range(depth):
            f = f.f_back
            if f is None:
                return UNKNOWN_FRAME
        return Frame(function=f.f_code.co_name, file=f.f_code.co_filename, line=f.f_lineno or 0)
    finally:
        del current


def _strip_cwd(location: str) -> str:
    try:
        root = os.getcwd()
    except OSError:
        return location
    prefix = root + os.sep
    if location.startswith(prefix):
        return location[len(prefix):]
    return location
