"""Timestamped console logging for the network stack."""

from __future__ import annotations

import inspect
import os
import sys
import threading
import time

DEBUG_ENABLED = True


def log_prefix() -> str:
    """Return the ``PETNET[thread] seconds.microseconds> `` line prefix."""
    now_ns = time.time_ns()
    seconds, remainder = divmod(now_ns, 1_000_000_000)
    micros = remainder // 1000
    return f"PETNET[{threading.get_ident()}] {seconds}.{micros:06d}> "


def _emit(fmt: str, args: tuple) -> None:
    text = fmt % args if args else fmt
    stream = sys.stdout
    stream.write(log_prefix() + text)
    stream.flush()


def logf(fmt: str, *args) -> None:
    """Write a prefixed, %-formatted message to standard output."""
    _emit(fmt, args)


def printf(fmt: str, *args) -> None:
    """Write a prefixed, %-formatted message to standard output."""
    _emit(fmt, args)


def log_str(text: str) -> None:
    """Log ``text`` verbatim, without interpreting format directives."""
    logf("%s", text)


def print_str(text: str) -> None:
    """Print ``text`` verbatim, without interpreting format directives."""
    printf("%s", text)


def _caller_location() -> tuple[str, int]:
    frame = inspect.currentframe()
    try:
        caller = frame.f_back.f_back if frame and frame.f_back else None
        if caller is None:
            return "?", 0
        return os.path.basename(caller.f_code.co_filename), caller.f_lineno
    finally:
        del frame


def _with_newline(message: str) -> str:
    return message if message.endswith("\n") else message + "\n"


def log_error(message: str) -> None:
    """Log an error line tagged with the caller's file and line."""
    filename, line = _caller_location()
    logf("error> %s(%d): %s", filename, line, _with_newline(message))


def log_debug(message: str) -> None:
    """Log a debug line tagged with the caller's file and line."""
    if not DEBUG_ENABLED:
        return
    filename, line = _caller_location()
    logf("debug> %s(%d): %s", filename, line, _with_newline(message))