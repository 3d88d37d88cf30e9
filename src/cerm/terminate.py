"""Emit-then-exit for fatal diagnostics."""

import os
import sys
import threading
from typing import IO, NoReturn

from .compose import compose
from .progname import program_name
from .sink import emit


def die(status: int, message: str, file: IO[str] | None = None) -> NoReturn:
    """Write ``<program name>: message`` to stderr and exit with ``status``.

    ``message`` is used as is, without template substitution. An empty
    message leaves just the program name, and with an empty program name too
    the line written is empty.
    """
    _check_status(status)
    exit_with(status, compose(program_name(), message), file)


def exit_with(status: int, line: str, file: IO[str] | None = None) -> NoReturn:
    """Write an already composed ``line`` and exit the process with ``status``.

    ``status`` is used unchanged, ``0`` included. On the main thread this is
    :func:`sys.exit`, so ``finally`` blocks and atexit handlers still run. On
    any other thread ``SystemExit`` would only end that thread, so the stream
    is flushed and the process ends at once through :func:`os._exit`, without
    running any cleanup.
    """
    _check_status(status)
    emit(line, file)
    if threading.current_thread() is not threading.main_thread():
        for stream in (file, sys.stdout, sys.stderr):
            try:
                if stream is not None:
                    stream.flush()
            except (OSError, ValueError):
                pass
        os._exit(status)
    sys.exit(status)


def _check_status(status: int) -> None:
    if isinstance(status, bool) or not isinstance(status, int):
        raise TypeError(f"exit status must be an int, not {type(status).__name__}")
