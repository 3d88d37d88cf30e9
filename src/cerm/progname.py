"""Process-wide program name used as the prefix of every diagnostic."""

import os
import sys
import threading

_FALLBACK = "Error"

_lock = threading.Lock()
_program_name: str | None = None


def set_program_name(name: str) -> None:
    """Store ``name`` as the diagnostic prefix. The last writer wins."""
    global _program_name
    with _lock:
        _program_name = name


def reset_program_name() -> None:
    """Forget any stored name so the argv-derived default applies again."""
    global _program_name
    with _lock:
        _program_name = None


def program_name() -> str:
    """Return the current diagnostic prefix.

    Resolution order: the value given to :func:`set_program_name`, then the
    basename of ``sys.argv[0]``, then the literal ``"Error"``.
    """
    name = _program_name
    if name is not None:
        return name
    argv = getattr(sys, "argv", None)
    if argv and argv[0]:
        return os.path.basename(argv[0]) or _FALLBACK
    return _FALLBACK
