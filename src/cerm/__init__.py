"""cerm: BSD-style err/warn diagnostics for command-line programs."""

from .api import err, errx, fatal_on, require, warn, warnx
from .compose import format_plain, format_with_errno
from .errors import CermError, FormatError
from .progname import program_name, reset_program_name, set_program_name
from .reporter import Reporter
from .terminate import die

__version__ = "0.1.0"
__all__ = [
    "CermError",
    "FormatError",
    "Reporter",
    "die",
    "err",
    "errx",
    "fatal_on",
    "format_plain",
    "format_with_errno",
    "program_name",
    "require",
    "reset_program_name",
    "set_program_name",
    "warn",
    "warnx",
]
